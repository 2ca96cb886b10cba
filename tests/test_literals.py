"""Test string, number, and identifier literals."""

from loxscan.tokens import TokenType

from .conftest import assert_lexemes, assert_types


class TestStrings:
    def test_simple_string(self, lex):
        tokens = lex('"abc"')
        assert_types(tokens, [TokenType.STRING])
        assert tokens[0].literal == "abc"
        assert tokens[0].lexeme == '"abc"'

    def test_empty_string(self, lex):
        tokens = lex('""')
        assert tokens[0].literal == ""

    def test_multiline_string(self, lex):
        tokens = lex('"one\ntwo" x')
        assert tokens[0].literal == "one\ntwo"
        assert tokens[0].line == 1
        # The identifier after the string is on the second line
        assert tokens[1].line == 2

    def test_no_escape_processing(self, lex):
        tokens = lex(r'"a\nb\"')
        assert_types(tokens, [TokenType.STRING])
        assert tokens[0].literal == "a\\nb\\"

    def test_comment_marker_inside_string(self, lex):
        tokens = lex('"// not a comment"')
        assert tokens[0].literal == "// not a comment"

    def test_adjacent_strings(self, lex):
        tokens = lex('"a""b"')
        assert [t.literal for t in tokens] == ["a", "b"]


class TestNumbers:
    def test_integer(self, lex):
        tokens = lex("10")
        assert_types(tokens, [TokenType.NUMBER])
        assert tokens[0].literal == 10.0
        assert isinstance(tokens[0].literal, float)

    def test_decimal(self, lex):
        tokens = lex("3.25")
        assert tokens[0].literal == 3.25
        assert tokens[0].lexeme == "3.25"

    def test_trailing_dot_is_separate(self, lex):
        tokens = lex("123.")
        assert_types(tokens, [TokenType.NUMBER, TokenType.DOT])
        assert tokens[0].literal == 123.0

    def test_method_call_on_number(self, lex):
        tokens = lex("1.abs")
        assert_types(tokens, [TokenType.NUMBER, TokenType.DOT, TokenType.IDENTIFIER])

    def test_leading_dot_is_separate(self, lex):
        tokens = lex(".5")
        assert_types(tokens, [TokenType.DOT, TokenType.NUMBER])
        assert tokens[1].literal == 5.0

    def test_no_leading_sign(self, lex):
        tokens = lex("-7")
        assert_types(tokens, [TokenType.MINUS, TokenType.NUMBER])

    def test_no_exponent(self, lex):
        tokens = lex("1e5")
        assert_types(tokens, [TokenType.NUMBER, TokenType.IDENTIFIER])
        assert_lexemes(tokens, ["1", "e5"])

    def test_two_dots(self, lex):
        tokens = lex("1.2.3")
        assert_types(tokens, [TokenType.NUMBER, TokenType.DOT, TokenType.NUMBER])
        assert [t.literal for t in tokens if t.type == TokenType.NUMBER] == [1.2, 3.0]

    def test_leading_zeros(self, lex):
        assert lex("007")[0].literal == 7.0


class TestIdentifiers:
    def test_underscore_and_digits(self, lex):
        tokens = lex("a_1 == b")
        assert_types(tokens, [TokenType.IDENTIFIER, TokenType.EQUAL_EQUAL, TokenType.IDENTIFIER])
        assert_lexemes(tokens, ["a_1", "==", "b"])

    def test_identifier_has_no_literal(self, lex):
        tokens = lex("name nil")
        assert tokens[0].literal is None
        assert tokens[1].literal is None

    def test_unicode_letters(self, lex):
        tokens = lex("größe")
        assert_types(tokens, [TokenType.IDENTIFIER])
        assert tokens[0].lexeme == "größe"

    def test_digit_then_letters(self, lex):
        tokens = lex("2fast")
        assert_types(tokens, [TokenType.NUMBER, TokenType.IDENTIFIER])
