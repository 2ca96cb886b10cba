import sys

from loxscan.cli import main

sys.exit(main())
