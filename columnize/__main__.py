import sys

from columnize.cli import main

sys.exit(main())
