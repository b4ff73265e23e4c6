"""Entry point for `python -m xkcdpwd`."""

import sys

from xkcdpwd.cli import main

sys.exit(main())
