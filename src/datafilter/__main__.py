"""Module entry point for ``python -m datafilter``."""

import sys

from datafilter.ui.cli import main

if __name__ == "__main__":
    sys.exit(main())
