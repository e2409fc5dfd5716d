"""Entry point for ``python -m fluorine``."""

import sys

from fluorine.ui.cli import main

if __name__ == "__main__":
    sys.exit(main())
