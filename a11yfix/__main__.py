"""Entry point for ``python -m a11yfix``."""

import sys

from .cli import main

if __name__ == "__main__":
    sys.exit(main())
