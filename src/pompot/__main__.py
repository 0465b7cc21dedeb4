"""Allow running pompot as ``python -m pompot``."""

import sys

from pompot.cli import main

if __name__ == "__main__":
    sys.exit(main())
