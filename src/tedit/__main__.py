"""Allow ``python -m tedit``."""

import sys

from tedit.cli import main

if __name__ == "__main__":  # pragma: no cover - thin entry point
    sys.exit(main())
