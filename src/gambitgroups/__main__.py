"""Allow ``python -m gambitgroups``."""

import sys

from gambitgroups.cli import main

if __name__ == "__main__":
    sys.exit(main())
