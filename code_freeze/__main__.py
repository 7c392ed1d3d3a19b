"""Allow ``python -m code_freeze``."""

import sys

from code_freeze.main import main

if __name__ == "__main__":
    sys.exit(main())
