"""Entry point for running as a module: python -m articleflow"""

import sys

from articleflow.main import main

if __name__ == "__main__":
    sys.exit(main())
