"""
Main entry point for shapegraph.
"""

import sys

from shapegraph.cli import main


if __name__ == "__main__":
    sys.exit(main())
