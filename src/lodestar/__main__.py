"""Main entry point for the Lodestar package when run as a module.

This module enables running Lodestar directly using 'python -m lodestar'.
"""

import sys

from .cli import main

if __name__ == "__main__":
    sys.exit(main())
