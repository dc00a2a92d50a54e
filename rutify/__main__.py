"""
Entry point for running rutify as a module.

Usage:
    python -m rutify <command> [args]
"""

import sys

from .main import main

if __name__ == "__main__":
    sys.exit(main())
