"""
Entry point for the measure_system demonstration.

Usage:
    python -m measure_system [--report] [--verbose]
"""

import sys

from .cli import main

if __name__ == "__main__":
    sys.exit(main())
