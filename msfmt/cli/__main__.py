"""
Main entry point for the msfmt CLI when run as a module.

This allows the CLI to be executed using:
    python -m msfmt.cli

or the equivalent console script entry point.
"""

from . import main

if __name__ == '__main__':
    main()
