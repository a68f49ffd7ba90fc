"""
Main entry point for running xsway as a module.

Usage:
    python -m xsway [options] COMMAND
"""

from .cli import main

if __name__ == "__main__":
    main()
