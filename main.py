"""
Terminal Wordle - Main Entry Point

This is the main entry point for the terminal game.
It hands control to the command line interface.
"""

import sys

from wordle_game.cli import main


if __name__ == "__main__":
    sys.exit(main())
