#!/usr/bin/env python3
"""
Minesweeper - Main entry point.

Usage:
    python main.py [--difficulty {beginner,intermediate,expert}]
    python main.py --rows R --cols C --mines M [--seed N] [--no-color]
"""
from src.minesweeper.cli import main


if __name__ == "__main__":
    main()
