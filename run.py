#!/usr/bin/env python3
"""
run.py - Main entry point for Gomoku

Usage:
    python run.py play [--size N] [--players P]
    python run.py check --position "....."
    python run.py benchmark [--iterations I]
"""

import sys

from gomoku.interfaces.cli import main

if __name__ == "__main__":
    sys.exit(main())
