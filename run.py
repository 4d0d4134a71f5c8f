#!/usr/bin/env python3
"""
run.py - Main entry point for the four-in-a-row terminal game

Examples:
    python run.py play --p1 Red --p2 Yellow
    python run.py replay --moves 0,0,1,1,2,2,3
"""

import sys

from fourinarow.interfaces.cli import main

if __name__ == "__main__":
    sys.exit(main())
