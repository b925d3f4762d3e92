#!/usr/bin/env python3
"""
GRID SHOOTER Launcher
======================
Run this script to start the game.
"""

import sys

from grid_shooter.main import main

if __name__ == "__main__":
    sys.exit(main())
