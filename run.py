#!/usr/bin/env python3
"""
Lane Runner Launcher
=====================
Run this script to start the game.
"""

from lane_runner.main import main

if __name__ == "__main__":
    main()
