#!/usr/bin/env python3
"""
GameSettings - Main entry point.

Launches the demo host window.
"""

import sys

from gamesettings.main import main


if __name__ == "__main__":
    sys.exit(main())
