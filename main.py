#!/usr/bin/env python3
"""
Space Invaders launcher for a source checkout.

Usage:
    python main.py [--headless] [--ticks N] [--seed N] [--mute] ...

Installed copies provide the same entry point as the `space-invaders`
command. Options are documented in invaders/main.py.
"""

import os
import sys

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from invaders.main import main


if __name__ == "__main__":
    main()
