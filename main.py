"""
Lantern Map Editor - Main Entry Point

Slices a sprite sheet into fixed-size tiles and lets you drag them onto a
grid to compose a 2D map.

Requirements:
    pip install pygame

Usage:
    # Open the editor with the bundled sprite sheet
    python main.py

    # Use another sheet from a directory of assets
    python main.py --sheet dungeon_tiles --assets-dir ./assets --tile-size 16 16
"""

import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent))

from lanternmap.cli.main import main


if __name__ == "__main__":
    main()
