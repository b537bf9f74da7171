"""Command-line entry point for the Lantern map editor."""

import argparse
import logging
import sys

from lanternmap.cli.dependency_checker import check_dependencies
from lanternmap.cli.commands import editor_mode


def main():
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Lantern Map Editor - compose maps from sprite sheet tiles",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Bundled sprite sheet
  python main.py

  # Custom sheet with 16x16 tiles
  python main.py --sheet dungeon_tiles --assets-dir ./assets --tile-size 16 16
        """
    )

    parser.add_argument(
        "--sheet",
        type=str,
        default=None,
        help="Sprite sheet asset name, without extension"
    )
    parser.add_argument(
        "--assets-dir",
        type=str,
        default=None,
        help="Directory containing the sprite sheet"
    )
    parser.add_argument(
        "--tile-size",
        type=int,
        nargs=2,
        metavar=("WIDTH", "HEIGHT"),
        default=None,
        help="Tile size in pixels"
    )
    parser.add_argument(
        "--settings",
        type=str,
        default="settings.json",
        help="Settings file to read (never written)"
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level"
    )

    args = parser.parse_args()

    if args.tile_size and min(args.tile_size) <= 0:
        parser.error("--tile-size values must be positive")

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format='%(asctime)s - %(levelname)s - %(message)s'
    )

    if not check_dependencies():
        sys.exit(1)

    editor_mode(args)
