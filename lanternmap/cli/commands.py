"""
CLI Commands for the Lantern map editor.

This module contains the command implementations for the launcher:
- editor: interactive tile placement
"""

import logging

logger = logging.getLogger(__name__)


def apply_overrides(settings, args):
    """Apply command-line overrides to the settings for this run."""
    if args.sheet:
        settings.override('sheet.name', args.sheet)
    if args.assets_dir:
        settings.override('sheet.assets_dir', args.assets_dir)
    if args.tile_size:
        settings.override('sheet.tile_width', args.tile_size[0])
        settings.override('sheet.tile_height', args.tile_size[1])
    return settings


def editor_mode(args):
    """Interactive editor mode with GUI."""
    print("\n🎨 Starting Lantern Map Editor...\n")

    try:
        import pygame
        from lanternmap.ui.editor import MapEditor
        from lanternmap.utils.settings import init_settings
    except ImportError as e:
        print(f"❌ Error importing editor components: {e}")
        return

    settings = apply_overrides(init_settings(args.settings), args)
    logger.info("Sheet '%s' from %s, tile size %dx%d",
                settings.get('sheet.name'), settings.get('sheet.assets_dir'),
                *settings.get_tile_size())

    pygame.init()
    try:
        editor = MapEditor.from_settings(settings)
        editor.run()
    finally:
        pygame.quit()
    print("Exiting...")
