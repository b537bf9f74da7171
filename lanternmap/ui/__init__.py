"""
User interface module.
"""
from lanternmap.ui.assets import load_sprite_sheet

__all__ = ['load_sprite_sheet']
