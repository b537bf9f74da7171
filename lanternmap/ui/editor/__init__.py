"""Map editor module for placing sprite sheet tiles on a grid."""
from lanternmap.ui.editor.tile_palette import TilePalette
from lanternmap.ui.editor.editor_canvas import EditorCanvas
from lanternmap.ui.editor.toolbar import Toolbar
from lanternmap.ui.editor.map_editor import MapEditor

__all__ = ['TilePalette', 'EditorCanvas', 'Toolbar', 'MapEditor']
