"""
Lantern Map Editor - slice a sprite sheet into tiles and compose 2D maps.
"""
__version__ = '0.1.0'
