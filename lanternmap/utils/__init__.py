"""
Utilities module.
"""
from lanternmap.utils.settings import Settings, get_settings, init_settings
from lanternmap.utils.language import Language, get_language

__all__ = ['Settings', 'get_settings', 'init_settings', 'Language', 'get_language']
