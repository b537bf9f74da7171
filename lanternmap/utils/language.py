"""
Language and translation system
"""
import logging
from typing import Optional

logger = logging.getLogger(__name__)

TRANSLATIONS = {
    'english': {
        'editor.title': 'Lantern Map Editor',
        'editor.image_not_found': 'Image not found',

        # Toolbar
        'toolbar.export_map': 'Export Map',
        'toolbar.export_map_help': 'Export Map',
        'toolbar.settings': 'Settings',
        'toolbar.settings_help': 'Help me',
    },
    'french': {
        'editor.title': 'Éditeur de cartes Lantern',
        'editor.image_not_found': 'Image introuvable',

        'toolbar.export_map': 'Exporter la carte',
        'toolbar.export_map_help': 'Exporter la carte',
        'toolbar.settings': 'Paramètres',
        'toolbar.settings_help': 'Aidez-moi',
    },
}

LANGUAGE_NAMES = {
    'english': 'English',
    'french': 'Français',
}

# Language code mappings (for flexibility)
LANGUAGE_CODES = {
    'en': 'english',
    'fr': 'french',
    'english': 'english',
    'french': 'french',
}


class Language:
    """Language manager for translations."""

    def __init__(self, language: str = 'english'):
        """
        Initialize language manager.

        Args:
            language: Language name or code (e.g., 'english', 'en', 'french', 'fr')
        """
        self.set_language(language)

    def set_language(self, language: str) -> bool:
        """
        Set current language.

        Args:
            language: Language name or code

        Returns:
            True if language was set successfully
        """
        lang_key = language.lower()
        normalized = LANGUAGE_CODES.get(lang_key, lang_key)

        if normalized in TRANSLATIONS:
            self.current_language = normalized
            logger.debug("Language set to: %s", LANGUAGE_NAMES.get(normalized, normalized))
            return True
        logger.warning("Language '%s' not available, using English", language)
        self.current_language = 'english'
        return False

    def get(self, key: str, default: Optional[str] = None) -> str:
        """
        Get translation for key.

        Args:
            key: Translation key (e.g., 'toolbar.export_map')
            default: Default value if key not found

        Returns:
            Translated string
        """
        translations = TRANSLATIONS.get(self.current_language, TRANSLATIONS['english'])
        result = translations.get(key)

        # If not found in current language, try English as fallback
        if result is None and self.current_language != 'english':
            result = TRANSLATIONS['english'].get(key)

        return result if result is not None else (default or key)


# Global language instance
_language_instance: Optional[Language] = None  # pylint: disable=invalid-name


def get_language() -> Language:
    """
    Get global language instance.

    Creates instance on first call using settings.

    Returns:
        Language instance
    """
    global _language_instance
    if _language_instance is None:
        from lanternmap.utils.settings import get_settings
        _language_instance = Language(get_settings().get('language', 'english'))
    return _language_instance


def reset_language(lang_code: str = 'english') -> Language:
    """
    Replace the global language instance.

    Args:
        lang_code: Language code or name (e.g., 'en', 'english', 'fr', 'french')

    Returns:
        The new Language instance
    """
    global _language_instance
    _language_instance = Language(lang_code)
    return _language_instance
