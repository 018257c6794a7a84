"""Translator for holiday names and diagnostics."""

from workday_helper.data.schemas import normalize_language
from workday_helper.i18n.translations import get_translation


class Translator:
    """Translates keys into a fixed language.

    Each engine owns its own translator, so switching language on one
    instance never affects another.
    """

    def __init__(self, language: str = "en"):
        """Initialize the translator.

        Args:
            language: Language code ('en' or 'it'). Unknown codes fall back to English.
        """
        self.language = normalize_language(language)

    def t(self, key: str, **kwargs) -> str:
        """Translate a key.

        Args:
            key: The translation key.
            **kwargs: Format arguments for the translation string.

        Returns:
            The translated string.
        """
        return get_translation(key, self.language, **kwargs)

    def __call__(self, key: str, **kwargs) -> str:
        """Shorthand for t()."""
        return self.t(key, **kwargs)
