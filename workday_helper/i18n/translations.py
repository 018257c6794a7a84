"""Translation strings for English and Italian holiday names."""

from typing import Dict

# Type alias for translation dictionaries
TranslationDict = Dict[str, str]

TRANSLATIONS: Dict[str, TranslationDict] = {
    "en": {
        # Fixed-date public holidays
        "holiday.new_year": "New Year",
        "holiday.epiphany": "Epiphany",
        "holiday.liberation_day": "Liberation Day",
        "holiday.labour_day": "Labour Day",
        "holiday.republic_day": "Republic Day",
        "holiday.assumption": "Assumption Day",
        "holiday.all_saints": "All Saints' Day",
        "holiday.immaculate_conception": "Immaculate Conception",
        "holiday.christmas": "Christmas Day",
        "holiday.st_stephen": "St. Stephen's Day",

        # Computed holidays
        "holiday.easter": "Easter",
        "holiday.easter_monday": "Easter Monday",

        # Diagnostics
        "warning.malformed_rule": "Malformed public holiday rule {entry}: {reason}",
        "warning.malformed_rule_year": "Public holiday rule {entry} has no date in {year}: {reason}",
        "warning.malformed_closure": "Malformed custom closure {entry}: {reason}",
        "warning.easter_unavailable": "Easter dates unavailable for {year}: {reason}",
    },
    "it": {
        "holiday.new_year": "Capodanno",
        "holiday.epiphany": "Epifania",
        "holiday.liberation_day": "Festa della Liberazione",
        "holiday.labour_day": "Festa del Lavoro",
        "holiday.republic_day": "Festa della Repubblica",
        "holiday.assumption": "Ferragosto",
        "holiday.all_saints": "Ognissanti",
        "holiday.immaculate_conception": "Immacolata",
        "holiday.christmas": "Natale",
        "holiday.st_stephen": "Santo Stefano",

        "holiday.easter": "Pasqua",
        "holiday.easter_monday": "Lunedì dell'Angelo",

        "warning.malformed_rule": "Festività malformata {entry}: {reason}",
        "warning.malformed_rule_year": "La festività {entry} non esiste nel {year}: {reason}",
        "warning.malformed_closure": "Chiusura malformata {entry}: {reason}",
        "warning.easter_unavailable": "Date di Pasqua non disponibili per il {year}: {reason}",
    },
}


def get_translation(key: str, language: str = "en", **kwargs) -> str:
    """Get a translation for a key.

    Args:
        key: The translation key.
        language: Language code ('en' or 'it').
        **kwargs: Format arguments for the translation string.

    Returns:
        The translated string, or the key if not found.
    """
    lang_dict = TRANSLATIONS.get(language, TRANSLATIONS["en"])
    text = lang_dict.get(key, TRANSLATIONS["en"].get(key, key))

    if kwargs:
        try:
            return text.format(**kwargs)
        except KeyError:
            return text
    return text
