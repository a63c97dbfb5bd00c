# 📄 File: plantkeeper/shared/utils/localization.py
# 🧭 Purpose (Layman Explanation):
# Provides plant messages ("Oak was watered...") in the user's language, English or Ukrainian.
# 🧪 Purpose (Technical Summary):
# Embedded message catalogue with locale fallback and template formatting for every
# user-facing text produced by the plant domain.
# 🔗 Dependencies:
# typing, plantkeeper.shared.config.settings, plantkeeper.shared.utils.logging
# 🔄 Connected Modules / Calls From:
# Plant domain model (description, planting info, age category), plant events (notices)

from typing import Dict, List, Optional

from plantkeeper.shared.config.settings import get_settings
from plantkeeper.shared.utils.logging import get_logger

logger = get_logger(__name__)

FALLBACK_LOCALE = 'en'

TRANSLATIONS: Dict[str, Dict[str, str]] = {
    'en': {
        'plants.watered': '{name} was watered. Last watering time: {time}',
        'plants.grew': '{name} grew by {amount}m. New height: {height}m',
        'plants.description': '{name} ({type}) - {age} years, {height} m',
        'plants.planting_info': '{name} was planted on {date}.',
        'plants.never_watered': 'Never',
        'plants.age_category.young': 'Young',
        'plants.age_category.adult': 'Adult',
        'plants.age_category.old': 'Old',
    },
    'uk': {
        'plants.watered': '{name} було полито. Час останнього поливу: {time}',
        'plants.grew': '{name} виріс на {amount}м. Нова висота: {height}м',
        'plants.description': '{name} ({type}) - {age} років, {height} м',
        'plants.planting_info': '{name} було висаджено {date}.',
        'plants.never_watered': 'Ніколи',
        'plants.age_category.young': 'Молода',
        'plants.age_category.adult': 'Доросла',
        'plants.age_category.old': 'Стара',
    },
}


def get_current_locale() -> str:
    """
    Get the configured default locale

    Returns:
        Locale code from settings
    """
    return get_settings().DEFAULT_LOCALE


def get_supported_locales() -> List[str]:
    """Locales that have a message catalogue"""
    return list(TRANSLATIONS.keys())


def resolve_locale(locale: Optional[str] = None) -> str:
    """
    Pick the locale to render with

    Args:
        locale: Requested locale (uses configured default if None)

    Returns:
        The requested locale if it has a catalogue, English otherwise
    """
    if locale is None:
        locale = get_current_locale()

    if locale not in TRANSLATIONS:
        logger.debug(f"Unsupported locale '{locale}', falling back to English")
        return FALLBACK_LOCALE

    return locale


def translate(key: str, locale: Optional[str] = None, **kwargs) -> str:
    """
    Translate a message key

    Args:
        key: Translation key (e.g., 'plants.watered')
        locale: Target locale (uses configured default if None)
        **kwargs: Template variables for formatting

    Returns:
        Translated message, the English one if the locale lacks the key,
        or the key itself as a last resort
    """
    if locale is None:
        locale = get_current_locale()

    message = TRANSLATIONS.get(locale, {}).get(key)
    if message is None and locale != FALLBACK_LOCALE:
        logger.debug(f"No '{locale}' translation for '{key}', falling back to English")
        message = TRANSLATIONS[FALLBACK_LOCALE].get(key)

    if message is None:
        logger.warning(f"Unknown translation key: {key}")
        return key

    if kwargs:
        message = message.format(**kwargs)

    return message
