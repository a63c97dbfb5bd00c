# 📄 File: plantkeeper/shared/utils/formatters.py
# 🧭 Purpose (Layman Explanation):
# Turns dates and numbers into the text shown to users, like "01.05.2020 14:30" or "20.5".
# 🧪 Purpose (Technical Summary):
# Locale-aware date/time formatting through Babel with fixed CLDR patterns, plus
# plant measurement rendering without trailing ".0".
# 🔗 Dependencies:
# babel, datetime, typing, plantkeeper.shared.utils.localization
# 🔄 Connected Modules / Calls From:
# Plant domain model, plant events

from datetime import date, datetime
from typing import Optional, Union

from babel.dates import format_date, format_datetime

from plantkeeper.shared.utils.localization import resolve_locale

# CLDR patterns
WATERING_TIME_PATTERN = "dd.MM.yyyy HH:mm"
PLANTING_DATE_PATTERN = "dd.MM.yyyy"


def format_watering_time(dt: datetime, locale: Optional[str] = None) -> str:
    """
    Format a watering timestamp as dd.MM.yyyy HH:mm.

    Aware datetimes are rendered in their own timezone; naive ones as-is.

    Args:
        dt: Watering time
        locale: Locale for formatting, defaults to the configured one;
            unsupported locales fall back to English

    Returns:
        Formatted timestamp
    """
    return format_datetime(
        dt,
        format=WATERING_TIME_PATTERN,
        tzinfo=dt.tzinfo,
        locale=resolve_locale(locale),
    )


def format_planting_date(value: Union[date, datetime], locale: Optional[str] = None) -> str:
    """Format a planting date as dd.MM.yyyy."""
    if isinstance(value, datetime):
        value = value.date()
    return format_date(value, format=PLANTING_DATE_PATTERN, locale=resolve_locale(locale))


def format_plant_number(value: Union[int, float]) -> str:
    """
    Format plant measurements (age, height, growth) for messages.

    Whole values drop the decimal part (20.0 -> "20"), others use the
    shortest text that round-trips (20.5 -> "20.5").
    """
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)
