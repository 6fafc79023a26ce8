"""Locale tables: validation error messages and named date formats.

The active locale comes from ``Config.LOCALE`` (``TOOLBOX_LOCALE``), Dutch
by default.
"""
from datetime import datetime
from typing import Dict, Optional

from ..core.config import Config
from . import dutch, english


_LOCALES = {
    "nl": dutch,
    "en": english,
}


def _module(locale: Optional[str]):
    locale = locale or Config.LOCALE
    try:
        return _LOCALES[locale]
    except KeyError:
        raise ValueError(f"Unknown locale: {locale!r}") from None


def default_error_messages(locale: Optional[str] = None) -> Dict[str, str]:
    return _module(locale).ERROR_MESSAGES


def error_message(key: str, *args: int, locale: Optional[str] = None) -> str:
    """Look up a message and fill in its ``%d`` placeholder, if any."""
    template = default_error_messages(locale)[key]
    return template % args if args else template


def format_time(moment: datetime, name: str, locale: Optional[str] = None) -> str:
    formats = _module(locale).DATE_FORMATS
    if name not in formats:
        raise ValueError(f"Unknown date format: {name!r}")
    return moment.strftime(formats[name])
