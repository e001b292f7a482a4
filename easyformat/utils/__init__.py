"""Utility modules for easyformat."""

from .config import load_environment, get_default_timezone, get_default_locale
from .date_utils import to_instant, localize, parse_iso_datetime
from .locale_utils import parse_locale, locale_tag, SAMPLE_LOCALES
from .file_utils import write_csv, write_markdown

__all__ = [
    'load_environment', 'get_default_timezone', 'get_default_locale',
    'to_instant', 'localize', 'parse_iso_datetime',
    'parse_locale', 'locale_tag', 'SAMPLE_LOCALES',
    'write_csv', 'write_markdown'
]
