"""Locale identifier helpers for easyformat."""
from typing import Union

from babel import Locale, UnknownLocaleError

from ..errors import UnsupportedLocale

LocaleLike = Union[str, Locale]

# Locales offered by the showcase, as (identifier, native name)
SAMPLE_LOCALES = [
    ("en-US", "English (US)"),
    ("en-GB", "English (UK)"),
    ("ko-KR", "한국어"),
    ("ja-JP", "日本語"),
    ("zh", "中文"),
    ("de", "Deutsch"),
    ("fr", "Français"),
    ("it", "Italiano"),
    ("es-ES", "Español"),
    ("pt-PT", "Português"),
    ("nl-NL", "Nederlands"),
    ("cs-CZ", "Čeština"),
    ("el-GR", "Ελληνικά"),
    ("sv-SE", "Svenska"),
    ("pl-PL", "Polski"),
    ("tr-TR", "Türkçe"),
    ("id-ID", "Bahasa Indonesia"),
    ("he-IL", "עברית"),
    ("ru-RU", "Русский"),
    ("ar-SA", "العربية"),
    ("hi-IN", "हिन्दी"),
    ("th-TH", "ไทย"),
    ("vi-VN", "Tiếng Việt"),
]


def parse_locale(locale: LocaleLike) -> Locale:
    """Parse a locale identifier into a Babel Locale.

    Args:
        locale: Babel Locale, or identifier in BCP 47 ("en-US") or POSIX ("en_US") form

    Returns:
        Babel Locale

    Raises:
        UnsupportedLocale: If the identifier is malformed or has no CLDR data
    """
    if isinstance(locale, Locale):
        return locale
    if not isinstance(locale, str) or not locale.strip():
        raise UnsupportedLocale(locale)
    try:
        return Locale.parse(locale.strip().replace('-', '_'))
    except (UnknownLocaleError, ValueError) as e:
        raise UnsupportedLocale(locale) from e


def locale_tag(locale: LocaleLike) -> str:
    """Format a locale as a BCP 47 style tag, e.g. "ko-KR"."""
    return str(parse_locale(locale)).replace('_', '-')
