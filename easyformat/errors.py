"""Exceptions raised by easyformat."""
from typing import Any


class EasyFormatError(Exception):
    """Base class for all easyformat errors."""


class UnsupportedSkeleton(EasyFormatError, ValueError):
    """Raised when a skeleton cannot be turned into a pattern for a locale."""

    def __init__(self, skeleton: str, locale: Any = None, reason: str = ""):
        self.skeleton = skeleton
        self.locale = locale
        self.reason = reason
        message = f"Unsupported skeleton: {skeleton!r}"
        if locale is not None:
            message += f" for locale {locale}"
        if reason:
            message += f" ({reason})"
        super().__init__(message)


class UnsupportedLocale(EasyFormatError, ValueError):
    """Raised when a locale identifier is not known to the CLDR data."""

    def __init__(self, locale: Any):
        self.locale = locale
        super().__init__(f"Unsupported locale: {locale!r}")
