"""Public entry points for easyformat."""

from .entry import LocaleBuilder, locale, custom

__all__ = ['LocaleBuilder', 'locale', 'custom']
