"""Entry points: start a Formatter from a mnemonic, a raw skeleton, or a locale.

Usage:
    >>> import easyformat
    >>> easyformat.yMMMEd("ko-KR").format(now)
    >>> easyformat.Hms("en-US").yMMMd().format(now)
    >>> easyformat.locale("ja-JP").yMMMd().Hm().format(now)
"""
from ..formatting.formatter import Formatter
from ..formatting.skeletons import SKELETONS, get_skeleton
from ..utils.locale_utils import LocaleLike


class LocaleBuilder:
    """Fixes a locale so that mnemonics can be called without repeating it."""

    __slots__ = ('_locale',)

    def __init__(self, locale: LocaleLike):
        self._locale = locale

    @property
    def locale(self) -> LocaleLike:
        return self._locale

    def chain(self, mnemonic: str) -> Formatter:
        """Start a Formatter from a catalog mnemonic."""
        return Formatter(get_skeleton(mnemonic), self._locale)

    def custom(self, skeleton: str) -> Formatter:
        """Start a Formatter from a raw skeleton, checked when it renders."""
        return Formatter(skeleton, self._locale)

    def __repr__(self) -> str:
        return f"LocaleBuilder(locale={str(self._locale)!r})"


def locale(locale: LocaleLike) -> LocaleBuilder:
    """Fix the locale for the mnemonic calls that follow."""
    return LocaleBuilder(locale)


def custom(skeleton: str, locale: LocaleLike) -> Formatter:
    """Create a Formatter from a raw skeleton.

    Args:
        skeleton: Skeleton such as "yMd" or "MMMMEEEEd"
        locale: Locale to format for

    Returns:
        Formatter; an unusable skeleton raises UnsupportedSkeleton on format()
    """
    return Formatter(skeleton, locale)


def _builder_method(mnemonic: str):
    entry = SKELETONS[mnemonic]

    def method(self):
        return self.chain(mnemonic)

    method.__name__ = mnemonic
    method.__qualname__ = f"LocaleBuilder.{mnemonic}"
    method.__doc__ = f"{entry.description} (en-US: \"{entry.example}\")."
    return method


def _entry_function(mnemonic: str):
    entry = SKELETONS[mnemonic]

    def function(locale: LocaleLike) -> Formatter:
        return Formatter(entry.token, locale)

    function.__name__ = function.__qualname__ = mnemonic
    function.__module__ = __name__
    function.__doc__ = f"{entry.description} (en-US: \"{entry.example}\")."
    return function


for _mnemonic in SKELETONS:
    setattr(LocaleBuilder, _mnemonic, _builder_method(_mnemonic))
    globals()[_mnemonic] = _entry_function(_mnemonic)

__all__ = ['LocaleBuilder', 'locale', 'custom'] + list(SKELETONS)
