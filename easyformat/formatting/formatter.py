"""Formatter: an immutable (skeleton, locale) pair that renders points in time."""
import logging
import threading
from typing import Any, Optional, Tuple

from babel import Locale

from .pattern_service import PatternService
from .skeletons import SKELETONS, get_skeleton
from ..utils.config import get_default_timezone
from ..utils.date_utils import PointInTime, to_instant
from ..utils.locale_utils import LocaleLike, parse_locale

logger = logging.getLogger(__name__)


class Formatter:
    """Formats dates and times with a CLDR skeleton for one locale.

    Every chaining call returns a new Formatter whose skeleton is extended by
    one space-separated token; the receiver is never modified. The pattern is
    resolved on first use and reused afterwards.

    Example:
        >>> Formatter("yMMMd", "en-US").Hms().format(instant)
    """

    __slots__ = ('_skeleton', '_locale', '_pattern', '_babel_locale', '_lock')

    pattern_service = PatternService()

    def __init__(self, skeleton: str, locale: LocaleLike):
        """Initialize a Formatter.

        Args:
            skeleton: Skeleton string, e.g. "yMMMd" or "yMMMd Hms"
            locale: Babel Locale or locale identifier ("en-US", "ko_KR")
        """
        self._skeleton = skeleton
        self._locale = locale
        self._pattern = None
        self._babel_locale = None
        self._lock = threading.Lock()
        logger.debug("Created %r", self)

    @property
    def skeleton(self) -> str:
        """The accumulated skeleton."""
        return self._skeleton

    @property
    def locale(self) -> LocaleLike:
        """The locale as it was given."""
        return self._locale

    @property
    def pattern(self) -> str:
        """The pattern the skeleton resolves to for this locale.

        Raises:
            UnsupportedSkeleton: If the skeleton cannot be resolved
            UnsupportedLocale: If the locale is unknown
        """
        return self._resolve()[0]

    def chain(self, mnemonic: str, locale: Optional[LocaleLike] = None) -> 'Formatter':
        """Return a new Formatter with a catalog skeleton appended.

        Args:
            mnemonic: Catalog name, e.g. "Hms"
            locale: Locale for the new Formatter (default: keep the current one)

        Raises:
            KeyError: If the mnemonic is not in the catalog
        """
        return self.custom(get_skeleton(mnemonic), locale)

    def custom(self, skeleton: str, locale: Optional[LocaleLike] = None) -> 'Formatter':
        """Return a new Formatter with a raw skeleton appended.

        The skeleton is only checked when the new Formatter renders.
        """
        return Formatter(f"{self._skeleton} {skeleton}", self._locale if locale is None else locale)

    def format(self, value: PointInTime) -> str:
        """Format a point in time.

        Args:
            value: Aware datetime, naive datetime or date (interpreted in the
                default zone), or a POSIX timestamp

        Returns:
            Formatted string

        Raises:
            UnsupportedSkeleton: If the skeleton cannot be resolved
            UnsupportedLocale: If the locale is unknown
            TypeError: If the value type is not supported
        """
        pattern, babel_locale = self._resolve()
        tzinfo = get_default_timezone()
        instant = to_instant(value, tzinfo)
        return self.pattern_service.format(pattern, instant, babel_locale, tzinfo)

    def _resolve(self) -> Tuple[str, Locale]:
        if self._pattern is None:
            with self._lock:
                if self._pattern is None:
                    logger.debug("Resolving %r", self)
                    babel_locale = parse_locale(self._locale)
                    pattern = self.pattern_service.resolve(self._skeleton, babel_locale)
                    self._babel_locale = babel_locale
                    self._pattern = pattern
        return self._pattern, self._babel_locale

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Formatter):
            return NotImplemented
        return (self._skeleton, self._locale) == (other._skeleton, other._locale)

    def __hash__(self) -> int:
        return hash((self._skeleton, str(self._locale)))

    def __repr__(self) -> str:
        return f"Formatter(skeleton={self._skeleton!r}, locale={str(self._locale)!r})"


def _chain_method(mnemonic: str):
    entry = SKELETONS[mnemonic]

    def method(self, locale=None):
        return self.chain(mnemonic, locale)

    method.__name__ = mnemonic
    method.__qualname__ = f"Formatter.{mnemonic}"
    method.__doc__ = f"Append {entry.description.lower()} (en-US: \"{entry.example}\")."
    return method


for _mnemonic in SKELETONS:
    setattr(Formatter, _mnemonic, _chain_method(_mnemonic))
