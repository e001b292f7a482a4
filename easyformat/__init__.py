"""
easyformat: locale-aware date and time formatting from CLDR skeletons.

- Short mnemonic functions ("yMMMd", "Hms", "jm", ...) map onto skeletons
- Skeletons chain: ``easyformat.yMMMd("ko-KR").Hms()``
- Patterns come from the locale's CLDR data via Babel
- Can be used as a CLI (via `python -m easyformat` or `easyformat` if installed as a package)
"""

__version__ = "1.0.0"

from .errors import EasyFormatError, UnsupportedSkeleton, UnsupportedLocale
from .formatting import Formatter, PatternService, SKELETONS
from .api.entry import *  # noqa: F401,F403
from .api.entry import __all__ as _entry_all

__all__ = [
    'EasyFormatError', 'UnsupportedSkeleton', 'UnsupportedLocale',
    'Formatter', 'PatternService', 'SKELETONS',
] + _entry_all
