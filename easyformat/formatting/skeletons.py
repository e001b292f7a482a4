"""Catalog of the mnemonic skeletons exposed as methods.

Every mnemonic maps to the CLDR skeleton token of the same name. The example
column is the en-US rendering of 2025-07-30T15:30:45Z in UTC.
"""
from collections import OrderedDict, namedtuple
from typing import List

Skeleton = namedtuple("Skeleton", ["token", "group", "description", "example"])

_CATALOG = [
    # Date
    ("y", "date", "Year", "2025"),
    ("yM", "date", "Year-month", "7/2025"),
    ("yMMM", "date", "Year-month with month name", "Jul 2025"),
    ("yMMMM", "date", "Year-month with full month name", "July 2025"),
    ("yMd", "date", "Year-month-day", "7/30/2025"),
    ("yMMMd", "date", "Year-month-day with month name", "Jul 30, 2025"),
    ("yMMMEd", "date", "Year-month-day-weekday", "Wed, Jul 30, 2025"),
    ("yMMMMd", "date", "Year-month-day with full month name", "July 30, 2025"),
    ("yMMMMEd", "date", "Year-month-day-weekday with full month name", "Wed, July 30, 2025"),
    ("M", "date", "Month", "7"),
    ("MMM", "date", "Month name", "Jul"),
    ("MMMM", "date", "Full month name", "July"),
    ("Md", "date", "Month-day", "7/30"),
    ("MMMd", "date", "Month-day with month name", "Jul 30"),
    ("MMMEd", "date", "Month-day-weekday", "Wed, Jul 30"),
    ("MMMMd", "date", "Month-day with full month name", "July 30"),
    ("MMMMEd", "date", "Month-day-weekday with full month name", "Wed, July 30"),
    ("E", "date", "Weekday", "Wed"),
    ("EEEE", "date", "Full weekday name", "Wednesday"),
    # Time
    ("H", "time", "Hour (24h)", "15"),
    ("Hm", "time", "Hour:minute (24h)", "15:30"),
    ("Hms", "time", "Hour:minute:second (24h)", "15:30:45"),
    ("h", "time", "Hour (12h)", "3 PM"),
    ("hm", "time", "Hour:minute (12h)", "3:30 PM"),
    ("hms", "time", "Hour:minute:second (12h)", "3:30:45 PM"),
    ("m", "time", "Minute", "30"),
    ("s", "time", "Second", "45"),
    ("jm", "time", "Hour:minute in the locale's preferred cycle", "3:30 PM"),
    ("jms", "time", "Hour:minute:second in the locale's preferred cycle", "3:30:45 PM"),
    # Time zone
    ("z", "timezone", "Time zone abbreviation", "UTC"),
    ("zzzz", "timezone", "Full time zone name", "Coordinated Universal Time"),
    ("Z", "timezone", "ISO 8601 offset", "+0000"),
    ("ZZZZ", "timezone", "Localized GMT offset", "GMT+00:00"),
    # Week
    ("w", "week", "Week of year", "31"),
    ("W", "week", "Week of month", "5"),
    # Quarter
    ("Q", "quarter", "Quarter", "3"),
    ("QQQ", "quarter", "Quarter abbreviation", "Q3"),
    ("QQQQ", "quarter", "Full quarter name", "3rd quarter"),
    # Era
    ("G", "era", "Era", "AD"),
    ("GGGG", "era", "Full era name", "Anno Domini"),
    # ISO year
    ("u", "iso", "Extended (ISO) year", "2025"),
]

SKELETONS = OrderedDict(
    (name, Skeleton(name, group, description, example))
    for name, group, description, example in _CATALOG
)

GROUPS = ["date", "time", "timezone", "week", "quarter", "era", "iso"]


def get_skeleton(mnemonic: str) -> str:
    """Return the skeleton token for a mnemonic.

    Raises:
        KeyError: If the mnemonic is not in the catalog
    """
    try:
        return SKELETONS[mnemonic].token
    except KeyError:
        raise KeyError(f"Unknown mnemonic: {mnemonic!r}") from None


def mnemonics_in_group(group: str) -> List[str]:
    """List the mnemonics of one catalog group, in catalog order."""
    return [name for name, entry in SKELETONS.items() if entry.group == group]
