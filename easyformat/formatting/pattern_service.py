"""Skeleton resolution and rendering on top of Babel's CLDR data.

A skeleton only names the fields to show ("yMMMd" = year, abbreviated month,
day). The locale's ``availableFormats`` table turns it into a concrete pattern
("MMM d, y" for en, "y년 MMM d일" for ko). Resolution follows the steps of a
date-time pattern generator:

1. parse the field letters, merging repeats and rejecting conflicts
2. replace the locale-preferred hour letter (``j``, ``J``, ``C``); ``J``
   drops the day period
3. resolve the date and the time fields separately, appending fields that
   have no available format on their own ("Jul 30, 2025 (week: 31)")
4. restore the requested widths of text fields
5. glue date and time with the locale's date-time combining pattern
"""
import logging
import re
from collections import OrderedDict
from datetime import datetime
from typing import List, Tuple

from babel import Locale
from babel.dates import format_datetime, match_skeleton, tokenize_pattern, untokenize_pattern
from babel.units import UnknownUnitError, format_unit

from ..errors import UnsupportedSkeleton

logger = logging.getLogger(__name__)

Field = Tuple[str, int]

# Skeleton letter -> calendar field it selects, in canonical order
FIELD_TYPES = OrderedDict([
    ('G', 'era'),
    ('y', 'year'), ('Y', 'year'), ('u', 'year'),
    ('Q', 'quarter'), ('q', 'quarter'),
    ('M', 'month'), ('L', 'month'),
    ('w', 'week_of_year'), ('W', 'week_of_month'),
    ('E', 'weekday'), ('e', 'weekday'), ('c', 'weekday'),
    ('d', 'day'), ('D', 'day_of_year'), ('F', 'weekday_in_month'), ('g', 'julian_day'),
    ('a', 'day_period'), ('b', 'day_period'), ('B', 'day_period'),
    ('h', 'hour'), ('H', 'hour'), ('K', 'hour'), ('k', 'hour'),
    ('j', 'hour'), ('J', 'hour'), ('C', 'hour'),
    ('m', 'minute'), ('s', 'second'), ('S', 'fraction'), ('A', 'millis_in_day'),
    ('z', 'zone'), ('Z', 'zone'), ('O', 'zone'), ('v', 'zone'), ('V', 'zone'),
    ('X', 'zone'), ('x', 'zone'),
])

TIME_TYPES = {'day_period', 'hour', 'minute', 'second', 'fraction', 'millis_in_day', 'zone'}

# Fields whose width selects between abbreviated and full names
TEXT_TYPES = {'era', 'quarter', 'month', 'weekday'}

# Fields that rarely have an available format of their own; dropped first
# when a skeleton has no match and rendered after the matched part
APPENDABLE = "GYuQqwWDFg"

# Appended fields that are labelled "{0} ({label}: {1})"; the label is the
# locale's name of the duration unit
LABELLED_UNITS = {
    'w': 'duration-week', 'W': 'duration-week',
    'Q': 'duration-quarter', 'q': 'duration-quarter',
    'D': 'duration-day', 'g': 'duration-day',
}

DAY_PERIODS = "abB"

_CANONICAL_ORDER = list(FIELD_TYPES)
_RUN = re.compile(r"(.)\1*")


class PatternService:
    """Turns (skeleton, locale) into a CLDR pattern and renders instants with it."""

    def resolve(self, skeleton: str, locale: Locale) -> str:
        """Resolve a skeleton into a locale-specific pattern.

        Args:
            skeleton: Skeleton, optionally made of space-separated parts
            locale: Babel Locale

        Returns:
            CLDR date/time pattern

        Raises:
            UnsupportedSkeleton: If the skeleton contains unknown or conflicting fields
        """
        fields = self._parse_fields(skeleton, locale)
        hide_day_period = any(letter == 'J' for letter, _ in fields)
        fields = self._apply_hour_preference(fields, locale)

        date_fields = [f for f in fields if FIELD_TYPES[f[0]] not in TIME_TYPES]
        time_fields = [f for f in fields if FIELD_TYPES[f[0]] in TIME_TYPES]
        date_pattern = self._resolve_part(date_fields, locale)
        time_pattern = self._resolve_part(time_fields, locale)
        if hide_day_period:
            time_pattern = _strip_day_period(time_pattern)

        if date_pattern and time_pattern:
            glue = self._glue_pattern(date_fields, locale)
            pattern = glue.replace('{1}', date_pattern).replace('{0}', time_pattern)
        else:
            pattern = date_pattern or time_pattern

        logger.debug("Resolved skeleton %r for %s to pattern %r", skeleton, locale, pattern)
        return pattern

    def format(self, pattern: str, instant: datetime, locale: Locale, tzinfo=None) -> str:
        """Render an aware datetime through a resolved pattern.

        Args:
            pattern: Pattern returned by :meth:`resolve`
            instant: Aware datetime
            locale: Babel Locale
            tzinfo: Zone to render the instant in

        Returns:
            Formatted string
        """
        return format_datetime(instant, pattern, tzinfo=tzinfo, locale=locale)

    def _parse_fields(self, skeleton: str, locale: Locale) -> List[Field]:
        compact = "".join(skeleton.split()) if isinstance(skeleton, str) else ""
        if not compact:
            raise UnsupportedSkeleton(skeleton, locale, "empty skeleton")

        fields = OrderedDict()
        for run in _RUN.finditer(compact):
            letter, width = run.group(1), len(run.group(0))
            field_type = FIELD_TYPES.get(letter)
            if field_type is None:
                raise UnsupportedSkeleton(skeleton, locale, f"unknown field {letter!r}")
            if field_type in fields:
                known_letter, known_width = fields[field_type]
                if known_letter != letter:
                    raise UnsupportedSkeleton(
                        skeleton, locale, f"conflicting fields {known_letter!r} and {letter!r}")
                width = max(width, known_width)
            fields[field_type] = (letter, width)

        return sorted(fields.values(), key=_canonical_index)

    def _apply_hour_preference(self, fields: List[Field], locale: Locale) -> List[Field]:
        if not any(letter in 'jJC' for letter, _ in fields):
            return fields
        preferred = preferred_hour_letter(locale)
        return [(preferred, width) if letter in 'jJC' else (letter, width)
                for letter, width in fields]

    def _resolve_part(self, fields: List[Field], locale: Locale) -> str:
        """Resolve the date or the time half of a skeleton."""
        if not fields:
            return ""

        options = locale.datetime_skeletons
        remaining = list(fields)
        peeled = []
        pattern = ""
        while remaining:
            best = match_skeleton(_join(remaining), options)
            if best:
                pattern = self._adjust_widths(str(options[best]), remaining)
                break
            victim = next((f for f in remaining if f[0] in APPENDABLE), remaining[-1])
            remaining.remove(victim)
            peeled.append(victim)

        for field in sorted(peeled, key=_canonical_index):
            pattern = self._append_field(pattern, field, locale) if pattern else _join([field])
        return pattern

    def _append_field(self, pattern: str, field: Field, locale: Locale) -> str:
        """Append a field that has no available format to a resolved pattern."""
        label = _unit_label(LABELLED_UNITS.get(field[0]), locale)
        if label is None:
            return f"{pattern} {_join([field])}"
        return pattern + untokenize_pattern([
            ('chars', ' ('), ('chars', label), ('chars', ': '), ('field', field), ('chars', ')'),
        ])

    def _adjust_widths(self, pattern: str, fields: List[Field]) -> str:
        """Give the fields of a matched pattern the widths the skeleton asked for.

        Zone fields are taken over as requested. Text fields (month, weekday,
        quarter and era names) switch between abbreviated and full names;
        numeric forms are kept.
        """
        requested = {FIELD_TYPES[letter]: (letter, width) for letter, width in fields}
        tokens = []
        for token_type, value in tokenize_pattern(pattern):
            if token_type == 'field':
                letter, width = value
                wanted = requested.get(FIELD_TYPES.get(letter))
                if wanted is not None:
                    if FIELD_TYPES[letter] == 'zone':
                        value = wanted
                    elif (FIELD_TYPES[letter] in TEXT_TYPES
                          and _is_text(letter, width) and _is_text(*wanted)):
                        if wanted[1] >= 4:
                            value = (letter, wanted[1])
                        elif width >= 4:
                            value = (letter, 3)
            tokens.append((token_type, value))
        return untokenize_pattern(tokens)

    def _glue_pattern(self, date_fields: List[Field], locale: Locale) -> str:
        types = {FIELD_TYPES[letter]: width for letter, width in date_fields}
        month_width = types.get('month', 0)
        if month_width >= 4:
            style = 'full' if 'weekday' in types else 'long'
        elif month_width == 3:
            style = 'medium'
        else:
            style = 'short'
        glue = locale.datetime_formats.get(style) or locale.datetime_formats.get('medium')
        return str(glue) if glue else '{1} {0}'


def preferred_hour_letter(locale: Locale) -> str:
    """Get the hour letter (h, H, K or k) of the locale's short time format."""
    for token_type, value in tokenize_pattern(str(locale.time_formats['short'])):
        if token_type == 'field' and value[0] in 'hHKk':
            return value[0]
    return 'H'


def _is_text(letter: str, width: int) -> bool:
    # E and G are names at every width; M, L, Q, q, c and e only from 3
    return letter in 'EG' or width >= 3


def _unit_label(unit, locale: Locale):
    """Get the locale's singular name of a duration unit ("week", "주"), or None."""
    if unit is None:
        return None
    try:
        label = format_unit("", unit, length='long', locale=locale).strip()
    except UnknownUnitError:
        return None
    return label or None


def _strip_day_period(pattern: str) -> str:
    """Remove AM/PM style fields and the spacing that separates them."""
    tokens = []
    trim_next = False
    for token_type, value in tokenize_pattern(pattern):
        if token_type == 'field' and value[0] in DAY_PERIODS:
            if tokens and tokens[-1][0] == 'chars':
                tokens[-1] = ('chars', tokens[-1][1].rstrip())
            else:
                trim_next = True
            continue
        if token_type == 'chars' and trim_next:
            value = value.lstrip()
        trim_next = False
        tokens.append((token_type, value))
    return untokenize_pattern(t for t in tokens if t != ('chars', ''))


def _canonical_index(field: Field) -> int:
    return _CANONICAL_ORDER.index(field[0])


def _join(fields: List[Field]) -> str:
    return "".join(letter * width for letter, width in fields)
