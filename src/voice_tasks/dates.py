"""Resolve spoken date and time phrases.

:func:`resolve_date` turns phrases such as "tomorrow", "in 3 days" or
"next friday" into a :class:`~datetime.date` anchored on a given day;
:func:`resolve_time` turns "evening" or "3:30pm" into a 24-hour
``HH:MM`` string.  Both are pure: the same input and anchor always give
the same answer, and neither raises.
"""

from __future__ import annotations

import re
from datetime import date, datetime, time, timedelta

from dateutil import parser as date_parser

# Python weekday numbering: Monday == 0.
WEEKDAYS: tuple[str, ...] = (
    "monday",
    "tuesday",
    "wednesday",
    "thursday",
    "friday",
    "saturday",
    "sunday",
)

_IN_DAYS_RE = re.compile(r"\bin\s+(\d+)\s+days?\b")
_NEXT_WEEKDAY_RE = re.compile(r"\bnext\s+(" + "|".join(WEEKDAYS) + r")\b")

# Scan order of the original voice service, evening first: the first keyword
# contained anywhere in the text wins, regardless of where it occurs.
# "midnight" sits ahead of "night" because it contains it.
TIME_OF_DAY: tuple[tuple[str, str], ...] = (
    ("evening", "18:00"),
    ("morning", "09:00"),
    ("afternoon", "14:00"),
    ("midnight", "00:00"),
    ("night", "20:00"),
    ("noon", "12:00"),
)

_CLOCK_RE = re.compile(
    r"\b(\d{1,2})(?::(\d{2}))?\s*(am|pm|a\.m\.|p\.m\.)?"
    r"(?![\w:])"
    r"(?!\s*(?:days?|weeks?|months?|years?|hours?|hrs?|minutes?|mins?)\b)"
)


def resolve_date(
    date_hint: str,
    transcript: str = "",
    today: date | None = None,
) -> date | None:
    """Resolve a due date from a date hint and the full transcript.

    Relative phrases are looked for in the hint and transcript together, in
    a fixed order: "today", "tomorrow", "in N days", "next <weekday>".  If
    none is present, the hint alone is given to a generic date parser.

    Args:
        date_hint: A short date string, e.g. a model's ``dueDate`` value.
            May be empty.
        transcript: The full transcript, searched as a secondary hint.
        today: Anchor for relative phrases.  Defaults to
            :meth:`date.today`.

    Returns:
        The resolved date, or ``None`` if nothing recognisable was found.
    """
    if today is None:
        today = date.today()

    text = f"{date_hint} {transcript}".lower()

    if "today" in text:
        return today

    if "tomorrow" in text:
        return today + timedelta(days=1)

    match = _IN_DAYS_RE.search(text)
    if match:
        try:
            return today + timedelta(days=int(match.group(1)))
        except OverflowError:
            return None

    match = _NEXT_WEEKDAY_RE.search(text)
    if match:
        offset = WEEKDAYS.index(match.group(1)) - today.weekday()
        if offset <= 0:
            offset += 7
        return today + timedelta(days=offset)

    return _parse_calendar_date(date_hint, today)


def _parse_calendar_date(text: str, today: date) -> date | None:
    """Parse an absolute date such as ``2024-03-01`` or ``March 1``."""
    if not text or not text.strip():
        return None
    try:
        parsed = date_parser.parse(text, default=datetime.combine(today, time()))
    except (ValueError, OverflowError):
        return None
    return parsed.date()


def resolve_time(text: str) -> str | None:
    """Resolve a due time from free text.

    Time-of-day words are checked first, in :data:`TIME_OF_DAY` order, by
    substring, so "tonight" counts as "night".  Failing that, the first
    clock expression such as ``3pm``, ``10:30 am`` or a bare ``9`` is used.

    Args:
        text: Free text, typically the whole transcript.

    Returns:
        A zero-padded 24-hour ``"HH:MM"`` string, or ``None``.
    """
    lowered = text.lower()

    for keyword, clock in TIME_OF_DAY:
        if keyword in lowered:
            return clock

    for match in _CLOCK_RE.finditer(lowered):
        clock = _to_clock(match.group(1), match.group(2), match.group(3))
        if clock is not None:
            return clock

    return None


def _to_clock(hours_text: str, minutes_text: str | None, meridiem: str | None) -> str | None:
    hours = int(hours_text)
    minutes = int(minutes_text) if minutes_text else 0
    if minutes > 59:
        return None

    if meridiem:
        if not 1 <= hours <= 12:
            return None
        is_pm = meridiem.startswith("p")
        if is_pm and hours < 12:
            hours += 12
        elif not is_pm and hours == 12:
            hours = 0
    elif hours > 23:
        return None

    return f"{hours:02d}:{minutes:02d}"
