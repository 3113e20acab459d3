"""Human readable duration parsing ("1 week", "3d", "1h 30m")."""

import re

MILLISECOND = 1.0
SECOND = 1000 * MILLISECOND
MINUTE = 60 * SECOND
HOUR = 60 * MINUTE
DAY = 24 * HOUR
WEEK = 7 * DAY
YEAR = 365.25 * DAY
MONTH = YEAR / 12
DECADE = 10 * YEAR
CENTURY = 10 * DECADE
MILLENNIUM = 10 * CENTURY

# Milliseconds per unit
DURATION_UNITS: dict[str, float] = {
    "nanosecond": MILLISECOND / 1e6,
    "ns": MILLISECOND / 1e6,
    "microsecond": MILLISECOND / 1e3,
    "µs": MILLISECOND / 1e3,
    "us": MILLISECOND / 1e3,
    "millisecond": MILLISECOND,
    "ms": MILLISECOND,
    "second": SECOND,
    "sec": SECOND,
    "s": SECOND,
    "minute": MINUTE,
    "min": MINUTE,
    "m": MINUTE,
    "hour": HOUR,
    "hr": HOUR,
    "h": HOUR,
    "day": DAY,
    "d": DAY,
    "week": WEEK,
    "wk": WEEK,
    "w": WEEK,
    "month": MONTH,
    "mo": MONTH,
    "year": YEAR,
    "yr": YEAR,
    "y": YEAR,
    "decade": DECADE,
    "century": CENTURY,
    "centuries": CENTURY,
    "millennium": MILLENNIUM,
    "millennia": MILLENNIUM,
}

DURATION_PATTERN = re.compile(r"(-?(?:\d+\.?\d*|\.\d+)(?:e[-+]?\d+)?)\s*([^\W\d_]*)", re.IGNORECASE)
SEPARATOR_PATTERN = re.compile(r"(?<=\d)[,_](?=\d)")
FILLER_PATTERN = re.compile(r'^[\s",]*$')


def unit_to_milliseconds(unit: str) -> float | None:
    """Look up a unit name, tolerating case and a plural ``s``."""
    if not unit:
        return MILLISECOND
    if unit in DURATION_UNITS:
        return DURATION_UNITS[unit]

    lowered = unit.lower()
    if lowered in DURATION_UNITS:
        return DURATION_UNITS[lowered]
    if lowered.endswith("s") and lowered[:-1] in DURATION_UNITS:
        return DURATION_UNITS[lowered[:-1]]
    return None


def parse_duration(text: str) -> float | None:
    """
    Parse a duration expression into milliseconds.

    Every number may carry a unit; numbers without one are milliseconds.
    Returns None when the text holds no duration, names an unknown unit, or
    contains anything besides durations, whitespace, commas and quotes.
    """
    text = SEPARATOR_PATTERN.sub("", str(text))

    total = None
    position = 0
    for match in DURATION_PATTERN.finditer(text):
        if not FILLER_PATTERN.match(text[position:match.start()]):
            return None

        number, unit = match.groups()
        scale = unit_to_milliseconds(unit)
        if scale is None:
            return None

        total = (total or 0.0) + float(number) * scale
        position = match.end()

    if total is None or not FILLER_PATTERN.match(text[position:]):
        return None
    return total


def format_duration(milliseconds: float | None) -> str:
    """Describe a duration for users, e.g. ``for 1 day, 2 hours``."""
    if milliseconds is None:
        return "permanently"

    parts = []
    remaining = milliseconds
    for unit, size in (("day", DAY), ("hour", HOUR), ("minute", MINUTE), ("second", SECOND)):
        count = int(remaining // size)
        if count:
            parts.append(f"{count} {unit}{'s' if count != 1 else ''}")
            remaining -= count * size

    return f"for {', '.join(parts)}" if parts else "for less than a second"
