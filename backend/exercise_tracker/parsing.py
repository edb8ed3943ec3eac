"""
Lenient readers for client-supplied values and the response date format.

Bad input never raises here: readers return ``None`` and the caller decides
whether that is an error (duration) or means "use a default" (dates, limit).
All datetimes are naive UTC.
"""
from __future__ import annotations

import math
import re
from datetime import datetime, timezone
from typing import Any, Optional

WEEKDAYS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun",
          "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")

_YEAR_ONLY = re.compile(r"^\d{4}$")
_DECIMAL = re.compile(r"^[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?$")
_PREFIXED = re.compile(r"^0([xXoObB])([0-9a-fA-F]+)$")
_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")
_RADIX = {"x": 16, "o": 8, "b": 2}

# Largest LIMIT the database drivers accept
MAX_LIMIT = 2**63 - 1

# Non-ISO shapes browsers and scripts commonly send; %m/%d also match unpadded values
DATE_FORMATS = (
    "%a %b %d %Y",                   # Mon May 01 2023 (our own output)
    "%a, %d %b %Y %H:%M:%S GMT",     # Mon, 01 May 2023 10:30:00 GMT
    "%Y-%m-%d",                      # 2023-5-1
    "%Y/%m/%d",
    "%Y/%m/%d %H:%M",
    "%Y/%m/%d %H:%M:%S",
    "%m/%d/%Y",
    "%m/%d/%Y %H:%M",
    "%m/%d/%Y %H:%M:%S",
    "%b %d, %Y",
    "%B %d, %Y",
    "%b %d %Y",
    "%B %d %Y",
    "%d %b %Y",
    "%d %B %Y",
    "%a, %d %b %Y",
)


def utcnow() -> datetime:
    return datetime.now(timezone.utc).replace(tzinfo=None)


def to_utc_naive(dt: datetime) -> datetime:
    if dt.tzinfo is None:
        return dt
    return dt.astimezone(timezone.utc).replace(tzinfo=None)


def format_date(dt: datetime) -> str:
    """'Mon Jan 01 1990' for the UTC calendar day of ``dt``; locale independent."""
    dt = to_utc_naive(dt)
    return f"{WEEKDAYS[dt.weekday()]} {MONTHS[dt.month - 1]} {dt.day:02d} {dt.year:04d}"


def parse_date(value: Any) -> Optional[datetime]:
    """
    ISO 8601 date or date-time, one of ``DATE_FORMATS``, a bare year, or epoch
    milliseconds (JSON number). Date-only and offset-less values are taken as UTC.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, datetime):
        return to_utc_naive(value)
    if isinstance(value, (int, float)):
        try:
            return datetime.fromtimestamp(value / 1000, tz=timezone.utc).replace(tzinfo=None)
        except (OverflowError, OSError, ValueError):
            return None
    if not isinstance(value, str):
        return None

    text = value.strip()
    if not text:
        return None
    if _YEAR_ONLY.match(text):
        return datetime(int(text), 1, 1) if int(text) > 0 else None
    iso = text[:-1] + "+00:00" if text[-1] in "zZ" else text
    try:
        return to_utc_naive(datetime.fromisoformat(iso))
    except (ValueError, OverflowError):
        pass
    for fmt in DATE_FORMATS:
        try:
            return datetime.strptime(text, fmt)
        except ValueError:
            continue
    return None


def to_number(value: Any) -> Optional[float]:
    """
    Loose numeric conversion: whitespace ignored, "" is 0, decimal/exponent and
    0x/0o/0b literals accepted. Returns None for anything else or non-finite results.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        try:
            number = float(value)
        except OverflowError:
            return None
        return number if math.isfinite(number) else None
    if not isinstance(value, str):
        return None

    text = value.strip()
    if not text:
        return 0.0
    prefixed = _PREFIXED.match(text)
    if prefixed:
        try:
            return float(int(prefixed.group(2), _RADIX[prefixed.group(1).lower()]))
        except (ValueError, OverflowError):
            return None
    if not _DECIMAL.match(text):
        return None
    try:
        number = float(text)
    except (ValueError, OverflowError):
        return None
    return number if math.isfinite(number) else None


def parse_limit(value: Any) -> Optional[int]:
    """
    Leading integer of ``value`` ('5abc' -> 5, '2.7' -> 2); None unless positive.
    Values past ``MAX_LIMIT`` cannot cap anything and also give None.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        number = value
    else:
        match = _LEADING_INT.match(str(value))
        if not match:
            return None
        number = int(match.group(1))
    return number if 1 <= number <= MAX_LIMIT else None


def plain_number(value: float) -> int | float:
    """30.0 -> 30 so integral durations serialize without a fraction."""
    return int(value) if float(value).is_integer() else value
