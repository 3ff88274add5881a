"""Per-value date-part parsers.

Every parser takes one raw value and returns a tuple of ints (year[, month[, day]])
or None when the value does not have its shape. None of them raise on bad input.
"""

from __future__ import annotations

import math
import re
import time
from datetime import date

MONTHS = {
    "jan": 1,
    "feb": 2,
    "mar": 3,
    "apr": 4,
    "may": 5,
    "jun": 6,
    "jul": 7,
    "aug": 8,
    "sep": 9,
    "oct": 10,
    "nov": 11,
    "dec": 12,
}

# Spaced " to ", " / ", " - "; "--", en and em dash with optional spaces;
# a bare "/" only between two full YYYY-MM-DD dates (YYYY/MM and YYYY/YYYY stay single dates).
RANGE_DELIMITER_RE = re.compile(
    r" (?:to|[-/]) | ?(?:--|[–—]) ?|(?<=\d{4}-\d{2}-\d{2})/(?=\d{4}-\d{2}-\d{2})",
    re.ASCII,
)

ISO_8601_RE = re.compile(r"^(\d{4}|[-+]\d{6,})-(\d{2})(?:-(\d{2}))?", re.ASCII)
RFC_2822_RE = re.compile(r"^(?:[a-z]{3},\s*)?([0-9]{1,2}) ([a-z]{3}) ([0-9]{4,})", re.IGNORECASE)
AMERICAN_DAY_RE = re.compile(r"^(\d{1,2})/(\d{1,2})/(\d{2}(?:\d{2})?)", re.ASCII)
DAY_RE = re.compile(r"^(\d{1,2})[ .\-/](\d{1,2}|[a-z]{3,10})[ .\-/](-?\d+)", re.IGNORECASE | re.ASCII)
DAY_REVERSED_RE = re.compile(r"^(-?\d+)[ .\-/](\d{1,2}|[a-z]{3,10})[ .\-/](\d{1,2})", re.IGNORECASE | re.ASCII)
MONTH_RE = re.compile(r"([a-z]{3,10}|-?\d+)[^\w-]+([a-z]{3,10}|-?\d+)", re.IGNORECASE | re.ASCII)
YEAR_ERA_RE = re.compile(r"(\d+) ?(a\.?d\.?|b\.?c\.?)", re.IGNORECASE | re.ASCII)
YEAR_RE = re.compile(r"-?\d+", re.ASCII)
INT_RE = re.compile(r"[-+]?\d+", re.ASCII)

# JS-style Date limit: +/- 100,000,000 days around the epoch, in milliseconds.
MAX_EPOCH_MS = 8.64e15
MS_PER_DAY = 86_400_000

# 0001-01-02 and 9999-12-30 UTC, so local time stays inside years 1..9999
MIN_LOCALTIME_S = -62135510400
MAX_LOCALTIME_S = 253402128000


def month_from_name(name: str) -> int | None:
    """Month number from the first three letters of an English month name."""

    return MONTHS.get(name.lower()[:3])


def _to_int(token: str | int) -> int | None:
    if isinstance(token, int):
        return token
    if not INT_RE.fullmatch(token):
        return None
    return int(token)


def _date_parts(year: str | int, month: str | int | None = None, day: str | int | None = None) -> tuple[int, ...] | None:
    """Convert matched tokens to ints, rejecting non-numeric tokens and months outside 1..12."""

    out: list[int] = []
    for tok in (year, month, day):
        if tok is None:
            break
        val = _to_int(tok)
        if val is None:
            return None
        out.append(val)
    if len(out) > 1 and not 1 <= out[1] <= 12:
        return None
    return tuple(out)


def _local_offset_ms(ms: int) -> int:
    # time.localtime only covers years 1..9999; outside that the offset at the nearest edge is used
    secs = min(max(ms // 1000, MIN_LOCALTIME_S), MAX_LOCALTIME_S)
    return time.localtime(secs).tm_gmtoff * 1000


def _civil_from_days(days: int) -> tuple[int, int, int]:
    """Proleptic Gregorian (year, month, day) for a day count since 1970-01-01."""

    z = days + 719468
    era = z // 146097
    doe = z - era * 146097
    yoe = (doe - doe // 1460 + doe // 36524 - doe // 146096) // 365
    doy = doe - (365 * yoe + yoe // 4 - yoe // 100)
    mp = (5 * doy + 2) // 153
    day = doy - (153 * mp + 2) // 5 + 1
    month = mp + 3 if mp < 10 else mp - 9
    year = yoe + era * 400 + (1 if month <= 2 else 0)
    return (year, month, day)


def parse_epoch(value: object) -> tuple[int, ...] | None:
    """Local calendar date of an epoch time in milliseconds (numbers only, not numeric strings).

    Fractional milliseconds are truncated toward zero. Any instant within +/- 8.64e15 ms
    parses, including years before 1 and after 9999.
    """

    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    if isinstance(value, float) and not math.isfinite(value):
        return None
    if abs(value) > MAX_EPOCH_MS:
        return None

    ms = math.trunc(value)
    return _civil_from_days((ms + _local_offset_ms(ms)) // MS_PER_DAY)


def parse_iso_8601(value: object) -> tuple[int, ...] | None:
    """YYYY-MM[-DD] and [+-]YYYYYY[Y...]-MM[-DD]; anything after is ignored.

    A "00" month or day lowers the precision instead of failing.
    """

    if not isinstance(value, str):
        return None
    m = ISO_8601_RE.match(value)
    if not m:
        return None

    year, month, day = m.groups()
    if not int(month):
        return _date_parts(year)
    if not day or not int(day):
        return _date_parts(year, month)
    return _date_parts(year, month, day)


def parse_rfc_2822(value: object) -> tuple[int, ...] | None:
    """[DDD, ]DD MMM YYYY with an English month abbreviation; time parts are ignored."""

    if not isinstance(value, str):
        return None
    m = RFC_2822_RE.match(value)
    if not m:
        return None

    day, month_name, year = m.groups()
    month = month_from_name(month_name)
    if not month:
        return None
    return _date_parts(year, month, day)


def parse_american_day(value: object) -> tuple[int, ...] | None:
    """M[M]/D[D]/YY[YY], only when it names a real calendar day."""

    if not isinstance(value, str):
        return None
    m = AMERICAN_DAY_RE.match(value)
    if not m:
        return None

    month, day, year = (int(g) for g in m.groups())
    # two-digit years are checked against the 1900s
    check_year = year + 1900 if year < 100 else year
    try:
        date(check_year, month, day)
    except ValueError:
        return None
    return (year, month, day)


def parse_day(value: object) -> tuple[int, ...] | None:
    """D[D] M[M]|MMM [-]Y[Y...] or the reverse, separated by space, ".", "-" or "/".

    Trailing parts (e.g. a time) are ignored.
    """

    if not isinstance(value, str):
        return None

    m = DAY_RE.match(value)
    if m:
        day, month, year = m.groups()
    else:
        m = DAY_REVERSED_RE.match(value)
        if not m:
            return None
        year, month, day = m.groups()

    by_name = month_from_name(month)
    if by_name:
        month = by_name
    elif not month.isdigit():
        return None
    return _date_parts(year, month, day)


def parse_month(value: object) -> tuple[int, ...] | None:
    """Two tokens (month name or signed number) split by non-alphanumerics, nothing trailing.

    Resolution when neither token settles it by name:
    - a negative first token is the year;
    - a first token larger than a positive second token is the year;
    - otherwise the first token is the month ("1 2" is January of year 2).
    """

    if not isinstance(value, str):
        return None
    m = MONTH_RE.fullmatch(value)
    if not m:
        return None

    first, second = m.groups()
    if month_from_name(second):
        return _date_parts(first, month_from_name(second))
    if month_from_name(first):
        return _date_parts(second, month_from_name(first))

    a, b = _to_int(first), _to_int(second)
    if a is None or b is None or (a < 0 and b < 0):
        return None
    if a < 0 or b > 0 and a > b:
        return _date_parts(a, b)
    return _date_parts(b, a)


def parse_year(value: object) -> tuple[int, ...] | None:
    """[-]Y[Y...], or an unsigned year with an AD/BC suffix (BC negates)."""

    if not isinstance(value, str):
        return None

    m = YEAR_ERA_RE.fullmatch(value)
    if m:
        year, era = m.groups()
        return (int(year) if era[0].lower() == "a" else -int(year),)
    if YEAR_RE.fullmatch(value):
        return (int(value),)
    return None
