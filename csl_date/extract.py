from __future__ import annotations

import math
from typing import Any, Callable, Optional

from loguru import logger

from .parsers import (
    RANGE_DELIMITER_RE,
    parse_american_day,
    parse_day,
    parse_epoch,
    parse_iso_8601,
    parse_month,
    parse_rfc_2822,
    parse_year,
)
from .types import DateParts, DatePolicy, DateResult, RawDate

Parser = Callable[[Any], Optional[tuple]]

# Order matters: the first parser that accepts a value wins.
PARSERS: list[tuple[str, Parser]] = [
    ("epoch", parse_epoch),
    ("iso-8601", parse_iso_8601),
    ("rfc-2822", parse_rfc_2822),
    ("american-day", parse_american_day),
    ("day", parse_day),
    ("month", parse_month),
    ("year", parse_year),
]

DEFAULT_POLICY = DatePolicy()


def parse_date_parts(value: Any, *, policy: DatePolicy | None = None) -> tuple[int, ...] | None:
    """Extract (year[, month[, day]]) from a single value, or None if no format fits."""

    policy = policy or DEFAULT_POLICY
    for name, parser in PARSERS:
        if name == "american-day" and not policy.prefer_american:
            continue
        parts = parser(value)
        if parts is not None:
            logger.debug(f"{value!r} parsed as {name}: {parts}")
            return parts
    return None


def split_range(value: Any, *, policy: DatePolicy | None = None) -> list[Any]:
    """Split a "start to end" style string in two; anything else is a single date."""

    policy = policy or DEFAULT_POLICY
    if policy.split_ranges and isinstance(value, str):
        pieces = RANGE_DELIMITER_RE.split(value)
        if len(pieces) == 2:
            return pieces
    return [value]


def _supplied(value: Any) -> bool:
    return value is not None and value != ""


def _raw_str(value: Any) -> str:
    """String form used when joining a failed two-value range ("2000/1500000000000")."""

    if value is None:
        return ""
    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "Infinity" if value > 0 else "-Infinity"
        if value.is_integer():
            return str(int(value))
    return str(value)


def parse_date(range_start: Any, range_end: Any = None, *, policy: DatePolicy | None = None) -> DateResult:
    """Convert a date, or a date range, to date parts.

    Args:
        range_start: epoch milliseconds, a date string, or a range string
                     ("2000-01-02 to 2001-03-04", "2000–2001", ...)
        range_end:   optional explicit end of the range
        policy:      optional parsing heuristics (DatePolicy)

    Returns:
        DateParts when every part of the range parsed, otherwise RawDate holding
        the input unchanged (two explicit inputs are joined with "/").
    """

    if _supplied(range_end):
        values = [range_start, range_end]
    else:
        values = split_range(range_start, policy=policy)

    parsed = [parse_date_parts(v, policy=policy) for v in values]
    if all(p is not None for p in parsed):
        return DateParts(tuple(parsed))

    if _supplied(range_end):
        raw = "/".join(_raw_str(v) for v in values)
    else:
        raw = range_start
    logger.debug(f"Unparsable date {raw!r}; keeping raw value")
    return RawDate(raw)
