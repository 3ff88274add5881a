from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .types import DateParts, DateResult, RawDate, from_csl

# Minimum widths for year, month, day. Longer numerals are never cut.
PAD_WIDTHS = (4, 2, 2)


def format_date(result: DateResult | Mapping[str, Any], delimiter: str = "-") -> Any:
    """Render date parts as e.g. "2000-01-02".

    Only the first entry is rendered, so a range shows its start date.
    A raw result (or CSL {"raw": ...}) returns the stored value untouched.
    """

    if not isinstance(delimiter, str):
        raise TypeError(f"delimiter must be a string, got {type(delimiter).__name__}")

    if isinstance(result, Mapping):
        result = from_csl(result)
    if isinstance(result, RawDate):
        return result.raw
    if not isinstance(result, DateParts):
        raise TypeError(f"Expected DateParts, RawDate or a CSL date mapping, got {type(result).__name__}")

    # stringify first, then left-pad: "-1" becomes "00-1", not "-001"
    parts = [str(p).rjust(width, "0") for p, width in zip(result.start, PAD_WIDTHS)]
    return delimiter.join(parts)
