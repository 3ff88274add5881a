from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Union

from dotenv import load_dotenv

_TRUE = ("1", "true", "yes", "on")
_FALSE = ("0", "false", "no", "off")


@dataclass(frozen=True)
class DateParts:
    """A parsed date: one entry for a single date, two for a range (start, end).

    Each entry is (year,), (year, month) or (year, month, day).
    """

    parts: tuple[tuple[int, ...], ...]

    @property
    def start(self) -> tuple[int, ...]:
        return self.parts[0]

    @property
    def end(self) -> tuple[int, ...] | None:
        return self.parts[1] if len(self.parts) > 1 else None

    @property
    def is_range(self) -> bool:
        return len(self.parts) == 2

    def to_csl(self) -> dict[str, Any]:
        return {"date-parts": [list(p) for p in self.parts]}


@dataclass(frozen=True)
class RawDate:
    """Unparsable input, kept exactly as it was given."""

    raw: Any

    def to_csl(self) -> dict[str, Any]:
        return {"raw": self.raw}


DateResult = Union[DateParts, RawDate]


def from_csl(obj: Mapping[str, Any]) -> DateResult:
    """Build a result from a CSL-JSON date object ({"date-parts": ...} or {"raw": ...})."""

    if not isinstance(obj, Mapping):
        raise TypeError(f"CSL date must be a mapping, got {type(obj).__name__}")

    date_parts = obj.get("date-parts")
    if not date_parts:
        return RawDate(obj.get("raw"))

    if not isinstance(date_parts, (list, tuple)) or len(date_parts) > 2:
        raise ValueError(f"Invalid date-parts (expected 1 or 2 entries): {date_parts!r}")

    entries: list[tuple[int, ...]] = []
    for entry in date_parts:
        if not isinstance(entry, (list, tuple)) or len(entry) > 3:
            raise ValueError(f"Invalid date-parts entry: {entry!r}")
        if not all(isinstance(p, int) and not isinstance(p, bool) for p in entry):
            raise ValueError(f"Date parts must be integers: {entry!r}")
        entries.append(tuple(entry))
    return DateParts(tuple(entries))


def _env_flag(name: str, default: bool) -> bool:
    val = os.environ.get(name, "").strip().lower()
    if not val:
        return default
    if val in _TRUE:
        return True
    if val in _FALSE:
        return False
    raise ValueError(f"Invalid boolean for {name}: {val!r} (use one of {_TRUE + _FALSE})")


@dataclass(frozen=True)
class DatePolicy:
    """Controls optional parsing heuristics.

    - split_ranges: split a single string on range delimiters ("2000 to 2001").
    - prefer_american: read "5/2/2000" as May 2nd before trying day-first forms.
    """

    split_ranges: bool = True
    prefer_american: bool = True

    @classmethod
    def from_env(cls) -> "DatePolicy":
        load_dotenv()
        return cls(
            split_ranges=_env_flag("CSL_DATE_SPLIT_RANGES", cls.split_ranges),
            prefer_american=_env_flag("CSL_DATE_PREFER_AMERICAN", cls.prefer_american),
        )
