"""Date-parts extraction and formatting for citation data.

Loosely written dates ("5 Feb 2000", "Jan 2000", "2000 BC", "2000-01-02 to 2001-03-04", epoch
milliseconds) become CSL-style date parts; anything unparsable is kept as a raw value instead
of raising.
"""

from loguru import logger

from .extract import parse_date, parse_date_parts, split_range
from .formatting import format_date
from .types import DateParts, DatePolicy, DateResult, RawDate, from_csl

# Silent unless the host application opts in with logger.enable("csl_date").
logger.disable(__name__)

__all__ = [
    "DateParts",
    "DatePolicy",
    "DateResult",
    "RawDate",
    "format_date",
    "from_csl",
    "parse_date",
    "parse_date_parts",
    "split_range",
]
