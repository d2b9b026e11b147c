from __future__ import annotations

import re
from datetime import date, datetime
from typing import Optional

from ..core.constants import ISO_DATE_FORMAT
from ..core.exceptions import InvalidArgument

_ISO_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    try:
        return datetime.strptime(value, ISO_DATE_FORMAT).date()
    except (TypeError, ValueError):
        raise InvalidArgument(f"Invalid date {value!r}, expected YYYY-MM-DD") from None


def require_iso_date(value: str, field_name: str = "date") -> str:
    """Return `value` unchanged if it is a canonical YYYY-MM-DD string.

    Dates are used as opaque, lexicographically ordered keys, so the string is
    kept as-is rather than converted to a `date`.
    """
    if not isinstance(value, str) or not _ISO_DATE_RE.match(value):
        raise InvalidArgument(f"{field_name} must be in YYYY-MM-DD format, got {value!r}")
    parse_iso_date(value)
    return value


def to_iso_date(value: date) -> str:
    return value.strftime(ISO_DATE_FORMAT)


def today_iso() -> str:
    """Current local date as YYYY-MM-DD.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return to_iso_date(datetime.now().date())


def in_date_range(value: str, start: Optional[str] = None, end: Optional[str] = None) -> bool:
    """Inclusive on both ends; canonical ISO dates compare lexicographically."""
    if start is not None and value < start:
        return False
    if end is not None and value > end:
        return False
    return True


def hours_between(check_in: Optional[datetime], check_out: Optional[datetime]) -> Optional[float]:
    """Hours from check-in to check-out, never below 0. None if either is missing."""
    if not check_in or not check_out:
        return None
    seconds = (check_out - check_in).total_seconds()
    return max(seconds / 3600.0, 0.0)
