from __future__ import annotations

from typing import Any, Optional, Tuple

from ..core.exceptions import InvalidArgument
from .datetime_utils import require_iso_date


def require_positive_amount(value: Any, field_name: str = "amount") -> float:
    try:
        amount = float(value)
    except (TypeError, ValueError):
        raise InvalidArgument(f"{field_name} must be a positive number") from None
    if amount != amount or amount <= 0:
        raise InvalidArgument(f"{field_name} must be a positive number")
    return amount


def require_non_negative(value: Any, field_name: str) -> float:
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise InvalidArgument(f"{field_name} must be a non-negative number") from None
    if number != number or number < 0:
        raise InvalidArgument(f"{field_name} must be a non-negative number")
    return number


def sanitize_number(value: Any, default: float = 0.0) -> float:
    """Coerce to a non-negative float, falling back to `default`."""
    try:
        number = float(value)
    except (TypeError, ValueError):
        return default
    if number != number or number < 0:
        return default
    return number


def require_date_range(start: Optional[str], end: Optional[str]) -> Tuple[Optional[str], Optional[str]]:
    """Validate an optional inclusive YYYY-MM-DD range."""
    if start is not None:
        require_iso_date(start, "start")
    if end is not None:
        require_iso_date(end, "end")
    if start is not None and end is not None and start > end:
        raise InvalidArgument(f"start {start} is after end {end}")
    return start, end


def require_non_empty(value: Optional[str], field_name: str) -> str:
    if value is None or not str(value).strip():
        raise InvalidArgument(f"{field_name} is required")
    return str(value).strip()
