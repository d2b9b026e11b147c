from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.constants import DEFAULT_ROLE
from ..core.enums import WageType
from ..core.exceptions import InvalidArgument


@dataclass(frozen=True)
class Worker:
    """Domain entity: a worker and the wage configuration used for payouts.

    `wage_rate` is per hour, per day or per month depending on `wage_type`.
    """

    worker_id: str
    name: str
    site_id: str
    wage_rate: Optional[float] = 0.0
    wage_type: Optional[WageType] = WageType.DAY
    role: str = DEFAULT_ROLE
    phone: str = ""
    address: str = ""
    created_by: Optional[str] = None


def coerce_wage_type(value) -> WageType:
    if value is None:
        return WageType.DAY
    try:
        return WageType(value)
    except ValueError:
        raise InvalidArgument(f"Invalid wage type: {value!r}") from None
