from __future__ import annotations

from enum import Enum


class WageType(str, Enum):
    """Unit basis for a worker's pay."""

    HOUR = "hour"
    DAY = "day"
    MONTH = "month"


class AttendanceStatus(str, Enum):
    """Daily attendance status stored per (worker, site, date)."""

    PRESENT = "present"
    ABSENT = "absent"
    HALFDAY = "halfday"


class PaymentType(str, Enum):
    """Ledger category of a payment. All types count against earnings."""

    WAGE = "wage"
    BONUS = "bonus"
    ADVANCE = "advance"
    OTHER = "other"
