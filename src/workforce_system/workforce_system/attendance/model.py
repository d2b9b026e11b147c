from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Optional, Tuple

from ..core.enums import AttendanceStatus
from ..core.exceptions import InvalidArgument
from ..workers.model import Worker


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one worker's attendance at one site on one day.

    `work_date` is an opaque YYYY-MM-DD key. `worker` is the populated worker
    when the record was loaded with one; it is None when the reference
    dangles (worker deleted) or was not populated.
    """

    worker_id: str
    site_id: str
    work_date: str
    status: AttendanceStatus = AttendanceStatus.PRESENT
    hours_worked: Optional[float] = 0.0
    check_in: Optional[datetime] = None
    check_out: Optional[datetime] = None
    notes: Optional[str] = None
    attendance_id: Optional[str] = None
    worker: Optional[Worker] = None

    @property
    def key(self) -> Tuple[str, str, str]:
        """Natural key: at most one record per (worker, site, date)."""
        return (self.worker_id, self.site_id, self.work_date)


@dataclass(frozen=True)
class AttendanceMark:
    """One entry of a bulk mark request for a single site and date."""

    worker_id: str
    status: Optional[AttendanceStatus] = None
    hours_worked: Optional[float] = None
    check_in: Optional[datetime] = None
    check_out: Optional[datetime] = None
    notes: Optional[str] = None


def coerce_status(value: Any) -> AttendanceStatus:
    """Return `value` as an AttendanceStatus or raise InvalidArgument."""
    if isinstance(value, AttendanceStatus):
        return value
    try:
        return AttendanceStatus(value)
    except ValueError:
        raise InvalidArgument(f"Invalid attendance status {value!r}") from None
