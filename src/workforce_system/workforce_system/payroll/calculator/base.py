from __future__ import annotations

from abc import ABC, abstractmethod

from ...attendance.model import AttendanceRecord
from ...workers.model import Worker


class EarningsCalculator(ABC):
    """Calculator interface (Strategy Pattern for payroll)."""

    @abstractmethod
    def earnings_for_record(self, worker: Worker, record: AttendanceRecord) -> float:
        raise NotImplementedError
