from __future__ import annotations

from typing import Any

from .base import EarningsCalculator
from ...attendance.model import AttendanceRecord, coerce_status
from ...common.validators import sanitize_number
from ...core.constants import ASSUMED_WORKING_DAYS_PER_MONTH, HALF_DAY_FACTOR
from ...core.enums import AttendanceStatus, WageType
from ...core.exceptions import InvalidArgument
from ...workers.model import Worker


def resolve_wage_type(value: Any) -> WageType:
    """Unknown or missing wage types are paid like a daily wage."""
    if isinstance(value, WageType):
        return value
    try:
        return WageType(value)
    except ValueError:
        return WageType.DAY


class StandardEarningsCalculator(EarningsCalculator):
    """Standard rule: hour -> hours * rate, day -> rate, month -> rate / 26.

    Half-days earn half of the present amount; absent earns nothing. Negative
    rates or hours never produce a negative amount.
    """

    def full_day_amount(self, worker: Worker, hours_worked: float) -> float:
        rate = sanitize_number(worker.wage_rate)
        wage_type = resolve_wage_type(worker.wage_type)
        if wage_type == WageType.HOUR:
            return sanitize_number(hours_worked) * rate
        if wage_type == WageType.MONTH:
            return rate / ASSUMED_WORKING_DAYS_PER_MONTH
        return rate

    def earnings_for_record(self, worker: Worker, record: AttendanceRecord) -> float:
        if worker is None:
            raise InvalidArgument("worker is required")
        if record is None:
            raise InvalidArgument("attendance record is required")

        status = coerce_status(record.status)
        if status == AttendanceStatus.ABSENT:
            return 0.0

        amount = self.full_day_amount(worker, record.hours_worked)
        if status == AttendanceStatus.HALFDAY:
            amount *= HALF_DAY_FACTOR
        return max(amount, 0.0)


_standard = StandardEarningsCalculator()


def earnings_for_record(worker: Worker, record: AttendanceRecord) -> float:
    """Earned amount for one attendance record under the standard rule."""
    return _standard.earnings_for_record(worker, record)
