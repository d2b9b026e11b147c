from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Mapping, Optional, Sequence

from ..attendance.model import AttendanceRecord, coerce_status
from ..common.money import round_money
from ..core.enums import AttendanceStatus
from ..core.exceptions import InvalidArgument
from ..payments.model import PaymentRecord
from ..workers.model import Worker
from .calculator.base import EarningsCalculator
from .calculator.standard_calculator import StandardEarningsCalculator


@dataclass(frozen=True)
class WorkerEarnings:
    earned_amount: float
    present_days: int
    half_days: int


@dataclass(frozen=True)
class WorkerSummary:
    """Earned vs. paid for one worker over the records it was built from."""

    earned_amount: float
    total_paid: float
    remaining_amount: float
    present_days: int
    half_days: int
    total_days: int

    def as_dict(self) -> dict:
        return {
            "earned_amount": round_money(self.earned_amount),
            "total_paid": round_money(self.total_paid),
            "remaining_amount": round_money(self.remaining_amount),
            "present_days": self.present_days,
            "half_days": self.half_days,
            "total_days": self.total_days,
        }


@dataclass(frozen=True)
class SiteSummary:
    total_workers: int
    total_earned: float
    total_paid: float
    total_remaining: float

    def as_dict(self) -> dict:
        return {
            "total_workers": self.total_workers,
            "total_earned": round_money(self.total_earned),
            "total_paid": round_money(self.total_paid),
            "total_remaining": round_money(self.total_remaining),
        }


def _require_wage_config(worker: Optional[Worker]) -> Worker:
    if worker is None:
        raise InvalidArgument("worker is required")
    if worker.wage_rate is None or worker.wage_type is None:
        raise InvalidArgument(f"worker {worker.worker_id} has no wage configuration")
    return worker


def calculate_worker_earnings(
    worker: Worker,
    attendance: Iterable[AttendanceRecord] = (),
    *,
    calculator: Optional[EarningsCalculator] = None,
) -> WorkerEarnings:
    """Sum per-record earnings and count present/half days.

    Earnings are summed record by record; day counts alone cannot price
    hourly workers.
    """
    worker = _require_wage_config(worker)
    calculator = calculator or StandardEarningsCalculator()

    earned = 0.0
    present_days = 0
    half_days = 0
    for record in attendance:
        status = coerce_status(record.status)
        if status == AttendanceStatus.PRESENT:
            present_days += 1
        elif status == AttendanceStatus.HALFDAY:
            half_days += 1
        earned += calculator.earnings_for_record(worker, record)

    return WorkerEarnings(earned_amount=max(earned, 0.0), present_days=present_days, half_days=half_days)


def calculate_total_payments(payments: Iterable[PaymentRecord] = ()) -> float:
    """All payment types count, bonuses and advances included."""
    return sum((p.amount or 0.0 for p in payments), 0.0)


def summarize(
    worker: Worker,
    attendance: Sequence[AttendanceRecord] = (),
    payments: Sequence[PaymentRecord] = (),
    *,
    calculator: Optional[EarningsCalculator] = None,
) -> WorkerSummary:
    """Combine one worker's attendance and payments into a WorkerSummary.

    Both collections must already be scoped to the worker and period.
    Overpayment is not reported: the remaining amount floors at zero.
    """
    earnings = calculate_worker_earnings(worker, attendance, calculator=calculator)
    total_paid = calculate_total_payments(payments)
    return WorkerSummary(
        earned_amount=earnings.earned_amount,
        total_paid=total_paid,
        remaining_amount=max(0.0, earnings.earned_amount - total_paid),
        present_days=earnings.present_days,
        half_days=earnings.half_days,
        total_days=earnings.present_days + earnings.half_days,
    )


def summarize_site(
    workers: Sequence[Worker],
    attendance_by_worker: Mapping[str, Sequence[AttendanceRecord]],
    payments_by_worker: Mapping[str, Sequence[PaymentRecord]],
    *,
    calculator: Optional[EarningsCalculator] = None,
) -> SiteSummary:
    total_earned = 0.0
    total_paid = 0.0
    for worker in workers:
        summary = summarize(
            worker,
            attendance_by_worker.get(worker.worker_id, ()),
            payments_by_worker.get(worker.worker_id, ()),
            calculator=calculator,
        )
        total_earned += summary.earned_amount
        total_paid += summary.total_paid

    return SiteSummary(
        total_workers=len(workers),
        total_earned=total_earned,
        total_paid=total_paid,
        total_remaining=max(0.0, total_earned - total_paid),
    )
