from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence

from ..attendance.model import AttendanceRecord, coerce_status
from ..common.datetime_utils import require_iso_date
from ..common.money import round_money
from ..common.validators import require_date_range, sanitize_number
from ..core.enums import PaymentType, WageType
from ..payments.model import PaymentRecord, coerce_payment_type
from ..sites.model import Site
from ..workers.model import Worker
from .calculator.base import EarningsCalculator
from .calculator.standard_calculator import resolve_wage_type
from .summary import summarize


@dataclass(frozen=True)
class WorkerSalarySlip:
    worker_id: str
    worker_name: str
    worker_role: str
    site_id: str
    site_name: Optional[str]
    start: str
    end: str
    wage_rate: float
    wage_type: WageType
    days_present: int
    days_half: int
    total_days: int
    total_hours: float
    total_earned: float
    total_paid: float
    remaining_amount: float
    attendance: List[AttendanceRecord] = field(default_factory=list)
    payments: List[PaymentRecord] = field(default_factory=list)
    payments_by_type: Dict[PaymentType, List[PaymentRecord]] = field(default_factory=dict)
    payment_type_totals: Dict[PaymentType, float] = field(default_factory=dict)

    def as_dict(self) -> dict:
        return {
            "worker_id": self.worker_id,
            "worker_name": self.worker_name,
            "worker_role": self.worker_role,
            "site_id": self.site_id,
            "site_name": self.site_name,
            "from": self.start,
            "to": self.end,
            "wage_rate": self.wage_rate,
            "wage_type": self.wage_type.value,
            "days_present": self.days_present,
            "days_half": self.days_half,
            "total_days": self.total_days,
            "total_hours": round_money(self.total_hours),
            "total_earned": round_money(self.total_earned),
            "total_paid": round_money(self.total_paid),
            "remaining_amount": round_money(self.remaining_amount),
            "payment_type_totals": {t.value: round_money(v) for t, v in self.payment_type_totals.items()},
            "attendance": [
                {
                    "date": a.work_date,
                    "status": coerce_status(a.status).value,
                    "hours_worked": a.hours_worked or 0.0,
                    "notes": a.notes,
                }
                for a in self.attendance
            ],
            "payments": [
                {
                    "payment_id": p.payment_id,
                    "date": p.date,
                    "amount": round_money(p.amount),
                    "payment_type": coerce_payment_type(p.payment_type).value,
                    "notes": p.notes,
                }
                for p in self.payments
            ],
        }


def group_payments_by_type(payments: Sequence[PaymentRecord]) -> Dict[PaymentType, List[PaymentRecord]]:
    grouped: Dict[PaymentType, List[PaymentRecord]] = {}
    for payment in payments:
        grouped.setdefault(coerce_payment_type(payment.payment_type), []).append(payment)
    return grouped


def build_salary_slip(
    worker: Worker,
    attendance: Sequence[AttendanceRecord],
    payments: Sequence[PaymentRecord],
    *,
    start: str,
    end: str,
    site: Optional[Site] = None,
    calculator: Optional[EarningsCalculator] = None,
) -> WorkerSalarySlip:
    """Assemble a worker's salary slip for [start, end].

    Earned, paid and remaining come straight from `summarize`; this only
    adds payment grouping and date-ordered lists for display.
    """
    require_date_range(start, end)
    summary = summarize(worker, attendance, payments, calculator=calculator)

    for record in attendance:
        require_iso_date(record.work_date, "work_date")
    for payment in payments:
        require_iso_date(payment.date, "date")
    sorted_attendance = sorted(attendance, key=lambda a: a.work_date)
    sorted_payments = sorted(payments, key=lambda p: p.date)

    by_type = group_payments_by_type(sorted_payments)
    totals = {kind: sum((p.amount for p in items), 0.0) for kind, items in by_type.items()}

    return WorkerSalarySlip(
        worker_id=worker.worker_id,
        worker_name=worker.name,
        worker_role=worker.role,
        site_id=worker.site_id,
        site_name=site.name if site else None,
        start=start,
        end=end,
        wage_rate=float(worker.wage_rate),
        wage_type=resolve_wage_type(worker.wage_type),
        days_present=summary.present_days,
        days_half=summary.half_days,
        total_days=summary.total_days,
        total_hours=sum((sanitize_number(a.hours_worked) for a in sorted_attendance), 0.0),
        total_earned=summary.earned_amount,
        total_paid=summary.total_paid,
        remaining_amount=summary.remaining_amount,
        attendance=sorted_attendance,
        payments=sorted_payments,
        payments_by_type=by_type,
        payment_type_totals=totals,
    )
