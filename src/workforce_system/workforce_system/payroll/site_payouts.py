from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional

from ..attendance.model import AttendanceRecord, coerce_status
from ..common.money import round_money
from ..common.validators import sanitize_number
from ..core.enums import AttendanceStatus, WageType
from ..core.exceptions import InvalidArgument
from .calculator.base import EarningsCalculator
from .calculator.standard_calculator import StandardEarningsCalculator, resolve_wage_type

logger = logging.getLogger(__name__)


@dataclass
class SitePayoutRow:
    worker_id: str
    name: str
    wage_rate: float
    wage_type: WageType
    total_hours: float = 0.0
    total_payout: float = 0.0
    days_present: int = 0
    days_half: int = 0

    def as_dict(self) -> dict:
        return {
            "worker_id": self.worker_id,
            "name": self.name,
            "wage_rate": self.wage_rate,
            "wage_type": self.wage_type.value,
            "total_hours": round_money(self.total_hours),
            "total_payout": round_money(self.total_payout),
            "days_present": self.days_present,
            "days_half": self.days_half,
        }


def _aggregate(
    records: Iterable[AttendanceRecord],
    *,
    credit_half_days: bool,
    calculator: Optional[EarningsCalculator],
) -> List[SitePayoutRow]:
    calculator = calculator or StandardEarningsCalculator()
    rows: Dict[str, SitePayoutRow] = {}

    for record in records:
        worker = record.worker
        if worker is None:
            logger.warning(
                "Orphaned attendance record %s (worker %s) for site %s",
                record.attendance_id,
                record.worker_id,
                record.site_id,
            )
            continue
        try:
            status = coerce_status(record.status)
        except InvalidArgument:
            logger.warning("Skipping attendance record %s with invalid status %r", record.attendance_id, record.status)
            continue

        row = rows.get(worker.worker_id)
        if row is None:
            row = SitePayoutRow(
                worker_id=worker.worker_id,
                name=worker.name,
                wage_rate=sanitize_number(worker.wage_rate),
                wage_type=resolve_wage_type(worker.wage_type),
            )
            rows[worker.worker_id] = row

        # Hours count for every status; payout depends on status.
        row.total_hours += sanitize_number(record.hours_worked)
        if status == AttendanceStatus.PRESENT:
            row.days_present += 1
            row.total_payout += calculator.earnings_for_record(worker, record)
        elif status == AttendanceStatus.HALFDAY:
            row.days_half += 1
            if credit_half_days:
                row.total_payout += calculator.earnings_for_record(worker, record)

    # sorted() is stable with reverse=True, so ties keep encounter order.
    return sorted(rows.values(), key=lambda r: r.total_payout, reverse=True)


def aggregate_site_payouts(
    records: Iterable[AttendanceRecord],
    *,
    calculator: Optional[EarningsCalculator] = None,
) -> List[SitePayoutRow]:
    """Per-worker payout totals for one site, highest payout first.

    Only present days are paid here; half-days are counted in `days_half`
    but add nothing to `total_payout`. Records whose worker no longer exists
    are skipped with a warning. Records must already be filtered to the
    site and period.
    """
    return _aggregate(records, credit_half_days=False, calculator=calculator)


def aggregate_site_earnings(
    records: Iterable[AttendanceRecord],
    *,
    calculator: Optional[EarningsCalculator] = None,
) -> List[SitePayoutRow]:
    """Same as `aggregate_site_payouts` but half-days are paid at 50%.

    Totals agree with `summarize` for every worker.
    """
    return _aggregate(records, credit_half_days=True, calculator=calculator)
