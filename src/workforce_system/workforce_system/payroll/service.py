from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass
from typing import Dict, List, Optional

from ..attendance.model import AttendanceRecord
from ..attendance.repository import AttendanceRepository
from ..common.validators import require_date_range
from ..core.exceptions import NotFoundError
from ..payments.model import PaymentRecord
from ..payments.repository import PaymentRepository
from ..sites.model import Site
from ..sites.repository import SiteRepository
from ..workers.model import Worker
from ..workers.repository import WorkerRepository
from .calculator.base import EarningsCalculator
from .calculator.standard_calculator import StandardEarningsCalculator
from .salary_slip import WorkerSalarySlip, build_salary_slip
from .site_payouts import SitePayoutRow, aggregate_site_earnings, aggregate_site_payouts
from .summary import SiteSummary, WorkerSummary, summarize, summarize_site


@dataclass(frozen=True)
class SitePayoutReport:
    site_id: str
    site_name: Optional[str]
    start: str
    end: str
    rows: List[SitePayoutRow]

    def as_dict(self) -> dict:
        return {
            "site_id": self.site_id,
            "site": self.site_name,
            "from": self.start,
            "to": self.end,
            "results": [r.as_dict() for r in self.rows],
        }


class PayrollReportService:
    """Loads records for a site or worker and period, then runs the payroll core.

    Date ranges are inclusive YYYY-MM-DD strings and are applied here, before
    any aggregation.
    """

    def __init__(
        self,
        attendance: AttendanceRepository,
        payments: PaymentRepository,
        workers: WorkerRepository,
        sites: Optional[SiteRepository] = None,
        *,
        calculator: Optional[EarningsCalculator] = None,
    ):
        self._attendance = attendance
        self._payments = payments
        self._workers = workers
        self._sites = sites
        self._calculator = calculator or StandardEarningsCalculator()

    def _get_site(self, site_id: str) -> Optional[Site]:
        if not self._sites:
            return None
        site = self._sites.get_by_id(site_id)
        if not site:
            raise NotFoundError(f"Site {site_id} not found")
        return site

    def _get_worker(self, worker_id: str) -> Worker:
        worker = self._workers.get_by_id(worker_id)
        if not worker:
            raise NotFoundError(f"Worker {worker_id} not found")
        return worker

    def site_payouts(self, site_id: str, *, start: str, end: str) -> SitePayoutReport:
        """Present-day payouts per worker (half-days unpaid), highest first."""
        require_date_range(start, end)
        site = self._get_site(site_id)
        records = self._attendance.find_for_site(site_id, start=start, end=end)
        rows = aggregate_site_payouts(records, calculator=self._calculator)
        return SitePayoutReport(site_id=site_id, site_name=site.name if site else None, start=start, end=end, rows=rows)

    def site_earnings(self, site_id: str, *, start: str, end: str) -> SitePayoutReport:
        """Like `site_payouts` but half-days are paid at 50%."""
        require_date_range(start, end)
        site = self._get_site(site_id)
        records = self._attendance.find_for_site(site_id, start=start, end=end)
        rows = aggregate_site_earnings(records, calculator=self._calculator)
        return SitePayoutReport(site_id=site_id, site_name=site.name if site else None, start=start, end=end, rows=rows)

    def worker_summary(self, worker_id: str, *, start: Optional[str] = None, end: Optional[str] = None) -> WorkerSummary:
        start, end = require_date_range(start, end)
        worker = self._get_worker(worker_id)
        attendance = self._attendance.find_for_worker(worker_id, start=start, end=end)
        payments = self._payments.find_for_worker(worker_id, start=start, end=end)
        return summarize(worker, attendance, payments, calculator=self._calculator)

    def salary_slip(self, worker_id: str, *, start: str, end: str) -> WorkerSalarySlip:
        require_date_range(start, end)
        worker = self._get_worker(worker_id)
        site = self._get_site(worker.site_id)
        attendance = self._attendance.find_for_worker(worker_id, start=start, end=end)
        payments = self._payments.find_for_worker(worker_id, start=start, end=end)
        return build_salary_slip(
            worker,
            attendance,
            payments,
            start=start,
            end=end,
            site=site,
            calculator=self._calculator,
        )

    def site_summary(self, site_id: str, *, start: Optional[str] = None, end: Optional[str] = None) -> SiteSummary:
        start, end = require_date_range(start, end)
        self._get_site(site_id)
        workers = list(self._workers.list_for_site(site_id))

        attendance_by_worker: Dict[str, List[AttendanceRecord]] = defaultdict(list)
        for record in self._attendance.find_for_site(site_id, start=start, end=end):
            attendance_by_worker[record.worker_id].append(record)

        payments_by_worker: Dict[str, List[PaymentRecord]] = defaultdict(list)
        for payment in self._payments.find_for_site(site_id, start=start, end=end):
            payments_by_worker[payment.worker_id].append(payment)

        return summarize_site(workers, attendance_by_worker, payments_by_worker, calculator=self._calculator)
