from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .attendance.memory_attendance_repository import InMemoryAttendanceRepository
from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceService
from .payments.memory_payment_repository import InMemoryPaymentRepository
from .payments.repository import PaymentRepository
from .payments.service import PaymentService
from .payroll.calculator.base import EarningsCalculator
from .payroll.service import PayrollReportService
from .sites.memory_site_repository import InMemorySiteRepository
from .sites.repository import SiteRepository
from .sites.service import SiteService
from .workers.memory_worker_repository import InMemoryWorkerRepository
from .workers.repository import WorkerRepository
from .workers.service import WorkerService


@dataclass(frozen=True)
class Container:
    sites_repo: SiteRepository
    workers_repo: WorkerRepository
    attendance_repo: AttendanceRepository
    payments_repo: PaymentRepository

    site_service: SiteService
    worker_service: WorkerService
    attendance_service: AttendanceService
    payment_service: PaymentService
    payroll_report_service: PayrollReportService


def build_container(
    *,
    sites: Optional[SiteRepository] = None,
    workers: Optional[WorkerRepository] = None,
    attendance: Optional[AttendanceRepository] = None,
    payments: Optional[PaymentRepository] = None,
    calculator: Optional[EarningsCalculator] = None,
) -> Container:
    """Wire services to the given stores, defaulting to in-memory ones.

    Build once and pass the container around; nothing here is global.
    """
    sites_repo = sites if sites is not None else InMemorySiteRepository()
    workers_repo = workers if workers is not None else InMemoryWorkerRepository()
    attendance_repo = attendance if attendance is not None else InMemoryAttendanceRepository(workers_repo)
    payments_repo = payments if payments is not None else InMemoryPaymentRepository()

    site_service = SiteService(sites_repo)
    worker_service = WorkerService(workers_repo, sites_repo)
    attendance_service = AttendanceService(attendance_repo, workers_repo)
    payment_service = PaymentService(payments_repo, workers_repo, sites_repo)
    payroll_report_service = PayrollReportService(
        attendance_repo,
        payments_repo,
        workers_repo,
        sites_repo,
        calculator=calculator,
    )

    return Container(
        sites_repo=sites_repo,
        workers_repo=workers_repo,
        attendance_repo=attendance_repo,
        payments_repo=payments_repo,
        site_service=site_service,
        worker_service=worker_service,
        attendance_service=attendance_service,
        payment_service=payment_service,
        payroll_report_service=payroll_report_service,
    )
