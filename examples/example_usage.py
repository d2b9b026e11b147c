"""Example: use the service layer directly (no transport, no database).

Controllers or other front ends stay thin; payroll rules live in the core.
"""

from src.workforce_system.workforce_system.core.enums import AttendanceStatus, PaymentType, WageType
from src.workforce_system.workforce_system.main import bootstrap


def main():
    container = bootstrap()
    site = container.site_service.create_site(name="Riverside Block", created_by="owner-1")
    meena = container.worker_service.add_worker(name="Meena", site_id=site.site_id, wage_rate=650)
    arjun = container.worker_service.add_worker(name="Arjun", site_id=site.site_id, wage_rate=90, wage_type=WageType.HOUR)

    attendance = container.attendance_service
    attendance.mark(worker_id=meena.worker_id, site_id=site.site_id, work_date="2025-03-03", status=AttendanceStatus.PRESENT)
    attendance.mark(worker_id=meena.worker_id, site_id=site.site_id, work_date="2025-03-04", status=AttendanceStatus.HALFDAY)
    attendance.mark(
        worker_id=arjun.worker_id, site_id=site.site_id, work_date="2025-03-03", status=AttendanceStatus.PRESENT, hours_worked=9
    )

    container.payment_service.add_payment(
        worker_id=meena.worker_id, site_id=site.site_id, amount=400, date="2025-03-05", payment_type=PaymentType.ADVANCE
    )

    reports = container.payroll_report_service
    print(reports.site_payouts(site.site_id, start="2025-03-01", end="2025-03-31").as_dict())
    print(reports.salary_slip(meena.worker_id, start="2025-03-01", end="2025-03-31").as_dict())


if __name__ == "__main__":
    main()
