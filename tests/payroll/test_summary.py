import pytest

from src.workforce_system.workforce_system.attendance.model import AttendanceRecord
from src.workforce_system.workforce_system.core.enums import AttendanceStatus, PaymentType, WageType
from src.workforce_system.workforce_system.core.exceptions import InvalidArgument
from src.workforce_system.workforce_system.payments.model import PaymentRecord
from src.workforce_system.workforce_system.payroll.summary import (
    calculate_total_payments,
    summarize,
    summarize_site,
)
from src.workforce_system.workforce_system.workers.model import Worker


def _worker(rate, wage_type, worker_id="w1"):
    return Worker(worker_id=worker_id, name=worker_id.upper(), site_id="s1", wage_rate=rate, wage_type=wage_type)


def _att(status, day="2025-01-01", hours=0.0, worker_id="w1"):
    return AttendanceRecord(worker_id=worker_id, site_id="s1", work_date=day, status=status, hours_worked=hours)


def _pay(amount, payment_type=PaymentType.WAGE, day="2025-01-02", worker_id="w1"):
    return PaymentRecord(worker_id=worker_id, site_id="s1", amount=amount, date=day, payment_type=payment_type)


def test_scenario_day_worker_one_present_no_payments():
    summary = summarize(_worker(500, WageType.DAY), [_att(AttendanceStatus.PRESENT)], [])

    assert summary.earned_amount == 500
    assert summary.total_paid == 0
    assert summary.remaining_amount == 500
    assert summary.present_days == 1
    assert summary.half_days == 0
    assert summary.total_days == 1


def test_scenario_hour_worker_partially_paid():
    summary = summarize(
        _worker(100, WageType.HOUR),
        [_att(AttendanceStatus.PRESENT, hours=8)],
        [_pay(300)],
    )

    assert summary.earned_amount == 800
    assert summary.total_paid == 300
    assert summary.remaining_amount == 500


def test_scenario_month_worker_full_month():
    records = [_att(AttendanceStatus.PRESENT, day=f"2025-02-{d:02d}") for d in range(1, 27)]
    summary = summarize(_worker(2600, WageType.MONTH), records, [])

    assert summary.earned_amount == pytest.approx(2600)
    assert summary.present_days == 26


def test_hour_worker_earnings_use_hours_per_record():
    records = [
        _att(AttendanceStatus.PRESENT, day="2025-01-01", hours=8),
        _att(AttendanceStatus.PRESENT, day="2025-01-02", hours=3),
        _att(AttendanceStatus.HALFDAY, day="2025-01-03", hours=4),
        _att(AttendanceStatus.ABSENT, day="2025-01-04", hours=6),
    ]
    summary = summarize(_worker(50, WageType.HOUR), records, [])

    assert summary.earned_amount == pytest.approx(8 * 50 + 3 * 50 + 4 * 50 * 0.5)
    assert summary.present_days == 2
    assert summary.half_days == 1
    assert summary.total_days == 3


def test_summary_is_additive_over_partitions():
    worker = _worker(75, WageType.HOUR)
    statuses = [AttendanceStatus.PRESENT, AttendanceStatus.HALFDAY, AttendanceStatus.ABSENT]
    records = [_att(statuses[i % 3], day=f"2025-03-{i + 1:02d}", hours=i * 0.75) for i in range(20)]

    whole = summarize(worker, records, []).earned_amount
    for split in (0, 7, 13, 20):
        left = summarize(worker, records[:split], []).earned_amount
        right = summarize(worker, records[split:], []).earned_amount
        assert left + right == pytest.approx(whole, abs=1e-6)


def test_all_payment_types_count_against_earnings():
    payments = [
        _pay(100, PaymentType.WAGE),
        _pay(50, PaymentType.BONUS),
        _pay(25, PaymentType.ADVANCE),
        _pay(10, PaymentType.OTHER),
    ]
    summary = summarize(_worker(500, WageType.DAY), [_att(AttendanceStatus.PRESENT)], payments)

    assert summary.total_paid == 185
    assert summary.remaining_amount == 315


def test_overpayment_floors_remaining_at_zero():
    summary = summarize(_worker(200, WageType.DAY), [_att(AttendanceStatus.PRESENT)], [_pay(1000)])

    assert summary.total_paid == 1000
    assert summary.remaining_amount == 0


def test_empty_inputs_give_zero_totals():
    summary = summarize(_worker(200, WageType.DAY), [], [])

    assert summary.earned_amount == 0
    assert summary.total_paid == 0
    assert summary.remaining_amount == 0
    assert summary.total_days == 0


def test_many_small_payments_keep_precision():
    payments = [_pay(0.1) for _ in range(1000)]

    assert calculate_total_payments(payments) == pytest.approx(100.0, abs=1e-6)


def test_as_dict_rounds_only_at_presentation():
    records = [_att(AttendanceStatus.PRESENT, day=f"2025-04-{d:02d}") for d in range(1, 4)]
    summary = summarize(_worker(1000, WageType.MONTH), records, [])

    assert summary.earned_amount == pytest.approx(3000 / 26)
    assert summary.as_dict()["earned_amount"] == 115.38


@pytest.mark.parametrize(
    "worker",
    [
        None,
        Worker(worker_id="w1", name="A", site_id="s1", wage_rate=None, wage_type=WageType.DAY),
        Worker(worker_id="w1", name="A", site_id="s1", wage_rate=100, wage_type=None),
    ],
)
def test_missing_worker_or_wage_config_is_rejected(worker):
    with pytest.raises(InvalidArgument):
        summarize(worker, [_att(AttendanceStatus.PRESENT)], [])


def test_site_summary_totals_across_workers():
    a = _worker(500, WageType.DAY, worker_id="a")
    b = _worker(100, WageType.HOUR, worker_id="b")
    attendance = {
        "a": [_att(AttendanceStatus.PRESENT, worker_id="a"), _att(AttendanceStatus.HALFDAY, day="2025-01-02", worker_id="a")],
        "b": [_att(AttendanceStatus.PRESENT, hours=4, worker_id="b")],
    }
    payments = {"a": [_pay(900, worker_id="a")]}

    site = summarize_site([a, b], attendance, payments)

    assert site.total_workers == 2
    assert site.total_earned == 1150
    assert site.total_paid == 900
    assert site.total_remaining == 250
