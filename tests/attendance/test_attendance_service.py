from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from datetime import datetime

import pytest

from src.workforce_system.workforce_system.attendance.memory_attendance_repository import InMemoryAttendanceRepository
from src.workforce_system.workforce_system.attendance.model import AttendanceMark, AttendanceRecord
from src.workforce_system.workforce_system.attendance.service import AttendanceService
from src.workforce_system.workforce_system.core.enums import AttendanceStatus, WageType
from src.workforce_system.workforce_system.core.exceptions import InvalidArgument, NotFoundError
from src.workforce_system.workforce_system.workers.memory_worker_repository import InMemoryWorkerRepository
from src.workforce_system.workforce_system.workers.model import Worker


@pytest.fixture
def workers():
    return InMemoryWorkerRepository(
        [
            Worker(worker_id="w1", name="A", site_id="s1", wage_rate=100, wage_type=WageType.HOUR),
            Worker(worker_id="w2", name="B", site_id="s1", wage_rate=500, wage_type=WageType.DAY),
            Worker(worker_id="x1", name="X", site_id="s2", wage_rate=500, wage_type=WageType.DAY),
        ]
    )


@pytest.fixture
def repo(workers):
    return InMemoryAttendanceRepository(workers)


@pytest.fixture
def svc(repo, workers):
    return AttendanceService(repo, workers)


def test_mark_derives_hours_from_check_times(svc):
    record = svc.mark(
        worker_id="w1",
        site_id="s1",
        work_date="2025-01-10",
        check_in=datetime(2025, 1, 10, 8, 0),
        check_out=datetime(2025, 1, 10, 16, 30),
    )

    assert record.status == AttendanceStatus.PRESENT
    assert record.hours_worked == pytest.approx(8.5)
    assert record.worker.name == "A"


def test_check_out_before_check_in_clamps_hours_to_zero(svc):
    record = svc.mark(
        worker_id="w1",
        site_id="s1",
        work_date="2025-01-10",
        check_in=datetime(2025, 1, 10, 17, 0),
        check_out=datetime(2025, 1, 10, 8, 0),
    )

    assert record.hours_worked == 0


def test_new_record_without_check_in_defaults_to_absent(svc):
    record = svc.mark(worker_id="w2", site_id="s1", work_date="2025-01-10")
    assert record.status == AttendanceStatus.ABSENT


def test_mark_twice_updates_the_same_record(svc, repo):
    first = svc.mark(worker_id="w2", site_id="s1", work_date="2025-01-10", status=AttendanceStatus.PRESENT, notes="morning")
    second = svc.mark(worker_id="w2", site_id="s1", work_date="2025-01-10", status=AttendanceStatus.HALFDAY)

    assert first.attendance_id == second.attendance_id
    assert second.notes == "morning"
    rows = repo.find_for_site("s1")
    assert len(rows) == 1
    assert rows[0].status == AttendanceStatus.HALFDAY


def test_mark_rejects_worker_from_another_site(svc):
    with pytest.raises(NotFoundError):
        svc.mark(worker_id="x1", site_id="s1", work_date="2025-01-10")


def test_mark_rejects_bad_date_status_and_hours(svc):
    with pytest.raises(InvalidArgument):
        svc.mark(worker_id="w1", site_id="s1", work_date="10-01-2025")
    with pytest.raises(InvalidArgument):
        svc.mark(worker_id="w1", site_id="s1", work_date="2025-01-10", status="sick")
    with pytest.raises(InvalidArgument):
        svc.mark(worker_id="w1", site_id="s1", work_date="2025-01-10", hours_worked=-2)


def test_bulk_mark_skips_unknown_and_foreign_workers(svc, repo):
    updated = svc.bulk_mark(
        site_id="s1",
        work_date="2025-01-11",
        entries=[
            AttendanceMark(worker_id="w1", status=AttendanceStatus.PRESENT, hours_worked=6),
            AttendanceMark(worker_id="w2"),
            AttendanceMark(worker_id=""),
            AttendanceMark(worker_id="ghost", status=AttendanceStatus.PRESENT),
            AttendanceMark(worker_id="x1", status=AttendanceStatus.PRESENT),
        ],
    )

    assert updated == 2
    rows = {r.worker_id: r for r in svc.list_for_site_on(site_id="s1", work_date="2025-01-11")}
    assert rows["w1"].hours_worked == 6
    assert rows["w2"].status == AttendanceStatus.ABSENT


def test_bulk_mark_upserts_existing_rows(svc, repo):
    svc.bulk_mark(site_id="s1", work_date="2025-01-12", entries=[AttendanceMark(worker_id="w2", status=AttendanceStatus.PRESENT)])
    svc.bulk_mark(site_id="s1", work_date="2025-01-12", entries=[AttendanceMark(worker_id="w2", status=AttendanceStatus.HALFDAY)])

    rows = repo.find_for_worker("w2")
    assert len(rows) == 1
    assert rows[0].status == AttendanceStatus.HALFDAY


def test_repository_reports_deleted_worker_as_orphan(workers, repo):
    repo.upsert(AttendanceRecord(worker_id="w2", site_id="s1", work_date="2025-01-13"))
    workers.delete_by_id("w2")

    rows = repo.find_for_site("s1", start="2025-01-13", end="2025-01-13")

    assert len(rows) == 1
    assert rows[0].worker is None


def test_bulk_mark_with_bad_status_saves_nothing(svc, repo):
    with pytest.raises(InvalidArgument):
        svc.bulk_mark(
            site_id="s1",
            work_date="2025-01-14",
            entries=[
                AttendanceMark(worker_id="w1", status=AttendanceStatus.PRESENT),
                AttendanceMark(worker_id="w2", status="sick"),
            ],
        )

    assert svc.list_for_site_on(site_id="s1", work_date="2025-01-14") == []


def test_bulk_mark_repeated_worker_merges_into_one_row(svc, repo):
    updated = svc.bulk_mark(
        site_id="s1",
        work_date="2025-01-15",
        entries=[
            AttendanceMark(worker_id="w1", status=AttendanceStatus.PRESENT),
            AttendanceMark(worker_id="w1", hours_worked=4),
        ],
    )

    rows = repo.find_for_worker("w1")
    assert updated == 1
    assert [(r.status, r.hours_worked) for r in rows] == [(AttendanceStatus.PRESENT, 4)]


def test_concurrent_upserts_keep_one_row_per_key(repo):
    def upsert(i):
        return repo.upsert(
            AttendanceRecord(worker_id="w1", site_id="s1", work_date="2025-01-16", hours_worked=float(i))
        )

    with ThreadPoolExecutor(max_workers=8) as pool:
        saved = list(pool.map(upsert, range(200)))

    rows = repo.find_for_site("s1", start="2025-01-16", end="2025-01-16")
    assert len(rows) == 1
    assert {r.attendance_id for r in saved} == {rows[0].attendance_id}
