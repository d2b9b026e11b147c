from __future__ import annotations

import itertools
import threading
from dataclasses import replace
from typing import Dict, List, Optional, Sequence, Tuple

from ..common.datetime_utils import in_date_range
from ..workers.repository import WorkerRepository
from .model import AttendanceRecord
from .repository import AttendanceRepository


class InMemoryAttendanceRepository(AttendanceRepository):
    """Dict-backed store keyed by (worker_id, site_id, work_date).

    When a worker repository is given, reads populate `record.worker` the way
    a join would; a deleted worker yields `worker=None`.
    """

    def __init__(self, workers: Optional[WorkerRepository] = None):
        self._workers = workers
        self._rows: Dict[Tuple[str, str, str], AttendanceRecord] = {}
        self._ids = itertools.count(1)
        self._lock = threading.Lock()

    def get(self, *, worker_id: str, site_id: str, work_date: str) -> Optional[AttendanceRecord]:
        row = self._rows.get((worker_id, site_id, work_date))
        return self._populate(row) if row else None

    def upsert(self, record: AttendanceRecord) -> AttendanceRecord:
        with self._lock:
            existing = self._rows.get(record.key)
            attendance_id = existing.attendance_id if existing else f"att-{next(self._ids)}"
            stored = replace(record, attendance_id=attendance_id, worker=None)
            self._rows[record.key] = stored
        return self._populate(stored)

    def find_for_site(
        self,
        site_id: str,
        *,
        start: Optional[str] = None,
        end: Optional[str] = None,
    ) -> Sequence[AttendanceRecord]:
        rows = [r for r in self._rows.values() if r.site_id == site_id and in_date_range(r.work_date, start, end)]
        return self._sorted(rows)

    def find_for_worker(
        self,
        worker_id: str,
        *,
        start: Optional[str] = None,
        end: Optional[str] = None,
    ) -> Sequence[AttendanceRecord]:
        rows = [r for r in self._rows.values() if r.worker_id == worker_id and in_date_range(r.work_date, start, end)]
        return self._sorted(rows)

    def _sorted(self, rows: List[AttendanceRecord]) -> List[AttendanceRecord]:
        rows.sort(key=lambda r: (r.work_date, r.attendance_id or ""))
        return [self._populate(r) for r in rows]

    def _populate(self, row: AttendanceRecord) -> AttendanceRecord:
        if self._workers is None:
            return row
        return replace(row, worker=self._workers.get_by_id(row.worker_id))
