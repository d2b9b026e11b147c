from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import AttendanceRecord


class AttendanceRepository(Protocol):
    def get(self, *, worker_id: str, site_id: str, work_date: str) -> Optional[AttendanceRecord]:
        raise NotImplementedError

    def upsert(self, record: AttendanceRecord) -> AttendanceRecord:
        """Insert or replace the record stored under `record.key`.

        Implementations must enforce the (worker, site, date) key atomically.
        """

        raise NotImplementedError

    def find_for_site(
        self,
        site_id: str,
        *,
        start: Optional[str] = None,
        end: Optional[str] = None,
    ) -> Sequence[AttendanceRecord]:
        """Records populated with their worker (None for a deleted worker)."""

        raise NotImplementedError

    def find_for_worker(
        self,
        worker_id: str,
        *,
        start: Optional[str] = None,
        end: Optional[str] = None,
    ) -> Sequence[AttendanceRecord]:
        raise NotImplementedError
