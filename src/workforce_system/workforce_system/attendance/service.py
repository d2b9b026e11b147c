from __future__ import annotations

import logging
from dataclasses import replace
from datetime import datetime
from typing import Dict, Optional, Sequence, Tuple

from ..common.datetime_utils import hours_between, require_iso_date, today_iso
from ..common.validators import require_non_negative
from ..core.enums import AttendanceStatus
from ..core.exceptions import NotFoundError
from ..workers.model import Worker
from ..workers.repository import WorkerRepository
from .model import AttendanceMark, AttendanceRecord, coerce_status
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


class AttendanceService:
    """Use cases: mark and bulk-mark daily attendance for a site."""

    def __init__(self, attendance: AttendanceRepository, workers: WorkerRepository):
        self._attendance = attendance
        self._workers = workers

    def _site_worker(self, worker_id: str, site_id: str) -> Optional[Worker]:
        worker = self._workers.get_by_id(worker_id)
        if not worker or worker.site_id != site_id:
            return None
        return worker

    def _merge(
        self,
        existing: Optional[AttendanceRecord],
        *,
        worker_id: str,
        site_id: str,
        work_date: str,
        status: Optional[AttendanceStatus],
        hours_worked: Optional[float],
        check_in: Optional[datetime],
        check_out: Optional[datetime],
        notes: Optional[str],
        default_status: AttendanceStatus,
    ) -> AttendanceRecord:
        if existing is None:
            record = AttendanceRecord(
                worker_id=worker_id,
                site_id=site_id,
                work_date=work_date,
                status=default_status,
            )
        else:
            record = existing

        changes: dict = {}
        if status is not None:
            changes["status"] = coerce_status(status)
        if hours_worked is not None:
            changes["hours_worked"] = require_non_negative(hours_worked, "hours_worked")
        if check_in is not None:
            changes["check_in"] = check_in
        if check_out is not None:
            changes["check_out"] = check_out
        if notes:
            changes["notes"] = notes
        record = replace(record, **changes)

        # Check-in/check-out, when both known, take precedence over explicit hours.
        derived = hours_between(record.check_in, record.check_out)
        if derived is not None:
            record = replace(record, hours_worked=derived)
        return record

    def mark(
        self,
        *,
        worker_id: str,
        site_id: str,
        work_date: Optional[str] = None,
        status: Optional[AttendanceStatus] = None,
        hours_worked: Optional[float] = None,
        check_in: Optional[datetime] = None,
        check_out: Optional[datetime] = None,
        notes: Optional[str] = None,
    ) -> AttendanceRecord:
        """Create or update the single record for (worker, site, date).

        A new record without an explicit status is present if a check-in was
        given, absent otherwise. On update only the supplied fields change.
        """
        worker = self._site_worker(worker_id, site_id)
        if not worker:
            raise NotFoundError(f"Worker {worker_id} not found for site {site_id}")

        day = require_iso_date(work_date, "work_date") if work_date else today_iso()
        existing = self._attendance.get(worker_id=worker_id, site_id=site_id, work_date=day)
        record = self._merge(
            existing,
            worker_id=worker_id,
            site_id=site_id,
            work_date=day,
            status=status,
            hours_worked=hours_worked,
            check_in=check_in,
            check_out=check_out,
            notes=notes,
            default_status=AttendanceStatus.PRESENT if check_in else AttendanceStatus.ABSENT,
        )
        saved = self._attendance.upsert(record)
        logger.info("Marked %s for worker %s at site %s on %s", saved.status.value, worker_id, site_id, day)
        return replace(saved, worker=worker)

    def bulk_mark(self, *, site_id: str, entries: Sequence[AttendanceMark], work_date: Optional[str] = None) -> int:
        """Upsert many workers for one site and date. Returns how many were saved.

        Entries without a worker id, or naming a worker that does not belong to
        the site, are skipped. New records default to absent. Every entry is
        validated before anything is written, so a bad entry saves nothing.
        """
        day = require_iso_date(work_date, "work_date") if work_date else today_iso()
        pending: Dict[Tuple[str, str, str], AttendanceRecord] = {}
        for entry in entries:
            if not entry.worker_id:
                continue
            if not self._site_worker(entry.worker_id, site_id):
                logger.debug("Skipping bulk mark for unknown worker %s at site %s", entry.worker_id, site_id)
                continue

            key = (entry.worker_id, site_id, day)
            existing = pending.get(key) or self._attendance.get(worker_id=entry.worker_id, site_id=site_id, work_date=day)
            pending[key] = self._merge(
                existing,
                worker_id=entry.worker_id,
                site_id=site_id,
                work_date=day,
                status=entry.status,
                hours_worked=entry.hours_worked,
                check_in=entry.check_in,
                check_out=entry.check_out,
                notes=entry.notes,
                default_status=AttendanceStatus.ABSENT,
            )

        for record in pending.values():
            self._attendance.upsert(record)

        logger.info("Bulk marked %d of %d entries at site %s on %s", len(pending), len(entries), site_id, day)
        return len(pending)

    def list_for_site_on(self, *, site_id: str, work_date: str) -> Sequence[AttendanceRecord]:
        day = require_iso_date(work_date, "work_date")
        return self._attendance.find_for_site(site_id, start=day, end=day)
