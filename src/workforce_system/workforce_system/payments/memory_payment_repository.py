from __future__ import annotations

import itertools
import threading
from dataclasses import replace
from typing import Dict, List, Optional, Sequence

from ..common.datetime_utils import in_date_range
from .model import PaymentRecord
from .repository import PaymentRepository


class InMemoryPaymentRepository(PaymentRepository):
    def __init__(self):
        self._rows: Dict[str, PaymentRecord] = {}
        self._ids = itertools.count(1)
        self._lock = threading.Lock()

    def add(self, payment: PaymentRecord) -> PaymentRecord:
        with self._lock:
            stored = replace(payment, payment_id=f"pay-{next(self._ids)}")
            self._rows[stored.payment_id] = stored
        return stored

    def update(self, payment: PaymentRecord) -> bool:
        with self._lock:
            if payment.payment_id not in self._rows:
                return False
            self._rows[payment.payment_id] = payment
            return True

    def delete_by_id(self, payment_id: str) -> bool:
        with self._lock:
            return self._rows.pop(payment_id, None) is not None

    def get_by_id(self, payment_id: str) -> Optional[PaymentRecord]:
        return self._rows.get(payment_id)

    def find_for_worker(
        self,
        worker_id: str,
        *,
        start: Optional[str] = None,
        end: Optional[str] = None,
    ) -> Sequence[PaymentRecord]:
        rows = [p for p in self._rows.values() if p.worker_id == worker_id and in_date_range(p.date, start, end)]
        return self._newest_first(rows)

    def find_for_site(
        self,
        site_id: str,
        *,
        start: Optional[str] = None,
        end: Optional[str] = None,
        worker_id: Optional[str] = None,
    ) -> Sequence[PaymentRecord]:
        rows = [
            p
            for p in self._rows.values()
            if p.site_id == site_id
            and (worker_id is None or p.worker_id == worker_id)
            and in_date_range(p.date, start, end)
        ]
        return self._newest_first(rows)

    @staticmethod
    def _newest_first(rows: List[PaymentRecord]) -> List[PaymentRecord]:
        # Insertion order breaks ties within a date (newest entry first).
        rows.reverse()
        rows.sort(key=lambda p: p.date, reverse=True)
        return rows
