from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import PaymentRecord


class PaymentRepository(Protocol):
    def add(self, payment: PaymentRecord) -> PaymentRecord:
        raise NotImplementedError

    def update(self, payment: PaymentRecord) -> bool:
        raise NotImplementedError

    def delete_by_id(self, payment_id: str) -> bool:
        raise NotImplementedError

    def get_by_id(self, payment_id: str) -> Optional[PaymentRecord]:
        raise NotImplementedError

    def find_for_worker(
        self,
        worker_id: str,
        *,
        start: Optional[str] = None,
        end: Optional[str] = None,
    ) -> Sequence[PaymentRecord]:
        raise NotImplementedError

    def find_for_site(
        self,
        site_id: str,
        *,
        start: Optional[str] = None,
        end: Optional[str] = None,
        worker_id: Optional[str] = None,
    ) -> Sequence[PaymentRecord]:
        raise NotImplementedError
