from __future__ import annotations

import logging
from dataclasses import replace
from typing import Optional, Sequence

from ..common.datetime_utils import require_iso_date
from ..common.validators import require_date_range, require_positive_amount
from ..core.enums import PaymentType
from ..core.exceptions import NotFoundError
from ..sites.repository import SiteRepository
from ..workers.repository import WorkerRepository
from .model import PaymentRecord, coerce_payment_type
from .repository import PaymentRepository

logger = logging.getLogger(__name__)


class PaymentService:
    """Use cases: record, edit and delete ledger payments to workers."""

    def __init__(self, payments: PaymentRepository, workers: WorkerRepository, sites: SiteRepository):
        self._payments = payments
        self._workers = workers
        self._sites = sites

    def add_payment(
        self,
        *,
        worker_id: str,
        site_id: str,
        amount: float,
        date: str,
        payment_type: Optional[PaymentType] = None,
        notes: Optional[str] = None,
        created_by: Optional[str] = None,
    ) -> PaymentRecord:
        value = require_positive_amount(amount)
        day = require_iso_date(date, "date")
        kind = coerce_payment_type(payment_type)

        worker = self._workers.get_by_id(worker_id)
        if not worker or worker.site_id != site_id:
            raise NotFoundError(f"Worker {worker_id} not found for site {site_id}")

        payment = self._payments.add(
            PaymentRecord(
                worker_id=worker_id,
                site_id=site_id,
                amount=value,
                date=day,
                payment_type=kind,
                notes=notes,
                created_by=created_by,
            )
        )
        logger.info("Recorded %s payment %s of %.2f for worker %s", kind.value, payment.payment_id, value, worker_id)
        return payment

    def update_payment(
        self,
        payment_id: str,
        *,
        amount: Optional[float] = None,
        date: Optional[str] = None,
        payment_type: Optional[PaymentType] = None,
        notes: Optional[str] = None,
    ) -> PaymentRecord:
        """Edit a payment; fields left as None keep their current value.

        An amount of zero is rejected like any other non-positive amount.
        """
        current = self._payments.get_by_id(payment_id)
        if not current:
            raise NotFoundError(f"Payment {payment_id} not found")

        updated = replace(
            current,
            amount=require_positive_amount(amount) if amount is not None else current.amount,
            date=require_iso_date(date, "date") if date is not None else current.date,
            payment_type=coerce_payment_type(payment_type) if payment_type is not None else current.payment_type,
            notes=notes if notes is not None else current.notes,
        )
        if not self._payments.update(updated):
            raise NotFoundError(f"Payment {payment_id} not found")
        logger.info("Updated payment %s", payment_id)
        return updated

    def delete_payment(self, payment_id: str) -> None:
        if not self._payments.delete_by_id(payment_id):
            raise NotFoundError(f"Payment {payment_id} not found")
        logger.info("Deleted payment %s", payment_id)

    def list_for_worker(
        self,
        worker_id: str,
        *,
        start: Optional[str] = None,
        end: Optional[str] = None,
    ) -> Sequence[PaymentRecord]:
        if not self._workers.get_by_id(worker_id):
            raise NotFoundError(f"Worker {worker_id} not found")
        start, end = require_date_range(start, end)
        return self._payments.find_for_worker(worker_id, start=start, end=end)

    def list_for_site(
        self,
        site_id: str,
        *,
        start: Optional[str] = None,
        end: Optional[str] = None,
        worker_id: Optional[str] = None,
    ) -> Sequence[PaymentRecord]:
        if not self._sites.get_by_id(site_id):
            raise NotFoundError(f"Site {site_id} not found")
        start, end = require_date_range(start, end)
        return self._payments.find_for_site(site_id, start=start, end=end, worker_id=worker_id)
