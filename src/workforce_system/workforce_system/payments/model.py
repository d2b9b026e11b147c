from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from ..core.enums import PaymentType
from ..core.exceptions import InvalidArgument


@dataclass(frozen=True)
class PaymentRecord:
    """Domain entity: a ledger payment to a worker.

    Payments are independent of attendance; they are reconciled against
    computed earnings, never matched to individual days.
    """

    worker_id: str
    site_id: str
    amount: float
    date: str
    payment_type: PaymentType = PaymentType.WAGE
    notes: Optional[str] = None
    payment_id: Optional[str] = None
    created_by: Optional[str] = None


def coerce_payment_type(value: Any) -> PaymentType:
    if value is None:
        return PaymentType.WAGE
    if isinstance(value, PaymentType):
        return value
    try:
        return PaymentType(value)
    except ValueError:
        raise InvalidArgument(f"Invalid payment type {value!r}") from None
