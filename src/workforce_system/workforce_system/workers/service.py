from __future__ import annotations

import logging
import uuid
from dataclasses import replace
from typing import Optional, Sequence

from ..common.validators import require_non_empty, require_non_negative
from ..core.constants import DEFAULT_ROLE
from ..core.enums import WageType
from ..core.exceptions import NotFoundError
from ..sites.repository import SiteRepository
from .model import Worker, coerce_wage_type
from .repository import WorkerRepository

logger = logging.getLogger(__name__)


class WorkerService:
    """Use cases: register, edit and remove the workers of a site."""

    def __init__(self, workers: WorkerRepository, sites: SiteRepository):
        self._workers = workers
        self._sites = sites

    def get_worker(self, worker_id: str) -> Worker:
        worker = self._workers.get_by_id(worker_id)
        if not worker:
            raise NotFoundError(f"Worker {worker_id} not found")
        return worker

    def add_worker(
        self,
        *,
        name: str,
        site_id: str,
        role: Optional[str] = None,
        wage_rate: Optional[float] = None,
        wage_type: Optional[WageType] = None,
        phone: str = "",
        address: str = "",
        created_by: Optional[str] = None,
    ) -> Worker:
        """Defaults: role "Worker", paid per day, rate 0."""
        name = require_non_empty(name, "name")
        site_id = require_non_empty(site_id, "site_id")
        rate = require_non_negative(wage_rate, "wage_rate") if wage_rate is not None else 0.0
        kind = coerce_wage_type(wage_type)
        if not self._sites.get_by_id(site_id):
            raise NotFoundError(f"Site {site_id} not found")

        worker = self._workers.add(
            Worker(
                worker_id=uuid.uuid4().hex,
                name=name,
                site_id=site_id,
                wage_rate=rate,
                wage_type=kind,
                role=role or DEFAULT_ROLE,
                phone=phone or "",
                address=address or "",
                created_by=created_by,
            )
        )
        logger.info("Added worker %s (%s) to site %s", worker.worker_id, name, site_id)
        return worker

    def update_worker(
        self,
        worker_id: str,
        *,
        name: Optional[str] = None,
        role: Optional[str] = None,
        wage_rate: Optional[float] = None,
        wage_type: Optional[WageType] = None,
        phone: Optional[str] = None,
        address: Optional[str] = None,
    ) -> Worker:
        """Fields left as None keep their current value."""
        current = self.get_worker(worker_id)
        updated = replace(
            current,
            name=require_non_empty(name, "name") if name is not None else current.name,
            role=role or current.role,
            wage_rate=require_non_negative(wage_rate, "wage_rate") if wage_rate is not None else current.wage_rate,
            wage_type=coerce_wage_type(wage_type) if wage_type is not None else current.wage_type,
            phone=phone if phone is not None else current.phone,
            address=address if address is not None else current.address,
        )
        if not self._workers.update(updated):
            raise NotFoundError(f"Worker {worker_id} not found")
        logger.info("Updated worker %s", worker_id)
        return updated

    def delete_worker(self, worker_id: str) -> None:
        """Attendance rows of a deleted worker become orphans; reports skip them."""
        if not self._workers.delete_by_id(worker_id):
            raise NotFoundError(f"Worker {worker_id} not found")
        logger.info("Deleted worker %s", worker_id)

    def list_for_site(self, site_id: str) -> Sequence[Worker]:
        if not self._sites.get_by_id(site_id):
            raise NotFoundError(f"Site {site_id} not found")
        return self._workers.list_for_site(site_id)
