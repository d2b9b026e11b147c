from __future__ import annotations

import pytest

from src.workforce_system.workforce_system.core.enums import WageType
from src.workforce_system.workforce_system.core.exceptions import InvalidArgument, NotFoundError
from src.workforce_system.workforce_system.sites.memory_site_repository import InMemorySiteRepository
from src.workforce_system.workforce_system.sites.model import Site
from src.workforce_system.workforce_system.workers.memory_worker_repository import InMemoryWorkerRepository
from src.workforce_system.workforce_system.workers.service import WorkerService


@pytest.fixture
def workers():
    return InMemoryWorkerRepository()


@pytest.fixture
def svc(workers):
    sites = InMemorySiteRepository(
        [
            Site(site_id="s1", name="Bridge", created_by="owner"),
            Site(site_id="s2", name="Depot", created_by="owner", deleted=True),
        ]
    )
    return WorkerService(workers, sites)


def test_add_worker_applies_defaults(svc):
    worker = svc.add_worker(name="Asha", site_id="s1")

    assert worker.worker_id
    assert worker.role == "Worker"
    assert worker.wage_type == WageType.DAY
    assert worker.wage_rate == 0


def test_add_worker_accepts_wage_type_values(svc):
    worker = svc.add_worker(name="Bala", site_id="s1", wage_rate="120.5", wage_type="hour")

    assert worker.wage_type == WageType.HOUR
    assert worker.wage_rate == 120.5


@pytest.mark.parametrize(
    "kwargs",
    [
        {"name": "", "site_id": "s1"},
        {"name": "Asha", "site_id": ""},
        {"name": "Asha", "site_id": "s1", "wage_rate": -50},
        {"name": "Asha", "site_id": "s1", "wage_rate": "lots"},
        {"name": "Asha", "site_id": "s1", "wage_type": "week"},
    ],
)
def test_add_worker_rejects_invalid_input(svc, workers, kwargs):
    with pytest.raises(InvalidArgument):
        svc.add_worker(**kwargs)

    assert workers.list_for_site("s1") == []


def test_add_worker_requires_existing_site(svc):
    with pytest.raises(NotFoundError):
        svc.add_worker(name="Asha", site_id="nope")

    # Archived sites still accept workers.
    assert svc.add_worker(name="Asha", site_id="s2").site_id == "s2"


def test_update_worker_validates_and_keeps_other_fields(svc):
    worker = svc.add_worker(name="Asha", site_id="s1", wage_rate=200, phone="123")

    with pytest.raises(InvalidArgument):
        svc.update_worker(worker.worker_id, wage_rate=-1)
    with pytest.raises(InvalidArgument):
        svc.update_worker(worker.worker_id, wage_type="week")

    updated = svc.update_worker(worker.worker_id, wage_type=WageType.MONTH, wage_rate=5200)

    assert (updated.wage_type, updated.wage_rate) == (WageType.MONTH, 5200)
    assert updated.phone == "123"
    assert svc.get_worker(worker.worker_id) == updated


def test_delete_worker_and_list_for_site(svc):
    a = svc.add_worker(name="Asha", site_id="s1")
    b = svc.add_worker(name="Bala", site_id="s1")

    svc.delete_worker(a.worker_id)

    assert [w.worker_id for w in svc.list_for_site("s1")] == [b.worker_id]
    with pytest.raises(NotFoundError):
        svc.delete_worker(a.worker_id)
    with pytest.raises(NotFoundError):
        svc.list_for_site("nope")
