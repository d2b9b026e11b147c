from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Worker


class WorkerRepository(Protocol):
    """Repository interface for Worker.

    Services depend on this interface, never on a concrete store.
    """

    def get_by_id(self, worker_id: str) -> Optional[Worker]:
        raise NotImplementedError

    def list_for_site(self, site_id: str) -> Sequence[Worker]:
        raise NotImplementedError

    def add(self, worker: Worker) -> Worker:
        raise NotImplementedError

    def update(self, worker: Worker) -> bool:
        raise NotImplementedError

    def delete_by_id(self, worker_id: str) -> bool:
        raise NotImplementedError
