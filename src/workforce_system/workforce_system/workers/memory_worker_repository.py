from __future__ import annotations

import threading
from typing import Dict, Iterable, List, Optional, Sequence

from .model import Worker
from .repository import WorkerRepository


class InMemoryWorkerRepository(WorkerRepository):
    def __init__(self, workers: Iterable[Worker] = ()):
        self._workers: Dict[str, Worker] = {w.worker_id: w for w in workers}
        self._lock = threading.Lock()

    def add(self, worker: Worker) -> Worker:
        with self._lock:
            self._workers[worker.worker_id] = worker
        return worker

    def update(self, worker: Worker) -> bool:
        with self._lock:
            if worker.worker_id not in self._workers:
                return False
            self._workers[worker.worker_id] = worker
            return True

    def delete_by_id(self, worker_id: str) -> bool:
        with self._lock:
            return self._workers.pop(worker_id, None) is not None

    def get_by_id(self, worker_id: str) -> Optional[Worker]:
        return self._workers.get(worker_id)

    def list_for_site(self, site_id: str) -> Sequence[Worker]:
        out: List[Worker] = [w for w in self._workers.values() if w.site_id == site_id]
        out.sort(key=lambda w: w.name)
        return out
