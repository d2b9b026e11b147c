from __future__ import annotations

import threading
from typing import Dict, Iterable, List, Optional, Sequence

from .model import Site
from .repository import SiteRepository


class InMemorySiteRepository(SiteRepository):
    def __init__(self, sites: Iterable[Site] = ()):
        self._sites: Dict[str, Site] = {s.site_id: s for s in sites}
        self._lock = threading.Lock()

    def add(self, site: Site) -> Site:
        with self._lock:
            self._sites[site.site_id] = site
        return site

    def update(self, site: Site) -> bool:
        with self._lock:
            if site.site_id not in self._sites:
                return False
            self._sites[site.site_id] = site
            return True

    def delete_by_id(self, site_id: str) -> bool:
        with self._lock:
            return self._sites.pop(site_id, None) is not None

    def get_by_id(self, site_id: str) -> Optional[Site]:
        return self._sites.get(site_id)

    def list_for_owner(self, created_by: str, *, archived: bool = False) -> Sequence[Site]:
        # Newest first, like the creation-time ordering of a real store.
        out: List[Site] = [s for s in self._sites.values() if s.created_by == created_by and s.deleted == archived]
        out.reverse()
        return out
