from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Site


class SiteRepository(Protocol):
    def get_by_id(self, site_id: str) -> Optional[Site]:
        """Return the site whether or not it is archived."""

        raise NotImplementedError

    def add(self, site: Site) -> Site:
        raise NotImplementedError

    def update(self, site: Site) -> bool:
        raise NotImplementedError

    def delete_by_id(self, site_id: str) -> bool:
        raise NotImplementedError

    def list_for_owner(self, created_by: str, *, archived: bool = False) -> Sequence[Site]:
        raise NotImplementedError
