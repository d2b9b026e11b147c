from __future__ import annotations

import logging
import uuid
from dataclasses import replace
from typing import Optional, Sequence

from ..common.validators import require_non_empty
from ..core.exceptions import NotFoundError
from .model import Site
from .repository import SiteRepository

logger = logging.getLogger(__name__)


class SiteService:
    """Use cases: create, edit, archive, restore and delete sites.

    Archiving only hides a site from the active list; its workers, attendance
    and reports stay reachable.
    """

    def __init__(self, sites: SiteRepository):
        self._sites = sites

    def get_site(self, site_id: str) -> Site:
        site = self._sites.get_by_id(site_id)
        if not site:
            raise NotFoundError(f"Site {site_id} not found")
        return site

    def create_site(
        self,
        *,
        name: str,
        created_by: str,
        location: Optional[str] = None,
        notes: Optional[str] = None,
    ) -> Site:
        site = self._sites.add(
            Site(
                site_id=uuid.uuid4().hex,
                name=require_non_empty(name, "name"),
                created_by=require_non_empty(created_by, "created_by"),
                location=location,
                notes=notes,
            )
        )
        logger.info("Created site %s (%s)", site.site_id, site.name)
        return site

    def update_site(
        self,
        site_id: str,
        *,
        name: Optional[str] = None,
        location: Optional[str] = None,
        notes: Optional[str] = None,
    ) -> Site:
        """Only non-empty values replace the current ones."""
        current = self.get_site(site_id)
        updated = replace(
            current,
            name=name.strip() if name and name.strip() else current.name,
            location=location or current.location,
            notes=notes or current.notes,
        )
        self._save(updated)
        return updated

    def archive_site(self, site_id: str) -> Site:
        site = replace(self.get_site(site_id), deleted=True)
        self._save(site)
        logger.info("Archived site %s", site_id)
        return site

    def restore_site(self, site_id: str) -> Site:
        site = replace(self.get_site(site_id), deleted=False)
        self._save(site)
        logger.info("Restored site %s", site_id)
        return site

    def delete_site(self, site_id: str) -> None:
        if not self._sites.delete_by_id(site_id):
            raise NotFoundError(f"Site {site_id} not found")
        logger.info("Deleted site %s", site_id)

    def list_active(self, created_by: str) -> Sequence[Site]:
        return self._sites.list_for_owner(created_by, archived=False)

    def list_archived(self, created_by: str) -> Sequence[Site]:
        return self._sites.list_for_owner(created_by, archived=True)

    def _save(self, site: Site) -> None:
        if not self._sites.update(site):
            raise NotFoundError(f"Site {site.site_id} not found")
