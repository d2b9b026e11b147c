from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Site:
    """Domain entity: a construction site owned by the tenant that created it."""

    site_id: str
    name: str
    created_by: str
    location: Optional[str] = None
    notes: Optional[str] = None
    deleted: bool = False
