from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Child:
    """Domain entity: a child enrolled at the daycare.

    Note: ``active=False`` is a soft delete. The child disappears from the
    daily view but every attendance record is kept.
    """

    kid_id: str
    name: str
    active: bool = True
    created_at: str = ""
