from __future__ import annotations

import uuid
from datetime import datetime
from typing import Optional, Sequence

from ..common.clock import now_local
from ..common.validators import require_non_empty
from ..core.app_logger import get_logger
from ..core.constants import KIDS
from ..core.exceptions import ValidationError
from ..realtime.hub import SnapshotHub
from ..users.service import require_uid
from .model import Child
from .repository import KidRepository

logger = get_logger(__name__)


class KidService:
    """Use case: manage the children list (add, deactivate)."""

    def __init__(self, kids: KidRepository, hub: Optional[SnapshotHub] = None):
        self._kids = kids
        self._hub = hub

    def add_child(self, uid: Optional[str], name: str, *, now: Optional[datetime] = None) -> Child:
        uid = require_uid(uid)
        name = require_non_empty(name, "Child name")
        now = now or now_local()

        child = Child(kid_id=uuid.uuid4().hex, name=name, active=True, created_at=now.isoformat(timespec="seconds"))
        self._kids.create(uid, child)
        logger.info("added child %s (%s)", child.kid_id, child.name)
        self._publish(uid)
        return child

    def deactivate_child(self, uid: Optional[str], kid_id: str) -> None:
        uid = require_uid(uid)
        child = self._kids.get(uid, kid_id)
        if not child:
            raise ValidationError("Child does not exist")
        if not child.active:
            return

        self._kids.set_active(uid, kid_id, active=False)
        logger.info("deactivated child %s", kid_id)
        self._publish(uid)

    def get_child(self, uid: Optional[str], kid_id: str) -> Child:
        uid = require_uid(uid)
        child = self._kids.get(uid, kid_id)
        if not child:
            raise ValidationError("Child does not exist")
        return child

    def list_children(self, uid: Optional[str], *, include_inactive: bool = False) -> Sequence[Child]:
        uid = require_uid(uid)
        kids = self._kids.list_all(uid)
        if include_inactive:
            return list(kids)
        return [k for k in kids if k.active]

    def _publish(self, uid: str) -> None:
        if self._hub:
            self._hub.refresh(uid, KIDS, lambda: self._kids.list_all(uid))
