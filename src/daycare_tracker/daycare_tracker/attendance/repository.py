from __future__ import annotations

from typing import Any, Mapping, Optional, Protocol, Sequence

from .model import AttendanceRecord


class AttendanceRepository(Protocol):
    """The ``records`` collection of one user, keyed by ``date_childId``."""

    def get(self, uid: str, key: str) -> Optional[AttendanceRecord]:
        raise NotImplementedError

    def put(self, uid: str, key: str, document: Mapping[str, Any]) -> None:
        """Write ``document`` over the stored one (set with merge).

        Fields not in ``document`` keep their stored value.
        """

        raise NotImplementedError

    def list_all(self, uid: str) -> Sequence[AttendanceRecord]:
        """Full snapshot ordered by date."""

        raise NotImplementedError

    def list_for_date(self, uid: str, day: str) -> Sequence[AttendanceRecord]:
        raise NotImplementedError
