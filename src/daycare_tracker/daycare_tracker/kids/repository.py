from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Child


class KidRepository(Protocol):
    """The ``kids`` collection of one user."""

    def get(self, uid: str, kid_id: str) -> Optional[Child]:
        raise NotImplementedError

    def create(self, uid: str, child: Child) -> None:
        raise NotImplementedError

    def set_active(self, uid: str, kid_id: str, *, active: bool) -> bool:
        raise NotImplementedError

    def list_all(self, uid: str) -> Sequence[Child]:
        """Full snapshot ordered by name."""

        raise NotImplementedError
