from __future__ import annotations

from typing import Any, Mapping, Protocol, Sequence

from .model import RateSet


class RateRepository(Protocol):
    """The ``reimbursementRates`` collection, keyed by the year as a string."""

    def put(self, uid: str, year_key: str, document: Mapping[str, Any]) -> None:
        raise NotImplementedError

    def list_all(self, uid: str) -> Sequence[RateSet]:
        """Full snapshot ordered by year."""

        raise NotImplementedError
