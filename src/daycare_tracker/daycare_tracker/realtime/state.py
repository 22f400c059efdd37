from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Sequence

from ..core.constants import KIDS, RATES, RECORDS
from .hub import SnapshotHub


@dataclass
class LocalState:
    """Client-side copy of one user's collections, fed by the hub.

    Every snapshot replaces the whole collection; nothing is patched in place,
    and nothing changes here before the store has confirmed a write.
    """

    uid: str
    kids: tuple = ()
    records: tuple = ()
    rates: tuple = ()
    _unsubscribers: list[Callable[[], None]] = field(default_factory=list, repr=False)

    def attach(self, hub: SnapshotHub) -> "LocalState":
        for collection, attr in ((KIDS, "kids"), (RECORDS, "records"), (RATES, "rates")):
            self._unsubscribers.append(hub.subscribe(self.uid, collection, self._replacer(attr)))
        return self

    def detach(self) -> None:
        for unsubscribe in self._unsubscribers:
            unsubscribe()
        self._unsubscribers.clear()

    def _replacer(self, attr: str) -> Callable[[Sequence[Any]], None]:
        def apply(snapshot: Sequence[Any]) -> None:
            setattr(self, attr, tuple(snapshot))

        return apply
