"""In-process live subscriptions.

After a write is confirmed, services re-read the full ordered collection and
publish it here. Subscribers always receive whole snapshots, never deltas.
"""
from __future__ import annotations

from collections import defaultdict
from threading import Lock
from typing import Any, Callable, Sequence

from ..core.app_logger import get_logger
from ..core.exceptions import StoreError

logger = get_logger(__name__)

Listener = Callable[[Sequence[Any]], None]


class SnapshotHub:
    def __init__(self):
        self._listeners: dict[tuple[str, str], list[Listener]] = defaultdict(list)
        self._lock = Lock()

    def subscribe(self, uid: str, collection: str, listener: Listener) -> Callable[[], None]:
        """Register ``listener``; returns a function that unsubscribes it."""

        key = (uid, collection)
        with self._lock:
            self._listeners[key].append(listener)

        def unsubscribe() -> None:
            with self._lock:
                if listener in self._listeners.get(key, []):
                    self._listeners[key].remove(listener)

        return unsubscribe

    def publish(self, uid: str, collection: str, snapshot: Sequence[Any]) -> None:
        with self._lock:
            listeners = list(self._listeners.get((uid, collection), []))
        items = tuple(snapshot)
        for listener in listeners:
            try:
                listener(items)
            except Exception:
                # One broken subscriber must not undo a confirmed write.
                logger.exception("snapshot listener failed for %s/%s", uid, collection)

    def refresh(self, uid: str, collection: str, read: Callable[[], Sequence[Any]]) -> bool:
        """Re-read a collection after a confirmed write and publish it.

        The write already happened, so a failed re-read is logged and the
        subscribers keep their previous snapshot until the next write.
        """
        try:
            snapshot = read()
        except StoreError:
            logger.exception("could not re-read %s/%s after write", uid, collection)
            return False
        self.publish(uid, collection, snapshot)
        return True

    def close(self) -> None:
        with self._lock:
            self._listeners.clear()
