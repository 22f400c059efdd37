from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class User:
    """Domain entity: a staff account.

    Note: ``uid`` is opaque to the rest of the system; it only scopes data.
    """

    uid: str
    username: str
    display_name: str
    password_hash: str
    is_active: bool = True
