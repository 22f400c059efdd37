from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from werkzeug.security import check_password_hash

from ..core.exceptions import AuthenticationError
from .repository import UserRepository


def require_uid(uid: Optional[str]) -> str:
    """Guard for every data operation: nothing happens while signed out."""
    if not uid:
        raise AuthenticationError("Please sign in first")
    return str(uid)


@dataclass(frozen=True)
class SessionUser:
    """What we store into Flask session after login."""

    uid: str
    display_name: str


class AuthService:
    """Use case: authenticate a staff account (login)."""

    def __init__(self, users: UserRepository):
        self._users = users

    def authenticate(self, username: str, password: str) -> SessionUser:
        if not isinstance(username, str) or not isinstance(password, str):
            raise AuthenticationError("Wrong username or password")

        user = self._users.get_by_username(username.strip())
        if not user or not user.is_active:
            raise AuthenticationError("Wrong username or password")

        try:
            ok = check_password_hash(user.password_hash, password)
        except ValueError:
            # e.g. placeholder hashes like 'CHANGE_ME' or corrupted values
            ok = False

        if not ok:
            raise AuthenticationError("Wrong username or password")

        return SessionUser(uid=user.uid, display_name=user.display_name)

    def session_user(self, uid: Optional[str]) -> SessionUser:
        """Re-check a session uid against the account table (deactivated accounts are signed out)."""
        user = self._users.get_by_uid(require_uid(uid))
        if not user or not user.is_active:
            raise AuthenticationError("Please sign in first")
        return SessionUser(uid=user.uid, display_name=user.display_name)
