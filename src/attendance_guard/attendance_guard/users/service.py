from __future__ import annotations

import logging
from dataclasses import dataclass

from werkzeug.security import check_password_hash, generate_password_hash

from ..core.exceptions import AuthenticationError, ValidationError
from ..snapshots.model import UserSnapshot
from ..snapshots.repository import SnapshotRepository
from .repository import UserRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SessionUser:
    """What we store into Flask session after login."""

    user_id: int
    username: str


class AuthService:
    """Use case: sign up and authenticate users."""

    def __init__(self, users: UserRepository, snapshots: SnapshotRepository):
        self._users = users
        self._snapshots = snapshots

    def signup(self, username: str, password: str) -> SessionUser:
        username, password = self._require_credentials(username, password)

        if self._users.get_by_username(username):
            raise ValidationError("User already exists")

        user_id = self._users.create_user(username=username, password_hash=generate_password_hash(password))
        # New accounts start with an empty snapshot document.
        self._snapshots.save(user_id, UserSnapshot.empty())
        logger.info("Created account %s (user_id=%s)", username, user_id)
        return SessionUser(user_id=user_id, username=username)

    def authenticate(self, username: str, password: str) -> SessionUser:
        username, password = self._require_credentials(username, password)

        user = self._users.get_by_username(username)
        if not user:
            raise AuthenticationError("Invalid credentials")

        try:
            ok = check_password_hash(user.password_hash, password)
        except ValueError:
            # e.g. placeholder or corrupted hash values
            ok = False

        if not ok:
            raise AuthenticationError("Invalid credentials")

        return SessionUser(user_id=user.user_id, username=user.username)

    @staticmethod
    def _require_credentials(username: str, password: str) -> tuple[str, str]:
        username = (username or "").strip()
        if not username or not password:
            raise ValidationError("Please fill in all fields")
        return username, password
