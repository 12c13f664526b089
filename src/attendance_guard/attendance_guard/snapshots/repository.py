from __future__ import annotations

from typing import Optional, Protocol

from .model import UserSnapshot


class SnapshotRepository(Protocol):
    """Key-value store: one snapshot document per user id."""

    def get(self, user_id: int) -> Optional[UserSnapshot]:
        raise NotImplementedError

    def save(self, user_id: int, snapshot: UserSnapshot) -> None:
        raise NotImplementedError
