from __future__ import annotations

from datetime import date
from typing import Optional

import pytest

from src.attendance_guard.attendance_guard.snapshots.model import UserSnapshot


class InMemorySnapshots:
    """Stores JSON-shaped documents, like the real key-value store."""

    def __init__(self):
        self.documents: dict[int, dict] = {}
        self.saves = 0

    def get(self, user_id: int) -> Optional[UserSnapshot]:
        doc = self.documents.get(user_id)
        return UserSnapshot.from_document(doc) if doc is not None else None

    def save(self, user_id: int, snapshot: UserSnapshot) -> None:
        self.saves += 1
        self.documents[user_id] = snapshot.to_document()


@pytest.fixture
def fixed_today() -> date:
    return date(2024, 1, 10)


@pytest.fixture
def snapshots() -> InMemorySnapshots:
    return InMemorySnapshots()
