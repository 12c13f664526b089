from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class User:
    """Domain entity: account owning one snapshot document.

    Plain data object (no DB access code).
    """

    user_id: int
    username: str
    password_hash: str
    created_at: Optional[datetime] = None
