from __future__ import annotations

import json
from typing import Optional

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone
from .model import UserSnapshot
from .repository import SnapshotRepository


class MySQLSnapshotRepository(SnapshotRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get(self, user_id: int) -> Optional[UserSnapshot]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT payload FROM user_data WHERE user_id=%s", (user_id,))
            row = fetchone(cur)
            if not row:
                return None
            return UserSnapshot.from_document(json.loads(row["payload"]))

    def save(self, user_id: int, snapshot: UserSnapshot) -> None:
        payload = json.dumps(snapshot.to_document(), ensure_ascii=False)
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO user_data (user_id, payload)
                VALUES (%s, %s)
                ON DUPLICATE KEY UPDATE payload=VALUES(payload)
                """,
                (user_id, payload),
            )
