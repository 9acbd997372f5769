"""SQLite repository for reservation times."""

import sqlite3
from dataclasses import replace
from datetime import time
from typing import List, Optional

from room_escape_api.app.models import Time

TIME_FORMAT = "%H:%M"


def format_start_at(start_at: time) -> str:
    return start_at.strftime(TIME_FORMAT)


def row_to_time(row: sqlite3.Row, prefix: str = "") -> Time:
    return Time(id=row[f"{prefix}id"], start_at=time.fromisoformat(row[f"{prefix}start_at"]))


class TimeRepository:
    def __init__(self, conn: sqlite3.Connection) -> None:
        self.conn = conn

    def save(self, reservation_time: Time) -> Time:
        start_at = format_start_at(reservation_time.start_at)
        cursor = self.conn.execute("INSERT INTO times (start_at) VALUES (?)", (start_at,))
        return replace(reservation_time, id=cursor.lastrowid, start_at=time.fromisoformat(start_at))

    def find_by_id(self, time_id: int) -> Optional[Time]:
        row = self.conn.execute(
            "SELECT id, start_at FROM times WHERE id = ?", (time_id,)
        ).fetchone()
        return row_to_time(row) if row else None

    def find_all_order_by_start_at(self) -> List[Time]:
        rows = self.conn.execute(
            "SELECT id, start_at FROM times ORDER BY start_at ASC, id ASC"
        ).fetchall()
        return [row_to_time(row) for row in rows]

    def count_by_start_at(self, start_at: time) -> int:
        row = self.conn.execute(
            "SELECT COUNT(*) AS count FROM times WHERE start_at = ?",
            (format_start_at(start_at),),
        ).fetchone()
        return row["count"]

    def delete_by_id(self, time_id: int) -> None:
        self.conn.execute("DELETE FROM times WHERE id = ?", (time_id,))
