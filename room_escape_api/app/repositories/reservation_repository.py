"""
SQLite repository for reservations.

A reservation row only stores the ids of its member, time and theme.
Every read joins the referenced rows so that callers always receive
fully populated ``Reservation`` objects.
"""

import sqlite3
from dataclasses import replace
from datetime import date
from typing import List, Optional

from room_escape_api.app.models import Reservation

from .member_repository import row_to_member
from .theme_repository import row_to_theme
from .time_repository import row_to_time

_SELECT_RESERVATION = """
    SELECT
        r.id AS id,
        r.date AS date,
        m.id AS member_id,
        m.name AS member_name,
        m.email AS member_email,
        m.password AS member_password,
        m.role AS member_role,
        t.id AS time_id,
        t.start_at AS time_start_at,
        th.id AS theme_id,
        th.name AS theme_name,
        th.description AS theme_description,
        th.thumbnail AS theme_thumbnail
    FROM reservations r
    JOIN members m ON m.id = r.member_id
    JOIN times t ON t.id = r.time_id
    JOIN themes th ON th.id = r.theme_id
"""


def row_to_reservation(row: sqlite3.Row) -> Reservation:
    return Reservation(
        id=row["id"],
        member=row_to_member(row, prefix="member_"),
        date=date.fromisoformat(row["date"]),
        time=row_to_time(row, prefix="time_"),
        theme=row_to_theme(row, prefix="theme_"),
    )


class ReservationRepository:
    def __init__(self, conn: sqlite3.Connection) -> None:
        self.conn = conn

    def save(self, reservation: Reservation) -> Reservation:
        """Insert a reservation and return it with its assigned id.

        Raises ``sqlite3.IntegrityError`` when the theme/date/time slot is
        already taken or a referenced row does not exist.
        """
        cursor = self.conn.execute(
            "INSERT INTO reservations (member_id, date, time_id, theme_id) VALUES (?, ?, ?, ?)",
            (
                reservation.member.id,
                reservation.date.isoformat(),
                reservation.time.id,
                reservation.theme.id,
            ),
        )
        return replace(reservation, id=cursor.lastrowid)

    def find_by_id(self, reservation_id: int) -> Optional[Reservation]:
        row = self.conn.execute(
            _SELECT_RESERVATION + " WHERE r.id = ?", (reservation_id,)
        ).fetchone()
        return row_to_reservation(row) if row else None

    def find_all(self) -> List[Reservation]:
        rows = self.conn.execute(_SELECT_RESERVATION + " ORDER BY r.id ASC").fetchall()
        return [row_to_reservation(row) for row in rows]

    def find_all_order_by_date(self) -> List[Reservation]:
        rows = self.conn.execute(
            _SELECT_RESERVATION + " ORDER BY r.date ASC, r.id ASC"
        ).fetchall()
        return [row_to_reservation(row) for row in rows]

    def find_all_by_theme_and_date(self, theme_id: int, reservation_date: date) -> List[Reservation]:
        rows = self.conn.execute(
            _SELECT_RESERVATION + " WHERE r.theme_id = ? AND r.date = ? ORDER BY r.id ASC",
            (theme_id, reservation_date.isoformat()),
        ).fetchall()
        return [row_to_reservation(row) for row in rows]

    def find_ids_by_member_id(self, member_id: int) -> List[int]:
        rows = self.conn.execute(
            "SELECT id FROM reservations WHERE member_id = ? ORDER BY id ASC",
            (member_id,),
        ).fetchall()
        return [row["id"] for row in rows]

    def count_by_time_id(self, time_id: int) -> int:
        row = self.conn.execute(
            "SELECT COUNT(*) AS count FROM reservations WHERE time_id = ?", (time_id,)
        ).fetchone()
        return row["count"]

    def count_by_theme_id(self, theme_id: int) -> int:
        row = self.conn.execute(
            "SELECT COUNT(*) AS count FROM reservations WHERE theme_id = ?", (theme_id,)
        ).fetchone()
        return row["count"]

    def delete_by_id(self, reservation_id: int) -> None:
        self.conn.execute("DELETE FROM reservations WHERE id = ?", (reservation_id,))
