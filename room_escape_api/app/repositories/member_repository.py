"""SQLite repository for members."""

import sqlite3
from dataclasses import replace
from typing import List, Optional

from room_escape_api.app.models import Member


def row_to_member(row: sqlite3.Row, prefix: str = "") -> Member:
    return Member(
        id=row[f"{prefix}id"],
        name=row[f"{prefix}name"],
        email=row[f"{prefix}email"],
        password=row[f"{prefix}password"],
        role=row[f"{prefix}role"],
    )


class MemberRepository:
    def __init__(self, conn: sqlite3.Connection) -> None:
        self.conn = conn

    def save(self, member: Member) -> Member:
        """Insert a new member and return it with its assigned id.

        Raises ``sqlite3.IntegrityError`` if the email is already taken.
        """
        cursor = self.conn.execute(
            "INSERT INTO members (name, email, password, role) VALUES (?, ?, ?, ?)",
            (member.name, member.email, member.password, member.role),
        )
        return replace(member, id=cursor.lastrowid)

    def find_by_id(self, member_id: int) -> Optional[Member]:
        row = self.conn.execute(
            "SELECT id, name, email, password, role FROM members WHERE id = ?",
            (member_id,),
        ).fetchone()
        return row_to_member(row) if row else None

    def find_by_email(self, email: str) -> Optional[Member]:
        row = self.conn.execute(
            "SELECT id, name, email, password, role FROM members WHERE email = ?",
            (email,),
        ).fetchone()
        return row_to_member(row) if row else None

    def exists_by_email(self, email: str) -> bool:
        row = self.conn.execute(
            "SELECT 1 FROM members WHERE email = ?", (email,)
        ).fetchone()
        return row is not None

    def find_all(self) -> List[Member]:
        rows = self.conn.execute(
            "SELECT id, name, email, password, role FROM members ORDER BY id ASC"
        ).fetchall()
        return [row_to_member(row) for row in rows]
