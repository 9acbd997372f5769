"""SQLite repository for themes."""

import sqlite3
from dataclasses import replace
from typing import List, Optional

from room_escape_api.app.models import Theme


def row_to_theme(row: sqlite3.Row, prefix: str = "") -> Theme:
    return Theme(
        id=row[f"{prefix}id"],
        name=row[f"{prefix}name"],
        description=row[f"{prefix}description"],
        thumbnail=row[f"{prefix}thumbnail"],
    )


class ThemeRepository:
    def __init__(self, conn: sqlite3.Connection) -> None:
        self.conn = conn

    def save(self, theme: Theme) -> Theme:
        cursor = self.conn.execute(
            "INSERT INTO themes (name, description, thumbnail) VALUES (?, ?, ?)",
            (theme.name, theme.description, theme.thumbnail),
        )
        return replace(theme, id=cursor.lastrowid)

    def find_by_id(self, theme_id: int) -> Optional[Theme]:
        row = self.conn.execute(
            "SELECT id, name, description, thumbnail FROM themes WHERE id = ?",
            (theme_id,),
        ).fetchone()
        return row_to_theme(row) if row else None

    def find_all(self) -> List[Theme]:
        rows = self.conn.execute(
            "SELECT id, name, description, thumbnail FROM themes ORDER BY id ASC"
        ).fetchall()
        return [row_to_theme(row) for row in rows]

    def delete_by_id(self, theme_id: int) -> None:
        self.conn.execute("DELETE FROM themes WHERE id = ?", (theme_id,))
