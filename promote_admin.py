#!/usr/bin/env python3
"""
Grant the ADMIN role to a member in the Room Escape SQLite database.

Members register through the API with the USER role.  Use this script
to turn an existing member into an administrator, or to demote one
again with ``--role USER``.

Usage:
    python promote_admin.py --db ./room_escape_api/room_escape.db --email admin@example.com
"""

import argparse
import os
import sqlite3
import sys
from typing import Optional, Sequence

ROLES = ("ADMIN", "USER")


def main(argv: Optional[Sequence[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="Change a Room Escape member's role (SQLite).")
    ap.add_argument("--db", required=True, help="Path to SQLite DB file (e.g., ./room_escape_api/room_escape.db)")
    ap.add_argument("--email", required=True, help="Email of the member to update")
    ap.add_argument("--role", default="ADMIN", choices=ROLES, help="Role to assign (default: ADMIN)")
    args = ap.parse_args(argv)

    if not os.path.exists(args.db):
        print(f"[!] DB not found: {args.db}", file=sys.stderr)
        return 1

    conn = sqlite3.connect(args.db)
    try:
        cur = conn.cursor()
        cur.execute("SELECT id FROM members WHERE email = ?", (args.email,))
        if cur.fetchone() is None:
            print(f"[!] No member found with email: {args.email}", file=sys.stderr)
            return 2

        cur.execute("UPDATE members SET role = ? WHERE email = ?", (args.role, args.email))
        conn.commit()
        print(f"[+] {args.email} is now {args.role}")
        return 0
    finally:
        conn.close()


if __name__ == "__main__":
    sys.exit(main())
