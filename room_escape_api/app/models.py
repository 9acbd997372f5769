"""Domain entities shared by the repositories and services."""

from dataclasses import dataclass
from datetime import date, time
from typing import Optional

ROLE_USER = "USER"
ROLE_ADMIN = "ADMIN"

# Largest id SQLite can store in an INTEGER column.
MAX_ID = 2**63 - 1


@dataclass(frozen=True)
class Member:
    id: Optional[int]
    name: str
    email: str
    password: str
    role: str = ROLE_USER

    @property
    def is_admin(self) -> bool:
        return self.role == ROLE_ADMIN


@dataclass(frozen=True)
class Time:
    """A bookable start time of day.  Two times are equal by value."""

    id: Optional[int]
    start_at: time


@dataclass(frozen=True)
class Theme:
    id: Optional[int]
    name: str
    description: str = ""
    thumbnail: str = ""


@dataclass(frozen=True)
class Reservation:
    """A member's booking of one theme at one time on one date.

    The member, time and theme are resolved from their tables when the
    reservation is read; the reservation row only stores their ids.
    """

    id: Optional[int]
    member: Member
    date: date
    time: Time
    theme: Theme

    def is_reserved_at_period(self, date_from: date, date_to: date) -> bool:
        """Return True if the reservation date lies in ``[date_from, date_to]``."""
        return date_from <= self.date <= date_to


__all__ = ["Member", "Time", "Theme", "Reservation", "ROLE_USER", "ROLE_ADMIN", "MAX_ID"]
