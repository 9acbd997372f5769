"""
Record store for the reservation domain.

Each entity (members, times, themes, reservations) has its own
repository class wrapping a SQLite connection.  Repositories only
translate between rows and the dataclasses in ``app.models``; business
rules live in the service layer.
"""

from .member_repository import MemberRepository
from .reservation_repository import ReservationRepository
from .theme_repository import ThemeRepository
from .time_repository import TimeRepository

__all__ = ["MemberRepository", "ReservationRepository", "ThemeRepository", "TimeRepository"]
