"""
FastAPI dependencies that build services for a request.

All services of one request share the connection yielded by
``get_db``.  Tests replace ``get_clock`` through
``app.dependency_overrides`` to pin "today".
"""

import sqlite3

from fastapi import Depends

from room_escape_api.app.core.clock import Clock, system_clock
from room_escape_api.app.core.config import settings
from room_escape_api.app.core.db import get_db
from room_escape_api.app.repositories import (
    MemberRepository,
    ReservationRepository,
    ThemeRepository,
    TimeRepository,
)
from room_escape_api.app.services.member_service import MemberService
from room_escape_api.app.services.reservation_service import ReservationService
from room_escape_api.app.services.theme_service import ThemeService
from room_escape_api.app.services.time_service import TimeService


def get_clock() -> Clock:
    return system_clock(settings.timezone)


def get_reservation_service(
    conn: sqlite3.Connection = Depends(get_db),
    clock: Clock = Depends(get_clock),
) -> ReservationService:
    return ReservationService(
        ReservationRepository(conn),
        TimeRepository(conn),
        ThemeRepository(conn),
        MemberRepository(conn),
        clock,
    )


def get_time_service(conn: sqlite3.Connection = Depends(get_db)) -> TimeService:
    return TimeService(TimeRepository(conn), ReservationRepository(conn))


def get_theme_service(conn: sqlite3.Connection = Depends(get_db)) -> ThemeService:
    return ThemeService(ThemeRepository(conn), ReservationRepository(conn))


def get_member_service(conn: sqlite3.Connection = Depends(get_db)) -> MemberService:
    return MemberService(MemberRepository(conn))
