"""
Business logic for reservations.

The ``ReservationService`` resolves the referenced time, theme and
member, runs the admission rules from ``reservation_validator`` and
stores the reservation.  It also answers the read-side questions the
booking pages need: all reservations, per-time availability of a theme
on a date and a member's reservations within a period.

The duplicate check and the insert are separate statements.  Two
concurrent requests for the same slot are stopped by the unique
constraint on ``reservations(theme_id, date, time_id)``; the resulting
``IntegrityError`` is reported as ``DuplicateBookingError``.
"""

import logging
import sqlite3
from datetime import date
from typing import List

from room_escape_api.app.core.clock import Clock
from room_escape_api.app.core.exceptions import (
    DuplicateBookingError,
    MemberNotFoundError,
    ThemeNotFoundError,
    TimeNotFoundError,
)
from room_escape_api.app.models import Member, Reservation, Theme, Time
from room_escape_api.app.repositories import (
    MemberRepository,
    ReservationRepository,
    ThemeRepository,
    TimeRepository,
)
from room_escape_api.app.schemas.member import MemberProfile
from room_escape_api.app.schemas.reservation import (
    AdminReservationRequest,
    ReservationRequest,
    ReservationResponse,
    ReservationSearchRequest,
    ReservationTimeAvailabilityResponse,
)

from .reservation_validator import booked_times, is_time_booked, validate_reservation

logger = logging.getLogger(__name__)


class ReservationService:
    """Service for creating, listing, searching and deleting reservations."""

    def __init__(
        self,
        reservation_repository: ReservationRepository,
        time_repository: TimeRepository,
        theme_repository: ThemeRepository,
        member_repository: MemberRepository,
        clock: Clock,
    ) -> None:
        self.reservation_repository = reservation_repository
        self.time_repository = time_repository
        self.theme_repository = theme_repository
        self.member_repository = member_repository
        self.clock = clock

    async def create_reservation(
        self, request: ReservationRequest, member_profile: MemberProfile
    ) -> ReservationResponse:
        """Book a slot for the authenticated member.

        Rejects dates before today and slots that are already taken.
        """
        reservation_time = self._get_time(request.time_id)
        theme = self._get_theme(request.theme_id)
        existing = self.reservation_repository.find_all_by_theme_and_date(theme.id, request.date)
        validate_reservation(request.date, reservation_time, theme.id, existing, self.clock())

        member = Member(
            id=member_profile.id,
            name=member_profile.name,
            email=member_profile.email,
            password="",
            role=member_profile.role,
        )
        saved = self._save(Reservation(None, member, request.date, reservation_time, theme))
        logger.info(
            "Member %s booked theme %s at %s on %s (reservation %s)",
            member.id, theme.id, reservation_time.start_at, request.date, saved.id,
        )
        return ReservationResponse.from_reservation(saved)

    async def create_reservation_as_admin(self, request: AdminReservationRequest) -> ReservationResponse:
        """Book a slot on behalf of ``request.member_id``.

        Administrators may book past dates; the past-date and
        duplicate-time checks of the member path are not applied.  An
        exact duplicate slot is still refused by the storage constraint.
        """
        reservation_time = self._get_time(request.time_id)
        theme = self._get_theme(request.theme_id)
        member = self.member_repository.find_by_id(request.member_id)
        if member is None:
            raise MemberNotFoundError(request.member_id)

        saved = self._save(Reservation(None, member, request.date, reservation_time, theme))
        logger.info(
            "Admin booked theme %s at %s on %s for member %s (reservation %s)",
            theme.id, reservation_time.start_at, request.date, member.id, saved.id,
        )
        return ReservationResponse.from_reservation(saved)

    async def list_reservations(self) -> List[ReservationResponse]:
        """Return all reservations ordered by date ascending."""
        return [
            ReservationResponse.from_reservation(reservation)
            for reservation in self.reservation_repository.find_all_order_by_date()
        ]

    async def list_time_availability(
        self, theme_id: int, reservation_date: date
    ) -> List[ReservationTimeAvailabilityResponse]:
        """Return every time with a flag telling whether it is booked.

        One entry per stored time, ordered by start time.
        """
        all_times = self.time_repository.find_all_order_by_start_at()
        taken = booked_times(
            self.reservation_repository.find_all_by_theme_and_date(theme_id, reservation_date)
        )
        return [
            ReservationTimeAvailabilityResponse.from_time(reservation_time, is_time_booked(reservation_time, taken))
            for reservation_time in all_times
        ]

    async def search_reservations(self, request: ReservationSearchRequest) -> List[ReservationResponse]:
        """Return a member's reservations dated within the inclusive period.

        Results keep the order of the member's reservation ids rather
        than being sorted by date.
        """
        reservation_ids = self.reservation_repository.find_ids_by_member_id(request.member_id)
        reservations = [
            reservation
            for reservation in map(self.reservation_repository.find_by_id, reservation_ids)
            if reservation is not None
        ]
        return [
            ReservationResponse.from_reservation(reservation)
            for reservation in reservations
            if reservation.is_reserved_at_period(request.date_from, request.date_to)
        ]

    async def delete_reservation(self, reservation_id: int) -> None:
        """Delete a reservation.  Unknown ids are ignored."""
        self.reservation_repository.delete_by_id(reservation_id)
        logger.info("Deleted reservation %s", reservation_id)

    def _get_time(self, time_id: int) -> Time:
        reservation_time = self.time_repository.find_by_id(time_id)
        if reservation_time is None:
            raise TimeNotFoundError(time_id)
        return reservation_time

    def _get_theme(self, theme_id: int) -> Theme:
        theme = self.theme_repository.find_by_id(theme_id)
        if theme is None:
            raise ThemeNotFoundError(theme_id)
        return theme

    def _save(self, reservation: Reservation) -> Reservation:
        try:
            return self.reservation_repository.save(reservation)
        except sqlite3.IntegrityError as exc:
            # Foreign key failures are not slot conflicts.
            if "UNIQUE" not in str(exc):
                raise
            raise DuplicateBookingError(
                f"Theme {reservation.theme.id} is already booked at "
                f"{reservation.time.start_at.strftime('%H:%M')} on {reservation.date.isoformat()}"
            ) from exc
