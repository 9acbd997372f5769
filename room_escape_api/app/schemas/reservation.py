"""
Pydantic models for reservations.

``ReservationRequest`` is what a logged-in member sends to book a slot
for themselves; ``AdminReservationRequest`` additionally names the
member the reservation is made for.  Responses embed short projections
of the member, time and theme.
"""

import datetime

from pydantic import BaseModel, Field

from room_escape_api.app.models import MAX_ID, Reservation, Time

from .member import MemberSummary
from .theme import ThemeResponse
from .time import TimeResponse


class ReservationRequest(BaseModel):
    date: datetime.date = Field(..., examples=["2030-01-01"])
    time_id: int = Field(..., ge=1, le=MAX_ID, examples=[1])
    theme_id: int = Field(..., ge=1, le=MAX_ID, examples=[1])


class AdminReservationRequest(ReservationRequest):
    member_id: int = Field(..., ge=1, le=MAX_ID, examples=[1])


class ReservationSearchRequest(BaseModel):
    """Period search over one member's reservations (both ends inclusive)."""

    member_id: int = Field(..., ge=1, le=MAX_ID)
    date_from: datetime.date
    date_to: datetime.date


class ReservationResponse(BaseModel):
    id: int
    member: MemberSummary
    date: datetime.date
    time: TimeResponse
    theme: ThemeResponse

    @classmethod
    def from_reservation(cls, reservation: Reservation) -> "ReservationResponse":
        return cls(
            id=reservation.id,
            member=MemberSummary.from_member(reservation.member),
            date=reservation.date,
            time=TimeResponse.from_time(reservation.time),
            theme=ThemeResponse.from_theme(reservation.theme),
        )


class ReservationTimeAvailabilityResponse(BaseModel):
    time_id: int
    start_at: datetime.time
    booked: bool

    @classmethod
    def from_time(cls, reservation_time: Time, booked: bool) -> "ReservationTimeAvailabilityResponse":
        return cls(time_id=reservation_time.id, start_at=reservation_time.start_at, booked=booked)
