"""
Member-facing reservation endpoints for API v1.

Logged-in members book slots for themselves here.  The availability
route is public so that the booking page can show free times before
the visitor logs in.
"""

from datetime import date
from typing import List

from fastapi import APIRouter, Depends, Query, status

from room_escape_api.app.api.deps import get_reservation_service
from room_escape_api.app.core.security import get_current_member
from room_escape_api.app.models import MAX_ID
from room_escape_api.app.schemas.member import MemberProfile
from room_escape_api.app.schemas.reservation import (
    ReservationRequest,
    ReservationResponse,
    ReservationTimeAvailabilityResponse,
)
from room_escape_api.app.services.reservation_service import ReservationService

router = APIRouter()


@router.post("/", response_model=ReservationResponse, status_code=status.HTTP_201_CREATED)
async def create_reservation(
    reservation: ReservationRequest,
    service: ReservationService = Depends(get_reservation_service),
    current_member: MemberProfile = Depends(get_current_member),
) -> ReservationResponse:
    """Book a theme at a time on a date for the current member.

    Returns 404 for an unknown time or theme, 400 for a date in the
    past and 409 when the slot is already taken.
    """
    return await service.create_reservation(reservation, current_member)


@router.get("/availability", response_model=List[ReservationTimeAvailabilityResponse])
async def list_time_availability(
    theme_id: int = Query(..., ge=1, le=MAX_ID, description="ID of the theme"),
    reservation_date: date = Query(..., alias="date", description="Date to check"),
    service: ReservationService = Depends(get_reservation_service),
) -> List[ReservationTimeAvailabilityResponse]:
    """List every time with a ``booked`` flag for the theme on the date."""
    return await service.list_time_availability(theme_id, reservation_date)
