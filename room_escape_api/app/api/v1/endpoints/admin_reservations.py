"""
Administrative reservation endpoints for API v1.

Administrators can list and delete any reservation, book on behalf of
a member and search a member's reservations within a date range.
Bookings made here skip the past-date and duplicate-time checks that
apply to members.
"""

from datetime import date
from typing import List

from fastapi import APIRouter, Depends, Path, Query, status

from room_escape_api.app.api.deps import get_reservation_service
from room_escape_api.app.core.security import require_admin
from room_escape_api.app.models import MAX_ID
from room_escape_api.app.schemas.member import MemberProfile
from room_escape_api.app.schemas.reservation import (
    AdminReservationRequest,
    ReservationResponse,
    ReservationSearchRequest,
)
from room_escape_api.app.services.reservation_service import ReservationService

router = APIRouter()


@router.get("/", response_model=List[ReservationResponse])
async def list_reservations(
    service: ReservationService = Depends(get_reservation_service),
    current_member: MemberProfile = Depends(require_admin),
) -> List[ReservationResponse]:
    """List all reservations ordered by date."""
    return await service.list_reservations()


@router.post("/", response_model=ReservationResponse, status_code=status.HTTP_201_CREATED)
async def create_reservation(
    reservation: AdminReservationRequest,
    service: ReservationService = Depends(get_reservation_service),
    current_member: MemberProfile = Depends(require_admin),
) -> ReservationResponse:
    return await service.create_reservation_as_admin(reservation)


@router.get("/search", response_model=List[ReservationResponse])
async def search_reservations(
    member_id: int = Query(..., ge=1, le=MAX_ID),
    date_from: date = Query(...),
    date_to: date = Query(...),
    service: ReservationService = Depends(get_reservation_service),
    current_member: MemberProfile = Depends(require_admin),
) -> List[ReservationResponse]:
    """Return the member's reservations dated between both dates, inclusive."""
    request = ReservationSearchRequest(member_id=member_id, date_from=date_from, date_to=date_to)
    return await service.search_reservations(request)


@router.delete("/{reservation_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_reservation(
    reservation_id: int = Path(..., ge=1, le=MAX_ID, description="ID of the reservation"),
    service: ReservationService = Depends(get_reservation_service),
    current_member: MemberProfile = Depends(require_admin),
) -> None:
    """Delete a reservation.  Deleting an unknown id also returns 204."""
    await service.delete_reservation(reservation_id)
