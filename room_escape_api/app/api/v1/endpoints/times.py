"""Reservation time endpoints.  Changes require the admin role."""

from typing import List

from fastapi import APIRouter, Depends, Path, status

from room_escape_api.app.api.deps import get_time_service
from room_escape_api.app.core.security import require_admin
from room_escape_api.app.models import MAX_ID
from room_escape_api.app.schemas.member import MemberProfile
from room_escape_api.app.schemas.time import TimeCreate, TimeResponse
from room_escape_api.app.services.time_service import TimeService

router = APIRouter()


@router.get("/", response_model=List[TimeResponse])
async def list_times(service: TimeService = Depends(get_time_service)) -> List[TimeResponse]:
    """List all start times in ascending order."""
    return await service.list_times()


@router.post("/", response_model=TimeResponse, status_code=status.HTTP_201_CREATED)
async def create_time(
    data: TimeCreate,
    service: TimeService = Depends(get_time_service),
    current_member: MemberProfile = Depends(require_admin),
) -> TimeResponse:
    """Add a start time.  Returns 409 if the start time already exists."""
    return await service.create_time(data)


@router.delete("/{time_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_time(
    time_id: int = Path(..., ge=1, le=MAX_ID, description="ID of the time to delete"),
    service: TimeService = Depends(get_time_service),
    current_member: MemberProfile = Depends(require_admin),
) -> None:
    """Delete a start time.  Returns 409 while reservations use it."""
    await service.delete_time(time_id)
