"""
Member endpoints for API v1.

Anyone may register; listing members is reserved for administrators,
who need member ids to book on someone's behalf.
"""

from typing import List

from fastapi import APIRouter, Depends, Path, status

from room_escape_api.app.api.deps import get_member_service
from room_escape_api.app.core.security import require_admin
from room_escape_api.app.models import MAX_ID
from room_escape_api.app.schemas.member import MemberCreate, MemberProfile
from room_escape_api.app.services.member_service import MemberService

router = APIRouter()


@router.post("/", response_model=MemberProfile, status_code=status.HTTP_201_CREATED)
async def signup(
    member: MemberCreate,
    service: MemberService = Depends(get_member_service),
) -> MemberProfile:
    """Register a new member.  Returns 409 if the email is taken."""
    return await service.signup(member)


@router.get("/", response_model=List[MemberProfile])
async def list_members(
    service: MemberService = Depends(get_member_service),
    current_member: MemberProfile = Depends(require_admin),
) -> List[MemberProfile]:
    return await service.list_members()


@router.get("/{member_id}", response_model=MemberProfile)
async def get_member(
    member_id: int = Path(..., ge=1, le=MAX_ID, description="ID of the member"),
    service: MemberService = Depends(get_member_service),
    current_member: MemberProfile = Depends(require_admin),
) -> MemberProfile:
    return await service.get_profile(member_id)
