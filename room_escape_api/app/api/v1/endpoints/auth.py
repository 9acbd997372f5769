"""Login endpoints."""

from fastapi import APIRouter, Depends

from room_escape_api.app.api.deps import get_member_service
from room_escape_api.app.core.security import get_current_member
from room_escape_api.app.schemas.member import LoginRequest, MemberProfile, TokenResponse
from room_escape_api.app.services.member_service import MemberService

router = APIRouter()


@router.post("/login", response_model=TokenResponse)
async def login(
    credentials: LoginRequest,
    service: MemberService = Depends(get_member_service),
) -> TokenResponse:
    """Exchange email and password for a bearer token."""
    return await service.login(credentials)


@router.get("/login/check", response_model=MemberProfile)
async def check_login(current_member: MemberProfile = Depends(get_current_member)) -> MemberProfile:
    """Return the member the presented token belongs to."""
    return current_member
