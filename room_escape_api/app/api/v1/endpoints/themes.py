"""Theme endpoints.  Changes require the admin role."""

from typing import List

from fastapi import APIRouter, Depends, Path, status

from room_escape_api.app.api.deps import get_theme_service
from room_escape_api.app.core.security import require_admin
from room_escape_api.app.models import MAX_ID
from room_escape_api.app.schemas.member import MemberProfile
from room_escape_api.app.schemas.theme import ThemeCreate, ThemeResponse
from room_escape_api.app.services.theme_service import ThemeService

router = APIRouter()


@router.get("/", response_model=List[ThemeResponse])
async def list_themes(service: ThemeService = Depends(get_theme_service)) -> List[ThemeResponse]:
    return await service.list_themes()


@router.post("/", response_model=ThemeResponse, status_code=status.HTTP_201_CREATED)
async def create_theme(
    data: ThemeCreate,
    service: ThemeService = Depends(get_theme_service),
    current_member: MemberProfile = Depends(require_admin),
) -> ThemeResponse:
    return await service.create_theme(data)


@router.delete("/{theme_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_theme(
    theme_id: int = Path(..., ge=1, le=MAX_ID, description="ID of the theme to delete"),
    service: ThemeService = Depends(get_theme_service),
    current_member: MemberProfile = Depends(require_admin),
) -> None:
    """Delete a theme.  Returns 409 while reservations use it."""
    await service.delete_theme(theme_id)
