"""Business logic for themes."""

import logging
from typing import List

from room_escape_api.app.core.exceptions import ThemeInUseError
from room_escape_api.app.models import Theme
from room_escape_api.app.repositories import ReservationRepository, ThemeRepository
from room_escape_api.app.schemas.theme import ThemeCreate, ThemeResponse

logger = logging.getLogger(__name__)


class ThemeService:
    def __init__(self, theme_repository: ThemeRepository, reservation_repository: ReservationRepository) -> None:
        self.theme_repository = theme_repository
        self.reservation_repository = reservation_repository

    async def create_theme(self, data: ThemeCreate) -> ThemeResponse:
        saved = self.theme_repository.save(
            Theme(id=None, name=data.name, description=data.description, thumbnail=data.thumbnail)
        )
        logger.info("Created theme %s (%s)", saved.id, saved.name)
        return ThemeResponse.from_theme(saved)

    async def list_themes(self) -> List[ThemeResponse]:
        return [ThemeResponse.from_theme(theme) for theme in self.theme_repository.find_all()]

    async def delete_theme(self, theme_id: int) -> None:
        """Delete a theme nobody has booked.  Unknown ids are ignored."""
        if self.reservation_repository.count_by_theme_id(theme_id) > 0:
            raise ThemeInUseError(f"Theme {theme_id} is used by existing reservations")
        self.theme_repository.delete_by_id(theme_id)
        logger.info("Deleted theme %s", theme_id)
