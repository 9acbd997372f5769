"""Business logic for reservation times."""

import logging
from typing import List

from room_escape_api.app.core.exceptions import DuplicateTimeError, TimeInUseError
from room_escape_api.app.models import Time
from room_escape_api.app.repositories import ReservationRepository, TimeRepository
from room_escape_api.app.schemas.time import TimeCreate, TimeResponse

logger = logging.getLogger(__name__)


class TimeService:
    """Manage the start times members can book."""

    def __init__(self, time_repository: TimeRepository, reservation_repository: ReservationRepository) -> None:
        self.time_repository = time_repository
        self.reservation_repository = reservation_repository

    async def create_time(self, data: TimeCreate) -> TimeResponse:
        """Add a start time.  Each start time may exist only once."""
        if self.time_repository.count_by_start_at(data.start_at) > 0:
            raise DuplicateTimeError(f"Start time {data.start_at.strftime('%H:%M')} already exists")
        saved = self.time_repository.save(Time(id=None, start_at=data.start_at))
        logger.info("Created time %s at %s", saved.id, saved.start_at)
        return TimeResponse.from_time(saved)

    async def list_times(self) -> List[TimeResponse]:
        return [TimeResponse.from_time(t) for t in self.time_repository.find_all_order_by_start_at()]

    async def delete_time(self, time_id: int) -> None:
        """Delete a time that no reservation uses.  Unknown ids are ignored."""
        if self.reservation_repository.count_by_time_id(time_id) > 0:
            raise TimeInUseError(f"Time {time_id} is used by existing reservations")
        self.time_repository.delete_by_id(time_id)
        logger.info("Deleted time %s", time_id)
