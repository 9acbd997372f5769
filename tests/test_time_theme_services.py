from datetime import date, time

import pytest

from room_escape_api.app.core.exceptions import DuplicateTimeError, ThemeInUseError, TimeInUseError
from room_escape_api.app.models import Reservation
from room_escape_api.app.repositories import ReservationRepository, ThemeRepository, TimeRepository
from room_escape_api.app.schemas.theme import ThemeCreate
from room_escape_api.app.schemas.time import TimeCreate
from room_escape_api.app.services.theme_service import ThemeService
from room_escape_api.app.services.time_service import TimeService

pytestmark = pytest.mark.anyio


@pytest.fixture()
def time_service(conn) -> TimeService:
    return TimeService(TimeRepository(conn), ReservationRepository(conn))


@pytest.fixture()
def theme_service(conn) -> ThemeService:
    return ThemeService(ThemeRepository(conn), ReservationRepository(conn))


async def test_create_and_list_times_in_order(time_service) -> None:
    await time_service.create_time(TimeCreate(start_at=time(15, 0)))
    await time_service.create_time(TimeCreate(start_at=time(10, 0)))

    times = await time_service.list_times()

    assert [t.start_at for t in times] == [time(10, 0), time(15, 0)]


async def test_duplicate_start_time_is_rejected(time_service) -> None:
    await time_service.create_time(TimeCreate(start_at=time(10, 0)))

    with pytest.raises(DuplicateTimeError):
        await time_service.create_time(TimeCreate(start_at=time(10, 0)))


async def test_delete_unused_time(time_service) -> None:
    created = await time_service.create_time(TimeCreate(start_at=time(10, 0)))

    await time_service.delete_time(created.id)
    await time_service.delete_time(created.id)

    assert await time_service.list_times() == []


async def test_time_used_by_reservation_cannot_be_deleted(conn, time_service, member, noon, theme) -> None:
    ReservationRepository(conn).save(Reservation(None, member, date(2030, 3, 1), noon, theme))

    with pytest.raises(TimeInUseError):
        await time_service.delete_time(noon.id)


async def test_create_list_and_delete_themes(theme_service) -> None:
    created = await theme_service.create_theme(ThemeCreate(name="Haunted House", description="Boo"))
    assert [t.name for t in await theme_service.list_themes()] == ["Haunted House"]

    await theme_service.delete_theme(created.id)

    assert await theme_service.list_themes() == []


async def test_booked_theme_cannot_be_deleted(conn, theme_service, member, noon, theme) -> None:
    ReservationRepository(conn).save(Reservation(None, member, date(2030, 3, 1), noon, theme))

    with pytest.raises(ThemeInUseError):
        await theme_service.delete_theme(theme.id)
