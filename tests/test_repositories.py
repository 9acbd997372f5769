from datetime import date, time

from room_escape_api.app.models import Reservation, Time
from room_escape_api.app.repositories import ReservationRepository, TimeRepository


def test_save_and_find_reservation(conn, member, noon, theme) -> None:
    repository = ReservationRepository(conn)

    saved = repository.save(Reservation(None, member, date(2030, 3, 1), noon, theme))

    assert saved.id is not None
    assert repository.find_by_id(saved.id) == saved
    assert repository.find_all() == [saved]


def test_find_all_orders_by_date(conn, member, noon, theme) -> None:
    repository = ReservationRepository(conn)
    later = repository.save(Reservation(None, member, date(2030, 3, 2), noon, theme))
    earlier = repository.save(Reservation(None, member, date(2030, 3, 1), noon, theme))

    assert [r.id for r in repository.find_all_order_by_date()] == [earlier.id, later.id]


def test_delete_reservation(conn, member, noon, theme) -> None:
    repository = ReservationRepository(conn)
    saved = repository.save(Reservation(None, member, date(2030, 3, 1), noon, theme))

    repository.delete_by_id(saved.id)

    assert repository.find_by_id(saved.id) is None


def test_count_reservations_by_time(conn, member, noon, evening, theme) -> None:
    repository = ReservationRepository(conn)
    repository.save(Reservation(None, member, date(2030, 3, 1), noon, theme))

    assert repository.count_by_time_id(noon.id) == 1
    assert repository.count_by_time_id(evening.id) == 0
    assert repository.count_by_theme_id(theme.id) == 1


def test_find_by_theme_and_date(conn, member, noon, evening, theme, other_theme) -> None:
    repository = ReservationRepository(conn)
    wanted = repository.save(Reservation(None, member, date(2030, 3, 1), noon, theme))
    repository.save(Reservation(None, member, date(2030, 3, 2), noon, theme))
    repository.save(Reservation(None, member, date(2030, 3, 1), evening, other_theme))

    assert repository.find_all_by_theme_and_date(theme.id, date(2030, 3, 1)) == [wanted]


def test_find_ids_by_member(conn, member, other_member, noon, evening, theme) -> None:
    repository = ReservationRepository(conn)
    first = repository.save(Reservation(None, member, date(2030, 3, 1), noon, theme))
    repository.save(Reservation(None, other_member, date(2030, 3, 1), evening, theme))
    second = repository.save(Reservation(None, member, date(2030, 3, 2), noon, theme))

    assert repository.find_ids_by_member_id(member.id) == [first.id, second.id]


def test_times_are_ordered_by_start_and_counted(conn) -> None:
    repository = TimeRepository(conn)

    late = repository.save(Time(None, time(20, 0)))
    early = repository.save(Time(None, time(9, 30)))

    assert repository.find_all_order_by_start_at() == [early, late]
    assert repository.count_by_start_at(time(9, 30)) == 1
    assert repository.count_by_start_at(time(10, 0)) == 0
