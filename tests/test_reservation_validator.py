from datetime import date, time, timedelta

import pytest

from room_escape_api.app.core.exceptions import (
    ConflictError,
    DuplicateBookingError,
    PastDateError,
    ValidationFailureError,
)
from room_escape_api.app.models import Member, Reservation, Theme, Time
from room_escape_api.app.services.reservation_validator import validate_reservation

TODAY = date(2030, 1, 15)
NOON = Time(id=1, start_at=time(12, 0))
EVENING = Time(id=2, start_at=time(18, 0))
THEME = Theme(id=1, name="Harry Potter")
MEMBER = Member(id=1, name="Bumblebee", email="bee@example.com", password="x")


def reservation_at(reservation_time: Time, reservation_date: date = TODAY) -> Reservation:
    return Reservation(id=10, member=MEMBER, date=reservation_date, time=reservation_time, theme=THEME)


@pytest.mark.parametrize("days_ago", [1, 2, 365])
def test_rejects_dates_before_today(days_ago: int) -> None:
    with pytest.raises(PastDateError):
        validate_reservation(TODAY - timedelta(days=days_ago), NOON, THEME.id, [], TODAY)


def test_past_date_is_checked_before_duplicates() -> None:
    yesterday = TODAY - timedelta(days=1)
    with pytest.raises(PastDateError):
        validate_reservation(yesterday, NOON, THEME.id, [reservation_at(NOON, yesterday)], TODAY)


def test_today_is_bookable() -> None:
    validate_reservation(TODAY, NOON, THEME.id, [], TODAY)


def test_rejects_time_already_booked() -> None:
    with pytest.raises(DuplicateBookingError):
        validate_reservation(TODAY, NOON, THEME.id, [reservation_at(NOON)], TODAY)


def test_time_equality_is_by_value() -> None:
    same_noon = Time(id=1, start_at=time(12, 0))
    with pytest.raises(DuplicateBookingError):
        validate_reservation(TODAY, same_noon, THEME.id, [reservation_at(NOON)], TODAY)


def test_accepts_other_free_time() -> None:
    validate_reservation(TODAY, EVENING, THEME.id, [reservation_at(NOON)], TODAY)


def test_error_categories() -> None:
    assert issubclass(PastDateError, ValidationFailureError)
    assert issubclass(DuplicateBookingError, ConflictError)
    assert PastDateError("x").status_code == 400
    assert DuplicateBookingError("x").status_code == 409
