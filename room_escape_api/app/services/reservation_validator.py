"""
Admission rules for new reservations.

``validate_reservation`` is a pure decision function: given the
requested slot, the reservations that already exist for the theme on
that date and the current date, it either returns normally or raises
the error describing why the slot cannot be booked.
"""

from datetime import date
from typing import Iterable, List

from room_escape_api.app.core.exceptions import DuplicateBookingError, PastDateError
from room_escape_api.app.models import Reservation, Time


def booked_times(reservations: Iterable[Reservation]) -> List[Time]:
    """Return the times taken by ``reservations``."""
    return [reservation.time for reservation in reservations]


def is_time_booked(reservation_time: Time, taken: Iterable[Time]) -> bool:
    return reservation_time in taken


def validate_reservation(
    reservation_date: date,
    reservation_time: Time,
    theme_id: int,
    existing_reservations: Iterable[Reservation],
    today: date,
) -> None:
    """Check that a theme/date/time slot may be booked.

    Parameters
    ----------
    reservation_date : date
        Requested calendar date.
    reservation_time : Time
        Requested time, already resolved from the store.
    theme_id : int
        Requested theme; ``existing_reservations`` must be the
        reservations of this theme on ``reservation_date``.
    existing_reservations : Iterable[Reservation]
        Reservations already stored for the theme on that date.
    today : date
        The current date according to the caller's clock.

    Raises
    ------
    PastDateError
        If ``reservation_date`` is before ``today``.
    DuplicateBookingError
        If one of ``existing_reservations`` already holds the time.
    """
    if reservation_date < today:
        raise PastDateError(
            f"Cannot book {reservation_date.isoformat()}: the date has already passed"
        )
    if is_time_booked(reservation_time, booked_times(existing_reservations)):
        raise DuplicateBookingError(
            f"Theme {theme_id} is already booked at "
            f"{reservation_time.start_at.strftime('%H:%M')} on {reservation_date.isoformat()}"
        )
