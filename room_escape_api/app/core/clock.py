"""Clock used to decide what "today" is."""

from datetime import date, datetime
from typing import Callable
from zoneinfo import ZoneInfo

Clock = Callable[[], date]


def system_clock(timezone: str = "") -> Clock:
    """Return a clock reading the system time.

    With an empty ``timezone`` the host's local date is used, otherwise
    the current date in the named IANA time zone.
    """
    if not timezone:
        return date.today
    zone = ZoneInfo(timezone)

    def today() -> date:
        return datetime.now(zone).date()

    return today
