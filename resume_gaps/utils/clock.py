"""
Current-month source for resolving "Present" and aging gaps.
"""

from datetime import datetime
from typing import Callable, Optional

from resume_gaps.models.gap import ParsedDate

Clock = Callable[[], datetime]


def system_clock() -> datetime:
    """Wall clock, local time."""
    return datetime.now()


def current_month(clock: Optional[Clock] = None) -> ParsedDate:
    """
    Sample the clock once and return the calendar month it falls in.

    Args:
        clock: Callable returning a datetime; defaults to the system clock

    Returns:
        ParsedDate for the current month
    """
    now = (clock or system_clock)()
    return ParsedDate(month=now.month, year=now.year)


def resolve_today(today: Optional[ParsedDate] = None, clock: Optional[Clock] = None) -> ParsedDate:
    """Use ``today`` when the caller already sampled it, else read the clock."""
    if today is not None:
        return today
    return current_month(clock)
