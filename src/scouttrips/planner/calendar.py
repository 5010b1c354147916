"""Date helpers for blackout days, season windows and trip windows."""

from __future__ import annotations

from datetime import date, timedelta
from typing import Iterator, List

from scouttrips.config import SUNDAY


def is_blackout_day(day: date, blackout_weekday: int = SUNDAY) -> bool:
    return day.weekday() == blackout_weekday


def is_within_season(day: date, season_start: str, season_end: str) -> bool:
    """Compare the ``MM-DD`` part of ``day`` against inclusive season bounds.

    Seasons never wrap past December 31st, so plain string comparison on
    zero-padded month/day works.
    """

    mmdd = day.strftime("%m-%d")
    return season_start <= mmdd <= season_end


def dates_in_range(start: date, end: date) -> Iterator[date]:
    """Yield every date from ``start`` through ``end`` inclusive."""

    current = start
    while current <= end:
        yield current
        current += timedelta(days=1)


def week_number(day: date) -> int:
    """Sunday-started week index counted from January 1st of ``day``'s year.

    This is not an ISO week; it only groups Monday-Saturday road trips so an
    anchor venue can be deduplicated per week.
    """

    jan1 = date(day.year, 1, 1)
    # weekday() has Monday=0; shift so Sunday starts the week.
    jan1_offset = (jan1.weekday() + 1) % 7
    return ((day - jan1).days + jan1_offset) // 7


def trip_window(
    anchor_day: date,
    *,
    days_before: int = 1,
    days_after: int = 2,
    blackout_weekday: int = SUNDAY,
) -> List[date]:
    start = anchor_day - timedelta(days=days_before)
    end = anchor_day + timedelta(days=days_after)
    return [day for day in dates_in_range(start, end) if not is_blackout_day(day, blackout_weekday)]
