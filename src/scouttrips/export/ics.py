"""iCalendar export for planned trips."""

from __future__ import annotations

from datetime import date, datetime, timedelta, timezone
from typing import Iterable, List, Mapping, Optional, Sequence

from scouttrips.models import RosterPlayer
from scouttrips.planner.trips import TripCandidate, TripPlan


PRODID = "-//scouttrips//Trip Export//EN"
UID_DOMAIN = "scouttrips"
MAX_LINE_OCTETS = 75


class CalendarExportError(RuntimeError):
    """Raised when a trip cannot be written as a calendar event."""


def escape_text(text: str) -> str:
    """Escape a TEXT value (RFC 5545 section 3.3.11)."""

    return (
        text.replace("\\", "\\\\")
        .replace(";", "\\;")
        .replace(",", "\\,")
        .replace("\r\n", "\\n")
        .replace("\n", "\\n")
    )


def fold_line(line: str, limit: int = MAX_LINE_OCTETS) -> List[str]:
    """Split a content line so no physical line exceeds ``limit`` octets.

    Continuation lines start with a single space (RFC 5545 section 3.1). Splits
    never fall inside a multi-byte UTF-8 character.
    """

    folded: List[str] = []
    current = ""
    size = 0
    for char in line:
        width = len(char.encode("utf-8"))
        if size + width > limit:
            folded.append(current)
            current, size = " ", 1
        current += char
        size += width
    folded.append(current)
    return folded


def _ics_date(day: date) -> str:
    return day.strftime("%Y%m%d")


def _ics_timestamp(moment: datetime) -> str:
    return moment.astimezone(timezone.utc).strftime("%Y%m%dT%H%M%SZ")


def _format_drive(minutes: int) -> str:
    hours, rest = divmod(minutes, 60)
    return f"{hours}h {rest}m" if rest else f"{hours}h"


def _player_label(name: str, players: Mapping[str, RosterPlayer]) -> str:
    player = players.get(name)
    return f"{name} (T{player.tier})" if player is not None else name


def _trip_description(
    trip: TripCandidate,
    number: int,
    players: Mapping[str, RosterPlayer],
    home_label: str,
) -> str:
    day_count = len(trip.suggested_days)
    athletes = ", ".join(_player_label(name, players) for name in trip.player_names)
    lines = [
        f"Trip #{number}: {day_count} day{'s' if day_count != 1 else ''}",
        f"Drive from {home_label}: ~{_format_drive(trip.drive_from_home_minutes)}",
        f"Players: {athletes}",
        f"Score: {trip.visit_value} pts",
    ]
    return "\n".join(lines)


def trip_to_vevent(
    trip: TripCandidate,
    number: int,
    players: Mapping[str, RosterPlayer],
    *,
    home_label: str = "home",
    stamp: Optional[datetime] = None,
) -> List[str]:
    if not trip.suggested_days:
        raise CalendarExportError(f"Trip #{number} has no suggested days")

    first_day = trip.suggested_days[0]
    # DTEND;VALUE=DATE is exclusive.
    end_exclusive = trip.suggested_days[-1] + timedelta(days=1)
    venue = trip.anchor_event.venue
    uid = f"trip-{number}-{first_day.isoformat()}-{venue.coords.lat:.4f}@{UID_DOMAIN}"
    stamp = stamp or datetime.now(timezone.utc)

    return [
        "BEGIN:VEVENT",
        f"UID:{uid}",
        f"DTSTAMP:{_ics_timestamp(stamp)}",
        f"DTSTART;VALUE=DATE:{_ics_date(first_day)}",
        f"DTEND;VALUE=DATE:{_ics_date(end_exclusive)}",
        f"SUMMARY:{escape_text(f'Trip #{number}: {venue.name}')}",
        f"DESCRIPTION:{escape_text(_trip_description(trip, number, players, home_label))}",
        f"LOCATION:{escape_text(venue.name)}",
        f"GEO:{venue.coords.lat};{venue.coords.lng}",
        "END:VEVENT",
    ]


def trips_to_ics(
    trips: Sequence[TripCandidate],
    players: Iterable[RosterPlayer],
    *,
    home_label: str = "home",
    stamp: Optional[datetime] = None,
) -> str:
    by_name = {player.player_name: player for player in players}
    stamp = stamp or datetime.now(timezone.utc)
    lines = ["BEGIN:VCALENDAR", "VERSION:2.0", f"PRODID:{PRODID}"]
    for number, trip in enumerate(trips, start=1):
        lines.extend(trip_to_vevent(trip, number, by_name, home_label=home_label, stamp=stamp))
    lines.append("END:VCALENDAR")
    return "\r\n".join(folded for line in lines for folded in fold_line(line)) + "\r\n"


def plan_to_ics(
    plan: TripPlan,
    players: Iterable[RosterPlayer],
    *,
    home_label: Optional[str] = None,
    stamp: Optional[datetime] = None,
) -> str:
    """Render every trip of a plan as one all-day event in a single calendar.

    ``stamp`` becomes every event's DTSTAMP and defaults to the current UTC time.
    """

    return trips_to_ics(plan.trips, players, home_label=home_label or "home", stamp=stamp)


__all__ = [
    "CalendarExportError",
    "escape_text",
    "fold_line",
    "plan_to_ics",
    "trip_to_vevent",
    "trips_to_ics",
]
