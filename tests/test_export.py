from datetime import date, datetime, timezone

import pytest

from scouttrips.config import PlanningConfig
from scouttrips.export import CalendarExportError, plan_to_ics
from scouttrips.export.ics import escape_text, fold_line, trip_to_vevent
from scouttrips.models import Coordinates, EventSource, GameEvent, RosterPlayer, Venue
from scouttrips.planner import TripCandidate, TripPlan, plan_trips


LAKELAND = Venue(name="Lakeland Field, Main", coords=Coordinates(lat=28.0395, lng=-81.9498))
TAMPA = Venue(name="Tampa Park", coords=Coordinates(lat=27.9506, lng=-82.4572))
STAMP = datetime(2026, 2, 20, 15, 30, tzinfo=timezone.utc)


def _plan():
    players = [
        RosterPlayer(player_name="Ace", tier=1),
        RosterPlayer(player_name="Bat", tier=2),
    ]
    events = [
        GameEvent(
            event_id="a",
            date=date(2026, 3, 3),
            venue=LAKELAND,
            source=EventSource.CONFIRMED_PRO,
            player_names=("Ace",),
        ),
        GameEvent(
            event_id="b",
            date=date(2026, 3, 4),
            venue=TAMPA,
            source=EventSource.CONFIRMED_PRO,
            player_names=("Bat",),
        ),
    ]
    plan = plan_trips(events, players, date(2026, 3, 1), date(2026, 3, 7), PlanningConfig())
    return plan, players


def _unfold(ics: str) -> list[str]:
    return ics.replace("\r\n ", "").split("\r\n")


def test_escape_text():
    assert escape_text("a,b;c\\d\nx") == "a\\,b\\;c\\\\d\\nx"


def test_plan_to_ics_writes_one_all_day_event_per_trip():
    plan, players = _plan()
    ics = plan_to_ics(plan, players, stamp=STAMP)
    lines = _unfold(ics)

    assert lines[0] == "BEGIN:VCALENDAR"
    assert "VERSION:2.0" in lines
    assert lines.count("BEGIN:VEVENT") == len(plan.trips) == 1
    assert "DTSTART;VALUE=DATE:20260303" in lines
    # Last trip day is the 4th; DTEND is exclusive.
    assert "DTEND;VALUE=DATE:20260305" in lines
    assert "SUMMARY:Trip #1: Lakeland Field\\, Main" in lines
    assert "LOCATION:Lakeland Field\\, Main" in lines
    assert "GEO:28.0395;-81.9498" in lines
    assert "UID:trip-1-2026-03-03-28.0395@scouttrips" in lines
    assert "DTSTAMP:20260220T153000Z" in lines

    description = next(line for line in lines if line.startswith("DESCRIPTION:"))
    assert "Trip #1: 2 days" in description
    assert "Ace (T1)\\, Bat (T2)" in description
    assert f"Score: {plan.trips[0].visit_value} pts" in description
    assert "\\nDrive from home: ~1h" in description
    assert ics.endswith("END:VCALENDAR\r\n")


def test_empty_plan_exports_empty_calendar():
    ics = plan_to_ics(TripPlan(), [])
    assert "BEGIN:VEVENT" not in ics
    assert ics.startswith("BEGIN:VCALENDAR\r\n")


def test_trip_without_days_cannot_be_exported():
    plan, _ = _plan()
    broken = TripCandidate(
        anchor_event=plan.trips[0].anchor_event,
        nearby_events=(),
        suggested_days=(),
        player_names=(),
        visit_value=0,
        drive_from_home_minutes=0,
        total_drive_minutes=0,
        venue_count=1,
    )
    with pytest.raises(CalendarExportError):
        trip_to_vevent(broken, 1, {})


def test_long_lines_are_folded_to_75_octets():
    names = [f"Athlete Number {index:02d}" for index in range(8)]
    players = [RosterPlayer(player_name=name, tier=1) for name in names]
    events = [
        GameEvent(
            event_id="big",
            date=date(2026, 3, 3),
            venue=LAKELAND,
            source=EventSource.CONFIRMED_PRO,
            player_names=tuple(names),
        )
    ]
    plan = plan_trips(events, players, date(2026, 3, 1), date(2026, 3, 7), PlanningConfig())
    ics = plan_to_ics(plan, players)

    physical = ics.split("\r\n")
    assert max(len(line.encode("utf-8")) for line in physical) <= 75
    assert any(line.startswith(" ") for line in physical)
    assert sum(line.startswith("DTSTAMP:") for line in physical) == 1

    description = next(line for line in _unfold(ics) if line.startswith("DESCRIPTION:"))
    for name in names:
        assert f"{name} (T1)" in description


def test_fold_line_keeps_multibyte_characters_whole():
    line = "SUMMARY:" + "é" * 60
    folded = fold_line(line)

    assert len(folded) == 2
    assert all(len(part.encode("utf-8")) <= 75 for part in folded)
    assert folded[1].startswith(" ")
    assert folded[0] + folded[1][1:] == line
    assert fold_line("SHORT:line") == ["SHORT:line"]
