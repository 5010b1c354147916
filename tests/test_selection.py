from datetime import date

import pytest

from scouttrips.config import PlanningConfig
from scouttrips.models import Coordinates, EventSource, GameEvent, RosterPlayer, Venue
from scouttrips.planner import PriorityStatus, build_trip_candidates, rescore_candidates, select_trips


START = date(2026, 3, 1)
END = date(2026, 3, 21)
LAKELAND = Coordinates(lat=28.0395, lng=-81.9498)
TAMPA = Coordinates(lat=27.9506, lng=-82.4572)
JACKSONVILLE = Coordinates(lat=30.3322, lng=-81.6557)
FORT_MYERS = Coordinates(lat=26.6406, lng=-81.8723)
DALLAS = Coordinates(lat=32.7767, lng=-96.7970)


def _event(event_id: str, day: date, name: str, coords: Coordinates, *players: str) -> GameEvent:
    return GameEvent(
        event_id=event_id,
        date=day,
        venue=Venue(name=name, coords=coords),
        source=EventSource.CONFIRMED_PRO,
        player_names=players,
    )


def _roster() -> list[RosterPlayer]:
    return [
        RosterPlayer(player_name="Ace", tier=1),
        RosterPlayer(player_name="Bat", tier=2),
        RosterPlayer(player_name="Cal", tier=3),
        RosterPlayer(player_name="Dee", tier=2),
    ]


def _select(events, config=None, priority=()):
    config = config or PlanningConfig()
    roster = _roster()
    candidates = build_trip_candidates(events, roster, START, END, config)
    return candidates, select_trips(candidates, roster, config, priority)


def test_greedy_takes_marginal_value_and_keeps_candidates_intact():
    events = [
        _event("w1", date(2026, 3, 3), "Lakeland Field", LAKELAND, "Ace", "Bat"),
        _event("w2", date(2026, 3, 10), "Lakeland Field", LAKELAND, "Bat", "Cal"),
    ]
    candidates, result = _select(events)

    assert [trip.anchor_event.event_id for trip in result.trips] == ["w1", "w2"]
    assert [trip.visit_value for trip in result.trips] == [34, 1]
    assert [candidate.visit_value for candidate in candidates] == [34, 10]
    assert result.covered == {"Ace", "Bat", "Cal"}
    assert result.priority_results is None


def test_greedy_values_never_increase():
    events = [
        _event("a", date(2026, 3, 3), "Lakeland Field", LAKELAND, "Ace"),
        _event("b", date(2026, 3, 10), "Tampa Park", TAMPA, "Bat", "Cal"),
        _event("c", date(2026, 3, 17), "Lakeland Field", LAKELAND, "Dee", "Ace"),
        _event("d", date(2026, 3, 19), "Tampa Park", TAMPA, "Cal"),
    ]
    _, result = _select(events)
    values = [trip.visit_value for trip in result.trips]
    assert values == sorted(values, reverse=True)
    assert all(value > 0 for value in values)


def test_stops_when_best_score_is_zero():
    events = [
        _event("a", date(2026, 3, 3), "Lakeland Field", LAKELAND, "Ace"),
        _event("b", date(2026, 3, 10), "Lakeland Field", LAKELAND, "Ace"),
    ]
    _, result = _select(events)
    assert len(result.trips) == 1


def test_ties_go_to_venue_name_then_event_id():
    # Lakeland and Tampa are within reach of each other, so both candidates hold both athletes.
    events = [
        _event("z-1", date(2026, 3, 3), "Bravo Field", LAKELAND, "Bat"),
        _event("a-1", date(2026, 3, 3), "Alpha Park", TAMPA, "Dee"),
    ]
    candidates, result = _select(events)
    assert len(candidates) == 2
    assert candidates[0].visit_value == candidates[1].visit_value
    assert [trip.anchor_event.venue.name for trip in result.trips] == ["Alpha Park"]


def test_thursday_candidate_wins_otherwise_equal_tie():
    events = [
        _event("tue", date(2026, 3, 3), "Lakeland Field", LAKELAND, "Bat"),
        _event("thu", date(2026, 3, 12), "Lakeland Field", LAKELAND, "Bat"),
    ]
    _, result = _select(events)
    assert [trip.anchor_event.event_id for trip in result.trips] == ["thu"]
    assert result.trips[0].visit_value == 11


def test_rescore_excludes_visited_athletes():
    events = [_event("a", date(2026, 3, 3), "Lakeland Field", LAKELAND, "Ace", "Bat")]
    roster = {player.player_name: player for player in _roster()}
    config = PlanningConfig()
    candidates = build_trip_candidates(events, roster.values(), START, END, config)
    assert rescore_candidates(candidates, roster, set(), config) == [34]
    assert rescore_candidates(candidates, roster, {"Ace"}, config) == [9]


def test_priority_pair_sharing_a_trip_goes_first():
    events = [
        _event("big", date(2026, 3, 3), "Lakeland Field", LAKELAND, "Ace", "Cal"),
        _event("pair", date(2026, 3, 10), "Tampa Park", TAMPA, "Bat", "Dee"),
    ]
    _, result = _select(events, priority=["bat", "DEE"])

    assert result.trips[0].anchor_event.event_id == "pair"
    assert [(r.player_name, r.status) for r in result.priority_results] == [
        ("Bat", PriorityStatus.INCLUDED),
        ("Dee", PriorityStatus.INCLUDED),
    ]
    assert result.covered == {"Ace", "Bat", "Cal", "Dee"}


def test_priority_pair_apart_gets_separate_trips():
    config = PlanningConfig(max_drive_minutes=240)
    events = [
        _event("north", date(2026, 3, 3), "Jacksonville Yard", JACKSONVILLE, "Bat"),
        _event("south", date(2026, 3, 4), "Fort Myers Park", FORT_MYERS, "Dee"),
        _event("other", date(2026, 3, 10), "Lakeland Field", LAKELAND, "Ace"),
    ]
    _, result = _select(events, config=config, priority=["Bat", "Dee"])

    assert [trip.anchor_event.event_id for trip in result.trips[:2]] == ["north", "south"]
    statuses = [r.status for r in result.priority_results]
    assert statuses == [PriorityStatus.SEPARATE_TRIP, PriorityStatus.SEPARATE_TRIP]
    assert all(r.reason for r in result.priority_results)
    assert result.trips[2].anchor_event.event_id == "other"


def test_priority_unreachable_reasons():
    events = [
        _event("far", date(2026, 3, 3), "Dallas Yard", DALLAS, "Bat"),
        _event("near", date(2026, 3, 4), "Lakeland Field", LAKELAND, "Ace"),
    ]
    _, result = _select(events, priority=["Bat", "Nobody Here"])

    bat, nobody = result.priority_results
    assert bat.status == PriorityStatus.UNREACHABLE
    assert "180 minutes" in bat.reason
    assert nobody.player_name == "Nobody Here"
    assert nobody.status == PriorityStatus.UNREACHABLE
    assert nobody.reason == "Not found on the roster"
    assert [trip.anchor_event.event_id for trip in result.trips] == ["near"]


def test_single_priority_is_included():
    events = [
        _event("big", date(2026, 3, 3), "Lakeland Field", LAKELAND, "Ace"),
        _event("small", date(2026, 3, 10), "Tampa Park", TAMPA, "Cal"),
    ]
    _, result = _select(events, priority=["Cal"])
    assert result.trips[0].anchor_event.event_id == "small"
    assert result.priority_results[0].status == PriorityStatus.INCLUDED


def test_more_than_two_priorities_rejected():
    with pytest.raises(ValueError):
        select_trips([], _roster(), PlanningConfig(), ["Ace", "Bat", "Cal"])


def test_priority_athlete_without_visits_remaining():
    roster = _roster() + [RosterPlayer(player_name="Done", tier=1, visit_target=1, visits_completed=1)]
    events = [_event("near", date(2026, 3, 4), "Lakeland Field", LAKELAND, "Ace", "Done")]
    config = PlanningConfig()
    candidates = build_trip_candidates(events, roster, START, END, config)
    result = select_trips(candidates, roster, config, ["done", "Ace"])

    done, ace = result.priority_results
    assert done.player_name == "Done"
    assert done.status == PriorityStatus.UNREACHABLE
    assert done.reason == "No visits remaining"
    assert ace.status == PriorityStatus.INCLUDED
    assert ace.reason is None
