"""Enumerate road-trip candidates around anchor events."""

from __future__ import annotations

import logging
from collections import defaultdict
from datetime import date
from typing import AbstractSet, Dict, Iterable, List, Mapping, Optional, Sequence, Set, Tuple

from scouttrips.config import PlanningConfig, default_config
from scouttrips.geo import DriveTimeCache, coord_key
from scouttrips.models import GameEvent, RosterPlayer

from .calendar import dates_in_range, is_blackout_day, trip_window, week_number
from .scoring import visit_value
from .trips import NearbyEvent, TripCandidate


logger = logging.getLogger(__name__)


def players_needing_visits(players: Iterable[RosterPlayer]) -> Dict[str, RosterPlayer]:
    return {player.player_name: player for player in players if player.needs_visit}


def eligible_events(
    events: Iterable[GameEvent],
    needing: AbstractSet[str] | Mapping[str, RosterPlayer],
    start: date,
    end: date,
    config: PlanningConfig,
) -> List[GameEvent]:
    """Events a scout could actually use: right days, right athletes, known location."""

    return [
        event
        for event in events
        if start <= event.date <= end
        and not is_blackout_day(event.date, config.blackout_weekday)
        and event.has_valid_coords
        and any(name in needing for name in event.player_names)
    ]


def _eligible_union(events: Iterable[GameEvent], needing: Mapping[str, RosterPlayer]) -> Tuple[str, ...]:
    seen: Dict[str, None] = {}
    for event in events:
        for name in event.player_names:
            if name in needing:
                seen.setdefault(name, None)
    return tuple(seen)


def _anchor_order(event: GameEvent) -> Tuple[str, str]:
    return event.venue.name, event.event_id


def _build_candidate(
    anchor: GameEvent,
    events_by_day: Mapping[date, Sequence[GameEvent]],
    needing: Mapping[str, RosterPlayer],
    home_minutes: int,
    cache: DriveTimeCache,
    config: PlanningConfig,
) -> TripCandidate:
    window = trip_window(
        anchor.date,
        days_before=config.window_days_before,
        days_after=config.window_days_after,
        blackout_weekday=config.blackout_weekday,
    )

    nearby: List[NearbyEvent] = []
    for day in window:
        for event in events_by_day.get(day, ()):
            if event.event_id == anchor.event_id:
                continue
            minutes = cache.minutes(anchor.venue.coords, event.venue.coords)
            if minutes <= config.max_drive_minutes:
                nearby.append(NearbyEvent(event=event, drive_minutes=minutes))
    nearby.sort(
        key=lambda item: (item.event.date, item.drive_minutes, item.event.venue.name, item.event.event_id)
    )

    trip_events = [anchor, *(item.event for item in nearby)]
    player_names = _eligible_union(trip_events, needing)
    last_stop = nearby[-1].event.venue.coords if nearby else anchor.venue.coords
    total_drive = (
        home_minutes
        + sum(item.drive_minutes for item in nearby)
        + cache.minutes(last_stop, config.home_base)
    )

    return TripCandidate(
        anchor_event=anchor,
        nearby_events=tuple(nearby),
        suggested_days=tuple(sorted({event.date for event in trip_events})),
        player_names=player_names,
        visit_value=visit_value(player_names, needing, config, anchor.date),
        drive_from_home_minutes=home_minutes,
        total_drive_minutes=total_drive,
        venue_count=len({coord_key(event.venue.coords) for event in trip_events}),
    )


def build_trip_candidates(
    events: Iterable[GameEvent],
    players: Iterable[RosterPlayer],
    start: date,
    end: date,
    config: Optional[PlanningConfig] = None,
    *,
    drive_cache: Optional[DriveTimeCache] = None,
) -> List[TripCandidate]:
    """Build one candidate per surviving anchor event, in anchor date order.

    Anchors are eligible events whose venue is within the drive radius of home.
    A venue anchors at most once per week; the first event in (date, venue
    name, event id) order wins.
    """

    config = config or default_config()
    cache = drive_cache if drive_cache is not None else DriveTimeCache()
    needing = players_needing_visits(players)
    eligible = eligible_events(events, needing, start, end, config)
    if not eligible:
        return []

    home_minutes: Dict[str, int] = {}
    events_by_day: Dict[date, List[GameEvent]] = defaultdict(list)
    for event in eligible:
        key = coord_key(event.venue.coords)
        if key not in home_minutes:
            home_minutes[key] = cache.minutes(config.home_base, event.venue.coords)
        events_by_day[event.date].append(event)

    candidates: List[TripCandidate] = []
    anchored: Set[Tuple[str, int]] = set()
    skipped_far = 0
    for day in dates_in_range(start, end):
        if is_blackout_day(day, config.blackout_weekday):
            continue
        for anchor in sorted(events_by_day.get(day, ()), key=_anchor_order):
            venue_key = coord_key(anchor.venue.coords)
            if home_minutes[venue_key] > config.max_drive_minutes:
                skipped_far += 1
                continue
            dedup_key = (venue_key, week_number(day))
            if dedup_key in anchored:
                continue
            anchored.add(dedup_key)
            candidates.append(
                _build_candidate(
                    anchor,
                    events_by_day,
                    needing,
                    home_minutes[venue_key],
                    cache,
                    config,
                )
            )

    logger.info(
        "Built %d trip candidates from %d eligible events (%d beyond %d min radius)",
        len(candidates),
        len(eligible),
        skipped_far,
        config.max_drive_minutes,
    )
    return candidates
