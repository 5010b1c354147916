"""Account for athletes the selected road trips do not reach."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date
from typing import AbstractSet, Dict, Iterable, List, Optional, Set, Tuple

from scouttrips.config import PlanningConfig, default_config
from scouttrips.geo import DriveTimeCache, coord_key, estimate_flight_hours, haversine_km
from scouttrips.models import Confidence, GameEvent, RosterPlayer, Venue

from .calendar import is_blackout_day
from .trips import FlyInVisit, UnvisitablePlayer


logger = logging.getLogger(__name__)

NO_OPPORTUNITIES_REASON = "No visit opportunities found in range"
NOT_SELECTED_REASON = (
    "Reachable by road but no selected trip includes this athlete "
    "(each venue anchors at most one trip per week)"
)


@dataclass
class _VenueGroup:
    venue: Venue
    first_event: GameEvent
    player_names: Dict[str, None] = field(default_factory=dict)
    dates: Set[date] = field(default_factory=set)
    confidence: Optional[Confidence] = None

    def add(self, event: GameEvent, names: Iterable[str]) -> None:
        for name in names:
            self.player_names.setdefault(name, None)
        self.dates.add(event.date)
        if event.date < self.first_event.date:
            self.first_event = event
        if event.confidence is not None and (
            self.confidence is None or event.confidence.rank > self.confidence.rank
        ):
            self.confidence = event.confidence


def classify_uncovered(
    events: Iterable[GameEvent],
    players: Iterable[RosterPlayer],
    covered: AbstractSet[str],
    start: date,
    end: date,
    config: Optional[PlanningConfig] = None,
    *,
    drive_cache: Optional[DriveTimeCache] = None,
) -> Tuple[List[FlyInVisit], List[UnvisitablePlayer]]:
    """Split uncovered athletes into fly-in visits and unreachable athletes.

    Venues within the drive radius are skipped: the athlete was reachable by
    road, the greedy pass just did not pick that trip. Every athlete needing
    a visit ends up in exactly one of: ``covered``, a fly-in visit, or the
    unvisitable list.
    """

    config = config or default_config()
    cache = drive_cache if drive_cache is not None else DriveTimeCache()

    uncovered: Dict[str, None] = {
        player.player_name: None
        for player in players
        if player.needs_visit and player.player_name not in covered
    }
    if not uncovered:
        return [], []

    groups: Dict[str, _VenueGroup] = {}
    for event in events:
        if not (start <= event.date <= end):
            continue
        if is_blackout_day(event.date, config.blackout_weekday) or not event.has_valid_coords:
            continue
        names = [name for name in event.player_names if name in uncovered]
        if not names:
            continue
        key = coord_key(event.venue.coords)
        group = groups.get(key)
        if group is None:
            group = groups[key] = _VenueGroup(venue=event.venue, first_event=event)
        group.add(event, names)

    fly_ins: List[FlyInVisit] = []
    road_reachable: Set[str] = set()
    for group in groups.values():
        drive_minutes = cache.minutes(config.home_base, group.venue.coords)
        if drive_minutes <= config.max_drive_minutes:
            road_reachable.update(group.player_names)
            continue
        distance_km = haversine_km(config.home_base, group.venue.coords)
        fly_ins.append(
            FlyInVisit(
                player_names=tuple(group.player_names),
                venue=group.venue,
                dates=tuple(sorted(group.dates)),
                distance_km=round(distance_km, 1),
                estimated_travel_hours=estimate_flight_hours(distance_km),
                drive_from_home_minutes=drive_minutes,
                source=group.first_event.source,
                confidence=group.confidence,
            )
        )
    fly_ins.sort(key=lambda visit: (-len(visit.player_names), visit.dates[0], visit.venue.name))

    flown: Set[str] = {name for visit in fly_ins for name in visit.player_names}
    unvisitable = [
        UnvisitablePlayer(
            player_name=name,
            reason=NOT_SELECTED_REASON if name in road_reachable else NO_OPPORTUNITIES_REASON,
        )
        for name in uncovered
        if name not in flown
    ]

    logger.info(
        "Fly-in analysis: %d venues beyond radius, %d athletes unvisitable",
        len(fly_ins),
        len(unvisitable),
    )
    return fly_ins, unvisitable
