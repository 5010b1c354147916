"""Derived planner output: trip candidates, fly-in visits and the final plan."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Optional, Tuple

from scouttrips.geo import coord_key
from scouttrips.models import Confidence, EventSource, GameEvent, Venue


@dataclass(frozen=True)
class NearbyEvent:
    event: GameEvent
    drive_minutes: int


@dataclass(frozen=True)
class TripCandidate:
    """One anchor event plus the nearby events bundled around it."""

    anchor_event: GameEvent
    nearby_events: Tuple[NearbyEvent, ...]
    suggested_days: Tuple[date, ...]
    player_names: Tuple[str, ...]
    visit_value: int
    drive_from_home_minutes: int
    total_drive_minutes: int
    venue_count: int

    @property
    def total_players_visited(self) -> int:
        return len(self.player_names)

    @property
    def trip_key(self) -> str:
        """Stable identity across regenerations: anchor date plus anchor venue."""

        return f"trip-{self.anchor_event.date.isoformat()}-{coord_key(self.anchor_event.venue.coords)}"

    @property
    def events(self) -> Tuple[GameEvent, ...]:
        return (self.anchor_event, *(nearby.event for nearby in self.nearby_events))


class PriorityStatus(str, Enum):
    INCLUDED = "included"
    SEPARATE_TRIP = "separate-trip"
    UNREACHABLE = "unreachable"


@dataclass(frozen=True)
class PriorityResult:
    player_name: str
    status: PriorityStatus
    reason: Optional[str] = None


@dataclass(frozen=True)
class FlyInVisit:
    player_names: Tuple[str, ...]
    venue: Venue
    dates: Tuple[date, ...]
    distance_km: float
    estimated_travel_hours: float
    drive_from_home_minutes: int
    source: EventSource
    confidence: Optional[Confidence] = None


@dataclass(frozen=True)
class UnvisitablePlayer:
    player_name: str
    reason: str


@dataclass(frozen=True)
class TripPlan:
    trips: Tuple[TripCandidate, ...] = ()
    fly_in_visits: Tuple[FlyInVisit, ...] = ()
    unvisitable_players: Tuple[UnvisitablePlayer, ...] = ()
    coverage_percent: int = 0
    total_players_with_visits: int = 0
    total_visits_covered: int = 0
    priority_results: Optional[Tuple[PriorityResult, ...]] = field(default=None)

    @property
    def unvisitable_names(self) -> Tuple[str, ...]:
        return tuple(entry.player_name for entry in self.unvisitable_players)

    @property
    def covered_player_names(self) -> Tuple[str, ...]:
        seen: dict[str, None] = {}
        for trip in self.trips:
            for name in trip.player_names:
                seen.setdefault(name, None)
        return tuple(seen)
