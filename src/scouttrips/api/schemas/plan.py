from __future__ import annotations

from datetime import date
from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from scouttrips.models import (
    Confidence,
    Coordinates,
    EventSource,
    GameEvent,
    RosterPlayer,
    Venue,
)
from scouttrips.planner import FlyInVisit, PriorityStatus, TripCandidate, TripPlan


class PlanRequest(BaseModel):
    players: List[RosterPlayer] = Field(default_factory=list)
    start: date
    end: date
    events: List[GameEvent] = Field(default_factory=list)
    roster_csv: Optional[str] = None
    events_csv: Optional[str] = None
    priority_players: List[str] = Field(default_factory=list)
    max_drive_minutes: Optional[int] = Field(default=None, ge=1)
    home_base: Optional[Coordinates] = None
    include_synthetic: bool = True
    hs_venues: Dict[str, Venue] = Field(default_factory=dict)
    custom_aliases: Dict[str, Dict[str, str | Venue]] = Field(default_factory=dict)


class NearbyEventResponse(BaseModel):
    event: GameEvent
    drive_minutes: int


class TripResponse(BaseModel):
    trip_key: str
    anchor_event: GameEvent
    nearby_events: List[NearbyEventResponse]
    suggested_days: List[date]
    player_names: List[str]
    visit_value: int
    drive_from_home_minutes: int
    total_drive_minutes: int
    venue_count: int
    total_players_visited: int

    @classmethod
    def from_trip(cls, trip: TripCandidate) -> "TripResponse":
        return cls(
            trip_key=trip.trip_key,
            anchor_event=trip.anchor_event,
            nearby_events=[
                NearbyEventResponse(event=nearby.event, drive_minutes=nearby.drive_minutes)
                for nearby in trip.nearby_events
            ],
            suggested_days=list(trip.suggested_days),
            player_names=list(trip.player_names),
            visit_value=trip.visit_value,
            drive_from_home_minutes=trip.drive_from_home_minutes,
            total_drive_minutes=trip.total_drive_minutes,
            venue_count=trip.venue_count,
            total_players_visited=trip.total_players_visited,
        )


class FlyInVisitResponse(BaseModel):
    player_names: List[str]
    venue: Venue
    dates: List[date]
    distance_km: float
    estimated_travel_hours: float
    drive_from_home_minutes: int
    source: EventSource
    confidence: Optional[Confidence] = None

    @classmethod
    def from_visit(cls, visit: FlyInVisit) -> "FlyInVisitResponse":
        return cls(
            player_names=list(visit.player_names),
            venue=visit.venue,
            dates=list(visit.dates),
            distance_km=visit.distance_km,
            estimated_travel_hours=visit.estimated_travel_hours,
            drive_from_home_minutes=visit.drive_from_home_minutes,
            source=visit.source,
            confidence=visit.confidence,
        )


class UnvisitablePlayerResponse(BaseModel):
    player_name: str
    reason: str


class PriorityResultResponse(BaseModel):
    player_name: str
    status: PriorityStatus
    reason: Optional[str] = None


class TripPlanResponse(BaseModel):
    trips: List[TripResponse]
    fly_in_visits: List[FlyInVisitResponse]
    unvisitable_players: List[UnvisitablePlayerResponse]
    coverage_percent: int
    total_players_with_visits: int
    total_visits_covered: int
    priority_results: Optional[List[PriorityResultResponse]] = None

    @classmethod
    def from_plan(cls, plan: TripPlan) -> "TripPlanResponse":
        priority = None
        if plan.priority_results is not None:
            priority = [
                PriorityResultResponse(
                    player_name=result.player_name,
                    status=result.status,
                    reason=result.reason,
                )
                for result in plan.priority_results
            ]
        return cls(
            trips=[TripResponse.from_trip(trip) for trip in plan.trips],
            fly_in_visits=[FlyInVisitResponse.from_visit(visit) for visit in plan.fly_in_visits],
            unvisitable_players=[
                UnvisitablePlayerResponse(player_name=item.player_name, reason=item.reason)
                for item in plan.unvisitable_players
            ],
            coverage_percent=plan.coverage_percent,
            total_players_with_visits=plan.total_players_with_visits,
            total_visits_covered=plan.total_visits_covered,
            priority_results=priority,
        )
