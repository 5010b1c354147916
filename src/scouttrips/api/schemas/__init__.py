"""Pydantic models for API I/O."""

from .plan import (
    FlyInVisitResponse,
    NearbyEventResponse,
    PlanRequest,
    PriorityResultResponse,
    TripPlanResponse,
    TripResponse,
    UnvisitablePlayerResponse,
)

__all__ = [
    "FlyInVisitResponse",
    "NearbyEventResponse",
    "PlanRequest",
    "PriorityResultResponse",
    "TripPlanResponse",
    "TripResponse",
    "UnvisitablePlayerResponse",
]
