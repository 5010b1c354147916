"""Trip planning engine: candidates, selection and fly-in classification."""

from .candidates import build_trip_candidates, eligible_events
from .flyin import classify_uncovered
from .selection import SelectionResult, rescore_candidates, select_trips
from .service import ProgressCallback, plan_trips
from .trips import (
    FlyInVisit,
    NearbyEvent,
    PriorityResult,
    PriorityStatus,
    TripCandidate,
    TripPlan,
    UnvisitablePlayer,
)

__all__ = [
    "FlyInVisit",
    "NearbyEvent",
    "PriorityResult",
    "PriorityStatus",
    "ProgressCallback",
    "SelectionResult",
    "TripCandidate",
    "TripPlan",
    "UnvisitablePlayer",
    "build_trip_candidates",
    "classify_uncovered",
    "eligible_events",
    "plan_trips",
    "rescore_candidates",
    "select_trips",
]
