"""Visit-opportunity generation and merging."""

from .generators import generate_hs_events, generate_ncaa_events, generate_spring_training_events
from .merge import build_event_universe, merge_events

__all__ = [
    "build_event_universe",
    "generate_hs_events",
    "generate_ncaa_events",
    "generate_spring_training_events",
    "merge_events",
]
