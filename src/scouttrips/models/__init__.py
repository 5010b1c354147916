"""Canonical roster and event models."""

from .event import Confidence, Coordinates, EventSource, GameEvent, Venue
from .player import TIER_VISIT_TARGETS, PlayerLevel, RosterPlayer, normalize_name

__all__ = [
    "Confidence",
    "Coordinates",
    "EventSource",
    "GameEvent",
    "Venue",
    "PlayerLevel",
    "RosterPlayer",
    "TIER_VISIT_TARGETS",
    "normalize_name",
]
