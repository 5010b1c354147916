"""Venue and visit-opportunity models."""

from __future__ import annotations

import datetime as dt
from enum import Enum
from typing import Optional, Tuple

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class Coordinates(BaseModel):
    lat: float = Field(..., ge=-90.0, le=90.0)
    lng: float = Field(..., ge=-180.0, le=180.0)

    model_config = ConfigDict(frozen=True)

    @property
    def is_sentinel(self) -> bool:
        """Upstream feeds use a zero coordinate for "location unknown"."""

        return self.lat == 0 or self.lng == 0


class Venue(BaseModel):
    name: str
    coords: Coordinates

    model_config = ConfigDict(frozen=True)


class EventSource(str, Enum):
    CONFIRMED_PRO = "confirmed-pro"
    CONFIRMED_NCAA = "confirmed-ncaa"
    SYNTHETIC_NCAA = "synthetic-ncaa"
    SYNTHETIC_HS = "synthetic-hs"
    SYNTHETIC_SPRING_TRAINING = "synthetic-spring-training"


class Confidence(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"

    @property
    def rank(self) -> int:
        return {Confidence.HIGH: 3, Confidence.MEDIUM: 2, Confidence.LOW: 1}[self]


class GameEvent(BaseModel):
    """A single date and venue where one or more athletes are expected."""

    event_id: str = Field(..., min_length=1)
    date: dt.date
    venue: Venue
    source: EventSource
    player_names: Tuple[str, ...] = ()
    is_home: bool = True
    home_team: str = ""
    away_team: str = ""
    confidence: Optional[Confidence] = None
    confidence_note: Optional[str] = None
    source_url: Optional[str] = None

    model_config = ConfigDict(frozen=True)

    @property
    def has_valid_coords(self) -> bool:
        return not self.venue.coords.is_sentinel
