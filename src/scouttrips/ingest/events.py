"""Load confirmed game events from CSV."""

from __future__ import annotations

import csv
import logging
from datetime import date
from io import StringIO
from pathlib import Path
from typing import Iterable, List, Mapping, Optional

from pydantic import BaseModel, ValidationError

from scouttrips.models import Confidence, Coordinates, EventSource, GameEvent, Venue


logger = logging.getLogger(__name__)

EVENT_COLUMNS = (
    "event_id",
    "date",
    "venue",
    "lat",
    "lng",
    "players",
    "source",
    "is_home",
    "confidence",
    "note",
    "url",
)

_TRUE_FLAGS = {"1", "true", "t", "yes", "y", "home"}
_FALSE_FLAGS = {"0", "false", "f", "no", "n", "away"}


class EventParseError(ValueError):
    """Raised when a confirmed-event row cannot be turned into an event."""

    def __init__(self, line: int, message: str) -> None:
        super().__init__(f"row {line}: {message}")
        self.line = line


class EventRow(BaseModel):
    event_id: str
    date: str
    venue: str
    lat: str
    lng: str
    players: str = ""
    source: str = ""
    is_home: str = ""
    confidence: str = ""
    note: str = ""
    url: str = ""

    @classmethod
    def from_mapping(cls, row: Mapping[str, Optional[str]]) -> "EventRow":
        lowered = {
            (key or "").strip().lower(): (value or "").strip()
            for key, value in row.items()
            if key is not None
        }
        return cls(**{column: lowered.get(column, "") for column in EVENT_COLUMNS})

    def to_event(self) -> GameEvent:
        if not self.event_id:
            raise ValueError("event_id is required")
        if not self.venue:
            raise ValueError("venue is required")
        try:
            day = date.fromisoformat(self.date)
        except ValueError as exc:
            raise ValueError(f"date '{self.date}' is not YYYY-MM-DD") from exc
        coords = Coordinates(lat=_parse_coordinate(self.lat, "lat"), lng=_parse_coordinate(self.lng, "lng"))
        is_home = _parse_flag(self.is_home, default=True)
        return GameEvent(
            event_id=self.event_id,
            date=day,
            venue=Venue(name=self.venue, coords=coords),
            source=_parse_source(self.source),
            player_names=tuple(name.strip() for name in self.players.split("|") if name.strip()),
            is_home=is_home,
            home_team=self.venue if is_home else "",
            confidence=Confidence(self.confidence.lower()) if self.confidence else None,
            confidence_note=self.note or None,
            source_url=self.url or None,
        )


def _parse_coordinate(raw: str, label: str) -> float:
    try:
        return float(raw)
    except ValueError as exc:
        raise ValueError(f"{label} '{raw}' is not a number") from exc


def _parse_source(raw: str) -> EventSource:
    text = raw.strip().lower()
    if not text:
        return EventSource.CONFIRMED_PRO
    if text in {"pro", "mlb", "milb"}:
        return EventSource.CONFIRMED_PRO
    if text in {"ncaa", "college"}:
        return EventSource.CONFIRMED_NCAA
    try:
        return EventSource(text)
    except ValueError as exc:
        raise ValueError(f"unknown source '{raw}'") from exc


def _parse_flag(raw: str, *, default: bool) -> bool:
    text = raw.strip().lower()
    if not text:
        return default
    if text in _TRUE_FLAGS:
        return True
    if text in _FALSE_FLAGS:
        return False
    raise ValueError(f"is_home '{raw}' is not a yes/no value")


def rows_to_events(rows: Iterable[Mapping[str, Optional[str]]]) -> List[GameEvent]:
    events: List[GameEvent] = []
    # Line 1 is the header.
    for line, row in enumerate(rows, start=2):
        try:
            events.append(EventRow.from_mapping(row).to_event())
        except (ValueError, ValidationError) as exc:
            raise EventParseError(line, str(exc)) from exc
    logger.info("Loaded %d confirmed events", len(events))
    return events


def load_events_text(text: str) -> List[GameEvent]:
    return rows_to_events(csv.DictReader(StringIO(text)))


def load_events_csv(path: Path) -> List[GameEvent]:
    with path.open(newline="", encoding="utf-8-sig") as f:
        return rows_to_events(csv.DictReader(f))
