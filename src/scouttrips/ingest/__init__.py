"""CSV ingest for rosters and confirmed events."""

from .events import EventParseError, load_events_csv, load_events_text, rows_to_events
from .roster import RosterRow, load_roster_csv, load_roster_text, rows_to_players

__all__ = [
    "EventParseError",
    "RosterRow",
    "load_events_csv",
    "load_events_text",
    "load_roster_csv",
    "load_roster_text",
    "rows_to_events",
    "rows_to_players",
]
