"""Load roster spreadsheets exported as CSV into roster records."""

from __future__ import annotations

import csv
import logging
import re
from datetime import date, datetime
from io import StringIO
from pathlib import Path
from typing import Iterable, List, Mapping, Optional, Sequence

from pydantic import BaseModel

from scouttrips.models import PlayerLevel, RosterPlayer


logger = logging.getLogger(__name__)

# Field -> accepted spreadsheet headers, in priority order.
ROSTER_COLUMNS: Mapping[str, Sequence[str]] = {
    "name": ("Name", "Player Name", "Player"),
    "org": ("Org", "Organization", "Team", "School"),
    "level": ("Level", "Player Level"),
    "tier": ("Tier", "Player Tier"),
    "visit_target": ("2026 Visit Target", "Visit Target", "Visits Target"),
    "visits_completed": ("Visits Completed", "Visits", "In-Person Visits"),
    "last_visit": ("Last Visit Date", "Last Visit", "Last In-Person"),
    "position": ("Position", "Pos"),
    "state": ("State", "Home State"),
    "draft_class": ("Draft Class", "Class", "Draft Year"),
    "lead_agent": ("Lead Agent", "Agent", "Lead"),
}


def _find_column(row: Mapping[str, Optional[str]], candidates: Sequence[str]) -> str:
    """Return the first non-empty value whose header matches a candidate.

    Headers match exactly (case-insensitive) or as a prefix followed by a
    space or parenthesis, so "State (High School)" matches "State".
    """

    for candidate in candidates:
        wanted = candidate.lower()
        for header, value in row.items():
            if header is None:
                continue
            key = header.strip().lower()
            if key == wanted or key.startswith(wanted + " ") or key.startswith(wanted + "("):
                if value and value.strip():
                    return value.strip()
                break
    return ""


def _parse_int(raw: str) -> Optional[int]:
    text = (raw or "").strip()
    if not text or text in {"N/A", "-"}:
        return None
    match = re.match(r"-?\d+", text)
    return int(match.group(0)) if match else None


def _parse_date(raw: str) -> Optional[date]:
    text = (raw or "").strip()
    if not text:
        return None
    for fmt in ("%Y-%m-%d", "%m/%d/%Y", "%m/%d/%y"):
        try:
            return datetime.strptime(text, fmt).date()
        except ValueError:
            continue
    logger.debug("Ignoring unparseable last visit date %r", raw)
    return None


class RosterRow(BaseModel):
    raw_name: str
    raw_org: str = ""
    raw_level: str = ""
    raw_tier: str = ""
    raw_visit_target: str = ""
    raw_visits_completed: str = ""
    raw_last_visit: str = ""
    raw_position: str = ""
    raw_state: str = ""
    raw_draft_class: str = ""
    raw_lead_agent: str = ""

    @classmethod
    def from_mapping(
        cls,
        row: Mapping[str, Optional[str]],
        columns: Mapping[str, Sequence[str]] = ROSTER_COLUMNS,
    ) -> "RosterRow":
        return cls(**{f"raw_{field}": _find_column(row, headers) for field, headers in columns.items()})

    def to_player(self) -> RosterPlayer:
        tier = _parse_int(self.raw_tier)
        if tier is None or not 1 <= tier <= 4:
            tier = 2
        visits_completed = max(0, _parse_int(self.raw_visits_completed) or 0)
        visit_target = _parse_int(self.raw_visit_target)
        return RosterPlayer(
            player_name=self.raw_name,
            org=self.raw_org,
            level=PlayerLevel.parse(self.raw_level, default=PlayerLevel.PRO),
            tier=tier,
            visit_target=max(0, visit_target) if visit_target is not None else None,
            visits_completed=visits_completed,
            last_visit_date=_parse_date(self.raw_last_visit),
            position=self.raw_position,
            state=self.raw_state,
            draft_class=self.raw_draft_class,
            lead_agent=self.raw_lead_agent,
        )


def rows_to_players(rows: Iterable[Mapping[str, Optional[str]]]) -> List[RosterPlayer]:
    players: List[RosterPlayer] = []
    skipped = 0
    for row in rows:
        parsed = RosterRow.from_mapping(row)
        if not parsed.raw_name:
            skipped += 1
            continue
        players.append(parsed.to_player())
    if skipped:
        logger.debug("Skipped %d roster rows without a player name", skipped)
    logger.info("Loaded %d roster athletes", len(players))
    return players


def load_roster_text(text: str) -> List[RosterPlayer]:
    return rows_to_players(csv.DictReader(StringIO(text)))


def load_roster_csv(path: Path) -> List[RosterPlayer]:
    with path.open(newline="", encoding="utf-8-sig") as f:
        return rows_to_players(csv.DictReader(f))
