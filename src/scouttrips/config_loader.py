"""Persist and load planning profiles."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional

from scouttrips.models import Coordinates, PlayerLevel, Venue
from scouttrips.venues.resolver import Override


def _venue_from_payload(name: str, payload: Mapping[str, Any]) -> Venue:
    return Venue(
        name=payload.get("name", name),
        coords=Coordinates(lat=payload["lat"], lng=payload["lng"]),
    )


def _venue_payload(venue: Venue) -> Dict[str, Any]:
    return {"name": venue.name, "lat": venue.coords.lat, "lng": venue.coords.lng}


@dataclass
class PlanProfile:
    """Operator settings that survive between runs.

    ``custom_aliases`` maps a level ("Pro", "NCAA", "HS") to raw org names
    pointing at either a canonical name in the static tables or an explicit
    venue. ``hs_venues`` maps high-school names to their venues.
    """

    priority_players: List[str] = field(default_factory=list)
    custom_aliases: Dict[str, Dict[str, Override]] = field(default_factory=dict)
    hs_venues: Dict[str, Venue] = field(default_factory=dict)
    max_drive_minutes: Optional[int] = None
    home_base: Optional[Coordinates] = None

    @classmethod
    def load(cls, path: Path) -> "PlanProfile":
        data = json.loads(path.read_text(encoding="utf-8"))
        aliases: Dict[str, Dict[str, Override]] = {}
        for level, entries in data.get("custom_aliases", {}).items():
            aliases[level] = {
                raw: target if isinstance(target, str) else _venue_from_payload(raw, target)
                for raw, target in entries.items()
            }
        home = data.get("home_base")
        return cls(
            priority_players=list(data.get("priority_players", [])),
            custom_aliases=aliases,
            hs_venues={
                school: _venue_from_payload(school, payload)
                for school, payload in data.get("hs_venues", {}).items()
            },
            max_drive_minutes=data.get("max_drive_minutes"),
            home_base=Coordinates(lat=home["lat"], lng=home["lng"]) if home else None,
        )

    def save(self, path: Path) -> None:
        payload = {
            "priority_players": self.priority_players,
            "custom_aliases": {
                level: {
                    raw: target if isinstance(target, str) else _venue_payload(target)
                    for raw, target in entries.items()
                }
                for level, entries in self.custom_aliases.items()
            },
            "hs_venues": {school: _venue_payload(venue) for school, venue in self.hs_venues.items()},
            "max_drive_minutes": self.max_drive_minutes,
            "home_base": (
                {"lat": self.home_base.lat, "lng": self.home_base.lng} if self.home_base else None
            ),
        }
        path.write_text(json.dumps(payload, indent=2), encoding="utf-8")

    def overrides_by_level(self) -> Dict[PlayerLevel, Dict[str, Override]]:
        """Custom aliases keyed by level; unknown level labels raise ValueError."""

        overrides: Dict[PlayerLevel, Dict[str, Override]] = {}
        for label, entries in self.custom_aliases.items():
            overrides.setdefault(PlayerLevel.parse(label), {}).update(entries)
        return overrides
