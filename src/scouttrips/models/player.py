"""Roster athlete model shared across ingest, generators and the planner."""

from __future__ import annotations

import re
from datetime import date
from enum import Enum
from typing import Any, Dict, Mapping, Optional

from pydantic import BaseModel, Field, computed_field, model_validator
from pydantic.config import ConfigDict


TIER_VISIT_TARGETS: Mapping[int, int] = {1: 5, 2: 3, 3: 1, 4: 0}

_LEVEL_ALIASES = {
    "pro": "Pro",
    "professional": "Pro",
    "mlb": "Pro",
    "milb": "Pro",
    "ncaa": "NCAA",
    "college": "NCAA",
    "hs": "HS",
    "high school": "HS",
}


def normalize_name(name: str) -> str:
    return re.sub(r"\s+", " ", name.strip().lower())


class PlayerLevel(str, Enum):
    PRO = "Pro"
    NCAA = "NCAA"
    HS = "HS"

    @classmethod
    def parse(cls, raw: str, *, default: Optional["PlayerLevel"] = None) -> "PlayerLevel":
        """Map free-text roster levels onto the enum.

        Unknown values fall back to ``default`` when given, otherwise raise
        ``ValueError``.
        """

        canonical = _LEVEL_ALIASES.get(normalize_name(raw or ""))
        if canonical is None:
            if default is not None:
                return default
            raise ValueError(f"Unknown player level {raw!r}")
        return cls(canonical)


class RosterPlayer(BaseModel):
    """Athlete on the roster with a yearly in-person visit quota."""

    player_name: str = Field(..., min_length=1)
    org: str = ""
    level: PlayerLevel = PlayerLevel.PRO
    tier: int = Field(default=2, ge=1, le=4)
    visit_target: int = Field(default=0, ge=0)
    visits_completed: int = Field(default=0, ge=0)
    last_visit_date: Optional[date] = None
    position: str = ""
    state: str = ""
    draft_class: str = ""
    lead_agent: str = ""
    metadata: Dict[str, Any] = Field(default_factory=dict)

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="before")
    @classmethod
    def _default_target_from_tier(cls, data: Any) -> Any:
        if isinstance(data, dict) and data.get("visit_target") is None:
            data = dict(data)
            tier = data.get("tier", 2)
            try:
                data["visit_target"] = TIER_VISIT_TARGETS.get(int(tier), 0)
            except (TypeError, ValueError):
                data.pop("visit_target", None)
        return data

    @computed_field  # type: ignore[prop-decorator]
    @property
    def normalized_name(self) -> str:
        return normalize_name(self.player_name)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def visits_remaining(self) -> int:
        return max(0, self.visit_target - self.visits_completed)

    @property
    def needs_visit(self) -> bool:
        return self.visits_remaining > 0

    def with_visits(
        self,
        visits_completed: int,
        last_visit_date: Optional[date] = None,
    ) -> "RosterPlayer":
        """Return a copy reflecting an operator override of completed visits."""

        if visits_completed < 0:
            raise ValueError("visits_completed must be non-negative")
        update: Dict[str, Any] = {"visits_completed": visits_completed}
        if last_visit_date is not None:
            update["last_visit_date"] = last_visit_date
        return self.model_copy(update=update)
