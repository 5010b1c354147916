"""Planning configuration for trip generation runs."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field, replace
from typing import Dict, FrozenSet, Mapping

from scouttrips.models import TIER_VISIT_TARGETS, Coordinates, PlayerLevel


logger = logging.getLogger(__name__)

MONDAY, TUESDAY, WEDNESDAY, THURSDAY, FRIDAY, SATURDAY, SUNDAY = range(7)

_MAX_DRIVE_ENV = "SCOUTTRIPS_MAX_DRIVE_MINUTES"
_HOME_LAT_ENV = "SCOUTTRIPS_HOME_LAT"
_HOME_LNG_ENV = "SCOUTTRIPS_HOME_LNG"

# Orlando, FL
DEFAULT_HOME_BASE = Coordinates(lat=28.5383, lng=-81.3792)
DEFAULT_MAX_DRIVE_MINUTES = 180

TIER_WEIGHTS: Mapping[int, int] = {1: 5, 2: 3, 3: 1, 4: 0}


@dataclass(frozen=True)
class SeasonWindow:
    """Yearly window (``MM-DD`` bounds) during which a level plays at home."""

    level: PlayerLevel
    start: str
    end: str
    typical_days: FrozenSet[int]
    label: str


_SEASON_WINDOWS: Dict[PlayerLevel, SeasonWindow] = {
    PlayerLevel.PRO: SeasonWindow(
        level=PlayerLevel.PRO,
        start="02-15",
        end="03-28",
        typical_days=frozenset({MONDAY, TUESDAY, WEDNESDAY, THURSDAY, FRIDAY, SATURDAY}),
        label="spring training",
    ),
    PlayerLevel.NCAA: SeasonWindow(
        level=PlayerLevel.NCAA,
        start="02-13",
        end="06-01",
        typical_days=frozenset({TUESDAY, FRIDAY, SATURDAY}),
        label="college season",
    ),
    PlayerLevel.HS: SeasonWindow(
        level=PlayerLevel.HS,
        start="02-01",
        end="05-15",
        typical_days=frozenset({TUESDAY, THURSDAY, FRIDAY}),
        label="high school season",
    ),
}


def get_season(level: PlayerLevel | str) -> SeasonWindow:
    """Fetch the default season window for a level, raising KeyError if missing."""

    key = PlayerLevel.parse(level) if isinstance(level, str) else level
    if key not in _SEASON_WINDOWS:
        raise KeyError(f"No season window configured for level={level!r}")
    return _SEASON_WINDOWS[key]


@dataclass(frozen=True)
class PlanningConfig:
    """Knobs for a single planning run.

    Defaults reproduce the production setup: Orlando home base, a three hour
    one-way radius, Sunday blackout and Thursday anchors worth a 20% bonus.
    """

    home_base: Coordinates = DEFAULT_HOME_BASE
    max_drive_minutes: int = DEFAULT_MAX_DRIVE_MINUTES
    blackout_weekday: int = SUNDAY
    anchor_weekday: int = THURSDAY
    anchor_bonus: float = 1.2
    window_days_before: int = 1
    window_days_after: int = 2
    tier_weights: Mapping[int, int] = field(default_factory=lambda: dict(TIER_WEIGHTS))
    seasons: Mapping[PlayerLevel, SeasonWindow] = field(
        default_factory=lambda: dict(_SEASON_WINDOWS)
    )

    def __post_init__(self) -> None:
        if self.max_drive_minutes <= 0:
            raise ValueError("max_drive_minutes must be positive")
        for weekday in (self.blackout_weekday, self.anchor_weekday):
            if weekday not in range(7):
                raise ValueError(f"weekday must be 0-6, got {weekday!r}")
        if self.window_days_before < 0 or self.window_days_after < 0:
            raise ValueError("trip window offsets must be non-negative")

    def tier_weight(self, tier: int) -> int:
        return self.tier_weights.get(tier, 0)

    def season_for(self, level: PlayerLevel) -> SeasonWindow:
        if level not in self.seasons:
            raise KeyError(f"No season window configured for level={level.value!r}")
        return self.seasons[level]

    def with_overrides(self, **changes) -> "PlanningConfig":
        """Return a copy with the given fields replaced; ``None`` values are ignored."""

        return replace(self, **{key: value for key, value in changes.items() if value is not None})


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        return float(raw)
    except ValueError:
        logger.warning("Invalid float for %s: %s; using default %.4f", name, raw, default)
        return default


def _env_int(name: str, default: int, *, min_value: int | None = None) -> int:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning("Invalid int for %s: %s; using default %d", name, raw, default)
        return default
    if min_value is not None:
        value = max(min_value, value)
    return value


def default_config() -> PlanningConfig:
    """Build the default config, honoring environment overrides."""

    home = Coordinates(
        lat=_env_float(_HOME_LAT_ENV, DEFAULT_HOME_BASE.lat),
        lng=_env_float(_HOME_LNG_ENV, DEFAULT_HOME_BASE.lng),
    )
    return PlanningConfig(
        home_base=home,
        max_drive_minutes=_env_int(_MAX_DRIVE_ENV, DEFAULT_MAX_DRIVE_MINUTES, min_value=1),
    )
