"""Configuration helpers for planning runs and season windows."""

from .planning import (
    FRIDAY,
    MONDAY,
    SATURDAY,
    SUNDAY,
    THURSDAY,
    TIER_VISIT_TARGETS,
    TIER_WEIGHTS,
    TUESDAY,
    WEDNESDAY,
    PlanningConfig,
    SeasonWindow,
    default_config,
    get_season,
)

__all__ = [
    "PlanningConfig",
    "SeasonWindow",
    "default_config",
    "get_season",
    "TIER_WEIGHTS",
    "TIER_VISIT_TARGETS",
    "MONDAY",
    "TUESDAY",
    "WEDNESDAY",
    "THURSDAY",
    "FRIDAY",
    "SATURDAY",
    "SUNDAY",
]
