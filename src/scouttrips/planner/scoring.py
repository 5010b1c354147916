"""Tier-weighted visit value."""

from __future__ import annotations

import math
from datetime import date
from typing import AbstractSet, Iterable, Mapping, Optional

from scouttrips.config import PlanningConfig
from scouttrips.models import RosterPlayer


def raw_visit_value(
    player_names: Iterable[str],
    roster: Mapping[str, RosterPlayer],
    config: PlanningConfig,
    *,
    exclude: Optional[AbstractSet[str]] = None,
) -> int:
    """Sum ``tier_weight * visits_remaining`` over distinct known athletes."""

    score = 0
    for name in set(player_names):
        if exclude and name in exclude:
            continue
        player = roster.get(name)
        if player is None:
            continue
        score += config.tier_weight(player.tier) * player.visits_remaining
    return score


def apply_anchor_bonus(score: int, anchor_day: date, config: PlanningConfig) -> int:
    if anchor_day.weekday() != config.anchor_weekday:
        return score
    return int(math.floor(score * config.anchor_bonus + 0.5))


def visit_value(
    player_names: Iterable[str],
    roster: Mapping[str, RosterPlayer],
    config: PlanningConfig,
    anchor_day: date,
    *,
    exclude: Optional[AbstractSet[str]] = None,
) -> int:
    raw = raw_visit_value(player_names, roster, config, exclude=exclude)
    return apply_anchor_bonus(raw, anchor_day, config)
