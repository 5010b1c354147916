"""Assemble the event universe and run the planner in one call."""

from __future__ import annotations

import logging
from datetime import date
from typing import Mapping, Optional, Sequence

from scouttrips.config import PlanningConfig, default_config
from scouttrips.events import build_event_universe
from scouttrips.models import GameEvent, PlayerLevel, RosterPlayer, Venue
from scouttrips.planner import ProgressCallback, TripPlan, plan_trips
from scouttrips.venues.resolver import Override


logger = logging.getLogger(__name__)


def run_plan(
    players: Sequence[RosterPlayer],
    start: date,
    end: date,
    *,
    confirmed: Sequence[GameEvent] = (),
    config: Optional[PlanningConfig] = None,
    priority_players: Sequence[str] = (),
    include_synthetic: bool = True,
    hs_venues: Optional[Mapping[str, Venue]] = None,
    custom_overrides: Optional[Mapping[PlayerLevel, Mapping[str, Override]]] = None,
    on_progress: Optional[ProgressCallback] = None,
) -> TripPlan:
    if end < start:
        raise ValueError(f"end date {end} is before start date {start}")
    config = config or default_config()
    events = build_event_universe(
        players,
        start,
        end,
        confirmed=confirmed,
        config=config,
        include_synthetic=include_synthetic,
        hs_venues=hs_venues,
        custom_overrides=custom_overrides,
    )
    logger.debug("Planning %d athletes over %d events", len(players), len(events))
    return plan_trips(
        events,
        players,
        start,
        end,
        config,
        priority_players=priority_players,
        on_progress=on_progress,
    )
