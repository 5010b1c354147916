"""Entry point that runs a full planning pass over resolved roster and events."""

from __future__ import annotations

import logging
import time
from datetime import date
from typing import Callable, Iterable, Optional, Sequence

from scouttrips.config import PlanningConfig, default_config
from scouttrips.geo import DriveTimeCache
from scouttrips.models import GameEvent, RosterPlayer

from .candidates import build_trip_candidates, players_needing_visits
from .flyin import classify_uncovered
from .selection import MAX_PRIORITY_PLAYERS, select_trips
from .trips import TripPlan


logger = logging.getLogger(__name__)

ProgressCallback = Callable[[str, Optional[str]], None]

STEP_PREPARING = "preparing"
STEP_ANALYZING = "analyzing"
STEP_OPTIMIZING = "optimizing"
STEP_FLY_IN = "fly-in analysis"


def _coverage_percent(covered: int, needing: int) -> int:
    if needing <= 0:
        return 0
    return int(covered * 100 / needing + 0.5)


def plan_trips(
    events: Iterable[GameEvent],
    players: Sequence[RosterPlayer],
    start: date,
    end: date,
    config: Optional[PlanningConfig] = None,
    *,
    priority_players: Sequence[str] = (),
    on_progress: Optional[ProgressCallback] = None,
) -> TripPlan:
    """Plan road trips and fly-ins for every athlete with visits remaining.

    The run is synchronous and holds no state between calls. ``on_progress``
    is called at the four milestones only; exceptions it raises propagate.
    """

    if end < start:
        raise ValueError(f"end date {end} is before start date {start}")
    if len([name for name in priority_players if name and name.strip()]) > MAX_PRIORITY_PLAYERS:
        raise ValueError(f"At most {MAX_PRIORITY_PLAYERS} priority athletes are supported")

    config = config or default_config()
    event_list = list(events)

    def notify(step: str, detail: Optional[str] = None) -> None:
        if on_progress is not None:
            on_progress(step, detail)

    started = time.perf_counter()
    notify(STEP_PREPARING, "Filtering athletes with visits remaining")
    needing = players_needing_visits(players)
    if not needing:
        logger.info("No athletes need visits between %s and %s", start, end)
        selection = select_trips((), players, config, priority_players)
        return TripPlan(priority_results=selection.priority_results)

    cache = DriveTimeCache()
    notify(STEP_ANALYZING, f"Building trip candidates from {len(event_list)} events")
    candidates = build_trip_candidates(event_list, players, start, end, config, drive_cache=cache)

    notify(STEP_OPTIMIZING, f"Selecting from {len(candidates)} candidates")
    selection = select_trips(candidates, players, config, priority_players)

    notify(STEP_FLY_IN, "Classifying athletes beyond the drive radius")
    fly_ins, unvisitable = classify_uncovered(
        event_list,
        players,
        selection.covered,
        start,
        end,
        config,
        drive_cache=cache,
    )

    covered_count = len(selection.covered)
    plan = TripPlan(
        trips=selection.trips,
        fly_in_visits=tuple(fly_ins),
        unvisitable_players=tuple(unvisitable),
        coverage_percent=_coverage_percent(covered_count, len(needing)),
        total_players_with_visits=len(needing),
        total_visits_covered=covered_count,
        priority_results=selection.priority_results,
    )
    logger.info(
        "Planned %d trips, %d fly-ins, %d unvisitable (%d%% coverage) in %.3fs",
        len(plan.trips),
        len(plan.fly_in_visits),
        len(plan.unvisitable_players),
        plan.coverage_percent,
        time.perf_counter() - started,
    )
    return plan
