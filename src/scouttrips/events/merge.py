"""Combine confirmed schedules with synthetic visit opportunities."""

from __future__ import annotations

import logging
from datetime import date
from typing import Iterable, List, Mapping, Optional, Sequence, Set, Tuple

from scouttrips.config import PlanningConfig, default_config
from scouttrips.geo import coord_key
from scouttrips.models import EventSource, GameEvent, PlayerLevel, RosterPlayer, Venue
from scouttrips.venues.resolver import Override

from .generators import generate_hs_events, generate_ncaa_events, generate_spring_training_events


logger = logging.getLogger(__name__)


def merge_events(
    confirmed: Iterable[GameEvent],
    synthetic: Iterable[GameEvent],
) -> List[GameEvent]:
    """Merge event lists, preferring confirmed data.

    Events are deduplicated by ``event_id`` (first wins). A synthetic event
    loses every athlete already placed at the same venue on the same date by
    a confirmed event, and is dropped when nobody is left.
    """

    seen_ids: Set[str] = set()
    confirmed_slots: Set[Tuple[str, date, str]] = set()
    merged: List[GameEvent] = []

    for event in confirmed:
        if event.event_id in seen_ids:
            continue
        seen_ids.add(event.event_id)
        merged.append(event)
        venue_key = coord_key(event.venue.coords)
        for name in event.player_names:
            confirmed_slots.add((venue_key, event.date, name))

    suppressed = 0
    for event in synthetic:
        if event.event_id in seen_ids:
            suppressed += 1
            continue
        venue_key = coord_key(event.venue.coords)
        remaining = tuple(
            name for name in event.player_names if (venue_key, event.date, name) not in confirmed_slots
        )
        if not remaining:
            suppressed += 1
            continue
        if remaining != event.player_names:
            event = event.model_copy(update={"player_names": remaining})
        seen_ids.add(event.event_id)
        merged.append(event)

    if suppressed:
        logger.debug("Suppressed %d synthetic events covered by confirmed data", suppressed)
    merged.sort(key=lambda e: e.date)
    return merged


def build_event_universe(
    players: Sequence[RosterPlayer],
    start: date,
    end: date,
    *,
    confirmed: Sequence[GameEvent] = (),
    config: Optional[PlanningConfig] = None,
    include_synthetic: bool = True,
    hs_venues: Optional[Mapping[str, Venue]] = None,
    custom_overrides: Optional[Mapping[PlayerLevel, Mapping[str, Override]]] = None,
) -> List[GameEvent]:
    """Assemble every visit opportunity for one planning run.

    NCAA athletes that already appear in confirmed college schedules are not
    given synthetic home dates.
    """

    config = config or default_config()
    if not include_synthetic:
        return merge_events(confirmed, [])

    overrides = custom_overrides or {}
    with_confirmed_ncaa = {
        name
        for event in confirmed
        if event.source == EventSource.CONFIRMED_NCAA
        for name in event.player_names
    }
    ncaa_players = [
        player
        for player in players
        if player.level == PlayerLevel.NCAA and player.player_name not in with_confirmed_ncaa
    ]

    synthetic: List[GameEvent] = []
    synthetic.extend(
        generate_spring_training_events(
            players, start, end, config, custom_overrides=overrides.get(PlayerLevel.PRO)
        )
    )
    synthetic.extend(
        generate_ncaa_events(
            ncaa_players, start, end, config, custom_overrides=overrides.get(PlayerLevel.NCAA)
        )
    )
    if hs_venues:
        synthetic.extend(
            generate_hs_events(
                players, start, end, hs_venues, config, custom_overrides=overrides.get(PlayerLevel.HS)
            )
        )

    merged = merge_events(confirmed, synthetic)
    logger.info(
        "Event universe: %d confirmed + %d synthetic -> %d events",
        len(confirmed),
        len(synthetic),
        len(merged),
    )
    return merged
