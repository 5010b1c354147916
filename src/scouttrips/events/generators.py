"""Synthetic visit opportunities for levels without a confirmed schedule feed."""

from __future__ import annotations

import logging
import re
from datetime import date
from typing import Dict, Iterable, List, Mapping, Optional, Tuple

from scouttrips.config import PlanningConfig, SeasonWindow, default_config
from scouttrips.models import Confidence, EventSource, GameEvent, PlayerLevel, RosterPlayer, Venue
from scouttrips.planner.calendar import dates_in_range, is_blackout_day, is_within_season
from scouttrips.venues import VenueResolver, hs_resolver, ncaa_resolver, spring_training_resolver
from scouttrips.venues.resolver import Override


logger = logging.getLogger(__name__)


def _slug(value: str) -> str:
    return re.sub(r"[^a-z0-9]+", "-", value.lower()).strip("-")


def _season_dates(
    start: date,
    end: date,
    season: SeasonWindow,
    config: PlanningConfig,
) -> List[date]:
    return [
        day
        for day in dates_in_range(start, end)
        if is_within_season(day, season.start, season.end)
        and not is_blackout_day(day, config.blackout_weekday)
    ]


def _confidence_for(day: date, season: SeasonWindow, venue: Venue) -> Tuple[Confidence, str]:
    if day.weekday() in season.typical_days:
        return Confidence.MEDIUM, f"Typical {season.label} day at {venue.name}"
    return Confidence.LOW, f"Not a typical {season.label} day; athlete may be traveling"


def _group_by_venue(
    players: Iterable[RosterPlayer],
    level: PlayerLevel,
    resolver: VenueResolver,
    custom_overrides: Optional[Mapping[str, Override]],
) -> Dict[str, Tuple[Venue, List[str]]]:
    grouped: Dict[str, Tuple[Venue, List[str]]] = {}
    for player in players:
        if player.level != level or not player.needs_visit:
            continue
        venue = resolver.resolve(player.org, custom_overrides)
        canonical = resolver.canonical_name(player.org, custom_overrides)
        if venue is None or canonical is None:
            logger.debug("No %s venue for %s (org=%r)", level.value, player.player_name, player.org)
            continue
        grouped.setdefault(canonical, (venue, []))[1].append(player.player_name)
    return grouped


def _generate_level_events(
    players: Iterable[RosterPlayer],
    start: date,
    end: date,
    *,
    level: PlayerLevel,
    source: EventSource,
    id_prefix: str,
    resolver: VenueResolver,
    config: PlanningConfig,
    custom_overrides: Optional[Mapping[str, Override]] = None,
) -> List[GameEvent]:
    season = config.season_for(level)
    dates = _season_dates(start, end, season, config)
    if not dates:
        return []

    grouped = _group_by_venue(players, level, resolver, custom_overrides)
    events: List[GameEvent] = []
    for canonical, (venue, player_names) in grouped.items():
        for day in dates:
            confidence, note = _confidence_for(day, season, venue)
            events.append(
                GameEvent(
                    event_id=f"{id_prefix}-{_slug(canonical)}-{day.isoformat()}",
                    date=day,
                    venue=venue,
                    source=source,
                    player_names=tuple(player_names),
                    is_home=True,
                    home_team=venue.name,
                    away_team=season.label.title(),
                    confidence=confidence,
                    confidence_note=note,
                )
            )

    logger.debug(
        "Generated %d %s events across %d venues", len(events), source.value, len(grouped)
    )
    return events


def generate_spring_training_events(
    players: Iterable[RosterPlayer],
    start: date,
    end: date,
    config: Optional[PlanningConfig] = None,
    *,
    resolver: Optional[VenueResolver] = None,
    custom_overrides: Optional[Mapping[str, Override]] = None,
) -> List[GameEvent]:
    """Pro athletes report to their parent club's camp every non-blackout day."""

    return _generate_level_events(
        players,
        start,
        end,
        level=PlayerLevel.PRO,
        source=EventSource.SYNTHETIC_SPRING_TRAINING,
        id_prefix="st",
        resolver=resolver or spring_training_resolver(),
        config=config or default_config(),
        custom_overrides=custom_overrides,
    )


def generate_ncaa_events(
    players: Iterable[RosterPlayer],
    start: date,
    end: date,
    config: Optional[PlanningConfig] = None,
    *,
    resolver: Optional[VenueResolver] = None,
    custom_overrides: Optional[Mapping[str, Override]] = None,
) -> List[GameEvent]:
    return _generate_level_events(
        players,
        start,
        end,
        level=PlayerLevel.NCAA,
        source=EventSource.SYNTHETIC_NCAA,
        id_prefix="ncaa",
        resolver=resolver or ncaa_resolver(),
        config=config or default_config(),
        custom_overrides=custom_overrides,
    )


def generate_hs_events(
    players: Iterable[RosterPlayer],
    start: date,
    end: date,
    school_venues: Mapping[str, Venue],
    config: Optional[PlanningConfig] = None,
    *,
    custom_overrides: Optional[Mapping[str, Override]] = None,
) -> List[GameEvent]:
    """High school events need geocoded school venues keyed by the roster org."""

    return _generate_level_events(
        players,
        start,
        end,
        level=PlayerLevel.HS,
        source=EventSource.SYNTHETIC_HS,
        id_prefix="hs",
        resolver=hs_resolver(school_venues),
        config=config or default_config(),
        custom_overrides=custom_overrides,
    )
