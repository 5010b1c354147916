"""Resolve free-text organization names to canonical venues."""

from __future__ import annotations

from typing import Dict, Mapping, Optional, Union

from scouttrips.models import Venue

from .aliases import MLB_ALIAS_GROUPS, NCAA_ALIAS_LOOKUP, org_token
from .sites import NCAA_VENUES, SPRING_TRAINING_SITES


Override = Union[str, Venue]


class VenueResolver:
    """Two-table lookup: operator overrides first, then the static table.

    ``venues`` is keyed by canonical name and ``aliases`` maps normalized
    tokens (see :func:`org_token`) to those canonical names. Override values
    may be a :class:`Venue` or another name to look up in the static table.
    """

    def __init__(self, venues: Mapping[str, Venue], aliases: Optional[Mapping[str, str]] = None):
        self._venues: Dict[str, Venue] = dict(venues)
        self._aliases: Dict[str, str] = {org_token(name): name for name in self._venues}
        for token, canonical in (aliases or {}).items():
            if canonical in self._venues:
                self._aliases.setdefault(token, canonical)

    def __contains__(self, raw_name: str) -> bool:
        return self.canonical_name(raw_name) is not None

    def canonical_name(
        self,
        raw_name: str,
        custom_overrides: Optional[Mapping[str, Override]] = None,
    ) -> Optional[str]:
        token = org_token(raw_name or "")
        if not token:
            return None
        override = _find_override(token, custom_overrides)
        if isinstance(override, Venue):
            return override.name
        if isinstance(override, str):
            return self._aliases.get(org_token(override))
        return self._aliases.get(token)

    def resolve(
        self,
        raw_name: str,
        custom_overrides: Optional[Mapping[str, Override]] = None,
    ) -> Optional[Venue]:
        token = org_token(raw_name or "")
        if not token:
            return None
        override = _find_override(token, custom_overrides)
        if isinstance(override, Venue):
            return override
        canonical = self.canonical_name(raw_name, custom_overrides)
        if canonical is None:
            return None
        return self._venues.get(canonical)


def _find_override(token: str, overrides: Optional[Mapping[str, Override]]) -> Optional[Override]:
    if not overrides:
        return None
    for raw, value in overrides.items():
        if org_token(raw) == token:
            return value
    return None


def spring_training_resolver() -> VenueResolver:
    """Parent club name -> spring training complex, keyed by MLB team id."""

    venues = {str(team_id): site.venue for team_id, site in SPRING_TRAINING_SITES.items()}
    aliases: Dict[str, str] = {}
    for team_id, names in MLB_ALIAS_GROUPS.items():
        for name in names:
            aliases.setdefault(org_token(name), str(team_id))
    return VenueResolver(venues, aliases)


def ncaa_resolver() -> VenueResolver:
    aliases = {token: str(canonical) for token, canonical in NCAA_ALIAS_LOOKUP.items()}
    return VenueResolver(NCAA_VENUES, aliases)


def hs_resolver(school_venues: Mapping[str, Venue]) -> VenueResolver:
    """High school venues come from geocoding or the operator, never a static table."""

    return VenueResolver(school_venues)
