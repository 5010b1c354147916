"""Choose trips from the candidate pool.

Selection runs in two phases. Operator-named priority athletes are placed
first, then a greedy maximum-coverage loop repeatedly takes the candidate
with the highest value over athletes nobody has visited yet. Candidate
objects are never modified; each pass builds a fresh score map instead.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import AbstractSet, Dict, FrozenSet, Iterable, List, Mapping, Optional, Sequence, Set, Tuple

from scouttrips.config import PlanningConfig, default_config
from scouttrips.models import RosterPlayer, normalize_name

from .candidates import players_needing_visits
from .scoring import visit_value
from .trips import PriorityResult, PriorityStatus, TripCandidate


logger = logging.getLogger(__name__)

MAX_PRIORITY_PLAYERS = 2


@dataclass(frozen=True)
class SelectionResult:
    trips: Tuple[TripCandidate, ...]
    covered: FrozenSet[str]
    priority_results: Optional[Tuple[PriorityResult, ...]] = None


def rescore(
    candidate: TripCandidate,
    roster: Mapping[str, RosterPlayer],
    visited: AbstractSet[str],
    config: PlanningConfig,
) -> int:
    return visit_value(
        candidate.player_names,
        roster,
        config,
        candidate.anchor_event.date,
        exclude=visited,
    )


def rescore_candidates(
    candidates: Sequence[TripCandidate],
    roster: Mapping[str, RosterPlayer],
    visited: AbstractSet[str],
    config: PlanningConfig,
) -> List[int]:
    """Current value of every candidate given the athletes already covered."""

    return [rescore(candidate, roster, visited, config) for candidate in candidates]


def _rank_key(candidate: TripCandidate, score: int) -> Tuple[int, object, str, str]:
    # Ties go to the earlier anchor date, then venue name, then event id.
    anchor = candidate.anchor_event
    return -score, anchor.date, anchor.venue.name, anchor.event_id


class _Selector:
    def __init__(
        self,
        candidates: Sequence[TripCandidate],
        roster: Mapping[str, RosterPlayer],
        config: PlanningConfig,
    ) -> None:
        self.candidates = list(candidates)
        self.roster = roster
        self.config = config
        self.pool: List[int] = list(range(len(self.candidates)))
        self.visited: Set[str] = set()
        self.accepted: List[TripCandidate] = []

    def scores(self) -> Dict[int, int]:
        return {
            index: rescore(self.candidates[index], self.roster, self.visited, self.config)
            for index in self.pool
        }

    def best_containing(self, *player_names: str) -> Optional[int]:
        options = [
            index
            for index in self.pool
            if all(name in self.candidates[index].player_names for name in player_names)
        ]
        if not options:
            return None
        scores = self.scores()
        return min(options, key=lambda index: _rank_key(self.candidates[index], scores[index]))

    def accept(self, index: int, score: Optional[int] = None) -> TripCandidate:
        candidate = self.candidates[index]
        if score is None:
            score = rescore(candidate, self.roster, self.visited, self.config)
        self.pool.remove(index)
        self.visited.update(candidate.player_names)
        accepted = replace(candidate, visit_value=score)
        self.accepted.append(accepted)
        return accepted


def _resolve_priority_names(
    priority_players: Iterable[str],
    players: Iterable[RosterPlayer],
) -> List[Tuple[str, Optional[str]]]:
    by_normalized = {player.normalized_name: player.player_name for player in players}
    resolved: List[Tuple[str, Optional[str]]] = []
    for raw in priority_players:
        if not raw or not raw.strip():
            continue
        resolved.append((raw.strip(), by_normalized.get(normalize_name(raw))))
    return resolved


NOT_ON_ROSTER_REASON = "Not found on the roster"
NO_VISITS_REMAINING_REASON = "No visits remaining"


def _unreachable(display_name: str, config: PlanningConfig, *, on_roster: bool) -> PriorityResult:
    if not on_roster:
        reason = NOT_ON_ROSTER_REASON
    else:
        reason = (
            f"No road trip within {config.max_drive_minutes} minutes of home "
            "includes this athlete"
        )
    return PriorityResult(player_name=display_name, status=PriorityStatus.UNREACHABLE, reason=reason)


def _run_priority_phase(
    selector: _Selector,
    priorities: Sequence[Tuple[str, Optional[str]]],
    config: PlanningConfig,
) -> List[PriorityResult]:
    results: List[PriorityResult] = []
    names = [name for _, name in priorities if name is not None and name in selector.roster]

    if len(priorities) == 2 and len(names) == 2 and names[0] != names[1]:
        together = selector.best_containing(*names)
        if together is not None:
            selector.accept(together)
            logger.info("Priority athletes %s and %s share trip #1", names[0], names[1])
            return [
                PriorityResult(player_name=name, status=PriorityStatus.INCLUDED)
                for name in names
            ]

    split = len(names) == 2 and names[0] != names[1]
    for display_name, name in priorities:
        if name is None:
            results.append(_unreachable(display_name, config, on_roster=False))
            continue
        if name not in selector.roster:
            results.append(
                PriorityResult(
                    player_name=name,
                    status=PriorityStatus.UNREACHABLE,
                    reason=NO_VISITS_REMAINING_REASON,
                )
            )
            continue
        if name in selector.visited:
            results.append(PriorityResult(player_name=name, status=PriorityStatus.INCLUDED))
            continue
        index = selector.best_containing(name)
        if index is None:
            results.append(_unreachable(name, config, on_roster=True))
            continue
        selector.accept(index)
        if split:
            results.append(
                PriorityResult(
                    player_name=name,
                    status=PriorityStatus.SEPARATE_TRIP,
                    reason="No single trip reaches both priority athletes; scheduled on its own trip",
                )
            )
        else:
            results.append(PriorityResult(player_name=name, status=PriorityStatus.INCLUDED))
    return results


def select_trips(
    candidates: Sequence[TripCandidate],
    players: Sequence[RosterPlayer],
    config: Optional[PlanningConfig] = None,
    priority_players: Sequence[str] = (),
) -> SelectionResult:
    """Pick an ordered list of trips: priority trips first, then greedy picks.

    Accepted trips carry the value they added at the moment they were taken,
    so later trips report only athletes that were still uncovered.
    """

    config = config or default_config()
    priorities = _resolve_priority_names(priority_players, players)
    if len(priorities) > MAX_PRIORITY_PLAYERS:
        raise ValueError(f"At most {MAX_PRIORITY_PLAYERS} priority athletes are supported")

    roster = players_needing_visits(players)
    selector = _Selector(candidates, roster, config)

    priority_results: Optional[List[PriorityResult]] = None
    if priorities:
        priority_results = _run_priority_phase(selector, priorities, config)

    while selector.pool:
        scores = selector.scores()
        selector.pool.sort(key=lambda index: _rank_key(selector.candidates[index], scores[index]))
        best = selector.pool[0]
        if scores[best] <= 0:
            break
        selector.accept(best, scores[best])

    logger.info(
        "Selected %d trips covering %d athletes (%d candidates unused)",
        len(selector.accepted),
        len(selector.visited),
        len(selector.pool),
    )
    return SelectionResult(
        trips=tuple(selector.accepted),
        covered=frozenset(selector.visited),
        priority_results=tuple(priority_results) if priority_results is not None else None,
    )
