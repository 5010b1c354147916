"""Command-line interface for planning scouting trips from a roster."""

from __future__ import annotations

import argparse
import logging
from datetime import date
from pathlib import Path
from typing import Optional, Sequence

from scouttrips.api.schemas import TripPlanResponse
from scouttrips.config import default_config
from scouttrips.config_loader import PlanProfile
from scouttrips.export import plan_to_ics
from scouttrips.ingest import load_events_csv, load_roster_csv
from scouttrips.models import Coordinates
from scouttrips.planner import TripPlan
from scouttrips.runner import run_plan


def _parse_date(raw: str) -> date:
    try:
        return date.fromisoformat(raw)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"'{raw}' is not a YYYY-MM-DD date") from exc


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Plan scouting road trips and fly-ins from a roster")
    parser.add_argument("roster", type=Path, help="Path to roster CSV")
    parser.add_argument("--events", type=Path, default=None, help="Optional confirmed events CSV")
    parser.add_argument("--start", type=_parse_date, required=True, help="First day (YYYY-MM-DD)")
    parser.add_argument("--end", type=_parse_date, required=True, help="Last day (YYYY-MM-DD)")
    parser.add_argument(
        "--max-drive-minutes",
        type=int,
        default=None,
        help="Maximum one-way drive from home in minutes",
    )
    parser.add_argument("--home-lat", type=float, default=None, help="Home base latitude")
    parser.add_argument("--home-lng", type=float, default=None, help="Home base longitude")
    parser.add_argument(
        "--priority",
        nargs="*",
        default=None,
        help="Up to two athlete names to schedule first",
    )
    parser.add_argument(
        "--no-synthetic",
        action="store_true",
        help="Plan from confirmed events only",
    )
    parser.add_argument("--load-profile", type=Path, help="Load planning profile JSON", default=None)
    parser.add_argument("--save-profile", type=Path, help="Save planning profile JSON", default=None)
    parser.add_argument("--output", type=Path, default=Path("plan.json"), help="Output JSON path")
    parser.add_argument("--ics", type=Path, default=None, help="Optional calendar export path")
    parser.add_argument("--verbose", "-v", action="store_true", help="Log progress to stderr")
    return parser.parse_args(argv)


def _print_summary(plan: TripPlan) -> None:
    print(
        f"Planned {len(plan.trips)} trips covering "
        f"{plan.total_visits_covered}/{plan.total_players_with_visits} athletes "
        f"({plan.coverage_percent}%)"
    )
    for number, trip in enumerate(plan.trips, start=1):
        days = f"{trip.suggested_days[0]:%a %b %d}" if trip.suggested_days else "-"
        print(
            f"  #{number} {days} {trip.anchor_event.venue.name}: "
            f"{trip.total_players_visited} athletes, {trip.visit_value} pts, "
            f"{trip.drive_from_home_minutes} min from home"
        )
    if plan.fly_in_visits:
        print(f"Fly-in candidates: {len(plan.fly_in_visits)}")
        for visit in plan.fly_in_visits[:5]:
            print(
                f"  {visit.venue.name}: {', '.join(visit.player_names)} "
                f"(~{visit.estimated_travel_hours}h)"
            )
    if plan.unvisitable_players:
        preview = ", ".join(item.player_name for item in plan.unvisitable_players[:5])
        more = len(plan.unvisitable_players) - 5
        suffix = f", +{more} more" if more > 0 else ""
        print(f"Unvisitable athletes: {preview}{suffix}")
    for result in plan.priority_results or ():
        reason = f" ({result.reason})" if result.reason else ""
        print(f"Priority {result.player_name}: {result.status.value}{reason}")


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = _parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    profile = PlanProfile.load(args.load_profile) if args.load_profile else PlanProfile()
    priority = args.priority if args.priority is not None else profile.priority_players
    max_drive = (
        args.max_drive_minutes if args.max_drive_minutes is not None else profile.max_drive_minutes
    )
    home = profile.home_base
    if args.home_lat is not None and args.home_lng is not None:
        home = Coordinates(lat=args.home_lat, lng=args.home_lng)

    try:
        config = default_config().with_overrides(max_drive_minutes=max_drive, home_base=home)
    except ValueError as exc:
        raise SystemExit(f"Invalid planning settings: {exc}") from exc

    players = load_roster_csv(args.roster)
    confirmed = load_events_csv(args.events) if args.events else []

    plan = run_plan(
        players,
        args.start,
        args.end,
        confirmed=confirmed,
        config=config,
        priority_players=priority,
        include_synthetic=not args.no_synthetic,
        hs_venues=profile.hs_venues,
        custom_overrides=profile.overrides_by_level(),
    )

    if args.save_profile:
        profile.priority_players = list(priority)
        profile.max_drive_minutes = max_drive
        profile.home_base = home
        profile.save(args.save_profile)
        print(f"Saved planning profile to {args.save_profile}")

    args.output.write_text(
        TripPlanResponse.from_plan(plan).model_dump_json(indent=2),
        encoding="utf-8",
    )
    print(f"Wrote plan to {args.output}")
    if args.ics:
        args.ics.write_text(plan_to_ics(plan, players), encoding="utf-8")
        print(f"Wrote {len(plan.trips)} calendar events to {args.ics}")

    _print_summary(plan)


if __name__ == "__main__":
    main()
