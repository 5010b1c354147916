"""Lightweight REST client for the scouttrips API."""

from __future__ import annotations

import argparse
import json
from pathlib import Path

import httpx


def build_payload(args: argparse.Namespace) -> dict:
    payload: dict = {
        "start": args.start,
        "end": args.end,
        "roster_csv": args.roster.read_text(encoding="utf-8"),
        "priority_players": args.priority or [],
        "include_synthetic": not args.no_synthetic,
    }
    if args.events:
        payload["events_csv"] = args.events.read_text(encoding="utf-8")
    if args.max_drive_minutes is not None:
        payload["max_drive_minutes"] = args.max_drive_minutes
    return payload


def main() -> None:
    parser = argparse.ArgumentParser(description="Interact with the scouttrips REST API")
    parser.add_argument("base_url", help="Base URL of the API, e.g. http://localhost:8000")
    parser.add_argument("roster", type=Path, help="Roster CSV")
    parser.add_argument("--events", type=Path, help="Confirmed events CSV")
    parser.add_argument("--start", required=True, help="First day (YYYY-MM-DD)")
    parser.add_argument("--end", required=True, help="Last day (YYYY-MM-DD)")
    parser.add_argument("--max-drive-minutes", type=int, default=None)
    parser.add_argument("--priority", nargs="*", default=None, help="Priority athlete names")
    parser.add_argument("--no-synthetic", action="store_true", help="Use confirmed events only")
    parser.add_argument("--ics", type=Path, help="Download the plan as a calendar file instead")
    args = parser.parse_args()

    payload = build_payload(args)
    with httpx.Client(base_url=args.base_url, timeout=120.0) as client:
        if args.ics:
            resp = client.post("/plan.ics", json=payload)
        else:
            resp = client.post("/plan", json=payload)
        if resp.status_code == 400:
            raise SystemExit(f"Request rejected: {resp.json().get('detail')}")
        resp.raise_for_status()

    if args.ics:
        args.ics.write_text(resp.text, encoding="utf-8")
        print(f"Calendar saved to {args.ics}")
        return

    plan = resp.json()
    print(
        f"{len(plan['trips'])} trips, {len(plan['fly_in_visits'])} fly-ins, "
        f"{plan['coverage_percent']}% coverage"
    )
    print(json.dumps(plan, indent=2))


if __name__ == "__main__":
    main()
