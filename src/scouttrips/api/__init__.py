"""REST API for the scouting trip planner."""

from __future__ import annotations

from typing import List

from fastapi import FastAPI, HTTPException
from fastapi.responses import Response

from scouttrips.api.schemas import PlanRequest, TripPlanResponse
from scouttrips.config import default_config
from scouttrips.export import plan_to_ics
from scouttrips.ingest import EventParseError, load_events_text, load_roster_text
from scouttrips.models import GameEvent, PlayerLevel, RosterPlayer
from scouttrips.planner import TripPlan
from scouttrips.runner import run_plan


def _request_players(request: PlanRequest) -> List[RosterPlayer]:
    players = list(request.players)
    if request.roster_csv:
        players.extend(load_roster_text(request.roster_csv))
    return players


def _request_events(request: PlanRequest) -> List[GameEvent]:
    events = list(request.events)
    if request.events_csv:
        events.extend(load_events_text(request.events_csv))
    return events


def _plan_from_request(request: PlanRequest) -> tuple[TripPlan, List[RosterPlayer]]:
    try:
        players = _request_players(request)
        events = _request_events(request)
        config = default_config().with_overrides(
            max_drive_minutes=request.max_drive_minutes,
            home_base=request.home_base,
        )
        overrides = {
            PlayerLevel.parse(label): entries for label, entries in request.custom_aliases.items()
        }
        plan = run_plan(
            players,
            request.start,
            request.end,
            confirmed=events,
            config=config,
            priority_players=request.priority_players,
            include_synthetic=request.include_synthetic,
            hs_venues=request.hs_venues,
            custom_overrides=overrides,
        )
    except EventParseError as exc:
        raise HTTPException(status_code=400, detail=f"Invalid events CSV: {exc}") from exc
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    return plan, players


def create_app() -> FastAPI:
    app = FastAPI(title="scouttrips planner")

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    @app.post("/plan", response_model=TripPlanResponse)
    def plan(request: PlanRequest) -> TripPlanResponse:
        trip_plan, _ = _plan_from_request(request)
        return TripPlanResponse.from_plan(trip_plan)

    @app.post("/plan.ics")
    def plan_ics(request: PlanRequest) -> Response:
        trip_plan, players = _plan_from_request(request)
        return Response(
            content=plan_to_ics(trip_plan, players),
            media_type="text/calendar",
            headers={"Content-Disposition": 'attachment; filename="trips.ics"'},
        )

    return app


__all__ = ["create_app"]
