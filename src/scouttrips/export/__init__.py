"""Plan export helpers."""

from .ics import CalendarExportError, plan_to_ics, trips_to_ics

__all__ = ["CalendarExportError", "plan_to_ics", "trips_to_ics"]
