"""Closed-form travel estimates between venues.

Drive times are a haversine distance inflated by a road detour factor and
divided by an average highway speed. They are used for candidate generation
where calling a routing service for every venue pair would be far too slow.
"""

from __future__ import annotations

import math
from typing import Dict, Tuple

from scouttrips.models import Coordinates


EARTH_RADIUS_KM = 6371.0
ROAD_DETOUR_FACTOR = 1.3
AVERAGE_ROAD_SPEED_KMH = 90.0
FLIGHT_CRUISE_SPEED_KMH = 800.0
# Airport security, boarding and rental car pickup/return on both ends.
FLIGHT_GROUND_OVERHEAD_HOURS = 3.0


def haversine_km(a: Coordinates, b: Coordinates) -> float:
    lat1, lat2 = math.radians(a.lat), math.radians(b.lat)
    d_lat = lat2 - lat1
    d_lng = math.radians(b.lng - a.lng)
    h = math.sin(d_lat / 2) ** 2 + math.cos(lat1) * math.cos(lat2) * math.sin(d_lng / 2) ** 2
    return 2 * EARTH_RADIUS_KM * math.asin(min(1.0, math.sqrt(h)))


def estimate_drive_minutes(a: Coordinates, b: Coordinates) -> int:
    road_km = haversine_km(a, b) * ROAD_DETOUR_FACTOR
    return round(road_km / AVERAGE_ROAD_SPEED_KMH * 60)


def estimate_flight_hours(distance_km: float) -> float:
    return round(distance_km / FLIGHT_CRUISE_SPEED_KMH + FLIGHT_GROUND_OVERHEAD_HOURS, 1)


def coord_key(coords: Coordinates) -> str:
    return f"{coords.lat:.4f},{coords.lng:.4f}"


class DriveTimeCache:
    """Per-run memo of drive estimates keyed by rounded coordinates."""

    def __init__(self) -> None:
        self._minutes: Dict[Tuple[str, str], int] = {}

    def __len__(self) -> int:
        return len(self._minutes)

    def minutes(self, a: Coordinates, b: Coordinates) -> int:
        key_a, key_b = coord_key(a), coord_key(b)
        # Estimates are symmetric so both orderings share one slot.
        key = (key_a, key_b) if key_a <= key_b else (key_b, key_a)
        cached = self._minutes.get(key)
        if cached is None:
            cached = estimate_drive_minutes(a, b)
            self._minutes[key] = cached
        return cached
