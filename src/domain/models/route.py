from __future__ import annotations

from dataclasses import dataclass

from .geo import GeoPoint


@dataclass(frozen=True, slots=True)
class RouteRequest:
    """Origin/destination pair for a single routing call."""

    origin: GeoPoint
    destination: GeoPoint

    def wire_coordinates(self) -> str:
        # Routing services take "lon,lat;lon,lat".
        return f"{self.origin.lon_lat_str()};{self.destination.lon_lat_str()}"


@dataclass(frozen=True, slots=True)
class DrivingRoute:
    origin: GeoPoint
    destination: GeoPoint
    path: tuple[GeoPoint, ...] = ()
    distance_m: float | None = None
    duration_s: float | None = None

    @property
    def is_empty(self) -> bool:
        return not self.path
