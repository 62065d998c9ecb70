from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class GeoPoint:
    """A (latitude, longitude) coordinate."""

    lat: float
    lon: float

    def __post_init__(self) -> None:
        if not (-90.0 <= self.lat <= 90.0):
            raise ValueError(f"Invalid latitude: {self.lat}")
        if not (-180.0 <= self.lon <= 180.0):
            raise ValueError(f"Invalid longitude: {self.lon}")

    @staticmethod
    def from_lon_lat(pair: tuple[float, float] | list[float]) -> "GeoPoint":
        """Build a point from a GeoJSON-style [lon, lat] pair."""

        lon, lat = pair
        return GeoPoint(lat=float(lat), lon=float(lon))

    def lon_lat_str(self) -> str:
        return f"{self.lon},{self.lat}"
