from __future__ import annotations

from pydantic import BaseModel

from src.adapters.api.schemas.journey import GeoPointSchema


class MarkerIconSchema(BaseModel):
    size: tuple[int, int] = (30, 50)
    anchor: tuple[int, int] = (15, 50)


class MapViewSchema(BaseModel):
    """Initial map view for the presentation layer."""

    center: GeoPointSchema = GeoPointSchema(lat=44.7866, lon=20.4489)
    zoom: int = 6
    tile_url: str = "https://{s}.tile.openstreetmap.org/{z}/{x}/{y}.png"
    attribution: str = (
        '&copy; <a href="https://www.openstreetmap.org/copyright">OpenStreetMap</a>'
        " contributors"
    )
    path_color: str = "blue"
    marker_icon: MarkerIconSchema = MarkerIconSchema()
