from __future__ import annotations

from fastapi import APIRouter

from src.adapters.api.schemas.map_view import MapViewSchema

router = APIRouter(prefix="/map", tags=["map"])


@router.get("/config", response_model=MapViewSchema)
def get_map_config() -> MapViewSchema:
    return MapViewSchema()
