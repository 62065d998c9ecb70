from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query

from src.adapters.api.dependencies import get_journey_planner
from src.adapters.api.schemas.journey import (
    GeoPointSchema,
    JourneyRequestSchema,
    JourneySchema,
)
from src.app.services.journey_planner import JourneyPlanner
from src.domain.models import RequestState

router = APIRouter(tags=["journey"])


def state_to_schema(state: RequestState) -> JourneySchema:
    return JourneySchema(
        status=state.status.value,
        origin_query=state.origin_query,
        destination_query=state.destination_query,
        markers=[GeoPointSchema(lat=p.lat, lon=p.lon) for p in state.markers],
        path=[GeoPointSchema(lat=p.lat, lon=p.lon) for p in state.path],
        distance_m=state.distance_m,
        duration_s=state.duration_s,
        error=state.error,
    )


@router.post("/journey", response_model=JourneySchema)
async def plan_journey(
    req: JourneyRequestSchema,
    planner: JourneyPlanner = Depends(get_journey_planner),
) -> JourneySchema:
    state = await planner.submit(req.origin, req.destination)
    return state_to_schema(state)


@router.get("/journey", response_model=JourneySchema)
async def plan_journey_query(
    origin: str = Query(..., min_length=1),
    destination: str = Query(..., min_length=1),
    planner: JourneyPlanner = Depends(get_journey_planner),
) -> JourneySchema:
    if not origin.strip() or not destination.strip():
        raise HTTPException(
            status_code=422, detail="origin and destination must not be blank"
        )
    state = await planner.submit(origin, destination)
    return state_to_schema(state)
