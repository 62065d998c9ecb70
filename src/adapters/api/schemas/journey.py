from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field, field_validator


class GeoPointSchema(BaseModel):
    lat: float = Field(..., ge=-90.0, le=90.0)
    lon: float = Field(..., ge=-180.0, le=180.0)


class JourneyRequestSchema(BaseModel):
    origin: str = Field(..., min_length=1)
    destination: str = Field(..., min_length=1)

    @field_validator("origin", "destination")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be blank")
        return value


class JourneySchema(BaseModel):
    status: Literal["idle", "resolving", "routing", "resolved", "error"]
    origin_query: str
    destination_query: str
    markers: list[GeoPointSchema] = []
    path: list[GeoPointSchema] = []
    distance_m: float | None = None
    duration_s: float | None = None
    error: str | None = None
