from __future__ import annotations

import logging
import math
import os
from dataclasses import dataclass, field
from typing import Any

import httpx

from src.adapters.http import HttpRuntimeConfig, get_json
from src.app.ports.output import IRouteProvider
from src.domain.algorithms.geo_utils import path_length_m
from src.domain.exceptions import MalformedResponseError
from src.domain.models import (
    DrivingRoute,
    GeoPoint,
    NoRouteFound,
    RouteRequest,
    ServiceError,
)

logger = logging.getLogger(__name__)

DEFAULT_OSRM_URL = "https://router.project-osrm.org"

# OSRM answers "no route" with HTTP 400 and this code.
_NO_ROUTE_CODES = frozenset({"NoRoute"})


@dataclass(slots=True)
class OsrmRouteProvider(IRouteProvider):
    """Driving routes from an OSRM `/route/v1/driving` endpoint.

    Env vars:
      - OSRM_URL: service base URL (default: public OSRM demo server)

    The full geometry is requested as GeoJSON, whose [lon, lat] pairs are
    flipped into GeoPoint (lat, lon) before returning.
    """

    base_url: str | None = None
    profile: str = "driving"
    http: HttpRuntimeConfig = field(default_factory=HttpRuntimeConfig.from_env)
    transport: httpx.AsyncBaseTransport | None = None

    def __post_init__(self) -> None:
        if self.base_url is None:
            self.base_url = os.getenv("OSRM_URL") or DEFAULT_OSRM_URL

    async def route(
        self, origin: GeoPoint, destination: GeoPoint
    ) -> DrivingRoute | NoRouteFound | ServiceError:
        request = RouteRequest(origin=origin, destination=destination)
        url = (
            f"{(self.base_url or '').rstrip('/')}/route/v1/{self.profile}/"
            f"{request.wire_coordinates()}"
        )
        params = {"overview": "full", "geometries": "geojson"}

        try:
            data = await get_json(
                url,
                params=params,
                config=self.http,
                transport=self.transport,
                accept_statuses=frozenset({400}),
            )
            return _parse_route(data, request)
        except (httpx.HTTPError, MalformedResponseError) as exc:
            cause = f"{type(exc).__name__}: {exc}"
            logger.warning("Routing %s failed: %s", request.wire_coordinates(), cause)
            return ServiceError(stage="route", cause=cause)


def _parse_route(data: Any, request: RouteRequest) -> DrivingRoute | NoRouteFound:
    if not isinstance(data, dict):
        raise MalformedResponseError(
            f"Expected a route object, got {type(data).__name__}"
        )

    code = data.get("code", "Ok")
    if code in _NO_ROUTE_CODES:
        return NoRouteFound(reason=str(data.get("message") or code))
    if code != "Ok":
        raise MalformedResponseError(f"Routing service answered {code}")

    routes = data.get("routes")
    if not isinstance(routes, list):
        raise MalformedResponseError("Missing 'routes' list")
    if not routes:
        return NoRouteFound()

    first = routes[0]
    try:
        coordinates = first["geometry"]["coordinates"]
    except (KeyError, TypeError) as exc:
        raise MalformedResponseError(f"Route has no geometry: {exc}") from exc
    if not isinstance(coordinates, list):
        raise MalformedResponseError("Route geometry coordinates are not a list")

    path = tuple(_lon_lat_to_point(pair) for pair in coordinates)
    if not path:
        return NoRouteFound(reason="route geometry is empty")

    distance_m = _optional_float(first.get("distance"))
    if distance_m is None:
        distance_m = path_length_m(path)

    return DrivingRoute(
        origin=request.origin,
        destination=request.destination,
        path=path,
        distance_m=distance_m,
        duration_s=_optional_float(first.get("duration")),
    )


def _lon_lat_to_point(pair: Any) -> GeoPoint:
    if not isinstance(pair, (list, tuple)) or len(pair) < 2:
        raise MalformedResponseError(f"Bad coordinate pair: {pair!r}")
    try:
        return GeoPoint.from_lon_lat((pair[0], pair[1]))
    except (TypeError, ValueError) as exc:
        raise MalformedResponseError(f"Bad coordinate pair {pair!r}: {exc}") from exc


def _optional_float(value: Any) -> float | None:
    if value is None:
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    # Bare NaN/Infinity literals decode to non-finite floats.
    return number if math.isfinite(number) else None
