from __future__ import annotations

import asyncio
import logging
import os
import time
from dataclasses import dataclass, field
from typing import Any

import httpx

from src.adapters.http import HttpRuntimeConfig, get_json
from src.app.ports.output import IGeocoder
from src.domain.exceptions import MalformedResponseError
from src.domain.models import GeoPoint, NotFound, ServiceError

logger = logging.getLogger(__name__)

DEFAULT_NOMINATIM_URL = "https://nominatim.openstreetmap.org"


@dataclass(slots=True)
class NominatimGeocoder(IGeocoder):
    """Resolves place names through a Nominatim `/search` endpoint.

    Env vars:
      - NOMINATIM_URL: service base URL (default: public OSM instance)
      - GEOCODER_MIN_INTERVAL_S: minimum spacing between requests (default 1,
        the public instance's usage policy)

    Notes:
      - Only the first candidate is requested (`limit=1`).
      - Spacing is per instance; share one instance to share the budget.
    """

    base_url: str | None = None
    min_interval_s: float | None = None
    http: HttpRuntimeConfig = field(default_factory=HttpRuntimeConfig.from_env)
    transport: httpx.AsyncBaseTransport | None = None

    _lock: asyncio.Lock = field(default_factory=asyncio.Lock, init=False, repr=False)
    _last_request_monotonic: float | None = field(default=None, init=False, repr=False)

    def __post_init__(self) -> None:
        if self.base_url is None:
            self.base_url = os.getenv("NOMINATIM_URL") or DEFAULT_NOMINATIM_URL
        if self.min_interval_s is None:
            raw = (os.getenv("GEOCODER_MIN_INTERVAL_S") or "").strip()
            self.min_interval_s = float(raw) if raw else 1.0
        if self.min_interval_s < 0:
            raise ValueError(f"Invalid geocoder interval: {self.min_interval_s}")

    async def resolve(self, query: str) -> GeoPoint | NotFound | ServiceError:
        url = f"{(self.base_url or '').rstrip('/')}/search"
        params = {"q": query, "format": "json", "limit": 1}

        try:
            await self._wait_turn()
            data = await get_json(
                url, params=params, config=self.http, transport=self.transport
            )
            candidate = _first_candidate(data)
            if candidate is None:
                logger.info("No geocoding candidate for %r", query)
                return NotFound(query=query)
            return _candidate_point(candidate)
        except (httpx.HTTPError, MalformedResponseError) as exc:
            cause = f"{type(exc).__name__}: {exc}"
            logger.warning("Geocoding %r failed: %s", query, cause)
            return ServiceError(stage="geocode", cause=cause)

    async def _wait_turn(self) -> None:
        async with self._lock:
            interval = float(self.min_interval_s or 0.0)
            if self._last_request_monotonic is not None and interval > 0:
                elapsed = time.monotonic() - self._last_request_monotonic
                if elapsed < interval:
                    await asyncio.sleep(interval - elapsed)
            self._last_request_monotonic = time.monotonic()


def _first_candidate(data: Any) -> dict[str, Any] | None:
    if not isinstance(data, list):
        raise MalformedResponseError(
            f"Expected a list of candidates, got {type(data).__name__}"
        )
    if not data:
        return None
    first = data[0]
    if not isinstance(first, dict):
        raise MalformedResponseError("Candidate is not an object")
    return first


def _candidate_point(candidate: dict[str, Any]) -> GeoPoint:
    try:
        lat = float(candidate["lat"])
        lon = float(candidate["lon"])
        return GeoPoint(lat=lat, lon=lon)
    except (KeyError, TypeError, ValueError) as exc:
        raise MalformedResponseError(f"Unreadable candidate position: {exc}") from exc
