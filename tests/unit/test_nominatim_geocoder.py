from __future__ import annotations

import asyncio
import time

import httpx
import pytest

from src.adapters.geocoding.nominatim_geocoder import NominatimGeocoder
from src.adapters.http import HttpRuntimeConfig
from src.domain.models import GeoPoint, NotFound, ServiceError

_HTTP = HttpRuntimeConfig(
    timeout_s=1.0, retries=1, retry_backoff_s=0.0, user_agent="test-agent"
)


def _geocoder(handler) -> NominatimGeocoder:
    return NominatimGeocoder(
        base_url="http://nominatim.test",
        min_interval_s=0.0,
        http=_HTTP,
        transport=httpx.MockTransport(handler),
    )


@pytest.mark.unit
@pytest.mark.anyio
async def test_resolve_returns_first_candidate_converted_from_text() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(
            200,
            json=[
                {"lat": "48.8534951", "lon": "2.3483915", "display_name": "Paris"},
                {"lat": "33.66", "lon": "-95.55", "display_name": "Paris, TX"},
            ],
        )

    result = await _geocoder(handler).resolve("Paris")

    assert result == GeoPoint(lat=48.8534951, lon=2.3483915)
    req = seen[0]
    assert req.url.path == "/search"
    assert req.url.params["q"] == "Paris"
    assert req.url.params["format"] == "json"
    assert req.url.params["limit"] == "1"
    assert req.headers["User-Agent"] == "test-agent"


@pytest.mark.unit
@pytest.mark.anyio
async def test_resolve_returns_not_found_for_zero_candidates() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json=[])

    result = await _geocoder(handler).resolve("qwzxqwzx")

    assert result == NotFound(query="qwzxqwzx")


@pytest.mark.unit
@pytest.mark.anyio
@pytest.mark.parametrize(
    "payload",
    [
        {"error": "Unable to geocode"},
        [{"lat": "48.85"}],
        [{"lat": "north", "lon": "2.35"}],
        [{"lat": "148.85", "lon": "2.35"}],
        ["Paris"],
    ],
)
async def test_resolve_reports_malformed_payload_as_service_error(payload) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json=payload)

    result = await _geocoder(handler).resolve("Paris")

    assert isinstance(result, ServiceError)
    assert result.stage == "geocode"
    assert "MalformedResponseError" in result.cause


@pytest.mark.unit
@pytest.mark.anyio
async def test_resolve_reports_non_json_body_as_service_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, text="<html>busy</html>")

    result = await _geocoder(handler).resolve("Paris")

    assert isinstance(result, ServiceError)


@pytest.mark.unit
@pytest.mark.anyio
async def test_resolve_reports_client_error_without_retry() -> None:
    calls = 0

    def handler(request: httpx.Request) -> httpx.Response:
        nonlocal calls
        calls += 1
        return httpx.Response(403, text="blocked")

    result = await _geocoder(handler).resolve("Paris")

    assert isinstance(result, ServiceError)
    assert "403" in result.cause
    assert calls == 1


@pytest.mark.unit
@pytest.mark.anyio
async def test_resolve_retries_once_on_timeout_then_succeeds() -> None:
    calls = 0

    def handler(request: httpx.Request) -> httpx.Response:
        nonlocal calls
        calls += 1
        if calls == 1:
            raise httpx.ReadTimeout("slow", request=request)
        return httpx.Response(200, json=[{"lat": "52.5170365", "lon": "13.3888599"}])

    result = await _geocoder(handler).resolve("Berlin")

    assert result == GeoPoint(lat=52.5170365, lon=13.3888599)
    assert calls == 2


@pytest.mark.unit
@pytest.mark.anyio
async def test_resolve_gives_up_after_retry_budget() -> None:
    calls = 0

    def handler(request: httpx.Request) -> httpx.Response:
        nonlocal calls
        calls += 1
        raise httpx.ConnectError("refused", request=request)

    result = await _geocoder(handler).resolve("Berlin")

    assert isinstance(result, ServiceError)
    assert "ConnectError" in result.cause
    assert calls == 2


def test_base_url_defaults_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("NOMINATIM_URL", "http://geo.internal")
    monkeypatch.setenv("GEOCODER_MIN_INTERVAL_S", "0.25")

    geocoder = NominatimGeocoder(http=_HTTP)

    assert geocoder.base_url == "http://geo.internal"
    assert geocoder.min_interval_s == 0.25


@pytest.mark.unit
@pytest.mark.anyio
async def test_concurrent_resolves_on_one_instance_are_spaced_apart() -> None:
    arrivals: list[float] = []

    def handler(request: httpx.Request) -> httpx.Response:
        arrivals.append(time.monotonic())
        return httpx.Response(200, json=[{"lat": "48.85", "lon": "2.35"}])

    geocoder = NominatimGeocoder(
        base_url="http://nominatim.test",
        min_interval_s=0.3,
        http=_HTTP,
        transport=httpx.MockTransport(handler),
    )

    first, second = await asyncio.gather(
        geocoder.resolve("Paris"), geocoder.resolve("Paris, France")
    )

    assert isinstance(first, GeoPoint)
    assert isinstance(second, GeoPoint)
    assert len(arrivals) == 2
    # Small tolerance for clock granularity.
    assert arrivals[1] - arrivals[0] >= 0.3 - 0.01


def test_negative_interval_argument_is_rejected() -> None:
    with pytest.raises(ValueError):
        NominatimGeocoder(min_interval_s=-1.0, http=_HTTP)


def test_negative_interval_from_env_is_rejected(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    monkeypatch.setenv("GEOCODER_MIN_INTERVAL_S", "-5")

    with pytest.raises(ValueError):
        NominatimGeocoder(http=_HTTP)
