from __future__ import annotations

import pytest

from src.adapters.geocoding.nominatim_geocoder import NominatimGeocoder
from src.adapters.routing.osrm_route_provider import OsrmRouteProvider
from src.app.services.journey_planner import JourneyPlanner
from src.domain.models import GeoPoint, JourneyStatus, NotFound

pytestmark = [pytest.mark.integration, pytest.mark.anyio]


async def test_nominatim_resolves_known_city(require_live_services: None) -> None:
    result = await NominatimGeocoder().resolve("Belgrade, Serbia")

    assert isinstance(result, GeoPoint)
    assert 44.0 < result.lat < 45.5
    assert 20.0 < result.lon < 21.0


async def test_nominatim_returns_not_found_for_gibberish(
    require_live_services: None,
) -> None:
    result = await NominatimGeocoder().resolve("zzqxj vvkqp wwxq 000")

    assert isinstance(result, NotFound)


async def test_planner_resolves_driving_route_between_cities(
    require_live_services: None,
) -> None:
    planner = JourneyPlanner(
        geocoder=NominatimGeocoder(), route_provider=OsrmRouteProvider()
    )

    state = await planner.submit("Novi Sad, Serbia", "Belgrade, Serbia")

    assert state.status is JourneyStatus.RESOLVED
    assert len(state.path) > 2
    # Every point lies in the region, so none came back as (lon, lat).
    assert all(44.0 < p.lat < 46.0 and 19.0 < p.lon < 21.5 for p in state.path)
