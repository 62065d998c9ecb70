from __future__ import annotations

from functools import lru_cache

from src.adapters.diagnostics.logging_diagnostics_sink import LoggingDiagnosticsSink
from src.adapters.geocoding.nominatim_geocoder import NominatimGeocoder
from src.adapters.routing.osrm_route_provider import OsrmRouteProvider
from src.app.ports.output import IDiagnosticsSink, IGeocoder, IRouteProvider
from src.app.services.journey_planner import JourneyPlanner


# Adapters are shared so the geocoder's request spacing applies process-wide.
@lru_cache(maxsize=1)
def get_geocoder() -> IGeocoder:
    return NominatimGeocoder()


@lru_cache(maxsize=1)
def get_route_provider() -> IRouteProvider:
    return OsrmRouteProvider()


@lru_cache(maxsize=1)
def get_diagnostics_sink() -> IDiagnosticsSink:
    return LoggingDiagnosticsSink()


def get_journey_planner() -> JourneyPlanner:
    # One planner (and so one RequestState) per submission.
    return JourneyPlanner(
        geocoder=get_geocoder(),
        route_provider=get_route_provider(),
        diagnostics=get_diagnostics_sink(),
    )
