from __future__ import annotations

import argparse
import asyncio
import logging
import os
import sys

from src.adapters.api.controllers.journey import state_to_schema
from src.adapters.diagnostics.logging_diagnostics_sink import LoggingDiagnosticsSink
from src.adapters.geocoding.nominatim_geocoder import NominatimGeocoder
from src.adapters.routing.osrm_route_provider import OsrmRouteProvider
from src.app.services.journey_planner import JourneyPlanner
from src.domain.models import JourneyStatus, RequestState


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="mapmyjourney",
        description="Resolve two place names and print the driving route as JSON.",
    )
    parser.add_argument("origin", help="Starting place, e.g. 'Paris'")
    parser.add_argument("destination", help="Destination place, e.g. 'Berlin'")
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Print every state transition to stderr",
    )
    args = parser.parse_args(argv)
    if not args.origin.strip() or not args.destination.strip():
        parser.error("origin and destination must not be blank")
    return args


def _print_transition(state: RequestState) -> None:
    print(f"[{state.status.value}]", file=sys.stderr)


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    logging.basicConfig(level=os.getenv("LOG_LEVEL", "WARNING").upper())

    planner = JourneyPlanner(
        geocoder=NominatimGeocoder(),
        route_provider=OsrmRouteProvider(),
        diagnostics=LoggingDiagnosticsSink(),
        on_transition=_print_transition if args.verbose else None,
    )
    state = asyncio.run(planner.submit(args.origin, args.destination))

    print(state_to_schema(state).model_dump_json(indent=2))
    return 0 if state.status is JourneyStatus.RESOLVED else 1


if __name__ == "__main__":
    sys.exit(main())
