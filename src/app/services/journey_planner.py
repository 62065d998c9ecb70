from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from typing import Callable

from src.app.ports.output import IDiagnosticsSink, IGeocoder, IRouteProvider
from src.domain.models import (
    INVALID_LOCATIONS_MESSAGE,
    NO_ROUTE_MESSAGE,
    ROUTE_SERVICE_ERROR_MESSAGE,
    DiagnosticEvent,
    DrivingRoute,
    GeoPoint,
    NoRouteFound,
    NotFound,
    RequestState,
    ServiceError,
    Stage,
)

logger = logging.getLogger(__name__)

TransitionListener = Callable[[RequestState], None]


@dataclass(slots=True)
class JourneyPlanner:
    """Application service turning two place names into a drivable route.

    Runs the geocode -> route pipeline as a small state machine:

        idle -> resolving -> routing -> resolved
                    |           |
                    +-> error <-+

    Both geocoder calls run concurrently and must finish before routing starts.
    Every transition replaces `state` with a fresh `RequestState`.
    """

    geocoder: IGeocoder
    route_provider: IRouteProvider
    diagnostics: IDiagnosticsSink | None = None
    on_transition: TransitionListener | None = None

    state: RequestState = field(default_factory=RequestState.idle)

    async def submit(self, origin_query: str, destination_query: str) -> RequestState:
        self._transition(RequestState.resolving(origin_query, destination_query))

        origin, destination = await asyncio.gather(
            self._resolve(origin_query), self._resolve(destination_query)
        )

        if not isinstance(origin, GeoPoint) or not isinstance(destination, GeoPoint):
            self._report(origin_query, origin)
            self._report(destination_query, destination)
            return self._transition(
                RequestState.failed(
                    origin_query, destination_query, error=INVALID_LOCATIONS_MESSAGE
                )
            )

        self._transition(
            RequestState.routing(
                origin_query,
                destination_query,
                origin=origin,
                destination=destination,
            )
        )

        outcome = await self._route(origin, destination)

        if isinstance(outcome, DrivingRoute) and not outcome.is_empty:
            return self._transition(
                RequestState.resolved(origin_query, destination_query, route=outcome)
            )

        if isinstance(outcome, ServiceError):
            self._record(outcome.stage, outcome.cause, None)
            message = ROUTE_SERVICE_ERROR_MESSAGE
        else:
            reason = (
                outcome.reason if isinstance(outcome, NoRouteFound) else "empty path"
            )
            self._record("route", f"no route: {reason}", None)
            message = NO_ROUTE_MESSAGE

        return self._transition(
            RequestState.failed(
                origin_query,
                destination_query,
                error=message,
                origin=origin,
                destination=destination,
            )
        )

    def reset(self) -> RequestState:
        return self._transition(RequestState.idle())

    async def _resolve(self, query: str) -> GeoPoint | NotFound | ServiceError:
        try:
            return await self.geocoder.resolve(query)
        except Exception as exc:
            # Ports should not raise, but a raw fault must not escape the pipeline.
            logger.exception("Geocoder raised for %r", query)
            return ServiceError(stage="geocode", cause=f"{type(exc).__name__}: {exc}")

    async def _route(
        self, origin: GeoPoint, destination: GeoPoint
    ) -> DrivingRoute | NoRouteFound | ServiceError:
        try:
            return await self.route_provider.route(origin, destination)
        except Exception as exc:
            logger.exception("Route provider raised")
            return ServiceError(stage="route", cause=f"{type(exc).__name__}: {exc}")

    def _report(self, query: str, outcome: GeoPoint | NotFound | ServiceError) -> None:
        if isinstance(outcome, NotFound):
            self._record("geocode", "no candidates", query)
        elif isinstance(outcome, ServiceError):
            self._record(outcome.stage, outcome.cause, query)

    def _record(self, stage: Stage, cause: str, query: str | None) -> None:
        if self.diagnostics is None:
            return
        self.diagnostics.record(DiagnosticEvent(stage=stage, cause=cause, query=query))

    def _transition(self, new_state: RequestState) -> RequestState:
        logger.debug(
            "Journey state %s -> %s", self.state.status.value, new_state.status.value
        )
        self.state = new_state
        if self.on_transition is not None:
            self.on_transition(new_state)
        return new_state
