from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .geo import GeoPoint
from .route import DrivingRoute

INVALID_LOCATIONS_MESSAGE = "Please enter valid locations!"
NO_ROUTE_MESSAGE = "Unable to find a route between the specified locations."
ROUTE_SERVICE_ERROR_MESSAGE = "An error occurred while retrieving the route."


class JourneyStatus(str, Enum):
    IDLE = "idle"
    RESOLVING = "resolving"
    ROUTING = "routing"
    RESOLVED = "resolved"
    ERROR = "error"


@dataclass(frozen=True, slots=True)
class RequestState:
    """Snapshot of one submission as seen by the presentation layer.

    States are never mutated; each transition builds a new value through one of
    the constructors below, so fields from a previous state cannot leak into the
    next one.
    """

    status: JourneyStatus = JourneyStatus.IDLE
    origin_query: str = ""
    destination_query: str = ""
    origin: GeoPoint | None = None
    destination: GeoPoint | None = None
    path: tuple[GeoPoint, ...] = ()
    distance_m: float | None = None
    duration_s: float | None = None
    error: str | None = None

    def __post_init__(self) -> None:
        if (self.origin is None) != (self.destination is None):
            raise ValueError("Endpoints must be both set or both absent")
        if self.path and self.origin is None:
            raise ValueError("A route path requires both endpoints")
        if self.path and self.error is not None:
            raise ValueError("A route path and an error are mutually exclusive")
        if self.status is JourneyStatus.RESOLVED and (
            not self.path or self.error is not None
        ):
            raise ValueError("Resolved state needs a path and no error")
        if self.status is JourneyStatus.ERROR and not self.error:
            raise ValueError("Error state needs an error message")
        if self.status is not JourneyStatus.ERROR and self.error is not None:
            raise ValueError(f"Unexpected error message in state {self.status.value}")

    @property
    def markers(self) -> tuple[GeoPoint, ...]:
        if self.origin is None or self.destination is None:
            return ()
        return (self.origin, self.destination)

    @staticmethod
    def idle() -> "RequestState":
        return RequestState()

    @staticmethod
    def resolving(origin_query: str, destination_query: str) -> "RequestState":
        return RequestState(
            status=JourneyStatus.RESOLVING,
            origin_query=origin_query,
            destination_query=destination_query,
        )

    @staticmethod
    def routing(
        origin_query: str,
        destination_query: str,
        *,
        origin: GeoPoint,
        destination: GeoPoint,
    ) -> "RequestState":
        return RequestState(
            status=JourneyStatus.ROUTING,
            origin_query=origin_query,
            destination_query=destination_query,
            origin=origin,
            destination=destination,
        )

    @staticmethod
    def resolved(
        origin_query: str, destination_query: str, *, route: DrivingRoute
    ) -> "RequestState":
        return RequestState(
            status=JourneyStatus.RESOLVED,
            origin_query=origin_query,
            destination_query=destination_query,
            origin=route.origin,
            destination=route.destination,
            path=route.path,
            distance_m=route.distance_m,
            duration_s=route.duration_s,
        )

    @staticmethod
    def failed(
        origin_query: str,
        destination_query: str,
        *,
        error: str,
        origin: GeoPoint | None = None,
        destination: GeoPoint | None = None,
    ) -> "RequestState":
        return RequestState(
            status=JourneyStatus.ERROR,
            origin_query=origin_query,
            destination_query=destination_query,
            origin=origin,
            destination=destination,
            error=error,
        )
