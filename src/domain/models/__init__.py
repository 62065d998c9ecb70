from .diagnostics import DiagnosticEvent
from .geo import GeoPoint
from .journey import (
    INVALID_LOCATIONS_MESSAGE,
    NO_ROUTE_MESSAGE,
    ROUTE_SERVICE_ERROR_MESSAGE,
    JourneyStatus,
    RequestState,
)
from .outcomes import NoRouteFound, NotFound, ServiceError, Stage
from .route import DrivingRoute, RouteRequest

__all__ = [
    "DiagnosticEvent",
    "DrivingRoute",
    "GeoPoint",
    "INVALID_LOCATIONS_MESSAGE",
    "JourneyStatus",
    "NO_ROUTE_MESSAGE",
    "NoRouteFound",
    "NotFound",
    "ROUTE_SERVICE_ERROR_MESSAGE",
    "RequestState",
    "RouteRequest",
    "ServiceError",
    "Stage",
]
