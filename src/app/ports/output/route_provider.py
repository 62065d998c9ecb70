from __future__ import annotations

from abc import ABC, abstractmethod

from src.domain.models import DrivingRoute, GeoPoint, NoRouteFound, ServiceError


class IRouteProvider(ABC):
    """Port for fetching a driving path between two coordinates."""

    @abstractmethod
    async def route(
        self, origin: GeoPoint, destination: GeoPoint
    ) -> DrivingRoute | NoRouteFound | ServiceError:
        """Return the route with its path in (lat, lon) order."""
