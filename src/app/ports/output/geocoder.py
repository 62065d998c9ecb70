from __future__ import annotations

from abc import ABC, abstractmethod

from src.domain.models import GeoPoint, NotFound, ServiceError


class IGeocoder(ABC):
    """Port for resolving free-text place names to coordinates."""

    @abstractmethod
    async def resolve(self, query: str) -> GeoPoint | NotFound | ServiceError:
        """Return the best match for `query`.

        Implementations convert every remote failure into `ServiceError` and
        never raise for transport or payload problems.
        """
