from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

Stage = Literal["geocode", "route"]


@dataclass(frozen=True, slots=True)
class NotFound:
    """The geocoding service ran but returned no candidate."""

    query: str


@dataclass(frozen=True, slots=True)
class NoRouteFound:
    """Both endpoints are valid but the routing service returned no route."""

    reason: str = "no route returned"


@dataclass(frozen=True, slots=True)
class ServiceError:
    """Transport or payload failure of a remote service.

    `cause` is for diagnostics only and must not reach end users.
    """

    stage: Stage
    cause: str
