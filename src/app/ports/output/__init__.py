from .diagnostics_sink import IDiagnosticsSink
from .geocoder import IGeocoder
from .route_provider import IRouteProvider

__all__ = [
    "IDiagnosticsSink",
    "IGeocoder",
    "IRouteProvider",
]
