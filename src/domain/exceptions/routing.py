class ServiceFailure(Exception):
    """Base exception for remote geocoding/routing service failures."""


class MalformedResponseError(ServiceFailure):
    """Raised when a remote service answers with a payload we cannot read."""


class RetryableStatusError(ServiceFailure):
    """Raised when a remote service answers with a status worth retrying."""

    def __init__(self, status_code: int) -> None:
        super().__init__(f"HTTP {status_code}")
        self.status_code = status_code
