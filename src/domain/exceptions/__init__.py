from .routing import MalformedResponseError, RetryableStatusError, ServiceFailure

__all__ = [
    "MalformedResponseError",
    "RetryableStatusError",
    "ServiceFailure",
]
