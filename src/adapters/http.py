from __future__ import annotations

import asyncio
import logging
import os
from dataclasses import dataclass
from typing import Any, Mapping

import httpx

from src.domain.exceptions import MalformedResponseError, RetryableStatusError

logger = logging.getLogger(__name__)

DEFAULT_USER_AGENT = "MapMyJourney/0.1"

# Statuses where a second attempt can reasonably succeed.
_RETRYABLE_STATUSES = frozenset({429, 500, 502, 503, 504})


def _env_float(name: str, default: float) -> float:
    raw = (os.getenv(name) or "").strip()
    if not raw:
        return default
    return float(raw)


def _env_int(name: str, default: int) -> int:
    raw = (os.getenv(name) or "").strip()
    if not raw:
        return default
    return int(raw)


@dataclass(frozen=True, slots=True)
class HttpRuntimeConfig:
    """Outbound HTTP policy shared by the remote service adapters.

    Env vars:
      - HTTP_TIMEOUT_S: per-request timeout (default 10)
      - HTTP_RETRIES: extra attempts on transport errors, 429 and 5xx (default 1)
      - HTTP_RETRY_BACKOFF_S: pause before each retry (default 0.5)
      - HTTP_USER_AGENT: User-Agent header (default MapMyJourney/0.1)
    """

    timeout_s: float = 10.0
    retries: int = 1
    retry_backoff_s: float = 0.5
    user_agent: str = DEFAULT_USER_AGENT

    def __post_init__(self) -> None:
        if self.timeout_s <= 0:
            raise ValueError(f"Invalid timeout: {self.timeout_s}")
        if self.retries < 0:
            raise ValueError(f"Invalid retry count: {self.retries}")
        if self.retry_backoff_s < 0:
            raise ValueError(f"Invalid retry backoff: {self.retry_backoff_s}")

    @staticmethod
    def from_env() -> "HttpRuntimeConfig":
        user_agent = (os.getenv("HTTP_USER_AGENT") or "").strip() or DEFAULT_USER_AGENT
        return HttpRuntimeConfig(
            timeout_s=_env_float("HTTP_TIMEOUT_S", 10.0),
            retries=_env_int("HTTP_RETRIES", 1),
            retry_backoff_s=_env_float("HTTP_RETRY_BACKOFF_S", 0.5),
            user_agent=user_agent,
        )


async def get_json(
    url: str,
    *,
    params: Mapping[str, Any] | None = None,
    config: HttpRuntimeConfig,
    transport: httpx.AsyncBaseTransport | None = None,
    accept_statuses: frozenset[int] = frozenset(),
) -> Any:
    """GET `url` and decode its JSON body.

    Transport errors, timeouts, 429 and 5xx are retried `config.retries` times.
    Other non-2xx statuses raise `httpx.HTTPStatusError` unless listed in
    `accept_statuses`, in which case the body is decoded like a success.
    A body that is not JSON raises `MalformedResponseError`.
    """

    headers = {"User-Agent": config.user_agent, "Accept": "application/json"}
    attempts = config.retries + 1

    async with httpx.AsyncClient(
        timeout=config.timeout_s, headers=headers, transport=transport
    ) as client:
        for attempt in range(1, attempts + 1):
            try:
                logger.debug("GET %s params=%s (attempt %d)", url, params, attempt)
                resp = await client.get(url, params=params)
                if resp.status_code in _RETRYABLE_STATUSES:
                    raise RetryableStatusError(resp.status_code)
                if resp.status_code not in accept_statuses:
                    resp.raise_for_status()
                break
            except (httpx.TransportError, RetryableStatusError) as exc:
                if attempt >= attempts:
                    if isinstance(exc, RetryableStatusError):
                        resp.raise_for_status()
                    raise
                logger.info(
                    "Retrying GET %s after %s: %s",
                    url,
                    type(exc).__name__,
                    exc,
                )
                if config.retry_backoff_s:
                    await asyncio.sleep(config.retry_backoff_s)

    try:
        return resp.json()
    except ValueError as exc:
        raise MalformedResponseError(f"Response is not JSON: {exc}") from exc
