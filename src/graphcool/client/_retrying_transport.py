"""httpx async transport wrapper that retries transient cluster failures."""

from __future__ import annotations

import asyncio
import logging
import random

import httpx

_LOG = logging.getLogger(__name__)

# Status codes considered transient and eligible for automatic retry.
_RETRYABLE_STATUS_CODES = frozenset({429, 502, 503, 504})

_MAX_BACKOFF_SECONDS = 4.0


class RetryingTransport(httpx.AsyncBaseTransport):
    """Wraps an httpx async transport with retry on transient failures.

    Retries transport-level errors (connection reset, read timeout) and
    429/502/503/504 responses up to *max_retries* times. A ``Retry-After``
    header is honoured before the exponential backoff. Connection refusals
    are never retried: a stopped local cluster should fail fast.
    """

    def __init__(
        self,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
        max_retries: int = 3,
    ) -> None:
        self._transport = transport or httpx.AsyncHTTPTransport()
        self._max_retries = max_retries

    async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
        for attempt in range(self._max_retries + 1):
            try:
                response = await self._transport.handle_async_request(request)
            except httpx.ConnectError:
                raise
            except httpx.TransportError as exc:
                if attempt >= self._max_retries:
                    raise
                _LOG.warning("Transport error talking to %s: %s", request.url.host, exc)
                await self._sleep_backoff(attempt)
                continue

            if response.status_code not in _RETRYABLE_STATUS_CODES or attempt >= self._max_retries:
                return response

            retry_after = self._parse_retry_after(response)
            await response.aclose()
            if retry_after > 0:
                await asyncio.sleep(retry_after)
            await self._sleep_backoff(attempt)

        raise httpx.TransportError("Request failed after retries")  # pragma: no cover

    async def aclose(self) -> None:
        await self._transport.aclose()

    @staticmethod
    def _parse_retry_after(response: httpx.Response) -> float:
        raw = response.headers.get("Retry-After")
        if raw is None:
            return 0.0
        try:
            return max(0.0, float(raw))
        except ValueError:
            return 0.0

    @staticmethod
    async def _sleep_backoff(attempt: int) -> None:
        seconds = min(_MAX_BACKOFF_SECONDS, float(2**attempt)) + random.uniform(0.0, 0.25)
        _LOG.warning("Retrying cluster request (attempt %d)", attempt + 1)
        await asyncio.sleep(seconds)
