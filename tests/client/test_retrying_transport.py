"""Tests for RetryingTransport - retry and backoff on transient cluster failures."""

from __future__ import annotations

from unittest.mock import AsyncMock, patch

import httpx
import pytest

from graphcool.client._retrying_transport import RetryingTransport

_BACKOFF = "graphcool.client._retrying_transport.RetryingTransport._sleep_backoff"


def _make_response(status_code: int = 200, headers: dict[str, str] | None = None) -> httpx.Response:
    return httpx.Response(status_code=status_code, headers=headers or {})


def _make_request() -> httpx.Request:
    return httpx.Request("POST", "https://cluster.example.com/cluster")


def _inner(*responses: httpx.Response | Exception) -> AsyncMock:
    inner = AsyncMock(spec=httpx.AsyncBaseTransport)
    inner.handle_async_request.side_effect = list(responses)
    return inner


class TestConstruction:
    def test_defaults(self) -> None:
        transport = RetryingTransport()
        assert transport._max_retries == 3

    def test_custom_inner_transport(self) -> None:
        inner = AsyncMock(spec=httpx.AsyncBaseTransport)
        transport = RetryingTransport(transport=inner, max_retries=5)
        assert transport._transport is inner
        assert transport._max_retries == 5


class TestTransportErrors:
    @pytest.mark.asyncio
    @patch(_BACKOFF, new_callable=AsyncMock)
    async def test_retries_read_errors_then_succeeds(self, mock_backoff: AsyncMock) -> None:
        inner = _inner(httpx.ReadError("connection reset"), _make_response(200))

        transport = RetryingTransport(transport=inner, max_retries=2)
        response = await transport.handle_async_request(_make_request())

        assert response.status_code == 200
        assert inner.handle_async_request.call_count == 2
        mock_backoff.assert_awaited_once_with(0)

    @pytest.mark.asyncio
    @patch(_BACKOFF, new_callable=AsyncMock)
    async def test_raises_after_max_retries_exhausted(self, mock_backoff: AsyncMock) -> None:
        inner = AsyncMock(spec=httpx.AsyncBaseTransport)
        inner.handle_async_request.side_effect = httpx.ReadTimeout("slow")

        transport = RetryingTransport(transport=inner, max_retries=2)
        with pytest.raises(httpx.ReadTimeout, match="slow"):
            await transport.handle_async_request(_make_request())

        assert inner.handle_async_request.call_count == 3
        assert mock_backoff.await_count == 2

    @pytest.mark.asyncio
    @patch(_BACKOFF, new_callable=AsyncMock)
    async def test_connection_refused_is_not_retried(self, mock_backoff: AsyncMock) -> None:
        inner = _inner(httpx.ConnectError("refused"))

        transport = RetryingTransport(transport=inner, max_retries=3)
        with pytest.raises(httpx.ConnectError):
            await transport.handle_async_request(_make_request())

        assert inner.handle_async_request.call_count == 1
        mock_backoff.assert_not_awaited()


class TestRetryableStatus:
    @pytest.mark.asyncio
    @patch(_BACKOFF, new_callable=AsyncMock)
    async def test_502_retries_then_succeeds(self, mock_backoff: AsyncMock) -> None:
        inner = _inner(_make_response(502), _make_response(200))

        transport = RetryingTransport(transport=inner, max_retries=2)
        response = await transport.handle_async_request(_make_request())

        assert response.status_code == 200
        assert inner.handle_async_request.call_count == 2

    @pytest.mark.asyncio
    @patch(_BACKOFF, new_callable=AsyncMock)
    async def test_returns_last_response_when_retries_exhausted(self, mock_backoff: AsyncMock) -> None:
        inner = AsyncMock(spec=httpx.AsyncBaseTransport)
        inner.handle_async_request.return_value = _make_response(503)

        transport = RetryingTransport(transport=inner, max_retries=1)
        response = await transport.handle_async_request(_make_request())

        assert response.status_code == 503
        assert inner.handle_async_request.call_count == 2

    @pytest.mark.asyncio
    @patch("asyncio.sleep", new_callable=AsyncMock)
    @patch(_BACKOFF, new_callable=AsyncMock)
    async def test_429_respects_retry_after_header(self, mock_backoff: AsyncMock, mock_sleep: AsyncMock) -> None:
        inner = _inner(_make_response(429, {"Retry-After": "3"}), _make_response(200))

        transport = RetryingTransport(transport=inner, max_retries=2)
        response = await transport.handle_async_request(_make_request())

        assert response.status_code == 200
        mock_sleep.assert_awaited_once_with(3.0)
        mock_backoff.assert_awaited_once_with(0)

    @pytest.mark.asyncio
    @patch(_BACKOFF, new_callable=AsyncMock)
    async def test_client_errors_are_returned_immediately(self, mock_backoff: AsyncMock) -> None:
        inner = _inner(_make_response(400))

        transport = RetryingTransport(transport=inner)
        response = await transport.handle_async_request(_make_request())

        assert response.status_code == 400
        mock_backoff.assert_not_awaited()


class TestParseRetryAfter:
    @pytest.mark.parametrize(
        ("headers", "expected"),
        [
            ({}, 0.0),
            ({"Retry-After": "2.5"}, 2.5),
            ({"Retry-After": "-4"}, 0.0),
            ({"Retry-After": "Wed, 21 Oct 2015 07:28:00 GMT"}, 0.0),
        ],
    )
    def test_parse_retry_after(self, headers: dict[str, str], expected: float) -> None:
        assert RetryingTransport._parse_retry_after(_make_response(503, headers)) == expected


@pytest.mark.asyncio
async def test_aclose_closes_inner_transport() -> None:
    inner = AsyncMock(spec=httpx.AsyncBaseTransport)

    await RetryingTransport(transport=inner).aclose()

    inner.aclose.assert_awaited_once()
