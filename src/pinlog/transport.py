"""Retrying httpx transport shared by the Slack and Sheets adapters."""

from __future__ import annotations

import asyncio
import logging
import random

import httpx

logger = logging.getLogger(__name__)

# 5xx and rate-limit responses worth repeating.
RETRYABLE_STATUS_CODES = frozenset({429, 500, 502, 503, 504})

# Methods that may be sent twice without a second effect.
IDEMPOTENT_METHODS = frozenset({"GET", "HEAD", "OPTIONS", "PUT", "DELETE"})

# Failures after which the server cannot have seen the request.
_UNSENT_ERRORS = (httpx.ConnectError, httpx.ConnectTimeout)


class RetryingTransport(httpx.AsyncBaseTransport):
    """Retries Slack and Sheets requests that fail transiently.

    A 429 or 5xx response is retried after its ``Retry-After`` delay plus an
    exponential backoff; so is a transport error such as a reset connection.
    Non-idempotent requests (a ``values:append`` POST) are only repeated when
    the server cannot have acted on them: a refused connection or a 429.
    Once *max_retries* retries are spent the last response is returned, or the
    last transport error raised, for the caller to map to its own error type.
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
            except httpx.TransportError as exc:
                if attempt >= self._max_retries or not self._may_resend(request, exc):
                    raise
                await self._sleep_backoff(request, attempt)
                continue

            if attempt >= self._max_retries or not self._may_repeat(request, response):
                return response

            retry_after = self.parse_retry_after(response)
            await response.aclose()
            if retry_after > 0:
                await asyncio.sleep(retry_after)
            await self._sleep_backoff(request, attempt)

        raise httpx.TransportError("Request failed after retries")  # pragma: no cover

    async def aclose(self) -> None:
        await self._transport.aclose()

    @staticmethod
    def _may_resend(request: httpx.Request, error: httpx.TransportError) -> bool:
        return request.method in IDEMPOTENT_METHODS or isinstance(error, _UNSENT_ERRORS)

    @staticmethod
    def _may_repeat(request: httpx.Request, response: httpx.Response) -> bool:
        if response.status_code == 429:
            return True
        return response.status_code in RETRYABLE_STATUS_CODES and request.method in IDEMPOTENT_METHODS

    @staticmethod
    def parse_retry_after(response: httpx.Response) -> float:
        raw = response.headers.get("Retry-After")
        if raw is None:
            return 1.0 if response.status_code == 429 else 0.0
        try:
            return max(0.0, float(raw))
        except ValueError:
            return 1.0

    @staticmethod
    async def _sleep_backoff(request: httpx.Request, attempt: int) -> None:
        seconds = min(4.0, float(2**attempt)) + random.uniform(0.0, 0.25)
        logger.warning("Retrying %s %s (attempt %d)", request.method, request.url.path, attempt + 1)
        await asyncio.sleep(seconds)
