"""Supabase Module Catalog Client — reads navigation modules over the PostgREST API.

Invariants:
    - Rate limits (429): exponential backoff with jitter, respects Retry-After header
    - Transient errors (5xx, connection, timeout): max_retries retries with exponential backoff
    - Client errors (4xx except 429) and malformed bodies: immediate failure, no retry
    - All failures mapped to ModuleCatalogError (core/errors.py)

Design Decisions:
    - httpx.AsyncClient injected or owned: tests pass a client built on
      httpx.MockTransport, production lets the wrapper create one per fetch
    - ±25% jitter on backoff: prevents thundering herd on a shared anon key
    - Row shape is normalized by core.module_catalog.module_from_record
"""

import asyncio
import logging
import random

import httpx

from vyral.core.errors import ModuleCatalogError
from vyral.core.module_catalog import ModuleCard, module_from_record

logger = logging.getLogger(__name__)

_RETRYABLE_STATUS = frozenset({500, 502, 503, 504})


class SupabaseModuleCatalog:
    """Fetches module cards from `{url}/rest/v1/{table}` with retry and error mapping."""

    def __init__(
        self,
        url: str,
        anon_key: str,
        table: str = "modules",
        timeout_seconds: float = 5.0,
        max_retries: int = 3,
        base_delay_ms: int = 250,
        max_delay_ms: int = 4_000,
        client: httpx.AsyncClient | None = None,
    ):
        self.endpoint = f"{url.rstrip('/')}/rest/v1/{table}"
        self.headers = {
            "apikey": anon_key,
            "Authorization": f"Bearer {anon_key}",
            "Accept": "application/json",
        }
        self.timeout_seconds = timeout_seconds
        self.max_retries = max_retries
        self.base_delay_ms = base_delay_ms
        self.max_delay_ms = max_delay_ms
        self._client = client

    async def fetch_modules(self) -> list[ModuleCard]:
        """GET every catalog row, retrying transient failures."""
        for attempt in range(self.max_retries + 1):
            try:
                response = await self._get()
            except httpx.TimeoutException as e:
                await self._handle_transient_error(e, attempt, "timeout")
                continue
            except httpx.TransportError as e:
                await self._handle_transient_error(e, attempt, "connection_error")
                continue

            if response.status_code == 429:
                await self._handle_rate_limit(response, attempt)
                continue
            if response.status_code in _RETRYABLE_STATUS:
                await self._handle_transient_error(
                    f"HTTP {response.status_code}", attempt, "server_error",
                )
                continue
            if response.is_error:
                raise ModuleCatalogError(
                    f"HTTP {response.status_code}", "client_error",
                )
            modules = self._parse(response)
            logger.info(
                f"Module catalog fetched: {len(modules)} modules",
                extra={"attempt": attempt + 1},
            )
            return modules
        # Unreachable: the last attempt raises from a handler
        raise ModuleCatalogError("retries exhausted", "unknown")

    async def _get(self) -> httpx.Response:
        params = {"select": "*"}
        if self._client is not None:
            return await self._client.get(
                self.endpoint, params=params, headers=self.headers,
                timeout=self.timeout_seconds,
            )
        async with httpx.AsyncClient(timeout=self.timeout_seconds) as client:
            return await client.get(
                self.endpoint, params=params, headers=self.headers,
            )

    def _parse(self, response: httpx.Response) -> list[ModuleCard]:
        try:
            rows = response.json()
        except ValueError as e:
            raise ModuleCatalogError(f"invalid JSON body: {e}", "invalid_body")
        if not isinstance(rows, list):
            raise ModuleCatalogError("expected a JSON array of rows", "invalid_body")
        return [module_from_record(row) for row in rows if isinstance(row, dict)]

    async def _handle_rate_limit(self, response: httpx.Response, attempt: int) -> None:
        """Handle rate limit response with retry or raise."""
        retry_after_ms = self._extract_retry_after(response)
        if attempt >= self.max_retries:
            raise ModuleCatalogError(
                "Rate limit exceeded after retries",
                "rate_limit",
                retry_after_ms=retry_after_ms,
            )
        delay = retry_after_ms or self._backoff(attempt)
        logger.warning(
            f"Catalog rate limit hit, retry after {delay}ms",
            extra={"attempt": attempt + 1},
        )
        await asyncio.sleep(delay / 1000)

    async def _handle_transient_error(
        self, e: object, attempt: int, reason: str,
    ) -> None:
        """Handle transient errors with retry or raise."""
        if attempt >= self.max_retries:
            raise ModuleCatalogError(
                f"Transient failure after {self.max_retries} retries: {e}",
                reason,
            )
        delay = self._backoff(attempt)
        logger.warning(
            f"Catalog transient error, retry after {delay}ms: {e}",
            extra={"attempt": attempt + 1},
        )
        await asyncio.sleep(delay / 1000)

    def _backoff(self, attempt: int) -> int:
        """Exponential backoff with ±25% jitter."""
        delay = min(self.max_delay_ms, (2 ** attempt) * self.base_delay_ms)
        return int(delay * random.uniform(0.75, 1.25))  # nosec B311

    def _extract_retry_after(self, response: httpx.Response) -> int | None:
        """Retry-After header in milliseconds; None when absent or not an integer."""
        val = response.headers.get("retry-after")
        if val and val.isdigit():
            return int(val) * 1000
        return None
