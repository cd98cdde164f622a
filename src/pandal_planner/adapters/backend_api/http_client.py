"""HTTP client for the festival backend."""

from __future__ import annotations

import asyncio
import json
import logging
import time
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

import aiohttp

from pandal_planner.adapters.api_request_logger import log_api_request, log_api_response
from pandal_planner.adapters.backend_api.constants import DEFAULT_HEADERS
from pandal_planner.domain.models import ErrorDetails, NetworkError

if TYPE_CHECKING:
    from pandal_planner.domain.ports import SessionStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BackendResponse:
    """Status and decoded body (JSON value, plain text or None) of a response."""

    status: int
    body: Any

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300

    def error_message(self) -> str:
        """Best effort human readable message from an error body."""
        if isinstance(self.body, dict):
            for key in ("message", "error", "detail"):
                value = self.body.get(key)
                if isinstance(value, str) and value:
                    return value
        if isinstance(self.body, str) and self.body.strip():
            return self.body.strip()[:200]
        return ErrorDetails.from_status(self.status).reason


class BackendHttpClient:
    """Sends requests to the backend with the session's bearer token, if any.

    Transport failures become NetworkError. Callers decide what a non-2xx
    status means for their endpoint.
    """

    def __init__(
        self,
        session: aiohttp.ClientSession,
        base_url: str,
        session_store: SessionStore | None = None,
        timeout_seconds: float | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            session: Shared aiohttp ClientSession.
            base_url: Backend base URL without trailing slash.
            session_store: Where the login session is kept; None for anonymous use.
            timeout_seconds: Total request timeout; None waits indefinitely.
        """
        self._session = session
        self._base_url = base_url.rstrip("/")
        self._session_store = session_store
        self._timeout = aiohttp.ClientTimeout(total=timeout_seconds)

    def _headers(self) -> dict[str, str]:
        headers = dict(DEFAULT_HEADERS)
        if self._session_store is not None:
            session = self._session_store.load()
            if session is not None:
                headers.update(session.authorization_header())
        return headers

    async def request(
        self,
        method: str,
        path: str,
        params: dict[str, str] | None = None,
        payload: Any = None,
    ) -> BackendResponse:
        """Send one request and decode its body.

        Raises:
            NetworkError: If the backend could not be reached.
        """
        url = f"{self._base_url}{path}"
        headers = self._headers()
        log_api_request(method, url, params=params, headers=headers, payload=payload)
        started = time.monotonic()

        try:
            async with self._session.request(
                method,
                url,
                params=params,
                json=payload,
                headers=headers,
                timeout=self._timeout,
            ) as response:
                body = _decode_body(await response.text())
                log_api_response(method, url, response.status, time.monotonic() - started, body)
                return BackendResponse(status=response.status, body=body)
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            logger.warning(f"Error calling {method} {url}: {e!r}")
            raise NetworkError(
                f"Could not reach backend at {url}", ErrorDetails.from_status(None)
            ) from e

    async def get_json(self, path: str, params: dict[str, str] | None = None) -> Any:
        """GET a path and return its JSON body.

        Raises:
            NetworkError: On transport failure or any non-2xx status.
        """
        response = await self.request("GET", path, params=params)
        if not response.ok:
            details = ErrorDetails.from_status(response.status)
            logger.error(
                f"Backend returned status {response.status} for GET {path}: "
                f"{response.error_message()}"
            )
            raise NetworkError(f"GET {path} failed: {details.reason}", details)
        return response.body


def _decode_body(text: str) -> Any:
    if not text:
        return None
    try:
        return json.loads(text)
    except ValueError:
        return text
