"""Backend authentication gateway adapter."""

import logging

from pandal_planner.adapters.backend_api.constants import LOGIN_PATH, SIGNUP_PATH
from pandal_planner.adapters.backend_api.http_client import BackendHttpClient, BackendResponse
from pandal_planner.adapters.backend_api.parsers import parse_session
from pandal_planner.domain.models import (
    AuthenticationError,
    ErrorDetails,
    NetworkError,
    Session,
)
from pandal_planner.domain.ports import AuthGateway

logger = logging.getLogger(__name__)


def _raise_for_status(response: BackendResponse, action: str) -> None:
    if response.ok:
        return
    if response.status >= 500:
        details = ErrorDetails.from_status(response.status)
        raise NetworkError(f"{action} failed: {details.reason}", details)
    details = ErrorDetails(status_code=response.status, reason=response.error_message())
    raise AuthenticationError(f"{action} refused: {details.reason}", details)


class BackendAuthGateway(AuthGateway):
    """Adapter for ``/auth/signup`` and ``/auth/login``."""

    def __init__(self, http_client: BackendHttpClient) -> None:
        self._http_client = http_client

    async def signup(self, username: str, email: str, password: str) -> Session | None:
        payload = {"username": username, "email": email, "password": password}
        response = await self._http_client.request("POST", SIGNUP_PATH, payload=payload)
        _raise_for_status(response, "Sign up")
        session = parse_session(response.body)
        if session is None:
            logger.info("Sign up succeeded without a complete session; login required")
        return session

    async def login(self, email: str, password: str) -> Session:
        payload = {"email": email, "password": password}
        response = await self._http_client.request("POST", LOGIN_PATH, payload=payload)
        _raise_for_status(response, "Login")
        session = parse_session(response.body)
        if session is None:
            details = ErrorDetails(status_code=response.status, reason="Missing jwt or userId")
            raise AuthenticationError("Login response did not contain a session", details)
        return session
