"""Authentication gateway port."""

from typing import Protocol

from pandal_planner.domain.models.session import Session


class AuthGateway(Protocol):
    """Port for the backend account endpoints.

    Both methods raise AuthenticationError when the backend refuses the
    request and NetworkError on transport failure.
    """

    async def signup(self, username: str, email: str, password: str) -> Session | None:
        """Create an account. Returns a session if the backend issued one."""
        ...

    async def login(self, email: str, password: str) -> Session:
        """Log in and return the issued session."""
        ...
