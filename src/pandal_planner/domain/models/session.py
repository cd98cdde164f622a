"""Authenticated session domain model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Session:
    """A logged-in user: bearer token plus user identifier."""

    token: str
    user_id: str

    def authorization_header(self) -> dict[str, str]:
        return {"Authorization": f"Bearer {self.token}"}
