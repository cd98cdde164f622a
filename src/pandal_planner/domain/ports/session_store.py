"""Session store port."""

from typing import Protocol

from pandal_planner.domain.models.session import Session


class SessionStore(Protocol):
    """Port for durable client-side session storage."""

    def load(self) -> Session | None:
        """Return the stored session, or None when logged out."""
        ...

    def save(self, session: Session) -> None:
        """Persist a session, replacing any previous one."""
        ...

    def clear(self) -> None:
        """Remove the stored session."""
        ...
