"""Account and session use cases."""

import logging

from pandal_planner.domain.models import Session
from pandal_planner.domain.ports import AuthGateway, SessionStore

logger = logging.getLogger(__name__)


class AuthService:
    """Sign up, log in and out, keeping the session in a SessionStore."""

    def __init__(self, gateway: AuthGateway, session_store: SessionStore) -> None:
        self._gateway = gateway
        self._session_store = session_store

    async def signup(self, username: str, email: str, password: str) -> Session | None:
        """Create an account and store the session if the backend issued one."""
        session = await self._gateway.signup(username, email, password)
        if session is not None:
            self._session_store.save(session)
            logger.info(f"Signed up and logged in as user {session.user_id}")
        else:
            logger.info(f"Signed up {email}; login required")
        return session

    async def login(self, email: str, password: str) -> Session:
        session = await self._gateway.login(email, password)
        self._session_store.save(session)
        logger.info(f"Logged in as user {session.user_id}")
        return session

    def complete_callback(self, token: str | None, user_id: str | None) -> Session | None:
        """Store a session handed over by an external login redirect."""
        if not token or not user_id:
            logger.error("Login callback is missing token or userId")
            return None
        session = Session(token=token, user_id=user_id)
        self._session_store.save(session)
        return session

    def logout(self) -> None:
        self._session_store.clear()
        logger.info("Logged out")

    def current_session(self) -> Session | None:
        return self._session_store.load()

    def is_logged_in(self) -> bool:
        return self.current_session() is not None
