"""Session stores backed by a JSON key/value file or memory."""

import json
import logging
from pathlib import Path
from typing import Any

from pandal_planner.domain.models import Session
from pandal_planner.domain.ports import SessionStore

logger = logging.getLogger(__name__)

TOKEN_KEY = "jwt"
USER_ID_KEY = "userId"


def _session_from_values(values: dict[str, Any]) -> Session | None:
    token = values.get(TOKEN_KEY)
    user_id = values.get(USER_ID_KEY)
    # Both keys must be present for the user to count as logged in
    if not token or not user_id:
        return None
    return Session(token=str(token), user_id=str(user_id))


class FileSessionStore(SessionStore):
    """Durable key/value session storage in a JSON file.

    Keys other than ``jwt`` and ``userId`` are preserved on save and clear.
    """

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path).expanduser()

    @property
    def path(self) -> Path:
        return self._path

    def _read(self) -> dict[str, Any]:
        if not self._path.exists():
            return {}
        try:
            with open(self._path, encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            logger.warning(f"Ignoring unreadable session file {self._path}: {e}")
            return {}
        return data if isinstance(data, dict) else {}

    def _write(self, values: dict[str, Any]) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        with open(self._path, "w", encoding="utf-8") as f:
            json.dump(values, f, indent=2)

    def load(self) -> Session | None:
        return _session_from_values(self._read())

    def save(self, session: Session) -> None:
        values = self._read()
        values[TOKEN_KEY] = session.token
        values[USER_ID_KEY] = session.user_id
        self._write(values)
        logger.debug(f"Saved session for user {session.user_id} to {self._path}")

    def clear(self) -> None:
        values = self._read()
        if TOKEN_KEY not in values and USER_ID_KEY not in values:
            return
        values.pop(TOKEN_KEY, None)
        values.pop(USER_ID_KEY, None)
        self._write(values)
        logger.debug(f"Cleared session in {self._path}")


class MemorySessionStore(SessionStore):
    """Process-local session storage for tests and one-off runs."""

    def __init__(self, session: Session | None = None) -> None:
        self._values: dict[str, str] = {}
        if session is not None:
            self.save(session)

    def load(self) -> Session | None:
        return _session_from_values(self._values)

    def save(self, session: Session) -> None:
        self._values[TOKEN_KEY] = session.token
        self._values[USER_ID_KEY] = session.user_id

    def clear(self) -> None:
        self._values.pop(TOKEN_KEY, None)
        self._values.pop(USER_ID_KEY, None)
