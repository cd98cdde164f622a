"""Session storage adapters."""

from pandal_planner.adapters.session.file_session_store import (
    FileSessionStore,
    MemorySessionStore,
)

__all__ = ["FileSessionStore", "MemorySessionStore"]
