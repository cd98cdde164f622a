"""Generation-guarded list fetching shared by the zone and station views."""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from typing import TYPE_CHECKING, TypeVar

from pandal_planner.domain.models import NetworkError

if TYPE_CHECKING:
    from pandal_planner.domain.models import RequestGeneration

logger = logging.getLogger(__name__)

T = TypeVar("T")


async def fetch_if_current(
    generation: RequestGeneration,
    tag: int,
    fetch: Callable[[], Awaitable[list[T]]],
    description: str,
) -> list[T] | None:
    """Run a list fetch and decide whether its outcome may be applied.

    Failures degrade to an empty list. Returns None when the tag is no longer
    current at completion time, in which case the caller must not touch state.
    """
    try:
        items = await fetch()
    except Exception as e:
        if not generation.is_current(tag):
            logger.debug(f"Discarding stale {generation.kind} failure for {description}: {e}")
            return None
        if isinstance(e, NetworkError):
            reason = f"{e.details.reason} (status: {e.details.status_code})"
        else:
            reason = str(e) or type(e).__name__
        logger.warning(f"Failed to load {generation.kind} for {description}: {reason}")
        return []

    if not generation.is_current(tag):
        logger.debug(
            f"Discarding stale {generation.kind} result for {description} "
            f"(tag {tag}, current {generation.current})"
        )
        return None

    logger.debug(f"Loaded {len(items)} {generation.kind} for {description}")
    return items
