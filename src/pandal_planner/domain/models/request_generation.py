"""Per-kind request generation counter."""


class RequestGeneration:
    """Monotonic version tag for one kind of asynchronous fetch.

    Every new fetch takes a tag from issue(). When the fetch completes, its
    result may only be applied if is_current(tag) still holds; otherwise a
    newer fetch of the same kind has been issued and the result is stale.
    """

    def __init__(self, kind: str) -> None:
        self.kind = kind
        self._current = 0

    @property
    def current(self) -> int:
        return self._current

    def issue(self) -> int:
        self._current += 1
        return self._current

    def is_current(self, tag: int) -> bool:
        return tag == self._current

    def __repr__(self) -> str:
        return f"RequestGeneration(kind={self.kind!r}, current={self._current})"
