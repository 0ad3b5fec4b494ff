"""Bounded history of recently moved piece ids."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator

DEFAULT_HISTORY_CAPACITY = 5


class MoveHistory:
    """Ordered ids of the most recently moved pieces, oldest first.

    Appending beyond ``capacity`` evicts the oldest entry.
    """

    __slots__ = ("_ids",)

    def __init__(
        self,
        ids: Iterable[str] = (),
        capacity: int = DEFAULT_HISTORY_CAPACITY,
    ) -> None:
        if capacity < 1:
            raise ValueError(f"History capacity must be positive: {capacity!r}")
        self._ids: deque[str] = deque(ids, maxlen=capacity)

    @property
    def capacity(self) -> int:
        maxlen = self._ids.maxlen
        assert maxlen is not None
        return maxlen

    @property
    def last(self) -> str | None:
        """Id of the most recently moved piece."""
        return self._ids[-1] if self._ids else None

    def append(self, piece_id: str) -> None:
        self._ids.append(piece_id)

    def clear(self) -> None:
        self._ids.clear()

    def as_list(self) -> list[str]:
        return list(self._ids)

    def __iter__(self) -> Iterator[str]:
        return iter(self._ids)

    def __len__(self) -> int:
        return len(self._ids)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, MoveHistory):
            return list(self._ids) == list(other._ids)
        if isinstance(other, list):
            return list(self._ids) == other
        return NotImplemented

    def __repr__(self) -> str:
        return f"MoveHistory({list(self._ids)!r}, capacity={self.capacity})"
