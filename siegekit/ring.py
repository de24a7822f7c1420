"""A growable array that can also be walked round and round."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

__all__ = ["RingArray"]


class RingArray:
    """A list with a cursor that cycles forwards or backwards.

    ``None`` is never stored; pushing it is ignored.
    """

    def __init__(self, items: Iterable[Any] | None = None):
        self._data: list[Any] = []
        self._index = -1
        for item in items or ():
            self.push(item)

    def push(self, item: Any) -> None:
        if item is None:
            return
        self._data.append(item)

    def get(self, index: int) -> Any | None:
        """The item at ``index``, or None when out of range."""
        if 0 <= index < len(self._data):
            return self._data[index]
        return None

    def remove(self, index: int) -> Any | None:
        """Take out and return the item at ``index``; None when out of range."""
        if 0 <= index < len(self._data):
            return self._data.pop(index)
        return None

    def pop(self) -> Any | None:
        """Take out and return the last item; None when empty."""
        return self._data.pop() if self._data else None

    def next(self) -> Any:
        """Advance the cursor and return the item under it, wrapping round."""
        if not self._data:
            raise IndexError("next on an empty array")
        self._index += 1
        return self._data[self._index % len(self._data)]

    def prev(self) -> Any:
        """Move the cursor back and return the item before it, wrapping round."""
        if not self._data:
            raise IndexError("prev on an empty array")
        self._index -= 1
        length = len(self._data)
        return self._data[(self._index + length - 1) % length]

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self):
        return iter(self._data)

    def __str__(self) -> str:
        if not self._data:
            return "NULL"
        return ",".join("[%s]" % item for item in self._data)