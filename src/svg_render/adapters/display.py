"""Display metrics adapters."""

from __future__ import annotations

from collections.abc import Callable


class StaticDisplay:
    """Display with fixed pixel dimensions."""

    def __init__(self, width: int, height: int) -> None:
        self.width = width
        self.height = height

    def size(self) -> tuple[int, int]:
        return self.width, self.height


class CallbackDisplay:
    """Display whose size is read from a host callback on every query.

    Nothing is cached, so rotation or resolution changes show up on the next
    render.
    """

    def __init__(self, query: Callable[[], tuple[int, int]]) -> None:
        self._query = query

    def size(self) -> tuple[int, int]:
        width, height = self._query()
        return width, height
