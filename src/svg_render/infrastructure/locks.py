"""Per-path mutual exclusion for staged sources and rendered outputs."""

from __future__ import annotations

import os
import threading
from collections.abc import Iterator
from contextlib import contextmanager

from svg_render.types import PathLike


class PathLockRegistry:
    """Hand out one lock per absolute filesystem path.

    Renders targeting the same destination, and stagings targeting the same
    staged file, are serialized within a single process. Locks are never
    evicted; the set of paths in this application is tiny.
    """

    def __init__(self) -> None:
        self._guard = threading.Lock()
        self._locks: dict[str, threading.Lock] = {}

    @staticmethod
    def key(path: PathLike) -> str:
        return os.path.abspath(os.fspath(path))

    def lock_for(self, path: PathLike) -> threading.Lock:
        key = self.key(path)
        with self._guard:
            lock = self._locks.get(key)
            if lock is None:
                lock = threading.Lock()
                self._locks[key] = lock
            return lock

    def is_held(self, path: PathLike) -> bool:
        """Return whether some caller currently holds the lock for ``path``."""
        with self._guard:
            lock = self._locks.get(self.key(path))
        return lock is not None and lock.locked()

    @contextmanager
    def hold(self, path: PathLike) -> Iterator[None]:
        lock = self.lock_for(path)
        with lock:
            yield


_DEFAULT_REGISTRY = PathLockRegistry()


def default_lock_registry() -> PathLockRegistry:
    """Return the process-wide lock registry."""
    return _DEFAULT_REGISTRY
