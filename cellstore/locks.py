from __future__ import annotations

import contextlib
import threading
from collections.abc import Iterator
from pathlib import Path


class PathLockRegistry:
    """
    One re-entrant lock per resolved file path.

    Cells sharing a directory only contend when they target the same file.
    Re-entrant so a read-modify-write can call the plain load/save helpers
    while already holding the path.
    """

    def __init__(self) -> None:
        self._guard = threading.Lock()
        self._locks: dict[Path, threading.RLock] = {}

    def lock_for(self, path: Path) -> threading.RLock:
        key = path.resolve()
        with self._guard:
            return self._locks.setdefault(key, threading.RLock())

    @contextlib.contextmanager
    def holding(self, path: Path) -> Iterator[None]:
        with self.lock_for(path):
            yield


GLOBAL_PATH_LOCKS = PathLockRegistry()
