from __future__ import annotations

import logging
import queue
import threading
from typing import Generic, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Subscription(Generic[T]):
    """
    A live feed of values published after the subscription was created.

    Values queue up until consumed; nothing published earlier is replayed.
    """

    def __init__(self, notifier: "ChangeNotifier[T]"):
        self._notifier = notifier
        self._queue: queue.SimpleQueue[T] = queue.SimpleQueue()
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def pending(self) -> int:
        return self._queue.qsize()

    def get(self, timeout: float | None = None) -> T:
        """Block until the next value arrives. Raises `queue.Empty` on timeout."""
        return self._queue.get(timeout=timeout)

    def get_nowait(self) -> T:
        return self._queue.get_nowait()

    def drain(self) -> list[T]:
        """Return every value queued so far, oldest first."""
        out: list[T] = []
        while True:
            try:
                out.append(self._queue.get_nowait())
            except queue.Empty:
                return out

    def close(self) -> None:
        if not self._closed:
            self._closed = True
            self._notifier._discard(self)

    def _deliver(self, value: T) -> None:
        self._queue.put(value)

    def __enter__(self) -> "Subscription[T]":
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()


class ChangeNotifier(Generic[T]):
    """
    Process-local fan-out of committed values.

    Publishing never waits on a subscriber: each subscription has its own
    unbounded queue.
    """

    def __init__(self) -> None:
        self._guard = threading.Lock()
        self._subscriptions: list[Subscription[T]] = []

    @property
    def subscriber_count(self) -> int:
        with self._guard:
            return len(self._subscriptions)

    def subscribe(self) -> Subscription[T]:
        sub: Subscription[T] = Subscription(self)
        with self._guard:
            self._subscriptions.append(sub)
        return sub

    def publish(self, value: T) -> None:
        with self._guard:
            targets = list(self._subscriptions)
        for sub in targets:
            sub._deliver(value)
        logger.debug("NOTIFY: delivered to %d subscriber(s)", len(targets))

    def _discard(self, sub: Subscription[T]) -> None:
        with self._guard:
            try:
                self._subscriptions.remove(sub)
            except ValueError:
                pass
