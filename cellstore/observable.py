"""
In-memory values that publish *after* they change.

`ObservableValue` behaves like a current-value subject: a new subscriber
immediately receives the current value, then every subsequent assignment.
`TrackedValue` publishes `Change(old, new)` pairs the same way.
"""

from __future__ import annotations

import threading
from typing import Generic, NamedTuple, TypeVar

from .notifier import ChangeNotifier, Subscription

T = TypeVar("T")


class ObservableValue(Generic[T]):
    def __init__(self, value: T):
        self._guard = threading.Lock()
        self._value = value
        self._notifier: ChangeNotifier[T] = ChangeNotifier()

    @property
    def value(self) -> T:
        return self._value

    @value.setter
    def value(self, new_value: T) -> None:
        with self._guard:
            self._value = new_value
            self._notifier.publish(new_value)

    def subscribe(self) -> Subscription[T]:
        with self._guard:
            sub = self._notifier.subscribe()
            sub._deliver(self._value)
        return sub


class Change(NamedTuple, Generic[T]):
    old: T | None
    new: T


class TrackedValue(Generic[T]):
    def __init__(self, value: T):
        self._guard = threading.Lock()
        self._value = value
        self._last: Change[T] = Change(None, value)
        self._notifier: ChangeNotifier[Change[T]] = ChangeNotifier()

    @property
    def value(self) -> T:
        return self._value

    @value.setter
    def value(self, new_value: T) -> None:
        with self._guard:
            change = Change(self._value, new_value)
            self._value = new_value
            self._last = change
            self._notifier.publish(change)

    @property
    def last_change(self) -> Change[T]:
        return self._last

    def subscribe(self) -> Subscription[Change[T]]:
        with self._guard:
            sub = self._notifier.subscribe()
            sub._deliver(self._last)
        return sub
