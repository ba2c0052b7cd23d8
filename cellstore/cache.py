from __future__ import annotations

from typing import Generic, TypeVar

T = TypeVar("T")

_EMPTY = object()


class CacheSlot(Generic[T]):
    """
    Single-value memo owned by one cell.

    `None` is a legitimate cached value; emptiness is tracked separately.
    """

    def __init__(self) -> None:
        self._value: object = _EMPTY

    @property
    def filled(self) -> bool:
        return self._value is not _EMPTY

    def get(self) -> T:
        if self._value is _EMPTY:
            raise LookupError("cache slot is empty")
        return self._value  # type: ignore[return-value]

    def set(self, value: T) -> None:
        self._value = value

    def clear(self) -> None:
        self._value = _EMPTY
