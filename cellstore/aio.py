from __future__ import annotations

import asyncio
from typing import Generic, TypeVar

from .interfaces import StorageCell
from .notifier import Subscription
from .values import Delete

T = TypeVar("T")


class AsyncCell(Generic[T]):
    """
    Async wrapper around any storage cell.
    Uses asyncio.to_thread to avoid blocking the event loop on backend I/O.
    """

    def __init__(self, cell: StorageCell[T]) -> None:
        self._cell = cell

    @property
    def cell(self) -> StorageCell[T]:
        return self._cell

    @property
    def key(self) -> str:
        return self._cell.key

    async def read(self) -> T:
        return await asyncio.to_thread(self._cell.read)

    async def write(self, value: T | Delete) -> None:
        await asyncio.to_thread(self._cell.write, value)

    async def delete(self) -> None:
        await asyncio.to_thread(self._cell.delete)

    def subscribe(self) -> Subscription[T]:
        return self._cell.subscribe()
