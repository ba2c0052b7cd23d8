"""
Shared read/write/notify flow for every storage cell.

A read resolves cache -> backend payload -> default and never raises. A write
encodes, checks that the payload decodes, persists, then caches and publishes
the decoded value, so the cache always mirrors what was stored. If any step
before the publish fails, the failure is logged and nothing else changes.
Subclasses only supply the three backend hooks (`_load`, `_store`, `_remove`).
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, Generic, TypeVar

from .cache import CacheSlot
from .codecs import JsonCodec
from .interfaces import Codec
from .notifier import ChangeNotifier, Subscription
from .values import Delete, Store, Write

logger = logging.getLogger(__name__)

T = TypeVar("T")


class BaseCell(ABC, Generic[T]):
    label = "CELL"

    def __init__(
        self,
        key: str,
        default: T,
        *,
        codec: Codec[T] | None = None,
        value_type: Any = Any,
        cache_value: bool = False,
    ):
        self._key = key
        self._default = default
        self._codec: Codec[T] = codec if codec is not None else JsonCodec(value_type)
        self._cache: CacheSlot[T] | None = CacheSlot() if cache_value else None
        self._notifier: ChangeNotifier[T] = ChangeNotifier()

    @classmethod
    def optional(cls, key: str, **kwargs: Any):
        """Build a cell whose default is None."""
        return cls(key, None, **kwargs)

    @property
    def key(self) -> str:
        return self._key

    @property
    def default(self) -> T:
        return self._default

    @property
    def codec(self) -> Codec[T]:
        return self._codec

    @property
    def cache_value(self) -> bool:
        return self._cache is not None

    @property
    def value(self) -> T:
        return self.read()

    @value.setter
    def value(self, new_value: T) -> None:
        self.write(new_value)

    def read(self) -> T:
        if self._cache is not None and self._cache.filled:
            return self._cache.get()
        try:
            raw = self._load()
        except Exception as e:
            logger.warning("%s READ: failed to load %s: %r", self.label, self._target(), e)
            return self._default
        if raw is None:
            return self._default
        try:
            return self._codec.decode(raw)
        except Exception as e:
            logger.warning("%s READ: failed to decode %s: %r", self.label, self._target(), e)
            return self._default

    def write(self, value: T | Delete) -> None:
        if isinstance(value, Delete):
            self.delete()
            return
        try:
            payload = self._codec.encode(value)
            # What a fresh read will see; also rejects payloads that cannot be read back.
            persisted = self._codec.decode(payload)
            self._store(payload)
        except Exception as e:
            logger.warning("%s WRITE: failed to write %s: %r", self.label, self._target(), e)
            return
        if self._cache is not None:
            self._cache.set(persisted)
        self._notifier.publish(persisted)

    def delete(self) -> None:
        try:
            self._remove()
        except Exception as e:
            logger.warning("%s DELETE: failed to delete %s: %r", self.label, self._target(), e)
            return
        if self._cache is not None:
            self._cache.clear()
        self._notifier.publish(self._default)

    def apply(self, change: Write[T]) -> None:
        if isinstance(change, Store):
            self.write(change.value)
        else:
            self.delete()

    def subscribe(self) -> Subscription[T]:
        return self._notifier.subscribe()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._target()}, default={self._default!r})"

    # Backend hooks

    def _target(self) -> str:
        return repr(self._key)

    @abstractmethod
    def _load(self) -> Any | None:
        """Return the raw payload, or None when nothing is stored."""

    @abstractmethod
    def _store(self, payload: Any) -> None:
        ...

    @abstractmethod
    def _remove(self) -> None:
        ...
