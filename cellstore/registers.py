"""
Reference backends for preference and secure registers.

The platform stores these stand in for (user defaults, keychains) live outside
this library; anything satisfying the `PreferenceRegister` / `SecureRegister`
protocols can be passed to a cell instead.
"""

from __future__ import annotations

import base64
import threading
from collections.abc import Iterable
from pathlib import Path
from typing import Any

from .disk_store import DiskJsonDocumentStore
from .errors import AccessDenied, EntryNotFound

_BYTES_TAG = "$bytes"


class MemoryPreferenceRegister:
    def __init__(self, initial: dict[str, Any] | None = None):
        self._guard = threading.Lock()
        self._entries: dict[str, Any] = dict(initial or {})

    def get(self, key: str) -> Any | None:
        with self._guard:
            return self._entries.get(key)

    def set(self, key: str, value: Any) -> None:
        with self._guard:
            self._entries[key] = value

    def remove(self, key: str) -> None:
        with self._guard:
            self._entries.pop(key, None)

    def keys(self) -> Iterable[str]:
        with self._guard:
            return list(self._entries)


def _to_doc_value(value: Any) -> Any:
    if isinstance(value, (bytes, bytearray)):
        return {_BYTES_TAG: base64.b64encode(bytes(value)).decode("ascii")}
    return value


def _from_doc_value(value: Any) -> Any:
    if isinstance(value, dict) and set(value) == {_BYTES_TAG}:
        return base64.b64decode(value[_BYTES_TAG])
    return value


class DiskPreferenceRegister:
    """
    Keeps the whole register as one JSON document:

      { "<key>": {"$bytes": "<base64>"} | <native scalar>, ... }
    """

    def __init__(self, path: Path):
        self._store = DiskJsonDocumentStore(path)

    @property
    def path(self) -> Path:
        return self._store.path

    def get(self, key: str) -> Any | None:
        doc = self._store.load()
        if key not in doc:
            return None
        return _from_doc_value(doc[key])

    def set(self, key: str, value: Any) -> None:
        encoded = _to_doc_value(value)

        def _put(doc: dict[str, Any]) -> None:
            doc[key] = encoded

        self._store.update(_put)

    def remove(self, key: str) -> None:
        self._store.update(lambda doc: doc.pop(key, None))

    def keys(self) -> Iterable[str]:
        return list(self._store.load())


class MemorySecureRegister:
    """
    In-process secure register.

    `lock()` models a keychain that is unavailable (device locked, missing
    entitlement): every operation raises `AccessDenied` until `unlock()`.
    """

    def __init__(self, service: str = "cellstore"):
        self._service = service
        self._guard = threading.Lock()
        self._items: dict[str, bytes] = {}
        self._locked = False

    @property
    def service(self) -> str:
        return self._service

    @property
    def locked(self) -> bool:
        return self._locked

    def lock(self) -> None:
        self._locked = True

    def unlock(self) -> None:
        self._locked = False

    def _check_access(self, key: str) -> None:
        if self._locked:
            raise AccessDenied(f"{self._service}: access to {key!r} denied while locked")

    def get(self, key: str) -> bytes:
        with self._guard:
            self._check_access(key)
            try:
                return self._items[key]
            except KeyError:
                raise EntryNotFound(key) from None

    def set(self, key: str, data: bytes) -> None:
        if not isinstance(data, (bytes, bytearray)):
            raise TypeError(f"secure register stores bytes, got {type(data).__name__}")
        with self._guard:
            self._check_access(key)
            self._items[key] = bytes(data)

    def delete(self, key: str) -> None:
        with self._guard:
            self._check_access(key)
            if self._items.pop(key, None) is None:
                raise EntryNotFound(key)

    def contains(self, key: str) -> bool:
        with self._guard:
            return key in self._items
