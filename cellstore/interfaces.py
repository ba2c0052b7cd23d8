from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING, Any, Protocol, TypeVar, runtime_checkable

if TYPE_CHECKING:
    from .notifier import Subscription
    from .values import Delete

T = TypeVar("T")


@runtime_checkable
class Codec(Protocol[T]):
    """A stateless encode/decode pair."""

    def encode(self, value: T) -> bytes:
        ...

    def decode(self, data: bytes) -> T:
        ...


class PreferenceRegister(Protocol):
    """
    Flat key -> payload mapping (bytes, or a register-native scalar).
    """

    def get(self, key: str) -> Any | None:
        """Return the stored payload, or None when the key is absent."""
        ...

    def set(self, key: str, value: Any) -> None:
        ...

    def remove(self, key: str) -> None:
        """Drop the entry; a missing key is a no-op."""
        ...

    def keys(self) -> Iterable[str]:
        ...


class SecureRegister(Protocol):
    """
    Access-controlled key -> bytes mapping, e.g. an OS keychain.

    Every method may raise `AccessDenied`.
    """

    def get(self, key: str) -> bytes:
        """Raises `EntryNotFound` when the key is absent."""
        ...

    def set(self, key: str, data: bytes) -> None:
        ...

    def delete(self, key: str) -> None:
        """Raises `EntryNotFound` when the key is absent."""
        ...


class StorageCell(Protocol[T]):
    @property
    def key(self) -> str:
        ...

    @property
    def default(self) -> T:
        ...

    def read(self) -> T:
        ...

    def write(self, value: T | Delete) -> None:
        ...

    def delete(self) -> None:
        ...

    def subscribe(self) -> Subscription[T]:
        ...
