from __future__ import annotations

from typing import Any, TypeVar

from .backends import get_backends
from .base import BaseCell
from .interfaces import Codec, PreferenceRegister

T = TypeVar("T")


class PreferenceCell(BaseCell[T]):
    """
    A value persisted under `key` in a flat preference register.

    Pass `codec=NativeCodec(int)` (or another native type) to store
    register-native scalars directly instead of JSON bytes.
    """

    label = "PREFERENCE CELL"

    def __init__(
        self,
        key: str,
        default: T,
        *,
        register: PreferenceRegister | None = None,
        codec: Codec[T] | None = None,
        value_type: Any = Any,
        cache_value: bool = False,
    ):
        super().__init__(key, default, codec=codec, value_type=value_type, cache_value=cache_value)
        self._register = register if register is not None else get_backends().preferences

    @property
    def register(self) -> PreferenceRegister:
        return self._register

    def _load(self) -> Any | None:
        raw = self._register.get(self._key)
        # A zero-length payload cannot be told apart from a missing entry.
        if isinstance(raw, (bytes, bytearray)) and not raw:
            return None
        return raw

    def _store(self, payload: Any) -> None:
        self._register.set(self._key, payload)

    def _remove(self) -> None:
        self._register.remove(self._key)
