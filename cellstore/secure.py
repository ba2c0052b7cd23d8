from __future__ import annotations

import logging
from typing import Any, TypeVar

from .backends import get_backends
from .base import BaseCell
from .errors import EntryNotFound
from .interfaces import Codec, SecureRegister

logger = logging.getLogger(__name__)

T = TypeVar("T")


class SecureCell(BaseCell[T]):
    """
    A value persisted in an access-controlled secure register.

    The register may refuse access at any time (locked device, missing
    entitlement). Reads then fall back to the default and writes or deletes
    are dropped, both with a warning. Deleting an entry that does not exist
    is also treated as a failed delete.
    """

    label = "SECURE CELL"

    def __init__(
        self,
        key: str,
        default: T,
        *,
        register: SecureRegister | None = None,
        codec: Codec[T] | None = None,
        value_type: Any = Any,
        cache_value: bool = False,
    ):
        super().__init__(key, default, codec=codec, value_type=value_type, cache_value=cache_value)
        self._register = register if register is not None else get_backends().secure

    @property
    def register(self) -> SecureRegister:
        return self._register

    def _load(self) -> bytes | None:
        try:
            return self._register.get(self._key)
        except EntryNotFound:
            logger.debug("%s READ: no entry for %r", self.label, self._key)
            return None

    def _store(self, payload: Any) -> None:
        if not isinstance(payload, (bytes, bytearray)):
            raise TypeError(f"secure payload must be bytes, got {type(payload).__name__}")
        self._register.set(self._key, bytes(payload))

    def _remove(self) -> None:
        self._register.delete(self._key)
