"""
Encoder/decoder pairs translating cell values to and from backend payloads.

`JsonCodec` is the default for every cell. It is built on a pydantic
`TypeAdapter`, so anything pydantic can validate (models, dataclasses,
TypedDicts, containers, scalars) round-trips through it:

    codec = JsonCodec(list[int])
    codec.encode([1, 2])      # b"[1,2]"
    codec.decode(b"[1,2]")    # [1, 2]
"""

from __future__ import annotations

from typing import Any, Generic, TypeVar

from pydantic import TypeAdapter, ValidationError
from pydantic_core import PydanticSerializationError

from .errors import DecodeError, EncodeError

T = TypeVar("T")

# Scalars a preference register stores without serialization.
REGISTER_NATIVE_TYPES: tuple[type, ...] = (bytes, str, int, float, bool)


class JsonCodec(Generic[T]):
    def __init__(self, value_type: Any = Any):
        self._value_type = value_type
        self._adapter: TypeAdapter[T] = TypeAdapter(value_type)

    @property
    def value_type(self) -> Any:
        return self._value_type

    def encode(self, value: T) -> bytes:
        try:
            # A value that does not match the declared type is an error, not a warning.
            return self._adapter.dump_json(value, warnings="error")
        except (PydanticSerializationError, TypeError, ValueError) as e:
            raise EncodeError(f"cannot encode {type(value).__name__} as JSON: {e}") from e

    def decode(self, data: bytes) -> T:
        try:
            return self._adapter.validate_json(data)
        except ValidationError as e:
            raise DecodeError(f"payload does not match {self._value_type!r}: {e}") from e

    def __repr__(self) -> str:
        return f"JsonCodec({self._value_type!r})"


class NativeCodec(Generic[T]):
    """
    Pass-through codec for register-native scalars.

    Only meaningful for preference registers, which store these types as-is.
    """

    def __init__(self, value_type: type[T] | None = None):
        if value_type is not None and not issubclass(value_type, REGISTER_NATIVE_TYPES):
            raise TypeError(f"{value_type.__name__} is not a register-native type")
        self._value_type = value_type

    def encode(self, value: T) -> Any:
        if not isinstance(value, REGISTER_NATIVE_TYPES):
            raise EncodeError(f"{type(value).__name__} is not a register-native type")
        return value

    def decode(self, data: Any) -> T:
        if self._value_type is None:
            if not isinstance(data, REGISTER_NATIVE_TYPES):
                raise DecodeError(f"{type(data).__name__} is not a register-native type")
            return data
        # bool is an int subclass; keep the two apart.
        if isinstance(data, bool) and self._value_type is not bool:
            raise DecodeError(f"expected {self._value_type.__name__}, got bool")
        if not isinstance(data, self._value_type):
            raise DecodeError(f"expected {self._value_type.__name__}, got {type(data).__name__}")
        return data

    def __repr__(self) -> str:
        name = self._value_type.__name__ if self._value_type is not None else "any"
        return f"NativeCodec({name})"
