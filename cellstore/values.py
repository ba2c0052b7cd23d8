from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True)
class Store(Generic[T]):
    """Persist `value` under the cell's key."""

    value: T


@dataclass(frozen=True)
class Delete:
    """Remove the cell's entry so reads fall back to the default."""


DELETE = Delete()

Write = Union[Store[T], Delete]
