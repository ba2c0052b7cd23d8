from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, TypeVar

from .backends import get_backends
from .base import BaseCell
from .interfaces import Codec
from .json_store import atomic_write_bytes, read_bytes, remove_file
from .locks import GLOBAL_PATH_LOCKS
from .paths import Directory, directory_path, validate_filename

logger = logging.getLogger(__name__)

T = TypeVar("T")


class FileCell(BaseCell[T]):
    """
    A value persisted as the whole contents of `{directory}/{filename}`.

    `directory` is either a logical `Directory`, resolved under `root`
    (default: the configured data root), or an explicit path. Deleting a file
    that is already gone counts as success.
    """

    label = "FILE CELL"

    def __init__(
        self,
        filename: str,
        default: T,
        *,
        directory: Directory | Path = Directory.DOCUMENTS,
        root: Path | None = None,
        codec: Codec[T] | None = None,
        value_type: Any = Any,
        cache_value: bool = False,
    ):
        super().__init__(
            validate_filename(filename), default, codec=codec, value_type=value_type, cache_value=cache_value
        )
        self._directory = directory
        if isinstance(directory, Directory):
            self._dir_path = directory_path(directory, root if root is not None else get_backends().root)
        else:
            self._dir_path = Path(directory)

    @property
    def filename(self) -> str:
        return self._key

    @property
    def directory(self) -> Directory | Path:
        return self._directory

    @property
    def path(self) -> Path:
        return self._dir_path / self._key

    def _target(self) -> str:
        return str(self.path)

    def _load(self) -> bytes | None:
        return read_bytes(self.path)

    def _store(self, payload: Any) -> None:
        if not isinstance(payload, (bytes, bytearray)):
            raise TypeError(f"file payload must be bytes, got {type(payload).__name__}")
        path = self.path
        with GLOBAL_PATH_LOCKS.holding(path):
            atomic_write_bytes(path, bytes(payload))

    def _remove(self) -> None:
        path = self.path
        with GLOBAL_PATH_LOCKS.holding(path):
            removed = remove_file(path)
        if not removed:
            logger.debug("%s DELETE: %s already absent", self.label, path)
