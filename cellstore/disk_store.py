from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Any

from .json_store import atomic_write_json, read_json
from .locks import GLOBAL_PATH_LOCKS

Document = dict[str, Any]


class DiskJsonDocumentStore:
    """
    One JSON object persisted at a fixed path.

    Missing, empty or invalid files load as an empty document. Saves go
    through a temp file so a crash never leaves a half-written document.
    """

    def __init__(self, path: Path):
        self._path = path

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> Document:
        with GLOBAL_PATH_LOCKS.holding(self._path):
            raw = read_json(self._path)
            return raw if isinstance(raw, dict) else {}

    def save(self, doc: Document) -> None:
        with GLOBAL_PATH_LOCKS.holding(self._path):
            atomic_write_json(self._path, doc)

    def update(self, mutate: Callable[[Document], None]) -> Document:
        """Load, apply `mutate` in place, save; all under the path lock."""
        with GLOBAL_PATH_LOCKS.holding(self._path):
            doc = self.load()
            mutate(doc)
            self.save(doc)
            return doc
