from __future__ import annotations

import json
import os
import tempfile
from pathlib import Path
from typing import Any


def read_bytes(path: Path) -> bytes | None:
    """
    Read a file's raw contents.

    Returns None when the file does not exist; other I/O errors propagate.
    """
    try:
        return path.read_bytes()
    except FileNotFoundError:
        return None


def atomic_write_bytes(path: Path, payload: bytes) -> None:
    """
    Atomically write bytes to disk by writing to a temp file then replacing.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    # Unique per write, so it never collides with a sibling such as "a.tmp" next to "a".
    fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
    tmp_path = Path(tmp_name)
    try:
        with os.fdopen(fd, "wb") as f:
            f.write(payload)
        os.replace(tmp_path, path)
    except BaseException:
        tmp_path.unlink(missing_ok=True)
        raise


def remove_file(path: Path) -> bool:
    """
    Delete a file. A missing file counts as success.

    Returns True if a file was actually removed.
    """
    try:
        path.unlink()
    except FileNotFoundError:
        return False
    return True


def read_json(path: Path) -> Any | None:
    """
    Read JSON from disk.

    Returns None for missing files, empty files, or invalid JSON.
    """
    try:
        if not path.exists():
            return None
        raw = path.read_text(encoding="utf-8")
        if not raw.strip():
            return None
        return json.loads(raw)
    except (OSError, ValueError):
        return None


def atomic_write_json(path: Path, payload: Any, *, indent: int = 2, sort_keys: bool = True) -> None:
    text = json.dumps(payload, indent=indent, sort_keys=sort_keys) + "\n"
    atomic_write_bytes(path, text.encode("utf-8"))
