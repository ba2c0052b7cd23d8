from __future__ import annotations

import enum
from pathlib import Path, PurePosixPath, PureWindowsPath


class Directory(str, enum.Enum):
    """Logical directories a FileCell can live in, resolved under the data root."""

    DOCUMENTS = "documents"
    APPLICATION_SUPPORT = "application_support"
    CACHES = "caches"
    TEMPORARY = "tmp"


def directory_path(directory: Directory | Path, root: Path) -> Path:
    if isinstance(directory, Directory):
        return root / directory.value
    return Path(directory)


def validate_filename(filename: str) -> str:
    if not filename or not filename.strip():
        raise ValueError("filename must not be empty")
    # Reject anything that would escape the directory, on either path flavour.
    for flavour in (PurePosixPath, PureWindowsPath):
        parts = flavour(filename).parts
        if len(parts) != 1 or parts[0] in (".", ".."):
            raise ValueError(f"filename must be a bare name, got {filename!r}")
    return filename
