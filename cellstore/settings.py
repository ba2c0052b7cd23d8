from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


@dataclass(frozen=True)
class Settings:
    # Root for FileCell logical directories and the on-disk preference register
    data_dir: Path

    # Preference register
    preferences_file: str
    persist_preferences: bool

    # Secure register namespace
    secure_service: str

    @property
    def preferences_path(self) -> Path:
        return self.data_dir / self.preferences_file


def get_settings() -> Settings:
    data_dir = Path(os.getenv("CELLSTORE_DATA_DIR", "data")).expanduser()
    preferences_file = os.getenv("CELLSTORE_PREFERENCES_FILE", "preferences.json")

    # In-memory preferences unless explicitly enabled.
    persist_preferences = _env_bool("CELLSTORE_PERSIST_PREFERENCES", False)

    secure_service = os.getenv("CELLSTORE_SECURE_SERVICE", "cellstore")

    return Settings(
        data_dir=data_dir,
        preferences_file=preferences_file,
        persist_preferences=persist_preferences,
        secure_service=secure_service,
    )
