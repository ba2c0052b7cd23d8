from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from .interfaces import PreferenceRegister, SecureRegister
from .registers import DiskPreferenceRegister, MemoryPreferenceRegister, MemorySecureRegister
from .settings import Settings, get_settings

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Backends:
    """The backend handles cells fall back to when none is passed explicitly."""

    preferences: PreferenceRegister
    secure: SecureRegister
    root: Path


def build_backends(settings: Settings) -> Backends:
    if settings.persist_preferences:
        preferences: PreferenceRegister = DiskPreferenceRegister(settings.preferences_path)
    else:
        preferences = MemoryPreferenceRegister()
    return Backends(
        preferences=preferences,
        secure=MemorySecureRegister(settings.secure_service),
        root=settings.data_dir,
    )


_GUARD = threading.Lock()
_DEFAULT: Backends | None = None


def get_backends() -> Backends:
    global _DEFAULT
    with _GUARD:
        if _DEFAULT is None:
            load_dotenv("local.env")
            settings = get_settings()
            _DEFAULT = build_backends(settings)
            logger.debug(
                "BACKENDS: root=%s persist_preferences=%s", settings.data_dir, settings.persist_preferences
            )
        return _DEFAULT


def set_backends(backends: Backends) -> None:
    global _DEFAULT
    with _GUARD:
        _DEFAULT = backends


def reset_backends() -> None:
    global _DEFAULT
    with _GUARD:
        _DEFAULT = None
