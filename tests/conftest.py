from __future__ import annotations

from pathlib import Path
import sys


import pytest


# Ensure the repository root (parent of ./tests) is importable during pytest collection.
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))


@pytest.fixture
def sandbox_root(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Path:
    """
    Point the default backends at a temp data root so tests never touch real ./data.
    """
    from cellstore import backends
    from cellstore.settings import Settings

    root = tmp_path / "data"
    settings = Settings(
        data_dir=root,
        preferences_file="preferences.json",
        persist_preferences=False,
        secure_service="cellstore-tests",
    )
    backends.set_backends(backends.build_backends(settings))
    yield root
    backends.reset_backends()


@pytest.fixture
def preferences():
    from cellstore.registers import MemoryPreferenceRegister

    return MemoryPreferenceRegister()


@pytest.fixture
def keychain():
    from cellstore.registers import MemorySecureRegister

    return MemorySecureRegister(service="cellstore-tests")
