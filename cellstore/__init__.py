from __future__ import annotations

from .aio import AsyncCell
from .backends import Backends, build_backends, get_backends, reset_backends, set_backends
from .base import BaseCell
from .cache import CacheSlot
from .codecs import JsonCodec, NativeCodec
from .errors import (
    AccessDenied,
    BackendError,
    CellStoreError,
    CodecError,
    DecodeError,
    EncodeError,
    EntryNotFound,
)
from .file import FileCell
from .interfaces import Codec, PreferenceRegister, SecureRegister, StorageCell
from .notifier import ChangeNotifier, Subscription
from .observable import Change, ObservableValue, TrackedValue
from .paths import Directory
from .preference import PreferenceCell
from .registers import DiskPreferenceRegister, MemoryPreferenceRegister, MemorySecureRegister
from .secure import SecureCell
from .settings import Settings, get_settings
from .values import DELETE, Delete, Store, Write

__all__ = [
    "AccessDenied",
    "AsyncCell",
    "BackendError",
    "Backends",
    "BaseCell",
    "CacheSlot",
    "CellStoreError",
    "Change",
    "ChangeNotifier",
    "Codec",
    "CodecError",
    "DELETE",
    "DecodeError",
    "Delete",
    "Directory",
    "DiskPreferenceRegister",
    "EncodeError",
    "EntryNotFound",
    "FileCell",
    "JsonCodec",
    "MemoryPreferenceRegister",
    "MemorySecureRegister",
    "NativeCodec",
    "ObservableValue",
    "PreferenceCell",
    "PreferenceRegister",
    "SecureCell",
    "SecureRegister",
    "Settings",
    "StorageCell",
    "Store",
    "Subscription",
    "TrackedValue",
    "Write",
    "build_backends",
    "get_backends",
    "get_settings",
    "reset_backends",
    "set_backends",
]
