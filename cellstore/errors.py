from __future__ import annotations


class CellStoreError(Exception):
    """Base class for every error raised by cellstore collaborators."""


class CodecError(CellStoreError):
    pass


class EncodeError(CodecError):
    pass


class DecodeError(CodecError):
    pass


class BackendError(CellStoreError):
    """The storage medium rejected an operation."""


class EntryNotFound(BackendError, KeyError):
    pass


class AccessDenied(BackendError):
    """The secure register refused access (locked device, missing entitlement...)."""
