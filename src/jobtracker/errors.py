"""Error kinds raised by the storage layer."""

from __future__ import annotations


class StorageError(Exception):
    """Base class for every failure raised by the storage layer."""


class StorageUnavailable(StorageError):
    """The store cannot be opened or its schema cannot be ensured."""


class ConstraintViolation(StorageError):
    """An insert violated the primary key or a NOT NULL column."""


class DecodeError(StorageError):
    """A stored row cannot be reconstructed into a JobApplication."""
