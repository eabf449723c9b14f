from __future__ import annotations


class StorageError(Exception):
    # Base class for every error raised by the storage facade and its backends.
    pass


class BrandingError(StorageError, TypeError):
    # Raised when an operation runs on an object the storage factory did not produce.
    pass


class ArgumentError(StorageError, TypeError):
    # Raised for a wrong argument count or a value that cannot be coerced.
    pass


class QuotaExceededError(StorageError):
    # Raised by backends when an entry or a scope exceeds the storage quota.
    pass


class NotSupportedError(StorageError):
    # Raised by backends that cannot serve the requested scope in this process.
    pass
