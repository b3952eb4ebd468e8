"""
Exception types raised by the Hashculate registry, configuration and digest engine.

Every error is terminal for the call that raised it; callers decide whether to retry.
"""

from typing import List, Optional


class HashingError(Exception):
    """Base class for all Hashculate errors."""


class UnsupportedAlgorithmError(HashingError):
    """Raised when an algorithm name does not match any supported algorithm."""

    def __init__(self, algorithm: str, supported: List[str]):
        self.algorithm = algorithm
        self.supported = list(supported)
        super().__init__(
            f"Unsupported algorithm: {algorithm}. Supported: {', '.join(self.supported)}"
        )


class FileAccessError(HashingError):
    """
    Raised when the file cannot be opened or its metadata cannot be read.

    Attributes:
        path (str): Path as supplied by the caller.
        reason (str): One of not_found, permission_denied, is_directory, stat_failed, io_error.
    """

    NOT_FOUND = "not_found"
    PERMISSION_DENIED = "permission_denied"
    IS_DIRECTORY = "is_directory"
    STAT_FAILED = "stat_failed"
    IO_ERROR = "io_error"

    _MESSAGES = {
        NOT_FOUND: "File '{path}' does not exist",
        PERMISSION_DENIED: "Permission denied reading '{path}'",
        IS_DIRECTORY: "'{path}' is a directory, not a file",
        STAT_FAILED: "Failed to get file info for '{path}'",
        IO_ERROR: "Failed to open file '{path}'",
    }

    def __init__(self, path: str, reason: str, detail: Optional[str] = None):
        self.path = path
        self.reason = reason
        message = self._MESSAGES.get(reason, self._MESSAGES[self.IO_ERROR]).format(path=path)
        if detail:
            message += f": {detail}"
        super().__init__(message)


class ReadError(HashingError):
    """Raised when an I/O failure interrupts the chunked read; partial progress is discarded."""

    def __init__(self, path: str, bytes_read: int, detail: Optional[str] = None):
        self.path = path
        self.bytes_read = bytes_read
        message = f"Failed to read file '{path}' after {bytes_read} bytes"
        if detail:
            message += f": {detail}"
        super().__init__(message)


class ConfigError(HashingError):
    """Raised for invalid configuration values such as a non-positive chunk size."""

    def __init__(self, message: str, value: object = None):
        self.value = value
        super().__init__(message)
