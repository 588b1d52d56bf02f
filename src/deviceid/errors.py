"""Custom exceptions for device ID management."""

from __future__ import annotations

from pathlib import Path


class DeviceIDError(Exception):
    """Base exception for device ID errors."""

    pass


class ProbeError(DeviceIDError):
    """Raised when the platform identity source cannot be queried."""

    def __init__(self, source: str, reason: str) -> None:
        self.source = source
        self.reason = reason
        super().__init__(f"Failed to get system info from {source}: {reason}")


class PathResolutionError(DeviceIDError):
    """Raised when the default storage directory cannot be determined."""

    pass


class StorageError(DeviceIDError):
    """Raised when reading or writing the device ID file fails."""

    def __init__(self, message: str, path: Path | str | None = None) -> None:
        self.path = path
        suffix = f" ({path})" if path is not None else ""
        super().__init__(f"{message}{suffix}")


class InvalidFormatError(DeviceIDError, ValueError):
    """Raised when a value is not a well-formed device ID."""

    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__("Invalid device ID format: expected 64 lowercase hex characters")
