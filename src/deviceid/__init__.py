"""Stable per-machine device identifiers.

Derives a SHA-256 fingerprint from OS platform identity data and caches it
on disk so the same machine is recognised across restarts.
"""

from deviceid.config import DEFAULT_ID_FILE_NAME, DeviceIDConfig, load_config
from deviceid.digest import digest, is_valid_sha256
from deviceid.errors import (
    DeviceIDError,
    InvalidFormatError,
    PathResolutionError,
    ProbeError,
    StorageError,
)
from deviceid.manager import DeviceIDManager, new_manager
from deviceid.probe import Platform, detect_platform

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_ID_FILE_NAME",
    "DeviceIDConfig",
    "DeviceIDError",
    "DeviceIDManager",
    "InvalidFormatError",
    "PathResolutionError",
    "Platform",
    "ProbeError",
    "StorageError",
    "detect_platform",
    "digest",
    "is_valid_sha256",
    "load_config",
    "new_manager",
]
