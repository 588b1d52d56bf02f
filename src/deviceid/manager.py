"""
Device ID manager.

Generates a stable identifier for the current machine from platform
identity data and keeps it cached on disk.

Verify strategy:
1. Read the stored ID file
2. If missing or malformed, generate a new ID and save it
3. Otherwise return the stored value unchanged

Read failures other than "file missing" are raised, never regenerated over.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from deviceid.config import DeviceIDConfig
from deviceid.digest import digest, is_valid_sha256
from deviceid.probe import Platform, probe_system_info
from deviceid.store import read_device_id, resolve_device_id_path, write_device_id

logger = logging.getLogger(__name__)


def _short(device_id: str) -> str:
    return f"{device_id[:8]}..."


class DeviceIDManager:
    """Generates, stores and verifies the device ID for one configuration."""

    def __init__(
        self,
        config: DeviceIDConfig | None = None,
        platform: Platform | None = None,
    ):
        """
        Initialize the manager.

        Args:
            config: Storage configuration (defaults to ~/.parity/.device_id)
            platform: Platform to probe; detected at probe time when None
        """
        self._config = config or DeviceIDConfig()
        self._platform = platform

    @property
    def config(self) -> DeviceIDConfig:
        return self._config

    def generate_device_id(self) -> str:
        """Create a device ID from system information. Nothing is written.

        Raises:
            ProbeError: If system information cannot be collected
        """
        info = probe_system_info(self._platform)
        return digest(info)

    def get_device_id_path(self) -> Path:
        """Return the resolved path of the device ID file.

        Raises:
            PathResolutionError: If the home directory cannot be determined
        """
        return resolve_device_id_path(self._config)

    def save_device_id(self, device_id: str) -> None:
        """Validate and store a device ID.

        Raises:
            InvalidFormatError: If device_id is not a 64-char lowercase hex string
            PathResolutionError: If the storage path cannot be resolved
            StorageError: If the file cannot be written
        """
        path = self.get_device_id_path()
        write_device_id(path, device_id)

    def verify_device_id(self) -> str:
        """Return the stored device ID, creating or repairing it if needed.

        Raises:
            ProbeError: If a new ID is needed and system info is unavailable
            PathResolutionError: If the storage path cannot be resolved
            StorageError: If the file cannot be read (other than missing) or written
        """
        path = self.get_device_id_path()
        stored = read_device_id(path)

        if stored is None:
            logger.info(f"No device ID at {path}, generating a new one")
            return self._regenerate()

        if not is_valid_sha256(stored):
            logger.warning(f"Stored device ID at {path} is malformed, regenerating")
            return self._regenerate()

        logger.debug(f"Using stored device ID {_short(stored)}")
        return stored

    def _regenerate(self) -> str:
        device_id = self.generate_device_id()
        self.save_device_id(device_id)
        logger.info(f"Saved new device ID {_short(device_id)}")
        return device_id


def new_manager(config: DeviceIDConfig | None = None, **overrides: Any) -> DeviceIDManager:
    """Create a manager, optionally overriding config fields by keyword."""
    if overrides:
        base = config.model_dump() if config is not None else {}
        base.update(overrides)
        config = DeviceIDConfig(**base)
    return DeviceIDManager(config)
