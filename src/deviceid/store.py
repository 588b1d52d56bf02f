"""File storage for the device ID.

The identifier lives in a single plain-text file holding exactly the
64-character fingerprint, readable and writable by the owner only.
"""

from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path

from deviceid.config import DEFAULT_STORAGE_SUBDIR, DeviceIDConfig
from deviceid.digest import is_valid_sha256
from deviceid.errors import InvalidFormatError, PathResolutionError, StorageError

logger = logging.getLogger(__name__)

DIR_MODE = 0o700
FILE_MODE = 0o600


def resolve_device_id_path(config: DeviceIDConfig) -> Path:
    """Return the full path of the device ID file.

    Raises:
        PathResolutionError: If no storage_dir is configured and the home
            directory cannot be determined
    """
    if config.storage_dir:
        base_path = Path(config.storage_dir)
    else:
        try:
            home = Path.home()
        except (RuntimeError, KeyError) as e:
            raise PathResolutionError(f"Failed to get user home directory: {e}") from e
        base_path = home / DEFAULT_STORAGE_SUBDIR

    return base_path / config.file_name


def _ensure_directory(directory: Path) -> None:
    """Create directory and any missing parents with owner-only permissions."""
    missing: list[Path] = []
    current = directory
    while not current.exists():
        missing.append(current)
        if current.parent == current:
            break
        current = current.parent

    for path in reversed(missing):
        try:
            path.mkdir(mode=DIR_MODE)
        except FileExistsError:
            continue
        logger.debug(f"Created directory {path}")

    if not directory.is_dir():
        raise NotADirectoryError(f"Not a directory: {directory}")


def read_device_id(path: Path) -> str | None:
    """Read the stored device ID.

    Returns:
        The raw file content, or None if the file does not exist

    Raises:
        StorageError: If the file exists but cannot be read
    """
    try:
        with open(path, "rb") as f:
            content = f.read()
    except FileNotFoundError:
        return None
    except OSError as e:
        raise StorageError(f"Failed to read device ID: {e}", path) from e

    # Undecodable bytes become replacement characters and fail validation
    return content.decode("utf-8", errors="replace")


def write_device_id(path: Path, device_id: str) -> None:
    """Validate and write the device ID, replacing any existing content.

    The value is written to a temporary file in the target directory and
    moved into place, so the target never holds a partial write.

    Raises:
        InvalidFormatError: If device_id is not a well-formed fingerprint
        StorageError: If the directory or file cannot be written
    """
    if not is_valid_sha256(device_id):
        raise InvalidFormatError(device_id)

    directory = path.parent
    try:
        _ensure_directory(directory)
    except OSError as e:
        raise StorageError(f"Failed to create directory: {e}", directory) from e

    try:
        # mkstemp creates the file with 0o600 permissions
        fd, temp_path = tempfile.mkstemp(dir=str(directory), prefix=".device_id_", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(device_id)
                f.flush()
                os.fsync(f.fileno())
            os.chmod(temp_path, FILE_MODE)
            os.replace(temp_path, path)
        except BaseException:
            if os.path.exists(temp_path):
                os.unlink(temp_path)
            raise
    except OSError as e:
        raise StorageError(f"Failed to write device ID: {e}", path) from e

    logger.debug(f"Wrote device ID to {path}")
