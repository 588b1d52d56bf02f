"""Platform probes for raw machine identity data.

Each supported OS family exposes a hardware or platform UUID through a
different facility:

- Windows: ``wmic csproduct get UUID``
- macOS: ``ioreg -d2 -c IOPlatformExpertDevice``
- Everything else: the contents of ``/etc/machine-id``

Probe output is returned as raw bytes. Nothing is parsed; the digest step
collapses any labels or whitespace into a fixed-length fingerprint.
"""

from __future__ import annotations

import logging
import platform
import subprocess  # nosec B404 - only fixed argument lists are executed
from collections.abc import Callable
from enum import Enum
from pathlib import Path

from deviceid.errors import ProbeError

logger = logging.getLogger(__name__)

MACHINE_ID_FILE = Path("/etc/machine-id")

WINDOWS_COMMAND = ["wmic", "csproduct", "get", "UUID"]
APPLE_COMMAND = ["ioreg", "-d2", "-c", "IOPlatformExpertDevice"]


class Platform(str, Enum):
    """OS families with a distinct identity source."""

    WINDOWS = "windows"
    APPLE = "apple"
    OTHER = "other"


def detect_platform(system: str | None = None) -> Platform:
    """Map ``platform.system()`` (or an explicit name) to a Platform."""
    system = system if system is not None else platform.system()
    if system == "Windows":
        return Platform.WINDOWS
    elif system == "Darwin":
        return Platform.APPLE
    else:
        return Platform.OTHER


def _run_command(command: list[str]) -> bytes:
    source = " ".join(command)
    try:
        result = subprocess.run(  # nosec B603 - hardcoded probe command
            command,
            capture_output=True,
            check=True,
        )
    except FileNotFoundError as e:
        raise ProbeError(source, f"command not found: {command[0]}") from e
    except subprocess.CalledProcessError as e:
        stderr = (e.stderr or b"").decode("utf-8", errors="replace").strip()
        reason = f"exit status {e.returncode}"
        if stderr:
            reason = f"{reason}: {stderr}"
        raise ProbeError(source, reason) from e
    except OSError as e:
        raise ProbeError(source, str(e)) from e
    return result.stdout


def probe_windows() -> bytes:
    """Query the system product UUID via WMI."""
    return _run_command(WINDOWS_COMMAND)


def probe_apple() -> bytes:
    """Query the IOPlatformExpertDevice registry entry."""
    return _run_command(APPLE_COMMAND)


def probe_machine_id() -> bytes:
    """Read the OS machine-id file."""
    try:
        return MACHINE_ID_FILE.read_bytes()
    except OSError as e:
        raise ProbeError(str(MACHINE_ID_FILE), str(e)) from e


_PROBES: dict[Platform, Callable[[], bytes]] = {
    Platform.WINDOWS: probe_windows,
    Platform.APPLE: probe_apple,
    Platform.OTHER: probe_machine_id,
}


def get_probe(target: Platform) -> Callable[[], bytes]:
    """Return the probe function for a platform."""
    return _PROBES[target]


def probe_system_info(target: Platform | None = None) -> bytes:
    """Collect raw identity data for the given (or detected) platform.

    Raises:
        ProbeError: If the platform source is missing or fails
    """
    if target is None:
        target = detect_platform()
    logger.debug(f"Probing system info for platform {target.value}")
    info = get_probe(target)()
    logger.debug(f"Probe returned {len(info)} bytes")
    return info
