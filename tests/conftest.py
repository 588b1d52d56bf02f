"""Pytest configuration and shared fixtures for device ID tests."""

from collections.abc import Iterator
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from deviceid.config import DeviceIDConfig
from deviceid.digest import digest
from deviceid.manager import DeviceIDManager

FAKE_SYSTEM_INFO = b"0123456789abcdef0123456789abcdef\n"


@pytest.fixture
def storage_dir(tmp_path: Path) -> Path:
    """A storage directory that does not exist yet."""
    return tmp_path / "parity"


@pytest.fixture
def config(storage_dir: Path) -> DeviceIDConfig:
    """Config pointing at the temp storage directory."""
    return DeviceIDConfig(storage_dir=str(storage_dir))


@pytest.fixture
def manager(config: DeviceIDConfig) -> DeviceIDManager:
    """Manager using the temp storage directory."""
    return DeviceIDManager(config)


@pytest.fixture
def mock_probe() -> Iterator[MagicMock]:
    """Mock the platform probe so tests never read the host's identity."""
    with patch(
        "deviceid.manager.probe_system_info", return_value=FAKE_SYSTEM_INFO
    ) as mock:
        yield mock


@pytest.fixture
def expected_id() -> str:
    """Device ID produced from FAKE_SYSTEM_INFO."""
    return digest(FAKE_SYSTEM_INFO)
