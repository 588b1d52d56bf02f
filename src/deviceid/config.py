"""
Configuration for device ID management.

Provides YAML-based configuration with CLI overrides,
configuration hierarchy (CLI > YAML > Defaults), and validation.
"""

from __future__ import annotations

import json
from pathlib import Path, PurePath
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

DEFAULT_ID_FILE_NAME = ".device_id"
DEFAULT_STORAGE_SUBDIR = ".parity"

__all__ = [
    "DEFAULT_ID_FILE_NAME",
    "DEFAULT_STORAGE_SUBDIR",
    "DeviceIDConfig",
    "apply_cli_overrides",
    "load_config",
    "load_yaml",
]


class DeviceIDConfig(BaseModel):
    """Where the device ID file lives."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    storage_dir: str | None = Field(
        default=None,
        description="Directory holding the device ID file (default: ~/.parity)",
    )
    id_file_name: str | None = Field(
        default=None,
        description=(
            f"Device ID file name, relative to storage_dir (default: {DEFAULT_ID_FILE_NAME})"
        ),
    )

    @field_validator("storage_dir", "id_file_name", mode="before")
    @classmethod
    def normalize_path(cls, v: Any) -> Any:
        """Accept path objects and treat empty strings as unset."""
        if isinstance(v, PurePath):
            v = str(v)
        if v == "":
            return None
        return v

    @property
    def file_name(self) -> str:
        """Configured file name, or the default."""
        return self.id_file_name or DEFAULT_ID_FILE_NAME


def load_yaml(config_file: str | Path) -> dict[str, Any]:
    """
    Load YAML or JSON configuration file.

    Args:
        config_file: Path to YAML or JSON configuration file

    Returns:
        Dictionary with parsed YAML/JSON content

    Raises:
        ValueError: If YAML/JSON is invalid or file format is wrong
    """
    config_path = Path(config_file).expanduser()

    if not config_path.exists():
        return {}

    file_ext = config_path.suffix.lower()
    if file_ext not in [".yaml", ".yml", ".json"]:
        raise ValueError(
            f"Config file must have .yaml, .yml, or .json extension, got: {file_ext}\n"
            f"File: {config_path}"
        )

    try:
        with open(config_path, encoding="utf-8") as f:
            content = f.read()

        if file_ext == ".json":
            data = json.loads(content) if content.strip() else {}
        else:
            data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in config file: {e}") from e
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in config file: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Config file must contain a mapping, got {type(data).__name__}")
    return data


def apply_cli_overrides(
    config_dict: dict[str, Any],
    cli_overrides: dict[str, Any] | None = None,
) -> dict[str, Any]:
    """
    Apply CLI argument overrides to config dictionary.

    Overrides whose value is None (option not given) are skipped.
    """
    if cli_overrides is None:
        return config_dict

    for key, value in cli_overrides.items():
        if value is not None:
            config_dict[key] = value

    return config_dict


def load_config(
    config_file: str | Path | None = None,
    cli_overrides: dict[str, Any] | None = None,
) -> DeviceIDConfig:
    """
    Load configuration with hierarchy: CLI > YAML > Defaults.

    Args:
        config_file: Optional path to a YAML/JSON config file
        cli_overrides: Dictionary of CLI argument overrides

    Returns:
        Validated DeviceIDConfig instance

    Raises:
        ValueError: If the file or resulting configuration is invalid
    """
    config_dict = load_yaml(config_file) if config_file is not None else {}
    config_dict = apply_cli_overrides(config_dict, cli_overrides)

    try:
        return DeviceIDConfig(**config_dict)
    except ValidationError as e:
        source = config_file if config_file is not None else "command line"
        raise ValueError(
            f"Configuration validation failed: {e}\nPlease check your configuration at {source}"
        ) from e
