"""Tests for deviceid.config - configuration model and loading."""

import pytest
from pydantic import ValidationError

from deviceid.config import (
    DEFAULT_ID_FILE_NAME,
    DeviceIDConfig,
    apply_cli_overrides,
    load_config,
    load_yaml,
)


class TestDeviceIDConfig:
    """Tests for the DeviceIDConfig model."""

    def test_defaults(self):
        config = DeviceIDConfig()
        assert config.storage_dir is None
        assert config.id_file_name is None
        assert config.file_name == DEFAULT_ID_FILE_NAME

    def test_empty_strings_mean_default(self):
        config = DeviceIDConfig(storage_dir="", id_file_name="")
        assert config.storage_dir is None
        assert config.file_name == ".device_id"

    def test_custom_file_name(self):
        assert DeviceIDConfig(id_file_name="my-id").file_name == "my-id"

    def test_is_frozen(self):
        config = DeviceIDConfig()
        with pytest.raises(ValidationError):
            config.id_file_name = "other"

    def test_allows_relative_path_file_name(self):
        """A nested file name is kept as given and joined under storage_dir."""
        assert DeviceIDConfig(id_file_name="sub/id").file_name == "sub/id"

    def test_accepts_path_storage_dir(self, tmp_path):
        config = DeviceIDConfig(storage_dir=tmp_path)
        assert config.storage_dir == str(tmp_path)

    def test_empty_path_values_mean_default(self):
        config = DeviceIDConfig(storage_dir=None, id_file_name="")
        assert config.id_file_name is None

    def test_rejects_unknown_fields(self):
        with pytest.raises(ValidationError):
            DeviceIDConfig(storage_path="/tmp")


class TestLoadYaml:
    """Tests for load_yaml."""

    def test_missing_file_returns_empty(self, tmp_path):
        assert load_yaml(tmp_path / "missing.yaml") == {}

    def test_loads_yaml(self, tmp_path):
        config_file = tmp_path / "deviceid.yaml"
        config_file.write_text("storage_dir: /srv/ids\nid_file_name: node-id\n")
        assert load_yaml(config_file) == {"storage_dir": "/srv/ids", "id_file_name": "node-id"}

    def test_loads_json(self, tmp_path):
        config_file = tmp_path / "deviceid.json"
        config_file.write_text('{"id_file_name": "node-id"}')
        assert load_yaml(config_file) == {"id_file_name": "node-id"}

    def test_empty_yaml_returns_empty(self, tmp_path):
        config_file = tmp_path / "deviceid.yml"
        config_file.write_text("")
        assert load_yaml(config_file) == {}

    def test_rejects_unknown_extension(self, tmp_path):
        config_file = tmp_path / "deviceid.toml"
        config_file.write_text("x = 1")
        with pytest.raises(ValueError, match="extension"):
            load_yaml(config_file)

    def test_invalid_yaml(self, tmp_path):
        config_file = tmp_path / "deviceid.yaml"
        config_file.write_text("storage_dir: [unclosed\n")
        with pytest.raises(ValueError, match="Invalid YAML"):
            load_yaml(config_file)

    def test_invalid_json(self, tmp_path):
        config_file = tmp_path / "deviceid.json"
        config_file.write_text("{not json")
        with pytest.raises(ValueError, match="Invalid JSON"):
            load_yaml(config_file)

    def test_non_mapping(self, tmp_path):
        config_file = tmp_path / "deviceid.yaml"
        config_file.write_text("- a\n- b\n")
        with pytest.raises(ValueError, match="mapping"):
            load_yaml(config_file)


class TestApplyCliOverrides:
    """Tests for apply_cli_overrides."""

    def test_none_overrides(self):
        assert apply_cli_overrides({"a": 1}) == {"a": 1}

    def test_skips_unset_values(self):
        result = apply_cli_overrides(
            {"storage_dir": "/from/file"}, {"storage_dir": None, "id_file_name": "cli-id"}
        )
        assert result == {"storage_dir": "/from/file", "id_file_name": "cli-id"}


class TestLoadConfig:
    """Tests for load_config."""

    def test_defaults_without_file(self):
        assert load_config() == DeviceIDConfig()

    def test_cli_overrides_file(self, tmp_path):
        config_file = tmp_path / "deviceid.yaml"
        config_file.write_text("storage_dir: /from/file\nid_file_name: file-id\n")

        config = load_config(config_file, cli_overrides={"id_file_name": "cli-id"})

        assert config.storage_dir == "/from/file"
        assert config.id_file_name == "cli-id"

    def test_validation_failure_raises_value_error(self, tmp_path):
        config_file = tmp_path / "deviceid.yaml"
        config_file.write_text("storage_path: /srv/ids\n")
        with pytest.raises(ValueError, match="Configuration validation failed"):
            load_config(config_file)
