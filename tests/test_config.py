"""
Tests for configuration loading and validation.

Author: Vasiliy Zdanovskiy
email: vasilyvz@gmail.com
"""

import json

import pytest
from pydantic import ValidationError

from tag_tools.core.config import (
    ToolConfig,
    load_config,
    save_config,
    validate_config,
)
from tag_tools.core.exceptions import ConfigurationError


class TestToolConfig:
    """Tests for ToolConfig validation."""

    def test_defaults(self):
        config = ToolConfig()
        assert config.log_level == "WARNING"
        assert config.log_file is None
        assert config.output_format == "text"

    def test_normalizes_values(self):
        config = ToolConfig(log_level="debug", output_format="JSON")
        assert config.log_level == "DEBUG"
        assert config.output_format == "json"

    def test_invalid_log_level(self):
        with pytest.raises(ValidationError):
            ToolConfig(log_level="LOUD")

    def test_invalid_output_format(self):
        with pytest.raises(ValidationError):
            ToolConfig(output_format="yaml")

    def test_unknown_field_rejected(self):
        with pytest.raises(ValidationError):
            ToolConfig(colour=True)


class TestLoadConfig:
    def test_round_trip(self, tmp_path):
        path = tmp_path / "cfg" / "config.json"
        save_config({"log_level": "info", "output_format": "json"}, path)
        config = load_config(path)
        assert config.log_level == "INFO"
        assert config.output_format == "json"

    def test_missing_file(self, tmp_path):
        is_valid, error, config = validate_config(tmp_path / "missing.json")
        assert not is_valid
        assert "not found" in error
        assert config is None
        with pytest.raises(ConfigurationError):
            load_config(tmp_path / "missing.json")

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text("{not json", encoding="utf-8")
        is_valid, error, _ = validate_config(path)
        assert not is_valid
        assert error.startswith("Invalid JSON")

    def test_non_object_root(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps(["a"]), encoding="utf-8")
        with pytest.raises(ConfigurationError, match="JSON object"):
            load_config(path)

    def test_validation_error(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"log_level": "LOUD"}), encoding="utf-8")
        with pytest.raises(ConfigurationError, match="Validation error"):
            load_config(path)
