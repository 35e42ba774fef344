"""
Configuration management for tag tools CLI.

Provides configuration schema, validation, loading and saving.

Author: Vasiliy Zdanovskiy
email: vasilyvz@gmail.com
"""

import json
from pathlib import Path
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field, field_validator

from .exceptions import ConfigurationError

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
OUTPUT_FORMATS = ("text", "json")


class ToolConfig(BaseModel):
    """Tag tools configuration."""

    model_config = {"extra": "forbid"}  # Reject unknown fields

    log_level: str = Field(default="WARNING", description="Logging level")
    log_file: Optional[str] = Field(default=None, description="Path to log file")
    output_format: str = Field(
        default="text", description="CLI output format: text or json"
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate and normalize log level name."""
        v_upper = v.strip().upper()
        if v_upper not in LOG_LEVELS:
            raise ValueError(
                f"log_level must be one of {', '.join(LOG_LEVELS)}, got: {v}"
            )
        return v_upper

    @field_validator("output_format")
    @classmethod
    def validate_output_format(cls, v: str) -> str:
        """Validate output format value."""
        v_lower = v.strip().lower()
        if v_lower not in OUTPUT_FORMATS:
            raise ValueError(f"output_format must be 'text' or 'json', got: {v}")
        return v_lower


def validate_config(
    config_path: Path,
) -> tuple[bool, Optional[str], Optional[ToolConfig]]:
    """
    Validate configuration file.

    Args:
        config_path: Path to configuration file

    Returns:
        Tuple of (is_valid, error_message, config_object)
    """
    try:
        if not config_path.exists():
            return False, f"Configuration file not found: {config_path}", None

        with open(config_path, "r", encoding="utf-8") as f:
            config_data = json.load(f)

        if not isinstance(config_data, dict):
            return False, "Configuration root must be a JSON object", None

        config = ToolConfig(**config_data)
        return True, None, config

    except json.JSONDecodeError as e:
        return False, f"Invalid JSON: {str(e)}", None
    except ValueError as e:
        return False, f"Validation error: {str(e)}", None


def load_config(config_path: Path) -> ToolConfig:
    """
    Load and validate configuration.

    Args:
        config_path: Path to configuration file

    Returns:
        ToolConfig object

    Raises:
        ConfigurationError: If configuration is missing or invalid
    """
    is_valid, error, config = validate_config(config_path)
    if not is_valid or config is None:
        raise ConfigurationError(
            error or "Invalid configuration",
            details={"path": str(config_path)},
        )
    return config


def save_config(config: Dict[str, Any], config_path: Path) -> None:
    """
    Save configuration to file.

    Args:
        config: Configuration dictionary
        config_path: Path to save configuration
    """
    config_path.parent.mkdir(parents=True, exist_ok=True)
    with open(config_path, "w", encoding="utf-8") as f:
        json.dump(config, f, indent=2, ensure_ascii=False)
