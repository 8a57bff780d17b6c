"""Configuration management using Pydantic Settings.

Supports configuration via:
- Environment variables (HUMAN2DURATION_ prefix)
- YAML configuration file (human2duration.yaml)
- CLI arguments (highest priority)

Settings only affect the command-line output; the parse tables are fixed.
"""

from pathlib import Path
from typing import Any

import yaml
from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class DisplayDefaults(BaseSettings):
    """Default settings for rendering parse results."""

    model_config = SettingsConfigDict(env_prefix="HUMAN2DURATION_DISPLAY_")

    utc: bool = Field(
        default=True,
        description="Show the resulting instant in UTC (False = local time)",
    )
    show_instant: bool = Field(
        default=True,
        description="Show the instant reached by applying the offset to now",
    )


class Settings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(
        env_prefix="HUMAN2DURATION_",
        env_nested_delimiter="__",
        extra="ignore",
    )

    display: DisplayDefaults = Field(default_factory=DisplayDefaults)

    # Config file path
    config_file: Path | None = Field(
        default=None,
        description="Path to YAML configuration file",
    )

    json_output: bool = Field(default=False, description="Emit JSON instead of Rich output")
    verbose: bool = Field(default=False, description="Enable verbose output")
    debug: bool = Field(default=False, description="Enable debug mode")

    @model_validator(mode="before")
    @classmethod
    def load_yaml_config(cls, data: dict[str, Any]) -> dict[str, Any]:
        """Load configuration from YAML file if specified or exists in default locations."""
        config_file = data.get("config_file")

        if config_file is None:
            default_locations = [
                Path("human2duration.yaml"),
                Path("human2duration.yml"),
                Path.home() / ".human2duration.yaml",
                Path.home() / ".config" / "human2duration" / "config.yaml",
            ]
            for loc in default_locations:
                if loc.exists():
                    config_file = loc
                    break

        if config_file is not None:
            config_path = Path(config_file)
            if config_path.exists():
                with open(config_path) as f:
                    yaml_config = yaml.safe_load(f) or {}

                # Explicit values win over the file
                for key, value in yaml_config.items():
                    if key not in data or data[key] is None:
                        data[key] = value

        return data


# Global settings instance (lazy loaded)
_settings: Settings | None = None


def get_settings(config_file: Path | None = None, **overrides: Any) -> Settings:
    """Get or create the settings instance.

    Args:
        config_file: Optional path to YAML configuration file
        **overrides: Additional settings to override

    Returns:
        Settings instance
    """
    global _settings

    if _settings is None or config_file is not None or overrides:
        settings_data: dict[str, Any] = {}
        if config_file:
            settings_data["config_file"] = config_file
        settings_data.update(overrides)
        _settings = Settings(**settings_data)

    return _settings


def reset_settings() -> None:
    """Reset the global settings instance (useful for testing)."""
    global _settings
    _settings = None
