"""Application settings and configuration management."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

import yaml

CONFIG_ENV_VAR = "DSSL_CONFIG"


def _default_config_dir() -> Path:
    """Return the default configuration directory."""
    return Path.home() / ".dssl"


def default_config_path() -> Path:
    """Return the config file path, honoring $DSSL_CONFIG."""
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        return Path(env_path).expanduser()
    return _default_config_dir() / "config.yaml"


@dataclass
class DefaultsConfig:
    """Defaults used when the user leaves a field out."""

    sex: str = "male"
    goal: str = "recomp"
    output_format: str = "table"  # "table", "json", "markdown"


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: str = "WARNING"


@dataclass
class Settings:
    """Main application settings."""

    defaults: DefaultsConfig = field(default_factory=DefaultsConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def load(cls, config_path: Optional[Path] = None) -> "Settings":
        """Load settings from YAML file or return defaults.

        Args:
            config_path: Path to config.yaml. If None, uses $DSSL_CONFIG or
                ~/.dssl/config.yaml

        Returns:
            Settings instance

        Raises:
            OSError: If the path exists but cannot be read as a file
            yaml.YAMLError: If the file exists but is not valid YAML
        """
        if config_path is None:
            config_path = default_config_path()

        if not config_path.exists():
            return cls()

        with open(config_path) as f:
            data = yaml.safe_load(f) or {}

        settings = cls()
        if not isinstance(data, dict):
            return settings

        # Parse defaults
        def_data = data.get("defaults")
        if not isinstance(def_data, dict):
            def_data = {}
        if "sex" in def_data:
            settings.defaults.sex = str(def_data["sex"])
        if "goal" in def_data:
            settings.defaults.goal = str(def_data["goal"])
        if "output_format" in def_data:
            settings.defaults.output_format = str(def_data["output_format"])

        # Parse logging config
        log_data = data.get("logging")
        if not isinstance(log_data, dict):
            log_data = {}
        if "level" in log_data:
            settings.logging.level = str(log_data["level"]).upper()

        return settings

    def save(self, config_path: Optional[Path] = None) -> Path:
        """Save current settings to YAML file.

        Args:
            config_path: Path to save config.yaml. If None, uses the default path

        Returns:
            Path written
        """
        if config_path is None:
            config_path = default_config_path()

        config_path.parent.mkdir(parents=True, exist_ok=True)

        with open(config_path, "w") as f:
            yaml.dump(self.to_dict(), f, default_flow_style=False, sort_keys=False)

        return config_path

    def to_dict(self) -> dict:
        """Convert to a plain dict (the YAML file layout)."""
        return {
            "defaults": {
                "sex": self.defaults.sex,
                "goal": self.defaults.goal,
                "output_format": self.defaults.output_format,
            },
            "logging": {
                "level": self.logging.level,
            },
        }


# Global settings instance (lazy loaded)
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get the global settings instance, loading from disk if needed."""
    global _settings
    if _settings is None:
        _settings = Settings.load()
    return _settings


def reload_settings() -> Settings:
    """Force reload settings from disk."""
    global _settings
    _settings = Settings.load()
    return _settings
