"""Configuration management utilities."""

import json
import logging
import os
from pathlib import Path
from typing import Any, Optional

from ..core.constants import CONFIG_FILE_NAME, DATA_DIR_ENV, DATA_DIR_NAME
from ..models.config import DockpilotConfig

logger = logging.getLogger(__name__)


def default_data_dir() -> Path:
    """Data directory from the environment, or ~/.dockpilot."""
    env_dir = os.environ.get(DATA_DIR_ENV)
    if env_dir:
        return Path(env_dir)
    return Path.home() / DATA_DIR_NAME


class ConfigManager:
    """Manages dockpilot configuration."""

    def __init__(self, data_dir: Optional[Path] = None):
        """Initialize config manager."""
        self.data_dir = Path(data_dir) if data_dir else default_data_dir()
        self.config_file = self.data_dir / CONFIG_FILE_NAME

    def get_config(self) -> DockpilotConfig:
        """Load configuration, falling back to defaults."""
        if not self.config_file.exists():
            return DockpilotConfig()
        try:
            data = json.loads(self.config_file.read_text())
            return DockpilotConfig(**data)
        except (OSError, ValueError, TypeError) as e:
            logger.warning(f"Ignoring unreadable config {self.config_file}: {e}")
            return DockpilotConfig()

    def save_config(self, config: DockpilotConfig):
        """Save configuration."""
        self.data_dir.mkdir(parents=True, exist_ok=True)
        self.config_file.write_text(config.model_dump_json(indent=2))

    def set_value(self, key: str, value: Any) -> DockpilotConfig:
        """Validate and store a single setting.

        Raises:
            KeyError: If the setting does not exist
            pydantic.ValidationError: If the value is invalid
        """
        if key not in DockpilotConfig.model_fields:
            raise KeyError(key)
        data = self.get_config().model_dump()
        data[key] = value
        config = DockpilotConfig(**data)
        self.save_config(config)
        return config

    def reset(self) -> DockpilotConfig:
        """Reset configuration to defaults."""
        config = DockpilotConfig()
        self.save_config(config)
        return config
