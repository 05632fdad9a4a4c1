"""Configuration management for osdetect."""
import json
import logging
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field, ValidationError

logger = logging.getLogger(__name__)


class DetectorConfig(BaseModel):
    """Global osdetect configuration."""

    os_release_path: str = Field(default="/etc/os-release", description="OS-release file read on Linux")
    command_timeout: Optional[float] = Field(
        default=None, gt=0, description="Seconds to wait for an external command (None waits forever)"
    )
    log_level: str = Field(default="INFO", description="Logging level")


class ConfigManager:
    """Manages loading and saving of configuration."""

    def __init__(self, config_path: Optional[Path] = None):
        """Initialize the config manager.

        Args:
            config_path: Path to the config file. If None, uses default location.
        """
        if config_path:
            self.config_path = config_path
        else:
            self.config_path = Path.home() / ".osdetect" / "config.json"

        self._config: Optional[DetectorConfig] = None

    @property
    def config(self) -> DetectorConfig:
        """Get the current configuration (lazy loading)."""
        if self._config is None:
            self._load()
        return self._config  # type: ignore

    def _load(self) -> None:
        """Load config from file."""
        if self.config_path.exists():
            try:
                with open(self.config_path, "r") as f:
                    data = json.load(f)
                    self._config = DetectorConfig(**data)
                    logger.debug(f"Configuration loaded from {self.config_path}")
            except json.JSONDecodeError as e:
                logger.warning(f"Invalid config file, using defaults: {e}")
                self._config = DetectorConfig()
            except (OSError, ValidationError) as e:
                logger.error(f"Error loading config from {self.config_path}: {e}")
                self._config = DetectorConfig()
        else:
            logger.debug("No config file found, using defaults")
            self._config = DetectorConfig()

    def save(self) -> None:
        """Save config to file."""
        self.config_path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.config_path, "w") as f:
            f.write(self.config.model_dump_json(indent=2))
        logger.debug(f"Configuration saved to {self.config_path}")

    def update(self, **kwargs) -> None:
        """Update configuration values.

        Args:
            **kwargs: Configuration values to update.
        """
        current = self.config.model_dump()
        current.update(kwargs)
        self._config = DetectorConfig(**current)

    def reset(self) -> None:
        """Reset configuration to defaults."""
        self._config = DetectorConfig()


# Lazy singleton pattern
_config_instance: Optional[ConfigManager] = None


def get_config_manager() -> ConfigManager:
    """Get the global config manager instance (lazy initialization)."""
    global _config_instance
    if _config_instance is None:
        _config_instance = ConfigManager()
    return _config_instance


def get_config() -> DetectorConfig:
    """Get the current configuration."""
    return get_config_manager().config


def reset_config() -> None:
    """Reset the global config instance. Useful for testing."""
    global _config_instance
    _config_instance = None
