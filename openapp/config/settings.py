"""
Configuration settings for the application.
"""

import logging
import os

from dotenv import find_dotenv, load_dotenv

from openapp.adapters.config.toml_config_loader import DEFAULT_CONFIG_PATH
from openapp.exceptions import ConfigurationError


class Settings:
    """Application settings loaded from environment variables."""

    def __init__(self, load_env_file: bool = True):
        if load_env_file:
            # Load environment variables from a .env file in or above the working directory
            _ = load_dotenv(find_dotenv(usecwd=True))
        self.config_path: str = self._get_env("OA_CONFIG", DEFAULT_CONFIG_PATH)
        self.log_level: int = self._get_log_level("OA_LOG_LEVEL", "WARNING")

    def _get_env(self, key: str, default: str) -> str:
        """Get an environment variable with a default value."""
        return os.getenv(key) or default

    def _get_log_level(self, key: str, default: str) -> int:
        """Get a logging level by name, raise error if it is not one."""
        name = self._get_env(key, default).upper()
        level = logging.getLevelName(name)
        if not isinstance(level, int):
            raise ConfigurationError(f"{key} must be a logging level name, not '{name}'")
        return level
