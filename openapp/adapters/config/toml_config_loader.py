"""
TOML config file adapter implementation.
"""

import logging
import os
import tomllib
from typing import Any

from pydantic import ValidationError
from typing_extensions import override

from openapp.entities.Config import Config
from openapp.exceptions import ConfigFileError
from openapp.ports.config.config_loader_port import ConfigLoaderPort

DEFAULT_CONFIG_PATH = "~/.oarc"


class TomlConfigLoader(ConfigLoaderPort):
    """Reads the user's dotfile as TOML and validates it into a Config."""

    def __init__(self, logger: logging.Logger | None = None):
        """
        Initialize the adapter with an optional logger.

        Args:
            logger: Logger instance to use for logging. If None, a default logger will be created.
        """
        self._logger: logging.Logger = logger or logging.getLogger(__name__)

    @override
    def load(self, path: str = DEFAULT_CONFIG_PATH) -> Config:
        """
        Load and validate the config file.

        Args:
            path: Path to the config file, "~" is expanded

        Returns:
            The parsed Config, or an empty Config if the file does not exist

        Raises:
            ConfigFileError: If the file cannot be read, is not valid TOML or has the wrong shape
        """
        expanded = os.path.expanduser(path)
        try:
            with open(expanded, "rb") as f:
                data = tomllib.load(f)
        except FileNotFoundError:
            # You don't have to have a config file.
            self._logger.debug(f"No config file at {expanded}, using defaults")
            return Config()
        except tomllib.TOMLDecodeError as e:
            raise ConfigFileError(self._describe_syntax_error(e, path))
        except (OSError, UnicodeDecodeError) as e:
            raise ConfigFileError(f"Could not read {path}: {e}")

        self._logger.debug(f"Loaded config file {expanded}")
        return self._validate(data, path)

    def _validate(self, data: dict[str, Any], path: str) -> Config:
        """
        Turn parsed TOML into a Config.

        Raises:
            ConfigFileError: Describing the first validation problem found
        """
        try:
            return Config.model_validate(data)
        except ValidationError as e:
            raise ConfigFileError(self._describe_validation_error(e, path))

    def _describe_syntax_error(self, error: tomllib.TOMLDecodeError, path: str) -> str:
        message = str(error)
        if "overwrite" in message or "twice" in message:
            return f"Value set twice in {path}: {message}"
        return f"Syntax error in {path}: {message}"

    def _describe_validation_error(self, error: ValidationError, path: str) -> str:
        first = error.errors()[0]
        location = ".".join(str(part) for part in first["loc"])
        kind = first["type"]
        if kind == "missing":
            return f"{path} is missing an [{location}] section."
        if kind.endswith("_type"):
            return f"Type mismatch at {location} in {path}: {first['msg']}"
        return f"{location} is invalid in {path}: {first['msg']}"
