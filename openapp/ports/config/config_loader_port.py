"""
Config loader port interface defining the contract for reading the user's config file.
"""

from abc import ABC, abstractmethod

from openapp.entities.Config import Config


class ConfigLoaderPort(ABC):
    """Port interface for config file loading."""

    @abstractmethod
    def load(self, path: str) -> Config:
        """
        Load the config file at path.

        Args:
            path: Path to the config file, "~" is expanded

        Returns:
            The parsed Config; an empty Config when the file does not exist

        Raises:
            ConfigFileError: If the file exists but cannot be read or parsed
        """
        pass
