"""
Use case for substituting user-defined aliases for app names.
"""

import logging
from types import MappingProxyType
from typing import Mapping, Optional

from openapp.entities.Config import Config


def merge_aliases(config: Config, platform: str) -> Mapping[str, str]:
    """
    Merge the shared aliases with the platform's own.

    Platform entries win on key collision.

    Args:
        config: The user's config
        platform: Current platform identifier ("linux", "macos" or "windows")

    Returns:
        Read-only mapping of alias name to real app name
    """
    merged = dict(config.aliases)
    merged.update(config.platform(platform).aliases)
    return MappingProxyType(merged)


class AliasResolver:
    """Use case resolving app names through the effective alias table."""

    def __init__(
        self,
        config: Config,
        platform: str,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the use case.

        Args:
            config: The user's config
            platform: Current platform identifier
            logger: Logger instance to use for logging
        """
        self._logger = logger or logging.getLogger(__name__)
        self.aliases = merge_aliases(config, platform)

    def resolve(self, name: str) -> str:
        """Return the real app name for name, or name itself when it is not an alias."""
        real = self.aliases.get(name, name)
        if real != name:
            self._logger.debug(f"Alias '{name}' -> '{real}'")
        return real
