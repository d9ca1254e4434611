"""
Dependency injection container for managing application dependencies.

This is where the platform-specific launcher is chosen.
"""

import logging
import sys
from typing import Optional

from openapp.adapters.application.linux_application_launcher import (
    LinuxApplicationLauncher,
)
from openapp.adapters.application.macos_application_launcher import (
    MacOSApplicationLauncher,
)
from openapp.adapters.application.windows_application_launcher import (
    WindowsApplicationLauncher,
)
from openapp.adapters.config.toml_config_loader import TomlConfigLoader
from openapp.config.settings import Settings
from openapp.entities.Config import Config
from openapp.ports.application.application_launcher_port import ApplicationLauncherPort
from openapp.ports.config.config_loader_port import ConfigLoaderPort
from openapp.use_cases.aliases.resolve_aliases import AliasResolver
from openapp.use_cases.application.open_applications import OpenApplicationsUseCase
from openapp.utils.reporter import ConsoleReporter


def current_platform(platform: str = sys.platform) -> str:
    """
    Map a sys.platform value to the platform identifier used in the config file.

    Anything that is neither macOS nor Windows is handled the Linux way.
    """
    if platform == "darwin":
        return "macos"
    if platform in ("win32", "cygwin"):
        return "windows"
    return "linux"


class DependencyContainer:
    """
    Container for managing application dependencies using dependency injection.
    """

    def __init__(
        self,
        config_path: Optional[str] = None,
        platform: Optional[str] = None,
        logger: Optional[logging.Logger] = None,
    ):
        self._instances = {}
        self._config_path = config_path
        self._platform = platform or current_platform()
        self._logger = logger or logging.getLogger("openapp")

    def get_settings(self) -> Settings:
        """
        Get settings instance.

        Returns:
            Settings read from the environment
        """
        if "settings" not in self._instances:
            self._instances["settings"] = Settings()
        return self._instances["settings"]

    def get_config_loader(self) -> ConfigLoaderPort:
        """
        Get config loader adapter instance.

        Returns:
            ConfigLoaderPort implementation
        """
        if "config_loader" not in self._instances:
            self._instances["config_loader"] = TomlConfigLoader(self._logger)
        return self._instances["config_loader"]

    def get_config(self) -> Config:
        """
        Load the user's config file once.

        Returns:
            The user's Config

        Raises:
            ConfigFileError: If the config file is malformed
        """
        if "config" not in self._instances:
            path = self._config_path or self.get_settings().config_path
            self._instances["config"] = self.get_config_loader().load(path)
        return self._instances["config"]

    def get_application_launcher(self) -> ApplicationLauncherPort:
        """
        Get the application launcher for the current platform.

        Returns:
            ApplicationLauncherPort implementation
        """
        if "application_launcher" not in self._instances:
            platform_config = self.get_config().platform(self._platform)
            if self._platform == "macos":
                launcher: ApplicationLauncherPort = MacOSApplicationLauncher(
                    logger=self._logger
                )
            elif self._platform == "windows":
                launcher = WindowsApplicationLauncher(
                    file_manager=platform_config.file_manager, logger=self._logger
                )
            else:
                launcher = LinuxApplicationLauncher(
                    file_manager=platform_config.file_manager, logger=self._logger
                )
            self._instances["application_launcher"] = launcher
        return self._instances["application_launcher"]

    def get_alias_resolver(self) -> AliasResolver:
        """
        Get alias resolver with the effective aliases for this platform.

        Returns:
            Configured AliasResolver
        """
        if "alias_resolver" not in self._instances:
            self._instances["alias_resolver"] = AliasResolver(
                self.get_config(), self._platform, self._logger
            )
        return self._instances["alias_resolver"]

    def get_open_applications_use_case(
        self, reporter: ConsoleReporter
    ) -> OpenApplicationsUseCase:
        """
        Get open applications use case with injected dependencies.

        Args:
            reporter: Where announcements are printed

        Returns:
            Configured OpenApplicationsUseCase
        """
        if "open_applications_use_case" not in self._instances:
            self._instances["open_applications_use_case"] = OpenApplicationsUseCase(
                self.get_application_launcher(),
                self.get_alias_resolver(),
                reporter,
                self._logger,
            )
        return self._instances["open_applications_use_case"]

    def reset(self):
        """Reset all instances (useful for testing)."""
        self._instances.clear()
