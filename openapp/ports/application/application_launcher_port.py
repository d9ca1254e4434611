"""
Application launcher port interface: the per-platform capabilities used on resolved apps.
"""

from abc import ABC, abstractmethod
from typing import Optional

from openapp.entities.ResolvedApp import ResolvedApp


class ApplicationLauncherPort(ABC):
    """Port interface for locating, launching and revealing applications on one platform."""

    @abstractmethod
    def locate(self, name: str, display_name: Optional[str] = None) -> ResolvedApp:
        """
        Find the filesystem location of an application.

        Args:
            name: The real app name (aliases already substituted)
            display_name: The name the user typed, kept for messages

        Returns:
            The resolved application

        Raises:
            NotFoundError: If no application matches the name
            PlatformError: If the OS reported an error while searching
        """
        pass

    @abstractmethod
    def launch(self, app: ResolvedApp) -> None:
        """
        Start the application as an independent process.

        Raises:
            PlatformError: If the OS refused to start it
        """
        pass

    @abstractmethod
    def reveal(self, apps: list[ResolvedApp]) -> None:
        """
        Open a file browser with every given application selected.

        Raises:
            MissingFileManagerError: If the file manager cannot be resolved
            PlatformError: If the OS refused to open the file browser
        """
        pass
