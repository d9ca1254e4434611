"""
macOS application launcher backed by Launch Services and NSWorkspace (via PyObjC).
"""

import logging
from types import ModuleType
from typing import Any, Optional

from typing_extensions import override

from openapp.entities.ResolvedApp import ResolvedApp
from openapp.exceptions import LaunchServicesError, kLSApplicationNotFoundErr
from openapp.ports.application.application_launcher_port import ApplicationLauncherPort


class MacOSApplicationLauncher(ApplicationLauncherPort):
    """macOS implementation of the application launcher port."""

    def __init__(
        self,
        launch_services: Optional[ModuleType] = None,
        appkit: Optional[ModuleType] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        """
        Initialize the launcher.

        Args:
            launch_services: Module exposing the Launch Services functions; CoreServices when None
            appkit: Module exposing NSWorkspace and NSURL; AppKit when None
            logger: Logger instance. If None, a default logger is created.
        """
        self._launch_services = launch_services
        self._appkit = appkit
        self._logger = logger or logging.getLogger(__name__)

    @property
    def launch_services(self) -> Any:
        if self._launch_services is None:
            import CoreServices

            self._launch_services = CoreServices
        return self._launch_services

    @property
    def appkit(self) -> Any:
        if self._appkit is None:
            import AppKit

            self._appkit = AppKit
        return self._appkit

    @override
    def locate(self, name: str, display_name: Optional[str] = None) -> ResolvedApp:
        ls = self.launch_services
        # LSFindApplicationForInfo is deprecated, but nothing newer finds "Foo.app" by name.
        status, _app_ref, url = ls.LSFindApplicationForInfo(
            ls.kLSUnknownCreator, None, f"{name}.app", None, None
        )
        if url is None:
            self._logger.debug(f"Launch Services could not find '{name}.app' ({status})")
            raise LaunchServicesError(
                status or kLSApplicationNotFoundErr, display_name or name
            )
        path = str(url.path())
        self._logger.debug(f"Located '{name}' at {path}")
        return ResolvedApp(path=path, name=display_name or name)

    @override
    def launch(self, app: ResolvedApp) -> None:
        url = self.appkit.NSURL.fileURLWithPath_(app.path)
        status, _launched_url = self.launch_services.LSOpenCFURLRef(url, None)
        if status != 0:
            raise LaunchServicesError(status, app.name)
        self._logger.info(f"Asked Launch Services to open {app.path}")

    @override
    def reveal(self, apps: list[ResolvedApp]) -> None:
        urls = [self.appkit.NSURL.fileURLWithPath_(app.path) for app in apps]
        self.appkit.NSWorkspace.sharedWorkspace().activateFileViewerSelecting_(urls)
        self._logger.info(f"Revealed {len(apps)} app(s) in the Finder")
