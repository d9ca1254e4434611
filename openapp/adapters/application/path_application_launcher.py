"""
Shared implementation for platforms that find applications by searching PATH.
"""

import logging
import os
import subprocess
from typing import Mapping, Optional

from typing_extensions import override

from openapp.entities.ResolvedApp import ResolvedApp
from openapp.exceptions import MissingFileManagerError, NotFoundError, PlatformError
from openapp.ports.application.application_launcher_port import ApplicationLauncherPort


class PathApplicationLauncher(ApplicationLauncherPort):
    """
    Locates apps as executables on PATH and reveals them with an external file manager.

    Subclasses provide the platform conventions: PATH separator, filename matching,
    process creation and the file manager arguments.
    """

    path_separator: str = os.pathsep
    default_file_manager: str = ""

    def __init__(
        self,
        file_manager: Optional[str] = None,
        environ: Optional[Mapping[str, str]] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        """
        Initialize the launcher.

        Args:
            file_manager: Executable used to reveal apps; the platform default when None
            environ: Environment to read PATH and friends from; os.environ when None
            logger: Logger instance. If None, a default logger is created.
        """
        self._logger = logger or logging.getLogger(__name__)
        self._environ = os.environ if environ is None else environ
        self.file_manager = file_manager or self.default_file_manager

    @override
    def locate(self, name: str, display_name: Optional[str] = None) -> ResolvedApp:
        path = self._search(name)
        if path is None:
            self._logger.debug(f"'{name}' not found on PATH")
            raise NotFoundError(name)
        self._logger.debug(f"Located '{name}' at {path}")
        return ResolvedApp(path=path, name=display_name or name)

    @override
    def launch(self, app: ResolvedApp) -> None:
        process = self._spawn([app.path], app.name)
        self._logger.info(f"Launched {app.path} (pid={process.pid})")
        if self._should_wait():
            process.wait()

    @override
    def reveal(self, apps: list[ResolvedApp]) -> None:
        try:
            manager = self.locate(self.file_manager)
        except NotFoundError:
            raise MissingFileManagerError(self.file_manager)

        process = self._spawn(
            [manager.path, *self._reveal_arguments(manager, apps)], manager.name
        )
        self._logger.info(f"Revealing {len(apps)} app(s) with {manager.path} (pid={process.pid})")

    def _directories(self) -> list[str]:
        return self._environ.get("PATH", "").split(self.path_separator)

    def _search(self, name: str) -> Optional[str]:
        """
        Return the path of the first PATH entry holding a file that matches name.

        Raises:
            PlatformError: If an existing PATH directory cannot be listed
        """
        for directory in self._directories():
            if not directory or not os.path.exists(directory):
                continue
            try:
                entries = os.listdir(directory)
            except OSError as e:
                raise PlatformError(
                    e.errno or -1, f"Could not list {directory}: {e.strerror or e}"
                )
            match = self._match(name, entries)
            if match is not None:
                return os.path.join(directory, match)
        return None

    def _match(self, name: str, entries: list[str]) -> Optional[str]:
        return name if name in entries else None

    def _spawn(self, argv: list[str], app_name: str) -> subprocess.Popen:
        """
        Start argv with stdio detached from ours.

        Raises:
            PlatformError: If the process could not be started
        """
        try:
            return subprocess.Popen(
                argv,
                stdin=subprocess.DEVNULL,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
                **self._popen_options(),
            )
        except OSError as e:
            self._logger.debug(f"Failed to start {argv[0]}: {e}")
            raise PlatformError(
                e.errno or -1, f"Could not launch '{app_name}': {e.strerror or e}"
            )

    def _popen_options(self) -> dict[str, object]:
        return {}

    def _should_wait(self) -> bool:
        return False

    def _reveal_arguments(
        self, manager: ResolvedApp, apps: list[ResolvedApp]
    ) -> list[str]:
        return [app.path for app in apps]
