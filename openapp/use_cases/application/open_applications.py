"""
Use case for launching, locating or revealing a list of applications.
"""

import logging
from typing import Optional

from openapp.entities.Operation import Operation
from openapp.entities.ResolvedApp import ResolvedApp
from openapp.exceptions import BaseAppError, UnknownError
from openapp.ports.application.application_launcher_port import ApplicationLauncherPort
from openapp.use_cases.aliases.resolve_aliases import AliasResolver
from openapp.utils.reporter import ConsoleReporter


class OpenApplicationsUseCase:
    """
    Resolve each app name through the aliases and the platform, then apply one operation.

    Apps are handled in input order and the first failure stops the run.
    """

    def __init__(
        self,
        launcher: ApplicationLauncherPort,
        alias_resolver: AliasResolver,
        reporter: ConsoleReporter,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._launcher = launcher
        self._alias_resolver = alias_resolver
        self._reporter = reporter
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, names: list[str], operation: Operation) -> list[ResolvedApp]:
        """
        Apply operation to every named app.

        Args:
            names: App names as typed by the user
            operation: What to do with each resolved app

        Returns:
            The resolved apps, in input order

        Raises:
            BaseAppError: The first error met; unexpected failures are wrapped in UnknownError
        """
        try:
            self._logger.info(f"{operation.value.capitalize()} {len(names)} app(s)")
            if operation is Operation.REVEAL:
                return self._reveal(names)
            return [self._process(name, operation) for name in names]
        except BaseAppError:
            raise
        except Exception as e:
            self._logger.debug(f"Unexpected error during {operation.value}: {e}", exc_info=True)
            raise UnknownError(e)

    def locate(self, name: str) -> ResolvedApp:
        """Resolve one user-facing name to an app, substituting aliases first."""
        return self._launcher.locate(self._alias_resolver.resolve(name), display_name=name)

    def _process(self, name: str, operation: Operation) -> ResolvedApp:
        app = self.locate(name)
        self._reporter.info(operation.announcement(app.path))
        if operation is Operation.LAUNCH:
            self._launcher.launch(app)
        return app

    def _reveal(self, names: list[str]) -> list[ResolvedApp]:
        # The file browser takes every app in one call, so resolve them all first.
        apps = [self.locate(name) for name in names]
        for app in apps:
            self._reporter.info(Operation.REVEAL.announcement(app.path))
        self._launcher.reveal(apps)
        return apps
