"""
Linux (and other Unix) application launcher: executables on PATH, revealed with a file manager.
"""

from typing_extensions import override

from openapp.adapters.application.path_application_launcher import (
    PathApplicationLauncher,
)
from openapp.entities.ResolvedApp import ResolvedApp

# Set by desktop sessions; absent on a console or over ssh
DESKTOP_SESSION_VARIABLE = "XDG_CURRENT_DESKTOP"


class LinuxApplicationLauncher(PathApplicationLauncher):
    """Linux implementation of the application launcher port."""

    path_separator = ":"
    # TODO: pick the default from XDG_CURRENT_DESKTOP (dolphin on KDE, thunar on Xfce)
    default_file_manager = "nautilus"

    @override
    def _should_wait(self) -> bool:
        # Graphical programs outlive us; command-line programs are waited for.
        return DESKTOP_SESSION_VARIABLE not in self._environ

    @override
    def _reveal_arguments(
        self, manager: ResolvedApp, apps: list[ResolvedApp]
    ) -> list[str]:
        return [app.uri() for app in apps]
