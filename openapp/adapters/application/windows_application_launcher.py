"""
Windows application launcher: executables on PATH (honouring PATHEXT), revealed with Explorer.
"""

import os
import subprocess
from typing import Optional

from typing_extensions import override

from openapp.adapters.application.path_application_launcher import (
    PathApplicationLauncher,
)
from openapp.entities.ResolvedApp import ResolvedApp

DEFAULT_PATHEXT = ".COM;.EXE;.BAT;.CMD"

# Values of the win32 constants, for when subprocess does not define them
DETACHED_PROCESS = getattr(subprocess, "DETACHED_PROCESS", 0x00000008)
CREATE_NEW_PROCESS_GROUP = getattr(subprocess, "CREATE_NEW_PROCESS_GROUP", 0x00000200)


class WindowsApplicationLauncher(PathApplicationLauncher):
    """Windows implementation of the application launcher port."""

    path_separator = ";"
    default_file_manager = "explorer.exe"

    @override
    def _directories(self) -> list[str]:
        return [d.strip('"') for d in super()._directories() if d.strip()]

    def _extensions(self) -> list[str]:
        pathext = self._environ.get("PATHEXT") or DEFAULT_PATHEXT
        return [ext.lower() for ext in pathext.split(";") if ext]

    @override
    def _match(self, name: str, entries: list[str]) -> Optional[str]:
        # NTFS is case-insensitive; keep the on-disk spelling of the match
        by_lower = {entry.lower(): entry for entry in entries}
        candidates = [name.lower()]
        extensions = self._extensions()
        if os.path.splitext(name)[1].lower() not in extensions:
            candidates += [name.lower() + ext for ext in extensions]
        for candidate in candidates:
            if candidate in by_lower:
                return by_lower[candidate]
        return None

    @override
    def _popen_options(self) -> dict[str, object]:
        return {"creationflags": DETACHED_PROCESS | CREATE_NEW_PROCESS_GROUP}

    @override
    def _reveal_arguments(
        self, manager: ResolvedApp, apps: list[ResolvedApp]
    ) -> list[str]:
        if os.path.splitext(os.path.basename(manager.path))[0].lower() == "explorer":
            return [f"/select,{app.path}" for app in apps]
        return super()._reveal_arguments(manager, apps)
