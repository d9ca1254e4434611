"""
Tests for the WindowsApplicationLauncher.

These run on any OS: PATH is given explicitly and process creation is mocked.
"""

import os
import subprocess
from unittest.mock import patch

import pytest

from openapp.adapters.application.windows_application_launcher import (
    CREATE_NEW_PROCESS_GROUP,
    DETACHED_PROCESS,
    WindowsApplicationLauncher,
)
from openapp.entities.ResolvedApp import ResolvedApp
from openapp.exceptions import MissingFileManagerError, NotFoundError


@pytest.fixture
def windows_directories(temp_directory):
    """
    Create PATH directories the way a Windows install lays them out.

    Returns:
        Tuple of (system, tools) directory paths
    """
    system = os.path.join(temp_directory, "System32")
    tools = os.path.join(temp_directory, "Tools")
    os.makedirs(system)
    os.makedirs(tools)
    for directory, name in [
        (system, "notepad.exe"),
        (system, "explorer.exe"),
        (tools, "build.CMD"),
        (tools, "Notepad.exe"),
    ]:
        with open(os.path.join(directory, name), "w") as f:
            f.write("")
    yield system, tools


def _launcher(directories, mock_logger, file_manager=None, pathext=None):
    environ = {"PATH": ";".join(directories)}
    if pathext is not None:
        environ["PATHEXT"] = pathext
    return WindowsApplicationLauncher(
        file_manager=file_manager, environ=environ, logger=mock_logger
    )


class TestWindowsLocate:
    """Test cases for resolving names with Windows conventions."""

    def test_locate_adds_pathext(self, windows_directories, mock_logger):
        """A bare name matches an executable with a PATHEXT extension."""
        system, tools = windows_directories
        launcher = _launcher([system, tools], mock_logger)

        assert launcher.locate("notepad").path == os.path.join(system, "notepad.exe")

    def test_locate_is_case_insensitive(self, windows_directories, mock_logger):
        """Names match regardless of case and keep the on-disk spelling."""
        system, tools = windows_directories
        launcher = _launcher([system, tools], mock_logger)

        assert launcher.locate("BUILD").path == os.path.join(tools, "build.CMD")

    def test_locate_with_extension(self, windows_directories, mock_logger):
        """A name that already has an executable extension is matched as is."""
        system, tools = windows_directories
        launcher = _launcher([tools, system], mock_logger)

        assert launcher.locate("notepad.exe").path == os.path.join(tools, "Notepad.exe")

    def test_quoted_and_empty_entries(self, windows_directories, mock_logger):
        """Quotes around PATH entries are stripped and empty entries skipped."""
        system, tools = windows_directories
        launcher = _launcher(["", f'"{tools}"', system], mock_logger)

        assert launcher.locate("notepad").path == os.path.join(tools, "Notepad.exe")

    def test_custom_pathext(self, windows_directories, mock_logger):
        """Only the PATHEXT extensions are tried."""
        system, tools = windows_directories
        launcher = _launcher([system, tools], mock_logger, pathext=".COM")

        with pytest.raises(NotFoundError, match="command not found: notepad"):
            launcher.locate("notepad")


class TestWindowsLaunchAndReveal:
    """Test cases for launching and revealing on Windows."""

    @patch("subprocess.Popen")
    def test_launch_detached(self, mock_popen, mock_logger):
        """The app is started detached and never waited for."""
        launcher = WindowsApplicationLauncher(environ={}, logger=mock_logger)

        launcher.launch(ResolvedApp(r"C:\Windows\notepad.exe", "notepad"))

        mock_popen.assert_called_once_with(
            [r"C:\Windows\notepad.exe"],
            stdin=subprocess.DEVNULL,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            creationflags=DETACHED_PROCESS | CREATE_NEW_PROCESS_GROUP,
        )
        mock_popen.return_value.wait.assert_not_called()

    @patch("subprocess.Popen")
    def test_reveal_with_explorer_selects_paths(
        self, mock_popen, windows_directories, mock_logger
    ):
        """Explorer is asked to select every app."""
        system, tools = windows_directories
        launcher = _launcher([system, tools], mock_logger)
        apps = [launcher.locate("notepad"), launcher.locate("build")]

        launcher.reveal(apps)

        assert mock_popen.call_args[0][0] == [
            os.path.join(system, "explorer.exe"),
            f"/select,{apps[0].path}",
            f"/select,{apps[1].path}",
        ]

    @patch("subprocess.Popen")
    def test_reveal_with_other_file_manager(
        self, mock_popen, windows_directories, mock_logger
    ):
        """Other file managers get the plain paths."""
        system, tools = windows_directories
        launcher = _launcher([system, tools], mock_logger, file_manager="build")
        app = launcher.locate("notepad")

        launcher.reveal([app])

        assert mock_popen.call_args[0][0] == [os.path.join(tools, "build.CMD"), app.path]

    def test_missing_file_manager(self, windows_directories, mock_logger):
        """A file manager that is not on PATH raises MissingFileManagerError."""
        _system, tools = windows_directories
        launcher = _launcher([tools], mock_logger)

        with pytest.raises(MissingFileManagerError, match="explorer.exe"):
            launcher.reveal([launcher.locate("build")])
