"""
Tests for the ResolvedApp and Operation entities.
"""

from pathlib import Path

import pytest

from openapp.entities.Operation import Operation
from openapp.entities.ResolvedApp import ResolvedApp


class TestResolvedApp:
    """Test cases for the ResolvedApp entity."""

    def test_initialization(self):
        app = ResolvedApp("/usr/bin/firefox", "browser")

        assert app.path == "/usr/bin/firefox"
        assert app.name == "browser"
        assert str(app) == "/usr/bin/firefox"

    def test_name_defaults_to_basename(self):
        assert ResolvedApp("/Applications/Safari.app").name == "Safari.app"

    def test_empty_path(self):
        with pytest.raises(ValueError, match="needs a path"):
            ResolvedApp("")

    def test_uri(self, temp_directory):
        path = str(Path(temp_directory, "My App"))

        assert ResolvedApp(path).uri() == Path(path).as_uri()
        assert "%20" in ResolvedApp(path).uri()

    def test_equality(self):
        assert ResolvedApp("/usr/bin/vim", "vim") == ResolvedApp("/usr/bin/vim", "vim")
        assert ResolvedApp("/usr/bin/vim", "vim") != ResolvedApp("/usr/bin/vim", "vi")
        assert len({ResolvedApp("/a", "a"), ResolvedApp("/a", "a")}) == 1


class TestOperation:
    """Test cases for the Operation entity."""

    @pytest.mark.parametrize(
        "operation,expected",
        [
            (Operation.LAUNCH, "Launching /usr/bin/vim"),
            (Operation.LOCATE, "/usr/bin/vim"),
            (Operation.REVEAL, "Revealing /usr/bin/vim"),
        ],
    )
    def test_announcement(self, operation, expected):
        assert operation.announcement("/usr/bin/vim") == expected
