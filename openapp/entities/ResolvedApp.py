"""
Resolved application domain entity.
"""

from pathlib import Path
from typing import Optional


class ResolvedApp:
    """
    Resolved application entity: where an app lives on the filesystem and what the user called it.
    """

    def __init__(self, path: str, name: Optional[str] = None):
        """
        Initialize the ResolvedApp entity.

        Args:
            path: Filesystem location of the app (executable or .app bundle)
            name: The user-facing name the app was requested by, before alias substitution
        """
        if not path:
            raise ValueError("A resolved application needs a path")

        self.path = str(path)
        self.name = name or Path(self.path).name

    def uri(self) -> str:
        """Return the app location as a file:// URI."""
        return Path(self.path).absolute().as_uri()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ResolvedApp):
            return NotImplemented
        return self.path == other.path and self.name == other.name

    def __hash__(self) -> int:
        return hash((self.path, self.name))

    def __repr__(self) -> str:
        return f"ResolvedApp(name='{self.name}', path='{self.path}')"

    def __str__(self) -> str:
        return self.path
