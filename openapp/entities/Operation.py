"""
Operation domain entity.
"""

from enum import Enum


class Operation(Enum):
    """Operations the user may request to perform on apps."""

    LAUNCH = "launch"
    LOCATE = "locate"
    REVEAL = "reveal"

    def announcement(self, path: str) -> str:
        """
        Build the line printed for an app before the operation acts on it.

        Args:
            path: Filesystem path of the resolved app

        Returns:
            The announcement text
        """
        if self is Operation.LAUNCH:
            return f"Launching {path}"
        if self is Operation.REVEAL:
            return f"Revealing {path}"
        return path
