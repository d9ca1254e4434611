"""
User-facing output: announcements on stdout, errors on stderr, both silenced by --quiet.
"""

from typing import IO, Optional

from rich.console import Console


class ConsoleReporter:
    """Writes what the user asked to see, honouring quiet mode."""

    def __init__(
        self,
        quiet: bool = False,
        prog: str = "oa",
        stdout: Optional[IO[str]] = None,
        stderr: Optional[IO[str]] = None,
    ) -> None:
        self.quiet = quiet
        self.prog = prog
        # No file means rich looks up sys.stdout / sys.stderr on every write.
        self._out = Console(file=stdout, soft_wrap=True, highlight=False)
        self._err = Console(file=stderr, stderr=True, soft_wrap=True, highlight=False)

    def info(self, message: str) -> None:
        """Print a line on stdout unless quiet."""
        if not self.quiet:
            # Written as is: paths may hold tabs or control characters rich would rewrite
            self._out.file.write(f"{message}\n")

    def error(self, error: object, always: bool = False) -> None:
        """
        Print "prog: error" on stderr.

        Args:
            error: The error or message to print
            always: Print even in quiet mode (used for config file errors)
        """
        if always or not self.quiet:
            self._err.print(f"{self.prog}: {error}", markup=False, emoji=False)
