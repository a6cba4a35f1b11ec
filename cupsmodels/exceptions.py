"""cupsmodels exception classes."""

from __future__ import annotations


class CupsModelsError(RuntimeError):
    """Base exception for cupsmodels errors."""


class UserError(CupsModelsError):
    """Errors that should be shown to user without traceback."""

    def __init__(self, message: str, rc: int = 2):
        super().__init__(message)
        self.rc = rc


class CupsCommandError(CupsModelsError):
    """A CUPS command-line tool exited with a non-zero status."""

    def __init__(self, command: list[str], rc: int, output: str):
        tool = command[0] if command else "command"
        detail = output.strip() or "no output"
        super().__init__(f"{tool} failed (rc={rc}): {detail}")
        self.command = command
        self.rc = rc
        self.output = output
