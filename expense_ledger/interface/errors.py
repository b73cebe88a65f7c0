"""Mini README: Error codes reported by the command line boundary.

Structure:
    * ErrorCode - enumerates each category of invocation error with the
      message shown to the user.
    * CommandError - raised when command arguments fail validation.
"""

from __future__ import annotations

from enum import Enum


class ErrorCode(str, Enum):
    """Enumerate the boundary error categories and their codes."""

    INSUFFICIENT_ARGUMENTS = "0x00"
    INVALID_ADD_ARGUMENTS = "0x01"
    INVALID_DELETE_ID = "0x02"
    UNKNOWN_COMMAND = "0x03"
    UNREADABLE_LEDGER = "0x04"
    INVALID_CONFIGURATION = "0x05"

    @property
    def message(self) -> str:
        return _MESSAGES[self]

    def render(self) -> str:
        """Format the line written to stderr for this error."""

        return f"ERROR {self.value}: {self.message}"


_MESSAGES = {
    ErrorCode.INSUFFICIENT_ARGUMENTS: "Insufficient Arguments.",
    ErrorCode.INVALID_ADD_ARGUMENTS: "Invalid arguments for adding an expense.",
    ErrorCode.INVALID_DELETE_ID: "Invalid ID for deletion.",
    ErrorCode.UNKNOWN_COMMAND: "Unknown command.",
    ErrorCode.UNREADABLE_LEDGER: "Unable to read ledger file.",
    ErrorCode.INVALID_CONFIGURATION: "Invalid configuration.",
}


class CommandError(ValueError):
    """Invalid command invocation carrying the code to report."""

    def __init__(self, code: ErrorCode) -> None:
        super().__init__(code.render())
        self.code = code
