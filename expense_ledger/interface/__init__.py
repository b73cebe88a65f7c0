"""Mini README: Command line boundary for the expense ledger.

The ``cli`` module exposes the Typer application, ``requests`` validates
raw option values with pydantic, and ``errors`` names the error codes shown
to users when an invocation is rejected.
"""

from .cli import cli, main
from .errors import CommandError, ErrorCode

__all__ = ["CommandError", "ErrorCode", "cli", "main"]
