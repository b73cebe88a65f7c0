"""Mini README: Core package initializer for the expense ledger.

This module exposes convenience imports so callers can reach the ledger
store, its ``Expense`` records and the logging helpers without knowing the
exact module structure. It stays lightweight so importing the package never
pulls in the CLI stack.
"""

from .logging_utils import get_logger
from .ledger import Expense, LedgerStore, open_ledger

__all__ = ["Expense", "LedgerStore", "get_logger", "open_ledger"]
