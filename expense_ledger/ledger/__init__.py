"""Mini README: Persistent expense ledger for the command line tracker.

This package owns the record format and the in-memory collection that the
commands operate on. ``codec`` converts between text lines and ``Expense``
records while ``store`` loads, mutates and rewrites the ledger file. The
codec's strict ``parse_integer``/``parse_amount`` helpers are shared with the
command line so arguments and stored fields follow the same number rules.
"""

from .codec import Expense, decode_line, decode_lines, encode_line, parse_amount, parse_integer
from .store import LedgerStore, open_ledger

__all__ = [
    "Expense",
    "LedgerStore",
    "decode_line",
    "decode_lines",
    "encode_line",
    "open_ledger",
    "parse_amount",
    "parse_integer",
]
