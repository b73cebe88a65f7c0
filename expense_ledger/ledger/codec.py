"""Mini README: Line codec for the flat-file expense ledger.

Structure:
    * Expense - dataclass describing a single ledger entry.
    * decode_line - parse one persisted line, returning ``None`` when the line
      cannot be recovered.
    * decode_lines - decode an iterable of lines, dropping malformed ones.
    * encode_line - render an expense back into its persisted form.

Each record is stored as ``<id> <date> <description>|<amount>``. Decoding is
deliberately lenient: hand-edited or partially corrupted files stay usable
because unparseable lines are skipped instead of aborting the whole load.
The amount is split off at the last ``|`` so descriptions may contain the
delimiter themselves.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Optional

from ..logging_utils import get_logger

LOGGER = get_logger(__name__)

FIELD_DELIMITER = "|"


@dataclass(slots=True)
class Expense:
    """Represent one ledger entry as loaded from or written to disk."""

    expense_id: int
    date: str
    description: str
    amount: float


def _is_plain_token(token: str) -> bool:
    """ASCII, no digit-group underscores, no padding whitespace."""

    return bool(token) and token.isascii() and "_" not in token and token == token.strip()


def parse_integer(token: str) -> Optional[int]:
    """Parse a plain decimal integer such as ``42`` or ``-3``; ``None`` otherwise."""

    if not _is_plain_token(token):
        return None
    try:
        return int(token)
    except ValueError:
        return None


def parse_amount(token: str) -> Optional[float]:
    if not _is_plain_token(token):
        return None
    try:
        return float(token)
    except ValueError:
        return None


def decode_line(line: str) -> Optional[Expense]:
    """Parse a persisted line into an ``Expense`` or ``None`` when malformed."""

    tokens = line.strip().split(maxsplit=2)
    if len(tokens) < 3:
        return None

    id_token, date_token, remainder = tokens
    description, delimiter, amount_token = remainder.rpartition(FIELD_DELIMITER)
    if not delimiter:
        return None

    expense_id = parse_integer(id_token)
    amount = parse_amount(amount_token)
    if expense_id is None or amount is None:
        return None

    return Expense(
        expense_id=expense_id,
        date=date_token,
        description=description.strip(),
        amount=amount,
    )


def decode_lines(lines: Iterable[str]) -> Iterator[Expense]:
    """Yield every decodable expense, skipping malformed lines silently."""

    for line_number, line in enumerate(lines, start=1):
        expense = decode_line(line)
        if expense is None:
            if line.strip():
                LOGGER.debug("Skipping malformed ledger line %s: %r", line_number, line)
            continue
        yield expense


def encode_line(expense: Expense) -> str:
    """Render an expense as ``<id> <date> <description>|<amount>``."""

    return (
        f"{expense.expense_id} {expense.date} "
        f"{expense.description}{FIELD_DELIMITER}{expense.amount}"
    )
