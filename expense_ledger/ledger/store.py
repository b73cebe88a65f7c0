"""Mini README: In-memory expense ledger backed by a flat text file.

Structure:
    * LedgerStore - loads the ledger on construction, assigns identifiers and
      serves the add, list, summary and delete operations.
    * open_ledger - context manager guaranteeing the ledger is rewritten on
      every exit path once it has been loaded.

The whole file is read into memory up front and rewritten in full on save;
there are no incremental disk updates. Identifiers only ever grow during a
run: ``next_id`` starts one past the largest loaded id and is never reused
after a delete.
"""

from __future__ import annotations

from contextlib import contextmanager
from datetime import date
from pathlib import Path
from typing import Callable, Iterator, List, Optional, Union

from ..logging_utils import get_logger
from .codec import Expense, decode_lines, encode_line, parse_integer

LOGGER = get_logger(__name__)

PathLike = Union[str, Path]


class LedgerStore:
    """Own the expense collection for a single command invocation."""

    def __init__(
        self,
        source_path: PathLike,
        *,
        today: Optional[Callable[[], date]] = None,
    ) -> None:
        self.source_path = Path(source_path)
        self._today = today or date.today
        self._records: List[Expense] = []
        self._next_id = 1
        self.load()

    def __len__(self) -> int:
        return len(self._records)

    @property
    def next_id(self) -> int:
        """Identifier the next added expense will receive."""

        return self._next_id

    def load(self) -> None:
        """Read every decodable record from ``source_path``.

        A missing file is an empty ledger. Malformed lines, including lines
        that are not valid UTF-8, are skipped. Other read errors propagate so
        an unreadable ledger is never silently replaced by an empty one.
        """

        if not self.source_path.exists():
            LOGGER.debug("Ledger %s does not exist yet; starting empty", self.source_path)
            return

        with self.source_path.open("rb") as handle:
            for expense in decode_lines(_text_lines(handle)):
                self._records.append(expense)
                self._next_id = max(self._next_id, expense.expense_id + 1)
        LOGGER.debug(
            "Loaded %s expenses from %s (next id %s)",
            len(self._records),
            self.source_path,
            self._next_id,
        )

    def save(self) -> bool:
        """Rewrite ``source_path`` with the current records.

        Returns ``False`` and logs a warning when the file cannot be written;
        the error never propagates.
        """

        try:
            with self.source_path.open("w", encoding="utf-8", newline="\n") as handle:
                for expense in self._records:
                    handle.write(encode_line(expense) + "\n")
        except OSError as error:
            LOGGER.warning(
                "Could not save ledger to %s; changes from this run are lost: %s",
                self.source_path,
                error,
            )
            return False
        LOGGER.debug("Saved %s expenses to %s", len(self._records), self.source_path)
        return True

    def add(self, description: str, amount: float) -> int:
        """Append a new expense dated today and return its identifier."""

        expense = Expense(
            expense_id=self._next_id,
            date=self._today().strftime("%Y-%m-%d"),
            description=description,
            amount=amount,
        )
        self._records.append(expense)
        self._next_id += 1
        LOGGER.info("Added expense %s (%s, %s)", expense.expense_id, description, amount)
        return expense.expense_id

    def list_expenses(self) -> List[Expense]:
        """Return expenses in insertion order."""

        return list(self._records)

    def sum_by_month(self, month: Optional[int] = None) -> float:
        """Total all amounts, or only those dated in ``month`` when given."""

        total = 0.0
        for expense in self._records:
            if month is None or _month_of(expense.date) == month:
                total += expense.amount
        return total

    def delete_by_id(self, expense_id: int) -> bool:
        """Remove the expense with ``expense_id``; report whether one existed."""

        for index, expense in enumerate(self._records):
            if expense.expense_id == expense_id:
                del self._records[index]
                LOGGER.info("Deleted expense %s", expense_id)
                return True
        LOGGER.debug("No expense with id %s to delete", expense_id)
        return False


def _text_lines(handle) -> Iterator[str]:
    """Decode a binary handle line by line, dropping undecodable lines."""

    for raw_line in handle:
        try:
            yield raw_line.decode("utf-8")
        except UnicodeDecodeError:
            LOGGER.debug("Skipping ledger line that is not valid UTF-8: %r", raw_line)


def _month_of(expense_date: str) -> int:
    """Extract the ``MM`` part of ``YYYY-MM-DD``; ``0`` when unusable."""

    token = expense_date[5:7]
    if len(token) != 2:
        return 0
    month = parse_integer(token)
    return 0 if month is None else month


@contextmanager
def open_ledger(
    source_path: PathLike,
    *,
    today: Optional[Callable[[], date]] = None,
) -> Iterator[LedgerStore]:
    """Load the ledger and save it again however the block is left."""

    store = LedgerStore(source_path, today=today)
    try:
        yield store
    finally:
        store.save()
