"""Mini README: Tests covering the file-backed ledger store.

Structure:
    * loading - missing files, malformed lines and id recovery.
    * mutations - add, delete and identifier monotonicity.
    * summaries - totals with and without a month filter.
    * persistence - save output and the ``open_ledger`` guarantee.
"""

from __future__ import annotations

import logging
from datetime import date
from pathlib import Path

import pytest

from expense_ledger.ledger import Expense, LedgerStore, open_ledger


def _write_ledger(path: Path, *lines: str) -> Path:
    path.write_text("".join(f"{line}\n" for line in lines), encoding="utf-8")
    return path


def _fixed_day() -> date:
    return date(2024, 7, 14)


def test_missing_file_is_an_empty_ledger(tmp_path: Path) -> None:
    """A ledger file that does not exist loads as an empty ledger."""

    store = LedgerStore(tmp_path / "expenses.txt")

    assert store.list_expenses() == []
    assert store.sum_by_month(None) == 0
    assert store.next_id == 1


def test_load_skips_malformed_lines(tmp_path: Path) -> None:
    """Malformed lines contribute nothing and cause no failure."""

    ledger = _write_ledger(
        tmp_path / "expenses.txt",
        "1 2024-01-01 Coffee|3.50",
        "garbage line",
        "2 2024-01-02 Lunch|12.00",
    )

    store = LedgerStore(ledger)

    assert [expense.expense_id for expense in store.list_expenses()] == [1, 2]
    assert store.list_expenses()[1] == Expense(
        expense_id=2, date="2024-01-02", description="Lunch", amount=12.0
    )


def test_load_skips_lines_that_are_not_utf8(tmp_path: Path) -> None:
    """Undecodable bytes only cost the line they appear on."""

    ledger = tmp_path / "expenses.txt"
    ledger.write_bytes(b"1 2024-01-01 Coffee|3.50\n2 2024-01-02 Caf\xe9|4.00\n3 2024-01-03 Tea|2.00\n")

    store = LedgerStore(ledger)

    assert [expense.expense_id for expense in store.list_expenses()] == [1, 3]


def test_next_id_follows_largest_loaded_id(tmp_path: Path) -> None:
    """The next id is one past the largest loaded id, whatever the file order."""

    ledger = _write_ledger(
        tmp_path / "expenses.txt",
        "3 2024-01-01 Coffee|3.50",
        "7 2024-01-02 Lunch|12.00",
        "1 2024-01-03 Bus|2.40",
    )

    store = LedgerStore(ledger, today=_fixed_day)

    assert store.next_id == 8
    assert store.add("Dinner", 20.0) == 8
    assert store.next_id == 9


def test_add_records_today_and_keeps_order(tmp_path: Path) -> None:
    """Added expenses are dated today and listed in insertion order."""

    store = LedgerStore(tmp_path / "expenses.txt", today=_fixed_day)

    first = store.add("Coffee", 3.5)
    second = store.add("Books", 29.99)

    assert (first, second) == (1, 2)
    assert [expense.description for expense in store.list_expenses()] == ["Coffee", "Books"]
    assert store.list_expenses()[0].date == "2024-07-14"


def test_deleted_ids_are_never_reused(tmp_path: Path) -> None:
    """Identifiers only grow, even after the highest one is deleted."""

    ledger = _write_ledger(
        tmp_path / "expenses.txt",
        "4 2024-01-01 Coffee|3.50",
        "5 2024-01-02 Lunch|12.00",
    )
    store = LedgerStore(ledger, today=_fixed_day)

    assert store.delete_by_id(5) is True
    new_id = store.add("Snack", 1.0)

    assert new_id == 6
    assert 5 not in {expense.expense_id for expense in store.list_expenses()}


def test_delete_reports_whether_a_record_was_removed(tmp_path: Path) -> None:
    """Deleting returns a flag and removes at most one record."""

    ledger = _write_ledger(
        tmp_path / "expenses.txt",
        "1 2024-01-01 Coffee|3.50",
        "2 2024-01-02 Lunch|12.00",
    )
    store = LedgerStore(ledger)

    assert store.delete_by_id(1) is True
    assert len(store) == 1
    assert store.delete_by_id(42) is False
    assert len(store) == 1


def test_sum_by_month_filters_on_date_month(tmp_path: Path) -> None:
    """Month totals only include expenses dated in that month."""

    ledger = _write_ledger(
        tmp_path / "expenses.txt",
        "1 2024-01-15 Groceries|10",
        "2 2024-02-01 Rent share|20",
        "3 2024-01-31 Snacks|5",
    )
    store = LedgerStore(ledger)

    assert store.sum_by_month(1) == pytest.approx(15.0)
    assert store.sum_by_month(2) == pytest.approx(20.0)
    assert store.sum_by_month(None) == pytest.approx(35.0)
    assert store.sum_by_month(3) == 0


def test_unusable_dates_never_match_a_month(tmp_path: Path) -> None:
    """Dates without a plain two digit month are excluded from month totals."""

    ledger = _write_ledger(
        tmp_path / "expenses.txt",
        "1 yesterday Coffee|3.00",
        "2 2024-1 Tea|2.00",
        "4 2024-\u0660\u0661-05 Cake|6.00",
        "5 2024-_1-05 Scone|7.00",
        "3 2024-01-02 Bagel|4.00",
    )
    store = LedgerStore(ledger)

    assert store.sum_by_month(1) == pytest.approx(4.0)
    assert store.sum_by_month(None) == pytest.approx(22.0)


def test_save_rewrites_file_in_collection_order(tmp_path: Path) -> None:
    """Saving writes every current record once, in collection order."""

    ledger = _write_ledger(
        tmp_path / "expenses.txt",
        "2 2024-01-02 Lunch|12.00",
        "garbage line",
        "1 2024-01-01 Coffee|3.50",
    )
    store = LedgerStore(ledger, today=_fixed_day)
    store.add("Books", 29.99)

    assert store.save() is True
    assert ledger.read_text(encoding="utf-8").splitlines() == [
        "2 2024-01-02 Lunch|12.0",
        "1 2024-01-01 Coffee|3.5",
        "3 2024-07-14 Books|29.99",
    ]


def test_save_failure_is_logged_not_raised(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    """An unwritable ledger logs a warning instead of crashing."""

    store = LedgerStore(tmp_path / "missing-directory" / "expenses.txt", today=_fixed_day)
    store.add("Coffee", 3.5)

    with caplog.at_level(logging.WARNING):
        assert store.save() is False

    assert "Could not save ledger" in caplog.text


def test_open_ledger_saves_after_block(tmp_path: Path) -> None:
    """Leaving the block normally persists the changes."""

    ledger = tmp_path / "expenses.txt"

    with open_ledger(ledger, today=_fixed_day) as store:
        store.add("Coffee", 3.5)

    assert ledger.read_text(encoding="utf-8") == "1 2024-07-14 Coffee|3.5\n"


def test_open_ledger_saves_when_block_raises(tmp_path: Path) -> None:
    """Changes are saved even when the command body raises."""

    ledger = tmp_path / "expenses.txt"

    with pytest.raises(RuntimeError):
        with open_ledger(ledger, today=_fixed_day) as store:
            store.add("Coffee", 3.5)
            raise RuntimeError("command failed after mutating")

    reloaded = LedgerStore(ledger)
    assert [expense.description for expense in reloaded.list_expenses()] == ["Coffee"]


def test_package_root_exposes_ledger_entry_points() -> None:
    """The top-level package re-exports the store for convenient imports."""

    import expense_ledger

    assert expense_ledger.LedgerStore is LedgerStore
    assert expense_ledger.open_ledger is open_ledger
    assert expense_ledger.Expense is Expense
