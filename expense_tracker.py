"""Mini README: Entry point script for the expense tracker CLI.

Run ``python expense_tracker.py add --description Coffee --amount 3.50`` or
any other command exposed by ``expense_ledger.interface.cli``. The installed
``expense-tracker`` console script behaves identically.
"""

from __future__ import annotations

from expense_ledger.interface import main

if __name__ == "__main__":
    main()
