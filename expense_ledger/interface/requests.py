"""Mini README: Validated inputs for the mutating and query commands.

Structure:
    * AddExpenseRequest - description and positive amount for ``add``.
    * DeleteExpenseRequest - positive identifier for ``delete``.
    * SummaryRequest - optional month filter for ``summary``.
    * parse_add_request / parse_delete_request / parse_summary_request -
      build the models from raw option strings, raising ``CommandError``.

Validation lives here so the ledger store is only ever called with
well-formed values. Numbers given as text follow the ledger file's rules:
``1.0`` is not an identifier and ``1_000`` is not an amount. The summary
month is forgiving: anything that is not a month number between 1 and 12
simply disables the filter.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from ..ledger import parse_amount, parse_integer
from ..logging_utils import get_logger
from .errors import CommandError, ErrorCode

LOGGER = get_logger(__name__)


class AddExpenseRequest(BaseModel):
    """Arguments accepted by the ``add`` command."""

    model_config = ConfigDict(str_strip_whitespace=True, frozen=True)

    description: str = Field(..., min_length=1)
    amount: float = Field(..., gt=0, allow_inf_nan=False)

    @field_validator("description")
    @classmethod
    def _single_line(cls, value: str) -> str:
        """Line breaks would split the record across ledger lines."""

        if "\n" in value or "\r" in value:
            raise ValueError("Descriptions must fit on a single line.")
        return value

    @field_validator("amount", mode="before")
    @classmethod
    def _parse_amount(cls, value: object) -> object:
        if isinstance(value, str):
            amount = parse_amount(value)
            if amount is None:
                raise ValueError(f"Amount {value!r} is not a number.")
            return amount
        return value


class DeleteExpenseRequest(BaseModel):
    """Arguments accepted by the ``delete`` command."""

    model_config = ConfigDict(frozen=True)

    expense_id: int = Field(..., gt=0)

    @field_validator("expense_id", mode="before")
    @classmethod
    def _parse_id(cls, value: object) -> object:
        if isinstance(value, str):
            expense_id = parse_integer(value)
            if expense_id is None:
                raise ValueError(f"Identifier {value!r} is not an integer.")
            return expense_id
        return value


class SummaryRequest(BaseModel):
    """Arguments accepted by the ``summary`` command."""

    model_config = ConfigDict(frozen=True)

    month: Optional[int] = None

    @field_validator("month", mode="before")
    @classmethod
    def _parse_month(cls, value: object) -> Optional[int]:
        if value is None:
            return None
        month = value if isinstance(value, int) else parse_integer(str(value))
        if month is None:
            LOGGER.info("Ignoring unparseable month %r", value)
            return None
        if not 1 <= month <= 12:
            LOGGER.info("Ignoring out of range month %s", month)
            return None
        return month


def parse_add_request(description: Optional[str], amount: Optional[str]) -> AddExpenseRequest:
    try:
        return AddExpenseRequest(description=description, amount=amount)
    except ValidationError as error:
        LOGGER.debug("Rejected add arguments: %s", error)
        raise CommandError(ErrorCode.INVALID_ADD_ARGUMENTS) from error


def parse_delete_request(expense_id: Optional[str]) -> DeleteExpenseRequest:
    try:
        return DeleteExpenseRequest(expense_id=expense_id)
    except ValidationError as error:
        LOGGER.debug("Rejected delete arguments: %s", error)
        raise CommandError(ErrorCode.INVALID_DELETE_ID) from error


def parse_summary_request(month: Optional[str]) -> SummaryRequest:
    return SummaryRequest(month=month)
