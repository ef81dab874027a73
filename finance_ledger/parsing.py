# finance_ledger/parsing.py
"""
Parsers for the text a user types at the ledger prompts.

Each parser takes one raw line, trims it and either returns the typed value
or raises a ``LedgerInputError`` subclass describing what was wrong.
"""
import re
from datetime import date, datetime

from finance_ledger.core.models import TransactionKind

DATE_FORMAT = "%Y-%m-%d"
CRITERIA = ("date", "category")

_DATE_RX = re.compile(r"^[0-9]{4}-[0-9]{2}-[0-9]{2}$")
_AMOUNT_RX = re.compile(
    r"^[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:e[+-]?[0-9]+)?|inf|infinity|nan)$",
    re.IGNORECASE,
)
_KINDS = {
    "income": TransactionKind.INCOME,
    "expense": TransactionKind.EXPENSE,
}


class LedgerInputError(Exception):
    """Base class for anything the user typed that could not be used."""


class InputClosedError(LedgerInputError, EOFError):
    def __init__(self):
        super().__init__("Failed to read input")


class InvalidDateError(LedgerInputError, ValueError):
    def __init__(self, raw):
        self.raw = raw
        super().__init__(f"Invalid date: {raw!r}")


class InvalidAmountError(LedgerInputError, ValueError):
    def __init__(self, raw):
        self.raw = raw
        super().__init__(f"Invalid amount: {raw!r}")


class InvalidKindError(LedgerInputError, ValueError):
    def __init__(self, raw):
        self.raw = raw
        super().__init__("Invalid transaction type")


class InvalidCriterionError(LedgerInputError, ValueError):
    def __init__(self, raw):
        self.raw = raw
        super().__init__("Invalid filter criteria.")


def parse_date(raw: str) -> date:
    """Parse a strict zero-padded ``YYYY-MM-DD`` calendar date."""
    text = raw.strip()
    if not _DATE_RX.match(text):
        raise InvalidDateError(text)
    try:
        return datetime.strptime(text, DATE_FORMAT).date()
    except ValueError:
        # well-formed but not on the calendar, e.g. 2024-02-30
        raise InvalidDateError(text) from None


def parse_kind(raw: str) -> TransactionKind:
    text = raw.strip()
    try:
        return _KINDS[text.lower()]
    except KeyError:
        raise InvalidKindError(text) from None


def parse_amount(raw: str) -> float:
    """Parse a plain ASCII decimal; digit separators and non-ASCII digits are rejected."""
    text = raw.strip()
    if not _AMOUNT_RX.match(text):
        raise InvalidAmountError(text)
    try:
        return float(text)
    except ValueError:
        raise InvalidAmountError(text) from None


def parse_category(raw: str) -> str:
    return raw.strip()


def parse_criterion(raw: str) -> str:
    text = raw.strip()
    if text not in CRITERIA:
        raise InvalidCriterionError(text)
    return text
