# finance_ledger/core/ledger.py
from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from datetime import date
from typing import Iterator, List, Union

from finance_ledger.core.models import Transaction, TransactionKind
from finance_ledger.parsing import InvalidCriterionError
from finance_ledger.utils import (
    filter_transactions_by_category,
    filter_transactions_by_date,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Summary:
    total_income: float
    total_expense: float
    balance: float


class Ledger:
    """
    Ordered, append-only collection of transactions for the current run.

    Duplicates are allowed and insertion order is preserved for listing and
    filtering. Nothing here is persisted.
    """

    def __init__(self):
        self._transactions: List[Transaction] = []

    def __iter__(self) -> Iterator[Transaction]:
        return iter(list(self._transactions))

    def __len__(self) -> int:
        return len(self._transactions)

    @property
    def transactions(self) -> tuple:
        return tuple(self._transactions)

    def add(
        self,
        date: date,
        kind: TransactionKind,
        amount: float,
        category: str,
    ) -> None:
        tx = Transaction(date=date, kind=kind, amount=amount, category=category.strip())
        self.append(tx)

    def append(self, tx: Transaction) -> None:
        self._transactions.append(tx)
        logger.debug("Appended %s (%d in ledger)", tx, len(self._transactions))

    def _total(self, kind: TransactionKind) -> float:
        amounts = [tx.amount for tx in self._transactions if tx.kind is kind]
        try:
            return math.fsum(amounts)
        except (OverflowError, ValueError):
            # fsum refuses to overflow or to mix inf and -inf; plain sum yields inf or nan
            return sum(amounts)

    def summarize(self) -> Summary:
        total_income = self._total(TransactionKind.INCOME)
        total_expense = self._total(TransactionKind.EXPENSE)
        return Summary(
            total_income=total_income,
            total_expense=total_expense,
            balance=total_income - total_expense,
        )

    def filter(self, criterion: str, value: Union[date, str]) -> List[Transaction]:
        """Return matching transactions in insertion order.

        ``criterion`` is ``"date"`` (``value`` is a :class:`datetime.date`) or
        ``"category"`` (``value`` is compared after trimming). Any other
        criterion raises :class:`InvalidCriterionError`.
        """
        if criterion == "date":
            matches = filter_transactions_by_date(self._transactions, value)
        elif criterion == "category":
            matches = filter_transactions_by_category(self._transactions, value)
        else:
            raise InvalidCriterionError(criterion)
        logger.debug("Filter %s=%r matched %d transaction(s)", criterion, value, len(matches))
        return matches
