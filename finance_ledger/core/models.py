# finance_ledger/core/models.py
from dataclasses import dataclass
from datetime import date
from enum import Enum


class TransactionKind(Enum):
    INCOME = "Income"
    EXPENSE = "Expense"


@dataclass(frozen=True)
class Transaction:
    date: date
    kind: TransactionKind
    amount: float
    category: str
