"""The transaction record kept in a budget book."""

from __future__ import annotations

import datetime as dt
from dataclasses import dataclass, field
from enum import IntEnum


class TransactionType(IntEnum):
    """Direction of money flow; the integer value is the stored code."""

    EXPENSE = 0
    INCOME = 1


@dataclass
class Transaction:
    """A single income or expense entry.

    ``date`` is ``None`` when a stored date could not be read.
    """

    id: str = ""
    date: dt.date | None = field(default_factory=dt.date.today)
    category: str = ""
    amount: float = 0.0
    description: str = ""
    type: TransactionType = TransactionType.EXPENSE

    def type_string(self) -> str:
        """Return ``"Income"`` or ``"Expense"``."""
        return "Income" if self.type == TransactionType.INCOME else "Expense"