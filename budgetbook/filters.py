"""Criteria for selecting transactions."""

from __future__ import annotations

import datetime as dt
from dataclasses import dataclass

from .transaction import Transaction, TransactionType


def _date_key(value: dt.date | None) -> tuple[int, int]:
    # A missing date sorts before every real date.
    return (0, 0) if value is None else (1, value.toordinal())


@dataclass
class FilterCriteria:
    """A predicate over transactions; each check applies only when enabled.

    Date and amount ranges are inclusive at both ends.
    """

    use_date_range: bool = False
    from_date: dt.date | None = None
    to_date: dt.date | None = None

    use_category: bool = False
    category: str = ""

    use_amount_range: bool = False
    min_amount: float = 0.0
    max_amount: float = 0.0

    use_type: bool = False
    type: TransactionType = TransactionType.EXPENSE

    def __call__(self, transaction: Transaction) -> bool:
        if self.use_date_range:
            when = _date_key(transaction.date)
            if when < _date_key(self.from_date) or when > _date_key(self.to_date):
                return False
        if self.use_category and transaction.category != self.category:
            return False
        if self.use_amount_range and (
            transaction.amount < self.min_amount or transaction.amount > self.max_amount
        ):
            return False
        if self.use_type and transaction.type != self.type:
            return False
        return True