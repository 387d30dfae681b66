"""Storage-independent transaction repository."""

from __future__ import annotations

import datetime as dt
import re
from abc import ABC, abstractmethod
from dataclasses import replace
from os import PathLike
from pathlib import Path

from .transaction import Transaction, TransactionType

_ISO_DATE = re.compile(r"(\d{4})-(\d{2})-(\d{2})")


def _parse_date(text: str) -> dt.date | None:
    """Parse a ``YYYY-MM-DD`` date; return ``None`` if it is not one."""
    match = _ISO_DATE.fullmatch(text)
    if match is None:
        return None
    try:
        return dt.date(*(int(part) for part in match.groups()))
    except ValueError:
        return None


def _format_date(value: dt.date | None) -> str:
    return "" if value is None else value.isoformat()


def _type_from_code(code: int) -> TransactionType:
    try:
        return TransactionType(code)
    except ValueError:
        return TransactionType.EXPENSE


class TransactionRepository(ABC):
    """Keeps transactions in memory and persists them after every change.

    Subclasses decide the file format by implementing :meth:`save` and
    :meth:`load`. Transactions are stored and returned as copies.
    """

    def __init__(self, path: str | PathLike[str]) -> None:
        self.path = Path(path)
        self._transactions: list[Transaction] = []
        self.load()

    def get_all(self) -> list[Transaction]:
        """Return copies of all transactions in insertion order."""
        return [replace(transaction) for transaction in self._transactions]

    def add(self, transaction: Transaction) -> None:
        """Add a transaction unless one with the same id already exists."""
        if not self.exists(transaction.id):
            self._transactions.append(replace(transaction))
            self.save()

    def remove(self, transaction_id: str) -> None:
        """Remove every transaction with the given id."""
        self._transactions = [t for t in self._transactions if t.id != transaction_id]
        self.save()

    def update(self, transaction: Transaction) -> None:
        """Replace the stored transaction that has the same id, if any."""
        for index, current in enumerate(self._transactions):
            if current.id == transaction.id:
                self._transactions[index] = replace(transaction)
                self.save()
                return

    def exists(self, transaction_id: str) -> bool:
        return any(t.id == transaction_id for t in self._transactions)

    @abstractmethod
    def save(self) -> None:
        """Write all transactions to :attr:`path`."""

    @abstractmethod
    def load(self) -> None:
        """Replace the in-memory transactions with those stored at :attr:`path`."""