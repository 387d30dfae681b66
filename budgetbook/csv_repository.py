"""Repository stored as comma separated lines."""

from __future__ import annotations

from .repository import TransactionRepository, _format_date, _parse_date, _type_from_code
from .transaction import Transaction

_FIELD_COUNT = 6


def _to_float(text: str) -> float:
    if "_" in text:
        return 0.0
    try:
        return float(text)
    except ValueError:
        return 0.0


def _to_int(text: str) -> int:
    if "_" in text:
        return 0
    try:
        return int(text, 10)
    except ValueError:
        return 0


class CsvTransactionRepository(TransactionRepository):
    """Stores one transaction per line: id,date,category,amount,description,type.

    Fields are not quoted; lines that do not split into exactly six fields
    are skipped on load.
    """

    def save(self) -> None:
        with self.path.open("w", encoding="utf-8") as handle:
            for t in self._transactions:
                fields = (
                    t.id,
                    _format_date(t.date),
                    t.category,
                    f"{t.amount:g}",
                    t.description,
                    str(int(t.type)),
                )
                handle.write(",".join(fields) + "\n")

    def load(self) -> None:
        self._transactions = []
        try:
            with self.path.open("r", encoding="utf-8") as handle:
                lines = [line.rstrip("\n") for line in handle]
        except OSError:
            return
        for line in lines:
            parts = line.split(",")
            if len(parts) != _FIELD_COUNT:
                continue
            transaction_id, date_text, category, amount, description, type_code = parts
            self._transactions.append(
                Transaction(
                    id=transaction_id,
                    date=_parse_date(date_text),
                    category=category,
                    amount=_to_float(amount),
                    description=description,
                    type=_type_from_code(_to_int(type_code)),
                )
            )