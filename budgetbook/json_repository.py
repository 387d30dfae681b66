"""Repository stored as a JSON array of objects."""

from __future__ import annotations

import json
from typing import Any

from .repository import TransactionRepository, _format_date, _parse_date, _type_from_code
from .transaction import Transaction

_MAX_EXACT_INTEGER = 2**53


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _json_number(value: float) -> int | float:
    if value.is_integer() and abs(value) < _MAX_EXACT_INTEGER:
        return int(value)
    return value


def _as_str(value: Any) -> str:
    return value if isinstance(value, str) else ""


def _as_float(value: Any) -> float:
    return float(value) if _is_number(value) else 0.0


def _as_int(value: Any) -> int:
    if _is_number(value) and float(value).is_integer():
        return int(value)
    return 0


class JsonTransactionRepository(TransactionRepository):
    """Stores transactions as an indented JSON array with sorted keys.

    An unreadable or non-array document loads as an empty repository.
    """

    def save(self) -> None:
        records = [
            {
                "id": t.id,
                "date": _format_date(t.date),
                "category": t.category,
                "amount": _json_number(t.amount),
                "description": t.description,
                "type": int(t.type),
            }
            for t in self._transactions
        ]
        text = json.dumps(records, indent=4, sort_keys=True, ensure_ascii=False)
        self.path.write_text(text + "\n", encoding="utf-8")

    def load(self) -> None:
        self._transactions = []
        try:
            data = self.path.read_bytes()
        except OSError:
            return
        try:
            document = json.loads(data)
        except ValueError:
            return
        if not isinstance(document, list):
            return
        for entry in document:
            record = entry if isinstance(entry, dict) else {}
            self._transactions.append(
                Transaction(
                    id=_as_str(record.get("id")),
                    date=_parse_date(_as_str(record.get("date"))),
                    category=_as_str(record.get("category")),
                    amount=_as_float(record.get("amount")),
                    description=_as_str(record.get("description")),
                    type=_type_from_code(_as_int(record.get("type"))),
                )
            )