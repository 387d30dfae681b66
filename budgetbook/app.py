"""Interactive terminal front end for the budget book."""

from __future__ import annotations

import argparse
import calendar
import cmd
import datetime as dt
import shlex
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from os import PathLike
from pathlib import Path
from typing import IO

from .controller import TransactionController
from .csv_repository import CsvTransactionRepository
from .filters import FilterCriteria
from .json_repository import JsonTransactionRepository
from .repository import TransactionRepository, _format_date, _parse_date
from .transaction import Transaction, TransactionType

_HEADERS = ("ID", "Date", "Category", "Amount", "Description", "Type")
_FORMATS = ("JSON", "CSV")
_TYPE_CHOICES = ("All", "Income", "Expense")
_INVALID_DATA = "Invalid Data: Please fill all required fields with valid data"
_FAREWELL = "Goodbye."


def parse_number(text: str) -> float:
    """Read a decimal number the lenient way: anything unreadable is 0.0."""
    stripped = text.strip()
    if not stripped or "_" in stripped:
        return 0.0
    try:
        return float(stripped)
    except ValueError:
        return 0.0


def parse_date(text: str) -> dt.date:
    """Read a ``YYYY-MM-DD`` date; raise ValueError if it is not one."""
    value = _parse_date(text.strip())
    if value is None:
        raise ValueError(f"invalid date {text!r}, expected YYYY-MM-DD")
    return value


def build_transaction(
    transaction_id: str,
    date_text: str,
    category: str,
    amount_text: str,
    description: str,
    income: bool,
) -> Transaction:
    """Build a transaction from the raw text of the entry form."""
    return Transaction(
        id=transaction_id,
        date=parse_date(date_text),
        category=category,
        amount=parse_number(amount_text),
        description=description,
        type=TransactionType.INCOME if income else TransactionType.EXPENSE,
    )


def is_valid_for_add(transaction: Transaction) -> bool:
    """A new transaction needs an id, a category and a positive amount."""
    return bool(transaction.id) and bool(transaction.category) and transaction.amount > 0


def transaction_row(transaction: Transaction) -> tuple[str, str, str, str, str, str]:
    """Return the table cells shown for a transaction."""
    return (
        transaction.id,
        _format_date(transaction.date),
        transaction.category,
        f"{transaction.amount:g}",
        transaction.description,
        transaction.type_string(),
    )


def build_criteria(
    use_date: bool,
    from_text: str,
    to_text: str,
    use_category: bool,
    category: str,
    use_amount: bool,
    min_text: str,
    max_text: str,
    use_type: bool,
    type_index: int,
) -> FilterCriteria:
    """Build filter criteria from the raw values of the filter form.

    Only enabled sections are read. ``type_index`` is the position in the
    choice list All, Income, Expense and is used directly as the type code,
    so index 2 selects a code no transaction carries.
    """
    criteria = FilterCriteria()
    criteria.use_date_range = use_date
    if use_date:
        criteria.from_date = parse_date(from_text)
        criteria.to_date = parse_date(to_text)
    criteria.use_category = use_category
    if use_category:
        criteria.category = category
    criteria.use_amount_range = use_amount
    if use_amount:
        criteria.min_amount = parse_number(min_text)
        criteria.max_amount = parse_number(max_text)
    criteria.use_type = use_type
    if use_type:
        if not 0 <= type_index < len(_TYPE_CHOICES):
            raise ValueError(f"type index out of range: {type_index}")
        try:
            criteria.type = TransactionType(type_index)
        except ValueError:
            criteria.type = type_index  # type: ignore[assignment]
    return criteria


def repository_for_format(
    format_name: str, directory: str | PathLike[str] = "."
) -> TransactionRepository:
    """Open ``transactions.json`` for JSON, otherwise ``transactions.csv``."""
    base = Path(directory)
    if format_name == "JSON":
        return JsonTransactionRepository(base / "transactions.json")
    return CsvTransactionRepository(base / "transactions.csv")


def _add_months(day: dt.date, months: int) -> dt.date:
    total = day.year * 12 + (day.month - 1) + months
    year, month = divmod(total, 12)
    month += 1
    last = calendar.monthrange(year, month)[1]
    return dt.date(year, month, min(day.day, last))


def _month_ago() -> str:
    return _add_months(dt.date.today(), -1).isoformat()


def _today() -> str:
    return dt.date.today().isoformat()


@dataclass
class FilterDialog:
    """The values of the filter form; dates default to the last month."""

    use_date_range: bool = False
    from_text: str = field(default_factory=_month_ago)
    to_text: str = field(default_factory=_today)
    use_category: bool = False
    category: str = ""
    use_amount_range: bool = False
    min_text: str = ""
    max_text: str = ""
    use_type: bool = False
    type_index: int = 0

    def criteria(self) -> FilterCriteria:
        return build_criteria(
            self.use_date_range,
            self.from_text,
            self.to_text,
            self.use_category,
            self.category,
            self.use_amount_range,
            self.min_text,
            self.max_text,
            self.use_type,
            self.type_index,
        )


def _split_options(
    arg: str, value_options: Iterable[str], flag_options: Iterable[str] = ()
) -> tuple[list[str], dict[str, str | bool]]:
    values = set(value_options)
    flags = set(flag_options)
    positional: list[str] = []
    options: dict[str, str | bool] = {}
    tokens = iter(shlex.split(arg))
    for token in tokens:
        if token in flags:
            options[token] = True
        elif token in values:
            try:
                options[token] = next(tokens)
            except StopIteration:
                raise ValueError(f"option {token} needs a value") from None
        elif token.startswith("--"):
            raise ValueError(f"unknown option {token}")
        else:
            positional.append(token)
    return positional, options


class MainWindow(cmd.Cmd):
    """Command shell over a budget book; the shown table lives in :attr:`rows`."""

    intro = "Home Budget Tracker. Type help or ? to list commands."
    prompt = "budget> "

    def __init__(
        self,
        directory: str | PathLike[str] = ".",
        stdin: IO[str] | None = None,
        stdout: IO[str] | None = None,
    ) -> None:
        super().__init__(stdin=stdin, stdout=stdout)
        if stdin is not None:
            self.use_rawinput = False
        self.directory = Path(directory)
        self.format_name = "JSON"
        self.rows: list[tuple[str, str, str, str, str, str]] = []
        self._attach(repository_for_format(self.format_name, self.directory))
        self.refresh_table()

    def _attach(self, repository: TransactionRepository) -> None:
        self.repository = repository
        self.controller = TransactionController(repository)
        self.controller.connect(self.refresh_table)

    def _say(self, text: str) -> None:
        self.stdout.write(text + "\n")

    def refresh_table(self) -> None:
        self.display_transactions(self.controller.get_all_transactions())

    def display_transactions(self, transactions: Sequence[Transaction]) -> None:
        self.rows = [transaction_row(t) for t in transactions]
        if not self.rows:
            self._say("(no transactions)")
            return
        header = ("#",) + _HEADERS
        lines = [header] + [(str(n),) + row for n, row in enumerate(self.rows, 1)]
        widths = [max(len(line[col]) for line in lines) for col in range(len(header))]
        for line in lines:
            self._say("  ".join(cell.ljust(w) for cell, w in zip(line, widths)).rstrip())

    def _row_id(self, text: str) -> str:
        try:
            number = int(text)
        except ValueError:
            raise ValueError(f"invalid row number {text!r}") from None
        if not 1 <= number <= len(self.rows):
            raise ValueError(f"no row {number}")
        return self.rows[number - 1][0]

    def emptyline(self) -> bool:
        return False

    def default(self, line: str) -> None:
        self._say(f"Unknown command: {line}")

    def do_add(self, arg: str) -> None:
        """add ID CATEGORY AMOUNT [DESCRIPTION...] [--date YYYY-MM-DD] [--income]"""
        try:
            positional, options = _split_options(arg, ("--date",), ("--income",))
            fields = positional[:3] + [""] * (3 - len(positional[:3]))
            transaction = build_transaction(
                fields[0],
                str(options.get("--date", _today())),
                fields[1],
                fields[2],
                " ".join(positional[3:]),
                bool(options.get("--income", False)),
            )
        except ValueError as error:
            self._say(f"Error: {error}")
            return
        if is_valid_for_add(transaction):
            self.controller.add_transaction(transaction)
        else:
            self._say(_INVALID_DATA)

    def do_delete(self, arg: str) -> None:
        """delete ROW: remove the transaction shown in that table row"""
        try:
            transaction_id = self._row_id(arg.strip())
        except ValueError as error:
            self._say(f"Error: {error}")
            return
        self.controller.remove_transaction(transaction_id)

    def do_update(self, arg: str) -> None:
        """update ROW CATEGORY AMOUNT [DESCRIPTION...] [--date YYYY-MM-DD] [--income]"""
        try:
            positional, options = _split_options(arg, ("--date",), ("--income",))
            if not positional:
                raise ValueError("a row number is required")
            transaction_id = self._row_id(positional[0])
            fields = positional[1:3] + [""] * (2 - len(positional[1:3]))
            transaction = build_transaction(
                transaction_id,
                str(options.get("--date", _today())),
                fields[0],
                fields[1],
                " ".join(positional[3:]),
                bool(options.get("--income", False)),
            )
        except ValueError as error:
            self._say(f"Error: {error}")
            return
        self.controller.update_transaction(transaction)

    def do_undo(self, arg: str) -> None:
        """undo: revert the last change"""
        self.controller.undo()

    def do_redo(self, arg: str) -> None:
        """redo: reapply the last undone change"""
        self.controller.redo()

    def do_filter(self, arg: str) -> None:
        """filter [--from D] [--to D] [--category C] [--min X] [--max X] [--type All|Income|Expense]"""
        try:
            positional, options = _split_options(
                arg, ("--from", "--to", "--category", "--min", "--max", "--type")
            )
            if positional:
                raise ValueError(f"unexpected argument {positional[0]!r}")
            dialog = FilterDialog()
            if "--from" in options or "--to" in options:
                dialog.use_date_range = True
                dialog.from_text = str(options.get("--from", dialog.from_text))
                dialog.to_text = str(options.get("--to", dialog.to_text))
            if "--category" in options:
                dialog.use_category = True
                dialog.category = str(options["--category"])
            if "--min" in options or "--max" in options:
                dialog.use_amount_range = True
                dialog.min_text = str(options.get("--min", ""))
                dialog.max_text = str(options.get("--max", ""))
            if "--type" in options:
                choice = str(options["--type"])
                if choice not in _TYPE_CHOICES:
                    raise ValueError(f"type must be one of {', '.join(_TYPE_CHOICES)}")
                dialog.use_type = True
                dialog.type_index = _TYPE_CHOICES.index(choice)
            criteria = dialog.criteria()
        except ValueError as error:
            self._say(f"Error: {error}")
            return
        self.display_transactions(self.controller.filter_transactions(criteria))

    def do_reset(self, arg: str) -> None:
        """reset: show all transactions again"""
        self.refresh_table()

    def do_show(self, arg: str) -> None:
        """show: show all transactions"""
        self.refresh_table()

    def do_format(self, arg: str) -> None:
        """format JSON|CSV: switch the storage file"""
        name = arg.strip()
        if name not in _FORMATS:
            self._say(f"Error: format must be one of {', '.join(_FORMATS)}")
            return
        self.format_name = name
        self._attach(repository_for_format(name, self.directory))
        self.refresh_table()

    def do_quit(self, arg: str) -> bool:
        """quit: leave the program"""
        self._say(_FAREWELL)
        return True

    def do_EOF(self, arg: str) -> bool:
        self._say("")
        return True


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="budgetbook", description="Home budget tracker.")
    parser.add_argument(
        "--directory", default=".", help="directory holding the transaction files"
    )
    args = parser.parse_args(argv)
    MainWindow(args.directory).cmdloop()
    return 0