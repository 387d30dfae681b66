# budgetbook

A small home budget tracker. It keeps a list of transactions (income and
expenses). Each one has an identifier, a date, a category, an amount and a
description. The list is saved either as a JSON file or as a CSV file. Every
add, delete and update can be undone and redone.

## Installing

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## The command shell

```
budgetbook [--directory DIR]
```

This starts an interactive shell with the prompt `budget> `. Data is kept in
`transactions.json` (JSON format, the default) or `transactions.csv` (CSV
format) in `DIR`, which is the current directory unless you give another. The
table of transactions is printed at start-up and again after every change,
undo and redo. Each row has a number in the `#` column, and the commands that
take a `ROW` use that number from the table shown last.

| Command | What it does |
|---|---|
| `add ID CATEGORY AMOUNT [DESCRIPTION...] [--date YYYY-MM-DD] [--income]` | Adds a transaction. It needs an ID, a category and an amount above zero. An amount that cannot be read counts as 0 and so is rejected. The date defaults to today. Without `--income` the transaction is an expense. An ID that already exists is not added again. |
| `delete ROW` | Removes the transaction in that row. |
| `update ROW CATEGORY AMOUNT [DESCRIPTION...] [--date YYYY-MM-DD] [--income]` | Replaces the transaction in that row and keeps its ID. The other fields come from the command line, so the date defaults to today and the type becomes an expense unless `--income` is given. |
| `undo` / `redo` | Reverts or reapplies the last change. A new change throws away anything that could still be redone. |
| `filter [--from D] [--to D] [--category C] [--min X] [--max X] [--type All\|Income\|Expense]` | Shows only the matching transactions. Date and amount ranges include both ends. If you give only one end of the date range, `--from` defaults to one month ago and `--to` to today. If you give only one end of the amount range, the other end is 0. |
| `reset` / `show` | Shows every transaction again. |
| `format JSON\|CSV` | Switches to the other storage file and loads it. The undo history starts afresh. |
| `quit` (or end of input) | Leaves the shell. |

Arguments are split shell-style, so quote a category or a description that
contains spaces.

About `--type`: the choice list is All, Income, Expense, and the position of
the choice in that list is used as the type code. This means `Income` selects
incomes, `All` selects expenses (code 0), and `Expense` selects nothing.

## File formats

- **JSON**: an indented array of objects with the keys `amount`, `category`,
  `date`, `description`, `id` and `type`. The keys are sorted. A file that
  cannot be read, or that is not an array, loads as an empty list.
- **CSV**: one line per transaction, `id,date,category,amount,description,type`,
  with no quoting. Amounts are written with at most six significant digits.
  Lines that do not split into exactly six fields are skipped on load, so
  commas inside a field lose the transaction.

In both formats the date is `YYYY-MM-DD` and the type is `0` for an expense
and `1` for an income. A date that cannot be read loads as `None`. Both
repositories load their file when they are created and write it after every
change.

## Using it from Python

```python
from datetime import date

from budgetbook.controller import TransactionController
from budgetbook.json_repository import JsonTransactionRepository
from budgetbook.transaction import Transaction, TransactionType

repo = JsonTransactionRepository("transactions.json")
controller = TransactionController(repo)

controller.add_transaction(
    Transaction("t1", date.today(), "Groceries", 50.0, "Supermarket", TransactionType.EXPENSE)
)
controller.add_transaction(
    Transaction("t2", date.today(), "Salary", 2000.0, "Monthly salary", TransactionType.INCOME)
)

groceries = controller.filter_transactions(lambda t: t.category == "Groceries")

controller.undo()        # takes "t2" back out
controller.redo()        # and puts it back
print(controller.can_undo(), controller.can_redo())
```

- `budgetbook.csv_repository.CsvTransactionRepository` takes the same path
  argument. Both repositories derive from
  `budgetbook.repository.TransactionRepository`, which provides `get_all`,
  `add`, `remove`, `update` and `exists`.
- `budgetbook.filters.FilterCriteria` is a ready-made predicate for
  `filter_transactions`. It covers date, category, amount and type checks,
  and each check is switched on by its own `use_...` field.
- `budgetbook.commands` holds `CommandManager` and the add, remove and update
  commands that the controller runs.
- `controller.connect(callback)` registers a callback. It is called with no
  arguments after every add, remove, update, undo and redo.
- `budgetbook.app` has helpers that build transactions and filter criteria
  from raw text: `build_transaction`, `build_criteria`, `parse_number` and
  `parse_date`. It also has `repository_for_format`, which opens the JSON or
  CSV file in a directory.

## What it does not do

There is no graphical window. The tracker is run through the text shell
described above.