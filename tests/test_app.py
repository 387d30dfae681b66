import datetime as dt
import io
import sys

import pytest

from budgetbook.app import (
    FilterDialog,
    MainWindow,
    build_criteria,
    build_transaction,
    is_valid_for_add,
    main,
    parse_date,
    parse_number,
    repository_for_format,
    transaction_row,
)
from budgetbook.csv_repository import CsvTransactionRepository
from budgetbook.json_repository import JsonTransactionRepository
from budgetbook.transaction import Transaction, TransactionType


def make_window(tmp_path):
    return MainWindow(tmp_path, stdin=io.StringIO(), stdout=io.StringIO())


def test_parse_number_reads_decimals():
    assert parse_number("20.5") == 20.5
    assert parse_number(" 3000 ") == 3000.0


@pytest.mark.parametrize("text", ["", "abc", "1_000", "12x"])
def test_parse_number_unreadable_is_zero(text):
    assert parse_number(text) == 0.0


def test_parse_date_valid():
    assert parse_date("2024-01-02") == dt.date(2024, 1, 2)


@pytest.mark.parametrize("text", ["", "2024-13-01", "02.01.2024", "2024-1-2"])
def test_parse_date_invalid_raises(text):
    with pytest.raises(ValueError):
        parse_date(text)


def test_build_transaction_fields():
    t = build_transaction("t1", "2024-01-02", "Food", "20.5", "Lunch", False)
    assert t == Transaction("t1", dt.date(2024, 1, 2), "Food", 20.5, "Lunch", TransactionType.EXPENSE)
    income = build_transaction("t2", "2024-01-02", "Salary", "3000", "Monthly pay", True)
    assert income.type == TransactionType.INCOME


def test_is_valid_for_add():
    good = Transaction("t1", dt.date(2024, 1, 2), "Food", 20.5)
    assert is_valid_for_add(good)
    assert not is_valid_for_add(Transaction("", dt.date(2024, 1, 2), "Food", 20.5))
    assert not is_valid_for_add(Transaction("t1", dt.date(2024, 1, 2), "", 20.5))
    assert not is_valid_for_add(Transaction("t1", dt.date(2024, 1, 2), "Food", 0.0))


def test_transaction_row():
    t = Transaction("t1", dt.date(2024, 1, 2), "Food", 20.5, "Lunch", TransactionType.EXPENSE)
    assert transaction_row(t) == ("t1", "2024-01-02", "Food", "20.5", "Lunch", "Expense")
    missing = Transaction("t2", None, "Salary", 3000.0, "", TransactionType.INCOME)
    assert transaction_row(missing)[1] == ""
    assert transaction_row(missing)[5] == "Income"


def test_build_criteria_disabled_matches_all():
    criteria = build_criteria(False, "bad", "bad", False, "", False, "", "", False, 0)
    assert criteria(Transaction("t1", dt.date(2024, 1, 2), "Food", 20.5))


def test_build_criteria_category_and_amount():
    criteria = build_criteria(False, "", "", True, "Food", True, "10", "30", False, 0)
    assert criteria(Transaction("t1", dt.date(2024, 1, 2), "Food", 20.5))
    assert not criteria(Transaction("t2", dt.date(2024, 1, 2), "Food", 50.0))
    assert not criteria(Transaction("t3", dt.date(2024, 1, 2), "Rent", 20.5))


def test_build_criteria_date_range():
    criteria = build_criteria(True, "2024-01-01", "2024-01-31", False, "", False, "", "", False, 0)
    assert criteria(Transaction("t1", dt.date(2024, 1, 31), "Food", 1.0))
    assert not criteria(Transaction("t2", dt.date(2024, 2, 1), "Food", 1.0))


def test_build_criteria_type_index_is_type_code():
    income = build_criteria(False, "", "", False, "", False, "", "", True, 1)
    assert income(Transaction("t1", dt.date(2024, 1, 2), "Salary", 1.0, "", TransactionType.INCOME))
    assert not income(Transaction("t2", dt.date(2024, 1, 2), "Food", 1.0))
    third = build_criteria(False, "", "", False, "", False, "", "", True, 2)
    assert not third(Transaction("t1", dt.date(2024, 1, 2), "Food", 1.0))
    assert not third(Transaction("t2", dt.date(2024, 1, 2), "Salary", 1.0, "", TransactionType.INCOME))


def test_build_criteria_rejects_bad_date_and_index():
    with pytest.raises(ValueError):
        build_criteria(True, "nope", "2024-01-01", False, "", False, "", "", False, 0)
    with pytest.raises(ValueError):
        build_criteria(False, "", "", False, "", False, "", "", True, 3)


def test_repository_for_format(tmp_path):
    json_repo = repository_for_format("JSON", tmp_path)
    csv_repo = repository_for_format("CSV", tmp_path)
    assert isinstance(json_repo, JsonTransactionRepository)
    assert json_repo.path == tmp_path / "transactions.json"
    assert isinstance(csv_repo, CsvTransactionRepository)
    assert csv_repo.path == tmp_path / "transactions.csv"


def test_filter_dialog_defaults_cover_last_month():
    dialog = FilterDialog(use_date_range=True)
    criteria = dialog.criteria()
    assert criteria.to_date == dt.date.today()
    assert criteria.from_date < criteria.to_date
    assert criteria(Transaction("t1", dt.date.today(), "Food", 1.0))


def test_window_add_and_rows(tmp_path):
    window = make_window(tmp_path)
    window.onecmd("add t1 Food 20.5 Lunch --date 2024-01-02")
    assert window.rows == [("t1", "2024-01-02", "Food", "20.5", "Lunch", "Expense")]
    assert (tmp_path / "transactions.json").exists()


def test_window_rejects_invalid_add(tmp_path):
    window = make_window(tmp_path)
    window.onecmd("add t1 Food 0")
    assert window.rows == []
    assert "Please fill all required fields with valid data" in window.stdout.getvalue()


def test_window_delete_undo_redo(tmp_path):
    window = make_window(tmp_path)
    window.onecmd("add t1 Food 20.5 --date 2024-01-02")
    window.onecmd("add t2 Salary 3000 --income --date 2024-01-03")
    window.onecmd("delete 1")
    assert [row[0] for row in window.rows] == ["t2"]
    window.onecmd("undo")
    assert sorted(row[0] for row in window.rows) == ["t1", "t2"]
    window.onecmd("redo")
    assert [row[0] for row in window.rows] == ["t2"]


def test_window_update_keeps_id(tmp_path):
    window = make_window(tmp_path)
    window.onecmd("add t1 Food 20.5 Lunch --date 2024-01-02")
    window.onecmd("update 1 Dining 35 Dinner --date 2024-01-05")
    assert window.rows == [("t1", "2024-01-05", "Dining", "35", "Dinner", "Expense")]


def test_window_filter_and_reset(tmp_path):
    window = make_window(tmp_path)
    window.onecmd("add f1 Groceries 50 Supermarket --date 2024-01-02")
    window.onecmd("add f2 Salary 2000 --income --date 2024-01-02")
    window.onecmd("filter --category Groceries")
    assert [row[0] for row in window.rows] == ["f1"]
    window.onecmd("reset")
    assert len(window.rows) == 2


def test_window_format_switch(tmp_path):
    window = make_window(tmp_path)
    window.onecmd("add t1 Food 20.5 --date 2024-01-02")
    window.onecmd("format CSV")
    assert window.rows == []
    assert not window.controller.can_undo()
    window.onecmd("add t2 Rent 500 --date 2024-01-02")
    assert (tmp_path / "transactions.csv").exists()
    window.onecmd("format JSON")
    assert [row[0] for row in window.rows] == ["t1"]


def test_window_bad_row_reports_error(tmp_path):
    window = make_window(tmp_path)
    window.onecmd("delete 5")
    assert "Error" in window.stdout.getvalue()
    assert window.rows == []


def test_main_runs_commands(tmp_path, monkeypatch):
    monkeypatch.setattr(sys, "stdin", io.StringIO("add t1 Food 20.5 --date 2024-01-02\nquit\n"))
    monkeypatch.setattr(sys, "stdout", io.StringIO())
    assert main(["--directory", str(tmp_path)]) == 0
    stored = JsonTransactionRepository(tmp_path / "transactions.json").get_all()
    assert [t.id for t in stored] == ["t1"]