import io
from datetime import date

import pytest

from finance_ledger.core.ledger import Ledger
from finance_ledger.core.models import TransactionKind
from finance_ledger.parsing import InputClosedError, InvalidAmountError, InvalidDateError
from finance_ledger.session import (
    Console,
    add_transaction,
    filter_transactions,
    run_session,
    show_summary,
    view_transactions,
)


def console_for(*lines, retry=False):
    text = "".join(f"{line}\n" for line in lines)
    return Console(io.StringIO(text), retry_invalid_input=retry)


def test_add_transaction_appends_parsed_record(capsys):
    ledger = Ledger()
    add_transaction(ledger, console_for("2024-01-15", "Income", "1000.00", "  Salary  "))

    assert len(ledger) == 1
    tx = ledger.transactions[0]
    assert tx.date == date(2024, 1, 15)
    assert tx.kind is TransactionKind.INCOME
    assert tx.amount == 1000.0
    assert tx.category == "Salary"

    out = capsys.readouterr().out
    assert out.splitlines() == [
        "Enter date (YYYY-MM-DD):",
        "Enter transaction type (income/expense):",
        "Enter amount:",
        "Enter category:",
    ]


def test_add_transaction_abandons_unknown_kind(capsys):
    ledger = Ledger()
    console = console_for("2024-01-15", "bogus", "menu-line")
    add_transaction(ledger, console)

    assert len(ledger) == 0
    out = capsys.readouterr().out
    assert "Invalid transaction type" in out
    assert "Enter amount:" not in out
    # the amount prompt was never shown, so the next line is still unread
    assert console.read_line() == "menu-line"


def test_add_transaction_bad_date_is_fatal_by_default():
    ledger = Ledger()
    with pytest.raises(InvalidDateError):
        add_transaction(ledger, console_for("2024-13-40", "income", "1", "x"))
    assert len(ledger) == 0


def test_add_transaction_bad_amount_is_fatal_by_default():
    ledger = Ledger()
    with pytest.raises(InvalidAmountError):
        add_transaction(ledger, console_for("2024-01-01", "expense", "ten", "x"))
    assert len(ledger) == 0


def test_retry_mode_reprompts_for_date_and_amount(capsys):
    ledger = Ledger()
    console = console_for(
        "01/02/2024", "2024-02-01", "expense", "abc", "12.5", "Books",
        retry=True,
    )
    add_transaction(ledger, console)

    assert ledger.transactions[0].date == date(2024, 2, 1)
    assert ledger.transactions[0].amount == 12.5
    out = capsys.readouterr().out
    assert "Invalid date: '01/02/2024'. Please try again." in out
    assert "Invalid amount: 'abc'. Please try again." in out
    assert out.count("Enter date (YYYY-MM-DD):") == 2


def test_view_and_summary_rendering(capsys):
    ledger = Ledger()
    ledger.add(date(2024, 1, 15), TransactionKind.INCOME, 1000, "Salary")
    ledger.add(date(2024, 1, 20), TransactionKind.EXPENSE, 250.5, "Groceries")
    console = console_for()

    view_transactions(ledger, console)
    show_summary(ledger, console)

    assert capsys.readouterr().out == (
        "Date: 2024-01-15\n"
        "Type: Income\n"
        "Amount: 1000.00\n"
        "Category: Salary\n"
        "\n"
        "Date: 2024-01-20\n"
        "Type: Expense\n"
        "Amount: 250.50\n"
        "Category: Groceries\n"
        "\n"
        "Total Income: 1000.00\n"
        "Total Expense: 250.50\n"
        "Balance: 749.50\n"
    )


def test_view_empty_ledger_prints_nothing(capsys):
    view_transactions(Ledger(), console_for())
    assert capsys.readouterr().out == ""


def test_filter_by_category(capsys):
    ledger = Ledger()
    ledger.add(date(2024, 1, 15), TransactionKind.INCOME, 1000, "Salary")
    ledger.add(date(2024, 1, 20), TransactionKind.EXPENSE, 250.5, "Groceries")

    filter_transactions(ledger, console_for("category", " Groceries "))

    out = capsys.readouterr().out
    assert "Category: Groceries" in out
    assert "Salary" not in out


def test_filter_by_date(capsys):
    ledger = Ledger()
    ledger.add(date(2024, 1, 15), TransactionKind.INCOME, 1000, "Salary")
    ledger.add(date(2024, 1, 20), TransactionKind.EXPENSE, 250.5, "Groceries")

    filter_transactions(ledger, console_for("date", "2024-01-15"))

    out = capsys.readouterr().out
    assert "Date: 2024-01-15" in out
    assert "2024-01-20" not in out


def test_filter_with_unknown_criterion_reports_and_returns(capsys):
    ledger = Ledger()
    ledger.add(date(2024, 1, 15), TransactionKind.INCOME, 1000, "Salary")
    console = console_for("amount", "next")

    filter_transactions(ledger, console)

    out = capsys.readouterr().out
    assert "Invalid filter criteria." in out
    assert "Date:" not in out
    assert len(ledger) == 1
    assert console.read_line() == "next"


def test_filter_bad_date_is_fatal():
    with pytest.raises(InvalidDateError):
        filter_transactions(Ledger(), console_for("date", "tomorrow"))


def test_run_session_full_scenario(capsys):
    ledger = Ledger()
    console = console_for(
        "1", "2024-01-15", "Income", "1000.00", "Salary",
        "1", "2024-01-20", "expense", "250.50", "Groceries",
        "3",
        "4", "category", "Groceries",
        "5",
    )
    run_session(ledger, console)

    assert len(ledger) == 2
    out = capsys.readouterr().out
    assert out.startswith("Personal Finance Manager\n1. Add Transaction\n")
    assert "Total Income: 1000.00\nTotal Expense: 250.50\nBalance: 749.50\n" in out
    assert out.count("Category: Groceries") == 1
    assert out.count("5. Exit") == 5


def test_run_session_reprompts_on_unknown_choice(capsys):
    ledger = Ledger()
    run_session(ledger, console_for("9", "", "add", "5"))

    out = capsys.readouterr().out
    assert out.count("Invalid choice. Please try again.") == 3
    assert out.count("1. Add Transaction") == 4
    assert len(ledger) == 0


def test_run_session_end_of_input_is_fatal():
    with pytest.raises(InputClosedError):
        run_session(Ledger(), console_for("2"))
