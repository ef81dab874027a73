# finance_ledger/session.py
"""
Interactive menu loop for the ledger.

The loop owns the :class:`Ledger` and hands it to one handler per menu
option. Handlers talk to the user only through a :class:`Console`, which
reads one line per prompt and writes with ``click.echo``.
"""
import logging

import click

from finance_ledger.parsing import (
    InvalidAmountError,
    InvalidCriterionError,
    InvalidDateError,
    InvalidKindError,
    InputClosedError,
    parse_amount,
    parse_category,
    parse_criterion,
    parse_date,
    parse_kind,
)
from finance_ledger.utils import format_summary, format_transaction

logger = logging.getLogger(__name__)

HEADER = "Personal Finance Manager"
MENU = "\n".join([
    "1. Add Transaction",
    "2. View Transactions",
    "3. Summary",
    "4. Filter Transactions",
    "5. Exit",
])
EXIT_CHOICE = "5"


class Console:
    """Line-oriented prompt/echo pair over a text input stream."""

    def __init__(self, stdin, retry_invalid_input=False):
        self.stdin = stdin
        self.retry_invalid_input = retry_invalid_input

    def echo(self, message=""):
        click.echo(message)

    def read_line(self):
        line = self.stdin.readline()
        if not line:
            raise InputClosedError()
        return line.strip()

    def prompt(self, message):
        self.echo(message)
        return self.read_line()

    def ask(self, message, parser, retry_on=(InvalidDateError, InvalidAmountError)):
        """Prompt and parse; in retry mode malformed input re-asks the same prompt."""
        while True:
            raw = self.prompt(message)
            try:
                return parser(raw)
            except retry_on as e:
                if not self.retry_invalid_input:
                    raise
                logger.info("Re-prompting after %s", e)
                self.echo(f"{e}. Please try again.")


def add_transaction(ledger, console):
    day = console.ask("Enter date (YYYY-MM-DD):", parse_date)
    try:
        kind = parse_kind(console.prompt("Enter transaction type (income/expense):"))
    except InvalidKindError as e:
        console.echo(str(e))
        return
    amount = console.ask("Enter amount:", parse_amount)
    category = parse_category(console.prompt("Enter category:"))
    ledger.add(day, kind, amount, category)


def view_transactions(ledger, console):
    for tx in ledger:
        console.echo(format_transaction(tx))


def show_summary(ledger, console):
    console.echo(format_summary(ledger.summarize()))


def filter_transactions(ledger, console):
    try:
        criterion = parse_criterion(console.prompt("Enter filter criteria (date/category):"))
    except InvalidCriterionError as e:
        console.echo(str(e))
        return

    if criterion == "date":
        value = console.ask("Enter date (YYYY-MM-DD):", parse_date)
    else:
        value = parse_category(console.prompt("Enter category:"))

    for tx in ledger.filter(criterion, value):
        console.echo(format_transaction(tx))


MENU_ACTIONS = {
    "1": add_transaction,
    "2": view_transactions,
    "3": show_summary,
    "4": filter_transactions,
}


def run_session(ledger, console):
    """
    Show the menu until the user picks Exit.

    Fatal input errors (closed stdin, and malformed dates or amounts outside
    retry mode) propagate to the caller; everything else is reported and the
    menu is shown again.
    """
    logger.info("Session started with %d transaction(s)", len(ledger))
    console.echo(HEADER)
    while True:
        console.echo(MENU)
        choice = console.read_line()
        if choice == EXIT_CHOICE:
            break
        action = MENU_ACTIONS.get(choice)
        if action is None:
            console.echo("Invalid choice. Please try again.")
            continue
        action(ledger, console)
    logger.info("Session ended with %d transaction(s)", len(ledger))
