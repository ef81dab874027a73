# finance_ledger/utils.py

def filter_transactions_by_date(transactions, day):
    """
    Return only those transactions dated exactly on ``day``.
    """
    return [tx for tx in transactions if tx.date == day]

def filter_transactions_by_category(transactions, category):
    """
    Return only those transactions whose category equals ``category``
    once surrounding whitespace is removed. Comparison is case-sensitive.
    """
    wanted = category.strip()
    return [tx for tx in transactions if tx.category == wanted]

def format_transaction(tx):
    """
    Render one transaction as the four display lines plus a trailing blank.
    """
    return "\n".join([
        f"Date: {tx.date.isoformat()}",
        f"Type: {tx.kind.value}",
        f"Amount: {tx.amount:.2f}",
        f"Category: {tx.category}",
        "",
    ])

def format_summary(summary):
    return "\n".join([
        f"Total Income: {summary.total_income:.2f}",
        f"Total Expense: {summary.total_expense:.2f}",
        f"Balance: {summary.balance:.2f}",
    ])
