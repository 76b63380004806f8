"""Ledger filtering, bucketing and per-category totals."""

from __future__ import annotations

from typing import Iterable, Sequence

from ..models.reports import CategorySummary, MonthlyBalance
from ..models.transaction import Transaction


def filter_transactions_by_date_range(
    transactions: Iterable[Transaction], start_date: str, end_date: str
) -> list[Transaction]:
    """Transactions dated within ``[start_date, end_date]``, input order kept."""

    return [t for t in transactions if start_date <= t.date <= end_date]


def filter_transactions_by_month(transactions: Iterable[Transaction], month: str) -> list[Transaction]:
    return [t for t in transactions if t.date.startswith(month)]


def calculate_monthly_balance(transactions: Iterable[Transaction], month: str) -> MonthlyBalance:
    """Income, expenses and net balance for one month."""

    month_transactions = filter_transactions_by_month(transactions, month)

    total_income = sum((t.amount for t in month_transactions if t.type == "income"), 0.0)
    total_expenses = sum((t.amount for t in month_transactions if t.type == "expense"), 0.0)

    return MonthlyBalance(
        month=month,
        total_income=total_income,
        total_expenses=total_expenses,
        balance=total_income - total_expenses,
        transaction_count=len(month_transactions),
    )


def calculate_monthly_trend(
    transactions: Iterable[Transaction], months: Sequence[str]
) -> list[MonthlyBalance]:
    """One balance per month key, in the order given."""

    txns = list(transactions)
    return [calculate_monthly_balance(txns, month) for month in months]


def calculate_category_summaries(
    transactions: Iterable[Transaction], type: str
) -> list[CategorySummary]:
    """Group ``type`` transactions by category.

    Summaries come back in first-seen category order. Each percentage is the
    category's share of the type total, rounded to two places.
    """

    filtered = [t for t in transactions if t.type == type]
    grand_total = sum((t.amount for t in filtered), 0.0)

    by_category: dict[str, dict[str, float]] = {}
    for txn in filtered:
        bucket = by_category.setdefault(txn.category_id, {"total": 0.0, "count": 0})
        bucket["total"] += txn.amount
        bucket["count"] += 1

    return [
        CategorySummary(
            category_id=category_id,
            total=data["total"],
            count=int(data["count"]),
            percentage=round(data["total"] / grand_total * 100, 2) if grand_total > 0 else 0.0,
        )
        for category_id, data in by_category.items()
    ]


def sort_transactions_by_date(
    transactions: Iterable[Transaction], ascending: bool = False
) -> list[Transaction]:
    """New list ordered by date; same-day transactions keep their input order."""

    return sorted(transactions, key=lambda t: t.date, reverse=not ascending)


def calculate_total_balance(transactions: Iterable[Transaction]) -> float:
    """All income minus all expenses."""

    total = 0.0
    for txn in transactions:
        if txn.type == "income":
            total += txn.amount
        elif txn.type == "expense":
            total -= txn.amount
    return total


def group_transactions_by_date(
    transactions: Iterable[Transaction],
) -> list[tuple[str, list[Transaction]]]:
    """(date, transactions) groups, most recent day first."""

    groups: dict[str, list[Transaction]] = {}
    for txn in transactions:
        groups.setdefault(txn.date, []).append(txn)
    return sorted(groups.items(), key=lambda item: item[0], reverse=True)


__all__ = [
    "calculate_category_summaries",
    "calculate_monthly_balance",
    "calculate_monthly_trend",
    "calculate_total_balance",
    "filter_transactions_by_date_range",
    "filter_transactions_by_month",
    "group_transactions_by_date",
    "sort_transactions_by_date",
]
