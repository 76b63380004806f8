"""Budgeting domain services."""

from __future__ import annotations

from dataclasses import replace
from typing import Iterable, Optional
from uuid import uuid4

from ..models.budget import Budget, BudgetProgress
from ..models.transaction import Transaction
from .periods import get_current_month


def compute_budget_progress(
    *, transactions: Iterable[Transaction], budgets: Iterable[Budget], month: str
) -> list[BudgetProgress]:
    """Compare each of the month's budgets with that month's category spending."""

    spent_by_category: dict[str, float] = {}
    for txn in transactions:
        if txn.type != "expense" or txn.month != month:
            continue
        spent_by_category[txn.category_id] = spent_by_category.get(txn.category_id, 0.0) + txn.amount

    progress: list[BudgetProgress] = []
    for budget in budgets:
        if budget.month != month:
            continue
        spent = spent_by_category.get(budget.category_id, 0.0)
        limit = budget.monthly_limit
        percentage = (spent / limit) * 100 if limit > 0 else 0.0
        progress.append(
            BudgetProgress(
                budget=budget,
                spent=spent,
                percentage=min(percentage, 100.0),
                remaining=limit - spent,
                is_over_budget=spent > limit,
            )
        )

    return progress


def budget_for_category(
    budgets: Iterable[Budget], category_id: str, month: Optional[str] = None
) -> Budget | None:
    month = month or get_current_month()
    return next(
        (b for b in budgets if b.category_id == category_id and b.month == month),
        None,
    )


def upsert_budget(
    budgets: Iterable[Budget],
    category_id: str,
    monthly_limit: float,
    month: Optional[str] = None,
) -> tuple[Budget, ...]:
    """Return budgets with the (category, month) limit set, adding a budget if needed."""

    month = month or get_current_month()
    updated: list[Budget] = []
    found = False
    for budget in budgets:
        if budget.category_id == category_id and budget.month == month:
            budget = replace(budget, monthly_limit=monthly_limit)
            found = True
        updated.append(budget)

    if not found:
        updated.append(
            Budget(id=uuid4().hex, category_id=category_id, monthly_limit=monthly_limit, month=month)
        )
    return tuple(updated)


__all__ = ["budget_for_category", "compute_budget_progress", "upsert_budget"]
