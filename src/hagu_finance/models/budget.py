"""Monthly category budgets."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Budget:
    """Spending limit for one category in one month."""

    id: str
    category_id: str
    monthly_limit: float
    month: str  # YYYY-MM


@dataclass(frozen=True, slots=True)
class BudgetProgress:
    """How much of a budget has been consumed."""

    budget: Budget
    spent: float
    percentage: float  # capped at 100
    remaining: float  # negative once over budget
    is_over_budget: bool
