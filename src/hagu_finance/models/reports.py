"""Derived report structures returned by the analytics services.

These are computed fresh on every call and never persisted.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class MonthlyBalance:
    month: str  # YYYY-MM
    total_income: float = 0.0
    total_expenses: float = 0.0
    balance: float = 0.0
    transaction_count: int = 0


@dataclass(frozen=True, slots=True)
class CategorySummary:
    category_id: str
    total: float
    count: int
    percentage: float


@dataclass(frozen=True, slots=True)
class YearlyBreakdown:
    """Balance snapshot at the end of one projected year."""

    year: int
    amount: float
    contributed: float
    interest: float


@dataclass(frozen=True, slots=True)
class CompoundInterestResult:
    final_amount: float
    total_contributed: float
    total_interest: float
    yearly_breakdown: tuple[YearlyBreakdown, ...] = field(default_factory=tuple)
