"""Value objects consumed and produced by the finance engine."""

from .budget import Budget, BudgetProgress
from .currency import CURRENCIES, DEFAULT_CURRENCY, CurrencyCode, CurrencyConfig
from .goal import FinancialGoal, GoalContribution, GoalProgress
from .reports import CategorySummary, CompoundInterestResult, MonthlyBalance, YearlyBreakdown
from .transaction import (
    RECURRENCE_FREQUENCIES,
    TRANSACTION_TYPES,
    Recurrence,
    RecurrenceFrequency,
    Transaction,
    TransactionType,
)

__all__ = [
    "Budget",
    "BudgetProgress",
    "CURRENCIES",
    "DEFAULT_CURRENCY",
    "CategorySummary",
    "CompoundInterestResult",
    "CurrencyCode",
    "CurrencyConfig",
    "FinancialGoal",
    "GoalContribution",
    "GoalProgress",
    "MonthlyBalance",
    "RECURRENCE_FREQUENCIES",
    "Recurrence",
    "RecurrenceFrequency",
    "TRANSACTION_TYPES",
    "Transaction",
    "TransactionType",
    "YearlyBreakdown",
]
