"""Savings goals and their contributions."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True, slots=True)
class GoalContribution:
    id: str
    amount: float
    date: str  # YYYY-MM-DD
    note: Optional[str] = None


@dataclass(frozen=True, slots=True)
class FinancialGoal:
    """A target amount the user is saving towards."""

    id: str
    name: str
    target_amount: float
    created_at: str
    current_amount: float = 0.0
    color: str = "#22c55e"
    contributions: tuple[GoalContribution, ...] = field(default_factory=tuple)
    description: Optional[str] = None
    deadline: Optional[str] = None
    icon: Optional[str] = None
    completed_at: Optional[str] = None


@dataclass(frozen=True, slots=True)
class GoalProgress:
    percentage: float  # capped at 100
    remaining: float
    is_completed: bool
