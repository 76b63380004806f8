"""Savings goal progress and contributions."""

from __future__ import annotations

from dataclasses import replace
from datetime import date, datetime, timezone
from typing import Optional
from uuid import uuid4

from ..logging_config import get_logger
from ..models.goal import FinancialGoal, GoalContribution, GoalProgress
from .periods import get_today_string

logger = get_logger(__name__)


def goal_progress(goal: FinancialGoal) -> GoalProgress:
    """Share of the target reached so far, capped at 100%."""

    target = goal.target_amount
    percentage = (goal.current_amount / target) * 100 if target > 0 else 0.0
    return GoalProgress(
        percentage=min(percentage, 100.0),
        remaining=max(target - goal.current_amount, 0.0),
        is_completed=goal.current_amount >= target,
    )


def add_goal_contribution(
    goal: FinancialGoal,
    amount: float,
    note: Optional[str] = None,
    *,
    today: date | None = None,
) -> FinancialGoal:
    """Return ``goal`` with a new contribution recorded.

    ``completed_at`` is stamped only the first time the target is reached.
    """

    contribution = GoalContribution(
        id=uuid4().hex,
        amount=amount,
        date=get_today_string(today=today),
        note=note,
    )
    new_amount = goal.current_amount + amount
    completed_at = goal.completed_at
    if new_amount >= goal.target_amount and not completed_at:
        completed_at = datetime.now(timezone.utc).isoformat()
        logger.info("Goal completed", extra={"goal_id": goal.id, "target": goal.target_amount})

    return replace(
        goal,
        current_amount=new_amount,
        contributions=goal.contributions + (contribution,),
        completed_at=completed_at,
    )


__all__ = ["add_goal_contribution", "goal_progress"]
