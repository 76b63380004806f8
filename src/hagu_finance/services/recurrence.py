"""Recurring transaction date math and occurrence generation."""

from __future__ import annotations

import calendar
from dataclasses import dataclass, field, replace
from datetime import date, datetime, timedelta, timezone
from typing import Iterable
from uuid import uuid4

from ..logging_config import get_logger
from ..models.transaction import Transaction
from .periods import get_local_date_string, shift_month

logger = get_logger(__name__)

_DAY_STEPS = {"daily": 1, "weekly": 7, "biweekly": 14}
_MONTH_STEPS = {"monthly": 1, "yearly": 12}


@dataclass(slots=True)
class RecurrenceRun:
    """Result of one pass over the recurring templates."""

    generated: list[Transaction] = field(default_factory=list)
    updated: list[Transaction] = field(default_factory=list)


def _add_months(start: date, months: int) -> date:
    """Advance by whole months; a day missing from the target month spills into the next."""

    year, month = shift_month(start.year, start.month, months)
    days_in_month = calendar.monthrange(year, month)[1]
    if start.day <= days_in_month:
        return date(year, month, start.day)
    # Jan 31 + 1 month lands on Mar 2/3, not Feb 28/29
    return date(year, month, 1) + timedelta(days=start.day - 1)


def calculate_next_recurrence_date(current_date: str, frequency: str) -> str:
    """Date one ``frequency`` period after ``current_date`` (both YYYY-MM-DD)."""

    year, month, day = (int(part) for part in current_date.split("-"))
    start = date(year, month, day)

    if frequency in _DAY_STEPS:
        next_date = start + timedelta(days=_DAY_STEPS[frequency])
    elif frequency in _MONTH_STEPS:
        next_date = _add_months(start, _MONTH_STEPS[frequency])
    else:
        raise ValueError(f"Invalid recurrence frequency: {frequency!r}")

    return get_local_date_string(next_date)


def schedule_next_occurrence(transaction: Transaction) -> Transaction:
    """Stamp ``recurrence.next_date`` on a newly recorded recurring transaction."""

    if not transaction.is_recurring or transaction.recurrence is None:
        return transaction
    next_date = calculate_next_recurrence_date(transaction.date, transaction.recurrence.frequency)
    return replace(transaction, recurrence=replace(transaction.recurrence, next_date=next_date))


def _is_due(transaction: Transaction, today: str) -> bool:
    recurrence = transaction.recurrence
    if not transaction.is_recurring or recurrence is None or not recurrence.next_date:
        return False
    if recurrence.next_date > today:
        return False
    return not recurrence.end_date or recurrence.end_date >= today


def process_recurring_transactions(
    transactions: Iterable[Transaction], *, today: date | None = None
) -> RecurrenceRun:
    """Materialize one pending occurrence per due recurring transaction.

    Each due template yields a non-recurring copy dated at its ``next_date``
    and an updated template whose ``next_date`` moved one period ahead. The
    input transactions are left untouched.
    """

    today_key = get_local_date_string(today)
    run = RecurrenceRun()

    for template in transactions:
        if not _is_due(template, today_key):
            continue
        recurrence = template.recurrence
        occurrence_date = recurrence.next_date

        run.generated.append(
            Transaction(
                id=uuid4().hex,
                type=template.type,
                amount=template.amount,
                description=template.description,
                category_id=template.category_id,
                date=occurrence_date,
                created_at=datetime.now(timezone.utc).isoformat(),
                is_recurring=False,
                payment_method=template.payment_method,
                tags=template.tags,
            )
        )
        run.updated.append(
            replace(
                template,
                recurrence=replace(
                    recurrence,
                    next_date=calculate_next_recurrence_date(occurrence_date, recurrence.frequency),
                ),
            )
        )

    if run.generated:
        logger.info(
            "Generated recurring transactions",
            extra={"count": len(run.generated), "as_of": today_key},
        )
    return run


__all__ = [
    "RecurrenceRun",
    "calculate_next_recurrence_date",
    "process_recurring_transactions",
    "schedule_next_occurrence",
]
