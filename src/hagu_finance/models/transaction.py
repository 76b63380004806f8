"""Ledger transaction value objects."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Literal, Mapping, Optional

TransactionType = Literal["income", "expense"]
RecurrenceFrequency = Literal["daily", "weekly", "biweekly", "monthly", "yearly"]

TRANSACTION_TYPES: frozenset[str] = frozenset({"income", "expense"})
RECURRENCE_FREQUENCIES: tuple[str, ...] = ("daily", "weekly", "biweekly", "monthly", "yearly")


@dataclass(frozen=True, slots=True)
class Recurrence:
    """Cadence of a recurring transaction and its next pending occurrence."""

    frequency: RecurrenceFrequency
    next_date: Optional[str] = None  # YYYY-MM-DD
    end_date: Optional[str] = None  # YYYY-MM-DD, inclusive


@dataclass(frozen=True, slots=True)
class Transaction:
    """A single income or expense entry as handed over by the storage layer."""

    id: str
    type: TransactionType
    amount: float  # always positive, the type carries the sign
    description: str
    category_id: str
    date: str  # YYYY-MM-DD
    created_at: str
    is_recurring: bool = False
    recurrence: Optional[Recurrence] = None
    payment_method: Optional[str] = None
    tags: tuple[str, ...] = field(default_factory=tuple)
    updated_at: Optional[str] = None

    @property
    def month(self) -> str:
        return self.date[:7]

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "Transaction":
        """Build a transaction from a snake_case database row."""

        frequency = row.get("recurrence_frequency")
        recurrence = (
            Recurrence(
                frequency=frequency,
                next_date=row.get("recurrence_next_date") or None,
                end_date=row.get("recurrence_end_date") or None,
            )
            if frequency
            else None
        )
        return cls(
            id=str(row["id"]),
            type=row["type"],
            amount=float(row["amount"]),
            description=row.get("description") or "",
            category_id=str(row["category_id"]),
            date=str(row["date"]),
            created_at=str(row.get("created_at") or ""),
            is_recurring=bool(row.get("is_recurring", False)),
            recurrence=recurrence,
            payment_method=row.get("payment_method") or None,
            tags=tuple(row.get("tags") or ()),
            updated_at=row.get("updated_at") or None,
        )

    def to_row(self) -> dict[str, Any]:
        """Inverse of :meth:`from_row`."""

        recurrence = self.recurrence
        return {
            "id": self.id,
            "type": self.type,
            "amount": self.amount,
            "description": self.description,
            "category_id": self.category_id,
            "date": self.date,
            "payment_method": self.payment_method,
            "tags": list(self.tags),
            "is_recurring": self.is_recurring,
            "recurrence_frequency": recurrence.frequency if recurrence else None,
            "recurrence_next_date": recurrence.next_date if recurrence else None,
            "recurrence_end_date": recurrence.end_date if recurrence else None,
            "created_at": self.created_at,
            "updated_at": self.updated_at,
        }
