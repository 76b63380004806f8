"""CSV ingestion utilities."""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Iterable, Mapping, Optional
from uuid import uuid4

import pandas as pd

from ..logging_config import get_logger
from ..models.transaction import RECURRENCE_FREQUENCIES, TRANSACTION_TYPES, Recurrence, Transaction
from .currency import parse_currency_input

logger = get_logger(__name__)

_TRUE_VALUES = {"1", "true", "yes", "y", "on"}


@dataclass(slots=True)
class ColumnMapping:
    """Maps transaction fields to CSV headers (lower-case)."""

    amount: str = "amount"
    date: str = "date"
    type: str | None = "type"
    description: str | None = "description"
    category: str | None = "category_id"
    id: str | None = "id"
    payment_method: str | None = "payment_method"
    is_recurring: str | None = "is_recurring"
    recurrence_frequency: str | None = "recurrence_frequency"
    recurrence_next_date: str | None = "recurrence_next_date"
    recurrence_end_date: str | None = "recurrence_end_date"
    created_at: str | None = "created_at"


def normalize_frame(*, file_path: Path, encoding: str = "utf-8") -> pd.DataFrame:
    """Load a CSV file into a DataFrame with consistent column casing.

    Every cell is read as text; empty cells become NaN.
    """

    frame = pd.read_csv(file_path, encoding=encoding, dtype=str)
    frame.columns = [c.strip().lower() for c in frame.columns]
    return frame


def _cell(row: Mapping[str, Any], column: Optional[str]) -> Optional[str]:
    """Return a stripped string cell or None when the column or value is missing."""

    if not column:
        return None
    value = row.get(column)
    if value is None or pd.isna(value):
        return None
    text = str(value).strip()
    return text or None


def _parse_amount(raw: str) -> float:
    try:
        return float(raw)
    except ValueError:
        return parse_currency_input(raw)


def rows_to_transactions(
    *, rows: Iterable[Mapping[str, Any]], mapping: ColumnMapping
) -> list[Transaction]:
    """Convert dict-like rows into transactions, skipping rows that cannot be read.

    Without a type column the sign decides: negative amounts are expenses.
    Stored amounts are always positive.
    """

    created: list[Transaction] = []
    skipped = 0
    imported_at = datetime.now(timezone.utc).isoformat()

    for row in rows:
        amount_raw = _cell(row, mapping.amount)
        date_raw = _cell(row, mapping.date)
        if amount_raw is None or date_raw is None:
            skipped += 1
            continue

        amount = _parse_amount(amount_raw)
        if amount == 0 or not math.isfinite(amount):
            skipped += 1
            continue

        txn_type = (_cell(row, mapping.type) or "").lower()
        if not txn_type:
            txn_type = "expense" if amount < 0 else "income"
        if txn_type not in TRANSACTION_TYPES:
            skipped += 1
            continue

        is_recurring = (_cell(row, mapping.is_recurring) or "").lower() in _TRUE_VALUES
        frequency = (_cell(row, mapping.recurrence_frequency) or "").lower()
        recurrence = (
            Recurrence(
                frequency=frequency,
                next_date=_cell(row, mapping.recurrence_next_date),
                end_date=_cell(row, mapping.recurrence_end_date),
            )
            if frequency in RECURRENCE_FREQUENCIES
            else None
        )

        created.append(
            Transaction(
                id=_cell(row, mapping.id) or uuid4().hex,
                type=txn_type,
                amount=abs(amount),
                description=_cell(row, mapping.description) or "",
                category_id=_cell(row, mapping.category) or "uncategorized",
                date=date_raw[:10],
                created_at=_cell(row, mapping.created_at) or imported_at,
                is_recurring=is_recurring and recurrence is not None,
                recurrence=recurrence,
                payment_method=_cell(row, mapping.payment_method),
            )
        )

    if skipped:
        logger.debug("Skipped unreadable CSV rows", extra={"skipped": skipped})
    return created


def load_transactions_csv(
    *, csv_path: Path, mapping: ColumnMapping | None = None
) -> list[Transaction]:
    """Parse the file and return the transactions it contains."""

    frame = normalize_frame(file_path=csv_path)
    rows = frame.to_dict(orient="records")
    transactions = rows_to_transactions(rows=rows, mapping=mapping or ColumnMapping())
    logger.info(
        "Loaded transactions from CSV",
        extra={"path": str(csv_path), "rows": len(rows), "transactions": len(transactions)},
    )
    return transactions


__all__ = ["ColumnMapping", "load_transactions_csv", "normalize_frame", "rows_to_transactions"]
