"""CSV export helpers."""

from __future__ import annotations

import csv
from pathlib import Path
from typing import Iterable

from ..models.transaction import Transaction

HEADERS = [
    "id",
    "type",
    "amount",
    "description",
    "category_id",
    "date",
    "payment_method",
    "is_recurring",
    "recurrence_frequency",
    "recurrence_next_date",
    "recurrence_end_date",
    "created_at",
]


def _serialize_value(value) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def export_transactions_csv(*, transactions: Iterable[Transaction], output_path: Path) -> Path:
    """Write transactions to CSV at ``output_path`` and return the path.

    Columns are deterministic (see ``HEADERS``) and readable by
    :func:`hagu_finance.services.import_csv.load_transactions_csv`.
    """

    output_path.parent.mkdir(parents=True, exist_ok=True)

    # Use newline='' for csv on Windows
    with output_path.open("w", newline="", encoding="utf-8") as fh:
        writer = csv.DictWriter(
            fh, fieldnames=HEADERS, extrasaction="ignore", quoting=csv.QUOTE_MINIMAL
        )
        writer.writeheader()
        for tx in transactions:
            writer.writerow({key: _serialize_value(value) for key, value in tx.to_row().items()})

    return output_path
