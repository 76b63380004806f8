"""Service module exports."""

from . import (
    aggregation,
    budgeting,
    currency,
    export_csv,
    goals,
    import_csv,
    periods,
    projections,
    recurrence,
    reports,
)

__all__ = [
    "aggregation",
    "budgeting",
    "currency",
    "export_csv",
    "goals",
    "import_csv",
    "periods",
    "projections",
    "recurrence",
    "reports",
]
