"""Hagu finance analytics engine."""

from __future__ import annotations

from .config import BaseConfig, DevConfig
from .services.aggregation import (
    calculate_category_summaries,
    calculate_monthly_balance,
    filter_transactions_by_date_range,
    filter_transactions_by_month,
    sort_transactions_by_date,
)
from .services.currency import (
    format_currency,
    format_percentage,
    get_currency_config,
    parse_currency_input,
)
from .services.periods import (
    get_current_month,
    get_last_n_months,
    get_local_date_string,
    get_month_name,
    get_months_between,
    get_today_string,
)
from .services.projections import calculate_compound_interest
from .services.recurrence import calculate_next_recurrence_date

__all__ = [
    "BaseConfig",
    "DevConfig",
    "calculate_category_summaries",
    "calculate_compound_interest",
    "calculate_monthly_balance",
    "calculate_next_recurrence_date",
    "filter_transactions_by_date_range",
    "filter_transactions_by_month",
    "format_currency",
    "format_percentage",
    "get_currency_config",
    "get_current_month",
    "get_last_n_months",
    "get_local_date_string",
    "get_month_name",
    "get_months_between",
    "get_today_string",
    "parse_currency_input",
    "sort_transactions_by_date",
]
