"""Local calendar-date strings and month-key helpers.

Dates travel through the engine as zero-padded ``YYYY-MM-DD`` strings and
months as ``YYYY-MM`` keys, so plain string comparison is chronological.
"""

from __future__ import annotations

from datetime import date, datetime

_MONTH_NAMES: dict[str, tuple[str, ...]] = {
    "pt": (
        "janeiro", "fevereiro", "março", "abril", "maio", "junho",
        "julho", "agosto", "setembro", "outubro", "novembro", "dezembro",
    ),
    "en": (
        "January", "February", "March", "April", "May", "June",
        "July", "August", "September", "October", "November", "December",
    ),
    "de": (
        "Januar", "Februar", "März", "April", "Mai", "Juni",
        "Juli", "August", "September", "Oktober", "November", "Dezember",
    ),
    "es": (
        "enero", "febrero", "marzo", "abril", "mayo", "junio",
        "julio", "agosto", "septiembre", "octubre", "noviembre", "diciembre",
    ),
}

_MONTH_YEAR_PATTERNS: dict[str, str] = {
    "pt": "{month} de {year}",
    "es": "{month} de {year}",
    "en": "{month} {year}",
    "de": "{month} {year}",
}


def month_key(year: int, month: int) -> str:
    return f"{year:04d}-{month:02d}"


def parse_month_key(value: str) -> tuple[int, int]:
    year, month = value.split("-")[:2]
    return int(year), int(month)


def shift_month(year: int, month: int, offset: int) -> tuple[int, int]:
    """Return (year, month) moved by ``offset`` months, rolling over years."""

    index = year * 12 + (month - 1) + offset
    return index // 12, index % 12 + 1


def get_local_date_string(value: date | datetime | None = None) -> str:
    """Format the local calendar date of ``value`` (default: now) as YYYY-MM-DD."""

    value = value or datetime.now()
    return f"{value.year:04d}-{value.month:02d}-{value.day:02d}"


def get_today_string(*, today: date | None = None) -> str:
    return get_local_date_string(today)


def get_current_month(*, today: date | None = None) -> str:
    today = today or date.today()
    return month_key(today.year, today.month)


def get_months_between(start_month: str, end_month: str) -> list[str]:
    """Every month key from ``start_month`` to ``end_month`` inclusive, oldest first."""

    year, month = parse_month_key(start_month)
    end = parse_month_key(end_month)
    months: list[str] = []
    while (year, month) <= end:
        months.append(month_key(year, month))
        year, month = shift_month(year, month, 1)
    return months


def get_last_n_months(n: int, *, today: date | None = None) -> list[str]:
    """The ``n`` most recent month keys ending at the current month, oldest first."""

    today = today or date.today()
    return [
        month_key(*shift_month(today.year, today.month, -offset))
        for offset in range(n - 1, -1, -1)
    ]


def get_month_name(month: str, locale: str = "pt-BR") -> str:
    """Localized month name with year, e.g. ``janeiro de 2024`` or ``January 2024``.

    Languages without a name table fall back to English.
    """

    language = locale.replace("_", "-").split("-")[0].lower()
    if language not in _MONTH_NAMES:
        language = "en"
    year, month_number = parse_month_key(month)
    return _MONTH_YEAR_PATTERNS[language].format(
        month=_MONTH_NAMES[language][month_number - 1], year=year
    )


__all__ = [
    "get_current_month",
    "get_last_n_months",
    "get_local_date_string",
    "get_month_name",
    "get_months_between",
    "get_today_string",
    "month_key",
    "parse_month_key",
    "shift_month",
]
