"""Static currency table."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

CurrencyCode = Literal["BRL", "USD", "EUR", "GBP"]


@dataclass(frozen=True, slots=True)
class CurrencyConfig:
    """How amounts in a currency are displayed."""

    code: str
    symbol: str
    locale: str
    decimal_places: int


DEFAULT_CURRENCY = "BRL"

CURRENCIES: dict[str, CurrencyConfig] = {
    "BRL": CurrencyConfig(code="BRL", symbol="R$", locale="pt-BR", decimal_places=2),
    "USD": CurrencyConfig(code="USD", symbol="$", locale="en-US", decimal_places=2),
    "EUR": CurrencyConfig(code="EUR", symbol="€", locale="de-DE", decimal_places=2),
    "GBP": CurrencyConfig(code="GBP", symbol="£", locale="en-GB", decimal_places=2),
}
