"""Currency and percentage formatting, plus parsing of typed amounts."""

from __future__ import annotations

import re
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, localcontext

from ..logging_config import get_logger
from ..models.currency import CURRENCIES, DEFAULT_CURRENCY, CurrencyConfig

logger = get_logger(__name__)

_NBSP = "\u00a0"


@dataclass(frozen=True, slots=True)
class _NumberStyle:
    """Separators and symbol placement for one locale."""

    group: str
    decimal: str
    pattern: str  # "{symbol}" and "{number}" placeholders


_LOCALE_STYLES: dict[str, _NumberStyle] = {
    "pt-BR": _NumberStyle(group=".", decimal=",", pattern="{symbol}" + _NBSP + "{number}"),
    "en-US": _NumberStyle(group=",", decimal=".", pattern="{symbol}{number}"),
    "en-GB": _NumberStyle(group=",", decimal=".", pattern="{symbol}{number}"),
    "de-DE": _NumberStyle(group=".", decimal=",", pattern="{number}" + _NBSP + "{symbol}"),
}

# Characters kept before numeric interpretation of typed text.
_STRIP_PATTERN = re.compile(r"[^\d,.\-]")
# Longest leading float literal, mirroring what a lenient float reader accepts.
_LEADING_FLOAT = re.compile(r"^[+-]?(\d+\.?\d*|\.\d+)")


def _quantize(value: float, places: int) -> Decimal:
    number = Decimal(str(value))
    exponent = Decimal(1).scaleb(-places)
    with localcontext() as ctx:
        # enough digits for every integer place plus the requested decimals
        ctx.prec = max(28, number.adjusted() + places + 2)
        return number.quantize(exponent, rounding=ROUND_HALF_UP)


def get_currency_config(code: str) -> CurrencyConfig:
    """Return display settings for ``code``; unknown codes get the default currency."""

    config = CURRENCIES.get(code)
    if config is None:
        logger.debug("Unknown currency %r, using %s", code, DEFAULT_CURRENCY)
        return CURRENCIES[DEFAULT_CURRENCY]
    return config


def format_currency(amount: float, currency_code: str = DEFAULT_CURRENCY) -> str:
    """Render ``amount`` with the symbol, separators and precision of the currency.

    >>> format_currency(1234.56, "USD")
    '$1,234.56'
    """

    config = get_currency_config(currency_code)
    style = _LOCALE_STYLES.get(config.locale, _LOCALE_STYLES["en-US"])
    places = config.decimal_places

    quantized = _quantize(amount, places)
    negative = quantized < 0
    plain = f"{quantized.copy_abs():,.{places}f}"
    number = plain.translate(str.maketrans({",": style.group, ".": style.decimal}))

    rendered = style.pattern.format(symbol=config.symbol, number=number)
    return f"-{rendered}" if negative else rendered


def parse_currency_input(value: str) -> float:
    """Turn typed currency text into a number.

    When the text contains both ``.`` and ``,`` the Brazilian convention is
    assumed (``.`` groups thousands, ``,`` marks decimals) whatever the locale,
    so ``"1,234.56"`` reads as ``1.23456``. With a single kind of separator it
    is taken as the decimal mark. Text without a leading number gives ``0``.
    """

    cleaned = _STRIP_PATTERN.sub("", value or "")
    if "," in cleaned and "." in cleaned:
        normalized = cleaned.replace(".", "").replace(",", ".", 1)
    else:
        normalized = cleaned.replace(",", ".", 1)

    match = _LEADING_FLOAT.match(normalized)
    if match is None:
        return 0.0
    result = float(match.group(0))
    # -0 collapses to 0 like any other falsy parse
    return result or 0.0


def format_percentage(value: float, decimals: int = 1) -> str:
    """Render ``value`` with ``decimals`` fractional digits (half-up) and a ``%`` sign."""

    return f"{_quantize(value, decimals):f}%"


__all__ = [
    "format_currency",
    "format_percentage",
    "get_currency_config",
    "parse_currency_input",
]
