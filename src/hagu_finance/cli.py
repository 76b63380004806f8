"""Command-line entry points for the finance engine."""

from __future__ import annotations

import re
from pathlib import Path

import click

from .config import BaseConfig
from .logging_config import get_logger, setup_logging
from .models.currency import CURRENCIES
from .models.transaction import RECURRENCE_FREQUENCIES
from .services.aggregation import (
    calculate_category_summaries,
    calculate_monthly_balance,
    calculate_monthly_trend,
    filter_transactions_by_month,
)
from .services.currency import format_currency, format_percentage, parse_currency_input
from .services.import_csv import load_transactions_csv
from .services.periods import get_current_month, get_last_n_months, get_month_name
from .services.projections import COMPOUNDING_PERIODS, calculate_compound_interest
from .services.recurrence import calculate_next_recurrence_date
from .services.reports import build_projection_chart, build_spending_chart, export_chart_png

logger = get_logger(__name__)

_DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")
_MONTH_PATTERN = re.compile(r"^\d{4}-(0[1-9]|1[0-2])$")


class AmountType(click.ParamType):
    """Accepts typed amounts such as ``1.500,00`` or ``R$ 200``."""

    name = "amount"

    def convert(self, value, param, ctx):
        if isinstance(value, (int, float)):
            return float(value)
        if not re.search(r"\d", value):
            self.fail(f"{value!r} is not an amount", param, ctx)
        return parse_currency_input(value)


AMOUNT = AmountType()


def _validate_month(ctx, param, value):
    if value is None:
        return get_current_month()
    if not _MONTH_PATTERN.match(value):
        raise click.BadParameter("expected YYYY-MM")
    return value


def _load(csv_path: Path):
    transactions = load_transactions_csv(csv_path=csv_path)
    if not transactions:
        click.echo("No transactions found.", err=True)
    return transactions


@click.group()
@click.pass_context
def cli(ctx: click.Context) -> None:
    """Hagu finance reports and calculators."""

    config = BaseConfig()
    setup_logging(config)
    ctx.obj = config


@cli.command("summary")
@click.argument("csv_path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--month", callback=_validate_month, help="Month as YYYY-MM (default: current)")
@click.option("--currency", type=click.Choice(sorted(CURRENCIES)), default=None)
@click.pass_obj
def summary(config: BaseConfig, csv_path: Path, month: str, currency: str | None) -> None:
    """Show the balance and category breakdown for one month."""

    currency = currency or config.CURRENCY
    transactions = _load(csv_path)
    balance = calculate_monthly_balance(transactions, month)

    click.echo(get_month_name(month, config.LOCALE))
    click.echo(f"  Income:       {format_currency(balance.total_income, currency)}")
    click.echo(f"  Expenses:     {format_currency(balance.total_expenses, currency)}")
    click.echo(f"  Balance:      {format_currency(balance.balance, currency)}")
    click.echo(f"  Transactions: {balance.transaction_count}")

    month_transactions = filter_transactions_by_month(transactions, month)
    for txn_type, title in (("expense", "Expenses by category"), ("income", "Income by category")):
        summaries = calculate_category_summaries(month_transactions, txn_type)
        if not summaries:
            continue
        click.echo(f"{title}:")
        for item in sorted(summaries, key=lambda s: s.total, reverse=True):
            click.echo(
                f"  {item.category_id}: {format_currency(item.total, currency)} "
                f"({format_percentage(item.percentage)}, {item.count} txn)"
            )


@cli.command("trend")
@click.argument("csv_path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--months", type=click.IntRange(min=1), default=6, show_default=True)
@click.option("--currency", type=click.Choice(sorted(CURRENCIES)), default=None)
@click.pass_obj
def trend(config: BaseConfig, csv_path: Path, months: int, currency: str | None) -> None:
    """Show income, expenses and balance for the last N months."""

    currency = currency or config.CURRENCY
    transactions = _load(csv_path)
    for balance in calculate_monthly_trend(transactions, get_last_n_months(months)):
        click.echo(
            f"{balance.month}  "
            f"in {format_currency(balance.total_income, currency)}  "
            f"out {format_currency(balance.total_expenses, currency)}  "
            f"net {format_currency(balance.balance, currency)}"
        )


@cli.command("next-date")
@click.argument("date")
@click.argument("frequency", type=click.Choice(RECURRENCE_FREQUENCIES))
def next_date(date: str, frequency: str) -> None:
    """Print the next occurrence of a DATE (YYYY-MM-DD) repeating at FREQUENCY."""

    if not _DATE_PATTERN.match(date):
        raise click.BadParameter("expected YYYY-MM-DD", param_hint="DATE")
    try:
        click.echo(calculate_next_recurrence_date(date, frequency))
    except ValueError as exc:
        raise click.BadParameter(str(exc), param_hint="DATE") from exc


@cli.command("project")
@click.option("--principal", type=AMOUNT, default=0.0, show_default=True)
@click.option("--monthly", "monthly_contribution", type=AMOUNT, default=0.0, show_default=True)
@click.option("--rate", "annual_rate", type=AMOUNT, required=True, help="Annual rate in percent")
@click.option("--years", type=click.IntRange(min=1), required=True)
@click.option(
    "--compounding",
    type=click.Choice(list(COMPOUNDING_PERIODS)),
    default="monthly",
    show_default=True,
)
@click.option("--currency", type=click.Choice(sorted(CURRENCIES)), default=None)
@click.option("--chart", "chart_path", type=click.Path(dir_okay=False, path_type=Path), default=None)
@click.pass_obj
def project(
    config: BaseConfig,
    principal: float,
    monthly_contribution: float,
    annual_rate: float,
    years: int,
    compounding: str,
    currency: str | None,
    chart_path: Path | None,
) -> None:
    """Project savings growth with compound interest."""

    currency = currency or config.CURRENCY
    result = calculate_compound_interest(
        principal, monthly_contribution, annual_rate, years, compounding
    )

    for entry in result.yearly_breakdown:
        click.echo(
            f"Year {entry.year:>2}: {format_currency(entry.amount, currency)} "
            f"(contributed {format_currency(entry.contributed, currency)}, "
            f"interest {format_currency(entry.interest, currency)})"
        )
    click.echo(f"Final amount:      {format_currency(result.final_amount, currency)}")
    click.echo(f"Total contributed: {format_currency(result.total_contributed, currency)}")
    click.echo(f"Total interest:    {format_currency(result.total_interest, currency)}")

    if chart_path is not None:
        path = export_chart_png(
            build_projection_chart(result=result, currency_code=currency), chart_path
        )
        click.echo(f"Chart written: {path}")


@cli.command("chart")
@click.argument("csv_path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--month", callback=_validate_month, help="Month as YYYY-MM (default: current)")
@click.option("--output", type=click.Path(dir_okay=False, path_type=Path), required=True)
@click.option("--currency", type=click.Choice(sorted(CURRENCIES)), default=None)
@click.pass_obj
def chart(
    config: BaseConfig, csv_path: Path, month: str, output: Path, currency: str | None
) -> None:
    """Render the month's spending donut to a PNG file."""

    currency = currency or config.CURRENCY
    transactions = filter_transactions_by_month(_load(csv_path), month)
    summaries = calculate_category_summaries(transactions, "expense")
    path = export_chart_png(
        build_spending_chart(summaries=summaries, currency_code=currency), output
    )
    logger.info("Spending chart exported", extra={"path": str(path), "month": month})
    click.echo(f"Chart written: {path}")


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
