"""Chart rendering for finance reports."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Sequence

import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt
from matplotlib.figure import Figure

from ..models.currency import DEFAULT_CURRENCY
from ..models.reports import CategorySummary, CompoundInterestResult, MonthlyBalance
from .currency import format_currency, format_percentage

INCOME_COLOR = "#22C55E"
EXPENSE_COLOR = "#EF4444"
CONTRIBUTED_COLOR = "#3B82F6"
MAX_LEGEND_ITEMS = 12


def _empty_figure(message: str, figsize: tuple[float, float] = (8, 5)) -> Figure:
    fig, ax = plt.subplots(figsize=figsize)
    ax.text(0.5, 0.5, message, ha="center", va="center", fontsize=14, color="#666")
    ax.axis("off")
    return fig


def build_spending_chart(
    *,
    summaries: Iterable[CategorySummary],
    category_lookup: dict[str, str] | None = None,
    currency_code: str = DEFAULT_CURRENCY,
) -> Figure:
    """Donut chart of category totals, largest slice first.

    Labels are resolved via ``category_lookup`` when provided.
    """

    ordered = sorted(summaries, key=lambda s: s.total, reverse=True)
    if not ordered:
        return _empty_figure("No expense data", figsize=(10, 7))

    grand_total = sum(s.total for s in ordered)
    labels = [
        category_lookup.get(s.category_id, s.category_id) if category_lookup else s.category_id
        for s in ordered
    ]
    sizes = [s.total for s in ordered]

    fig, ax = plt.subplots(figsize=(10, 7))
    cmap = plt.get_cmap("tab20c")
    colors = [cmap(i / max(len(sizes), 1)) for i in range(len(sizes))]

    wedges, _texts, autotexts = ax.pie(
        sizes,
        labels=None,
        autopct=lambda pct: f"{pct:.1f}%" if pct > 4 else "",
        wedgeprops=dict(width=0.45, edgecolor="white", linewidth=1.5),
        startangle=90,
        colors=colors,
        pctdistance=0.78,
    )
    for autotext in autotexts:
        autotext.set_fontsize(9)
        autotext.set_fontweight("bold")
        autotext.set_color("white")

    ax.text(0, 0.08, "Total", ha="center", va="center", fontsize=11, color="#666")
    ax.text(
        0, -0.08, format_currency(grand_total, currency_code),
        ha="center", va="center", fontsize=16, fontweight="bold", color="#1F2937",
    )

    shown = ordered[:MAX_LEGEND_ITEMS]
    legend_labels = [
        f"{labels[i]}: {format_currency(s.total, currency_code)} ({format_percentage(s.percentage)})"
        for i, s in enumerate(shown)
    ]
    legend_wedges = list(wedges[: len(shown)])
    if len(ordered) > MAX_LEGEND_ITEMS:
        rest = ordered[MAX_LEGEND_ITEMS:]
        legend_labels.append(
            f"Other ({len(rest)} more): "
            f"{format_currency(sum(s.total for s in rest), currency_code)} "
            f"({format_percentage(sum(s.percentage for s in rest))})"
        )
        legend_wedges.append(wedges[-1])

    ax.legend(
        legend_wedges,
        legend_labels,
        title="Categories",
        title_fontsize=11,
        loc="center left",
        bbox_to_anchor=(1.02, 0.5),
        fontsize=9,
        framealpha=0.9,
    )
    ax.axis("equal")
    ax.set_title("Spending by Category", fontsize=16, fontweight="bold", pad=20)
    plt.tight_layout()
    return fig


def build_trend_chart(
    *, balances: Sequence[MonthlyBalance], currency_code: str = DEFAULT_CURRENCY
) -> Figure:
    """Income and expense lines per month with surplus/deficit shading."""

    if not balances or not any(b.transaction_count for b in balances):
        return _empty_figure("No transaction data yet")

    labels = [b.month for b in balances]
    income = [b.total_income for b in balances]
    expense = [b.total_expenses for b in balances]
    x_positions = list(range(len(labels)))

    fig, ax = plt.subplots(figsize=(10, 6))
    ax.plot(x_positions, income, marker="o", linewidth=2.5, markersize=8,
            label="Income", color=INCOME_COLOR)
    ax.plot(x_positions, expense, marker="s", linewidth=2.5, markersize=8,
            label="Expenses", color=EXPENSE_COLOR)
    ax.fill_between(x_positions, income, expense,
                    where=[i >= e for i, e in zip(income, expense)],
                    color="#DCFCE7", alpha=0.4, label="Surplus")
    ax.fill_between(x_positions, income, expense,
                    where=[i < e for i, e in zip(income, expense)],
                    color="#FEE2E2", alpha=0.4, label="Deficit")

    ax.grid(True, linestyle="--", alpha=0.3)
    ax.set_axisbelow(True)
    ax.set_xticks(x_positions)
    ax.set_xticklabels(labels)
    ax.yaxis.set_major_formatter(lambda value, _pos: format_currency(value, currency_code))
    ax.set_title("Cashflow by Month", fontsize=14, fontweight="bold", pad=15)
    ax.legend(loc="upper left")
    plt.tight_layout()
    return fig


def build_projection_chart(
    *, result: CompoundInterestResult, currency_code: str = DEFAULT_CURRENCY
) -> Figure:
    """Total balance against money put in, year by year."""

    if not result.yearly_breakdown:
        return _empty_figure("Nothing to project")

    years = [entry.year for entry in result.yearly_breakdown]
    amounts = [entry.amount for entry in result.yearly_breakdown]
    contributed = [entry.contributed for entry in result.yearly_breakdown]

    fig, ax = plt.subplots(figsize=(10, 6))
    ax.fill_between(years, contributed, color=CONTRIBUTED_COLOR, alpha=0.25, label="Contributed")
    ax.fill_between(years, contributed, amounts, color=INCOME_COLOR, alpha=0.25, label="Interest")
    ax.plot(years, amounts, marker="o", linewidth=2.5, color=INCOME_COLOR, label="Total")

    ax.grid(True, linestyle="--", alpha=0.3)
    ax.set_xlabel("Year")
    ax.set_xticks(years)
    ax.yaxis.set_major_formatter(lambda value, _pos: format_currency(value, currency_code))
    ax.set_title(
        f"Projected balance: {format_currency(result.final_amount, currency_code)}",
        fontsize=14, fontweight="bold", pad=15,
    )
    ax.legend(loc="upper left")
    plt.tight_layout()
    return fig


def export_chart_png(figure: Figure, output_path: Path) -> Path:
    """Write ``figure`` to PNG, release it and return the path."""

    output_path.parent.mkdir(parents=True, exist_ok=True)
    figure.savefig(output_path, bbox_inches="tight", dpi=120)
    plt.close(figure)
    return output_path


__all__ = [
    "build_projection_chart",
    "build_spending_chart",
    "build_trend_chart",
    "export_chart_png",
]
