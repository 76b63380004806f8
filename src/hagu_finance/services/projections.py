"""Savings and investment growth projections.

Contributions are spread evenly across compounding periods: with quarterly
compounding each quarter receives three months of contributions right after
interest is credited. Amounts stay plain floats.
"""

from __future__ import annotations

from ..models.reports import CompoundInterestResult, YearlyBreakdown

COMPOUNDING_PERIODS = {"monthly": 12, "quarterly": 4, "yearly": 1}


def calculate_compound_interest(
    principal: float,
    monthly_contribution: float,
    annual_rate: float,
    years: int,
    compounding_frequency: str = "monthly",
) -> CompoundInterestResult:
    """Simulate ``years`` of compounding with a fixed monthly contribution.

    ``annual_rate`` is a percentage (``12`` means 12% a year). The rate per
    period is ``annual_rate / 100 / periods_per_year``.
    """

    if compounding_frequency not in COMPOUNDING_PERIODS:
        raise ValueError(f"Invalid compounding frequency: {compounding_frequency!r}")

    periods_per_year = COMPOUNDING_PERIODS[compounding_frequency]
    rate_per_period = annual_rate / 100 / periods_per_year
    contribution_per_period = monthly_contribution * 12 / periods_per_year

    current_amount = float(principal)
    total_contributed = float(principal)
    breakdown: list[YearlyBreakdown] = []

    for year in range(1, int(years) + 1):
        total_contributed += monthly_contribution * 12

        for _ in range(periods_per_year):
            current_amount *= 1 + rate_per_period
            current_amount += contribution_per_period

        if annual_rate == 0:
            # Without interest the balance is exactly what went in.
            current_amount = total_contributed

        breakdown.append(
            YearlyBreakdown(
                year=year,
                amount=current_amount,
                contributed=total_contributed,
                interest=current_amount - total_contributed,
            )
        )

    return CompoundInterestResult(
        final_amount=current_amount,
        total_contributed=total_contributed,
        total_interest=current_amount - total_contributed,
        yearly_breakdown=tuple(breakdown),
    )


__all__ = ["COMPOUNDING_PERIODS", "calculate_compound_interest"]
