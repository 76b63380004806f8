"""Tests for budget progress and budget upserts."""

from __future__ import annotations

import pytest

from hagu_finance.models import Budget
from hagu_finance.services.budgeting import (
    budget_for_category,
    compute_budget_progress,
    upsert_budget,
)


@pytest.fixture
def budgets():
    return [
        Budget(id="b1", category_id="food", monthly_limit=1000, month="2024-01"),
        Budget(id="b2", category_id="transport", monthly_limit=200, month="2024-01"),
        Budget(id="b3", category_id="food", monthly_limit=900, month="2024-02"),
    ]


class TestComputeBudgetProgress:
    def test_spent_and_remaining(self, transaction_factory, budgets):
        transactions = [
            transaction_factory(amount=300, category_id="food", date="2024-01-03"),
            transaction_factory(amount=200, category_id="food", date="2024-01-20"),
            transaction_factory(amount=999, category_id="food", date="2024-02-01"),
            transaction_factory(type="income", amount=5000, category_id="food", date="2024-01-05"),
        ]

        progress = compute_budget_progress(
            transactions=transactions, budgets=budgets, month="2024-01"
        )

        assert [p.budget.id for p in progress] == ["b1", "b2"]
        food = progress[0]
        assert food.spent == 500
        assert food.percentage == 50
        assert food.remaining == 500
        assert food.is_over_budget is False

        transport = progress[1]
        assert transport.spent == 0
        assert transport.percentage == 0

    def test_over_budget_caps_percentage(self, transaction_factory, budgets):
        transactions = [transaction_factory(amount=350, category_id="transport", date="2024-01-09")]

        progress = compute_budget_progress(
            transactions=transactions, budgets=budgets, month="2024-01"
        )
        transport = next(p for p in progress if p.budget.category_id == "transport")

        assert transport.percentage == 100
        assert transport.remaining == -150
        assert transport.is_over_budget is True

    def test_zero_limit(self, transaction_factory):
        budgets = [Budget(id="b", category_id="fun", monthly_limit=0, month="2024-01")]
        transactions = [transaction_factory(amount=10, category_id="fun", date="2024-01-01")]

        progress = compute_budget_progress(
            transactions=transactions, budgets=budgets, month="2024-01"
        )

        assert progress[0].percentage == 0
        assert progress[0].is_over_budget is True


class TestBudgetLookup:
    def test_finds_budget_for_month(self, budgets):
        assert budget_for_category(budgets, "food", "2024-02").id == "b3"

    def test_missing_budget(self, budgets):
        assert budget_for_category(budgets, "rent", "2024-01") is None


class TestUpsertBudget:
    def test_updates_existing_limit(self, budgets):
        updated = upsert_budget(budgets, "food", 1500, "2024-01")

        assert len(updated) == 3
        assert budget_for_category(updated, "food", "2024-01").monthly_limit == 1500
        assert budget_for_category(updated, "food", "2024-01").id == "b1"
        assert budgets[0].monthly_limit == 1000

    def test_adds_new_budget(self, budgets):
        updated = upsert_budget(budgets, "rent", 2000, "2024-01")

        assert len(updated) == 4
        added = budget_for_category(updated, "rent", "2024-01")
        assert added.monthly_limit == 2000
        assert added.id
