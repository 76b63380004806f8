"""Pytest configuration and shared fixtures for Hagu finance tests.

This module provides transaction factories, environment isolation and helper
utilities for testing the finance engine without touching real user data.
"""

from __future__ import annotations

from itertools import count

import pytest

from hagu_finance.models import Recurrence, Transaction


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    """Point config at a temporary data dir and clear user overrides."""

    monkeypatch.setenv("HAGU_DATA_DIR", str(tmp_path / "instance"))
    monkeypatch.delenv("HAGU_CURRENCY", raising=False)
    monkeypatch.delenv("HAGU_LOCALE", raising=False)
    monkeypatch.setenv("HAGU_DEV_MODE", "false")


@pytest.fixture
def transaction_factory():
    """Factory for creating in-memory transactions.

    Returns:
        Callable: Function that builds Transaction instances
    """

    ids = count(1)

    def _create_transaction(
        *,
        id: str | None = None,
        type: str = "expense",
        amount: float = 100.0,
        description: str = "Test transaction",
        category_id: str = "cat-1",
        date: str = "2024-01-15",
        frequency: str | None = None,
        next_date: str | None = None,
        end_date: str | None = None,
        **overrides,
    ) -> Transaction:
        """Create a transaction with sensible defaults.

        Passing ``frequency`` makes it a recurring transaction.
        """
        recurrence = (
            Recurrence(frequency=frequency, next_date=next_date, end_date=end_date)
            if frequency
            else None
        )
        return Transaction(
            id=id or f"tx-{next(ids)}",
            type=type,
            amount=amount,
            description=description,
            category_id=category_id,
            date=date,
            created_at=f"{date}T10:00:00Z",
            is_recurring=recurrence is not None,
            recurrence=recurrence,
            **overrides,
        )

    return _create_transaction


# =============================================================================
# Helper Utilities
# =============================================================================


def assert_float_equal(actual: float, expected: float, tolerance: float = 0.01):
    """Assert that two floats are equal within a tolerance.

    Money math uses binary floats, so sums can differ from the decimal
    expectation by a tiny amount.

    Args:
        actual: Actual value
        expected: Expected value
        tolerance: Maximum allowed difference (default 0.01 = 1 cent)

    Raises:
        AssertionError: If values differ by more than tolerance
    """
    assert (
        abs(actual - expected) < tolerance
    ), f"Expected {expected}, got {actual} (diff: {abs(actual - expected)})"
