"""Tests for the click command-line interface."""

from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner

from hagu_finance.cli import cli


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def ledger_csv(tmp_path: Path) -> Path:
    path = tmp_path / "ledger.csv"
    path.write_text(
        "\n".join(
            [
                "id,type,amount,description,category_id,date",
                "t1,income,5000,Salary,salary,2024-01-05",
                "t2,expense,800,Market,food,2024-01-08",
                "t3,expense,200,Bus,transport,2024-01-12",
                "t4,expense,300,Dinner,food,2024-02-02",
            ]
        ),
        encoding="utf-8",
    )
    return path


class TestSummaryCommand:
    def test_month_summary(self, runner, ledger_csv):
        result = runner.invoke(
            cli, ["summary", str(ledger_csv), "--month", "2024-01", "--currency", "USD"]
        )

        assert result.exit_code == 0, result.output
        assert "janeiro de 2024" in result.output
        assert "Income:       $5,000.00" in result.output
        assert "Expenses:     $1,000.00" in result.output
        assert "Balance:      $4,000.00" in result.output
        assert "Transactions: 3" in result.output
        assert "food: $800.00 (80.0%, 1 txn)" in result.output
        assert "salary: $5,000.00 (100.0%, 1 txn)" in result.output

    def test_invalid_month(self, runner, ledger_csv):
        result = runner.invoke(cli, ["summary", str(ledger_csv), "--month", "2024-13"])

        assert result.exit_code == 2
        assert "expected YYYY-MM" in result.output

    def test_currency_from_environment(self, runner, ledger_csv, monkeypatch):
        monkeypatch.setenv("HAGU_CURRENCY", "EUR")
        monkeypatch.setenv("HAGU_LOCALE", "de-DE")

        result = runner.invoke(cli, ["summary", str(ledger_csv), "--month", "2024-02"])

        assert result.exit_code == 0, result.output
        assert "Februar 2024" in result.output
        assert "300,00\u00a0€" in result.output


class TestTrendCommand:
    def test_lists_requested_months(self, runner, ledger_csv):
        result = runner.invoke(cli, ["trend", str(ledger_csv), "--months", "3"])

        assert result.exit_code == 0, result.output
        assert len(result.output.strip().splitlines()) == 3


class TestNextDateCommand:
    def test_monthly_overflow(self, runner):
        result = runner.invoke(cli, ["next-date", "2024-01-31", "monthly"])

        assert result.exit_code == 0
        assert result.output.strip() == "2024-03-02"

    def test_rejects_bad_format(self, runner):
        result = runner.invoke(cli, ["next-date", "31/01/2024", "daily"])

        assert result.exit_code == 2
        assert "expected YYYY-MM-DD" in result.output

    def test_rejects_impossible_date(self, runner):
        assert runner.invoke(cli, ["next-date", "2024-02-30", "daily"]).exit_code == 2

    def test_rejects_unknown_frequency(self, runner):
        assert runner.invoke(cli, ["next-date", "2024-01-01", "hourly"]).exit_code == 2


class TestProjectCommand:
    def test_zero_rate_projection(self, runner):
        result = runner.invoke(
            cli,
            [
                "project",
                "--principal", "1000",
                "--monthly", "100",
                "--rate", "0",
                "--years", "2",
                "--currency", "USD",
            ],
        )

        assert result.exit_code == 0, result.output
        assert "Year  1: $2,200.00" in result.output
        assert "Final amount:      $3,400.00" in result.output
        assert "Total interest:    $0.00" in result.output

    def test_accepts_typed_amounts_and_writes_chart(self, runner, tmp_path: Path):
        chart_path = tmp_path / "projection.png"

        result = runner.invoke(
            cli,
            [
                "project",
                "--principal", "R$ 1.000,00",
                "--rate", "10",
                "--years", "1",
                "--compounding", "yearly",
                "--chart", str(chart_path),
            ],
        )

        assert result.exit_code == 0, result.output
        assert "Total contributed: R$\u00a01.000,00" in result.output
        assert "Final amount:      R$\u00a01.100,00" in result.output
        assert chart_path.exists()


    def test_rejects_text_without_digits(self, runner):
        result = runner.invoke(
            cli, ["project", "--principal", "100", "--rate", "abc", "--years", "1"]
        )

        assert result.exit_code == 2
        assert "'abc' is not an amount" in result.output
        assert "Final amount" not in result.output


class TestChartCommand:
    def test_writes_png(self, runner, ledger_csv, tmp_path: Path):
        output = tmp_path / "charts" / "jan.png"

        result = runner.invoke(
            cli, ["chart", str(ledger_csv), "--month", "2024-01", "--output", str(output)]
        )

        assert result.exit_code == 0, result.output
        assert output.read_bytes().startswith(b"\x89PNG")
