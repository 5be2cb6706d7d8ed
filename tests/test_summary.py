"""Tests for summary command."""

import json
from datetime import date
from decimal import Decimal

from fintrack.cli.main import cli
from fintrack.domain.entities import TransactionType


def test_summary_empty(cli_runner, temp_db):
    """Summary of an empty ledger is all zeros."""
    result = cli_runner.invoke(cli, ["--db-path", temp_db.database_path, "summary"])

    assert result.exit_code == 0
    assert "Dashboard Summary" in result.output
    assert "$0.00" in result.output


def test_summary_basic(cli_runner, temp_db, sample_transactions):
    result = cli_runner.invoke(cli, ["--db-path", temp_db.database_path, "summary"])

    assert result.exit_code == 0
    assert "Total Income" in result.output
    assert "$125.50" in result.output
    assert "Total Expense" in result.output
    assert "$40.00" in result.output
    assert "Balance" in result.output
    assert "$85.50" in result.output


def test_summary_negative_balance(cli_runner, temp_db, transaction_service):
    for amount in ("10", "5"):
        transaction_service.create_transaction(
            date=date(2024, 1, 1), amount=Decimal(amount), type=TransactionType.EXPENSE
        )

    result = cli_runner.invoke(cli, ["--db-path", temp_db.database_path, "summary"])

    assert result.exit_code == 0
    assert "$15.00" in result.output
    assert "$-15.00" in result.output


def test_summary_json(cli_runner, temp_db, sample_transactions):
    result = cli_runner.invoke(
        cli, ["--db-path", temp_db.database_path, "summary", "--json"]
    )

    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    assert set(payload) == {"totalIncome", "totalExpense", "balance"}
    assert Decimal(payload["totalIncome"]) == Decimal("125.50")
    assert Decimal(payload["totalExpense"]) == Decimal("40.00")
    assert Decimal(payload["balance"]) == Decimal("85.50")


def test_summary_json_empty(cli_runner, temp_db):
    result = cli_runner.invoke(
        cli, ["--db-path", temp_db.database_path, "summary", "--json"]
    )

    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    assert all(Decimal(value) == 0 for value in payload.values())


def test_summary_after_cli_writes(cli_runner, temp_db):
    base = ["--db-path", temp_db.database_path]
    cli_runner.invoke(cli, base + ["add", "--date", "2024-01-01", "--amount", "100", "--type", "income"])
    cli_runner.invoke(cli, base + ["add", "--date", "2024-01-02", "--amount", "30.25", "--type", "expense"])

    result = cli_runner.invoke(cli, base + ["summary", "--json"])

    assert result.exit_code == 0
    assert Decimal(json.loads(result.stdout)["balance"]) == Decimal("69.75")


def test_summary_logs_at_debug_level(cli_runner, temp_db, sample_transactions):
    result = cli_runner.invoke(
        cli, ["--db-path", temp_db.database_path, "--log-level", "debug", "summary"]
    )

    assert result.exit_code == 0
    assert "Summarized 3 transactions" in result.output
    assert "$85.50" in result.output


def test_summary_rejects_stored_unknown_type(cli_runner, temp_db, sample_transactions, insert_raw_transaction):
    bad_id = insert_raw_transaction("20.00", "REFUND")

    result = cli_runner.invoke(cli, ["--db-path", temp_db.database_path, "summary"])

    assert result.exit_code == 1
    assert f"Error: Malformed transaction record {bad_id}" in result.output
    assert "REFUND" in result.output
    assert "Dashboard Summary" not in result.output


def test_summary_json_rejects_stored_unknown_type(cli_runner, temp_db, insert_raw_transaction):
    insert_raw_transaction("5", "refund")

    result = cli_runner.invoke(
        cli, ["--db-path", temp_db.database_path, "summary", "--json"]
    )

    assert result.exit_code == 1
    assert "Malformed transaction record" in result.output
    assert "totalIncome" not in result.output
