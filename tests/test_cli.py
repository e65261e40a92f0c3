"""Tests for CLI commands."""

import pytest
from finova.cli.error_handling import resolve_account
from finova.cli.main import cli
from finova.domain.errors import InvalidTransactionError, UnknownAccountError


@pytest.fixture
def invoke(cli_runner, temp_db):
    """Invoke the CLI against the temporary database."""

    def _invoke(*args, input=None):
        return cli_runner.invoke(
            cli, ["--db-path", temp_db.database_path, *args], input=input
        )

    return _invoke


@pytest.fixture
def scenario(invoke):
    """Record the three-entry scenario through the CLI."""
    for args in (
        ["--debit", "cash", "--credit", "capital", "--amount", "5000", "--date", "2024-01-01"],
        ["--debit", "Purchases", "--credit", "cash", "--amount", "2,000", "--date", "2024-01-02"],
        ["--debit", "cash", "--credit", "sales", "--amount", "₹3000", "--date", "2024-01-03"],
    ):
        result = invoke("add", *args)
        assert result.exit_code == 0, result.output


def test_help_does_not_need_database(cli_runner):
    result = cli_runner.invoke(cli, ["--help"])

    assert result.exit_code == 0
    assert "trial-balance" in result.output


def test_accounts_hides_overdraft(invoke):
    result = invoke("accounts")

    assert result.exit_code == 0
    assert "cash" in result.output
    assert "overdraft" not in result.output

    result = invoke("accounts", "--all")
    assert "overdraft" in result.output
    assert "(hidden)" in result.output


def test_add_entry(invoke):
    result = invoke(
        "add", "--debit", "cash", "--credit", "capital", "--amount", "5000",
        "--date", "2024-01-15", "--narration", "Started business",
    )

    assert result.exit_code == 0
    assert "Created transaction 1" in result.output
    assert "Cash A/c Dr" in result.output
    assert "To Owner's Capital A/c" in result.output
    assert "5,000.00" in result.output


def test_add_same_accounts_fails(invoke):
    result = invoke("add", "--debit", "cash", "--credit", "Cash", "--amount", "10")

    assert result.exit_code == 1
    assert "cannot be the same" in result.output


def test_add_unknown_account_fails(invoke):
    result = invoke("add", "--debit", "mystery", "--credit", "cash", "--amount", "10")

    assert result.exit_code == 1
    assert "mystery" in result.output


@pytest.mark.parametrize("account", ["overdraft", "Bank Overdraft"])
def test_add_hidden_account_fails(invoke, account):
    result = invoke("add", "--debit", "cash", "--credit", account, "--amount", "100")

    assert result.exit_code == 1
    assert "not selectable" in result.output
    assert "No transactions found." in invoke("journal").output


def test_resolve_account_by_id_or_name(chart):
    assert resolve_account(chart, " Owner's capital ") == "capital"
    assert resolve_account(chart, "bank") == "bank"
    with pytest.raises(UnknownAccountError):
        resolve_account(chart, "mystery")
    with pytest.raises(InvalidTransactionError):
        resolve_account(chart, "overdraft")


def test_add_negative_amount_fails(invoke):
    result = invoke("add", "--debit", "cash", "--credit", "sales", "--amount", "(10)")

    assert result.exit_code == 1
    assert "must be positive" in result.output


def test_add_invalid_date_fails(invoke):
    result = invoke(
        "add", "--debit", "cash", "--credit", "sales", "--amount", "10", "--date", "not a date"
    )

    assert result.exit_code == 1
    assert "Invalid date format" in result.output


def test_journal_newest_first(invoke, scenario):
    result = invoke("journal")

    assert result.exit_code == 0
    assert "Found 3 transaction(s)" in result.output
    assert result.output.index("2024-01-03") < result.output.index("2024-01-01")

    result = invoke("journal", "--limit", "1")
    assert "Found 1 transaction(s)" in result.output


def test_journal_empty(invoke):
    result = invoke("journal")

    assert result.exit_code == 0
    assert "No transactions found." in result.output


def test_ledger(invoke, scenario):
    result = invoke("ledger", "Cash")

    assert result.exit_code == 0
    assert "Cash Ledger" in result.output
    assert "To Owner's Capital" in result.output
    assert "By Purchases" in result.output
    assert "6,000.00" in result.output


def test_ledger_unknown_account(invoke):
    result = invoke("ledger", "mystery")

    assert result.exit_code == 1
    assert "Error:" in result.output


def test_trial_balance(invoke, scenario):
    result = invoke("trial-balance")

    assert result.exit_code == 0
    assert "8,000.00" in result.output
    assert "Trial Balance is Balanced!" in result.output


def test_trading_pl(invoke, scenario):
    result = invoke("trading-pl")

    assert result.exit_code == 0
    assert "Gross Profit c/d" in result.output
    assert "Gross Profit b/d" in result.output
    assert "Net Profit: 1,000.00" in result.output


def test_balance_sheet(invoke, scenario):
    result = invoke("balance-sheet")

    assert result.exit_code == 0
    assert "Capital (+NP, -Drawings)" in result.output
    assert "Balance Sheet is Balanced!" in result.output
    assert "Financial Position: POSITIVE" in result.output
    assert "Assets exceed liabilities by 6,000.00" in result.output
    assert "(Verified)" in result.output


def test_balance_sheet_overdraft(invoke):
    invoke("add", "--debit", "cash", "--credit", "bank", "--amount", "100")

    result = invoke("balance-sheet")

    assert result.exit_code == 0
    assert "Bank Overdraft" in result.output
    assert "Financial Position: BALANCED" in result.output


def test_edit_entry(invoke, scenario):
    result = invoke("edit", "3", "--amount", "1500", "--narration", "Discounted sale")

    assert result.exit_code == 0
    assert "Updated transaction 3" in result.output

    result = invoke("trading-pl")
    assert "Net Loss: 500.00" in result.output


def test_edit_missing_entry(invoke):
    result = invoke("edit", "42", "--amount", "10")

    assert result.exit_code == 1
    assert "Transaction 42 not found" in result.output


def test_delete_entry(invoke, scenario):
    result = invoke("delete", "2", "--yes")

    assert result.exit_code == 0
    assert "Deleted transaction 2" in result.output
    assert "Found 2 transaction(s)" in invoke("journal").output


def test_delete_requires_confirmation(invoke, scenario):
    result = invoke("delete", "2", input="n\n")

    assert result.exit_code == 0
    assert "Cancelled." in result.output
    assert "Found 3 transaction(s)" in invoke("journal").output


def test_owner_isolation(invoke, scenario):
    result = invoke("--owner", "alice", "journal")

    assert "No transactions found." in result.output

    result = invoke("--owner", "alice", "delete", "1", "--yes")
    assert result.exit_code == 1


def test_trend(invoke, scenario):
    result = invoke("trend", "--limit", "2")

    assert result.exit_code == 0
    assert "2024-01-01" not in result.output
    assert "-2,000.00" in result.output
    assert "1,000.00" in result.output


def test_dashboard(invoke, scenario):
    result = invoke("dashboard")

    assert result.exit_code == 0
    assert "Total Assets:" in result.output
    assert "6,000.00" in result.output
    assert "Net Profit:" in result.output
    assert "Recent Transactions" in result.output
