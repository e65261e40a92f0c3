"""Tests for the report service."""

import logging
from datetime import date
from decimal import Decimal

import pytest

from finova.domain.entities import PositionVerdict
from finova.domain.errors import UnknownAccountError


def test_build_all_from_one_snapshot(report_service, recorded_scenario):
    reports = report_service.build_all("admin")

    assert reports.balances["cash"] == Decimal("6000")
    assert reports.trial_balance.total_debit == Decimal("8000")
    assert reports.trial_balance.is_balanced
    assert reports.trading_pl.net_profit == Decimal("1000")
    assert reports.dashboard.net_profit == Decimal("1000")
    assert reports.balance_sheet.is_balanced
    assert reports.balance_sheet.position.verdict == PositionVerdict.POSITIVE
    assert [p.cumulative_profit for p in reports.profit_trend] == [
        Decimal("0"),
        Decimal("-2000"),
        Decimal("1000"),
    ]


def test_reports_follow_every_change(report_service, transaction_service, recorded_scenario):
    assert report_service.trading_pl("admin").net_profit == Decimal("1000")

    transaction_service.replace_transaction(
        recorded_scenario[2], owner="admin", amount=Decimal("1500")
    )
    assert report_service.trading_pl("admin").net_profit == Decimal("-500")

    transaction_service.delete_transaction(recorded_scenario[1], owner="admin")
    assert report_service.trading_pl("admin").net_profit == Decimal("1500")


def test_reports_are_scoped_to_owner(report_service, transaction_service, recorded_scenario):
    transaction_service.record_transaction(
        owner="alice", date=date(2024, 1, 1), debit="cash", credit="sales",
        amount=Decimal("999"),
    )

    assert report_service.balances("admin")["sales"] == Decimal("-3000")
    assert report_service.balances("alice") == {
        "cash": Decimal("999"),
        "sales": Decimal("-999"),
    }
    assert report_service.trial_balance("nobody").rows == ()


def test_overdraft_through_service(report_service, transaction_service):
    transaction_service.record_transaction(
        owner="admin", date=date(2024, 1, 1), debit="cash", credit="bank",
        amount=Decimal("100"),
    )

    sheet = report_service.balance_sheet("admin")

    assert "bank" not in [line.account_id for line in sheet.assets]
    overdraft = [line for line in sheet.liabilities if line.account_id == "overdraft"]
    assert overdraft[0].amount == Decimal("100.00")


def test_ledger_and_trend(report_service, recorded_scenario):
    entries = report_service.ledger("admin", "cash")
    assert entries[-1].balance == Decimal("6000")

    points = report_service.profit_trend("admin", limit=1)
    assert len(points) == 1
    assert points[0].date == date(2024, 1, 3)

    with pytest.raises(UnknownAccountError):
        report_service.ledger("admin", "mystery")


def test_unknown_accounts_are_logged(report_service, temp_db, caplog):
    # Written straight to storage, bypassing service validation
    temp_db.create_transaction(
        owner="admin", date=date(2024, 1, 1), debit="cash", credit="mystery",
        amount=Decimal("50"),
    )

    with caplog.at_level(logging.WARNING, logger="finova"):
        report = report_service.trial_balance("admin")

    assert [row.account_id for row in report.rows] == ["cash"]
    assert not report.is_balanced
    messages = [record.getMessage() for record in caplog.records]
    assert any("mystery" in message for message in messages)
    assert any("out of balance by 50.00" in message for message in messages)
