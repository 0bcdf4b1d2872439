"""Tests for the click command group."""

from __future__ import annotations

import csv

import pytest
from click.testing import CliRunner

from netsettle.cli import main


@pytest.fixture
def runner():
    return CliRunner()


def test_settle_prints_payments(runner, write_csv):
    path = write_csv("party_id,balance\n3,35\n4,225\n2,-260\n")

    result = runner.invoke(main, ["settle", str(path)])

    assert result.exit_code == 0, result.output
    assert "Payments:" in result.output
    assert "Payment: 4 -> 2, amount: 225" in result.output
    assert result.output.index("4 -> 2") < result.output.index("3 -> 2")


def test_settle_exports_csv(runner, write_csv, tmp_path):
    path = write_csv("party_id,balance\n1,10\n2,-10\n")
    output = tmp_path / "payments.csv"

    result = runner.invoke(main, ["settle", str(path), "--output", str(output)])

    assert result.exit_code == 0, result.output
    assert f"Payments written: {output}" in result.output
    with output.open(newline="", encoding="utf-8") as fh:
        assert list(csv.DictReader(fh)) == [{"from_party": "1", "to_party": "2", "amount": "10"}]


def test_settle_with_trace(runner, write_csv, isolated_data_dir):
    path = write_csv("party_id,balance\n1,10\n2,-10\n")

    result = runner.invoke(main, ["settle", "--trace", str(path)])

    assert result.exit_code == 0, result.output
    assert "Payment: 1 -> 2, amount: 10" in result.output
    assert "debtor queue:" in result.output
    assert "creditor queue:" in result.output

    log_text = (isolated_data_dir / "logs" / "netsettle.log").read_text(encoding="utf-8")
    assert "debtor queue:" in log_text


def test_settle_unbalanced_fails(runner, write_csv):
    path = write_csv("party_id,balance\n1,10\n2,-5\n")

    result = runner.invoke(main, ["settle", str(path)])

    assert result.exit_code == 1
    assert "balances do not net to zero" in result.output
    assert "Payments:" not in result.output


def test_custom_columns(runner, write_csv):
    path = write_csv("user,net\n1,10\n2,-10\n")

    result = runner.invoke(main, ["--id-column", "user", "--balance-column", "net", "check", str(path)])

    assert result.exit_code == 0, result.output
    assert "OK: 1 debtor(s), 1 creditor(s), total 0" in result.output


def test_check_reports_bad_csv(runner, write_csv):
    path = write_csv("party_id,amount\n1,10\n")

    result = runner.invoke(main, ["check", str(path)])

    assert result.exit_code == 1
    assert "missing columns" in result.output


def test_missing_file_is_usage_error(runner, tmp_path):
    result = runner.invoke(main, ["check", str(tmp_path / "nope.csv")])

    assert result.exit_code == 2
