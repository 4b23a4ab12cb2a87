"""Tests for CLI commands."""

import pytest

from hotelledger.cli.main import cli


@pytest.fixture
def db_args(temp_db):
    return ["--db-path", temp_db.database_path]


@pytest.fixture
def imported(cli_runner, db_args, write_saldenliste, sample_rows):
    """Import two months of exports through the CLI."""
    june = write_saldenliste(6, 2024, sample_rows)
    july = write_saldenliste(
        7,
        2024,
        [
            ("4400", "Logis Erlöse 7%", "4", "0,00", "15.000,00", "-15.000,00"),
            ("5500", "Wareneinsatz Küche", "5", "2.000,00", "0,00", "2.000,00"),
            ("1200", "Bank", "1", "1,00", "0,00", "1,00"),
        ],
    )
    result = cli_runner.invoke(cli, db_args + ["import", str(june), str(july)])
    assert result.exit_code == 0, result.output
    return result


def test_help(cli_runner):
    """Test that help works without a database."""
    result = cli_runner.invoke(cli, ["--help"])
    assert result.exit_code == 0
    assert "Saldenliste" in result.output


def test_import_reports_counts(imported):
    assert "Imported Saldenliste-06-2024.csv (Juni 2024):" in imported.output
    assert "Accounts: 4" in imported.output
    assert "Imported Saldenliste-07-2024.csv (Juli 2024):" in imported.output


def test_import_rejects_bad_filename(cli_runner, db_args, tmp_path):
    path = tmp_path / "report.csv"
    path.write_text("KontoNr;Saldo\n4400;1,00\n", encoding="utf-8")

    result = cli_runner.invoke(cli, db_args + ["import", str(path)])

    assert result.exit_code == 1
    assert "Saldenliste-MM-YYYY" in result.output


def test_import_reports_skipped_rows(cli_runner, db_args, write_saldenliste):
    path = write_saldenliste(
        7,
        2024,
        [
            ("4400", "Logis", "4", "0,00", "x", "-1,00"),
            ("5500", "Küche", "5", "1,00", "0,00", "1,00"),
        ],
    )

    result = cli_runner.invoke(cli, db_args + ["import", str(path)])

    assert result.exit_code == 0
    assert "Skipped rows: 1" in result.output
    assert "Row 2" in result.output


def test_compare_defaults_to_latest_period(cli_runner, db_args, imported):
    result = cli_runner.invoke(cli, db_args + ["compare"])

    assert result.exit_code == 0
    assert "Comparison Juli 2024" in result.output
    assert "4400" in result.output
    # Personnel only has a June balance and still shows up
    assert "6200" in result.output


def test_compare_filters(cli_runner, db_args, imported):
    result = cli_runner.invoke(
        cli, db_args + ["compare", "--period", "2024-07", "--kind", "Erlös"]
    )

    assert result.exit_code == 0
    assert "4400" in result.output
    assert "5500" not in result.output


def test_compare_without_uploads(cli_runner, db_args):
    result = cli_runner.invoke(cli, db_args + ["compare"])

    assert result.exit_code == 1
    assert "No uploads found" in result.output


def test_compare_rejects_mixed_period_options(cli_runner, db_args, imported):
    result = cli_runner.invoke(
        cli, db_args + ["compare", "--period", "2024-07", "--year", "2024"]
    )
    assert result.exit_code == 1


def test_areas(cli_runner, db_args, imported):
    result = cli_runner.invoke(cli, db_args + ["areas", "--year", "2024", "--month", "7"])

    assert result.exit_code == 0
    assert "Business areas Juli 2024" in result.output
    assert "Logis" in result.output
    assert "Food & Beverage" in result.output


def test_audit(cli_runner, db_args, imported):
    result = cli_runner.invoke(cli, db_args + ["audit", "--details"])

    assert result.exit_code == 0
    assert "Uploaded periods: 2" in result.output
    assert "1200" in result.output
    assert "Class reconciliation" in result.output


def test_kpi(cli_runner, db_args, imported):
    result = cli_runner.invoke(cli, db_args + ["kpi"])

    assert result.exit_code == 0
    assert "Department KPIs Juli 2024" in result.output
    assert "15.000,00 €" in result.output


def test_accounts_list(cli_runner, db_args, imported):
    result = cli_runner.invoke(cli, db_args + ["accounts", "list", "--area", "Sonstiges"])

    assert result.exit_code == 0
    assert "1200" in result.output
    assert "4400" not in result.output


def test_batch_list_and_remove(cli_runner, db_args, imported):
    result = cli_runner.invoke(cli, db_args + ["batch", "list"])
    assert result.exit_code == 0
    assert "Saldenliste-06-2024.csv" in result.output

    result = cli_runner.invoke(
        cli, db_args + ["batch", "remove", "Saldenliste-06-2024.csv"]
    )
    assert result.exit_code == 0
    assert "balances kept" in result.output

    result = cli_runner.invoke(cli, db_args + ["batch", "list"])
    assert "Saldenliste-06-2024.csv" not in result.output

    # June balances still feed the comparison
    result = cli_runner.invoke(cli, db_args + ["compare", "--period", "2024-07"])
    assert "6200" in result.output


def test_batch_remove_unknown(cli_runner, db_args):
    result = cli_runner.invoke(cli, db_args + ["batch", "remove", "nope.csv"])

    assert result.exit_code == 1
    assert "No upload named" in result.output
