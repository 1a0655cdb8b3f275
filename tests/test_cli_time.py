"""Tests for time and period commands."""

import pytest
from datetime import date
from billable.cli.main import cli


def test_time_report(cli_runner, temp_db, sample_client):
    """Test reporting time with the client's default charge."""
    result = cli_runner.invoke(
        cli,
        [
            "--db-path", temp_db.database_path,
            "time", "report", "--client", "Acme", "--date", "2024-01-15",
            "--duration", "2:30", "--description", "Planning",
        ],
    )

    assert result.exit_code == 0
    assert "Created timeslot 1" in result.output
    assert "Hours: 2.5" in result.output
    assert "Rate: $100.00/hour" in result.output
    assert "Amount: $250.00" in result.output

    slot = temp_db.get_timeslot(1)
    assert slot.description == "Planning"


def test_time_report_other_currency(cli_runner, temp_db, sample_client):
    result = cli_runner.invoke(
        cli,
        [
            "--db-path", temp_db.database_path,
            "time", "report", "--client", "1", "--date", "2024-01-15",
            "--duration", "1", "--charge", "8000", "--currency", "JPY",
        ],
    )

    assert result.exit_code == 0
    assert "Amount: ¥8,000" in result.output


def test_time_report_invalid_duration(cli_runner, temp_db, sample_client):
    result = cli_runner.invoke(
        cli,
        ["--db-path", temp_db.database_path, "time", "report", "--client", "Acme", "--duration", "soon"],
    )

    assert result.exit_code == 1
    assert "Invalid amount 'soon'" in result.output


def test_time_report_charge_too_large(cli_runner, temp_db, sample_client):
    result = cli_runner.invoke(
        cli,
        [
            "--db-path", temp_db.database_path,
            "time", "report", "--client", "Acme", "--date", "2024-01-15",
            "--duration", "1", "--charge", "1e100",
        ],
    )

    assert result.exit_code == 1
    assert "amount too large" in result.output
    assert temp_db.list_timeslots() == []


def test_time_report_invalid_date(cli_runner, temp_db, sample_client):
    result = cli_runner.invoke(
        cli,
        [
            "--db-path", temp_db.database_path,
            "time", "report", "--client", "Acme", "--date", "someday", "--duration", "1",
        ],
    )

    assert result.exit_code == 1
    assert "Invalid date format" in result.output


def test_time_report_unknown_client(cli_runner, temp_db):
    result = cli_runner.invoke(
        cli,
        ["--db-path", temp_db.database_path, "time", "report", "--client", "Nobody", "--duration", "1"],
    )

    assert result.exit_code == 1
    assert "Client 'Nobody' not found" in result.output


def test_time_list(cli_runner, temp_db, timeslot_service, sample_client, euro_client):
    timeslot_service.report_time(sample_client.id, date(2024, 1, 15), "2")
    timeslot_service.report_time(euro_client.id, date(2024, 1, 15), "1")
    timeslot_service.report_time(sample_client.id, date(2024, 1, 20), "3")

    result = cli_runner.invoke(
        cli, ["--db-path", temp_db.database_path, "time", "list", "--date", "2024-01-15"]
    )

    assert result.exit_code == 0
    assert "Found 2 timeslot(s)" in result.output
    assert "$200.00" in result.output
    assert "€60.00" in result.output

    result = cli_runner.invoke(
        cli,
        ["--db-path", temp_db.database_path, "time", "list", "--date", "2024-01-15", "--month", "--client", "Acme"],
    )

    assert result.exit_code == 0
    assert "Found 2 timeslot(s)" in result.output
    assert "Globex" not in result.output


def test_time_list_empty(cli_runner, temp_db):
    result = cli_runner.invoke(
        cli, ["--db-path", temp_db.database_path, "time", "list", "--date", "2024-01-15"]
    )

    assert result.exit_code == 0
    assert "No timeslots found." in result.output


def test_time_update(cli_runner, temp_db, timeslot_service, sample_client):
    timeslot_id = timeslot_service.report_time(sample_client.id, date(2024, 1, 15), "2")

    result = cli_runner.invoke(
        cli,
        ["--db-path", temp_db.database_path, "time", "update", str(timeslot_id), "--duration", "3", "--charge", "90"],
    )

    assert result.exit_code == 0
    assert f"Updated timeslot {timeslot_id}: 3 hours at $90.00/hour" in result.output


def test_time_update_missing(cli_runner, temp_db):
    result = cli_runner.invoke(
        cli, ["--db-path", temp_db.database_path, "time", "update", "99", "--duration", "3"]
    )

    assert result.exit_code == 1
    assert "Timeslot 99 not found" in result.output


def test_time_delete(cli_runner, temp_db, timeslot_service, sample_client):
    timeslot_id = timeslot_service.report_time(sample_client.id, date(2024, 1, 15), "2")

    result = cli_runner.invoke(
        cli, ["--db-path", temp_db.database_path, "time", "delete", str(timeslot_id), "--yes"]
    )

    assert result.exit_code == 0
    assert f"Deleted timeslot {timeslot_id}" in result.output
    assert temp_db.get_timeslot(timeslot_id) is None


class TestPeriodCommands:
    """Tests for period commands."""

    def test_period_list(self, cli_runner, temp_db, sample_client, euro_client):
        result = cli_runner.invoke(
            cli, ["--db-path", temp_db.database_path, "period", "list", "--client", "Globex"]
        )

        assert result.exit_code == 0
        assert "2024-01-01 to 2024-01-31" in result.output
        assert f"Client: {euro_client.id:3d}" in result.output
        assert f"Client: {sample_client.id:3d}" not in result.output

    def test_period_close_and_open_new(self, cli_runner, temp_db, sample_client):
        period = temp_db.get_open_period(sample_client.id)

        result = cli_runner.invoke(
            cli,
            [
                "--db-path", temp_db.database_path,
                "period", "close", str(period.id),
                "--open-new", "--start", "2024-02-01", "--end", "2024-02-29",
            ],
        )

        assert result.exit_code == 0
        assert f"Closed period {period.id}" in result.output
        assert "(2024-02-01 to 2024-02-29)" in result.output

        result = cli_runner.invoke(
            cli, ["--db-path", temp_db.database_path, "period", "list", "--open"]
        )
        assert "2024-02-01 to 2024-02-29" in result.output
        assert "2024-01-01 to 2024-01-31" not in result.output

    def test_period_close_twice(self, cli_runner, temp_db, sample_client):
        period = temp_db.get_open_period(sample_client.id)
        args = ["--db-path", temp_db.database_path, "period", "close", str(period.id)]

        assert cli_runner.invoke(cli, args).exit_code == 0
        result = cli_runner.invoke(cli, args)

        assert result.exit_code == 1
        assert "already closed" in result.output

    def test_period_open(self, cli_runner, temp_db, period_service, sample_client):
        period_service.close_period(temp_db.get_open_period(sample_client.id).id)

        result = cli_runner.invoke(
            cli,
            [
                "--db-path", temp_db.database_path,
                "period", "open", "Acme", "--start", "2024-03-01", "--end", "2024-03-31",
            ],
        )

        assert result.exit_code == 0
        assert "(2024-03-01 to 2024-03-31)" in result.output
        assert temp_db.get_open_period(sample_client.id).start_date == date(2024, 3, 1)
