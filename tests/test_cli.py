"""Tests for CLI commands."""

import functools

import psycopg
import pytest
from click.testing import CliRunner

from ideabank import cli as cli_module
from ideabank.cli import cli
from ideabank.session import Session

from conftest import FakeConnect, FakeConnection


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def use_fake_db(monkeypatch):
    """Route the CLI's Session through a fake psycopg.connect."""
    def install(conn=None, error=None):
        connect = FakeConnect(conn or FakeConnection(), error=error)
        monkeypatch.setattr(cli_module, "Session", functools.partial(Session, connect_fn=connect))
        return connect
    return install


class TestCLIHelp:

    def test_main_help(self, runner):
        result = runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "employees" in result.output
        assert "idea" in result.output
        assert "check" in result.output

    def test_version(self, runner):
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert "0.1.0" in result.output


class TestCheckCommand:

    def test_check_reachable(self, runner, config_file, use_fake_db):
        use_fake_db()
        result = runner.invoke(cli, ["-c", str(config_file), "check"])
        assert result.exit_code == 0
        assert "Connected to the database." in result.output
        assert "Database is reachable" in result.output

    def test_check_missing_config(self, runner, tmp_path, use_fake_db):
        connect = use_fake_db()
        result = runner.invoke(cli, ["-c", str(tmp_path / "missing.txt"), "check"])
        assert result.exit_code == 1
        assert "config error" in result.output
        assert connect.calls == []
        assert "no database connection to close" not in result.output

    def test_check_unreachable(self, runner, config_file, use_fake_db):
        use_fake_db(error=psycopg.OperationalError("connection refused"))
        result = runner.invoke(cli, ["-c", str(config_file), "check"])
        assert result.exit_code == 1
        assert "connection refused" in result.output
        assert "no database connection to close" not in result.output
        assert "Database is reachable" not in result.output


class TestEmployeesCommand:

    def test_lists_employees(self, runner, config_file, use_fake_db):
        use_fake_db(FakeConnection(rows=[
            {"id": 1, "nombre": "Ana", "apellido": "Diaz", "profesion": "Eng"},
        ]))
        result = runner.invoke(cli, ["-c", str(config_file), "employees"])
        assert result.exit_code == 0
        assert "001 Ana Diaz Eng" in result.output

    def test_quiet_prints_nothing(self, runner, config_file, use_fake_db):
        use_fake_db(FakeConnection(rows=[
            {"id": 1, "nombre": "Ana", "apellido": "Diaz", "profesion": "Eng"},
        ]))
        result = runner.invoke(cli, ["-c", str(config_file), "-q", "employees"])
        assert result.exit_code == 0
        assert "Ana" not in result.output


class TestIdeaCommand:

    def test_saves_idea(self, runner, config_file, use_fake_db):
        conn = FakeConnection(rowcount=1)
        use_fake_db(conn)
        result = runner.invoke(cli, ["-c", str(config_file), "idea", "use bound parameters"])
        assert result.exit_code == 0
        assert "The idea has been saved." in result.output
        assert conn.executed[0][1] == ("use bound parameters",)

    def test_empty_idea_rejected(self, runner, config_file, use_fake_db):
        connect = use_fake_db()
        result = runner.invoke(cli, ["-c", str(config_file), "idea", ""])
        assert result.exit_code == 1
        assert "validation error" in result.output
        assert connect.calls == []

    def test_lists_ideas(self, runner, config_file, use_fake_db):
        use_fake_db(FakeConnection(rows=[{"id": 7, "ideabrillante": "café con leche"}]))
        result = runner.invoke(cli, ["-c", str(config_file), "ideas"])
        assert result.exit_code == 0
        assert "007 café con leche" in result.output
