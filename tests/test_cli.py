"""
End-to-end tests for the Typer CLI.
"""
import json
import logging

import pytest
from pydantic import ValidationError
from typer.testing import CliRunner

from cli.main import app
from core.config import get_user_env_file
from core.logging_setup import LOGGER_NAME, configure_logging


@pytest.fixture
def runner():
    return CliRunner()


def test_add(runner):
    result = runner.invoke(app, ["add", "2", "3"])
    assert result.exit_code == 0
    assert result.stdout.strip() == "5"


def test_add_floats_use_precision(runner, monkeypatch):
    monkeypatch.setenv("RESTDOC_FLOAT_PRECISION", "2")
    result = runner.invoke(app, ["add", "0.5", "0.25"])
    assert result.exit_code == 0
    assert result.stdout.strip() == "0.75"


def test_add_rejects_non_number(runner):
    result = runner.invoke(app, ["add", "two", "3"])
    assert result.exit_code == 2


def test_divide(runner):
    result = runner.invoke(app, ["divide", "4", "2"])
    assert result.exit_code == 0
    assert result.stdout.strip() == "2.0000"


def test_divide_by_zero(runner):
    result = runner.invoke(app, ["divide", "4", "0"])
    assert result.exit_code == 1
    assert "Cannot divide by zero." in result.output


def test_greet(runner):
    assert runner.invoke(app, ["greet"]).stdout.strip() == "Hello, there!"
    assert runner.invoke(app, ["greet", "Ada"]).stdout.strip() == "Hello, Ada!"
    assert runner.invoke(app, ["greet", "Ada", "--spanish"]).stdout.strip() == "¡Hola, Ada!"


def test_greet_uses_configured_language(runner, monkeypatch):
    monkeypatch.setenv("RESTDOC_DEFAULT_LANGUAGE", "es")
    assert runner.invoke(app, ["greet"]).stdout.strip() == "¡Hola!"


def test_greet_blank_name(runner):
    result = runner.invoke(app, ["greet", "   "])
    assert result.exit_code == 2


def test_calc(runner):
    assert runner.invoke(app, ["calc", "add", "2", "3"]).stdout.strip() == "5"
    assert runner.invoke(app, ["calc", "subtract", "5", "3"]).stdout.strip() == "2"


def test_showcase_passes_and_exports_json(runner, isolated_config):
    output = isolated_config / "report.json"
    result = runner.invoke(app, ["showcase", "--no-banner", "--json", str(output)])

    assert result.exit_code == 0
    assert "7/7 examples passed" in result.stdout
    payload = json.loads(output.read_text(encoding="utf-8"))
    assert payload["total"] == 7
    assert payload["failed_count"] == 0


def test_showcase_only(runner, isolated_config):
    output = isolated_config / "only.json"
    result = runner.invoke(
        app,
        ["showcase", "--no-banner", "--only", "greet", "--only", "add", "--json", str(output)],
    )

    assert result.exit_code == 0
    payload = json.loads(output.read_text(encoding="utf-8"))
    assert [r["name"] for r in payload["results"]] == ["add", "greet"]


def test_showcase_unknown_name(runner):
    result = runner.invoke(app, ["showcase", "--no-banner", "--only", "missing"])
    assert result.exit_code == 2


def test_doctor_set_language(runner):
    result = runner.invoke(app, ["doctor", "set-language", "es"])
    assert result.exit_code == 0
    assert "RESTDOC_DEFAULT_LANGUAGE=es" in get_user_env_file().read_text(encoding="utf-8")

    assert runner.invoke(app, ["greet"]).stdout.strip() == "¡Hola!"


def test_doctor_run(runner):
    result = runner.invoke(app, ["doctor", "run"])
    assert result.exit_code == 0
    assert "English" in result.stdout


def test_configure_logging_is_idempotent():
    logger = configure_logging("DEBUG")
    configure_logging("DEBUG")
    assert logger.name == LOGGER_NAME
    assert len(logger.handlers) == 1
    assert logger.level == logging.DEBUG


@pytest.mark.parametrize(
    "args,expected",
    [
        (["add", "-2", "3"], "1"),
        (["add", "2", "-3.5"], "-1.5000"),
        (["divide", "-4", "2"], "-2.0000"),
        (["calc", "subtract", "-5", "3"], "-8"),
        (["calc", "add", "-2", "-3"], "-5"),
    ],
)
def test_negative_operands(runner, args, expected):
    result = runner.invoke(app, args)
    assert result.exit_code == 0
    assert result.stdout.strip() == expected


def test_showcase_blank_only_is_usage_error(runner):
    result = runner.invoke(app, ["showcase", "--no-banner", "--only", ""])
    assert result.exit_code == 2


def test_invalid_setting_exits_cleanly(runner, monkeypatch):
    monkeypatch.setenv("RESTDOC_LOG_LEVEL", "chatty")

    result = runner.invoke(app, ["add", "2", "3"])

    assert result.exit_code == 1
    assert not isinstance(result.exception, ValidationError)
    assert "Invalid configuration" in result.output
