"""CLI smoke tests."""

import logging

import pytest
from click.testing import CliRunner
from soa_postman.cli import cli


def test_cli_displays_help() -> None:
    runner = CliRunner()
    result = runner.invoke(cli, ["--help"])

    assert result.exit_code == 0
    assert "generate" in result.output
    assert "generate-config" in result.output
    assert "--debug" in result.output


@pytest.mark.parametrize(("flags", "level"), [([], logging.INFO), (["--debug"], logging.DEBUG)])
def test_cli_configures_log_level(monkeypatch, flags: list[str], level: int) -> None:
    captured: dict = {}
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: captured.update(kwargs))
    runner = CliRunner()

    result = runner.invoke(cli, [*flags, "generate", "--help"])

    assert result.exit_code == 0
    assert captured["level"] == level
