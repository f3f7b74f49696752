"""CLI error-handling tests."""

from __future__ import annotations

from pathlib import Path

from soa_postman.cli import main


def test_missing_required_option_returns_clean_click_error(capsys) -> None:
    exit_code = main(["generate", "--output", "/tmp/out.json"])
    captured = capsys.readouterr()

    assert exit_code == 2
    assert "Missing option" in captured.err
    assert "--structure" in captured.err
    assert "Traceback" not in captured.err


def test_unknown_option_returns_clean_click_error(capsys) -> None:
    exit_code = main(["generate", "--bogus"])
    captured = capsys.readouterr()

    assert exit_code == 2
    assert "No such option: --bogus" in captured.err
    assert "Traceback" not in captured.err


def test_generation_failure_is_reported_without_traceback(tmp_path: Path, capsys) -> None:
    exit_code = main(
        [
            "generate",
            "--structure",
            str(tmp_path / "missing.js"),
            "--output",
            str(tmp_path / "out.json"),
        ]
    )
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "Structure file not found" in captured.err
    assert "Traceback" not in captured.err


def test_undecodable_configuration_is_reported_without_traceback(
    tmp_path: Path, capsys
) -> None:
    structure_path = tmp_path / "structure.js"
    structure_path.write_text('var structure = {"Teamcenter": {}};', encoding="utf-8")
    config_path = tmp_path / "config.yaml"
    config_path.write_bytes(b"\xff\xfe\x00bad")

    exit_code = main(
        [
            "generate",
            "--structure",
            str(structure_path),
            "--output",
            str(tmp_path / "out.json"),
            "--config",
            str(config_path),
        ]
    )
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "Failed to read configuration file" in captured.err
    assert "Traceback" not in captured.err
