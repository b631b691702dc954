"""CLI error-handling tests."""

from __future__ import annotations

from pathlib import Path

from field_flattener.cli import main


def test_missing_required_option_returns_clean_click_error(capsys) -> None:
    exit_code = main(["export-sheet", "--output", "/tmp/out.xlsx"])
    captured = capsys.readouterr()

    assert exit_code == 2
    assert "Missing option" in captured.err
    assert "--config" in captured.err
    assert "Traceback" not in captured.err


def test_unknown_option_returns_clean_click_error(capsys) -> None:
    exit_code = main(["flatten", "--bogus"])
    captured = capsys.readouterr()

    assert exit_code == 2
    assert "No such option: --bogus" in captured.err
    assert "Traceback" not in captured.err


def test_missing_configuration_returns_error_exit_code(tmp_path: Path, capsys) -> None:
    exit_code = main(["flatten", "--config", str(tmp_path / "absent.yaml")])
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "Configuration file not found" in captured.err
    assert "Traceback" not in captured.err


def test_generate_config_refuses_to_overwrite(tmp_path: Path, capsys) -> None:
    output_path = tmp_path / "fields.yaml"
    output_path.write_text("existing", encoding="utf-8")

    exit_code = main(["generate-config", "--output", str(output_path)])
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "already exists" in captured.err


def test_unreadable_configuration_returns_error_exit_code(tmp_path: Path, capsys) -> None:
    config_dir = tmp_path / "fields.yaml"
    config_dir.mkdir()

    exit_code = main(["flatten", "--config", str(config_dir)])
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "Cannot read configuration file" in captured.err
    assert "Traceback" not in captured.err


def test_field_file_with_invalid_utf8_returns_error_exit_code(tmp_path: Path, capsys) -> None:
    (tmp_path / "broken.yaml").write_bytes(b"\xff\xfe- type: text\n")
    config_path = tmp_path / "fields.yaml"
    config_path.write_text(
        "collections:\n  - slug: broken\n    path: broken.yaml\n", encoding="utf-8"
    )

    exit_code = main(
        ["export-sheet", "--config", str(config_path), "--output", str(tmp_path / "out.xlsx")]
    )
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "Cannot read field definition file" in captured.err
    assert "Traceback" not in captured.err
