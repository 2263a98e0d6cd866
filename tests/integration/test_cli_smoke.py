from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest
from typer.testing import CliRunner

from statcore.cli.main import app

CSV = "group,score\nA,10\nA,20\nA,30\nB,40\nB,50\nB,60\n"


@pytest.fixture
def data_file(tmp_path: Path) -> Path:
    path = tmp_path / "scores.csv"
    path.write_text(CSV, encoding="utf-8")
    return path


def test_cli_version_flag() -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["--version"])
    assert result.exit_code == 0
    assert "statcore" in result.stdout


def test_cli_describe_smoke(data_file: Path) -> None:
    runner = CliRunner()
    result = runner.invoke(
        app,
        ["stats", "describe", "--data", str(data_file), "--columns", "score", "--group-by", "group"],
    )
    assert result.exit_code == 0, result.output

    payload = json.loads(result.stdout)
    assert payload["method"] == "Descriptive Statistics"
    assert payload["data_info"]["file_path"] == str(data_file)
    assert payload["details"]["groups"]["A"][0]["mean"] == pytest.approx(20.0)


def test_cli_describe_empty_group_is_null(tmp_path: Path) -> None:
    path = tmp_path / "gaps.csv"
    path.write_text("g,x\nA,1\nA,2\nB,NA\n", encoding="utf-8")

    runner = CliRunner()
    result = runner.invoke(app, ["stats", "describe", "--data", str(path), "--group-by", "g"])
    assert result.exit_code == 0, result.output

    payload = json.loads(result.stdout)
    assert payload["details"]["groups"]["B"][0]["mean"] is None


def test_cli_ttest_smoke(data_file: Path) -> None:
    runner = CliRunner()
    result = runner.invoke(
        app,
        [
            "stats",
            "ttest",
            "--data",
            str(data_file),
            "--variable",
            "score",
            "--group-by-column",
            "group",
            "--alternative",
            "greater",
        ],
    )
    assert result.exit_code == 0, result.output

    payload = json.loads(result.stdout)
    assert payload["method"] == "T-Test"
    assert payload["details"]["mean_difference"] == pytest.approx(-30.0)
    assert payload["details"]["alternative"] == "greater"


def test_cli_paired_ttest(tmp_path: Path) -> None:
    path = tmp_path / "paired.csv"
    path.write_text("x\n1\n2\n3\n2\n4\n5\n", encoding="utf-8")

    runner = CliRunner()
    result = runner.invoke(app, ["stats", "ttest", "--data", str(path), "--variable", "x", "--paired"])
    assert result.exit_code == 0, result.output

    payload = json.loads(result.stdout)
    assert payload["details"]["test_type"] == "paired"
    assert payload["details"]["levene_test"] is None


def test_cli_reports_error_kind(data_file: Path) -> None:
    runner = CliRunner()
    result = runner.invoke(
        app, ["stats", "describe", "--data", str(data_file), "--columns", "missing"]
    )
    assert result.exit_code == 1
    assert "Error [unknown_column]" in result.output


def test_cli_missing_file(tmp_path: Path) -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["stats", "describe", "--data", str(tmp_path / "nope.csv")])
    assert result.exit_code == 1
    assert "File not found" in result.output


def test_cli_quiet_flag_raises_engine_log_level(data_file: Path) -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["--quiet", "stats", "describe", "--data", str(data_file)])
    assert result.exit_code == 0, result.output
    assert logging.getLogger("statcore").level == logging.WARNING

    result = runner.invoke(app, ["stats", "describe", "--data", str(data_file)])
    assert result.exit_code == 0, result.output
    assert logging.getLogger("statcore").level == logging.NOTSET
