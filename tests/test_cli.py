# -*- coding: utf-8 -*-
"""Tests for the roster CLI."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest
from typer.testing import CliRunner

from peoplekeeper.cli.roster_cli import app, describe_person
from peoplekeeper.models.people_model import PeopleModel


@pytest.fixture
def cli() -> CliRunner:
    return CliRunner()


@pytest.fixture
def settings_path(tmp_path: Path) -> Path:
    return tmp_path / "settings.json"


def test_describe_person_lists_features_and_topics() -> None:
    lines = describe_person(1, PeopleModel.initial()[0])
    assert lines[0] == "1. Bob [tag 1] red bald hair, blue eyes, beard+mustache, glasses"
    assert lines[1] == "   likes: weather"
    assert lines[2] == "   dislikes: fashion, sports, travel, movies, television, family"


def test_show_prints_seed_roster(cli: CliRunner, settings_path: Path) -> None:
    result = cli.invoke(app, ["show", "--settings", str(settings_path)])
    assert result.exit_code == 0
    assert "Roster (3 people)" in result.output
    assert "2. Joan [tag 2]" in result.output


def test_run_commands_and_history(cli: CliRunner, settings_path: Path) -> None:
    result = cli.invoke(
        app,
        ["run", "--settings", str(settings_path), "-c", "add", "-c", "name 4 Dana", "-c", "undo", "--history"],
    )
    assert result.exit_code == 0, result.output
    assert "Applied 3 command(s), 3 changed the roster" in result.output
    assert "4. (unnamed) [tag 4]" in result.output
    assert "can undo: yes, can redo: yes" in result.output
    assert "undo: Add Person" in result.output
    assert "redo: Edit Person" in result.output


def test_run_script_file(cli: CliRunner, settings_path: Path, tmp_path: Path) -> None:
    script = tmp_path / "edits.txt"
    script.write_text("# drop Joan\nremove 2\n", encoding="utf-8")
    result = cli.invoke(app, ["run", str(script), "--settings", str(settings_path)])
    assert result.exit_code == 0, result.output
    assert "Roster (2 people)" in result.output
    assert "Joan" not in result.output


def test_run_without_input_fails(cli: CliRunner, settings_path: Path) -> None:
    result = cli.invoke(app, ["run", "--settings", str(settings_path)])
    assert result.exit_code == 2


def test_run_reports_script_errors(cli: CliRunner, settings_path: Path) -> None:
    result = cli.invoke(app, ["run", "--settings", str(settings_path), "-c", "remove 7"])
    assert result.exit_code == 1
    assert "line 1" in result.output


def test_invalid_settings_reported(cli: CliRunner, settings_path: Path) -> None:
    settings_path.write_text(json.dumps({"roster": {"seed": "nobody"}}), encoding="utf-8")
    result = cli.invoke(app, ["show", "--settings", str(settings_path)])
    assert result.exit_code == 1
    assert "Invalid settings" in result.output


def test_empty_seed_from_settings(cli: CliRunner, settings_path: Path) -> None:
    settings_path.write_text(json.dumps({"roster": {"seed": "empty"}}), encoding="utf-8")
    result = cli.invoke(app, ["run", "--settings", str(settings_path), "-c", "add"])
    assert result.exit_code == 0, result.output
    assert "1. (unnamed) [tag 1] black bald hair, black eyes" in result.output


def test_version_option(cli: CliRunner) -> None:
    result = cli.invoke(app, ["--version"])
    assert result.exit_code == 0
    assert result.output.strip() == "people-keeper 0.1.0"


def test_malformed_settings_reported(cli: CliRunner, settings_path: Path) -> None:
    settings_path.write_text("{ broken", encoding="utf-8")
    result = cli.invoke(app, ["show", "--settings", str(settings_path)])
    assert result.exit_code == 1
    assert "Invalid JSON" in result.output


def test_run_writes_script_trace_to_log_file(cli: CliRunner, settings_path: Path, tmp_path: Path) -> None:
    log_file = tmp_path / "trace.log"
    script_logger = logging.getLogger("peoplekeeper.core.script")
    try:
        result = cli.invoke(
            app,
            ["run", "--settings", str(settings_path), "--log-file", str(log_file), "-c", "add", "-c", "undo"],
        )
        assert result.exit_code == 0, result.output
        for handler in script_logger.handlers:
            handler.flush()
        trace = log_file.read_text(encoding="utf-8")
    finally:
        for handler in list(script_logger.handlers):
            script_logger.removeHandler(handler)
            handler.close()
        script_logger.setLevel(logging.NOTSET)
    assert "Script line 1 'add' changed=True" in trace
    assert "Script line 2 'undo' changed=True" in trace
