# -*- coding: utf-8 -*-
"""CLI commands for inspecting and scripting roster edits."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Optional

import typer

from peoplekeeper.config import ConfigError, load_config
from peoplekeeper.constants import APP_NAME, APP_VERSION
from peoplekeeper.core.script import ScriptError, ScriptRunner
from peoplekeeper.core.state import AppState, build_state
from peoplekeeper.models.features import sorted_topics
from peoplekeeper.models.person import Person
from peoplekeeper.utils.logger import get_logger

app = typer.Typer(help="People Keeper roster commands")
logger = logging.getLogger(__name__)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"{APP_NAME} {APP_VERSION}")
        raise typer.Exit()


@app.callback()
def main_options(
    version: bool = typer.Option(
        False, "--version", callback=_version_callback, is_eager=True, help="Show the version and exit"
    ),
) -> None:
    """People Keeper roster commands."""


def describe_person(position: int, person: Person) -> list[str]:
    """Render one roster entry as indented text lines."""
    face = person.face
    features = [f"{face.hair_color.value} {face.hair_length.value} hair", f"{face.eye_color.value} eyes"]
    if face.facial_hair:
        features.append("+".join(sorted(style.value for style in face.facial_hair)))
    if face.glasses:
        features.append("glasses")
    likes = ", ".join(topic.value for topic in sorted_topics(person.likes)) or "-"
    dislikes = ", ".join(topic.value for topic in sorted_topics(person.dislikes)) or "-"
    return [
        f"{position}. {person.name or '(unnamed)'} [tag {person.tag}] {', '.join(features)}",
        f"   likes: {likes}",
        f"   dislikes: {dislikes}",
    ]


def _load_settings(settings_path: Path | None) -> dict[str, Any]:
    try:
        return load_config(settings_path)
    except (ConfigError, ValueError) as exc:
        typer.echo(f"Invalid settings: {exc}", err=True)
        raise typer.Exit(code=1) from exc


def _echo_roster(state: AppState) -> None:
    model = state.roster.model
    typer.echo(f"Roster ({len(model)} people)")
    for position, person in enumerate(model, start=1):
        for line in describe_person(position, person):
            typer.echo(line)


@app.command()
def show(
    settings: Optional[Path] = typer.Option(None, "--settings", help="Path to settings.json"),
) -> None:
    """Print the roster the app starts with."""
    state = build_state(_load_settings(settings))
    _echo_roster(state)


@app.command()
def run(
    script: Optional[Path] = typer.Argument(None, help="Edit script, one command per line"),
    command: list[str] = typer.Option([], "--command", "-c", help="Edit command (repeatable)"),
    settings: Optional[Path] = typer.Option(None, "--settings", help="Path to settings.json"),
    history: bool = typer.Option(False, "--history", help="Also print the undo/redo stacks"),
    log_file: Optional[Path] = typer.Option(None, "--log-file", help="Write a per-line trace of the script here"),
) -> None:
    """Apply an edit script to the starting roster and print the result."""
    if script is None and not command:
        typer.echo("Provide a script file or at least one --command", err=True)
        raise typer.Exit(code=2)

    lines: list[str] = []
    if script is not None:
        lines.extend(script.read_text(encoding="utf-8").splitlines())
    lines.extend(command)

    state = build_state(_load_settings(settings))
    if log_file is not None:
        get_logger("peoplekeeper.core.script", log_file=log_file)
    try:
        results = ScriptRunner(state).run(lines)
    except ScriptError as exc:
        logger.warning("Edit script failed: %s", exc)
        typer.echo(f"Script error: {exc}", err=True)
        raise typer.Exit(code=1) from exc

    changed = sum(1 for result in results if result.changed)
    typer.echo(f"Applied {len(results)} command(s), {changed} changed the roster")
    _echo_roster(state)
    roster = state.roster
    typer.echo(f"can undo: {'yes' if roster.can_undo else 'no'}, can redo: {'yes' if roster.can_redo else 'no'}")
    if history:
        typer.echo("undo: " + (", ".join(roster.history.undo_labels()) or "-"))
        typer.echo("redo: " + (", ".join(roster.history.redo_labels()) or "-"))
