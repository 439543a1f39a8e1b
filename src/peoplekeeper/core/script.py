# -*- coding: utf-8 -*-
"""Line-oriented edit scripts.

One command per line, positions are 1-based::

    add
    name 4 Alice
    hair-color 4 red
    facial-hair 1 beard off
    like 2 food
    undo
"""

from __future__ import annotations

import logging
import shlex
from collections.abc import Callable, Iterable
from dataclasses import dataclass

from peoplekeeper.core.person_editor import PersonEditor
from peoplekeeper.core.state import AppState
from peoplekeeper.models.features import EyeColor, FacialHair, HairColor, HairLength, Topic, parse_feature


logger = logging.getLogger(__name__)

_SWITCH = {"on": True, "off": False}


class ScriptError(ValueError):
    """Raised for a malformed or inapplicable script line."""

    def __init__(self, line_no: int, message: str) -> None:
        super().__init__(f"line {line_no}: {message}")
        self.line_no = line_no


@dataclass
class StepResult:
    line_no: int
    command: str
    changed: bool


def _position(state: AppState, raw: str) -> int:
    try:
        position = int(raw)
    except ValueError:
        raise ValueError(f"expected a position, got '{raw}'") from None
    if not 1 <= position <= len(state.roster.model):
        raise ValueError(f"no person at position {position} (roster has {len(state.roster.model)})")
    return position - 1


def _switch(raw: str) -> bool:
    try:
        return _SWITCH[raw.lower()]
    except KeyError:
        raise ValueError(f"expected on/off, got '{raw}'") from None


def _split_person_args(args: list[str], arity: int) -> tuple[str, list[str]]:
    if len(args) != arity:
        raise ValueError(f"expected {arity} argument(s), got {len(args)}")
    return args[0], args[1:]


_PersonEdit = Callable[[PersonEditor, list[str]], object]

_PERSON_COMMANDS: dict[str, tuple[int, _PersonEdit]] = {
    "hair-color": (2, lambda editor, a: editor.set_hair_color(parse_feature(HairColor, a[0]))),
    "hair-length": (2, lambda editor, a: editor.set_hair_length(parse_feature(HairLength, a[0]))),
    "eye-color": (2, lambda editor, a: editor.set_eye_color(parse_feature(EyeColor, a[0]))),
    "facial-hair": (3, lambda editor, a: editor.set_facial_hair(parse_feature(FacialHair, a[0]), _switch(a[1]))),
    "glasses": (2, lambda editor, a: editor.set_glasses(_switch(a[0]))),
    "like": (2, lambda editor, a: editor.set_like(parse_feature(Topic, a[0]), True)),
    "dislike": (2, lambda editor, a: editor.set_dislike(parse_feature(Topic, a[0]), True)),
    "unlike": (2, lambda editor, a: editor.set_like(parse_feature(Topic, a[0]), False)),
    "undislike": (2, lambda editor, a: editor.set_dislike(parse_feature(Topic, a[0]), False)),
}


class ScriptRunner:
    """Execute edit commands against an ``AppState``."""

    def __init__(self, state: AppState) -> None:
        self.state = state

    def run(self, lines: Iterable[str]) -> list[StepResult]:
        results: list[StepResult] = []
        for line_no, raw_line in enumerate(lines, start=1):
            line = raw_line.strip()
            if not line or line.startswith("#"):
                continue
            try:
                changed = self._execute(line)
            except ValueError as exc:
                raise ScriptError(line_no, str(exc)) from exc
            logger.debug("Script line %d '%s' changed=%s", line_no, line, changed)
            results.append(StepResult(line_no=line_no, command=line, changed=changed))
        return results

    def _execute(self, line: str) -> bool:
        command, *args = shlex.split(line)
        command = command.lower()
        roster = self.state.roster

        if command in {"undo", "redo"}:
            if args:
                raise ValueError(f"'{command}' takes no arguments")
            return roster.undo() if command == "undo" else roster.redo()
        if command == "add":
            if args:
                raise ValueError("'add' takes no arguments")
            roster.add_person()
            return True
        if command == "remove":
            if len(args) != 1:
                raise ValueError("'remove' expects a position")
            roster.remove_person(_position(self.state, args[0]))
            return True
        if command == "name":
            if len(args) < 2:
                raise ValueError("'name' expects a position and a name")
            index = _position(self.state, args[0])
            return self._edit_person(index, lambda editor: editor.set_name(" ".join(args[1:])))
        if command in _PERSON_COMMANDS:
            arity, edit = _PERSON_COMMANDS[command]
            raw_position, rest = _split_person_args(args, arity)
            index = _position(self.state, raw_position)
            return self._edit_person(index, lambda editor: edit(editor, rest))
        raise ValueError(f"unknown command '{command}'")

    def _edit_person(self, index: int, edit: Callable[[PersonEditor], object]) -> bool:
        before = self.state.roster.model
        editor = self.state.open_editor(index)
        try:
            edit(editor)
        finally:
            self.state.close_editor()
        return not before.is_identical(self.state.roster.model)
