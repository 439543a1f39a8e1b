# -*- coding: utf-8 -*-
"""Tests for person-level editing."""

from __future__ import annotations

import pytest

from peoplekeeper.core.person_editor import PersonEditor
from peoplekeeper.core.roster import RosterEditor
from peoplekeeper.models.features import EyeColor, FacialHair, HairColor, HairLength, Topic
from peoplekeeper.models.people_model import ChangeKind
from peoplekeeper.models.person import Person, PersonDiff


def test_each_setter_records_one_undo_step(bob: Person) -> None:
    editor = PersonEditor(bob)
    editor.set_name("Robert")
    editor.set_hair_color(HairColor.BROWN)
    editor.set_hair_length(HairLength.SHORT)
    editor.set_eye_color(EyeColor.GREEN)
    editor.set_facial_hair(FacialHair.BEARD, False)
    editor.set_glasses(False)
    editor.set_like(Topic.FOOD, True)
    editor.set_dislike(Topic.WEATHER, True)
    assert editor.history.undo_depth == 8
    assert Topic.WEATHER not in editor.person.likes

    while editor.undo():
        pass
    assert editor.person == bob


def test_noop_edit_not_recorded(bob: Person) -> None:
    editor = PersonEditor(bob)
    assert editor.set_hair_color(HairColor.RED) is None
    assert editor.set_glasses(True) is None
    assert editor.can_undo is False


def test_empty_name_is_ignored(bob: Person) -> None:
    editor = PersonEditor(bob)
    assert editor.set_name("") is None
    assert editor.person.name == "Bob"


def test_person_changed_callback(bob: Person) -> None:
    diffs: list[PersonDiff] = []
    editor = PersonEditor(bob)
    editor.person_changed = diffs.append
    editor.set_like(Topic.TRAVEL, True)
    assert len(diffs) == 1
    assert Topic.TRAVEL in diffs[0].to_person.likes
    assert Topic.TRAVEL not in diffs[0].to_person.dislikes


def test_redo_after_undo(bob: Person) -> None:
    editor = PersonEditor(bob)
    editor.set_name("Robert")
    editor.undo()
    assert editor.person.name == "Bob"
    assert editor.redo() is True
    assert editor.person.name == "Robert"
    assert editor.person.tag == bob.tag


def test_close_commits_once_to_roster(roster: RosterEditor) -> None:
    editor = PersonEditor(roster.model[1], person_did_change=roster.update_person)
    editor.set_eye_color(EyeColor.BLUE)
    editor.set_name("Joanna")
    diffs = []
    roster.roster_changed = diffs.append

    editor.close()
    editor.close()
    assert len(diffs) == 1
    assert diffs[0].kind is ChangeKind.UPDATED
    assert roster.model[1].name == "Joanna"
    assert roster.history.undo_depth == 1

    roster.undo()
    assert roster.model[1].name == "Joan"


def test_close_without_changes_leaves_roster_history_empty(roster: RosterEditor) -> None:
    editor = PersonEditor(roster.model[0], person_did_change=roster.update_person)
    editor.set_name("Robert")
    editor.undo()
    editor.close()
    assert roster.can_undo is False


def test_edit_after_close_raises(bob: Person) -> None:
    editor = PersonEditor(bob)
    editor.close()
    assert editor.closed is True
    with pytest.raises(RuntimeError):
        editor.set_name("Late")


def test_undo_redo_after_close_are_noops(bob: Person) -> None:
    editor = PersonEditor(bob)
    editor.set_name("Robert")
    editor.undo()
    editor.close()
    assert editor.can_undo is False
    assert editor.can_redo is False
    assert editor.redo() is False
    assert editor.undo() is False
    assert editor.person == bob
