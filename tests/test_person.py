# -*- coding: utf-8 -*-
"""Tests for person values and person diffing."""

from __future__ import annotations

from dataclasses import replace

import pytest

from peoplekeeper.core import edits
from peoplekeeper.models.features import EyeColor, FacialHair, HairColor, HairLength, Topic
from peoplekeeper.models.person import DEFAULT_FACE, Face, Person


def test_diff_with_itself_has_no_changes(bob: Person) -> None:
    assert bob.diffed(bob).has_changes is False


def test_equality_ignores_tag(bob: Person) -> None:
    twin = replace(bob, tag=99)
    assert twin == bob
    assert twin.same_identity(bob) is False


@pytest.mark.parametrize(
    "mutation",
    [
        edits.rename("Robert"),
        edits.set_hair_color(HairColor.BROWN),
        edits.set_hair_length(HairLength.LONG),
        edits.set_eye_color(EyeColor.GREEN),
        edits.remove_facial_hair(FacialHair.BEARD),
        edits.set_glasses(False),
        edits.like(Topic.FOOD),
        edits.dislike(Topic.COMEDY),
    ],
)
def test_diff_detects_each_field_change(bob: Person, mutation) -> None:
    edited = mutation(bob)
    diff = bob.diffed(edited)
    assert diff.has_changes is True
    assert diff.from_person is bob
    assert diff.to_person is edited
    assert diff.tag == bob.tag


def test_mutations_do_not_touch_original(bob: Person) -> None:
    edits.rename("Robert")(bob)
    assert bob.name == "Bob"


def test_overlapping_likes_and_dislikes_rejected() -> None:
    with pytest.raises(ValueError):
        Person(name="X", face=DEFAULT_FACE, likes=frozenset({Topic.FOOD}), dislikes=frozenset({Topic.FOOD}))


def test_blank_person_uses_default_face() -> None:
    person = Person.blank(7)
    assert person.tag == 7
    assert person.name == ""
    assert person.face.hair_length is HairLength.BALD
    assert person.face.facial_hair == frozenset()
    assert person.likes == frozenset() and person.dislikes == frozenset()


def test_blank_person_with_template() -> None:
    template = Face(HairColor.RED, HairLength.SHORT, EyeColor.BLUE, glasses=True)
    assert Person.blank(1, template=template).face == template


def test_like_removes_topic_from_dislikes(bob: Person) -> None:
    assert Topic.TRAVEL in bob.dislikes
    edited = edits.like(Topic.TRAVEL)(bob)
    assert Topic.TRAVEL in edited.likes
    assert Topic.TRAVEL not in edited.dislikes


def test_dislike_removes_topic_from_likes(bob: Person) -> None:
    edited = edits.dislike(Topic.WEATHER)(bob)
    assert Topic.WEATHER in edited.dislikes
    assert Topic.WEATHER not in edited.likes


def test_likes_and_dislikes_stay_disjoint_over_toggle_sequence(bob: Person) -> None:
    person = bob
    builders = [edits.like, edits.dislike, edits.unlike, edits.undislike]
    for step in range(60):
        topic = list(Topic)[(step * 7) % len(Topic)]
        person = builders[(step * 3) % len(builders)](topic)(person)
        assert not person.likes & person.dislikes


def test_toggle_facial_hair_adds_and_removes(bob: Person) -> None:
    without = edits.toggle_facial_hair(FacialHair.BEARD)(bob)
    assert FacialHair.BEARD not in without.face.facial_hair
    again = edits.toggle_facial_hair(FacialHair.BEARD)(without)
    assert again == bob


def test_toggle_glasses(bob: Person) -> None:
    assert edits.toggle_glasses()(bob).face.glasses is False
