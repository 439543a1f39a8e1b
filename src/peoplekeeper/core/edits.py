# -*- coding: utf-8 -*-
"""Pure mutation builders for people and rosters.

Every builder returns a function from the old snapshot to a new one. The
functions never modify their argument.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import replace
from typing import TypeVar

from peoplekeeper.models.features import EyeColor, FacialHair, HairColor, HairLength, Topic
from peoplekeeper.models.people_model import PeopleModel
from peoplekeeper.models.person import Person


T = TypeVar("T")
Mutation = Callable[[T], T]
PersonMutation = Callable[[Person], Person]
RosterMutation = Callable[[PeopleModel], PeopleModel]


def restore(snapshot: T) -> Mutation[T]:
    """Replace whatever is current with ``snapshot``."""

    def _restore(_current: T) -> T:
        return snapshot

    return _restore


# Person scope


def rename(name: str) -> PersonMutation:
    return lambda person: replace(person, name=name)


def set_hair_color(color: HairColor) -> PersonMutation:
    return lambda person: replace(person, face=replace(person.face, hair_color=color))


def set_hair_length(length: HairLength) -> PersonMutation:
    return lambda person: replace(person, face=replace(person.face, hair_length=length))


def set_eye_color(color: EyeColor) -> PersonMutation:
    return lambda person: replace(person, face=replace(person.face, eye_color=color))


def add_facial_hair(style: FacialHair) -> PersonMutation:
    return lambda person: replace(
        person, face=replace(person.face, facial_hair=person.face.facial_hair | {style})
    )


def remove_facial_hair(style: FacialHair) -> PersonMutation:
    return lambda person: replace(
        person, face=replace(person.face, facial_hair=person.face.facial_hair - {style})
    )


def toggle_facial_hair(style: FacialHair) -> PersonMutation:
    def _toggle(person: Person) -> Person:
        if style in person.face.facial_hair:
            return remove_facial_hair(style)(person)
        return add_facial_hair(style)(person)

    return _toggle


def set_glasses(on: bool) -> PersonMutation:
    return lambda person: replace(person, face=replace(person.face, glasses=bool(on)))


def toggle_glasses() -> PersonMutation:
    return lambda person: replace(person, face=replace(person.face, glasses=not person.face.glasses))


def like(topic: Topic) -> PersonMutation:
    """Add ``topic`` to likes, dropping it from dislikes."""
    return lambda person: replace(person, likes=person.likes | {topic}, dislikes=person.dislikes - {topic})


def dislike(topic: Topic) -> PersonMutation:
    """Add ``topic`` to dislikes, dropping it from likes."""
    return lambda person: replace(person, dislikes=person.dislikes | {topic}, likes=person.likes - {topic})


def unlike(topic: Topic) -> PersonMutation:
    return lambda person: replace(person, likes=person.likes - {topic})


def undislike(topic: Topic) -> PersonMutation:
    return lambda person: replace(person, dislikes=person.dislikes - {topic})


# Roster scope


def append_person(person: Person) -> RosterMutation:
    return lambda model: PeopleModel(people=model.people + (person,))


def remove_person_at(index: int) -> RosterMutation:
    def _remove(model: PeopleModel) -> PeopleModel:
        if not 0 <= index < len(model):
            raise IndexError(f"Invalid person index: {index}")
        return PeopleModel(people=model.people[:index] + model.people[index + 1 :])

    return _remove


def replace_person(person: Person) -> RosterMutation:
    """Swap in a new snapshot for the roster entry sharing ``person``'s tag."""

    def _replace(model: PeopleModel) -> PeopleModel:
        index = model.index_of_tag(person.tag)
        if index is None:
            raise KeyError(f"No person with tag {person.tag} in roster")
        people = list(model.people)
        people[index] = person
        return PeopleModel(people=tuple(people))

    return _replace
