# -*- coding: utf-8 -*-
"""Roster snapshot and roster-level diffing."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum

from peoplekeeper.models.features import EyeColor, FacialHair, HairColor, HairLength, Topic
from peoplekeeper.models.person import Face, Person


class ChangeKind(str, Enum):
    INSERTED = "inserted"
    REMOVED = "removed"
    UPDATED = "updated"
    NONE = "none"


@dataclass(frozen=True)
class PeopleChange:
    """Which person a roster transition touched and how."""

    kind: ChangeKind
    person: Person | None = None


NO_CHANGE = PeopleChange(ChangeKind.NONE)


@dataclass(frozen=True)
class PeopleModel:
    """Ordered, immutable roster. Order is display order and is never sorted."""

    people: tuple[Person, ...] = ()

    def __post_init__(self) -> None:
        tags = self.tags()
        if len(set(tags)) != len(tags):
            raise ValueError(f"Duplicate person tags in roster: {tags}")

    @classmethod
    def initial(cls) -> PeopleModel:
        """Sample roster loaded at startup."""
        return cls(
            people=(
                Person(
                    name="Bob",
                    face=Face(
                        hair_color=HairColor.RED,
                        hair_length=HairLength.BALD,
                        eye_color=EyeColor.BLUE,
                        facial_hair=frozenset({FacialHair.MUSTACHE, FacialHair.BEARD}),
                        glasses=True,
                    ),
                    likes=frozenset({Topic.WEATHER}),
                    dislikes=frozenset(
                        {Topic.TRAVEL, Topic.TELEVISION, Topic.SPORTS, Topic.MOVIES, Topic.FAMILY, Topic.FASHION}
                    ),
                    tag=1,
                ),
                Person(
                    name="Joan",
                    face=Face(
                        hair_color=HairColor.GRAY,
                        hair_length=HairLength.SHORT,
                        eye_color=EyeColor.BLACK,
                    ),
                    likes=frozenset({Topic.CARS, Topic.POLITICS}),
                    dislikes=frozenset({Topic.SPORTS, Topic.FASHION}),
                    tag=2,
                ),
                Person(
                    name="Sam",
                    face=Face(
                        hair_color=HairColor.BLONDE,
                        hair_length=HairLength.LONG,
                        eye_color=EyeColor.BROWN,
                        facial_hair=frozenset({FacialHair.MUSTACHE}),
                    ),
                    likes=frozenset({Topic.MUSIC, Topic.FAMILY, Topic.FASHION, Topic.MOVIES, Topic.BOOKS}),
                    tag=3,
                ),
            )
        )

    def __len__(self) -> int:
        return len(self.people)

    def __iter__(self) -> Iterator[Person]:
        return iter(self.people)

    def __getitem__(self, index: int) -> Person:
        return self.people[index]

    def tags(self) -> list[int]:
        return [person.tag for person in self.people]

    def max_tag(self) -> int:
        return max(self.tags(), default=0)

    def index_of_tag(self, tag: int) -> int | None:
        for index, person in enumerate(self.people):
            if person.tag == tag:
                return index
        return None

    def person_with_tag(self, tag: int) -> Person | None:
        index = self.index_of_tag(tag)
        return None if index is None else self.people[index]

    def is_identical(self, other: PeopleModel) -> bool:
        """Content and tag equality, element by element."""
        return _keyed(self.people) == _keyed(other.people)

    def changed_person(self, candidate: PeopleModel) -> Person | None:
        """Find the first person that differs between this roster and ``candidate``.

        When the lengths differ, the answer is the first person of the longer
        roster whose tag is missing from the shorter one. When they match, it
        is ``candidate``'s entry at the first index whose content differs.
        Only transitions that change a single element are classified
        correctly; see ``is_single_change``.
        """
        if len(self.people) != len(candidate.people):
            if len(candidate.people) > len(self.people):
                longer, shorter = candidate.people, self.people
            else:
                longer, shorter = self.people, candidate.people
            shorter_tags = {person.tag for person in shorter}
            return next((person for person in longer if person.tag not in shorter_tags), None)

        for current, other in zip(self.people, candidate.people):
            if current != other:
                return other
        return None

    def diffed(self, candidate: PeopleModel) -> PeopleModelDiff:
        change = NO_CHANGE
        person = self.changed_person(candidate)
        if person is not None:
            if len(candidate.people) > len(self.people):
                change = PeopleChange(ChangeKind.INSERTED, person)
            elif len(candidate.people) < len(self.people):
                change = PeopleChange(ChangeKind.REMOVED, person)
            else:
                change = PeopleChange(ChangeKind.UPDATED, person)
        return PeopleModelDiff(change=change, from_model=self, to_model=candidate)

    def is_single_change(self, candidate: PeopleModel) -> bool:
        """True when ``candidate`` differs from this roster by at most one element.

        Allowed transitions: one appended/inserted person, one removed person,
        or one content edit at an index whose tag is unchanged.
        """
        size_delta = len(candidate.people) - len(self.people)
        if abs(size_delta) > 1:
            return False

        if size_delta == 0:
            if self.tags() != candidate.tags():
                return False
            edits = sum(1 for current, other in zip(self.people, candidate.people) if current != other)
            return edits <= 1

        person = self.changed_person(candidate)
        if person is None:
            return False
        longer, shorter = (candidate, self) if size_delta > 0 else (self, candidate)
        remaining = [entry for entry in _keyed(longer.people) if entry[0] != person.tag]
        return remaining == _keyed(shorter.people)


@dataclass(frozen=True)
class PeopleModelDiff:
    """Transition between two roster snapshots, produced by ``PeopleModel.diffed``."""

    change: PeopleChange
    from_model: PeopleModel
    to_model: PeopleModel

    @property
    def kind(self) -> ChangeKind:
        return self.change.kind

    @property
    def person(self) -> Person | None:
        return self.change.person

    @property
    def has_changes(self) -> bool:
        return self.change.kind is not ChangeKind.NONE

    @property
    def index(self) -> int | None:
        """Position of the affected person: in the old roster for removals, else the new one."""
        person = self.change.person
        if person is None:
            return None
        if self.change.kind is ChangeKind.REMOVED:
            return self.from_model.index_of_tag(person.tag)
        return self.to_model.index_of_tag(person.tag)


def _keyed(people: tuple[Person, ...]) -> list[tuple[int, Person]]:
    return [(person.tag, person) for person in people]
