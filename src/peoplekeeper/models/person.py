# -*- coding: utf-8 -*-
"""Person and face value types."""

from __future__ import annotations

from dataclasses import dataclass, field

from peoplekeeper.models.features import EyeColor, FacialHair, HairColor, HairLength, Topic


@dataclass(frozen=True)
class Face:
    """Visual attributes used to composite a person's avatar."""

    hair_color: HairColor
    hair_length: HairLength
    eye_color: EyeColor
    facial_hair: frozenset[FacialHair] = frozenset()
    glasses: bool = False


DEFAULT_FACE = Face(
    hair_color=HairColor.BLACK,
    hair_length=HairLength.BALD,
    eye_color=EyeColor.BLACK,
)


@dataclass(frozen=True)
class Person:
    """Immutable snapshot of one roster entry.

    ``tag`` is a stable identity assigned once at creation. It takes no part
    in ``==`` or hashing, which compare content only; use ``same_identity``
    to decide whether two snapshots describe the same person.
    """

    name: str
    face: Face
    likes: frozenset[Topic] = frozenset()
    dislikes: frozenset[Topic] = frozenset()
    tag: int = field(default=0, compare=False)

    def __post_init__(self) -> None:
        overlap = self.likes & self.dislikes
        if overlap:
            topics = ", ".join(sorted(topic.value for topic in overlap))
            raise ValueError(f"Topics cannot be both liked and disliked: {topics}")

    @classmethod
    def blank(cls, tag: int, template: Face | None = None) -> Person:
        """Person created by "add new person": no name, default face, no topics."""
        return cls(name="", face=template or DEFAULT_FACE, tag=tag)

    def same_identity(self, other: Person) -> bool:
        return self.tag == other.tag

    def diffed(self, candidate: Person) -> PersonDiff:
        return PersonDiff(self, candidate)


@dataclass(frozen=True)
class PersonDiff:
    """Transition between two snapshots of the same person."""

    from_person: Person
    to_person: Person

    @property
    def has_changes(self) -> bool:
        return self.from_person != self.to_person

    @property
    def tag(self) -> int:
        return self.to_person.tag
