# -*- coding: utf-8 -*-
"""Person-level editing scope with its own undo/redo stacks."""

from __future__ import annotations

import logging
from collections.abc import Callable

from peoplekeeper.core import edits
from peoplekeeper.core.history import AvailabilityCallback, EditHistory
from peoplekeeper.models.features import EyeColor, FacialHair, HairColor, HairLength, Topic
from peoplekeeper.models.person import Person, PersonDiff


logger = logging.getLogger(__name__)

PersonChangeCallback = Callable[[PersonDiff], None]
CommitCallback = Callable[[Person], None]


class PersonEditor:
    """Edit one person's attributes.

    The editor keeps its own history, independent from the roster's. When
    it is closed the final snapshot is handed to ``person_did_change``,
    which normally commits it to the roster as a single transaction.
    """

    def __init__(
        self,
        person: Person,
        person_did_change: CommitCallback | None = None,
        levels: int = 0,
    ) -> None:
        self.person_did_change = person_did_change
        self._closed = False
        self._history: EditHistory[Person, PersonDiff] = EditHistory(
            person,
            diff=lambda old, new: old.diffed(new),
            levels=levels,
        )

    @property
    def history(self) -> EditHistory[Person, PersonDiff]:
        return self._history

    @property
    def person(self) -> Person:
        return self._history.current

    @property
    def tag(self) -> int:
        return self.person.tag

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def can_undo(self) -> bool:
        return not self._closed and self._history.can_undo

    @property
    def can_redo(self) -> bool:
        return not self._closed and self._history.can_redo

    @property
    def person_changed(self) -> PersonChangeCallback | None:
        return self._history.changed

    @person_changed.setter
    def person_changed(self, callback: PersonChangeCallback | None) -> None:
        self._history.changed = callback

    @property
    def availability_changed(self) -> AvailabilityCallback | None:
        return self._history.availability_changed

    @availability_changed.setter
    def availability_changed(self, callback: AvailabilityCallback | None) -> None:
        self._history.availability_changed = callback

    def apply(self, mutation: edits.PersonMutation, label: str = "") -> PersonDiff | None:
        if self._closed:
            raise RuntimeError(f"Editor for person {self.tag} is already closed")
        return self._history.apply(mutation, label)

    def set_name(self, text: str) -> PersonDiff | None:
        """Commit edited name text. Empty text leaves the name untouched."""
        if not text:
            return None
        return self.apply(edits.rename(text), label="Name")

    def set_hair_color(self, color: HairColor) -> PersonDiff | None:
        return self.apply(edits.set_hair_color(color), label="Hair Color")

    def set_hair_length(self, length: HairLength) -> PersonDiff | None:
        return self.apply(edits.set_hair_length(length), label="Hair Length")

    def set_eye_color(self, color: EyeColor) -> PersonDiff | None:
        return self.apply(edits.set_eye_color(color), label="Eye Color")

    def set_facial_hair(self, style: FacialHair, on: bool) -> PersonDiff | None:
        mutation = edits.add_facial_hair(style) if on else edits.remove_facial_hair(style)
        return self.apply(mutation, label="Facial Hair")

    def set_glasses(self, on: bool) -> PersonDiff | None:
        return self.apply(edits.set_glasses(on), label="Glasses")

    def set_like(self, topic: Topic, on: bool) -> PersonDiff | None:
        mutation = edits.like(topic) if on else edits.unlike(topic)
        return self.apply(mutation, label="Likes")

    def set_dislike(self, topic: Topic, on: bool) -> PersonDiff | None:
        mutation = edits.dislike(topic) if on else edits.undislike(topic)
        return self.apply(mutation, label="Dislikes")

    def undo(self) -> bool:
        if self._closed:
            return False
        return self._history.undo()

    def redo(self) -> bool:
        if self._closed:
            return False
        return self._history.redo()

    def close(self) -> Person:
        """Finish editing and hand the final snapshot to ``person_did_change``."""
        if self._closed:
            return self.person
        self._closed = True
        person = self.person
        logger.info("Closing editor for person %s ('%s')", person.tag, person.name)
        if self.person_did_change is not None:
            self.person_did_change(person)
        return person
