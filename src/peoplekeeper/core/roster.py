# -*- coding: utf-8 -*-
"""Roster-level editing scope."""

from __future__ import annotations

import logging
from collections.abc import Callable

from peoplekeeper.core import edits
from peoplekeeper.core.history import AvailabilityCallback, EditHistory
from peoplekeeper.core.tags import TagAllocator
from peoplekeeper.models.people_model import PeopleModel, PeopleModelDiff
from peoplekeeper.models.person import Face, Person


logger = logging.getLogger(__name__)

RosterChangeCallback = Callable[[PeopleModelDiff], None]


class RosterChangeError(ValueError):
    """Raised when one transaction tries to change more than one roster entry."""


def _require_single_change(old: PeopleModel, new: PeopleModel) -> None:
    if not old.is_single_change(new):
        raise RosterChangeError(
            f"A roster transaction may change at most one person (tags {old.tags()} -> {new.tags()})"
        )


class RosterEditor:
    """Add, remove and update people with undo/redo."""

    def __init__(
        self,
        model: PeopleModel | None = None,
        tags: TagAllocator | None = None,
        levels: int = 0,
        new_person_face: Face | None = None,
    ) -> None:
        initial = model if model is not None else PeopleModel.initial()
        self.tags = tags if tags is not None else TagAllocator.for_model(initial)
        if self.tags.last_tag < initial.max_tag():
            raise ValueError("Tag allocator is behind the roster's highest tag")
        self.new_person_face = new_person_face
        self._history: EditHistory[PeopleModel, PeopleModelDiff] = EditHistory(
            initial,
            diff=lambda old, new: old.diffed(new),
            levels=levels,
            validator=_require_single_change,
        )

    @property
    def history(self) -> EditHistory[PeopleModel, PeopleModelDiff]:
        return self._history

    @property
    def model(self) -> PeopleModel:
        return self._history.current

    @property
    def can_undo(self) -> bool:
        return self._history.can_undo

    @property
    def can_redo(self) -> bool:
        return self._history.can_redo

    @property
    def roster_changed(self) -> RosterChangeCallback | None:
        return self._history.changed

    @roster_changed.setter
    def roster_changed(self, callback: RosterChangeCallback | None) -> None:
        self._history.changed = callback

    @property
    def availability_changed(self) -> AvailabilityCallback | None:
        return self._history.availability_changed

    @availability_changed.setter
    def availability_changed(self, callback: AvailabilityCallback | None) -> None:
        self._history.availability_changed = callback

    def apply(self, mutation: edits.RosterMutation, label: str = "") -> PeopleModelDiff | None:
        return self._history.apply(mutation, label)

    def add_person(self) -> Person:
        """Append a blank person with a fresh tag and return it."""
        person = Person.blank(self.tags.next_tag(), template=self.new_person_face)
        self.apply(edits.append_person(person), label="Add Person")
        logger.info("Added person with tag %s at position %d", person.tag, len(self.model) - 1)
        return person

    def remove_person(self, index: int) -> Person:
        person = self.model[index]
        self.apply(edits.remove_person_at(index), label="Delete Person")
        logger.info("Removed person '%s' (tag %s) from position %d", person.name, person.tag, index)
        return person

    def update_person(self, person: Person) -> PeopleModelDiff | None:
        """Replace the entry sharing ``person``'s tag. No-op if content is unchanged."""
        diff = self.apply(edits.replace_person(person), label="Edit Person")
        if diff is not None:
            logger.info("Updated person '%s' (tag %s)", person.name, person.tag)
        return diff

    def undo(self) -> bool:
        return self._history.undo()

    def redo(self) -> bool:
        return self._history.redo()
