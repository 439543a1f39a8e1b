# -*- coding: utf-8 -*-
"""Undo/redo transaction wrapper shared by the roster and person editors."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, Protocol, TypeVar

from peoplekeeper.core.edits import restore


logger = logging.getLogger(__name__)


class _Diff(Protocol):
    @property
    def has_changes(self) -> bool: ...


T = TypeVar("T")
D = TypeVar("D", bound=_Diff)

ChangeCallback = Callable[[D], None]
AvailabilityCallback = Callable[[bool, bool], None]
Validator = Callable[[T, T], None]

_FRESH = "fresh"
_UNDO = "undo"
_REDO = "redo"


@dataclass(frozen=True)
class HistoryEntry(Generic[T]):
    """Inverse mutation recorded by a transaction."""

    label: str
    mutation: Callable[[T], T]


class EditHistory(Generic[T, D]):
    """Current snapshot plus linear undo/redo stacks of inverse mutations.

    Every change goes through ``apply``: the mutation produces a new
    snapshot, the diff function classifies the transition, and a changed
    transition becomes current while its inverse is pushed onto the undo
    stack. Transitions without changes leave everything untouched.
    """

    def __init__(
        self,
        initial: T,
        diff: Callable[[T, T], D],
        levels: int = 0,
        validator: Validator | None = None,
    ) -> None:
        if levels < 0:
            raise ValueError(f"levels must be >= 0, got {levels}")
        self._current = initial
        self._diff = diff
        self._levels = int(levels)
        self._validator = validator
        self._undo: list[HistoryEntry[T]] = []
        self._redo: list[HistoryEntry[T]] = []

        self.changed: ChangeCallback | None = None
        self.availability_changed: AvailabilityCallback | None = None

    @property
    def current(self) -> T:
        return self._current

    @property
    def levels(self) -> int:
        return self._levels

    @property
    def can_undo(self) -> bool:
        return bool(self._undo)

    @property
    def can_redo(self) -> bool:
        return bool(self._redo)

    @property
    def undo_depth(self) -> int:
        return len(self._undo)

    @property
    def redo_depth(self) -> int:
        return len(self._redo)

    @property
    def undo_label(self) -> str | None:
        return self._undo[-1].label if self._undo else None

    @property
    def redo_label(self) -> str | None:
        return self._redo[-1].label if self._redo else None

    def undo_labels(self) -> list[str]:
        """Undo stack labels, most recent first."""
        return [entry.label for entry in reversed(self._undo)]

    def redo_labels(self) -> list[str]:
        return [entry.label for entry in reversed(self._redo)]

    def apply(self, mutation: Callable[[T], T], label: str = "") -> D | None:
        """Run one transaction. Returns the diff, or None if nothing changed."""
        return self._transact(mutation, label, _FRESH)

    def undo(self) -> bool:
        if not self._undo:
            logger.debug("Nothing to undo")
            return False
        entry = self._undo.pop()
        logger.info("Undo %s", entry.label or "change")
        self._transact(entry.mutation, entry.label, _UNDO)
        return True

    def redo(self) -> bool:
        if not self._redo:
            logger.debug("Nothing to redo")
            return False
        entry = self._redo.pop()
        logger.info("Redo %s", entry.label or "change")
        self._transact(entry.mutation, entry.label, _REDO)
        return True

    def clear(self) -> None:
        """Forget all history, keeping the current snapshot."""
        self._undo.clear()
        self._redo.clear()
        self._notify_availability()

    def _transact(self, mutation: Callable[[T], T], label: str, direction: str) -> D | None:
        old = self._current
        new = mutation(old)
        if self._validator is not None:
            self._validator(old, new)
        diff = self._diff(old, new)
        if not diff.has_changes:
            logger.debug("Transaction '%s' made no changes", label)
            return None

        self._current = new
        inverse = HistoryEntry(label=label, mutation=restore(old))
        if direction == _UNDO:
            self._redo.append(inverse)
        else:
            if direction == _FRESH:
                self._redo.clear()
            self._push_undo(inverse)

        logger.debug(
            "Transaction '%s' (%s) committed: undo=%d redo=%d",
            label,
            direction,
            len(self._undo),
            len(self._redo),
        )
        if self.changed is not None:
            self.changed(diff)
        self._notify_availability()
        return diff

    def _push_undo(self, entry: HistoryEntry[T]) -> None:
        self._undo.append(entry)
        if self._levels and len(self._undo) > self._levels:
            del self._undo[: len(self._undo) - self._levels]

    def _notify_availability(self) -> None:
        if self.availability_changed is not None:
            self.availability_changed(self.can_undo, self.can_redo)
