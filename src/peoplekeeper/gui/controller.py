# -*- coding: utf-8 -*-
"""Qt-facing controller that views bind to."""

from __future__ import annotations

import logging
from typing import Any

from PyQt6.QtCore import QObject, QTimer, pyqtSignal

from peoplekeeper.constants import DEFAULT_HOTKEYS
from peoplekeeper.core.person_editor import PersonEditor
from peoplekeeper.core.state import AppState, build_state
from peoplekeeper.models.people_model import PeopleModel, PeopleModelDiff
from peoplekeeper.models.person import Person

logger = logging.getLogger(__name__)


class PeopleController(QObject):
    """
    Own the roster and person editors for one window.
    Views route gestures into the mutation methods and redraw from the
    emitted diffs; the controller never touches widgets itself.
    """
    roster_changed = pyqtSignal(object)
    person_changed = pyqtSignal(object)
    editor_opened = pyqtSignal(object)
    editor_closed = pyqtSignal(object)
    undo_state_changed = pyqtSignal(bool, bool)

    def __init__(self, settings: dict[str, Any] | None = None, state: AppState | None = None) -> None:
        super().__init__()
        self.state = state if state is not None else build_state(settings)
        self._availability_pending = False
        self.state.roster.roster_changed = self._on_roster_changed
        self.state.roster.availability_changed = self._on_availability_changed

    @property
    def model(self) -> PeopleModel:
        return self.state.roster.model

    @property
    def editor(self) -> PersonEditor | None:
        return self.state.active_editor

    @property
    def hotkeys(self) -> dict[str, str]:
        """Key sequence per action, in ``QKeySequence.toString()`` form."""
        configured = self.state.settings.get("hotkeys", {})
        return {action: configured.get(action, default) for action, default in DEFAULT_HOTKEYS.items()}

    def handle_hotkey(self, sequence: str, selected: int | None = None) -> bool:
        """Run the action bound to ``sequence``.

        ``selected`` is the roster row the view has selected, used by
        ``delete_person``. Returns False when nothing is bound or nothing
        happened.
        """
        wanted = sequence.strip().lower()
        action = next((name for name, keys in self.hotkeys.items() if keys.strip().lower() == wanted), None)
        if action is None:
            return False
        logger.debug("Hotkey %s -> %s", sequence, action)
        if action == "undo":
            return self.undo()
        if action == "redo":
            return self.redo()
        if action == "add_person":
            self.add_person()
            return True
        if selected is None or not 0 <= selected < len(self.model):
            return False
        self.remove_person(selected)
        return True

    def can_undo(self) -> bool:
        return self._active_scope().can_undo

    def can_redo(self) -> bool:
        return self._active_scope().can_redo

    # Roster scope

    def add_person(self) -> Person:
        self.close_person()
        return self.state.roster.add_person()

    def remove_person(self, index: int) -> Person:
        self.close_person()
        return self.state.roster.remove_person(index)

    # Person scope

    def open_person(self, index: int) -> PersonEditor:
        self.close_person()
        editor = self.state.open_editor(index)
        editor.person_changed = self.person_changed.emit
        editor.availability_changed = self._on_availability_changed
        self.editor_opened.emit(editor.person)
        self._schedule_availability_update()
        return editor

    def close_person(self) -> None:
        editor = self.state.active_editor
        if editor is None:
            return
        self.state.close_editor()
        self.editor_closed.emit(editor.person)
        self._schedule_availability_update()

    # Undo / redo

    def undo(self) -> bool:
        done = self._active_scope().undo()
        if not done:
            logger.debug("Undo requested with empty history")
        return done

    def redo(self) -> bool:
        done = self._active_scope().redo()
        if not done:
            logger.debug("Redo requested with empty history")
        return done

    def _active_scope(self):
        editor = self.state.active_editor
        return editor if editor is not None else self.state.roster

    def _on_roster_changed(self, diff: PeopleModelDiff) -> None:
        logger.debug("Roster %s at index %s", diff.kind.value, diff.index)
        self.roster_changed.emit(diff)

    def _on_availability_changed(self, can_undo: bool, can_redo: bool) -> None:
        del can_undo, can_redo
        self._schedule_availability_update()

    def _schedule_availability_update(self) -> None:
        # Runs after the current event-loop pass so views finish their updates first.
        if self._availability_pending:
            return
        self._availability_pending = True
        QTimer.singleShot(0, self._emit_availability)

    def _emit_availability(self) -> None:
        self._availability_pending = False
        self.undo_state_changed.emit(self.can_undo(), self.can_redo())

