# -*- coding: utf-8 -*-
"""Application state container."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

from peoplekeeper.config import get_default_config, new_person_face
from peoplekeeper.core.person_editor import PersonEditor
from peoplekeeper.core.roster import RosterEditor
from peoplekeeper.models.people_model import PeopleModel


logger = logging.getLogger(__name__)


@dataclass
class AppState:
    """Editors shared by the presentation layer for one app session."""

    roster: RosterEditor
    settings: dict[str, Any] = field(default_factory=get_default_config)
    active_editor: PersonEditor | None = None

    @property
    def levels(self) -> int:
        return int(self.settings.get("history", {}).get("levels", 0))

    def open_editor(self, index: int) -> PersonEditor:
        """Start editing the person at ``index``; closing commits to the roster."""
        if self.active_editor is not None and not self.active_editor.closed:
            self.active_editor.close()
        person = self.roster.model[index]
        editor = PersonEditor(person, person_did_change=self.roster.update_person, levels=self.levels)
        self.active_editor = editor
        logger.info("Opened editor for person %s ('%s')", person.tag, person.name)
        return editor

    def close_editor(self) -> None:
        editor = self.active_editor
        self.active_editor = None
        if editor is not None:
            editor.close()


def build_state(settings: dict[str, Any] | None = None) -> AppState:
    """Create the session state from validated settings."""
    settings = settings if settings is not None else get_default_config()
    seed = settings.get("roster", {}).get("seed", "sample")
    model = PeopleModel.initial() if seed == "sample" else PeopleModel()
    roster = RosterEditor(
        model,
        levels=int(settings.get("history", {}).get("levels", 0)),
        new_person_face=new_person_face(settings),
    )
    logger.debug("Built app state: seed=%s people=%d", seed, len(model))
    return AppState(roster=roster, settings=settings)
