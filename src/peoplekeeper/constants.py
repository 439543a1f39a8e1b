# -*- coding: utf-8 -*-
"""Application constants."""

APP_NAME = "people-keeper"
APP_VERSION = "0.1.0"

DEFAULT_SETTINGS_FILE = "settings.json"

ROSTER_SEEDS = ("sample", "empty")

DEFAULT_HOTKEYS = {
    "undo": "Ctrl+Z",
    "redo": "Ctrl+Shift+Z",
    "add_person": "Ctrl+N",
    "delete_person": "Delete",
}

ENV_UNDO_LEVELS = "PEOPLE_KEEPER_UNDO_LEVELS"
ENV_SEED = "PEOPLE_KEEPER_SEED"
