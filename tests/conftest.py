# -*- coding: utf-8 -*-
"""Shared pytest fixtures."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest


SRC_DIR = Path(__file__).resolve().parents[1] / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))


@pytest.fixture(autouse=True)
def _clear_env_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("PEOPLE_KEEPER_UNDO_LEVELS", raising=False)
    monkeypatch.delenv("PEOPLE_KEEPER_SEED", raising=False)


@pytest.fixture
def default_config() -> dict:
    from peoplekeeper.config import get_default_config

    return get_default_config()


@pytest.fixture
def seed_model():
    from peoplekeeper.models.people_model import PeopleModel

    return PeopleModel.initial()


@pytest.fixture
def roster(seed_model):
    from peoplekeeper.core.roster import RosterEditor

    return RosterEditor(seed_model)


@pytest.fixture
def bob(seed_model):
    return seed_model[0]


@pytest.fixture(scope="session")
def qt_app():
    QtCore = pytest.importorskip("PyQt6.QtCore")
    app = QtCore.QCoreApplication.instance() or QtCore.QCoreApplication([])
    yield app
