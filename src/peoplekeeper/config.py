# -*- coding: utf-8 -*-
"""Settings persistence and validation."""

from __future__ import annotations

import json
import os
from copy import deepcopy
from pathlib import Path
from typing import Any

from peoplekeeper.constants import (
    DEFAULT_HOTKEYS,
    DEFAULT_SETTINGS_FILE,
    ENV_SEED,
    ENV_UNDO_LEVELS,
    ROSTER_SEEDS,
)
from peoplekeeper.models.features import EyeColor, FacialHair, HairColor, HairLength, parse_feature
from peoplekeeper.models.person import Face
from peoplekeeper.utils.file_utils import read_json_file, write_json_file


DEFAULT_CONFIG: dict[str, Any] = {
    "history": {"levels": 0},
    "roster": {"seed": "sample"},
    "new_person": {
        "hair_color": "black",
        "hair_length": "bald",
        "eye_color": "black",
        "facial_hair": [],
        "glasses": False,
    },
    "hotkeys": deepcopy(DEFAULT_HOTKEYS),
    "logging": {"session_log": True},
}


class ConfigError(ValueError):
    """Raised when settings are invalid."""


def get_default_config() -> dict[str, Any]:
    """Return a deep copy of the default config."""
    return deepcopy(DEFAULT_CONFIG)


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    merged = deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def _read_env_file(env_path: Path) -> dict[str, str]:
    """Read KEY=VALUE pairs from a .env file, ignoring comments."""
    if not env_path.is_file():
        return {}
    values: dict[str, str] = {}
    for line in env_path.read_text(encoding="utf-8").splitlines():
        key, sep, value = line.strip().partition("=")
        if not sep or not key or key.startswith("#"):
            continue
        values[key.strip()] = value.strip().strip("\"'")
    return values


def _section(config: dict[str, Any], name: str) -> dict[str, Any]:
    value = config.get(name, {})
    if not isinstance(value, dict):
        raise ConfigError(f"{name} must be an object, got {type(value).__name__}")
    return value


def _read_settings_file(path: Path) -> dict[str, Any]:
    try:
        return read_json_file(path)
    except json.JSONDecodeError as exc:
        raise ConfigError(f"Invalid JSON in {path}: {exc}") from exc
    except ValueError as exc:
        raise ConfigError(str(exc)) from exc


def _apply_env_overrides(config: dict[str, Any], env_values: dict[str, str]) -> dict[str, Any]:
    """Apply environment-based overrides; the process environment wins over .env."""
    merged = deepcopy(config)
    levels = os.environ.get(ENV_UNDO_LEVELS, env_values.get(ENV_UNDO_LEVELS, "")).strip()
    seed = os.environ.get(ENV_SEED, env_values.get(ENV_SEED, "")).strip()

    if levels:
        try:
            parsed_levels = int(levels)
        except ValueError as exc:
            raise ConfigError(f"{ENV_UNDO_LEVELS} must be an integer, got '{levels}'") from exc
        merged["history"] = {**_section(merged, "history"), "levels": parsed_levels}
    if seed:
        merged["roster"] = {**_section(merged, "roster"), "seed": seed.lower()}
    return merged


def new_person_face(config: dict[str, Any]) -> Face:
    """Build the face used for newly added people."""
    template = _section(config, "new_person")
    try:
        return Face(
            hair_color=parse_feature(HairColor, template.get("hair_color", "black")),
            hair_length=parse_feature(HairLength, template.get("hair_length", "bald")),
            eye_color=parse_feature(EyeColor, template.get("eye_color", "black")),
            facial_hair=frozenset(parse_feature(FacialHair, item) for item in template.get("facial_hair", [])),
            glasses=bool(template.get("glasses", False)),
        )
    except ValueError as exc:
        raise ConfigError(f"new_person: {exc}") from exc


def _validate_hotkeys(hotkeys: dict[str, Any]) -> None:
    for action in DEFAULT_HOTKEYS:
        sequence = hotkeys.get(action)
        if not isinstance(sequence, str) or not sequence.strip():
            raise ConfigError(f"hotkeys.{action} must be a non-empty key sequence")
    unknown = sorted(set(hotkeys) - set(DEFAULT_HOTKEYS))
    if unknown:
        raise ConfigError(f"Unknown hotkey action(s): {', '.join(unknown)}")
    sequences = [hotkeys[action].strip().lower() for action in DEFAULT_HOTKEYS]
    if len(set(sequences)) != len(sequences):
        raise ConfigError("hotkeys must not bind one key sequence to several actions")


def validate_config(config: dict[str, Any]) -> None:
    """Validate the fields the editors depend on."""
    levels = _section(config, "history").get("levels")
    if not isinstance(levels, int) or isinstance(levels, bool) or levels < 0:
        raise ConfigError("history.levels must be an int >= 0 (0 = unlimited)")

    seed = _section(config, "roster").get("seed")
    if seed not in ROSTER_SEEDS:
        raise ConfigError(f"roster.seed must be one of {', '.join(ROSTER_SEEDS)}")

    facial_hair = _section(config, "new_person").get("facial_hair", [])
    if not isinstance(facial_hair, list):
        raise ConfigError("new_person.facial_hair must be a list")
    new_person_face(config)

    _validate_hotkeys(_section(config, "hotkeys"))


def load_config(path: str | Path | None = None) -> dict[str, Any]:
    """Load config from JSON and merge into defaults."""
    config_path = Path(path or DEFAULT_SETTINGS_FILE)
    env_values = _read_env_file(config_path.parent / ".env")
    if not config_path.exists():
        merged = _apply_env_overrides(get_default_config(), env_values)
    else:
        loaded = _read_settings_file(config_path)
        merged = _apply_env_overrides(_deep_merge(get_default_config(), loaded), env_values)
    validate_config(merged)
    return merged


def save_config(config: dict[str, Any], path: str | Path | None = None) -> Path:
    """Validate and save config as JSON."""
    validate_config(config)
    return write_json_file(path or DEFAULT_SETTINGS_FILE, config)
