# -*- coding: utf-8 -*-
"""Application entry point."""

from __future__ import annotations

import logging
from pathlib import Path

from peoplekeeper.cli.roster_cli import app
from peoplekeeper.config import ConfigError, get_default_config, load_config
from peoplekeeper.constants import APP_NAME
from peoplekeeper.utils.logger import setup_session_logging


def main() -> int:
    """Set up logging and dispatch to the CLI."""
    try:
        settings = load_config()
        settings_error: ConfigError | None = None
    except ConfigError as exc:
        settings = get_default_config()
        settings_error = exc

    session_log_path = setup_session_logging(
        Path.cwd(),
        APP_NAME,
        session_log=bool(settings.get("logging", {}).get("session_log", True)),
    )
    logger = logging.getLogger(__name__)
    if session_log_path is not None:
        logger.info("Session log file: %s", session_log_path)
    if settings_error is not None:
        logger.warning("Default settings file is invalid: %s", settings_error)

    app(prog_name=APP_NAME)
    return 0
