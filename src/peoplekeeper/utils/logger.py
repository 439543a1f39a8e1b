# -*- coding: utf-8 -*-
"""Root logging setup: console output plus an optional per-session log file."""

from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path


LOG_FORMAT = "%(asctime)s %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%dT%H:%M:%S"


def get_logger(name: str, log_file: str | Path | None = None) -> logging.Logger:
    """Return the named logger, optionally also writing DEBUG records to ``log_file``.

    Records still propagate to the root handlers installed by
    ``setup_session_logging``. Asking twice for the same file does not add a
    second handler.
    """
    logger = logging.getLogger(name)
    if log_file is None:
        return logger

    path = Path(log_file).resolve()
    for handler in logger.handlers:
        if isinstance(handler, logging.FileHandler) and Path(handler.baseFilename) == path:
            return logger

    path.parent.mkdir(parents=True, exist_ok=True)
    file_handler = logging.FileHandler(path, encoding="utf-8")
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    logger.addHandler(file_handler)
    logger.setLevel(logging.DEBUG)
    return logger


def setup_session_logging(
    base_dir: str | Path,
    app_name: str,
    session_log: bool = True,
    console_level: int = logging.WARNING,
) -> Path | None:
    """Configure the root logger once per process.

    The console handler only shows warnings by default so CLI output stays
    readable; the session file, when enabled, records everything at DEBUG.
    """
    root = logging.getLogger()
    if getattr(root, "_peoplekeeper_logging_configured", False):
        return getattr(root, "_peoplekeeper_session_log", None)

    root.setLevel(logging.DEBUG)
    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    if not any(isinstance(handler, logging.StreamHandler) for handler in root.handlers):
        stream_handler = logging.StreamHandler()
        stream_handler.setLevel(console_level)
        stream_handler.setFormatter(formatter)
        root.addHandler(stream_handler)

    session_log_path: Path | None = None
    if session_log:
        logs_dir = Path(base_dir) / "logs"
        logs_dir.mkdir(parents=True, exist_ok=True)
        timestamp = datetime.now().strftime("%Y%m%d-%H%M%S")
        session_log_path = logs_dir / f"{app_name.lower().replace(' ', '-')}-{timestamp}.log"
        try:
            file_handler = logging.FileHandler(session_log_path, encoding="utf-8")
        except OSError as exc:
            root.error("Failed to open session log file %s: %s", session_log_path, exc)
            session_log_path = None
        else:
            file_handler.setLevel(logging.DEBUG)
            file_handler.setFormatter(formatter)
            root.addHandler(file_handler)
            root.info("Session log file established: %s", session_log_path)

    root._peoplekeeper_logging_configured = True  # type: ignore[attr-defined]
    root._peoplekeeper_session_log = session_log_path  # type: ignore[attr-defined]
    return session_log_path
