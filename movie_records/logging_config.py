from __future__ import annotations

import logging
import os
from typing import Optional

from pythonjsonlogger import jsonlogger

# requests logs every pooled connection through urllib3
QUIET_LOGGERS = ("urllib3",)


def _level_from_env(default: int = logging.INFO) -> int:
    name = os.getenv("MOVIE_RECORDS_LOG_LEVEL", "").strip().upper()
    if not name:
        return default
    value = logging.getLevelName(name)
    return value if isinstance(value, int) else default


def configure_logging(
        level: Optional[int] = None,
        force_format: Optional[str] = None,
        library_level: int = logging.WARNING,
) -> None:
    """
    Configure root logger for the dashboard

    Modes:
    - JSON (default), one object per line with any `extra` fields attached
    - plain text (dev mode)

    Selection Order:
        1) force_format argument ("json" or "plain") if provided
        2) env var MOVIE_RECORDS_LOG_FORMAT
        3) default = "json"

    The level comes from `level`, else MOVIE_RECORDS_LOG_LEVEL, else INFO.
    HTTP client loggers are held at `library_level` so a DEBUG run shows
    record operations rather than connection chatter.
    """

    if force_format is not None:
        format_mode = force_format.lower()
    else:
        format_mode = os.getenv("MOVIE_RECORDS_LOG_FORMAT", "json").lower()

    if level is None:
        level = _level_from_env()

    root = logging.getLogger()
    root.setLevel(level)

    handler = logging.StreamHandler()
    if format_mode == "plain":
        handler.setFormatter(
            logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s")
        )
    else:
        handler.setFormatter(
            jsonlogger.JsonFormatter(
                "%(asctime)s %(levelname)s %(name)s %(message)s",
                rename_fields={"levelname": "level", "name": "logger"},
            )
        )

    root.handlers.clear()
    root.addHandler(handler)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(level, library_level))
