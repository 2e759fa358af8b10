from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

from movie_records.core.exceptions import ConfigError
from movie_records.core.view_state import DEFAULT_PAGE_SIZE
from movie_records.services.record_store import DEFAULT_ENDPOINTS, DEFAULT_TIMEOUT

logger = logging.getLogger(__name__)

DEFAULT_API_BASE = "https://todolist.elevaitelabs.in/api/read_actor_movies.php"


@dataclass
class Settings:
    ui_title: str = "Actor & Movie Records"
    subtitle: str = "Movie Database Dashboard"
    api_base_url: str = DEFAULT_API_BASE
    page_size: int = DEFAULT_PAGE_SIZE
    request_timeout: float = DEFAULT_TIMEOUT
    endpoints: Dict[str, str] = field(default_factory=lambda: dict(DEFAULT_ENDPOINTS))


def _read_global_json(root: Path) -> Dict[str, Any]:
    global_path = root / "global.json"
    if not global_path.is_file():
        logger.info("No global.json found, using defaults", extra={"config_root": str(root)})
        return {}

    try:
        with global_path.open(encoding="utf-8") as f:
            raw = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise ConfigError(f"Could not read {global_path}: {e}") from e

    if not isinstance(raw, dict):
        raise ConfigError(f"{global_path} must contain a JSON object")
    return raw


def _as_positive_int(value: Any, name: str) -> int:
    try:
        number = int(value)
    except (TypeError, ValueError) as e:
        raise ConfigError(f"{name} must be an integer, got {value!r}") from e
    if number <= 0:
        raise ConfigError(f"{name} must be positive, got {number}")
    return number


def _as_positive_float(value: Any, name: str) -> float:
    try:
        number = float(value)
    except (TypeError, ValueError) as e:
        raise ConfigError(f"{name} must be a number, got {value!r}") from e
    if number <= 0:
        raise ConfigError(f"{name} must be positive, got {number}")
    return number


def load_settings(
    config_root: Path | str = Path("config"),
    environ: Optional[Mapping[str, str]] = None,
) -> Settings:
    """
    Build Settings from config/global.json, then apply environment overrides.

    Selection order for each value:
        1) env var (RECORDS_API_BASE, RECORDS_PAGE_SIZE, RECORDS_REQUEST_TIMEOUT)
        2) key in global.json
        3) built-in default

    :raises ConfigError: if global.json is malformed or a value is invalid
    """
    env = os.environ if environ is None else environ
    raw = _read_global_json(Path(config_root))
    defaults = Settings()

    endpoints = dict(defaults.endpoints)
    raw_endpoints = raw.get("endpoints") or {}
    if not isinstance(raw_endpoints, dict):
        raise ConfigError("'endpoints' must be an object")
    unknown = set(raw_endpoints) - set(endpoints)
    if unknown:
        raise ConfigError(f"Unknown endpoints in config: {sorted(unknown)}")
    endpoints.update({k: str(v) for k, v in raw_endpoints.items()})

    settings = Settings(
        ui_title=raw.get("ui_title", defaults.ui_title),
        subtitle=raw.get("subtitle", defaults.subtitle),
        api_base_url=env.get("RECORDS_API_BASE") or raw.get("api_base_url", defaults.api_base_url),
        page_size=_as_positive_int(
            env.get("RECORDS_PAGE_SIZE") or raw.get("page_size", defaults.page_size),
            "page_size",
        ),
        request_timeout=_as_positive_float(
            env.get("RECORDS_REQUEST_TIMEOUT") or raw.get("request_timeout", defaults.request_timeout),
            "request_timeout",
        ),
        endpoints=endpoints,
    )

    logger.info(
        "Loaded settings",
        extra={"api_base_url": settings.api_base_url, "page_size": settings.page_size},
    )
    return settings
