from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import dash_bootstrap_components as dbc
import requests
from dash import Dash

from .config import AppConfig
from movie_records.config import Settings, load_settings
from movie_records.services.record_store import RecordStore
from movie_records.ui.layout.build_layout import build_layout
from movie_records.ui.callbacks.callbacks_records import register_records_callbacks
from movie_records.ui.callbacks.callbacks_view import register_view_callbacks
from movie_records.ui.callbacks.callbacks_export import register_export_callbacks

logger = logging.getLogger(__name__)


def create_dash_app(
    config_root: Path | str = Path("config"),
    settings: Optional[Settings] = None,
    session: Optional[requests.Session] = None,
) -> Dash:
    config_root = Path(config_root)

    # 1) Load Config
    if settings is None:
        settings = load_settings(config_root)

    # 2) Initialize Service Layer
    store = RecordStore(
        settings.api_base_url,
        session=session,
        timeout=settings.request_timeout,
        endpoints=settings.endpoints,
    )

    # 3) App Context
    ctx = AppConfig(
        config_root=config_root,
        settings=settings,
        store=store,
    )
    ctx.validate()

    app = Dash(
        __name__,
        external_stylesheets=[dbc.themes.FLATLY],
    )
    app.title = settings.ui_title

    app.layout = build_layout(ctx)

    # Register callbacks
    register_records_callbacks(app, ctx)
    register_view_callbacks(app, ctx)
    register_export_callbacks(app, ctx)

    logger.info("Dash app created", extra={"api_base_url": settings.api_base_url})
    return app
