from __future__ import annotations

from typing import TYPE_CHECKING

import dash_bootstrap_components as dbc
from dash import dcc

from movie_records.core.view_state import ViewParams
from movie_records.ui.layout.build_add_record_panel import build_add_record_panel
from movie_records.ui.layout.build_header import build_header
from movie_records.ui.layout.build_records_panel import build_records_panel
from movie_records.ui.layout.build_sidebar import build_sidebar

if TYPE_CHECKING:
    from movie_records.ui.config import AppConfig


def build_layout(ctx: AppConfig):
    settings = ctx.settings
    initial_params = ViewParams(page_size=settings.page_size)

    return dbc.Container(
        fluid=True,
        className="mrd-root",
        children=[
            build_header(settings),

            # App-level stores
            dcc.Store(id="records-store", data=[]),
            dcc.Store(id="view-params", data=initial_params.to_dict()),
            dcc.Store(id="page-store", data=1),
            dcc.Store(id="pager-store", data={"page": 1, "page_count": 1}),

            dbc.Row(
                [
                    dbc.Col(build_sidebar(), md=4, className="mt-3"),
                    dbc.Col(
                        [
                            build_records_panel(),
                            build_add_record_panel(),
                        ],
                        md=8,
                        className="mt-3",
                    ),
                ],
                className="gx-3",
            ),
        ],
    )
