from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import html

from movie_records.config import Settings


def build_header(settings: Settings) -> dbc.Navbar:
    return dbc.Navbar(
        dbc.Container(
            fluid=True,
            children=[
                html.Div(
                    [
                        dbc.Badge(
                            "Movie Database",
                            color="warning",
                            text_color="dark",
                            pill=True,
                            className="mb-1 align-self-start",
                        ),
                        html.H2(settings.ui_title, className="mb-0"),
                        html.Small(settings.subtitle, className="text-muted"),
                    ],
                    className="d-flex flex-column justify-content-center",
                ),
                html.Div(
                    id="status-bar",
                    className="ms-auto small text-muted",
                ),
            ],
        ),
        dark=False,
        className="shadow-sm mrd-navbar",
    )
