from __future__ import annotations

from typing import Sequence

import dash_bootstrap_components as dbc
from dash import dcc, html

from movie_records.core.pipeline import ChartPoint
from movie_records.core.record import Record
from movie_records.core.view_state import FilterMode
from movie_records.ui.figures import empty_figure


def _stat(value_id: str, label: str) -> dbc.Col:
    return dbc.Col(
        [
            html.Div("0", id=value_id, className="fs-3 fw-bold"),
            html.Div(label, className="small text-muted"),
        ],
        className="text-center",
    )


def build_sidebar() -> dbc.Card:
    """
    Dashboard sidebar:
    - record / actor / top-actor counts
    - top actors chart + list
    - filter mode buttons and filter text
    - recent activity
    - export + collapse buttons
    """
    header = dbc.CardHeader(
        html.Div(
            [
                html.Div(
                    [
                        html.Div("Dashboard", className="fw-semibold"),
                        html.Small("Quick stats and insights", className="text-muted"),
                    ]
                ),
                html.Div(
                    [
                        dbc.Button(
                            "Export",
                            id="export-csv-btn",
                            color="secondary",
                            outline=True,
                            size="sm",
                            className="me-2",
                            title="Export CSV",
                        ),
                        dcc.Download(id="download-csv"),
                        dbc.Button(
                            "Hide",
                            id="sidebar-toggle-btn",
                            color="secondary",
                            outline=True,
                            size="sm",
                            title="Toggle",
                        ),
                    ],
                    className="d-flex",
                ),
            ],
            className="d-flex justify-content-between align-items-start",
        )
    )

    body = dbc.Collapse(
        dbc.CardBody(
            [
                dbc.Row(
                    [
                        _stat("stat-total", "Records"),
                        _stat("stat-actors", "Actors"),
                        _stat("stat-top-actors", "Top Actors"),
                    ],
                    className="mb-3 g-2",
                ),

                html.Label("Top actors", className="form-label"),
                dcc.Graph(
                    id="top-actors-graph",
                    figure=empty_figure("No records yet"),
                    config={"displayModeBar": False},
                ),
                html.Ul(id="top-actors-list", className="list-unstyled small mt-2"),

                html.Hr(),
                html.Label("Filters", className="form-label"),
                dbc.RadioItems(
                    id="filter-mode",
                    options=[
                        {"label": "All", "value": FilterMode.ALL.value},
                        {"label": "Actor", "value": FilterMode.BY_ACTOR.value},
                        {"label": "Movie", "value": FilterMode.BY_MOVIE.value},
                    ],
                    value=FilterMode.ALL.value,
                    inline=True,
                    className="btn-group mb-2",
                    inputClassName="btn-check",
                    labelClassName="btn btn-outline-warning btn-sm",
                    labelCheckedClassName="active",
                ),
                dbc.Input(
                    id="filter-text",
                    type="text",
                    placeholder="Search actor or movie",
                    debounce=False,
                    size="sm",
                    className="mb-3",
                ),

                html.Hr(),
                html.Label("Recent activity", className="form-label"),
                html.Ul(id="recent-activity-list", className="list-unstyled small"),
            ]
        ),
        id="sidebar-collapse",
        is_open=True,
    )

    return dbc.Card([header, body], className="mrd-sidebar shadow-sm")


def build_top_actors_list(points: Sequence[ChartPoint]) -> list:
    return [
        html.Li(
            [
                html.Span(p.label),
                html.Span(str(p.value), className="fw-semibold text-warning"),
            ],
            className="d-flex justify-content-between",
        )
        for p in points
    ]


def format_record_date(record: Record) -> str:
    return record.created_at.strftime("%x") if record.created_at is not None else ""


def build_recent_activity_list(records: Sequence[Record]) -> list:
    if not records:
        return [html.Li("No activity yet.", className="text-muted")]

    return [
        html.Li(
            [
                html.Div(
                    [r.actor_name, " · ", html.Span(r.movie_name, className="text-muted")],
                    className="text-truncate",
                ),
                html.Div(format_record_date(r), className="text-muted ms-2"),
            ],
            className="d-flex justify-content-between align-items-center mb-1",
        )
        for r in records
    ]
