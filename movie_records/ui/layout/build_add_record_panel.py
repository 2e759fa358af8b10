from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import html


def build_add_record_panel() -> dbc.Card:
    return dbc.Card(
        [
            dbc.CardHeader("Add New Record", className="fw-semibold"),
            dbc.CardBody(
                [
                    dbc.Row(
                        [
                            dbc.Col(
                                [
                                    html.Label("Actor Name", className="form-label"),
                                    dbc.Input(id="actor-input", type="text", placeholder="e.g. Allu Arjun"),
                                ],
                                md=4,
                            ),
                            dbc.Col(
                                [
                                    html.Label("Movie Name", className="form-label"),
                                    dbc.Input(id="movie-input", type="text", placeholder="e.g. Pushpa"),
                                ],
                                md=4,
                            ),
                            dbc.Col(
                                dbc.Button(
                                    "Add Record",
                                    id="add-record-btn",
                                    color="warning",
                                    className="w-100 fw-bold",
                                ),
                                md=4,
                                className="d-flex align-items-end",
                            ),
                        ],
                        className="g-3",
                    ),
                    html.Div(id="add-record-status", className="small mt-2"),
                ]
            ),
        ],
        className="shadow-sm mt-3",
    )
