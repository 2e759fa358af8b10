from __future__ import annotations

from typing import Sequence

import dash_bootstrap_components as dbc
from dash import dcc, html

from movie_records.core.record import Record
from movie_records.core.view_state import SortMode
from movie_records.ui.ids import record_delete_id

FONT_FAMILY = 'system-ui, -apple-system, BlinkMacSystemFont, "SF Pro Text", "Segoe UI", sans-serif'

HEADER_STYLE = {
    "fontFamily": FONT_FAMILY,
    "fontSize": "12px",
    "fontWeight": "600",
    "backgroundColor": "#f3f4f6",
    "borderBottom": "1px solid #e5e7eb",
    "color": "#111827",
    "padding": "8px 12px",
    "whiteSpace": "nowrap",
}

CELL_STYLE = {
    "fontFamily": FONT_FAMILY,
    "fontSize": "13px",
    "padding": "6px 12px",
    "borderBottom": "1px solid #e5e7eb",
    "color": "#374151",
    "verticalAlign": "middle",
}


def build_records_panel() -> dbc.Card:
    """
    Stored records card: count, sort selector, pager and the table body
    (populated via callbacks into records-table).
    """
    toolbar = dbc.Row(
        [
            dbc.Col(
                [
                    html.H5("Stored Records", className="mb-0"),
                    html.Div("0 total", id="filtered-count", className="small text-muted"),
                ],
                md=5,
            ),
            dbc.Col(
                html.Div(
                    [
                        dcc.Dropdown(
                            id="sort-select",
                            options=[
                                {"label": "Newest", "value": SortMode.NEWEST.value},
                                {"label": "Oldest", "value": SortMode.OLDEST.value},
                                {"label": "Actor", "value": SortMode.ACTOR_NAME.value},
                            ],
                            value=SortMode.NEWEST.value,
                            clearable=False,
                            style={"minWidth": "130px"},
                            className="me-3",
                        ),
                        html.Div("Page 1/1", id="page-label", className="small text-muted me-3"),
                        dbc.ButtonGroup(
                            [
                                dbc.Button("Prev", id="prev-page-btn", color="secondary", outline=True, size="sm"),
                                dbc.Button("Next", id="next-page-btn", color="secondary", outline=True, size="sm"),
                            ]
                        ),
                    ],
                    className="d-flex justify-content-end align-items-center",
                ),
                md=7,
            ),
        ],
        className="mb-3 align-items-center",
    )

    return dbc.Card(
        [
            dbc.CardBody(
                [
                    toolbar,
                    html.Div(
                        build_records_table([]),
                        id="records-table",
                        style={"overflowX": "auto"},
                    ),
                ]
            ),
        ],
        className="shadow-sm",
    )


def build_records_table(records: Sequence[Record]) -> dbc.Table:
    """
    Builds a styled dbc.Table of records with one Delete button per row.
    """
    thead = html.Thead(
        html.Tr(
            [
                html.Th("Actor Name", style=HEADER_STYLE),
                html.Th("Movie Name", style=HEADER_STYLE),
                html.Th("Action", style={**HEADER_STYLE, "textAlign": "center"}),
            ]
        )
    )

    if not records:
        rows = [
            html.Tr(
                html.Td(
                    "No records found. Add your first entry.",
                    colSpan=3,
                    className="text-center text-muted fst-italic py-5",
                )
            )
        ]
    else:
        rows = [
            html.Tr(
                [
                    html.Td(r.actor_name, style={**CELL_STYLE, "fontWeight": "500"}),
                    html.Td(r.movie_name, style=CELL_STYLE),
                    html.Td(
                        dbc.Button(
                            "Delete",
                            id=record_delete_id(r.id),
                            color="danger",
                            outline=True,
                            size="sm",
                            style={"fontSize": "11px", "padding": "2px 8px", "lineHeight": "1.2"},
                        ),
                        style={**CELL_STYLE, "textAlign": "center"},
                    ),
                ]
            )
            for r in records
        ]

    return dbc.Table(
        [thead, html.Tbody(rows)],
        bordered=False,
        hover=True,
        responsive=True,
        className="mb-0",
        style={"border": "1px solid #e5e7eb", "borderRadius": "4px"},
    )
