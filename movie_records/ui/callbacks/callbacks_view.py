from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Dict, Optional

import dash
from dash import Input, Output, State

from movie_records.core.pipeline import DerivedView, compute
from movie_records.core.view_state import SortMode, ViewParams
from movie_records.ui.callbacks.callbacks_records import records_from_store
from movie_records.ui.figures import top_actors_figure
from movie_records.ui.ids import IDs
from movie_records.ui.layout.build_records_panel import build_records_table
from movie_records.ui.layout.build_sidebar import (
    build_recent_activity_list,
    build_top_actors_list,
)

if TYPE_CHECKING:
    from movie_records.ui.config import AppConfig

logger = logging.getLogger(__name__)

PAGE_RESET_TRIGGERS = (
    IDs.Control.SORT_SELECT,
    IDs.Control.FILTER_MODE,
    IDs.Control.FILTER_TEXT,
)


def build_view_params(
    filter_mode: Optional[str],
    filter_text: Optional[str],
    sort_mode: Optional[str],
    page: Any,
    page_size: int,
) -> ViewParams:
    return ViewParams.from_dict(
        {
            "filter_mode": filter_mode,
            "filter_text": filter_text,
            "sort_mode": sort_mode,
            "page": page,
            "page_size": page_size,
        }
    )


def step_page(trigger: Optional[str], pager: Optional[Dict[str, int]]) -> int:
    """
    Work out the next page from a pager button press.

    Changing the sort order or the filter always returns to the first page.
    Prev/Next move from the page the user currently sees and stay inside
    [1, page_count].
    """
    pager = pager or {}
    current = int(pager.get("page") or 1)
    count = int(pager.get("page_count") or 1)

    if trigger in PAGE_RESET_TRIGGERS:
        return 1
    if trigger == IDs.Control.PREV_PAGE_BTN:
        return max(1, current - 1)
    if trigger == IDs.Control.NEXT_PAGE_BTN:
        return min(count, current + 1)
    return current


def render_view(view: DerivedView) -> tuple:
    return (
        str(view.total_count),
        str(view.unique_actor_count),
        str(len(view.top_actors)),
        top_actors_figure(view.top_actors),
        build_top_actors_list(view.top_actors),
        build_recent_activity_list(view.recent_activity),
        f"{view.filtered_count} total",
        f"Page {view.page}/{view.page_count}",
        build_records_table(view.page_rows),
        {"page": view.page, "page_count": view.page_count},
    )


def register_view_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    page_size = ctx.settings.page_size

    # ---------------------------------------------------------
    # Pager: sort or filter change / prev / next -> page store
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Store.PAGE, "data"),
        Input(IDs.Control.PREV_PAGE_BTN, "n_clicks"),
        Input(IDs.Control.NEXT_PAGE_BTN, "n_clicks"),
        Input(IDs.Control.SORT_SELECT, "value"),
        Input(IDs.Control.FILTER_MODE, "value"),
        Input(IDs.Control.FILTER_TEXT, "value"),
        State(IDs.Store.PAGER, "data"),
        prevent_initial_call=True,
    )
    def update_page(_prev, _next, _sort, _mode, _text, pager):
        return step_page(dash.ctx.triggered_id, pager)

    # ---------------------------------------------------------
    # Controls -> ViewParams
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Store.VIEW_PARAMS, "data"),
        Input(IDs.Control.FILTER_MODE, "value"),
        Input(IDs.Control.FILTER_TEXT, "value"),
        Input(IDs.Control.SORT_SELECT, "value"),
        Input(IDs.Store.PAGE, "data"),
    )
    def update_view_params(filter_mode, filter_text, sort_mode, page):
        params = build_view_params(filter_mode, filter_text, sort_mode or SortMode.NEWEST.value, page, page_size)
        return params.to_dict()

    # ---------------------------------------------------------
    # Records + ViewParams -> everything on screen
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Control.STAT_TOTAL, "children"),
        Output(IDs.Control.STAT_ACTORS, "children"),
        Output(IDs.Control.STAT_TOP_ACTORS, "children"),
        Output(IDs.Control.TOP_ACTORS_GRAPH, "figure"),
        Output(IDs.Control.TOP_ACTORS_LIST, "children"),
        Output(IDs.Control.RECENT_ACTIVITY_LIST, "children"),
        Output(IDs.Control.FILTERED_COUNT, "children"),
        Output(IDs.Control.PAGE_LABEL, "children"),
        Output(IDs.Control.RECORDS_TABLE, "children"),
        Output(IDs.Store.PAGER, "data"),
        Input(IDs.Store.RECORDS, "data"),
        Input(IDs.Store.VIEW_PARAMS, "data"),
    )
    def update_dashboard(records_data, params_data):
        records = records_from_store(records_data)
        params = ViewParams.from_dict(params_data or {"page_size": page_size})
        view = compute(records, params)

        logger.debug(
            "render_view",
            extra={
                "n_records": view.total_count,
                "n_filtered": view.filtered_count,
                "page": view.page,
            },
        )
        return render_view(view)

    # ---------------------------------------------------------
    # Sidebar collapse
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Control.SIDEBAR_COLLAPSE, "is_open"),
        Output(IDs.Control.SIDEBAR_TOGGLE_BTN, "children"),
        Input(IDs.Control.SIDEBAR_TOGGLE_BTN, "n_clicks"),
        State(IDs.Control.SIDEBAR_COLLAPSE, "is_open"),
        prevent_initial_call=True,
    )
    def toggle_sidebar(n_clicks, is_open):
        if not n_clicks:
            raise dash.exceptions.PreventUpdate
        now_open = not is_open
        return now_open, "Hide" if now_open else "Show"
