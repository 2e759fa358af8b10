from __future__ import annotations

import plotly.graph_objs as go
from dash import Dash
from dash.development.base_component import Component

from movie_records.config import Settings
from movie_records.core.pipeline import ChartPoint
from movie_records.ui.dash_app import create_dash_app
from movie_records.ui.figures import top_actors_figure
from movie_records.ui.ids import IDs
from movie_records.ui.layout.build_records_panel import build_records_table
from movie_records.ui.layout.build_sidebar import build_recent_activity_list

from tests.factories import FakeSession, make_record


def _collect_ids(component, found=None):
    found = found if found is not None else []
    cid = getattr(component, "id", None)
    if cid is not None:
        found.append(cid)
    children = getattr(component, "children", None)
    if isinstance(children, (list, tuple)):
        for child in children:
            _collect_ids(child, found)
    elif isinstance(children, Component):
        _collect_ids(children, found)
    return found


def test_top_actors_figure_has_one_bar_per_actor():
    fig = top_actors_figure([ChartPoint("A", 3), ChartPoint("B", 1)])

    assert isinstance(fig, go.Figure)
    assert list(fig.data[0].x) == ["A", "B"]
    assert list(fig.data[0].y) == [3, 1]


def test_top_actors_figure_empty():
    fig = top_actors_figure([])
    assert len(fig.data) == 0
    assert fig.layout.title.text == "No records yet"


def test_records_table_has_delete_button_per_row():
    records = [make_record(1, "A", "X", "2024-01-01"), make_record(2, "B", "Y", "2024-02-01")]
    ids = _collect_ids(build_records_table(records))

    assert {"type": IDs.Pattern.RECORD_DELETE, "index": 1} in ids
    assert {"type": IDs.Pattern.RECORD_DELETE, "index": 2} in ids


def test_records_table_empty_state():
    table = build_records_table([])
    ids = _collect_ids(table)
    assert not any(isinstance(i, dict) for i in ids)


def test_recent_activity_empty_state():
    items = build_recent_activity_list([])
    assert len(items) == 1


def test_create_dash_app_builds_layout_without_network():
    session = FakeSession()
    app = create_dash_app(settings=Settings(ui_title="Test Records"), session=session)

    assert isinstance(app, Dash)
    assert app.title == "Test Records"
    assert session.calls == []

    ids = _collect_ids(app.layout)
    for expected in (
        IDs.Store.RECORDS,
        IDs.Store.VIEW_PARAMS,
        IDs.Control.RECORDS_TABLE,
        IDs.Control.TOP_ACTORS_GRAPH,
        IDs.Control.ADD_RECORD_BTN,
        IDs.Control.EXPORT_BTN,
    ):
        assert expected in ids
