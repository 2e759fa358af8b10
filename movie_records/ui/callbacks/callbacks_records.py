from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, List, Optional

import dash
from dash import ALL, Input, Output, State

from movie_records.core.exceptions import TransportError, ValidationError
from movie_records.core.record import Record
from movie_records.services.record_store import RecordStore
from movie_records.ui.ids import IDs

if TYPE_CHECKING:
    from movie_records.ui.config import AppConfig

logger = logging.getLogger(__name__)

ACTION_LOAD = "load"
ACTION_CREATE = "create"
ACTION_DELETE = "delete"


@dataclass
class RecordsUpdate:
    """Everything a records action hands back to the UI."""

    records: List[dict]
    form_status: str = ""
    clear_form: bool = False
    status: str = ""


def records_to_store(records) -> List[dict]:
    return [r.to_dict() for r in records]


def records_from_store(data: Any) -> List[Record]:
    if not isinstance(data, list):
        return []
    return [Record.from_dict(item) for item in data if isinstance(item, dict)]


def _refresh(store: RecordStore) -> str:
    """Re-fetch after a mutation; returns a status message."""
    try:
        store.fetch_all()
    except TransportError as e:
        logger.warning("Refresh failed, showing last known records: %s", e)
        return "Could not refresh records; showing last known data."
    return f"Loaded {len(store.records)} records."


def handle_records_action(
    store: RecordStore,
    action: str,
    *,
    actor_name: Any = None,
    movie_name: Any = None,
    record_id: Any = None,
) -> RecordsUpdate:
    """
    Run one user action against the store and describe the outcome.

    Failures never escape: the store keeps its last good snapshot and the
    returned update carries a short message for the UI.
    """
    if action == ACTION_CREATE:
        try:
            store.create(actor_name, movie_name)
        except ValidationError as e:
            return RecordsUpdate(
                records=records_to_store(store.records),
                form_status=" ".join(i.message for i in e.issues),
            )
        except TransportError as e:
            logger.error("Create failed: %s", e)
            return RecordsUpdate(
                records=records_to_store(store.records),
                form_status="Could not save the record. Please try again.",
            )
        status = _refresh(store)
        return RecordsUpdate(
            records=records_to_store(store.records),
            form_status="Record added.",
            clear_form=True,
            status=status,
        )

    if action == ACTION_DELETE:
        try:
            store.delete(record_id)
        except TransportError as e:
            logger.error("Delete failed: %s", e)
            return RecordsUpdate(
                records=records_to_store(store.records),
                status="Could not delete the record.",
            )
        status = _refresh(store)
        return RecordsUpdate(records=records_to_store(store.records), status=status)

    return RecordsUpdate(records=records_to_store(store.records), status=_refresh(store))


def _triggered_delete_id() -> Optional[Any]:
    triggered = dash.ctx.triggered_id
    if not isinstance(triggered, dict) or triggered.get("type") != IDs.Pattern.RECORD_DELETE:
        return None
    # New delete buttons appearing in the table also fire this callback
    if not any(t.get("value") for t in dash.ctx.triggered):
        return None
    return triggered.get("index")


def register_records_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    # ---------------------------------------------------------
    # Load / create / delete -> records store
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Store.RECORDS, "data"),
        Output(IDs.Control.ADD_RECORD_STATUS, "children"),
        Output(IDs.Control.ACTOR_INPUT, "value"),
        Output(IDs.Control.MOVIE_INPUT, "value"),
        Output(IDs.Control.STATUS_BAR, "children"),
        Input(IDs.Control.ADD_RECORD_BTN, "n_clicks"),
        Input({"type": IDs.Pattern.RECORD_DELETE, "index": ALL}, "n_clicks"),
        State(IDs.Control.ACTOR_INPUT, "value"),
        State(IDs.Control.MOVIE_INPUT, "value"),
    )
    def update_records(_add_clicks, _delete_clicks, actor_name, movie_name):
        triggered = dash.ctx.triggered_id

        if triggered == IDs.Control.ADD_RECORD_BTN:
            update = handle_records_action(
                ctx.store, ACTION_CREATE, actor_name=actor_name, movie_name=movie_name
            )
        elif isinstance(triggered, dict):
            record_id = _triggered_delete_id()
            if record_id is None:
                raise dash.exceptions.PreventUpdate
            update = handle_records_action(ctx.store, ACTION_DELETE, record_id=record_id)
        else:
            update = handle_records_action(ctx.store, ACTION_LOAD)

        if update.clear_form:
            actor_out, movie_out = "", ""
        else:
            actor_out, movie_out = dash.no_update, dash.no_update

        return (
            update.records,
            update.form_status,
            actor_out,
            movie_out,
            update.status or dash.no_update,
        )
