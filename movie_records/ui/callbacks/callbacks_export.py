from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import dash
from dash import Input, Output, State, dcc

from movie_records.export.csv_export import CSV_MIME_TYPE, export_filename, to_csv
from movie_records.ui.callbacks.callbacks_records import records_from_store
from movie_records.ui.ids import IDs

if TYPE_CHECKING:
    from movie_records.ui.config import AppConfig

logger = logging.getLogger(__name__)


def register_export_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    @app.callback(
        Output(IDs.Control.DOWNLOAD_CSV, "data"),
        Input(IDs.Control.EXPORT_BTN, "n_clicks"),
        State(IDs.Store.RECORDS, "data"),
        prevent_initial_call=True,
    )
    def export_records_csv(n_clicks, records_data):
        if not n_clicks:
            raise dash.exceptions.PreventUpdate

        records = records_from_store(records_data)
        filename = export_filename()
        logger.info("Exporting records", extra={"n_records": len(records), "export_file": filename})
        return dcc.send_string(to_csv(records), filename, type=CSV_MIME_TYPE)
