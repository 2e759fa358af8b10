from __future__ import annotations

import csv
from datetime import date
from typing import Optional, Sequence

import pandas as pd

from movie_records.core.record import Record, format_timestamp

CSV_COLUMNS = ["id", "actorName", "movieName", "createdAt"]
CSV_MIME_TYPE = "text/csv"


def records_to_frame(records: Sequence[Record]) -> pd.DataFrame:
    """
    One row per record, in input order, with every value as text.
    """
    rows = [
        {
            "id": "" if r.id is None else str(r.id),
            "actorName": r.actor_name,
            "movieName": r.movie_name,
            "createdAt": format_timestamp(r.created_at),
        }
        for r in records
    ]
    return pd.DataFrame(rows, columns=CSV_COLUMNS, dtype=object)


def to_csv(records: Sequence[Record]) -> str:
    """
    Render records as comma-separated text.

    The header line is written bare. Every data field is double-quoted and
    embedded quotes are doubled, so values containing commas, quotes or
    newlines read back unchanged.
    """
    header = ",".join(CSV_COLUMNS) + "\n"
    if not records:
        return header
    df = records_to_frame(records)
    return header + df.to_csv(
        index=False, header=False, quoting=csv.QUOTE_ALL, lineterminator="\n"
    )


def export_filename(today: Optional[date] = None) -> str:
    today = today or date.today()
    return f"records_{today.isoformat()}.csv"
