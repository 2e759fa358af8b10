from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import datetime
from functools import lru_cache
from typing import Dict, List, Sequence, Tuple

from pyuca import Collator

from .record import Record
from .view_state import FilterMode, SortMode, ViewParams

TOP_ACTORS_LIMIT = 6
RECENT_ACTIVITY_LIMIT = 6


@dataclass(frozen=True)
class ChartPoint:
    label: str
    value: int


@dataclass(frozen=True)
class DerivedView:
    """
    Everything the dashboard renders for one (records, params) pair.

    Table fields (filtered_count, page_rows, page, page_count) follow the
    filter/sort/page selection. Sidebar fields (total_count,
    unique_actor_count, top_actors, recent_activity) always describe the
    full record set.
    """

    filtered_count: int
    total_count: int
    unique_actor_count: int
    top_actors: Tuple[ChartPoint, ...]
    page_rows: Tuple[Record, ...]
    page: int
    page_count: int
    recent_activity: Tuple[Record, ...]


# ----------------------------------------------------------------------
# Stages
# ----------------------------------------------------------------------
def filter_records(
    records: Sequence[Record], mode: FilterMode, text: str
) -> List[Record]:
    if mode is FilterMode.ALL:
        return list(records)

    needle = (text or "").casefold()
    if mode is FilterMode.BY_ACTOR:
        return [r for r in records if needle in r.actor_name.casefold()]
    return [r for r in records if needle in r.movie_name.casefold()]


def _created_key(record: Record) -> datetime:
    return record.created_at if record.created_at is not None else datetime.min


@lru_cache(maxsize=1)
def _collator() -> Collator:
    # loads the DUCET table once, on first actor sort
    return Collator()


def _actor_key(record: Record) -> Tuple[int, ...]:
    return _collator().sort_key(record.actor_name.casefold())


def sort_records(records: Sequence[Record], mode: SortMode) -> List[Record]:
    # sorted() is stable, including with reverse=True
    if mode is SortMode.NEWEST:
        return sorted(records, key=_created_key, reverse=True)
    if mode is SortMode.OLDEST:
        return sorted(records, key=_created_key)
    return sorted(records, key=_actor_key)


def page_count_for(n_items: int, page_size: int) -> int:
    return max(1, math.ceil(n_items / page_size))


def paginate(
    records: Sequence[Record], page: int, page_size: int
) -> Tuple[List[Record], int, int]:
    """
    Slice one page out of records.

    :return: (rows, clamped page, page_count)
    """
    pages = page_count_for(len(records), page_size)
    page = min(max(page, 1), pages)
    start = (page - 1) * page_size
    return list(records[start:start + page_size]), page, pages


def count_unique_actors(records: Sequence[Record]) -> int:
    return len({r.actor_name for r in records})


def top_actors(
    records: Sequence[Record], limit: int = TOP_ACTORS_LIMIT
) -> List[ChartPoint]:
    """
    Actors with the most records, most first.

    Counts are kept in insertion order, so the stable sort leaves the actor
    seen first in front whenever two counts tie.
    """
    counts: Dict[str, int] = {}
    for r in records:
        counts[r.actor_name] = counts.get(r.actor_name, 0) + 1

    ranked = sorted(counts.items(), key=lambda item: item[1], reverse=True)
    return [ChartPoint(label=name, value=n) for name, n in ranked[:limit]]


def recent_activity(
    records: Sequence[Record], limit: int = RECENT_ACTIVITY_LIMIT
) -> List[Record]:
    return sort_records(records, SortMode.NEWEST)[:limit]


# ----------------------------------------------------------------------
# Entry point
# ----------------------------------------------------------------------
def compute(records: Sequence[Record], params: ViewParams) -> DerivedView:
    filtered = filter_records(records, params.filter_mode, params.filter_text)
    ordered = sort_records(filtered, params.sort_mode)
    rows, page, pages = paginate(ordered, params.page, params.page_size)

    return DerivedView(
        filtered_count=len(filtered),
        total_count=len(records),
        unique_actor_count=count_unique_actors(records),
        top_actors=tuple(top_actors(records)),
        page_rows=tuple(rows),
        page=page,
        page_count=pages,
        recent_activity=tuple(recent_activity(records)),
    )
