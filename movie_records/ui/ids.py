from __future__ import annotations

__all__ = ["IDs", "record_delete_id"]


class IDs:
    class Store:
        RECORDS = "records-store"
        VIEW_PARAMS = "view-params"
        PAGE = "page-store"
        PAGER = "pager-store"

    class Control:
        # Sidebar
        SIDEBAR_COLLAPSE = "sidebar-collapse"
        SIDEBAR_TOGGLE_BTN = "sidebar-toggle-btn"
        EXPORT_BTN = "export-csv-btn"
        DOWNLOAD_CSV = "download-csv"

        STAT_TOTAL = "stat-total"
        STAT_ACTORS = "stat-actors"
        STAT_TOP_ACTORS = "stat-top-actors"
        TOP_ACTORS_GRAPH = "top-actors-graph"
        TOP_ACTORS_LIST = "top-actors-list"
        RECENT_ACTIVITY_LIST = "recent-activity-list"

        FILTER_MODE = "filter-mode"
        FILTER_TEXT = "filter-text"

        # Records table
        FILTERED_COUNT = "filtered-count"
        SORT_SELECT = "sort-select"
        PAGE_LABEL = "page-label"
        PREV_PAGE_BTN = "prev-page-btn"
        NEXT_PAGE_BTN = "next-page-btn"
        RECORDS_TABLE = "records-table"

        # Add record form
        ACTOR_INPUT = "actor-input"
        MOVIE_INPUT = "movie-input"
        ADD_RECORD_BTN = "add-record-btn"
        ADD_RECORD_STATUS = "add-record-status"

        # Status bar
        STATUS_BAR = "status-bar"

    class Pattern:
        # pattern-matching "type" strings
        RECORD_DELETE = "record-delete"


def record_delete_id(record_id) -> dict:
    return {"type": IDs.Pattern.RECORD_DELETE, "index": record_id}
