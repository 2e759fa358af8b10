from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict

DEFAULT_PAGE_SIZE = 10


class FilterMode(str, Enum):
    ALL = "all"
    BY_ACTOR = "actor"
    BY_MOVIE = "movie"


class SortMode(str, Enum):
    NEWEST = "newest"
    OLDEST = "oldest"
    ACTOR_NAME = "actor"


def _positive_int(value: Any, default: int) -> int:
    try:
        number = int(value)
    except (TypeError, ValueError):
        return default
    return number if number > 0 else default


@dataclass(frozen=True)
class ViewParams:
    """
    Represents the current user selection for the records table.

    Fields:

    - filter_mode: which field (if any) filter_text is matched against
    - filter_text: free text, ignored when filter_mode is ALL
    - sort_mode: ordering applied to the filtered records
    - page: 1-based page number, clamped by the pipeline
    - page_size: rows per page, fixed for a session
    """

    filter_mode: FilterMode = FilterMode.ALL
    filter_text: str = ""
    sort_mode: SortMode = SortMode.NEWEST
    page: int = 1
    page_size: int = DEFAULT_PAGE_SIZE

    def to_dict(self) -> Dict[str, Any]:
        return {
            "filter_mode": self.filter_mode.value,
            "filter_text": self.filter_text,
            "sort_mode": self.sort_mode.value,
            "page": self.page,
            "page_size": self.page_size,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> ViewParams:
        try:
            filter_mode = FilterMode(data.get("filter_mode", FilterMode.ALL.value))
        except ValueError:
            filter_mode = FilterMode.ALL

        try:
            sort_mode = SortMode(data.get("sort_mode", SortMode.NEWEST.value))
        except ValueError:
            sort_mode = SortMode.NEWEST

        return cls(
            filter_mode=filter_mode,
            filter_text=str(data.get("filter_text") or ""),
            sort_mode=sort_mode,
            page=_positive_int(data.get("page"), 1),
            page_size=_positive_int(data.get("page_size"), DEFAULT_PAGE_SIZE),
        )
