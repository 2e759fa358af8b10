from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)


def parse_timestamp(value: Any) -> Optional[datetime]:
    """
    Parse a server timestamp into a naive UTC datetime.

    Accepts ISO-8601 strings ("2024-01-01", "2024-01-01 10:00:00",
    "2024-01-01T10:00:00Z") and datetime instances. Returns None for
    anything that cannot be parsed.
    """
    if value is None or value == "":
        return None

    if isinstance(value, datetime):
        parsed = value
    else:
        text = str(value).strip()
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"
        try:
            parsed = datetime.fromisoformat(text)
        except ValueError:
            logger.warning("Unparseable created_at value: %r", value)
            return None

    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
    return parsed


def format_timestamp(value: Optional[datetime]) -> str:
    return value.isoformat() if value is not None else ""


@dataclass(frozen=True)
class Record:
    """
    One actor/movie association.

    `id` and `created_at` are assigned by the remote store and never change
    after creation. `created_at` is None when the server sent something we
    could not parse.
    """

    id: Any
    actor_name: str
    movie_name: str
    created_at: Optional[datetime] = None

    # ------------------------------------------------------------------
    # Wire boundary (snake_case JSON from the records API)
    # ------------------------------------------------------------------
    @classmethod
    def from_wire(cls, data: Dict[str, Any]) -> Record:
        return cls(
            id=data.get("id"),
            actor_name=str(data.get("actor_name") or ""),
            movie_name=str(data.get("movie_name") or ""),
            created_at=parse_timestamp(data.get("created_at")),
        )

    # ------------------------------------------------------------------
    # Browser store (dcc.Store) serialisation
    # ------------------------------------------------------------------
    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "actor_name": self.actor_name,
            "movie_name": self.movie_name,
            "created_at": format_timestamp(self.created_at),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> Record:
        return cls(
            id=data.get("id"),
            actor_name=data.get("actor_name", ""),
            movie_name=data.get("movie_name", ""),
            created_at=parse_timestamp(data.get("created_at")),
        )
