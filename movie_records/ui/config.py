from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from movie_records.config import Settings
from movie_records.services.record_store import RecordStore


@dataclass
class AppConfig:
    """
    Shared state for the Dash app: config root, settings and the record
    store. Passed into layout + callback registration functions instead of
    using module-level globals.
    """
    config_root: Path
    settings: Settings
    store: Optional[RecordStore] = None

    def validate(self) -> None:
        """Ensure all required services are attached before the app starts."""
        if self.store is None:
            raise RuntimeError("AppConfig.store must be initialized.")
