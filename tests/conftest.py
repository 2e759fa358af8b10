from __future__ import annotations

from typing import List

import pytest

from tests.factories import FakeSession


@pytest.fixture()
def fake_session() -> FakeSession:
    return FakeSession()


@pytest.fixture()
def wire_records() -> List[dict]:
    return [
        {"id": 1, "actor_name": "A", "movie_name": "X", "created_at": "2024-01-01"},
        {"id": 2, "actor_name": "B", "movie_name": "Y", "created_at": "2024-02-01"},
    ]
