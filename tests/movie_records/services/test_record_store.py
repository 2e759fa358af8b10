from __future__ import annotations

import pytest
import requests

from movie_records.core.exceptions import TransportError, ValidationError
from movie_records.services.record_store import RecordStore, validate_new_record

from tests.factories import FakeSession, make_response

BASE = "https://api.example.test/records"


def _store(session: FakeSession) -> RecordStore:
    return RecordStore(BASE, session=session, timeout=3)


def test_fetch_all_replaces_snapshot(fake_session, wire_records):
    fake_session.queue(make_response(payload=wire_records))
    store = _store(fake_session)

    records = store.fetch_all()

    assert [r.id for r in records] == [1, 2]
    assert store.records == records
    call = fake_session.calls[0]
    assert call["method"] == "GET"
    assert call["url"] == f"{BASE}/fetch.php"
    assert call["timeout"] == 3


def test_fetch_failure_keeps_previous_snapshot(fake_session, wire_records):
    fake_session.queue(
        make_response(payload=wire_records),
        requests.ConnectionError("boom"),
        make_response(status_code=500),
        make_response(body=b"<html>oops</html>"),
        make_response(payload={"not": "a list"}),
    )
    store = _store(fake_session)
    before = store.fetch_all()

    for _ in range(4):
        with pytest.raises(TransportError) as exc:
            store.fetch_all()
        assert exc.value.operation == "fetch"
        assert store.records == before


def test_http_error_carries_status_code(fake_session):
    fake_session.queue(make_response(status_code=503))
    store = _store(fake_session)

    with pytest.raises(TransportError) as exc:
        store.fetch_all()

    assert exc.value.status_code == 503


def test_create_posts_trimmed_snake_case_body(fake_session):
    fake_session.queue(make_response())
    store = _store(fake_session)

    result = store.create("  Allu Arjun ", "Pushpa  ")

    assert result is None
    call = fake_session.calls[0]
    assert call["method"] == "POST"
    assert call["url"] == f"{BASE}/create.php"
    assert call["json"] == {"actor_name": "Allu Arjun", "movie_name": "Pushpa"}
    # the new record only appears after an explicit refresh
    assert store.records == ()


@pytest.mark.parametrize("actor, movie", [("", "X"), ("A", "   "), (None, None)])
def test_create_rejects_blank_fields_without_network(fake_session, actor, movie):
    store = _store(fake_session)

    with pytest.raises(ValidationError):
        store.create(actor, movie)

    assert fake_session.calls == []
    assert store.records == ()


def test_validation_reports_each_missing_field():
    with pytest.raises(ValidationError) as exc:
        validate_new_record(" ", "")

    assert [i.code for i in exc.value.issues] == ["empty_actor_name", "empty_movie_name"]


def test_create_transport_failure_is_surfaced(fake_session):
    fake_session.queue(requests.Timeout("slow"))
    store = _store(fake_session)

    with pytest.raises(TransportError) as exc:
        store.create("A", "B")

    assert exc.value.operation == "create"


def test_delete_removes_record_locally(fake_session, wire_records):
    fake_session.queue(make_response(payload=wire_records), make_response())
    store = _store(fake_session)
    store.fetch_all()

    store.delete(1)

    assert [r.id for r in store.records] == [2]
    call = fake_session.calls[-1]
    assert call["method"] == "DELETE"
    assert call["url"] == f"{BASE}/delete.php"
    assert call["json"] == {"id": 1}


def test_delete_failure_leaves_snapshot_unchanged(fake_session, wire_records):
    fake_session.queue(make_response(payload=wire_records), make_response(status_code=404))
    store = _store(fake_session)
    before = store.fetch_all()

    with pytest.raises(TransportError):
        store.delete(1)

    assert store.records == before


def test_custom_endpoints_and_trailing_slash(fake_session):
    fake_session.queue(make_response(payload=[]))
    store = RecordStore(BASE + "/", session=fake_session, endpoints={"fetch": "/fetch"})

    store.fetch_all()

    assert fake_session.calls[0]["url"] == f"{BASE}/fetch"
