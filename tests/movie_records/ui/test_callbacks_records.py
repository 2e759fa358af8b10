from __future__ import annotations

import requests

from movie_records.services.record_store import RecordStore
from movie_records.ui.callbacks.callbacks_records import (
    ACTION_CREATE,
    ACTION_DELETE,
    ACTION_LOAD,
    handle_records_action,
    records_from_store,
    records_to_store,
)

from tests.factories import FakeSession, make_record, make_response


def _store(session: FakeSession) -> RecordStore:
    return RecordStore("http://api.test", session=session)


def test_load_puts_fetched_records_in_store(fake_session, wire_records):
    fake_session.queue(make_response(payload=wire_records))

    update = handle_records_action(_store(fake_session), ACTION_LOAD)

    assert [r["id"] for r in update.records] == [1, 2]
    assert update.status == "Loaded 2 records."


def test_load_failure_keeps_last_records(fake_session, wire_records):
    fake_session.queue(make_response(payload=wire_records), requests.ConnectionError("down"))
    store = _store(fake_session)
    handle_records_action(store, ACTION_LOAD)

    update = handle_records_action(store, ACTION_LOAD)

    assert [r["id"] for r in update.records] == [1, 2]
    assert "last known" in update.status


def test_create_with_blank_actor_makes_no_request(fake_session):
    store = _store(fake_session)

    update = handle_records_action(store, ACTION_CREATE, actor_name="", movie_name="Heat")

    assert fake_session.calls == []
    assert update.records == []
    assert update.clear_form is False
    assert "Actor name is required." in update.form_status


def test_create_success_refreshes_and_clears_form(fake_session, wire_records):
    fake_session.queue(make_response(), make_response(payload=wire_records))

    update = handle_records_action(
        _store(fake_session), ACTION_CREATE, actor_name="A", movie_name="X"
    )

    assert [c["method"] for c in fake_session.calls] == ["POST", "GET"]
    assert update.clear_form is True
    assert len(update.records) == 2


def test_create_transport_failure_keeps_form(fake_session):
    fake_session.queue(make_response(status_code=500))

    update = handle_records_action(
        _store(fake_session), ACTION_CREATE, actor_name="A", movie_name="X"
    )

    assert update.clear_form is False
    assert "Could not save" in update.form_status


def test_delete_then_refresh(fake_session, wire_records):
    fake_session.queue(
        make_response(payload=wire_records),
        make_response(),
        make_response(payload=wire_records[1:]),
    )
    store = _store(fake_session)
    handle_records_action(store, ACTION_LOAD)

    update = handle_records_action(store, ACTION_DELETE, record_id=1)

    assert [r["id"] for r in update.records] == [2]
    assert fake_session.calls[1]["json"] == {"id": 1}


def test_delete_failure_reports_and_keeps_records(fake_session, wire_records):
    fake_session.queue(make_response(payload=wire_records), requests.ConnectionError("down"))
    store = _store(fake_session)
    handle_records_action(store, ACTION_LOAD)

    update = handle_records_action(store, ACTION_DELETE, record_id=1)

    assert [r["id"] for r in update.records] == [1, 2]
    assert update.status == "Could not delete the record."


def test_store_serialisation_roundtrip():
    records = [make_record(1, "A", "X", "2024-01-01"), make_record(2, "B", "Y", "2024-02-01")]
    assert records_from_store(records_to_store(records)) == records


def test_records_from_store_ignores_junk():
    assert records_from_store(None) == []
    assert records_from_store([1, "x", {"id": 4, "actor_name": "A", "movie_name": "B"}])[0].id == 4
