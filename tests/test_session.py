"""Session record: immutability and persistence."""

import json

import pytest
from pydantic import ValidationError

from mammut import SessionRecord


def test_authenticated(record):
    assert record.authenticated
    assert not record.with_token("").authenticated


def test_with_token_returns_new_record(record):
    updated = record.with_token("other")
    assert updated.token == "other"
    assert record.token == "tok123"
    assert updated.client_id == record.client_id
    assert updated.base == record.base


def test_record_is_frozen(record):
    with pytest.raises(ValidationError):
        record.token = "changed"


def test_token_defaults_to_empty():
    record = SessionRecord(base="https://ex.social", client_id="a", client_secret="b", redirect="r")
    assert record.token == ""
    assert not record.authenticated


def test_base_trailing_slash_stripped():
    record = SessionRecord(base="https://ex.social/", client_id="a", client_secret="b", redirect="r")
    assert record.base == "https://ex.social"


def test_save_and_load_round_trip(record, tmp_path):
    path = tmp_path / "nested" / "session.json"
    record.save(path)
    assert SessionRecord.load(path) == record
    assert set(json.loads(path.read_text())) == {"base", "client_id", "client_secret", "redirect", "token"}


def test_load_ignores_key_order(record, tmp_path):
    path = tmp_path / "session.json"
    fields = record.model_dump()
    path.write_text(json.dumps(dict(reversed(list(fields.items())))))
    assert SessionRecord.load(path) == record
