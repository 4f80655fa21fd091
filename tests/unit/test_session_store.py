"""Unit tests for the session stores."""

import json
from pathlib import Path

from jewelcrm.domain.entities import Session
from jewelcrm.infrastructure.session import FileSessionStore, InMemorySessionStore


def test_in_memory_store_round_trip():
    store = InMemorySessionStore()
    assert store.get_token() is None

    store.save(Session(token="abc"))
    assert store.get_token() == "abc"

    store.clear()
    assert store.get_session() is None


def test_file_store_writes_auth_storage_layout(tmp_path: Path):
    path = tmp_path / "data" / "auth-storage.json"
    store = FileSessionStore(path)

    store.save(Session(token="abc", refresh_token="ref", user={"id": 1}))

    blob = json.loads(path.read_text("utf-8"))
    assert blob == {
        "state": {
            "user": {"id": 1},
            "token": "abc",
            "refreshTokenString": "ref",
            "isAuthenticated": True,
        },
        "version": 0,
    }
    assert FileSessionStore(path).get_session() == Session(
        token="abc", refresh_token="ref", user={"id": 1}
    )


def test_file_store_accepts_bare_token_file(tmp_path: Path):
    path = tmp_path / "session.json"
    path.write_text(json.dumps({"token": "plain"}), "utf-8")

    assert FileSessionStore(path).get_token() == "plain"


def test_file_store_missing_or_corrupt_file(tmp_path: Path):
    assert FileSessionStore(tmp_path / "missing.json").get_session() is None

    corrupt = tmp_path / "corrupt.json"
    corrupt.write_text("{not json", "utf-8")
    assert FileSessionStore(corrupt).get_session() is None

    logged_out = tmp_path / "logged-out.json"
    logged_out.write_text(json.dumps({"state": {"token": None}, "version": 0}), "utf-8")
    assert FileSessionStore(logged_out).get_session() is None


def test_file_store_clear_removes_file(tmp_path: Path):
    path = tmp_path / "auth-storage.json"
    store = FileSessionStore(path)
    store.save(Session(token="abc"))

    store.clear()
    store.clear()

    assert not path.exists()
    assert store.get_token() is None
