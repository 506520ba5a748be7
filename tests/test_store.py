import pytest

from santa_raffle.core.errors import Conflict, StorageUnavailable
from santa_raffle.db import AssignmentStore, MatchRecord, get_session, init_engine, make_session_factory
from santa_raffle.db import repo


def test_insert_and_lookup(store):
    assert store.get_by_spinner("1") is None
    store.insert("1", "2")
    assert store.get_by_spinner("1") == "2"
    assert store.all_receivers() == {"2"}


def test_insert_duplicate_spinner_conflicts(store):
    store.insert("1", "2")
    with pytest.raises(Conflict):
        store.insert("1", "3")
    assert store.get_by_spinner("1") == "2"


def test_insert_duplicate_receiver_conflicts(store):
    store.insert("1", "2")
    with pytest.raises(Conflict):
        store.insert("3", "2")
    assert store.get_by_spinner("3") is None
    assert store.all_receivers() == {"2"}


def test_all_matches(store):
    store.insert("1", "2")
    store.insert("3", "4")
    assert set(store.all_matches()) == {MatchRecord("1", "2"), MatchRecord("3", "4")}


def test_clear_archives_and_removes(tmp_path):
    engine = init_engine(f"sqlite:///{tmp_path / 'santa.db'}")
    session_factory = make_session_factory(engine)
    store = AssignmentStore(session_factory)
    store.insert("1", "2")
    store.insert("2", "1")

    assert store.clear() == 2
    assert store.all_matches() == []
    assert store.all_receivers() == set()

    with get_session(session_factory) as session:
        history = repo.list_match_history(session)
    assert {(row.spinner_id, row.receiver_id) for row in history} == {("1", "2"), ("2", "1")}


def test_clear_empty_store(store):
    assert store.clear() == 0


def test_unreachable_database_is_storage_error(tmp_path):
    engine = init_engine(f"sqlite:///{tmp_path / 'missing' / 'santa.db'}", create_tables=False)
    store = AssignmentStore(make_session_factory(engine))
    with pytest.raises(StorageUnavailable):
        store.get_by_spinner("1")
    with pytest.raises(StorageUnavailable):
        store.insert("1", "2")
