import json
from concurrent.futures import ThreadPoolExecutor

import pytest

from santa_raffle.core.errors import DuplicateName, StorageUnavailable
from santa_raffle.services import Participant, ParticipantDirectory


def test_list_keeps_file_order(directory):
    assert [p.id for p in directory.list()] == ["1", "2", "3", "4", "5"]
    assert directory.list()[0] == Participant(id="1", name="ALICE")


def test_find_by_id(directory):
    assert directory.find_by_id("3").name == "CAROL"
    assert directory.find_by_id("42") is None


def test_add_assigns_next_id_and_uppercases(directory):
    participant = directory.add("  new name ")
    assert participant == Participant(id="6", name="NEW NAME")
    assert directory.list()[-1] == participant


def test_add_is_durable(directory):
    directory.add("frank")
    reopened = ParticipantDirectory(directory.path)
    assert reopened.find_by_id("6").name == "FRANK"


def test_add_rejects_duplicate_name(directory):
    before = directory.path.read_text(encoding="utf-8")
    with pytest.raises(DuplicateName):
        directory.add(" alice ")
    assert directory.path.read_text(encoding="utf-8") == before


def test_add_rejects_blank_name(directory):
    with pytest.raises(ValueError):
        directory.add("   ")


def test_add_ignores_non_numeric_ids(tmp_path):
    path = tmp_path / "participants.json"
    path.write_text(json.dumps([{"id": "x", "name": "A"}, {"id": "4", "name": "B"}]), encoding="utf-8")
    assert ParticipantDirectory(path).add("C").id == "5"


def test_add_to_empty_directory_starts_at_one(tmp_path):
    path = tmp_path / "participants.json"
    path.write_text("[]", encoding="utf-8")
    assert ParticipantDirectory(path).add("first").id == "1"


def test_hand_edit_is_visible_without_restart(directory):
    records = json.loads(directory.path.read_text(encoding="utf-8"))
    records.append({"id": "9", "name": "GRACE"})
    directory.path.write_text(json.dumps(records), encoding="utf-8")
    assert directory.find_by_id("9").name == "GRACE"


def test_missing_file_is_storage_error(tmp_path):
    with pytest.raises(StorageUnavailable):
        ParticipantDirectory(tmp_path / "nope.json").list()


def test_malformed_file_is_storage_error(tmp_path):
    path = tmp_path / "participants.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(StorageUnavailable):
        ParticipantDirectory(path).list()


def test_seed_only_writes_once(directory):
    assert directory.seed([Participant(id="1", name="OTHER")]) is False
    assert directory.find_by_id("1").name == "ALICE"


def test_concurrent_adds_get_distinct_ids(directory):
    names = [f"guest {index}" for index in range(10)]
    with ThreadPoolExecutor(max_workers=5) as pool:
        added = list(pool.map(directory.add, names))
    ids = [participant.id for participant in added]
    assert len(set(ids)) == len(names)
    assert len(directory.list()) == 5 + len(names)


def test_add_reads_leading_digits_of_ids(tmp_path):
    path = tmp_path / "participants.json"
    path.write_text(json.dumps([{"id": "12a", "name": "A"}, {"id": "3", "name": "B"}]), encoding="utf-8")
    assert ParticipantDirectory(path).add("C").id == "13"
