import dataclasses
from datetime import date

import pytest

from conftest import make_record
from interview_board.infrastructure.storage.file import FileKeyValueStorage
from interview_board.infrastructure.storage.memory import InMemoryKeyValueStorage
from interview_board.services.interview_store import DEMO_INTERVIEWS, InterviewStore


class FailingStorage(InMemoryKeyValueStorage):
    def load(self, key):
        raise OSError("disk gone")

    def save(self, key, value):
        raise OSError("disk gone")


def test_add_and_list_all(store):
    store.add(make_record("1"))
    store.add(make_record("2", companyName="Alibaba"))

    assert {r.id for r in store.list_all()} == {"1", "2"}
    assert len(store) == 2


def test_add_overwrites_existing_id(store):
    store.add(make_record("1", companyName="Old"))
    store.add(make_record("1", companyName="New"))

    assert len(store) == 1
    assert store.get("1").companyName == "New"


def test_add_accepts_malformed_fields(store):
    store.add(make_record("1", date="not-a-date", duration="forever", startTime="noon"))

    assert store.get("1").duration == "forever"


def test_update_merges_patch_and_keeps_other_fields(store):
    original = make_record("1")
    store.add(original)

    updated = store.update("1", {"status": "Completed", "notes": "offer expected"})

    assert updated.status == "Completed"
    assert updated.notes == "offer expected"
    [listed] = store.list_all()
    assert listed == updated
    assert listed.companyName == original.companyName
    assert listed.date == original.date


def test_update_missing_id_is_noop(store, storage):
    store.add(make_record("1"))
    before = [r.to_dict() for r in store.list_all()]
    blob_before = storage.load("interview-storage")

    assert store.update("missing", {"companyName": "Ghost"}) is None

    assert [r.to_dict() for r in store.list_all()] == before
    assert "missing" not in store
    assert storage.load("interview-storage") == blob_before


def test_delete_is_idempotent(store):
    store.add(make_record("1"))
    store.add(make_record("2"))

    assert store.delete("1") is True
    assert store.delete("1") is False

    assert [r.id for r in store.list_all()] == ["2"]


def test_list_by_date_matches_iso_string(store):
    store.add(make_record("1", date="2025-03-11"))
    store.add(make_record("2", date="2025-03-12"))
    store.add(make_record("3", date="2025-03-11"))

    assert {r.id for r in store.list_by_date(date(2025, 3, 11))} == {"1", "3"}
    assert store.list_by_date(date(2025, 3, 13)) == []


def test_every_mutation_is_persisted(store, storage):
    store.add(make_record("1"))
    assert "1" in storage.load("interview-storage")["interviews"]

    store.update("1", {"position": "Staff Engineer"})
    assert storage.load("interview-storage")["interviews"]["1"]["position"] == "Staff Engineer"

    store.delete("1")
    assert storage.load("interview-storage") == {"interviews": {}}


def test_round_trip_through_reload(storage):
    record = make_record("1741676400000", notes="multi\nline", location="")
    InterviewStore(storage=storage).add(record)

    reloaded = InterviewStore(storage=storage)

    assert reloaded.list_all() == [record]


def test_round_trip_through_file_storage(tmp_path):
    record = make_record("1", companyName="字节跳动")
    InterviewStore(storage=FileKeyValueStorage(str(tmp_path))).add(record)

    reloaded = InterviewStore(storage=FileKeyValueStorage(str(tmp_path)))

    assert reloaded.get("1") == record
    assert (tmp_path / "interview-storage.json").exists()


def test_custom_storage_key(storage):
    InterviewStore(storage=storage, storage_key="other").add(make_record("1"))

    assert storage.exists("other")
    assert not storage.exists("interview-storage")


def test_incompatible_blob_loads_malformed_records(storage):
    storage.save("interview-storage", {"interviews": {"9": {"company": "Legacy"}, "bad": "x"}})

    store = InterviewStore(storage=storage)

    [record] = store.list_all()
    assert record.id == ""
    assert record.companyName == ""


def test_unexpected_blob_shape_loads_empty(storage):
    storage.save("interview-storage", {"interviews": ["not", "a", "map"]})

    assert len(InterviewStore(storage=storage)) == 0


def test_corrupt_file_loads_empty(tmp_path):
    (tmp_path / "interview-storage.json").write_text("{not json", encoding="utf-8")

    store = InterviewStore(storage=FileKeyValueStorage(str(tmp_path)))

    assert store.list_all() == []


def test_storage_failures_never_raise():
    store = InterviewStore(storage=FailingStorage())

    store.add(make_record("1"))
    store.update("1", {"notes": "still in memory"})

    assert store.get("1").notes == "still in memory"
    assert store.delete("1") is True


def test_seed_only_when_empty(store):
    assert store.seed(DEMO_INTERVIEWS) == 3
    assert store.seed(DEMO_INTERVIEWS) == 0
    assert {r.companyName for r in store.list_all()} == {"Alibaba", "Tencent", "ByteDance"}


def test_stored_records_cannot_be_mutated_in_place(store, storage):
    record = store.add(make_record("1"))
    before = storage.load("interview-storage")

    with pytest.raises(dataclasses.FrozenInstanceError):
        record.companyName = "Changed"
    with pytest.raises(dataclasses.FrozenInstanceError):
        store.list_all()[0].status = "Cancelled"

    assert store.get("1").companyName == "Tencent"
    assert storage.load("interview-storage") == before
