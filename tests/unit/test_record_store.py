from unittest.mock import MagicMock

from assetlens.records.models import AssetRecord
from assetlens.records.store import RecordStore


def _record(tag: str, **fields: str) -> AssetRecord:
    return AssetRecord(asset_tag=tag, **fields)


def _make_store(*tags: str) -> RecordStore:
    store = RecordStore()
    store.append(_record(tag) for tag in tags)
    return store


class TestAppend:
    def test_assigns_increasing_uids(self) -> None:
        store = RecordStore()
        added = store.append([_record("A"), _record("B")])
        assert [entry.uid for entry in added] == [1, 2]

    def test_keeps_insertion_order(self) -> None:
        store = _make_store("A", "B", "C")
        assert [r.asset_tag for r in store.records()] == ["A", "B", "C"]

    def test_notifies_listeners(self) -> None:
        store = RecordStore()
        listener = MagicMock()
        store.subscribe(listener)
        store.append([_record("A")])
        listener.assert_called_once_with()

    def test_empty_append_does_not_notify(self) -> None:
        store = RecordStore()
        listener = MagicMock()
        store.subscribe(listener)
        store.append([])
        listener.assert_not_called()


class TestMergeUnique:
    def test_skips_known_asset_tags(self) -> None:
        store = _make_store("A")
        added = store.merge_unique([_record("A", brand="HP"), _record("B")])
        assert [entry.record.asset_tag for entry in added] == ["B"]
        assert [r.asset_tag for r in store.records()] == ["A", "B"]

    def test_existing_record_is_untouched(self) -> None:
        store = RecordStore()
        store.append([_record("A", brand="Dell")])
        store.merge_unique([_record("A", brand="HP")])
        assert store.records()[0].brand == "Dell"

    def test_duplicates_within_one_batch_are_kept(self) -> None:
        store = RecordStore()
        added = store.merge_unique([_record("A"), _record("A")])
        assert len(added) == 2

    def test_merge_into_empty_store_keeps_order(self) -> None:
        store = RecordStore()
        store.merge_unique([_record("B"), _record("A")])
        assert [r.asset_tag for r in store.records()] == ["B", "A"]


class TestReplaceAndRemove:
    def test_replace_keeps_uid(self) -> None:
        store = _make_store("A", "B")
        uid = store.entries()[1].uid
        assert store.replace(uid, _record("B", brand="HP")) is True
        entry = store.get(uid)
        assert entry is not None
        assert entry.record.brand == "HP"
        assert store.position_of(uid) == 1

    def test_replace_unknown_uid_returns_false(self) -> None:
        store = _make_store("A")
        assert store.replace(99, _record("Z")) is False

    def test_remove_by_uid(self) -> None:
        store = _make_store("A", "B", "C")
        uids = [entry.uid for entry in store.entries()]
        assert store.remove({uids[0], uids[2]}) == 2
        assert [r.asset_tag for r in store.records()] == ["B"]

    def test_remove_identical_records_only_by_uid(self) -> None:
        store = RecordStore()
        first, _second = store.append([_record("A"), _record("A")])
        store.remove([first.uid])
        assert len(store) == 1

    def test_remove_nothing_returns_zero(self) -> None:
        store = _make_store("A")
        assert store.remove([]) == 0
        assert len(store) == 1

    def test_get_unknown_uid_returns_none(self) -> None:
        store = RecordStore()
        assert store.get(1) is None
