import itertools
import threading
from collections.abc import Callable, Iterable

from assetlens.records.models import AssetRecord, StoredRecord

StoreListener = Callable[[], None]


class RecordStore:
    """Ordered in-memory collection of asset records for one session.

    Each record receives a synthetic uid when it is added; edits keep the
    uid, so selection and edit state never depend on list position or
    structural equality.
    """

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._entries: list[StoredRecord] = []
        self._next_uid = itertools.count(1)
        self._listeners: list[StoreListener] = []

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def subscribe(self, listener: StoreListener) -> None:
        self._listeners.append(listener)

    def entries(self) -> list[StoredRecord]:
        """Snapshot of the store in insertion order."""
        with self._lock:
            return list(self._entries)

    def records(self) -> list[AssetRecord]:
        with self._lock:
            return [entry.record for entry in self._entries]

    def asset_tags(self) -> set[str]:
        with self._lock:
            return {entry.record.asset_tag for entry in self._entries}

    def position_of(self, uid: int) -> int | None:
        with self._lock:
            for position, entry in enumerate(self._entries):
                if entry.uid == uid:
                    return position
        return None

    def get(self, uid: int) -> StoredRecord | None:
        with self._lock:
            position = self.position_of(uid)
            return None if position is None else self._entries[position]

    def append(self, records: Iterable[AssetRecord]) -> list[StoredRecord]:
        """Append records unconditionally and return their stored entries."""
        with self._lock:
            added = self._append_locked(records)
        if added:
            self._notify()
        return added

    def merge_unique(self, records: Iterable[AssetRecord]) -> list[StoredRecord]:
        """Append only records whose asset tag is not already in the store.

        Existing duplicates are left alone. Records in the same batch are
        checked against the store as it was before the merge, so a batch
        that repeats a tag keeps every copy.
        """
        with self._lock:
            existing = {entry.record.asset_tag for entry in self._entries}
            added = self._append_locked(r for r in records if r.asset_tag not in existing)
        if added:
            self._notify()
        return added

    def replace(self, uid: int, record: AssetRecord) -> bool:
        with self._lock:
            position = self.position_of(uid)
            if position is None:
                return False
            self._entries[position] = StoredRecord(uid=uid, record=record)
        self._notify()
        return True

    def remove(self, uids: Iterable[int]) -> int:
        """Remove every entry whose uid is in uids in one pass. Returns the count removed."""
        targets = set(uids)
        if not targets:
            return 0
        with self._lock:
            kept = [entry for entry in self._entries if entry.uid not in targets]
            removed = len(self._entries) - len(kept)
            self._entries = kept
        if removed:
            self._notify()
        return removed

    def _append_locked(self, records: Iterable[AssetRecord]) -> list[StoredRecord]:
        added = [StoredRecord(uid=next(self._next_uid), record=r) for r in records]
        self._entries.extend(added)
        return added

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener()
