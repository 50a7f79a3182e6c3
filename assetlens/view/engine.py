from dataclasses import dataclass, replace

from assetlens.logging.logger import Log
from assetlens.records.models import ASSET_TAG, COLUMN_LABELS, AssetRecord, StoredRecord, attribute_for
from assetlens.records.store import RecordStore
from assetlens.view.filters import FilterRule, matches_all, matches_search
from assetlens.view.pagination import PAGE_SIZE_OPTIONS, clamp_page, page_slice, total_pages
from assetlens.view.sorting import SortConfig, next_sort, sort_entries


@dataclass(frozen=True)
class EditState:
    """The single row being edited: where it sits on the page, which record, and its draft."""

    page_index: int
    uid: int
    draft: AssetRecord


class RecordView:
    """Filterable, searchable, sortable, paginated view over a RecordStore.

    The derived rows are recomputed from the store on every read:
    advanced filters (AND), then quick search, then sort, then the page
    slice. Selection and edits are keyed by the store's synthetic uids.
    Invariant violations (hiding the last column, deleting nothing) are
    no-ops that return False or 0.
    """

    def __init__(self, store: RecordStore, page_size: int = PAGE_SIZE_OPTIONS[0]) -> None:
        self._check_page_size(page_size)
        self._store = store
        self._filters: list[FilterRule] = []
        self._search = ""
        self._sort = SortConfig()
        self._page = 1
        self._page_size = page_size
        self._visible: set[str] = set(COLUMN_LABELS)
        self._selected: set[int] = set()
        self._editing: EditState | None = None

    # Derived rows

    def processed(self) -> list[StoredRecord]:
        """Every row passing filters and search, in sort order."""
        rows = [
            entry
            for entry in self._store.entries()
            if matches_all(entry.record, self._filters)
            and matches_search(entry.record, self._search)
        ]
        return sort_entries(rows, self._sort)

    def page_rows(self) -> list[StoredRecord]:
        return page_slice(self.processed(), self.current_page, self._page_size)

    @property
    def total_count(self) -> int:
        return len(self.processed())

    @property
    def total_pages(self) -> int:
        return total_pages(self.total_count, self._page_size)

    @property
    def current_page(self) -> int:
        return clamp_page(self._page, self.total_count, self._page_size)

    @property
    def page_size(self) -> int:
        return self._page_size

    def page_info(self) -> tuple[int, int, int]:
        """(first, last, total) for a "Showing first - last of total" footer."""
        total = self.total_count
        if total == 0:
            return 0, 0, 0
        first = (self.current_page - 1) * self._page_size + 1
        return first, min(first + self._page_size - 1, total), total

    # Filters, search, sort

    @property
    def filters(self) -> tuple[FilterRule, ...]:
        return tuple(self._filters)

    def add_filter(
        self, column: str = ASSET_TAG, operator: str = "contains", value: str = ""
    ) -> FilterRule:
        rule = FilterRule(column=column, operator=operator, value=value)
        self._filters.append(rule)
        return rule

    def update_filter(self, rule_id: str, **changes: str) -> FilterRule | None:
        for i, rule in enumerate(self._filters):
            if rule.id == rule_id:
                updated = replace(rule, **changes)
                self._filters[i] = updated
                return updated
        return None

    def remove_filter(self, rule_id: str) -> bool:
        kept = [rule for rule in self._filters if rule.id != rule_id]
        removed = len(kept) != len(self._filters)
        self._filters = kept
        return removed

    def clear_filters(self) -> None:
        self._filters = []

    @property
    def search(self) -> str:
        return self._search

    def set_search(self, term: str) -> None:
        self._search = term
        self._set_page(1)

    @property
    def sort(self) -> SortConfig:
        return self._sort

    def toggle_sort(self, column: str) -> SortConfig:
        self._sort = next_sort(self._sort, column)
        return self._sort

    # Pagination

    def set_page_size(self, page_size: int) -> None:
        self._check_page_size(page_size)
        self._page_size = page_size
        self._set_page(1)

    def go_to_page(self, page: int) -> int:
        self._set_page(clamp_page(page, self.total_count, self._page_size))
        return self._page

    def next_page(self) -> int:
        return self.go_to_page(self.current_page + 1)

    def previous_page(self) -> int:
        return self.go_to_page(self.current_page - 1)

    # Selection

    @property
    def selected_uids(self) -> frozenset[int]:
        """Selected uids that still exist in the store."""
        present = {entry.uid for entry in self._store.entries()}
        self._selected &= present
        return frozenset(self._selected)

    @property
    def selected_count(self) -> int:
        return len(self.selected_uids)

    def is_selected(self, uid: int) -> bool:
        return uid in self.selected_uids

    def toggle_row(self, uid: int) -> bool:
        """Flip one row's selection. Returns the new state; unknown uids stay unselected."""
        if self._store.get(uid) is None:
            return False
        if uid in self._selected:
            self._selected.discard(uid)
            return False
        self._selected.add(uid)
        return True

    def select_page(self, checked: bool = True) -> None:
        """Select or deselect the rows on the current page only."""
        uids = {entry.uid for entry in self.page_rows()}
        if checked:
            self._selected |= uids
        else:
            self._selected -= uids

    def is_page_selected(self) -> bool:
        rows = self.page_rows()
        return bool(rows) and all(entry.uid in self._selected for entry in rows)

    def clear_selection(self) -> None:
        self._selected.clear()

    # Editing

    @property
    def editing(self) -> EditState | None:
        return self._editing

    def begin_edit(self, page_index: int) -> bool:
        rows = self.page_rows()
        if not 0 <= page_index < len(rows):
            return False
        entry = rows[page_index]
        self._editing = EditState(page_index=page_index, uid=entry.uid, draft=entry.record)
        return True

    def update_draft(self, column: str, value: str) -> bool:
        attribute_for(column)
        if self._editing is None:
            return False
        self._editing = replace(self._editing, draft=self._editing.draft.with_value(column, value))
        return True

    def save_edit(self) -> bool:
        """Write the draft over the edited record and leave edit mode."""
        editing, self._editing = self._editing, None
        if editing is None:
            return False
        saved = self._store.replace(editing.uid, editing.draft)
        if not saved:
            Log.warning(f"Edited record {editing.uid} is no longer in the store")
        return saved

    def cancel_edit(self) -> None:
        self._editing = None

    # Deletion

    def delete_row(self, page_index: int) -> int:
        rows = self.page_rows()
        if not 0 <= page_index < len(rows):
            return 0
        return self._delete({rows[page_index].uid})

    def delete_selected(self) -> int:
        uids = set(self.selected_uids)
        if not uids:
            return 0
        return self._delete(uids)

    # Columns

    @property
    def visible_columns(self) -> list[str]:
        return [label for label in COLUMN_LABELS if label in self._visible]

    def is_visible(self, column: str) -> bool:
        return column in self._visible

    def toggle_column(self, column: str) -> bool:
        """Show or hide a column. Hiding the last visible column is refused (returns False)."""
        attribute_for(column)
        if column in self._visible:
            if len(self._visible) == 1:
                return False
            self._visible.discard(column)
        else:
            self._visible.add(column)
        return True

    def show_all_columns(self) -> None:
        self._visible = set(COLUMN_LABELS)

    def _delete(self, uids: set[int]) -> int:
        page_before = self.current_page
        removed = self._store.remove(uids)
        self._selected.clear()
        if self._editing is not None and self._editing.uid in uids:
            self._editing = None
        if removed:
            Log.info(f"Deleted {removed} record(s)")
        if page_before > 1 and (page_before - 1) * self._page_size >= self.total_count:
            self._page = page_before - 1
        else:
            self._page = page_before
        return removed

    def _set_page(self, page: int) -> None:
        if page != self._page:
            self._editing = None
        self._page = page

    @staticmethod
    def _check_page_size(page_size: int) -> None:
        if page_size not in PAGE_SIZE_OPTIONS:
            raise ValueError(f"Page size must be one of {list(PAGE_SIZE_OPTIONS)}")
