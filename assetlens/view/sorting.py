"""Tri-state column sorting with a mixed numeric/lexicographic comparator.

Cells are lower-cased and each side is parsed for a leading number
("16", "2.5 GHz", "512 gb"). When both sides parse to finite numbers they
compare numerically; otherwise the lower-cased strings compare by code
point. Mixed pairs therefore fall back to string order, so the placeholder
"nill" lands after digit-leading values: ["16", "8", "nill"] ascending
is ["8", "16", "nill"].
"""

import math
import re
from dataclasses import dataclass
from functools import cmp_to_key

from assetlens.records.models import StoredRecord, attribute_for

ASC = "asc"
DESC = "desc"

_LEADING_NUMBER = re.compile(r"\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


@dataclass(frozen=True)
class SortConfig:
    key: str | None = None
    direction: str | None = None

    @property
    def active(self) -> bool:
        return self.key is not None and self.direction is not None


def next_sort(current: SortConfig, column: str) -> SortConfig:
    """asc -> desc -> cleared for the same column; any other column starts at asc."""
    attribute_for(column)
    if current.key == column and current.direction == ASC:
        return SortConfig(column, DESC)
    if current.key == column and current.direction == DESC:
        return SortConfig()
    return SortConfig(column, ASC)


def parse_number(text: str) -> float | None:
    """Leading-number parse; None when there is no number or it is not finite."""
    match = _LEADING_NUMBER.match(text)
    if match is None:
        return None
    value = float(match.group())
    return value if math.isfinite(value) else None


def compare_cells(a: str, b: str) -> int:
    left, right = a.lower(), b.lower()
    left_num, right_num = parse_number(left), parse_number(right)
    if left_num is not None and right_num is not None:
        return (left_num > right_num) - (left_num < right_num)
    return (left > right) - (left < right)


def sort_entries(entries: list[StoredRecord], config: SortConfig) -> list[StoredRecord]:
    """Stable sort; equal cells keep their incoming order in both directions."""
    column = config.key
    if column is None or config.direction is None:
        return list(entries)
    sign = -1 if config.direction == DESC else 1

    def compare(x: StoredRecord, y: StoredRecord) -> int:
        return sign * compare_cells(x.record.get(column), y.record.get(column))

    return sorted(entries, key=cmp_to_key(compare))
