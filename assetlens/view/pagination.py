import math
from collections.abc import Sequence
from typing import TypeVar

PAGE_SIZE_OPTIONS = (10, 25, 50, 100)

T = TypeVar("T")


def total_pages(total: int, page_size: int) -> int:
    """Never below 1, even for an empty result."""
    return max(1, math.ceil(total / page_size))


def clamp_page(page: int, total: int, page_size: int) -> int:
    return min(max(1, page), total_pages(total, page_size))


def page_slice(items: Sequence[T], page: int, page_size: int) -> list[T]:
    start = (page - 1) * page_size
    return list(items[start : start + page_size])
