import pytest

from assetlens.view.pagination import clamp_page, page_slice, total_pages


class TestPagination:
    @pytest.mark.parametrize(
        ("total", "size", "expected"), [(0, 10, 1), (10, 10, 1), (11, 10, 2), (100, 25, 4)]
    )
    def test_total_pages(self, total: int, size: int, expected: int) -> None:
        assert total_pages(total, size) == expected

    def test_clamp_page(self) -> None:
        assert clamp_page(0, 30, 10) == 1
        assert clamp_page(5, 30, 10) == 3
        assert clamp_page(2, 30, 10) == 2

    def test_page_slice(self) -> None:
        items = list(range(23))
        assert page_slice(items, 3, 10) == [20, 21, 22]
        assert page_slice(items, 1, 10) == list(range(10))
