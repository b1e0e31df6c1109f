"""
Unit tests for the paginator and its metadata.
"""

import math

import pytest
from mediahub.listing.paginator import Page, paginate


class TestPaginate:
    """Test slicing and metadata formulas"""

    def test_first_of_two_pages(self):
        """Test 12 rows, limit 10, page 1"""
        page = paginate(list(range(12)), page=1, limit=10)

        assert page.items == list(range(10))
        assert page.total_docs == 12
        assert page.total_pages == 2
        assert page.paging_counter == 1
        assert page.has_next_page is True
        assert page.has_prev_page is False
        assert page.next_page == 2
        assert page.prev_page is None

    def test_last_partial_page(self):
        page = paginate(list(range(12)), page=2, limit=10)

        assert page.items == [10, 11]
        assert page.paging_counter == 11
        assert page.has_next_page is False
        assert page.has_prev_page is True
        assert page.prev_page == 1
        assert page.next_page is None

    def test_page_beyond_end(self):
        """Test page 5 of 2 is empty, not an error"""
        page = paginate(list(range(12)), page=5, limit=10)

        assert page.items == []
        assert page.total_pages == 2
        assert page.has_next_page is False
        assert page.has_prev_page is True
        assert page.prev_page == 4
        assert page.paging_counter == 41

    def test_empty_result(self):
        """Test an empty listing: zero pages, no paging counter"""
        page = paginate([], page=1, limit=10)

        assert page.items == []
        assert page.total_docs == 0
        assert page.total_pages == 0
        assert page.paging_counter is None
        assert page.has_next_page is False
        assert page.has_prev_page is False

    def test_exact_multiple(self):
        page = paginate(list(range(20)), page=2, limit=10)
        assert page.total_pages == 2
        assert page.has_next_page is False

    def test_large_limit_not_capped(self):
        page = paginate(list(range(5)), page=1, limit=10_000)
        assert page.items == list(range(5))
        assert page.total_pages == 1

    @pytest.mark.parametrize("total,limit", [(0, 1), (1, 1), (7, 3), (9, 3), (25, 10), (3, 50)])
    def test_completeness(self, total, limit):
        """Test pages 1..totalPages cover every row exactly once, in order"""
        data = list(range(total))
        total_pages = paginate(data, 1, limit).total_pages
        assert total_pages == math.ceil(total / limit)

        collected = []
        for n in range(1, total_pages + 1):
            page = paginate(data, n, limit)
            assert page.has_next_page == (n < total_pages)
            assert page.has_prev_page == (n > 1)
            collected.extend(page.items)

        assert collected == data


class TestPageSerialization:
    """Test the wire field names clients bind to"""

    def test_to_dict_keys(self):
        data = paginate(["x"], page=1, limit=10).to_dict()
        assert data == {
            "items": ["x"],
            "totalDocs": 1,
            "limit": 10,
            "page": 1,
            "totalPages": 1,
            "pagingCounter": 1,
            "hasPrevPage": False,
            "hasNextPage": False,
            "prevPage": None,
            "nextPage": None,
        }

    def test_with_items_keeps_metadata(self):
        page = paginate([1, 2, 3], page=1, limit=2)
        joined = page.with_items(["a", "b"])
        assert joined.items == ["a", "b"]
        assert joined.total_docs == 3
        assert joined.next_page == 2
        assert page.items == [1, 2]

    def test_default_page(self):
        assert Page().to_dict()["items"] == []
