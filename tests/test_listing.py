"""Tests for sorting, pagination and query value parsing."""

import pytest

from conftest import make_photo
from services.listing import build_listing, paginate, parse_int, sort_records


class TestParseInt:
    @pytest.mark.parametrize(
        "value,expected",
        [
            (None, 10),
            ("", 10),
            ("abc", 10),
            ("0", 10),
            ("5", 5),
            ("5abc", 5),
            ("2.9", 2),
            ("  7", 7),
            ("+3", 3),
            ("-2", -2),
            ("\uff13", 10),
            ("\u0663", 10),
        ],
    )
    def test_lenient_parse(self, value, expected):
        assert parse_int(value, 10) == expected


class TestSortRecords:
    def test_sorts_numbers_and_strings(self):
        records = [make_photo(3, title="c"), make_photo(1, title="a"), make_photo(2, title="b")]

        assert [r["id"] for r in sort_records(records, "id")] == [1, 2, 3]
        assert [r["title"] for r in sort_records(records, "title")] == ["a", "b", "c"]

    def test_sort_is_stable(self):
        records = [make_photo(i, albumId=i % 2) for i in range(1, 7)]

        ordered = sort_records(records, "albumId")

        assert [r["id"] for r in ordered] == [2, 4, 6, 1, 3, 5]

    def test_unknown_field_keeps_store_order(self):
        records = [make_photo(3), make_photo(1), make_photo(2)]

        assert [r["id"] for r in sort_records(records, "nope")] == [3, 1, 2]

    def test_mixed_types_do_not_crash(self):
        records = [{"id": 1, "v": "x"}, {"id": 2, "v": 5}, {"id": 3}, {"id": 4, "v": {"k": 1}}]

        ordered = sort_records(records, "v")

        assert sorted(r["id"] for r in ordered) == [1, 2, 3, 4]

    def test_does_not_mutate_input(self):
        records = [make_photo(2), make_photo(1)]
        sort_records(records, "id")

        assert [r["id"] for r in records] == [2, 1]


class TestPaginate:
    def test_third_page_of_25(self):
        records = list(range(25))

        assert paginate(records, page=3, limit=10) == [20, 21, 22, 23, 24]

    def test_past_the_end_is_empty(self):
        assert paginate(list(range(5)), page=4, limit=10) == []

    def test_consecutive_pages_are_contiguous_and_disjoint(self):
        records = list(range(23))
        limit = 4
        pages = [paginate(records, page, limit) for page in range(1, 8)]

        assert all(len(p) <= limit for p in pages)
        assert [x for p in pages for x in p] == records


class TestBuildListing:
    def test_defaults(self, photos):
        result = build_listing(photos)

        assert result["page"] == 1
        assert result["limit"] == 10
        assert result["orderBy"] == "id"
        assert result["total"] == 5
        assert result["data"] == photos

    def test_empty_snapshot(self):
        assert build_listing([]) == {"total": 0, "page": 1, "limit": 10, "orderBy": "id", "data": []}

    def test_malformed_values_fall_back(self, photos):
        result = build_listing(photos, limit="lots", page="first", order_by="")

        assert (result["limit"], result["page"], result["orderBy"]) == (10, 1, "id")

    def test_total_counts_whole_snapshot(self):
        snapshot = [make_photo(i) for i in range(25, 0, -1)]

        result = build_listing(snapshot, limit="10", page="3")

        assert result["total"] == 25
        assert [r["id"] for r in result["data"]] == [21, 22, 23, 24, 25]
