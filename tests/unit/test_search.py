"""
Tests for the module list filter (Python twin of the page script)
"""

import pytest

from isinfo.core.search import filter_lists, visible_items


ACTIVE = ["curl", "gd", "sodium"]
INACTIVE = ["imagick", "redis"]


class TestVisibleItems:

    def test_substring_match(self):
        assert visible_items(ACTIVE, "so") == {2}

    def test_case_insensitive(self):
        assert visible_items(["Zend OPcache", "PDO"], "opc") == {0}
        assert visible_items(["pdo_mysql"], "PDO") == {0}

    def test_empty_query_shows_everything(self):
        assert visible_items(ACTIVE, "") == {0, 1, 2}

    def test_no_memory_between_queries(self):
        visible_items(ACTIVE, "zzz")
        assert visible_items(ACTIVE, "c") == {0}


class TestFilterLists:

    def test_query_narrows_both_lists(self):
        result = filter_lists([ACTIVE, INACTIVE], "so")
        assert result.visible == (frozenset({2}), frozenset())
        assert result.no_results is False

    def test_clearing_restores_all(self):
        filter_lists([ACTIVE, INACTIVE], "so")
        result = filter_lists([ACTIVE, INACTIVE], "")
        assert result.visible == (frozenset({0, 1, 2}), frozenset({0, 1}))
        assert result.no_results is False

    def test_no_match_shows_indicator(self):
        result = filter_lists([ACTIVE, INACTIVE], "zzz")
        assert result.visible == (frozenset(), frozenset())
        assert result.no_results is True

    def test_match_in_second_list_only(self):
        result = filter_lists([ACTIVE, INACTIVE], "red")
        assert result.visible == (frozenset(), frozenset({1}))
        assert result.no_results is False


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
