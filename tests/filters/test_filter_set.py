"""Unit tests for FilterSet."""

import pytest

from treefind.exceptions import InvalidPatternError
from treefind.filters.extension_filter import ExtensionFilter
from treefind.filters.filter_set import FilterSet
from treefind.filters.pattern_filter import PatternFilter
from treefind.filters.size_filters import MaxSizeFilter, MinSizeFilter
from treefind.options import SearchOptions
from treefind.walker.dir_entry import DirEntry

A_TXT = DirEntry("root/a.txt", "a.txt", 1, size=5)
B_RS = DirEntry("root/sub/b.rs", "b.rs", 2, size=20)
C_RS = DirEntry("root/sub/c.rs", "c.rs", 2, size=2)
SUB = DirEntry("root/sub", "sub", 1, is_dir=True)


def test_empty_set_matches_every_file():
    filter_set = FilterSet()
    assert filter_set.is_empty()
    assert len(filter_set) == 0
    assert all(filter_set.matches(entry) for entry in (A_TXT, B_RS, C_RS))


def test_directories_never_match():
    assert not FilterSet().matches(SUB)
    # Even when every filter would accept the directory's name
    assert not FilterSet([PatternFilter("sub"), MaxSizeFilter(10**9)]).matches(SUB)


def test_only_regular_files_match():
    fifo = DirEntry("root/pipe", "pipe", 1, is_file=False)
    dir_link = DirEntry("root/link", "link", 1, is_symlink=True, is_file=False)
    assert not FilterSet().matches(fifo)
    assert not FilterSet().matches(dir_link)
    assert not FilterSet([PatternFilter("^(pipe|link)$")]).matches(fifo)


def test_conjunction():
    filter_set = FilterSet([ExtensionFilter(".rs"), MinSizeFilter(10)])
    assert [e.path for e in (A_TXT, B_RS, C_RS) if filter_set.matches(e)] == ["root/sub/b.rs"]


def test_individually_satisfiable_filters_can_match_nothing():
    # a.txt satisfies the pattern, b.rs the extension, c.rs the size bound
    filter_set = FilterSet([PatternFilter("^a"), ExtensionFilter(".rs"), MaxSizeFilter(3)])
    assert not any(filter_set.matches(e) for e in (A_TXT, B_RS, C_RS))


def test_inverted_size_bounds_match_nothing():
    filter_set = FilterSet([MinSizeFilter(10), MaxSizeFilter(5)])
    assert not any(filter_set.matches(e) for e in (A_TXT, B_RS, C_RS))


def test_add_rejects_non_filter():
    with pytest.raises(TypeError, match="Filter must implement BaseFilter"):
        FilterSet().add("*.rs")


def test_add_extends_conjunction():
    filter_set = FilterSet()
    filter_set.add(ExtensionFilter(".rs"))
    assert len(filter_set) == 1
    assert filter_set.matches(C_RS)
    filter_set.add(MinSizeFilter(10))
    assert not filter_set.matches(C_RS)


class TestFromOptions:
    def test_no_filters(self):
        assert FilterSet.from_options(SearchOptions("root")).is_empty()

    def test_one_filter_per_option(self):
        options = SearchOptions("root", extension=".rs", pattern="^b", size_greater_than=10, size_less_than=100)
        filter_set = FilterSet.from_options(options)
        assert len(filter_set) == 4
        assert filter_set.matches(B_RS)
        assert not filter_set.matches(C_RS)

    def test_pattern_evaluated_last(self):
        options = SearchOptions("root", pattern="x", extension=".rs")
        filter_set = FilterSet.from_options(options)
        assert isinstance(filter_set.filters[-1], PatternFilter)

    def test_extension_and_size(self):
        filter_set = FilterSet.from_options(SearchOptions("root", extension=".rs", size_greater_than=10))
        assert [e.path for e in (A_TXT, B_RS, C_RS) if filter_set.matches(e)] == ["root/sub/b.rs"]

    def test_ignore_case(self):
        filter_set = FilterSet.from_options(SearchOptions("root", extension=".RS", ignore_case=True))
        assert filter_set.matches(B_RS)

    def test_invalid_pattern(self):
        with pytest.raises(InvalidPatternError):
            FilterSet.from_options(SearchOptions("root", pattern="[a-"))
