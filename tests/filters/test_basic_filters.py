"""Unit tests for the individual search filters."""

import pytest

from treefind.exceptions import InvalidPatternError
from treefind.filters.base_filter import BaseFilter
from treefind.filters.extension_filter import ExtensionFilter
from treefind.filters.pattern_filter import PatternFilter
from treefind.filters.predicate_filter import PredicateFilter
from treefind.walker.dir_entry import DirEntry


def make_entry(path, size=0, is_dir=False):
    name = path.rsplit("/", 1)[-1]
    return DirEntry(path, name, path.count("/"), is_dir=is_dir, size=size)


class TestExtensionFilter:
    def test_exact_suffix(self):
        rule = ExtensionFilter(".rs")
        assert rule.matches(make_entry("root/sub/b.rs"))
        assert not rule.matches(make_entry("root/a.rsx"))
        assert not rule.matches(make_entry("root/a.txt"))

    def test_no_dot_normalization(self):
        """The extension is used exactly as typed."""
        assert ExtensionFilter("rs").matches(make_entry("root/bars"))
        assert not ExtensionFilter(".rs").matches(make_entry("root/bars"))

    def test_case_sensitive_by_default(self):
        assert not ExtensionFilter(".RS").matches(make_entry("root/lib.rs"))

    def test_case_insensitive(self):
        rule = ExtensionFilter(".RS", case_sensitive=False)
        assert rule.matches(make_entry("root/lib.rs"))
        assert rule.matches(make_entry("root/LIB.Rs"))
        assert not rule.matches(make_entry("root/lib.rsx"))

    def test_applies_to_filename_only(self):
        assert not ExtensionFilter(".rs").matches(make_entry("root/dir.rs/readme"))


class TestPatternFilter:
    def test_partial_match_counts(self):
        rule = PatternFilter("ai")
        assert rule.matches(make_entry("src/main.rs"))

    def test_anchor_applies_to_filename(self):
        rule = PatternFilter("^b")
        assert rule.matches(make_entry("root/sub/b.rs"))
        assert not rule.matches(make_entry("root/b/a.txt"))

    def test_full_path_not_searched(self):
        assert not PatternFilter("sub").matches(make_entry("root/sub/b.rs"))

    def test_compiled_once(self):
        rule = PatternFilter(r".*\.rs$")
        assert rule.regex.pattern == r".*\.rs$"
        assert rule.matches(make_entry("src/lib.rs"))
        assert not rule.matches(make_entry("src/lib.rs.bak"))

    @pytest.mark.parametrize("pattern", ["[a-", "(unclosed", "*start", "a{2,1}"])
    def test_invalid_pattern(self, pattern):
        with pytest.raises(InvalidPatternError) as exc_info:
            PatternFilter(pattern)
        assert exc_info.value.pattern == pattern


class TestPredicateFilter:
    def test_receives_path(self):
        seen = []

        def predicate(path):
            seen.append(path)
            return "n" in path

        rule = PredicateFilter(predicate)
        assert rule.matches(make_entry("src/main.rs"))
        assert not rule.matches(make_entry("src/lib.rs"))
        assert seen == ["src/main.rs", "src/lib.rs"]

    def test_rejects_non_callable(self):
        with pytest.raises(TypeError, match="predicate must be callable"):
            PredicateFilter("not callable")


def test_base_filter_is_abstract():
    with pytest.raises(TypeError):
        BaseFilter()
