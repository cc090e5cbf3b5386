# Copyright 2025 Softwell S.r.l.
# Licensed under the Apache License, Version 2.0

"""Tests for Path parsing, editing and normalization."""

import pytest

from genro_urlify import Path, Query, SegmentIndexError, Url


class TestPathParsing:
    """Test Path construction and projections."""

    def test_raw_segments(self):
        """Raw path is split on '/' without trimming."""
        path = Path("/users//foo/../profile")
        assert path.raw_segments == ["", "users", "", "foo", "..", "profile"]

    def test_sanitized_and_normalized(self):
        """'..' collapses a preceding normal segment."""
        path = Path("/users//foo/../profile")
        assert path.get() == "users/foo/../profile"
        assert path.normalized_segments == ["users", "profile"]
        assert str(path) == "/users/profile"

    def test_current_segments_dropped(self):
        """'.' segments never reach the output."""
        assert Path("/a/./b/.").normalized_segments == ["a", "b"]

    def test_parent_above_root_dropped(self):
        """'..' with nothing to pop is discarded."""
        assert Path("/../../a").normalized_segments == ["a"]
        assert Path("/a/../../b").normalized_segments == ["b"]

    def test_parent_after_parent(self):
        """'..' does not pop a kept '..'."""
        assert Path("../a/..").normalized_segments == []

    def test_empty(self):
        """None and '/' produce an empty path rendering as ''."""
        assert str(Path()) == ""
        assert Path().is_empty()
        assert Path("/").is_empty()
        assert str(Path("/")) == ""

    def test_normalized_empty_renders_root(self):
        """A non-empty path resolving to nothing renders '/'."""
        path = Path("/a/..")
        assert not path.is_empty()
        assert path.is_normalized_empty()
        assert str(path) == "/"

    def test_get_raw_and_fixed(self):
        """get_raw keeps everything, get_fixed drops empty tokens."""
        path = Path("/a//./b/")
        assert path.get_raw() == "/a//./b/"
        assert path.get_fixed() == "a/./b"

    def test_set_replaces(self):
        """set replaces every segment."""
        path = Path("/a/b").set("/c")
        assert path.segments == ["c"]
        assert path.set(None).is_empty()


class TestPathAccess:
    """Test positional access."""

    def test_get_segment(self):
        """get_segment indexes non-empty segments, negative ok."""
        path = Path("/a//b/c")
        assert path.get_segment(0) == "a"
        assert path.get_segment(-1) == "c"
        assert path.get_segment(-1) == path.get_segment(path.segments_count - 1)
        assert path.get_segment(5) is None

    def test_get_normalized_segment(self):
        """get_normalized_segment indexes the resolved list."""
        path = Path("/a/b/../c")
        assert path.get_normalized_segment(1) == "c"
        assert path.get_normalized_segment(-1) == "c"
        assert path.get_normalized_segment(9) is None

    def test_counts(self):
        """Counts of non-empty and normalized segments."""
        path = Path("/a/b/../c")
        assert path.segments_count == 4
        assert path.normalized_segments_count == 2

    def test_segment_as_query(self):
        """A segment can be parsed as a query."""
        path = Path("/search/q=url&lang=en/page")
        query = path.get_segment_as_query(-2)
        assert isinstance(query, Query)
        assert query.get("q") == "url"
        assert query.get("lang") == "en"

    def test_segment_as_query_custom_separators(self):
        """Separator and equals can be customised."""
        path = Path("/filters/color:red;size:m")
        query = path.get_segment_as_query(1, ";", ":")
        assert query.all() == {"color": ["red"], "size": ["m"]}

    def test_segment_as_query_missing(self):
        """A missing segment yields an empty query."""
        assert Path("/a").get_segment_as_query(4).is_empty()


class TestPathPredicates:
    """Test is_absolute and is_prefix_of."""

    def test_is_absolute(self):
        """Absolute iff the raw path starts with '/'."""
        assert Path("/a").is_absolute()
        assert not Path("a/b").is_absolute()
        assert not Path().is_absolute()

    def test_is_prefix_of(self):
        """String prefix on sanitized paths."""
        assert Path("/users").is_prefix_of(Path("/users/profile"))
        assert Path("/users").is_prefix_of("/users/./profile")
        assert not Path("/users/profile").is_prefix_of("/users")


class TestPathEditing:
    """Test segment editing methods."""

    def test_append(self):
        """append adds a segment at the end."""
        assert str(Path("/a").append("b")) == "/a/b"

    def test_prepend_keeps_absolute(self):
        """prepend on an absolute path keeps the leading '/'."""
        path = Path("/b").prepend("a")
        assert path.raw_segments == ["", "a", "b"]
        assert path.is_absolute()

    def test_prepend_relative(self):
        """prepend on a relative path puts the segment first."""
        assert Path("b").prepend("a").raw_segments == ["a", "b"]

    def test_insert_replace_remove(self):
        """Editing methods index raw segments."""
        path = Path("/a/c")
        path.insert_at(-1, "b")
        assert path.raw_segments == ["", "a", "b", "c"]
        path.replace_at(-1, "d")
        assert str(path) == "/a/b/d"
        path.remove_at(1)
        assert str(path) == "/b/d"

    def test_remove_out_of_range(self):
        """Out-of-range removal raises SegmentIndexError."""
        with pytest.raises(SegmentIndexError):
            Path("/a/b").remove_at(-5)

    def test_replace_out_of_range(self):
        """Out-of-range replacement raises SegmentIndexError."""
        with pytest.raises(SegmentIndexError):
            Path("/a").replace_at(2, "x")

    def test_chaining(self):
        """Editing methods return the Path."""
        path = Path("/a")
        assert path.append("b").append("c") is path


class TestPathNormalize:
    """Test normalize() and serialization."""

    @pytest.mark.parametrize(
        "raw",
        ["/users//foo/../profile", "a/./b/../../c", "/../x/.//y/..", "", "/"],
    )
    def test_idempotent(self, raw):
        """normalize(normalize(p)) == normalize(p)."""
        once = Path(raw).normalize()
        twice = once.normalize()
        assert twice.raw_segments == once.raw_segments
        assert str(twice) == str(once)

    def test_normalize_is_new_path(self):
        """normalize returns a new absolute path of resolved segments."""
        path = Path("/a/./b/../c")
        normalized = path.normalize()
        assert normalized is not path
        assert normalized.raw_segments == ["", "a", "c"]
        assert path.raw_segments == ["", "a", ".", "b", "..", "c"]

    def test_normalize_fully_collapsed_path(self):
        """A path that resolves to nothing normalizes to an empty path."""
        path = Path("/a/..")
        assert str(path) == "/"
        normalized = path.normalize()
        assert normalized.is_absolute()
        assert normalized.is_empty()
        assert str(normalized) == ""

    def test_normalized_path_in_url(self):
        """Inside a Url with a host the collapsed path still renders "/"."""
        url = Url("https://example.com/a/..")
        assert str(url) == "https://example.com/"
        url.set_path(str(url.path.normalize()))
        assert str(url) == "https://example.com/"

    def test_to_dict(self):
        """to_dict exposes raw and resolved segments."""
        assert Path("/a/../b").to_dict() == {
            "rawSegments": ["", "a", "..", "b"],
            "resolvedSegments": ["b"],
        }

    def test_equality(self):
        """Paths compare by rendered form."""
        assert Path("/a/../b") == Path("/b")
        assert Path("/b") == "/b"
        assert Path("/b") != 1

    def test_copy_is_independent(self):
        """copy() does not share segments."""
        path = Path("/a")
        clone = path.copy().append("b")
        assert str(path) == "/a"
        assert str(clone) == "/a/b"
