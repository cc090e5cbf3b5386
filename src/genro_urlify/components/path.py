# Copyright 2025 Softwell S.r.l.
# Licensed under the Apache License, Version 2.0

"""
URL path with segment editing and relative-path resolution.

Purpose
=======
Splits a raw path on ``/`` into classified segments (see ``segments``),
lets callers edit segments by position, and renders the path with ``.`` and
``..`` resolved.

Normalization Schema::

    "/users//foo/../profile"
              ↓ split on "/" (no trimming)
    raw:        ["", "users", "", "foo", "..", "profile"]
              ↓ drop EMPTY and CURRENT
    sanitized:  ["users", "foo", "..", "profile"]
              ↓ ".." pops a preceding NORMAL, else is dropped
    normalized: ["users", "profile"]
              ↓
    str(path) → "/users/profile"

Definition::

    class Path:
        __slots__ = ("_segments",)

        def __init__(self, path: str | None = None) -> None
        def set(path) -> Path
        def get() / get_raw() / get_fixed() -> str
        @property segments -> list[str]             # non-empty, unresolved
        @property normalized_segments -> list[str]
        def get_segment(index) -> str | None
        def get_segment_as_query(index, separator="&", equals="=") -> Query
        def append / prepend / insert_at / replace_at / remove_at -> Path
        def normalize() -> Path
        def is_absolute() / is_prefix_of(other) / is_empty() -> bool

Example::

    path = Path("/a/./b/../c/")
    path.segments             # ["a", ".", "b", "..", "c"]
    path.normalized_segments  # ["a", "c"]
    path.get_segment(-1)      # "c"
    str(path)                 # "/a/c"

Design Notes
============
- Uses ``__slots__`` for memory efficiency
- ``..`` above the root is silently discarded, never an error
- Positional accessors (``get_segment``) index the non-empty segments;
  editing methods (``insert_at``, ``remove_at``...) index the raw segments,
  including the leading empty one of an absolute path
- No percent-decoding: segments are kept exactly as written
"""

from __future__ import annotations

from typing import Any

from .query import Query
from .segments import Segment, SegmentCollection, SegmentKind

__all__ = ["Path"]


class Path:
    """
    URL path made of classified segments.

    Example:
        >>> path = Path("/users//foo/../profile")
        >>> path.normalized_segments
        ['users', 'profile']
        >>> path.is_absolute()
        True
        >>> str(path.append("edit"))
        '/users/profile/edit'
    """

    __slots__ = ("_segments",)

    def __init__(self, path: str | None = None) -> None:
        self._segments = self._parse_segments(path)

    @staticmethod
    def _parse_segments(path: str | None) -> SegmentCollection:
        if not path:
            return SegmentCollection()
        return SegmentCollection.from_tokens(path.split("/"))

    def set(self, path: str | None) -> Path:
        """Replace every segment with the segments of ``path``."""
        self._segments = self._parse_segments(path)
        return self

    @property
    def collection(self) -> SegmentCollection:
        """The underlying raw segment collection."""
        return self._segments

    # String projections

    def get(self) -> str:
        """Sanitized segments joined by ``/`` (no ``.``, no empty tokens)."""
        return str(self._segments.sanitized())

    def get_raw(self) -> str:
        """Raw segments joined by ``/``, exactly as parsed or edited."""
        return str(self._segments)

    def get_fixed(self) -> str:
        """Non-empty segments joined by ``/``, with ``.`` and ``..`` kept."""
        return "/".join(self.segments)

    # Segment access

    @property
    def segments(self) -> list[str]:
        """Non-empty segment values, unresolved."""
        return self._segments.not_empty().values()

    @property
    def raw_segments(self) -> list[str]:
        return self._segments.values()

    @property
    def normalized_segments(self) -> list[str]:
        """Segment values after resolving ``.`` and ``..``."""
        stack: list[Segment] = []
        for segment in self._segments.sanitized():
            if segment.kind is SegmentKind.PARENT:
                if stack and stack[-1].kind is SegmentKind.NORMAL:
                    stack.pop()
                continue
            stack.append(segment)
        return [segment.value for segment in stack]

    def get_segment(self, index: int) -> str | None:
        """Non-empty segment at ``index`` (negative ok), or None."""
        segment = self._segments.not_empty().get(index)
        return segment.value if segment is not None else None

    def get_normalized_segment(self, index: int) -> str | None:
        """Normalized segment at ``index`` (negative ok), or None."""
        segments = self.normalized_segments
        try:
            return segments[index]
        except IndexError:
            return None

    def get_segment_as_query(
        self,
        index: int,
        separator: str = "&",
        equals: str = "=",
    ) -> Query:
        """
        Parse the non-empty segment at ``index`` as a Query.

        Args:
            index: Position among the non-empty segments (negative ok).
            separator: Query separator (default: "&").
            equals: Query equals string (default: "=").

        Returns:
            A new Query, empty when the segment does not exist.

        Example:
            >>> path = Path("/search/q=url&lang=en/page")
            >>> path.get_segment_as_query(-2).get("lang")
            'en'
        """
        return Query(self.get_segment(index), separator, equals)

    @property
    def segments_count(self) -> int:
        return len(self.segments)

    @property
    def normalized_segments_count(self) -> int:
        return len(self.normalized_segments)

    def is_empty(self) -> bool:
        """True when the path has no non-empty segment."""
        return self.segments_count == 0

    def is_normalized_empty(self) -> bool:
        return self.normalized_segments_count == 0

    def is_absolute(self) -> bool:
        """True when the raw path starts with ``/``."""
        first = self._segments.get(0)
        return first is not None and first.kind is SegmentKind.EMPTY

    def is_prefix_of(self, other: Path | str) -> bool:
        """String-prefix test between sanitized paths."""
        other_path = other if isinstance(other, Path) else Path(other)
        return other_path.get().startswith(self.get())

    # Editing

    def append(self, segment: str) -> Path:
        self._segments.append(segment)
        return self

    def prepend(self, segment: str) -> Path:
        """Insert ``segment`` at the start of the non-empty segments.

        An absolute path keeps its leading ``/``.
        """
        if self.is_absolute():
            self._segments.insert_at(1, segment)
        else:
            self._segments.prepend(segment)
        return self

    def insert_at(self, index: int, segment: str) -> Path:
        self._segments.insert_at(index, segment)
        return self

    def replace_at(self, index: int, segment: str) -> Path:
        self._segments.replace_at(index, segment)
        return self

    def remove_at(self, index: int) -> Path:
        self._segments.remove_at(index)
        return self

    def normalize(self) -> Path:
        """
        Return a new Path made of the normalized segments.

        The result can render differently from the source: ``str()`` reads
        the normalized segments but ``is_empty()`` counts the written ones, so
        ``Path("/a/..")`` renders ``"/"`` while its normalized copy, which
        has no non-empty segment left, renders ``""``. Inside a Url with a
        host both render as ``"/"``.
        """
        prefix = [""] if self.is_absolute() else []
        path = Path()
        path._segments = SegmentCollection.from_tokens(
            prefix + self.normalized_segments
        )
        return path

    def copy(self) -> Path:
        path = Path()
        path._segments = SegmentCollection(self._segments.all())
        return path

    # Serialization

    def to_dict(self) -> dict[str, Any]:
        return {
            "rawSegments": self.raw_segments,
            "resolvedSegments": self.normalized_segments,
        }

    def __str__(self) -> str:
        if self.is_empty():
            return ""
        return "/" + "/".join(self.normalized_segments)

    def __repr__(self) -> str:
        return f"Path({self.get_raw()!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Path):
            return str(self) == str(other)
        if isinstance(other, str):
            return str(self) == other
        return False
