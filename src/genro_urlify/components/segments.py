# Copyright 2025 Softwell S.r.l.
# Licensed under the Apache License, Version 2.0

"""
Path segment classification and ordered segment collections.

Purpose
=======
A URL path is a ``/``-delimited list of tokens. Each token plays one of four
roles during path resolution, and this module classifies tokens into those
roles once, when they enter a collection.

Classification Schema::

    "/users//./foo/../profile"
          ↓ split on "/"
    ["", "users", "", ".", "foo", "..", "profile"]
          ↓ classify()
    EMPTY  NORMAL  EMPTY  CURRENT  NORMAL  PARENT  NORMAL

    +---------+-------+----------------+
    | Kind    | Token | Navigational   |
    +---------+-------+----------------+
    | EMPTY   | ""    | no             |
    | CURRENT | "."   | yes            |
    | PARENT  | ".."  | yes            |
    | NORMAL  | other | no             |
    +---------+-------+----------------+

Projections::

    not_empty()  →  drop EMPTY
    sanitized()  →  drop EMPTY and CURRENT (input of normalization)

Definition::

    class SegmentKind(Enum): EMPTY, CURRENT, PARENT, NORMAL

    class Segment(NamedTuple):
        kind: SegmentKind
        value: str
        @property is_navigational -> bool

    def classify(token: str) -> Segment

    class SegmentCollection:
        def append(token) / prepend(token) -> Self
        def insert_at(index, token) / replace_at(index, token) -> Self
        def remove_at(index) -> Self
        def get(index) -> Segment | None
        def filter(predicate) -> SegmentCollection
        def map(fn) -> list
        def not_empty() / sanitized() -> SegmentCollection
        def values() -> list[str]

Design Notes
============
- ``Segment`` is an immutable tagged value, not a class hierarchy: behaviour
  switches on ``kind``.
- Index policy: negative indices count from the end. ``replace_at`` and
  ``remove_at`` raise ``SegmentIndexError`` when the resolved index is out of
  range; ``insert_at`` appends when past the end and raises only when a
  negative index lands before the start.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Callable, Iterable, Iterator, NamedTuple

from ..utils import resolve_index, resolve_insert_index

__all__ = ["Segment", "SegmentCollection", "SegmentKind", "classify"]


class SegmentKind(Enum):
    """Navigational role of a path token."""

    EMPTY = "empty"
    CURRENT = "current"
    PARENT = "parent"
    NORMAL = "normal"


class Segment(NamedTuple):
    """A single classified path token."""

    kind: SegmentKind
    value: str

    @property
    def is_navigational(self) -> bool:
        """True for ``.`` and ``..``, the tokens that move through the path."""
        return self.kind in (SegmentKind.CURRENT, SegmentKind.PARENT)

    def __str__(self) -> str:
        return self.value


def classify(token: str) -> Segment:
    """Classify a raw path token. Total: every string maps to one kind."""
    if token == ".":
        return Segment(SegmentKind.CURRENT, token)
    if token == "":
        return Segment(SegmentKind.EMPTY, token)
    if token == "..":
        return Segment(SegmentKind.PARENT, token)
    return Segment(SegmentKind.NORMAL, token)


class SegmentCollection:
    """
    Ordered sequence of classified path segments.

    Insertion order is path order. Tokens are classified on the way in, so
    the collection only ever holds ``Segment`` values.

    Example:
        >>> segments = SegmentCollection.from_tokens(["", "a", ".", "b"])
        >>> segments.sanitized().values()
        ['a', 'b']
        >>> segments.insert_at(-1, "x").values()
        ['', 'a', '.', 'x', 'b']
    """

    __slots__ = ("_segments",)

    def __init__(self, segments: Iterable[Segment] | None = None) -> None:
        self._segments: list[Segment] = list(segments or [])

    @classmethod
    def from_tokens(cls, tokens: Iterable[str]) -> SegmentCollection:
        """Build a collection by classifying each raw token."""
        return cls(classify(token) for token in tokens)

    def all(self) -> list[Segment]:
        """Return a copy of the underlying segment list."""
        return list(self._segments)

    def get(self, index: int) -> Segment | None:
        """Return the segment at ``index`` (negative ok), or None if missing."""
        try:
            return self._segments[resolve_index(index, len(self._segments))]
        except IndexError:
            return None

    def append(self, token: str) -> SegmentCollection:
        self._segments.append(classify(token))
        return self

    def prepend(self, token: str) -> SegmentCollection:
        self._segments.insert(0, classify(token))
        return self

    def insert_at(self, index: int, token: str) -> SegmentCollection:
        """Insert ``token`` before ``index``; past the end appends."""
        position = resolve_insert_index(index, len(self._segments))
        self._segments.insert(position, classify(token))
        return self

    def replace_at(self, index: int, token: str) -> SegmentCollection:
        """Replace the segment at ``index``.

        Raises:
            SegmentIndexError: If ``index`` does not address a segment.
        """
        self._segments[resolve_index(index, len(self._segments))] = classify(token)
        return self

    def remove_at(self, index: int) -> SegmentCollection:
        """Remove the segment at ``index``.

        Raises:
            SegmentIndexError: If ``index`` does not address a segment.
        """
        del self._segments[resolve_index(index, len(self._segments))]
        return self

    def filter(self, predicate: Callable[[Segment], bool]) -> SegmentCollection:
        """Return a new collection with the segments matching ``predicate``."""
        return SegmentCollection(s for s in self._segments if predicate(s))

    def map(self, fn: Callable[[Segment], Any]) -> list[Any]:
        """Apply ``fn`` to every segment and return the results in order."""
        return [fn(s) for s in self._segments]

    def not_empty(self) -> SegmentCollection:
        """Drop EMPTY segments."""
        return self.filter(lambda s: s.kind is not SegmentKind.EMPTY)

    def sanitized(self) -> SegmentCollection:
        """Drop EMPTY and CURRENT segments, keeping NORMAL and PARENT."""
        return self.filter(
            lambda s: s.kind not in (SegmentKind.EMPTY, SegmentKind.CURRENT)
        )

    def values(self) -> list[str]:
        """Return the raw token of every segment."""
        return [s.value for s in self._segments]

    def __len__(self) -> int:
        return len(self._segments)

    def __iter__(self) -> Iterator[Segment]:
        return iter(self._segments)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, SegmentCollection):
            return self._segments == other._segments
        return False

    def __str__(self) -> str:
        return "/".join(self.values())

    def __repr__(self) -> str:
        return f"SegmentCollection({self.values()!r})"
