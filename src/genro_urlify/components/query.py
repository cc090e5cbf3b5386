# Copyright 2025 Softwell S.r.l.
# Licensed under the Apache License, Version 2.0

"""
Ordered query string entries with flag and multi-value support.

Purpose
=======
A query string is kept as an ordered list of entries rather than a dict, so
duplicate keys, entry order and the difference between a flag (``?debug``)
and an empty value (``?debug=``) all survive a parse/serialize round trip.
The same class parses any separator/equals pair, which lets a path segment
or a query value be reinterpreted as a nested query.

Parsing Schema::

    "foo&bar=baz&tag=a&tag=b&empty="
                 ↓ split on separator "&"
    ["foo", "bar=baz", "tag=a", "tag=b", "empty="]
                 ↓ split each on first equals "="
    QueryEntry("foo",   "",    is_flag=True)
    QueryEntry("bar",   "baz", is_flag=False)
    QueryEntry("tag",   "a",   is_flag=False)
    QueryEntry("tag",   "b",   is_flag=False)
    QueryEntry("empty", "",    is_flag=False)

    query.get("tag")      → "b"          (last entry wins)
    query.get_all("tag")  → ["a", "b"]   (insertion order)
    str(query)            → "?foo&bar=baz&tag=a&tag=b&empty="

Nested Queries::

    segment = "utm_medium=target:readme|foo:bar&utm_source=github"
    Query(segment).get_as_query("utm_medium", "|", ":").get("target")
    → "readme"

Definition::

    class QueryEntry:
        __slots__ = ("key", "value", "is_flag")
        def render(self, equals: str = "=") -> str

    class Query:
        __slots__ = ("_entries", "separator", "equals")

        def __init__(self, raw=None, separator="&", equals="=") -> None
        def parse(raw, separator=None, equals=None) -> Query
        def set_raw(raw, separator=None, equals=None) -> Query
        def get(key, default=None) -> str | None
        def get_as_query(key, separator="&", equals="=", default=None) -> Query
        def get_all(key) -> list[str]
        def has(key) / index(key)
        def add(key_or_entry, value="", is_flag=False) -> Query
        def set(key, value) / remove(key) / clear() -> Query
        def keys() / values() / all_keys() / all() / entries()
        def merge(other) -> Query
        def filter(predicate) / map(transform) -> Query
        def to_string() -> str    # without "?"
        def __str__() -> str      # with "?", "" when empty

Design Notes
============
- Uses ``__slots__`` for memory efficiency
- ``set()`` removes every entry for the key and appends one new entry, so
  the key moves to the end of the query
- ``filter()`` and ``map()`` return new Query instances and never reorder
- A token is a flag when it does not contain the equals string; a token
  with an equals string and nothing after it is an empty, non-flag value
- Empty tokens (``a=1&&b=2``) are skipped
- No percent-decoding: keys and values are kept exactly as written
- QueryEntry is mutable and therefore unhashable; a Query never shares
  entries with its caller (``add``, ``merge``, ``filter``, ``map`` store copies)
"""

from __future__ import annotations

from typing import Any, Callable, Iterator, Union

__all__ = ["Query", "QueryEntry"]

EntryLike = Union["QueryEntry", tuple]


class QueryEntry:
    """
    One key/value-or-flag triplet of a query string.

    Attributes:
        key: Entry key (case-sensitive).
        value: Entry value, empty string for flags.
        is_flag: True when the entry was written without an equals sign.

    Example:
        >>> str(QueryEntry("page", "2"))
        'page=2'
        >>> str(QueryEntry("debug", is_flag=True))
        'debug'
    """

    __slots__ = ("key", "value", "is_flag")

    def __init__(self, key: str, value: str = "", is_flag: bool = False) -> None:
        self.key = key
        self.value = "" if is_flag else value
        self.is_flag = is_flag

    def render(self, equals: str = "=") -> str:
        """Render as ``key`` for flags, else ``key<equals>value``."""
        if self.is_flag:
            return self.key
        return f"{self.key}{equals}{self.value}"

    def copy(self) -> QueryEntry:
        return QueryEntry(self.key, self.value, self.is_flag)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"QueryEntry({self.key!r}, {self.value!r}, is_flag={self.is_flag})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, QueryEntry):
            return (self.key, self.value, self.is_flag) == (
                other.key,
                other.value,
                other.is_flag,
            )
        return False


def _to_entry(item: Any) -> QueryEntry:
    """Coerce a map() result into a QueryEntry."""
    if isinstance(item, QueryEntry):
        return item.copy()
    if isinstance(item, tuple) and len(item) in (2, 3):
        return QueryEntry(*item)
    raise TypeError(
        f"Query.map() transform must return a QueryEntry or a "
        f"(key, value[, is_flag]) tuple, got {type(item).__name__}"
    )


class Query:
    """
    Ordered, multi-value query string.

    Parses a query string (without the leading ``?``) into QueryEntry
    objects. Keys are case-sensitive and may repeat.

    Attributes:
        separator: String between entries, ``&`` by default.
        equals: String between key and value, ``=`` by default.

    Example:
        >>> query = Query("a=1&a=2&flag")
        >>> query.get("a")
        '2'
        >>> query.get_all("a")
        ['1', '2']
        >>> query.set("a", "3").to_string()
        'flag&a=3'
        >>> str(Query())
        ''
    """

    __slots__ = ("_entries", "separator", "equals")

    def __init__(
        self,
        raw: str | None = None,
        separator: str = "&",
        equals: str = "=",
    ) -> None:
        """
        Initialize a Query, optionally parsing ``raw``.

        Args:
            raw: Query string without the leading "?", or None for empty.
            separator: String between entries (default: "&").
            equals: String between key and value (default: "=").
        """
        self._entries: list[QueryEntry] = []
        self.separator = separator
        self.equals = equals
        if raw:
            self.parse(raw)

    # Parsing

    def parse(
        self,
        raw: str,
        separator: str | None = None,
        equals: str | None = None,
    ) -> Query:
        """
        Replace all entries with the entries parsed from ``raw``.

        Args:
            raw: Query string without the leading "?".
            separator: Overrides the query's separator when given.
            equals: Overrides the query's equals string when given.

        Returns:
            The same Query, for chaining.
        """
        if separator is not None:
            self.separator = separator
        if equals is not None:
            self.equals = equals

        self._entries = []
        for token in raw.split(self.separator):
            if token == "":
                continue
            if self.equals not in token:
                self._entries.append(QueryEntry(token, is_flag=True))
            else:
                key, value = token.split(self.equals, 1)
                self._entries.append(QueryEntry(key, value))
        return self

    def set_raw(
        self,
        raw: str | None,
        separator: str | None = None,
        equals: str | None = None,
    ) -> Query:
        """Parse ``raw`` into this query; None or "" clears it."""
        if not raw:
            return self.clear()
        return self.parse(raw, separator, equals)

    # Lookup

    def get(self, key: str, default: str | None = None) -> str | None:
        """
        Get the value of the last entry with ``key``.

        Args:
            key: Entry key (case-sensitive).
            default: Value returned when the key is absent.

        Returns:
            The latest value for the key, or default if not found.
        """
        for entry in reversed(self._entries):
            if entry.key == key:
                return entry.value
        return default

    def get_as_query(
        self,
        key: str,
        separator: str = "&",
        equals: str = "=",
        default: str | None = None,
    ) -> Query:
        """
        Reparse the value of ``key`` as a nested Query.

        Args:
            key: Entry key whose value holds the nested query.
            separator: Separator of the nested query (default: "&").
            equals: Equals string of the nested query (default: "=").
            default: Raw string parsed when the key is absent.

        Returns:
            A new Query; empty if neither the key nor a default exists.
        """
        return Query(self.get(key, default), separator, equals)

    def get_all(self, key: str) -> list[str]:
        """Get every value for ``key`` in insertion order."""
        return [e.value for e in self._entries if e.key == key]

    def has(self, key: str) -> bool:
        return self.index(key) is not None

    def index(self, key: str) -> int | None:
        """Position of the first entry with ``key``, or None."""
        for position, entry in enumerate(self._entries):
            if entry.key == key:
                return position
        return None

    def keys(self) -> list[str]:
        """Unique keys in first-occurrence order."""
        return list(dict.fromkeys(e.key for e in self._entries))

    def values(self) -> list[str]:
        """Unique values in first-occurrence order."""
        return list(dict.fromkeys(e.value for e in self._entries))

    def all_keys(self) -> list[str]:
        """Every key, duplicates included, in order."""
        return [e.key for e in self._entries]

    def all(self) -> dict[str, list[str]]:
        """Group values by key: ``{"a": ["1", "2"], "flag": [""]}``."""
        grouped: dict[str, list[str]] = {}
        for entry in self._entries:
            grouped.setdefault(entry.key, []).append(entry.value)
        return grouped

    def entries(self) -> list[QueryEntry]:
        """Return a copy of the entry list."""
        return list(self._entries)

    # Mutation

    def add(
        self,
        key: str | QueryEntry,
        value: str = "",
        is_flag: bool = False,
    ) -> Query:
        """
        Append an entry without deduplication.

        Args:
            key: Entry key, or a QueryEntry to append a copy of.
            value: Entry value, ignored for flags and QueryEntry input.
            is_flag: Append a flag entry.

        Returns:
            The same Query, for chaining.
        """
        if isinstance(key, QueryEntry):
            self._entries.append(key.copy())
        else:
            self._entries.append(QueryEntry(key, value, is_flag))
        return self

    def set(self, key: str, value: str) -> Query:
        """Replace every entry for ``key`` with one entry at the end."""
        self.remove(key)
        return self.add(key, value)

    def remove(self, key: str) -> Query:
        """Delete every entry with ``key``."""
        self._entries = [e for e in self._entries if e.key != key]
        return self

    def clear(self) -> Query:
        self._entries = []
        return self

    def merge(self, other: Query) -> Query:
        """Append copies of all of ``other``'s entries, keeping duplicates."""
        for entry in other._entries:
            self._entries.append(entry.copy())
        return self

    # Derivation

    def filter(self, predicate: Callable[[str, str, bool, int], Any]) -> Query:
        """
        Return a new Query with the entries accepted by ``predicate``.

        Args:
            predicate: Called as ``predicate(key, value, is_flag, index)``.
        """
        result = Query(separator=self.separator, equals=self.equals)
        for position, entry in enumerate(self._entries):
            if predicate(entry.key, entry.value, entry.is_flag, position):
                result._entries.append(entry.copy())
        return result

    def map(self, transform: Callable[[str, str, bool, int], EntryLike]) -> Query:
        """
        Return a new Query with every entry replaced by ``transform``'s result.

        Args:
            transform: Called as ``transform(key, value, is_flag, index)``;
                must return a QueryEntry or a ``(key, value[, is_flag])``
                tuple. The result takes the position of the original entry.

        Raises:
            TypeError: If ``transform`` returns anything else.
        """
        result = Query(separator=self.separator, equals=self.equals)
        for position, entry in enumerate(self._entries):
            mapped = transform(entry.key, entry.value, entry.is_flag, position)
            result._entries.append(_to_entry(mapped))
        return result

    def copy(self) -> Query:
        return self.filter(lambda *_: True)

    # Serialization

    def is_empty(self) -> bool:
        return not self._entries

    def to_string(self) -> str:
        """Render entries with this query's own separator/equals, no ``?``."""
        return self.separator.join(e.render(self.equals) for e in self._entries)

    def to_dict(self) -> dict[str, list[str]]:
        return self.all()

    def __str__(self) -> str:
        """Return ``?`` plus entries joined by ``&``, or "" when empty."""
        if not self._entries:
            return ""
        return "?" + "&".join(str(e) for e in self._entries)

    def __repr__(self) -> str:
        return f"Query({self.to_string()!r})"

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[QueryEntry]:
        return iter(list(self._entries))

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, str):
            return False
        return self.has(key)

    def __bool__(self) -> bool:
        return bool(self._entries)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Query):
            return self._entries == other._entries
        return False
