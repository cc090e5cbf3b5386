# Copyright 2025 Softwell S.r.l.
# Licensed under the Apache License, Version 2.0

"""
URL fragment (``#section``), optionally readable as a query.

Single-page applications often carry state in the fragment
(``#tab=2&sort=asc``); ``as_query()`` exposes it as a ``Query``.
"""

from __future__ import annotations

from typing import Any
from urllib.parse import quote

from .query import Query

__all__ = ["Fragment"]

# RFC 3986 fragment characters kept literal; "%" keeps existing escapes
FRAGMENT_SAFE = "!$&'()*+,;=:@/?%"


class Fragment:
    """
    Optional fragment string, stored unencoded.

    Example:
        >>> fragment = Fragment("tab=2&sort=asc")
        >>> str(fragment)
        '#tab=2&sort=asc'
        >>> fragment.as_query().get("sort")
        'asc'
        >>> Fragment("intro").as_query() is None
        True
    """

    __slots__ = ("_fragment",)

    def __init__(self, fragment: str | None = None) -> None:
        self._fragment = fragment

    def get(self) -> str | None:
        return self._fragment

    def set(self, fragment: str | None) -> Fragment:
        self._fragment = fragment
        return self

    def clear(self) -> Fragment:
        self._fragment = None
        return self

    def is_empty(self) -> bool:
        return self._fragment is None

    def equals(self, other: Fragment) -> bool:
        return self._fragment == other.get()

    def encode(self) -> str:
        """Percent-encode characters not allowed in a fragment."""
        if not self._fragment:
            return ""
        return quote(self._fragment, safe=FRAGMENT_SAFE)

    def as_query(
        self,
        separator: str | None = None,
        equals: str | None = None,
    ) -> Query | None:
        """
        Read the fragment as a Query.

        Without arguments the fragment is parsed only when it contains ``&``;
        with an explicit separator or equals it is always parsed.

        Returns:
            A Query, or None when the fragment does not look like one.
        """
        if self._fragment is None:
            return None
        if separator is None and equals is None and "&" not in self._fragment:
            return None
        return Query(self._fragment, separator or "&", equals or "=")

    def to_dict(self) -> dict[str, Any]:
        query = self.as_query()
        return {
            "fragment": self._fragment,
            "asQuery": query.to_dict() if query is not None else None,
        }

    def __str__(self) -> str:
        if self.is_empty():
            return ""
        return f"#{self.encode()}"

    def __repr__(self) -> str:
        return f"Fragment({self._fragment!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Fragment):
            return self.equals(other)
        if isinstance(other, str):
            return self._fragment == other
        return False
