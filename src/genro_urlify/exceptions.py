# Copyright 2025 Softwell S.r.l.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""
Exception classes for genro-urlify parsing and manipulation errors.

This module provides typed exceptions for the failures that can happen while
turning a URL string into components, or while editing those components.
Nothing inside the library catches them: they propagate to the caller of
``Url.parse`` (or of the constructor) and the caller decides what to do.

Module Structure
----------------
Three exception classes, each inheriting from the closest built-in:

1. InvalidUrlError(ValueError) - URL string fails syntactic validation
2. UnresolvableDomainError(LookupError) - no known top-level domain suffix
3. SegmentIndexError(IndexError) - resolved index outside the collection

Design Decisions
----------------
- No common base: each exception extends the built-in a caller would
  already expect (``ValueError`` for bad input, ``LookupError`` for failed
  table lookups, ``IndexError`` for bad positions). Use tuple syntax for
  catching several: ``except (InvalidUrlError, UnresolvableDomainError)``.
- Parse is all-or-nothing: ``Url.parse`` validates the string and resolves
  the host before touching any component, so a raised error leaves the Url
  exactly as it was.

InvalidUrlError
---------------
Attributes:
    url (str): The rejected URL string.
    reason (str): Short description of the failed check (default: "").

Example:
    >>> Url("not a url")
    Traceback (most recent call last):
    InvalidUrlError: Invalid URL: 'not a url'

UnresolvableDomainError
-----------------------
Attributes:
    host (str): The host that matched no top-level domain.

Example:
    >>> Host("intranet")
    Traceback (most recent call last):
    UnresolvableDomainError: Unknown top-level domain: 'intranet'

SegmentIndexError
-----------------
Attributes:
    index (int): The index as given by the caller (may be negative).
    length (int): Size of the collection at the time of access.

Example:
    >>> Path("/a/b").remove_at(-5)
    Traceback (most recent call last):
    SegmentIndexError: Index -5 out of range for 3 segments
"""

__all__ = [
    "InvalidUrlError",
    "SegmentIndexError",
    "UnresolvableDomainError",
]


class InvalidUrlError(ValueError):
    """
    Raised when a URL string fails syntactic validation.

    Attributes:
        url: The rejected URL string.
        reason: Short description of the failed check.
    """

    def __init__(self, url: str, reason: str = "") -> None:
        """
        Initialize invalid URL exception.

        Args:
            url: The rejected URL string.
            reason: Short description of the failed check (default: "").
        """
        self.url = url
        self.reason = reason
        message = f"Invalid URL: {url!r}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)

    def __repr__(self) -> str:
        """Return detailed string representation."""
        return f"InvalidUrlError(url={self.url!r}, reason={self.reason!r})"


class UnresolvableDomainError(LookupError):
    """
    Raised when no dotted suffix of a host is a known top-level domain.

    Attributes:
        host: The host that could not be decomposed.
    """

    def __init__(self, host: str) -> None:
        self.host = host
        super().__init__(f"Unknown top-level domain: {host!r}")

    def __repr__(self) -> str:
        """Return detailed string representation."""
        return f"UnresolvableDomainError(host={self.host!r})"


class SegmentIndexError(IndexError):
    """
    Raised when an index, after negative-index resolution, falls outside
    the bounds of a segment or entry collection.

    Attributes:
        index: The index as given by the caller.
        length: Size of the collection at the time of access.
    """

    def __init__(self, index: int, length: int) -> None:
        self.index = index
        self.length = length
        super().__init__(f"Index {index} out of range for {length} segments")

    def __repr__(self) -> str:
        """Return detailed string representation."""
        return f"SegmentIndexError(index={self.index}, length={self.length})"
