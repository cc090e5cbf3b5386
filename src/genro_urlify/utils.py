# Copyright 2025 Softwell S.r.l.
# Licensed under the Apache License, Version 2.0

"""Index helpers shared by segment and entry collections.

Exports:
    resolve_index: Resolve a Python-style index for read/replace/remove.
    resolve_insert_index: Resolve a Python-style index for insertion.
"""

from .exceptions import SegmentIndexError

__all__ = ["resolve_index", "resolve_insert_index"]


def resolve_index(index: int, length: int) -> int:
    """Resolve ``index`` against a collection of ``length`` items.

    Negative indices count from the end (``-1`` is the last item). The
    resolved index must land inside ``[0, length)``.

    Examples:
        resolve_index(-1, 3)  # 2
        resolve_index(1, 3)   # 1
        resolve_index(3, 3)   # raises SegmentIndexError

    Raises:
        SegmentIndexError: If the resolved index is out of range.
    """
    resolved = length + index if index < 0 else index
    if resolved < 0 or resolved >= length:
        raise SegmentIndexError(index, length)
    return resolved


def resolve_insert_index(index: int, length: int) -> int:
    """Resolve ``index`` as an insertion point.

    Same negative-index rule as ``resolve_index``, computed against the
    length before insertion. Positions at or past the end mean append.

    Raises:
        SegmentIndexError: If a negative index resolves before the start.
    """
    resolved = length + index if index < 0 else index
    if resolved < 0:
        raise SegmentIndexError(index, length)
    return min(resolved, length)
