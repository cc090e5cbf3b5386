# Copyright 2025 Softwell S.r.l.
# Licensed under the Apache License, Version 2.0

"""
Port number linked to a Scheme for default-port resolution.

A Port keeps a reference to its owning Scheme, so changing the scheme of a
URL changes the effective port of a URL with no explicit port::

    Port(None, Scheme("https")).get_effective()   → 443
    Port(8080, Scheme("https")).get_effective()   → 8080
    Port(443, Scheme("https")).is_default()       → True
"""

from __future__ import annotations

from typing import Any

from .scheme import Scheme

__all__ = ["MAX_PORT", "Port"]

MAX_PORT = 65535


def _coerce_port(port: int | str | None) -> int | None:
    if port is None or port == "":
        return None
    if isinstance(port, bool):
        raise ValueError(f"Invalid port: {port!r}")
    try:
        value = int(port)
    except (TypeError, ValueError) as e:
        raise ValueError(f"Invalid port: {port!r}") from e
    if not 0 <= value <= MAX_PORT:
        raise ValueError(f"Port out of range 0-{MAX_PORT}: {value}")
    return value


class Port:
    """
    Optional port number.

    Attributes:
        scheme: Scheme consulted for the default port.

    Example:
        >>> port = Port("8080", Scheme("http"))
        >>> port.get()
        8080
        >>> str(port)
        ':8080'
    """

    __slots__ = ("_port", "scheme")

    def __init__(self, port: int | str | None = None, scheme: Scheme | None = None) -> None:
        """
        Initialize a Port.

        Args:
            port: Port number or numeric string, None for no explicit port.
            scheme: Owning scheme (default: an empty Scheme).

        Raises:
            ValueError: If ``port`` is not an integer in 0-65535.
        """
        self._port = _coerce_port(port)
        self.scheme = scheme if scheme is not None else Scheme()

    def get(self) -> int | None:
        return self._port

    def set(self, port: int | str | None) -> Port:
        self._port = _coerce_port(port)
        return self

    def clear(self) -> Port:
        self._port = None
        return self

    def is_empty(self) -> bool:
        return self._port is None

    def get_default(self) -> int | None:
        """Default port of the owning scheme."""
        return Scheme.get_default_port_for_scheme(self.scheme)

    def get_effective(self) -> int | None:
        """Explicit port if set, else the scheme default, else None."""
        if self._port is not None:
            return self._port
        return self.get_default()

    def is_default(self) -> bool:
        """True when an explicit port equals the scheme default."""
        return self._port is not None and self._port == self.get_default()

    def to_dict(self) -> dict[str, Any]:
        return {"address": self._port, "effective": self.get_effective()}

    def __str__(self) -> str:
        return f":{self._port}" if self._port is not None else ""

    def __repr__(self) -> str:
        return f"Port({self._port!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Port):
            return self._port == other._port
        if isinstance(other, int) and not isinstance(other, bool):
            return self._port == other
        return other is None and self._port is None
