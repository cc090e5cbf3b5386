# Copyright 2025 Softwell S.r.l.
# Licensed under the Apache License, Version 2.0

"""
URL scheme backed by a registry of known schemes.

Purpose
=======
A scheme decides how a URL starts (``https://`` vs ``mailto:``), whether the
connection is secure and which port applies when none is written. Those
facts live in a ``SchemeRegistry``; a ``Scheme`` value only holds its name and
a reference to the registry it was created with.

Registry Schema::

    +--------+--------+--------+--------------+
    | Name   | Suffix | Secure | Default port |
    +--------+--------+--------+--------------+
    | http   | ://    | no     | 80           |
    | https  | ://    | yes    | 443          |
    | ws     | ://    | no     | 80           |
    | wss    | ://    | yes    | 443          |
    | ftp    | ://    | no     | 21           |
    | ...    |        |        |              |
    | mailto | :      | no     | -            |
    | urn    | :      | no     | -            |
    +--------+--------+--------+--------------+

    Scheme("HTTPS")             → name "https", str "https://", secure
    Scheme("asgardia")          → unknown, str "asgardia://", not secure
    register_scheme("asgardia", ":")
    Scheme("asgardia")          → known, str "asgardia:"

Global vs Local Registries
==========================
``default_registry()`` returns one process-wide registry, seeded with the
built-in table. ``register_scheme()`` mutates it, so the change is visible to
every Scheme created afterwards in the same process, including Schemes
created by other libraries. Tests and multi-tenant code should build their
own registry and pass it explicitly::

    registry = SchemeRegistry()           # seeded copy, isolated
    registry.register("asgardia", ":")
    Scheme("asgardia", registry=registry)

The registry does no locking. Register schemes at startup, before threads
share it.

Design Notes
============
- Uses ``__slots__`` for memory efficiency
- Names are lowercased on set and on registration
- Unknown schemes are allowed: ``is_known()`` is False and the suffix is
  ``://``
"""

from __future__ import annotations

import logging
from typing import Any, Iterator, NamedTuple

__all__ = [
    "BUILTIN_SCHEMES",
    "Scheme",
    "SchemeInfo",
    "SchemeRegistry",
    "default_registry",
    "register_scheme",
]

logger = logging.getLogger("genro_urlify.scheme")

SUFFIXES = ("://", ":")


class SchemeInfo(NamedTuple):
    """Registry entry for one scheme."""

    suffix: str = "://"
    secure: bool = False
    default_port: int | None = None


BUILTIN_SCHEMES: dict[str, SchemeInfo] = {
    # web
    "http": SchemeInfo("://", False, 80),
    "https": SchemeInfo("://", True, 443),
    "ws": SchemeInfo("://", False, 80),
    "wss": SchemeInfo("://", True, 443),
    # file transfer
    "ftp": SchemeInfo("://", False, 21),
    "ftps": SchemeInfo("://", True, 990),
    "sftp": SchemeInfo("://", False, 22),
    "scp": SchemeInfo("://", False, 22),
    "tftp": SchemeInfo("://", False, 69),
    # databases
    "mysql": SchemeInfo("://", False, 3306),
    "pgsql": SchemeInfo("://", False, 5432),
    "postgres": SchemeInfo("://", False, 5432),
    "sqlite": SchemeInfo("://", False, None),
    "mongodb": SchemeInfo("://", False, 27017),
    "redis": SchemeInfo("://", False, 6379),
    "mssql": SchemeInfo("://", False, 1433),
    # services
    "ssh": SchemeInfo("://", False, 22),
    "telnet": SchemeInfo("://", False, 23),
    "ldap": SchemeInfo("://", False, 389),
    "smb": SchemeInfo("://", False, 445),
    "nfs": SchemeInfo("://", False, 2049),
    # communication
    "mailto": SchemeInfo(":", False, None),
    "tel": SchemeInfo(":", False, None),
    "sms": SchemeInfo(":", False, None),
    "sip": SchemeInfo(":", False, 5060),
    # special URIs
    "file": SchemeInfo(":", False, None),
    "data": SchemeInfo(":", False, None),
    "blob": SchemeInfo(":", False, None),
    "urn": SchemeInfo(":", False, None),
    "chrome": SchemeInfo(":", False, None),
    "about": SchemeInfo(":", False, None),
    "geo": SchemeInfo(":", False, None),
    "javascript": SchemeInfo(":", False, None),
    "intent": SchemeInfo(":", False, None),
}


class SchemeRegistry:
    """
    Mapping of scheme names to their suffix, security and default port.

    Example:
        >>> registry = SchemeRegistry()
        >>> registry.get("https").default_port
        443
        >>> "asgardia" in registry
        False
        >>> registry.register("asgardia", ":", secure=True)
        >>> registry.get("asgardia").suffix
        ':'
    """

    __slots__ = ("_schemes",)

    def __init__(self, schemes: dict[str, SchemeInfo] | None = None) -> None:
        """
        Initialize a registry.

        Args:
            schemes: Initial table (default: a copy of ``BUILTIN_SCHEMES``).
        """
        source = BUILTIN_SCHEMES if schemes is None else schemes
        self._schemes: dict[str, SchemeInfo] = {k.lower(): v for k, v in source.items()}

    def register(
        self,
        name: str,
        suffix: str = "://",
        secure: bool = False,
        default_port: int | None = None,
    ) -> None:
        """
        Add or replace a scheme.

        Args:
            name: Scheme name, case-insensitive.
            suffix: "://" or ":" (default: "://").
            secure: Whether the scheme is secure (default: False).
            default_port: Port used when none is given (default: None).

        Raises:
            ValueError: If ``suffix`` is not "://" or ":".
        """
        if suffix not in SUFFIXES:
            raise ValueError(f"Scheme suffix must be one of {SUFFIXES}, got {suffix!r}")
        key = name.lower()
        if key in self._schemes:
            logger.warning("Scheme %r re-registered, overriding previous entry", key)
        self._schemes[key] = SchemeInfo(suffix, secure, default_port)
        logger.debug("Registered scheme %r (suffix=%r, secure=%s)", key, suffix, secure)

    def unregister(self, name: str) -> None:
        self._schemes.pop(name.lower(), None)

    def get(self, name: str | None) -> SchemeInfo | None:
        if name is None:
            return None
        return self._schemes.get(name.lower())

    def names(self) -> list[str]:
        return list(self._schemes)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name.lower() in self._schemes

    def __iter__(self) -> Iterator[str]:
        return iter(self._schemes)

    def __len__(self) -> int:
        return len(self._schemes)


_default_registry = SchemeRegistry()


def default_registry() -> SchemeRegistry:
    """Return the process-wide registry shared by Schemes without their own."""
    return _default_registry


def register_scheme(
    name: str,
    suffix: str = "://",
    secure: bool = False,
    default_port: int | None = None,
) -> None:
    """
    Register a scheme in the process-wide default registry.

    Every Scheme using the default registry sees the change, including
    Schemes that already exist.
    """
    _default_registry.register(name, suffix, secure, default_port)


class Scheme:
    """
    URL scheme value.

    Attributes:
        registry: Registry used for lookups.

    Example:
        >>> scheme = Scheme("HTTPS")
        >>> scheme.get()
        'https'
        >>> scheme.is_secure()
        True
        >>> str(scheme)
        'https://'
        >>> str(Scheme())
        ''
    """

    __slots__ = ("_name", "registry")

    def __init__(
        self,
        name: str | None = None,
        registry: SchemeRegistry | None = None,
    ) -> None:
        self.registry = registry if registry is not None else default_registry()
        self._name: str | None = None
        self.set(name)

    def get(self) -> str | None:
        return self._name

    @property
    def name(self) -> str | None:
        return self._name

    def set(self, name: str | None) -> Scheme:
        """Set the scheme name (lowercased); None or "" empties it."""
        self._name = name.lower() if name else None
        return self

    def clear(self) -> Scheme:
        self._name = None
        return self

    def is_empty(self) -> bool:
        return self._name is None

    def info(self) -> SchemeInfo | None:
        return self.registry.get(self._name)

    def is_known(self) -> bool:
        return self.info() is not None

    def is_secure(self) -> bool:
        info = self.info()
        return info.secure if info is not None else False

    @property
    def suffix(self) -> str:
        """Registered suffix, or "://" for unknown schemes."""
        info = self.info()
        return info.suffix if info is not None else "://"

    @property
    def default_port(self) -> int | None:
        info = self.info()
        return info.default_port if info is not None else None

    @classmethod
    def get_default_port_for_scheme(
        cls,
        scheme: Scheme | str | None,
        registry: SchemeRegistry | None = None,
    ) -> int | None:
        """Default port of ``scheme`` (a Scheme or a name), or None."""
        if isinstance(scheme, Scheme):
            return scheme.default_port
        info = (registry or default_registry()).get(scheme)
        return info.default_port if info is not None else None

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self._name,
            "isSecure": self.is_secure(),
            "isKnown": self.is_known(),
            "suffix": self.suffix,
        }

    def __str__(self) -> str:
        if self._name is None:
            return ""
        return f"{self._name}{self.suffix}"

    def __repr__(self) -> str:
        return f"Scheme({self._name!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Scheme):
            return self._name == other._name
        if isinstance(other, str):
            return self._name == other.lower()
        return False
