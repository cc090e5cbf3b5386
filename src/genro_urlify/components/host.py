# Copyright 2025 Softwell S.r.l.
# Licensed under the Apache License, Version 2.0

"""
Host name with top-level-domain aware decomposition.

Purpose
=======
Splits a host such as ``www.foo.example.co.uk`` into subdomains, primary
domain name and top-level domain, using a table of known public suffixes.
Each part can then be edited on its own and the host is recomposed from the
current parts.

Decomposition Schema::

    "www.foo.example.co.uk"
       ↓ test dotted suffixes, longest first, against the TLD table
    "foo.example.co.uk"  no
    "example.co.uk"      no
    "co.uk"              yes  → top_level_domain
       ↓
    ─────── ─────── ─────
    www.foo example co.uk
    ─────── ─────── ─────
    subdomains  primary   top-level domain
                └── root_domain ──┘

    subdomains          → ["www", "foo"]
    subdomain_name      → "www.foo"
    primary_domain_name → "example"
    top_level_domain    → "co.uk"
    root_domain         → "example.co.uk"

Definition::

    class TLDTable:
        def __init__(self, suffixes: Iterable[str] = ()) -> None
        @classmethod from_public_suffix_list(include_private=True) -> TLDTable
        @classmethod load(path) -> TLDTable
        def add(suffix) -> None
        def __contains__(suffix) -> bool

    def default_tld_table() -> TLDTable

    class Host:
        __slots__ = ("subdomains", "primary_domain_name",
                     "top_level_domain", "tlds")

        def __init__(self, host=None, tlds=None) -> None
        def set(host) -> Host             # parse, raises on unknown TLD
        def set_subdomain(value) -> Host
        def append_subdomain(label) / prepend_subdomain(label) -> Host
        def set_primary_domain_name(name) -> Host
        def set_top_level_domain(tld) -> Host
        @property subdomain_name -> str | None
        @property root_domain -> str | None

Example::

    from genro_urlify.components import Host

    host = Host("blog.example.com")
    host.set_subdomain("shop")
    str(host)  # "shop.example.com"

    # Builder mode never consults the TLD table
    host = Host().set_primary_domain_name("acme").set_top_level_domain("internal")
    str(host)  # "acme.internal"

Design Notes
============
- The shared ``TLDTable`` is seeded on first use from the Public Suffix
  List snapshot bundled with tldextract, private domains included. Nothing
  is fetched over the network. A Host may be given its own table.
- Lookup is exact membership: PSL wildcard (``*.ck``) and exception
  (``!www.ck``) rules are not applied
- Parsing is eager: ``UnresolvableDomainError`` is raised by ``set()``
- The suffix must be a proper suffix: a host that is itself a known TLD
  (``co.uk``) has no primary domain name and is rejected
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Iterable

import tldextract

from ..exceptions import UnresolvableDomainError

__all__ = ["Host", "TLDTable", "default_tld_table"]

logger = logging.getLogger("genro_urlify.host")


class TLDTable:
    """
    Set of known top-level domain suffixes.

    Example:
        >>> table = TLDTable(["com", "co.uk"])
        >>> "co.uk" in table
        True
        >>> table.add("internal")
        >>> "internal" in table
        True
    """

    __slots__ = ("_suffixes",)

    def __init__(self, suffixes: Iterable[str] = ()) -> None:
        self._suffixes: set[str] = {s.strip().lower() for s in suffixes}

    @classmethod
    def from_public_suffix_list(cls, include_private: bool = True) -> TLDTable:
        """
        Build a table from the Public Suffix List snapshot shipped with tldextract.

        The snapshot is read offline: no suffix list URL is fetched and no
        cache directory is written. Wildcard and exception rules are skipped.

        Args:
            include_private: Also load the PSL private section
                (``github.io``, ``blogspot.com``...).
        """
        extractor = tldextract.TLDExtract(
            cache_dir=None,
            suffix_list_urls=(),
            include_psl_private_domains=include_private,
        )
        table = cls(s for s in extractor.tlds if not s.startswith(("*", "!")))
        logger.debug("Loaded %d top-level domains from the public suffix list", len(table))
        return table

    @classmethod
    def load(cls, path: str | Path) -> TLDTable:
        """Load a table from a text file: one suffix per line, ``#`` comments."""
        source = Path(path)
        suffixes = []
        for line in source.read_text(encoding="utf-8").splitlines():
            line = line.strip()
            if line and not line.startswith("#"):
                suffixes.append(line)
        table = cls(suffixes)
        logger.debug("Loaded %d top-level domains from %s", len(table), source)
        return table

    def add(self, suffix: str) -> None:
        self._suffixes.add(suffix.strip().lower())

    def __contains__(self, suffix: object) -> bool:
        return isinstance(suffix, str) and suffix in self._suffixes

    def __len__(self) -> int:
        return len(self._suffixes)


_default_table: TLDTable | None = None


def default_tld_table() -> TLDTable:
    """Return the shared table, built from the public suffix list on first call."""
    global _default_table
    if _default_table is None:
        _default_table = TLDTable.from_public_suffix_list()
    return _default_table


class Host:
    """
    Host decomposed into subdomains, primary domain name and TLD.

    Attributes:
        subdomains: Labels before the primary domain name, outermost first.
        primary_domain_name: Label right before the top-level domain.
        top_level_domain: Longest known suffix, e.g. "com" or "co.uk".
        tlds: Table used by ``set()``; the shared default when not given.

    Example:
        >>> host = Host("www.foo.example.co.uk")
        >>> host.subdomains
        ['www', 'foo']
        >>> host.root_domain
        'example.co.uk'
    """

    __slots__ = ("subdomains", "primary_domain_name", "top_level_domain", "tlds")

    def __init__(self, host: str | None = None, tlds: TLDTable | None = None) -> None:
        """
        Initialize a Host.

        Args:
            host: Host name to decompose, or None for an empty host.
            tlds: Suffix table (default: the shared public suffix table).

        Raises:
            UnresolvableDomainError: If no suffix of ``host`` is known.
        """
        self.subdomains: list[str] = []
        self.primary_domain_name: str | None = None
        self.top_level_domain: str | None = None
        self.tlds = tlds
        self.set(host)

    def _table(self) -> TLDTable:
        return self.tlds if self.tlds is not None else default_tld_table()

    def resolve(self, host: str) -> tuple[list[str], str, str]:
        """
        Decompose ``host`` without changing this Host.

        Returns:
            ``(subdomains, primary_domain_name, top_level_domain)``

        Raises:
            UnresolvableDomainError: If no proper suffix of ``host`` is known.
        """
        labels = host.lower().rstrip(".").split(".")
        table = self._table()
        if ".".join(labels) in table:
            logger.debug("Host %r is itself a top-level domain", host)
            raise UnresolvableDomainError(host)
        for start in range(1, len(labels)):
            suffix = ".".join(labels[start:])
            if suffix in table and labels[start - 1]:
                subdomains = labels[: start - 1]
                if "" in subdomains:
                    break
                return subdomains, labels[start - 1], suffix
        logger.debug("No known top-level domain for host %r", host)
        raise UnresolvableDomainError(host)

    def set(self, host: str | None) -> Host:
        """Parse ``host`` into parts; None or "" empties the host."""
        if not host:
            return self.clear()
        subdomains, primary, tld = self.resolve(host)
        self.subdomains = subdomains
        self.primary_domain_name = primary
        self.top_level_domain = tld
        return self

    def clear(self) -> Host:
        self.subdomains = []
        self.primary_domain_name = None
        self.top_level_domain = None
        return self

    # Builders (no TLD lookup)

    def set_subdomain(self, subdomain: str | list[str] | None) -> Host:
        """Replace all subdomains with a dotted string or a label list."""
        if not subdomain:
            self.subdomains = []
        elif isinstance(subdomain, str):
            self.subdomains = subdomain.split(".")
        else:
            self.subdomains = list(subdomain)
        return self

    def append_subdomain(self, label: str) -> Host:
        """Add a label right before the primary domain name."""
        self.subdomains.append(label)
        return self

    def prepend_subdomain(self, label: str) -> Host:
        """Add a label at the outermost (leftmost) position."""
        self.subdomains.insert(0, label)
        return self

    def set_primary_domain_name(self, name: str | None) -> Host:
        self.primary_domain_name = name
        return self

    def set_top_level_domain(self, tld: str | None) -> Host:
        self.top_level_domain = tld
        return self

    # Derived values

    @property
    def subdomain_name(self) -> str | None:
        """Subdomains joined by dots, or None when there are none."""
        return ".".join(self.subdomains) if self.subdomains else None

    @property
    def root_domain(self) -> str | None:
        """``primary.tld`` when both parts are set, else None."""
        if self.primary_domain_name and self.top_level_domain:
            return f"{self.primary_domain_name}.{self.top_level_domain}"
        return None

    def is_empty(self) -> bool:
        return not (self.subdomains or self.primary_domain_name or self.top_level_domain)

    def copy(self) -> Host:
        host = Host(tlds=self.tlds)
        host.subdomains = list(self.subdomains)
        host.primary_domain_name = self.primary_domain_name
        host.top_level_domain = self.top_level_domain
        return host

    def to_dict(self) -> dict[str, Any]:
        return {
            "subdomains": list(self.subdomains),
            "subdomainName": self.subdomain_name,
            "primaryDomainName": self.primary_domain_name,
            "topLevelDomain": self.top_level_domain,
            "rootDomain": self.root_domain,
        }

    def __str__(self) -> str:
        labels = [
            *self.subdomains,
            *(p for p in (self.primary_domain_name, self.top_level_domain) if p),
        ]
        return ".".join(labels)

    def __repr__(self) -> str:
        return f"Host({str(self)!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Host):
            return str(self) == str(other)
        if isinstance(other, str):
            return str(self) == other
        return False
