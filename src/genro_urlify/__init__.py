# Copyright 2025 Softwell S.r.l.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     https://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""genro-urlify - Structured URL decomposition and reconstruction.

Main components:
    Url: Parses a URL into editable components and renders it back
    UrlOptions: Parse options (scheme auto-detection, query separators)

Components:
    Scheme, SchemeRegistry: Scheme value and its registry of known schemes
    Auth: User and password
    Host, TLDTable: TLD-aware host decomposition
    Port: Port with scheme default
    Path, SegmentCollection, Segment: Path segments and ".." resolution
    Query, QueryEntry: Ordered multi-value query with flags
    Fragment: Fragment, optionally readable as a Query

Usage:
    from genro_urlify import Url

    url = Url("https://www.example.co.uk/users//foo/../profile?a=1&a=2")
    url.host.root_domain          # "example.co.uk"
    url.path.normalized_segments  # ["users", "profile"]
    url.query.get("a")            # "2"
"""

__version__ = "0.1.0"

from .components import (
    Auth,
    Fragment,
    Host,
    Path,
    Port,
    Query,
    QueryEntry,
    Scheme,
    SchemeInfo,
    SchemeRegistry,
    Segment,
    SegmentCollection,
    SegmentKind,
    TLDTable,
    classify,
    default_registry,
    default_tld_table,
    register_scheme,
)
from .exceptions import (
    InvalidUrlError,
    SegmentIndexError,
    UnresolvableDomainError,
)
from .options import ConfigError, UrlOptions
from .url import Url

__all__ = [
    # Orchestrator
    "Url",
    "UrlOptions",
    # Components
    "Auth",
    "Fragment",
    "Host",
    "Path",
    "Port",
    "Query",
    "QueryEntry",
    "Scheme",
    "SchemeInfo",
    "SchemeRegistry",
    "Segment",
    "SegmentCollection",
    "SegmentKind",
    "TLDTable",
    # Helper functions
    "classify",
    "default_registry",
    "default_tld_table",
    "register_scheme",
    # Exceptions
    "ConfigError",
    "InvalidUrlError",
    "SegmentIndexError",
    "UnresolvableDomainError",
]
