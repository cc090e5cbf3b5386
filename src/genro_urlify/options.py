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
Parse options for Url.

Options are merged with genro-toolbox SmartOptions, later sources
overriding earlier ones:

    built-in DEFAULTS < explicit caller values (None values ignored)

Options:
    auto_detect_scheme  Prepend "<default_scheme>://" when the URL has no
                        scheme (default: False).
    default_scheme      Scheme used by auto-detection (default: "http").
    query_separator     Separator between query entries (default: "&").
    query_equals        Separator between query key and value (default: "=").

Example:
    opts = UrlOptions(auto_detect_scheme=True)
    Url("example.com/path", opts)   # "http://example.com/path"
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any

from genro_toolbox import SmartOptions  # type: ignore[import-untyped]

__all__ = ["ConfigError", "DEFAULTS", "UrlOptions"]

_SCHEME_NAME_RE = re.compile(r"[A-Za-z][A-Za-z0-9+.\-]*")

DEFAULTS = {
    "auto_detect_scheme": False,
    "default_scheme": "http",
    "query_separator": "&",
    "query_equals": "=",
}


class ConfigError(Exception):
    """Invalid option value."""


class UrlOptions:
    """Merged, validated parse options."""

    __slots__ = ("_opts",)

    def __init__(
        self,
        auto_detect_scheme: bool | None = None,
        default_scheme: str | None = None,
        query_separator: str | None = None,
        query_equals: str | None = None,
    ) -> None:
        caller_opts = SmartOptions(
            dict(
                auto_detect_scheme=auto_detect_scheme,
                default_scheme=default_scheme,
                query_separator=query_separator,
                query_equals=query_equals,
            ),
            ignore_none=True,
        )
        self._opts = SmartOptions(DEFAULTS) + caller_opts
        self._validate()

    @classmethod
    def coerce(cls, options: UrlOptions | Mapping[str, Any] | int | None) -> UrlOptions:
        """
        Build UrlOptions from any accepted form.

        Accepts an existing UrlOptions, a mapping of option names, the
        ``Url.AUTO_DETECT_SCHEME`` bit flag, or None for defaults.

        Raises:
            ConfigError: On unknown option names or unsupported types.
        """
        if options is None:
            return cls()
        if isinstance(options, UrlOptions):
            return options
        if isinstance(options, bool):
            raise ConfigError(f"Unsupported options type: {type(options).__name__}")
        if isinstance(options, int):
            return cls(auto_detect_scheme=bool(options & 1))
        if isinstance(options, Mapping):
            unknown = set(options) - set(DEFAULTS)
            if unknown:
                raise ConfigError(f"Unknown URL options: {', '.join(sorted(unknown))}")
            return cls(**options)
        raise ConfigError(f"Unsupported options type: {type(options).__name__}")

    def _validate(self) -> None:
        separator = self.query_separator
        equals = self.query_equals
        for name, value in (("query_separator", separator), ("query_equals", equals)):
            if not isinstance(value, str) or not value:
                raise ConfigError(f"Option '{name}' must be a non-empty string")
        if separator == equals:
            raise ConfigError("Options 'query_separator' and 'query_equals' must differ")
        scheme = self.default_scheme
        if not isinstance(scheme, str) or not _SCHEME_NAME_RE.fullmatch(scheme):
            raise ConfigError(f"Option 'default_scheme' is not a valid scheme: {scheme!r}")

    @property
    def auto_detect_scheme(self) -> bool:
        return bool(self._opts["auto_detect_scheme"])

    @property
    def default_scheme(self) -> str:
        result: str = self._opts["default_scheme"]
        return result

    @property
    def query_separator(self) -> str:
        result: str = self._opts["query_separator"]
        return result

    @property
    def query_equals(self) -> str:
        result: str = self._opts["query_equals"]
        return result

    def as_dict(self) -> dict[str, Any]:
        return {key: self._opts[key] for key in DEFAULTS}

    def __repr__(self) -> str:
        return f"UrlOptions({self.as_dict()!r})"
