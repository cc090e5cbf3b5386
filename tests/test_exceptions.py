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

"""Tests for exception classes."""

import pytest

from genro_urlify.exceptions import (
    InvalidUrlError,
    SegmentIndexError,
    UnresolvableDomainError,
)


class TestInvalidUrlError:
    """Tests for InvalidUrlError class."""

    def test_basic_creation(self) -> None:
        """Test creating exception with url and reason."""
        exc = InvalidUrlError("nope", reason="missing scheme")
        assert exc.url == "nope"
        assert exc.reason == "missing scheme"
        assert str(exc) == "Invalid URL: 'nope' (missing scheme)"

    def test_default_reason(self) -> None:
        """Test that reason defaults to empty string."""
        exc = InvalidUrlError("nope")
        assert exc.reason == ""
        assert str(exc) == "Invalid URL: 'nope'"

    def test_repr(self) -> None:
        """Test repr shows url and reason."""
        assert repr(InvalidUrlError("x", "y")) == "InvalidUrlError(url='x', reason='y')"

    def test_is_value_error(self) -> None:
        """Test that it can be caught as ValueError."""
        with pytest.raises(ValueError):
            raise InvalidUrlError("x")


class TestUnresolvableDomainError:
    """Tests for UnresolvableDomainError class."""

    def test_basic_creation(self) -> None:
        """Test host attribute and message."""
        exc = UnresolvableDomainError("intranet")
        assert exc.host == "intranet"
        assert str(exc) == "Unknown top-level domain: 'intranet'"
        assert repr(exc) == "UnresolvableDomainError(host='intranet')"

    def test_is_lookup_error(self) -> None:
        """Test that it can be caught as LookupError."""
        with pytest.raises(LookupError):
            raise UnresolvableDomainError("x")


class TestSegmentIndexError:
    """Tests for SegmentIndexError class."""

    def test_basic_creation(self) -> None:
        """Test index and length attributes."""
        exc = SegmentIndexError(-5, 3)
        assert exc.index == -5
        assert exc.length == 3
        assert str(exc) == "Index -5 out of range for 3 segments"
        assert repr(exc) == "SegmentIndexError(index=-5, length=3)"

    def test_is_index_error(self) -> None:
        """Test that it can be caught as IndexError."""
        with pytest.raises(IndexError):
            raise SegmentIndexError(0, 0)
