# Copyright 2025 Softwell S.r.l.
# Licensed under the Apache License, Version 2.0

"""Tests for Scheme, SchemeRegistry and Port."""

import pytest

from genro_urlify import (
    Port,
    Scheme,
    SchemeInfo,
    SchemeRegistry,
    default_registry,
    register_scheme,
)


@pytest.fixture
def registry():
    """Isolated registry seeded with the built-in schemes."""
    return SchemeRegistry()


@pytest.fixture
def clean_default_registry():
    """Remove schemes registered globally by a test."""
    yield default_registry()
    default_registry().unregister("asgardia")


class TestSchemeRegistry:
    """Test SchemeRegistry."""

    def test_builtin_table(self, registry):
        """Built-in schemes carry suffix, security and default port."""
        assert registry.get("https") == SchemeInfo("://", True, 443)
        assert registry.get("mailto") == SchemeInfo(":", False, None)
        assert "ftp" in registry
        assert "HTTP" in registry

    def test_register(self, registry):
        """register adds a lowercased entry."""
        registry.register("Asgardia", ":", secure=True, default_port=1234)
        assert registry.get("asgardia") == SchemeInfo(":", True, 1234)

    def test_register_invalid_suffix(self, registry):
        """Only '://' and ':' are valid suffixes."""
        with pytest.raises(ValueError):
            registry.register("x", "//")

    def test_unregister(self, registry):
        """unregister removes an entry."""
        registry.unregister("ftp")
        assert "ftp" not in registry

    def test_isolated_copies(self, registry):
        """Registries do not share state."""
        registry.register("asgardia")
        assert "asgardia" not in SchemeRegistry()
        assert "asgardia" not in default_registry()

    def test_custom_table(self):
        """A registry can start from a custom table."""
        registry = SchemeRegistry({"git": SchemeInfo("://", False, 9418)})
        assert registry.names() == ["git"]


class TestScheme:
    """Test Scheme values."""

    def test_known_secure(self):
        """https is known, secure and renders with '://'."""
        scheme = Scheme("HTTPS")
        assert scheme.get() == "https"
        assert scheme.is_known()
        assert scheme.is_secure()
        assert str(scheme) == "https://"

    def test_colon_suffix(self):
        """mailto renders with ':'."""
        assert str(Scheme("mailto")) == "mailto:"

    def test_unknown(self, registry):
        """Unknown schemes fall back to '://' and are not secure."""
        scheme = Scheme("asgardia", registry=registry)
        assert not scheme.is_known()
        assert not scheme.is_secure()
        assert scheme.default_port is None
        assert str(scheme) == "asgardia://"

    def test_registration_changes_new_values(self, registry):
        """Registering a scheme affects Schemes using that registry."""
        before = Scheme("asgardia", registry=registry)
        registry.register("asgardia", ":")
        after = Scheme("asgardia", registry=registry)
        assert str(after) == "asgardia:"
        assert str(before) == "asgardia:"
        assert str(Scheme("asgardia")) == "asgardia://"

    def test_global_registration(self, clean_default_registry):
        """register_scheme changes the process-wide registry."""
        assert str(Scheme("asgardia")) == "asgardia://"
        register_scheme("asgardia", ":", secure=True)
        assert str(Scheme("asgardia")) == "asgardia:"
        assert Scheme("asgardia").is_secure()

    def test_empty(self):
        """An empty scheme renders ''."""
        scheme = Scheme()
        assert scheme.is_empty()
        assert str(scheme) == ""
        assert not scheme.is_known()
        assert Scheme("").is_empty()

    def test_to_dict(self):
        """to_dict reports name, security, knowledge and suffix."""
        assert Scheme("wss").to_dict() == {
            "name": "wss",
            "isSecure": True,
            "isKnown": True,
            "suffix": "://",
        }

    def test_default_port_for_scheme(self):
        """Default port lookup accepts a Scheme or a name."""
        assert Scheme.get_default_port_for_scheme(Scheme("ssh")) == 22
        assert Scheme.get_default_port_for_scheme("postgres") == 5432
        assert Scheme.get_default_port_for_scheme("unknown") is None
        assert Scheme.get_default_port_for_scheme(None) is None

    def test_equality(self):
        """Schemes compare by name, case-insensitively against strings."""
        assert Scheme("http") == Scheme("HTTP")
        assert Scheme("http") == "HTTP"
        assert Scheme("http") != Scheme("https")


class TestPort:
    """Test Port."""

    def test_effective_default(self):
        """Without an explicit port the scheme default applies."""
        assert Port(None, Scheme("https")).get_effective() == 443

    def test_effective_explicit(self):
        """An explicit port wins over the default."""
        assert Port(8080, Scheme("https")).get_effective() == 8080

    def test_effective_none(self):
        """Unknown schemes have no default port."""
        assert Port(None, Scheme("mailto")).get_effective() is None
        assert Port().get_effective() is None

    def test_is_default(self):
        """is_default needs an explicit port equal to the default."""
        assert Port(443, Scheme("https")).is_default()
        assert not Port(None, Scheme("https")).is_default()
        assert not Port(80, Scheme("https")).is_default()

    def test_follows_scheme(self):
        """The port reads the scheme by reference."""
        scheme = Scheme("http")
        port = Port(None, scheme)
        scheme.set("https")
        assert port.get_effective() == 443

    def test_string_input(self):
        """Numeric strings are accepted."""
        assert Port("8080").get() == 8080

    @pytest.mark.parametrize("value", [-1, 65536, "abc", 1.5j, True])
    def test_invalid(self, value):
        """Ports outside 0-65535 or non-numeric are rejected."""
        with pytest.raises(ValueError):
            Port(value)

    def test_str(self):
        """str renders ':port' or ''."""
        assert str(Port(8080)) == ":8080"
        assert str(Port()) == ""
        assert str(Port(0)) == ":0"

    def test_clear(self):
        """clear removes the explicit port."""
        port = Port(8080)
        assert port.clear().is_empty()

    def test_to_dict(self):
        """to_dict reports explicit and effective ports."""
        assert Port(None, Scheme("http")).to_dict() == {"address": None, "effective": 80}
        assert Port(81, Scheme("http")).to_dict() == {"address": 81, "effective": 81}
