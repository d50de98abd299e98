import pytest

from nuri import parse
from nuri.errors import InvalidComponent, InvalidPort
from nuri.normalizer import (
    DEFAULT_PORTS,
    default_port_for,
    normalize_encoded,
    normalize_host,
    normalize_port,
    normalize_scheme,
    register_default_port,
)


def test_default_port_table():
    assert default_port_for("http") == 80
    assert default_port_for("HTTPS") == 443
    assert default_port_for("foo") is None
    assert default_port_for("") is None


@pytest.mark.parametrize(
    "scheme, port, expected",
    [
        ("http", 80, None),
        ("https", 443, None),
        ("http", 8080, 8080),
        ("https", 80, 80),
        ("foo", 80, 80),
        ("", 80, 80),
        ("http", None, None),
    ],
)
def test_normalize_port(scheme, port, expected):
    assert normalize_port(scheme, port) == expected


def test_normalize_scheme():
    assert normalize_scheme("HtTp") == "http"


@pytest.mark.parametrize(
    "host, expected",
    [
        ("Example.COM", "example.com"),
        ("EX%2dAMPLE", "ex-ample"),
        ("a%2fb", "a%2Fb"),
        ("[FE80::1]", "[fe80::1]"),
    ],
)
def test_normalize_host(host, expected):
    assert normalize_host(host) == expected


def test_register_default_port(default_ports):
    register_default_port("Gopher", 70)
    assert default_port_for("gopher") == 70
    assert default_ports["gopher"] == 70
    assert parse("gopher://h:70/").port is None

    register_default_port("gopher", None)
    assert default_port_for("gopher") is None
    assert parse("gopher://h:70/").port == 70


def test_register_default_port_rejects_bad_input(default_ports):
    with pytest.raises(InvalidComponent):
        register_default_port("", 1)
    with pytest.raises(InvalidComponent):
        register_default_port("1x", 1)
    with pytest.raises(InvalidPort):
        register_default_port("x", 0)


def test_default_ports_is_read_only():
    with pytest.raises(TypeError):
        DEFAULT_PORTS["x"] = 1


def test_normalize_encoded():
    assert normalize_encoded("path", "a b") == "a%20b"
    assert normalize_encoded("query", "%7e") == "~"
    assert normalize_encoded("fragment", "a%20b", strict=True) == "a%20b"
    with pytest.raises(InvalidComponent):
        normalize_encoded("path", "a b", strict=True)
    with pytest.raises(InvalidComponent):
        normalize_encoded("userinfo", 1)
