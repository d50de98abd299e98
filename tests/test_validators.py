import pytest

from nuri.errors import InvalidComponent, InvalidPort, UriException
from nuri.validators import (
    validate_fragment,
    validate_host,
    validate_path,
    validate_port,
    validate_query,
    validate_scheme,
    validate_userinfo,
)


@pytest.mark.parametrize("scheme", ["", "http", "HTTP", "svn+ssh", "a.b-c", "h2"])
def test_valid_scheme(scheme):
    assert validate_scheme(scheme) == scheme


@pytest.mark.parametrize("scheme", ["1http", "ht tp", "-a", "http:", "+"])
def test_invalid_scheme(scheme):
    with pytest.raises(InvalidComponent) as e:
        validate_scheme(scheme)
    assert e.value.component == "scheme"
    assert e.value.value == scheme


@pytest.mark.parametrize(
    "host",
    [
        "",
        "example.com",
        "Example.COM",
        "127.0.0.1",
        "[::1]",
        "[2001:db8::7]",
        "[::ffff:192.0.2.1]",
        "[fe80::1%25eth0]",
        "[v1.fe80::a+en1]",
        "ex%41mple",
        "a!b",
    ],
)
def test_valid_host(host):
    assert validate_host(host) == host


@pytest.mark.parametrize("host", ["[::1", "::1]", "exa mple", "[not-ip]", "a/b", "host:80", "::1", "[1:2:3:4:5:6:7:8:9]"])
def test_invalid_host(host):
    with pytest.raises(InvalidComponent) as e:
        validate_host(host)
    assert e.value.component == "host"


@pytest.mark.parametrize("port", [None, 1, 80, 65535])
def test_valid_port(port):
    assert validate_port(port) == port


@pytest.mark.parametrize("port", [0, 65536, -1, True, "80", 8.0])
def test_invalid_port(port):
    with pytest.raises(InvalidPort) as e:
        validate_port(port)
    assert e.value.value == port
    assert e.value.component == "port"
    assert isinstance(e.value, UriException)
    assert isinstance(e.value, ValueError)


@pytest.mark.parametrize("path", ["", "/", "/a/b", "a:b", "/a@b;c=d", "%20", "foo", "//double"])
def test_valid_path(path):
    assert validate_path(path) == path


@pytest.mark.parametrize("path", ["a b", "a?b", "a#b", "%zz", "a[b]"])
def test_invalid_path(path):
    with pytest.raises(InvalidComponent, match="invalid path"):
        validate_path(path)


@pytest.mark.parametrize("validate", [validate_query, validate_fragment])
def test_query_and_fragment(validate):
    assert validate("a=b&c=d") == "a=b&c=d"
    assert validate("/?x:y@z") == "/?x:y@z"
    assert validate("") == ""
    for bad in ("a#b", "a b", "%g0"):
        with pytest.raises(InvalidComponent):
            validate(bad)


def test_userinfo():
    assert validate_userinfo("user:pass") == "user:pass"
    assert validate_userinfo("us%40er") == "us%40er"
    for bad in ("a@b", "a/b"):
        with pytest.raises(InvalidComponent):
            validate_userinfo(bad)


def test_non_string_is_rejected():
    with pytest.raises(InvalidComponent, match="expected str"):
        validate_path(5)
    with pytest.raises(InvalidComponent):
        validate_scheme(None)
