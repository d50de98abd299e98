import pytest

from nuri.codec import (
    PATH_SAFE,
    QUERY_SAFE,
    REG_NAME_SAFE,
    USER_SAFE,
    canonicalize,
    decode,
    decode_to_bytes,
    decode_unreserved,
    encode,
    uppercase_triplets,
)


@pytest.mark.parametrize(
    "raw, allowed, expected",
    [
        ("a b", PATH_SAFE, "a%20b"),
        ("100%", QUERY_SAFE, "100%25"),
        ("%7e", PATH_SAFE, "%7E"),
        ("a%41", PATH_SAFE, "a%41"),
        ("ü", PATH_SAFE, "%C3%BC"),
        ("/a?b#c", PATH_SAFE, "/a%3Fb%23c"),
        ("/a?b#c", QUERY_SAFE, "/a?b%23c"),
        ("a:b@c", USER_SAFE, "a%3Ab%40c"),
        ("a/b", REG_NAME_SAFE, "a%2Fb"),
        ("%zz", PATH_SAFE, "%25zz"),
        ("%2", PATH_SAFE, "%252"),
        ("", PATH_SAFE, ""),
    ],
)
def test_encode(raw, allowed, expected):
    assert encode(raw, allowed) == expected


@pytest.mark.parametrize(
    "raw",
    ["a b", "%", "%2", "%zz", "%41", "ü/?#", "already%20encoded", "50%25 off", "[::1]"],
)
def test_encode_never_double_encodes(raw):
    once = encode(raw, PATH_SAFE)
    assert encode(once, PATH_SAFE) == once
    assert "%2520" not in once


def test_encode_ignores_percent_in_allowed():
    assert encode("%", {"%"}) == "%25"


@pytest.mark.parametrize(
    "encoded, expected",
    [
        ("a%20b", "a b"),
        ("%C3%BC", "ü"),
        ("100%", "100%"),
        ("%zz", "%zz"),
        ("%2", "%2"),
        ("%FF", "\ufffd"),
        ("plain", "plain"),
    ],
)
def test_decode_is_lenient(encoded, expected):
    assert decode(encoded) == expected


def test_decode_to_bytes():
    assert decode_to_bytes("%FFa%2") == b"\xffa%2"


def test_uppercase_triplets():
    assert uppercase_triplets("example%2ecom") == "example%2Ecom"
    assert uppercase_triplets("%aF%Fa%11") == "%AF%FA%11"


def test_decode_unreserved():
    assert decode_unreserved("%7Euser%2F%41") == "~user%2FA"


@pytest.mark.parametrize(
    "value, allowed, expected",
    [
        ("%7e%2f", PATH_SAFE, "~%2F"),
        ("%41%42c", QUERY_SAFE, "ABc"),
        ("a b%7E", PATH_SAFE, "a%20b~"),
    ],
)
def test_canonicalize(value, allowed, expected):
    assert canonicalize(value, allowed) == expected
    assert canonicalize(expected, allowed) == expected
