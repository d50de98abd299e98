"""Percent-encoding (RFC 3986 section 2.1).

Encoding is idempotent: valid "%XX" triplets already in the input are kept,
so a component can be encoded any number of times without turning "%41"
into "%2541". Decoding is lenient: malformed escapes pass through untouched.
"""

import re
import string

from collections.abc import Collection
from urllib.parse import unquote_to_bytes

from .abnf import PCT_ENCODED_PAT

UNRESERVED: frozenset[str] = frozenset(string.ascii_letters + string.digits + "-._~")
SUB_DELIMS: frozenset[str] = frozenset("!$&'()*+,;=")

# Characters that may appear literally in each component.
USERINFO_SAFE: frozenset[str] = UNRESERVED | SUB_DELIMS | {":"}
USER_SAFE: frozenset[str] = UNRESERVED | SUB_DELIMS
REG_NAME_SAFE: frozenset[str] = UNRESERVED | SUB_DELIMS
PCHAR_SAFE: frozenset[str] = UNRESERVED | SUB_DELIMS | {":", "@"}
PATH_SAFE: frozenset[str] = PCHAR_SAFE | {"/"}
QUERY_SAFE: frozenset[str] = PATH_SAFE | {"?"}
FRAGMENT_SAFE: frozenset[str] = QUERY_SAFE

_HEXDIGITS: frozenset[str] = frozenset(string.hexdigits)
_LOWER_TRIPLET_PAT: re.Pattern[str] = re.compile(r"%(?:[a-f][0-9A-Fa-f]|[0-9A-Fa-f][a-f])")


def _is_triplet(data: str, i: int) -> bool:
    return i + 2 < len(data) and data[i + 1] in _HEXDIGITS and data[i + 2] in _HEXDIGITS


def _escape(char: str) -> str:
    return "".join(f"%{octet:02X}" for octet in char.encode("utf-8", "surrogatepass"))


def encode(raw: str, allowed: Collection[str]) -> str:
    """Percent-encode every character of raw that is not in allowed.

    Characters outside ASCII are encoded as their UTF-8 octets. A "%" is
    kept only when it starts a valid triplet; the triplet's hex digits are
    uppercased. A lone "%" is always encoded, whatever allowed says.
    """
    result: list[str] = []
    i: int = 0
    while i < len(raw):
        char: str = raw[i]
        if char == "%":
            if _is_triplet(raw, i):
                result.append(raw[i : i + 3].upper())
                i += 3
                continue
            result.append("%25")
        elif char in allowed:
            result.append(char)
        else:
            result.append(_escape(char))
        i += 1
    return "".join(result)


def decode_to_bytes(encoded: str) -> bytes:
    """Replace each valid triplet with its octet; anything else is kept as is."""
    return unquote_to_bytes(encoded)


def decode(encoded: str, encoding: str = "utf-8", errors: str = "replace") -> str:
    return decode_to_bytes(encoded).decode(encoding, errors)


def uppercase_triplets(data: str) -> str:
    """Returns data with every percent-encoded triplet in capital letters.
    e.g. uppercase_triplets("example%2ecom") == "example%2Ecom"
    """
    return _LOWER_TRIPLET_PAT.sub(lambda m: m[0].upper(), data)


def _decode_unreserved(m: re.Match[str]) -> str:
    char: str = chr(int(m[0][1:], 16))
    return char if char in UNRESERVED else m[0]


def decode_unreserved(data: str) -> str:
    """Decode triplets that stand for unreserved characters (RFC 3986 section 6.2.2.2)."""
    return PCT_ENCODED_PAT.sub(_decode_unreserved, data)


def canonicalize(value: str, allowed: Collection[str]) -> str:
    """encode() followed by decode_unreserved(); the canonical stored form of a component."""
    return decode_unreserved(encode(value, allowed))
