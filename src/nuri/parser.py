"""RFC 3986 URI-reference parser.

The input is scanned once, left to right. Each component ends at the first
of a fixed set of delimiters, so no backtracking is needed:

    scheme ":"  "//" authority  path  "?" query  "#" fragment
"""

import logging
import re

from typing import NamedTuple

from .abnf import PORT_PAT, SCHEME_PAT
from .errors import InvalidComponent, InvalidPort, UriParseError
from .normalizer import normalize_encoded, normalize_host, normalize_port, normalize_scheme
from .uri import Uri
from .validators import validate_host, validate_port

log = logging.getLogger(__name__)


class SplitResult(NamedTuple):
    """Raw components of a URI-reference. None means the delimiter was absent."""

    scheme: str | None
    userinfo: str | None
    host: str | None
    port: str | None
    path: str
    query: str | None
    fragment: str | None


def _index(data: str, delimiters: str, start: int = 0) -> int:
    """Position of the first delimiter at or after start, or len(data)."""
    for i in range(start, len(data)):
        if data[i] in delimiters:
            return i
    return len(data)


def _split_hostport(hostport: str) -> tuple[str, str | None]:
    if hostport.startswith("["):
        # the port can only follow the closing bracket
        close: int = hostport.find("]")
        if close == -1 or (close + 1 < len(hostport) and hostport[close + 1] != ":"):
            return hostport, None
        rest: str = hostport[close + 1 :]
        return hostport[: close + 1], rest[1:] if len(rest) > 0 else None
    host, colon, port = hostport.rpartition(":")
    if len(colon) == 0:
        return hostport, None
    return host, port


def _scan(data: str) -> tuple[SplitResult, dict[str, int]]:
    offsets: dict[str, int] = {}
    pos: int = 0

    scheme: str | None = None
    end: int = _index(data, ":/?#")
    if end < len(data) and data[end] == ":" and SCHEME_PAT.fullmatch(data[:end]) is not None:
        scheme = data[:end]
        offsets["scheme"] = 0
        pos = end + 1

    userinfo: str | None = None
    host: str | None = None
    port: str | None = None
    if data.startswith("//", pos):
        pos += 2
        end = _index(data, "/?#", pos)
        userinfo, at, hostport = data[pos:end].rpartition("@")
        offsets["userinfo"] = pos
        if len(at) == 0:
            userinfo = None
        else:
            pos += len(userinfo) + 1
        host, port = _split_hostport(hostport)
        offsets["host"] = pos
        offsets["port"] = pos + len(host) + 1
        pos = end

    end = _index(data, "?#", pos)
    path: str = data[pos:end]
    offsets["path"] = pos
    pos = end

    query: str | None = None
    if pos < len(data) and data[pos] == "?":
        end = _index(data, "#", pos + 1)
        query = data[pos + 1 : end]
        offsets["query"] = pos + 1
        pos = end

    fragment: str | None = None
    if pos < len(data) and data[pos] == "#":
        fragment = data[pos + 1 :]
        offsets["fragment"] = pos + 1

    return SplitResult(scheme, userinfo, host, port, path, query, fragment), offsets


def split(data: str) -> SplitResult:
    """Split a URI-reference into its raw components without validating them."""
    return _scan(data)[0]


def _parse_port(raw: str | None) -> int | None:
    if raw is None or len(raw) == 0:
        return None
    if PORT_PAT.fullmatch(raw) is None:
        raise InvalidComponent("port", raw, "must be decimal digits")
    return validate_port(int(raw, base=10))


def _first_segment_has_colon(parts: SplitResult) -> bool:
    return parts.scheme is None and parts.host is None and ":" in parts.path.partition("/")[0]


def parse(data: str, strict: bool = True) -> Uri:
    """Parse a URI-reference (RFC 3986 section 4.1) into a Uri.

    The empty string is a valid relative reference with every component
    empty. With strict=False, tabs and newlines are dropped and characters
    that are not allowed in the userinfo, path, query or fragment are
    percent-encoded instead of rejected; scheme, host and port must still
    be valid.
    """
    if not isinstance(data, str):
        raise TypeError(f"expected str, got {type(data).__name__}")
    if not strict:
        data = re.sub(r"[\r\n\t]", "", data)

    parts, offsets = _scan(data)
    try:
        if _first_segment_has_colon(parts):
            raise InvalidComponent("path", parts.path, "the first segment of a relative path cannot contain ':'")
        scheme: str = normalize_scheme(parts.scheme or "")
        userinfo: str = normalize_encoded("userinfo", parts.userinfo or "", strict)
        host: str = ""
        if parts.host is not None:
            host = normalize_host(validate_host(parts.host))
        port: int | None = normalize_port(scheme, _parse_port(parts.port))
        uri: Uri = Uri(
            scheme=scheme,
            userinfo=userinfo,
            host=host,
            port=port,
            path=normalize_encoded("path", parts.path, strict),
            query=normalize_encoded("query", parts.query or "", strict),
            fragment=normalize_encoded("fragment", parts.fragment or "", strict),
        )
    except (InvalidComponent, InvalidPort) as e:
        err: UriParseError = UriParseError(e.component, data, str(e), offsets.get(e.component, 0))
        log.debug("parse failed: %s", err)
        raise err from e
    return uri


def parse_uri(data: str) -> Uri:
    """Like parse(), but the reference must be absolute, i.e. have a scheme (RFC 3986 section 3)."""
    uri: Uri = parse(data)
    if len(uri.scheme) == 0:
        raise UriParseError("scheme", data, "a URI needs a scheme", 0)
    return uri


def parse_relative_ref(data: str) -> Uri:
    """Like parse(), but the reference must not have a scheme (RFC 3986 section 4.2)."""
    uri: Uri = parse(data)
    if len(uri.scheme) > 0:
        raise UriParseError("scheme", data, "a relative reference cannot have a scheme", 0)
    return uri
