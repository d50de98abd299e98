"""Grammar checks for individual URI components.

Every validator returns the value it was given when it is valid and raises
InvalidComponent (or InvalidPort) otherwise. Validators never rewrite their
input; encoding and case normalization live in nuri.codec and nuri.normalizer.
"""

import re

from . import abnf
from .errors import InvalidComponent, InvalidPort

MIN_PORT: int = 1
MAX_PORT: int = 65535


def require_str(component: str, value: object) -> str:
    if not isinstance(value, str):
        raise InvalidComponent(component, value, f"expected str, got {type(value).__name__}")
    return value


def _check(component: str, value: object, pattern: re.Pattern[str], reason: str) -> str:
    value = require_str(component, value)
    if pattern.fullmatch(value) is None:
        raise InvalidComponent(component, value, reason)
    return value


def validate_scheme(scheme: object) -> str:
    """The empty string is allowed and means "no scheme"."""
    scheme = require_str("scheme", scheme)
    if len(scheme) == 0:
        return scheme
    return _check(
        "scheme",
        scheme,
        abnf.SCHEME_PAT,
        "must start with a letter followed by letters, digits, '+', '-' or '.'",
    )


def validate_host(host: object) -> str:
    """Accepts an IP-literal, an IPv4 address or a reg-name. Nothing is resolved."""
    host = require_str("host", host)
    if host.startswith("[") or host.endswith("]"):
        return _check("host", host, abnf.IP_LITERAL_PAT, "not a valid IP literal")
    return _check("host", host, abnf.HOST_PAT, "not a valid IPv4 address or registered name")


def validate_port(port: object) -> int | None:
    if port is None:
        return None
    # bool is an int subclass but never a port
    if isinstance(port, bool) or not isinstance(port, int):
        raise InvalidPort(port)
    if not MIN_PORT <= port <= MAX_PORT:
        raise InvalidPort(port)
    return port


def validate_path(path: object) -> str:
    # A rootless path next to an authority is fixed by the serializer, not rejected here.
    return _check("path", path, abnf.PATH_PAT, "segments may only contain pchars")


def validate_query(query: object) -> str:
    return _check("query", query, abnf.QUERY_PAT, "may only contain pchars, '/' and '?'")


def validate_fragment(fragment: object) -> str:
    return _check("fragment", fragment, abnf.FRAGMENT_PAT, "may only contain pchars, '/' and '?'")


def validate_userinfo(userinfo: object) -> str:
    return _check(
        "userinfo",
        userinfo,
        abnf.USERINFO_PAT,
        "may only contain unreserved characters, sub-delims, ':' and percent-encodings",
    )
