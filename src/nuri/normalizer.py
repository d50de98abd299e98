"""Case and default-port normalization (RFC 3986 sections 6.2.2.1 and 6.2.3)."""

import logging

from collections.abc import Callable
from types import MappingProxyType

from .codec import (
    FRAGMENT_SAFE,
    PATH_SAFE,
    QUERY_SAFE,
    USERINFO_SAFE,
    canonicalize,
    decode_unreserved,
    uppercase_triplets,
)
from .errors import InvalidComponent
from .validators import (
    require_str,
    validate_fragment,
    validate_path,
    validate_port,
    validate_query,
    validate_scheme,
    validate_userinfo,
)

log = logging.getLogger(__name__)

_default_ports: dict[str, int] = {
    "ftp": 21,
    "http": 80,
    "https": 443,
    "ws": 80,
    "wss": 443,
}

# Read-only view; use register_default_port() to extend it.
DEFAULT_PORTS: MappingProxyType[str, int] = MappingProxyType(_default_ports)


def register_default_port(scheme: str, port: int | None) -> None:
    """Make port the well-known port of scheme, replacing any previous entry.

    Passing None removes the entry.
    """
    scheme = normalize_scheme(validate_scheme(scheme))
    if len(scheme) == 0:
        raise InvalidComponent("scheme", scheme, "a default port needs a scheme")
    port = validate_port(port)
    if port is None:
        _default_ports.pop(scheme, None)
        log.debug("removed default port for %s", scheme)
        return
    _default_ports[scheme] = port
    log.debug("registered default port %d for %s", port, scheme)


def default_port_for(scheme: str) -> int | None:
    """Unknown schemes have no default port."""
    return _default_ports.get(scheme.lower())


def normalize_scheme(scheme: str) -> str:
    return scheme.lower()


def normalize_host(host: str) -> str:
    """Lowercase the host, decoding unreserved octets and keeping other percent-encodings in capitals."""
    return uppercase_triplets(decode_unreserved(host).lower())


def normalize_port(scheme: str, port: int | None) -> int | None:
    """Returns None when port is the default port of scheme."""
    if port is not None and port == default_port_for(scheme):
        return None
    return port


_ENCODED_COMPONENTS: dict[str, tuple[Callable[[object], str], frozenset[str]]] = {
    "userinfo": (validate_userinfo, USERINFO_SAFE),
    "path": (validate_path, PATH_SAFE),
    "query": (validate_query, QUERY_SAFE),
    "fragment": (validate_fragment, FRAGMENT_SAFE),
}


def normalize_encoded(component: str, value: object, strict: bool = False) -> str:
    """Canonical percent-encoded form of a userinfo, path, query or fragment.

    With strict, value must already match the grammar of the component.
    Otherwise the characters the component does not allow are encoded
    first, so both encoded and decoded input is accepted.
    """
    validate, allowed = _ENCODED_COMPONENTS[component]
    if strict:
        return canonicalize(validate(value), allowed)
    return validate(canonicalize(require_str(component, value), allowed))
