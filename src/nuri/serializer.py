"""Component recomposition (RFC 3986 section 5.3)."""

from .abnf import IP_LITERAL_PAT
from .codec import FRAGMENT_SAFE, PATH_SAFE, QUERY_SAFE, REG_NAME_SAFE, USERINFO_SAFE, canonicalize
from .normalizer import normalize_host, normalize_port, normalize_scheme
from .validators import validate_port, validate_scheme


def has_authority(userinfo: str, host: str, port: int | None) -> bool:
    """Any one of the three parts is enough to emit "//"."""
    return len(host) > 0 or len(userinfo) > 0 or port is not None


def format_authority(userinfo: str, host: str, port: int | None) -> str:
    """userinfo@host:port, with absent parts and their delimiters left out"""
    result: str = ""
    if len(userinfo) > 0:
        result += f"{userinfo}@"
    result += host
    if port is not None:
        result += f":{port}"
    return result


def format_path(path: str, scheme: str, authority: bool) -> str:
    """Adjust path so that the reference it ends up in is read back the same way.

    The adjustments only apply to the output; stored paths are never rewritten.
    """
    if authority:
        # path-abempty: a rootless path would run into the host
        if len(path) > 0 and not path.startswith("/"):
            return f"/{path}"
        return path
    if path.startswith("//"):
        # would be read as an authority
        return f"/{path.lstrip('/')}"
    if len(scheme) == 0 and ":" in path.partition("/")[0]:
        # would be read as a scheme (RFC 3986 section 4.2)
        return f"./{path}"
    return path


def _clean_host(host: str) -> str:
    if IP_LITERAL_PAT.fullmatch(host) is None:
        host = canonicalize(host, REG_NAME_SAFE)
    return normalize_host(host)


def serialize(
    scheme: str = "",
    userinfo: str = "",
    host: str = "",
    port: int | None = None,
    path: str = "",
    query: str = "",
    fragment: str = "",
) -> str:
    """Build a URI-reference from its components.

    The components do not have to come from the parser: anything that would
    make the result unparseable is encoded or adjusted, and a scheme or port
    that cannot be repaired raises InvalidComponent or InvalidPort.
    """
    scheme = normalize_scheme(validate_scheme(scheme))
    port = normalize_port(scheme, validate_port(port))
    userinfo = canonicalize(userinfo, USERINFO_SAFE)
    host = _clean_host(host)
    authority: bool = has_authority(userinfo, host, port)

    result: str = ""
    if len(scheme) > 0:
        result += f"{scheme}:"
    if authority:
        result += f"//{format_authority(userinfo, host, port)}"
    result += format_path(canonicalize(path, PATH_SAFE), scheme, authority)
    if len(query) > 0:
        result += f"?{canonicalize(query, QUERY_SAFE)}"
    if len(fragment) > 0:
        result += f"#{canonicalize(fragment, FRAGMENT_SAFE)}"
    return result
