"""nuri
Immutable RFC 3986 URI-references
Parse, validate, normalize and serialize URIs; change them one component at a time.
"""

__version__ = "0.1"

from .codec import canonicalize, decode, decode_to_bytes, encode
from .errors import InvalidComponent, InvalidPort, UriException, UriParseError
from .factory import UriFactory, create_uri
from .normalizer import DEFAULT_PORTS, default_port_for, register_default_port
from .parser import SplitResult, parse, parse_relative_ref, parse_uri, split
from .serializer import serialize
from .uri import Uri

__all__ = [
    "DEFAULT_PORTS",
    "InvalidComponent",
    "InvalidPort",
    "SplitResult",
    "Uri",
    "UriException",
    "UriFactory",
    "UriParseError",
    "canonicalize",
    "create_uri",
    "decode",
    "decode_to_bytes",
    "default_port_for",
    "encode",
    "parse",
    "parse_relative_ref",
    "parse_uri",
    "register_default_port",
    "serialize",
    "split",
]
