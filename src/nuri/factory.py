import logging

from typing import Self

from .parser import parse
from .uri import Uri

log = logging.getLogger(__name__)


class UriFactory:
    """Creates Uri instances from strings.

    A lenient factory (strict=False) percent-encodes characters that are
    not allowed in the userinfo, path, query or fragment instead of raising.
    """

    def __init__(self: Self, strict: bool = True) -> None:
        self.strict: bool = strict

    def create_uri(self: Self, uri: str = "") -> Uri:
        """Raises UriParseError if uri cannot be parsed."""
        log.debug("creating uri from %r", uri)
        return parse(uri, strict=self.strict)


_default_factory: UriFactory = UriFactory()


def create_uri(uri: str = "") -> Uri:
    return _default_factory.create_uri(uri)
