import dataclasses

from typing import Self

from . import serializer
from .abnf import IPV6ADDRESS_PAT
from .codec import USER_SAFE, USERINFO_SAFE, canonicalize
from .normalizer import normalize_encoded, normalize_host, normalize_port, normalize_scheme
from .validators import require_str, validate_host, validate_port, validate_scheme


@dataclasses.dataclass(frozen=True)
class Uri:
    """An immutable RFC 3986 URI-reference.

    Build one with nuri.parse(). Every with_* method returns a new Uri with
    one component replaced, after validating only that component; the
    instance it was called on never changes.

    Keyword construction (e.g. Uri(host="example.com", path="foo")) is not
    validated. str() still produces a valid reference from such an instance.
    """

    scheme: str = ""
    userinfo: str = ""
    host: str = ""
    port: int | None = None
    path: str = ""
    query: str = ""
    fragment: str = ""

    def __str__(self: Self) -> str:
        return self.serialize()

    def serialize(self: Self) -> str:
        return serializer.serialize(
            scheme=self.scheme,
            userinfo=self.userinfo,
            host=self.host,
            port=self.port,
            path=self.path,
            query=self.query,
            fragment=self.fragment,
        )

    @property
    def authority(self: Self) -> str:
        """[userinfo@]host[:port], or "" when there is no authority"""
        return serializer.format_authority(self.userinfo, self.host, normalize_port(self.scheme, self.port))

    @property
    def user(self: Self) -> str:
        return self.userinfo.partition(":")[0]

    @property
    def password(self: Self) -> str | None:
        _, colon, password = self.userinfo.partition(":")
        if len(colon) == 0:
            return None
        return password

    @property
    def hostname(self: Self) -> str:
        """The host without the brackets of an IP literal"""
        if self.host.startswith("[") and self.host.endswith("]"):
            return self.host[1:-1]
        return self.host

    def with_scheme(self: Self, scheme: str) -> Self:
        """An empty scheme removes the scheme. A port that is the new scheme's default is dropped."""
        scheme = normalize_scheme(validate_scheme(scheme))
        return dataclasses.replace(self, scheme=scheme, port=normalize_port(scheme, self.port))

    def with_host(self: Self, host: str) -> Self:
        """An empty host removes the host. A bare IPv6 address is put in brackets."""
        host = require_str("host", host)
        if IPV6ADDRESS_PAT.fullmatch(host) is not None:
            host = f"[{host}]"
        return dataclasses.replace(self, host=normalize_host(validate_host(host)))

    def with_port(self: Self, port: int | None) -> Self:
        return dataclasses.replace(self, port=normalize_port(self.scheme, validate_port(port)))

    def with_path(self: Self, path: str) -> Self:
        return dataclasses.replace(self, path=normalize_encoded("path", path))

    def with_query(self: Self, query: str) -> Self:
        return dataclasses.replace(self, query=normalize_encoded("query", query))

    def with_fragment(self: Self, fragment: str) -> Self:
        return dataclasses.replace(self, fragment=normalize_encoded("fragment", fragment))

    def with_userinfo(self: Self, user: str, password: str | None = None) -> Self:
        """An empty user removes the user information, password included.

        A ":" in user is percent-encoded so it cannot be mistaken for the
        password separator. An empty password is the same as no password.
        """
        user = require_str("user", user)
        if len(user) == 0:
            return dataclasses.replace(self, userinfo="")
        userinfo: str = canonicalize(user, USER_SAFE)
        if password is not None and len(require_str("password", password)) > 0:
            userinfo += f":{canonicalize(password, USERINFO_SAFE)}"
        return dataclasses.replace(self, userinfo=userinfo)
