from dataclasses import dataclass


class UriException(ValueError):
    """Base class for all nuri exceptions."""


@dataclass(slots=True)
class UriParseError(UriException):
    """Raised when a string is not a valid URI-reference."""

    component: str
    raw_input: str
    reason: str
    position: int = 0

    def __str__(self) -> str:
        return f"invalid {self.component} at position {self.position} in {self.raw_input!r}: {self.reason}"


@dataclass(slots=True)
class InvalidComponent(UriException):
    """Raised when a value does not match the grammar of its component."""

    component: str
    value: object
    reason: str

    def __str__(self) -> str:
        return f"invalid {self.component} {self.value!r}: {self.reason}"


@dataclass(slots=True)
class InvalidPort(UriException):
    """Raised for ports outside of 1-65535."""

    value: object

    @property
    def component(self) -> str:
        return "port"

    def __str__(self) -> str:
        return f"invalid port {self.value!r}: must be an integer in 1-65535"
