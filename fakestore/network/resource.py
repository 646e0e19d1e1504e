# fakestore/network/resource.py

"""Request descriptors: the HTTP method variants and ``Resource``."""

from dataclasses import dataclass, field

QueryItem = tuple[str, str | None]


@dataclass(frozen=True)
class Get:
    """GET with ordered query items; a ``None`` value sends the bare name."""

    query_items: tuple[QueryItem, ...] = ()

    @property
    def name(self) -> str:
        return "GET"


@dataclass(frozen=True)
class Post:
    """POST carrying raw body bytes."""

    body: bytes | None = None

    @property
    def name(self) -> str:
        return "POST"


@dataclass(frozen=True)
class Put:
    """PUT carrying raw body bytes."""

    body: bytes | None = None

    @property
    def name(self) -> str:
        return "PUT"


@dataclass(frozen=True)
class Delete:
    """DELETE, no payload."""

    @property
    def name(self) -> str:
        return "DELETE"


HttpMethod = Get | Post | Put | Delete


@dataclass(frozen=True)
class Resource:
    """Target URL plus the method (and payload) to call it with."""

    url: str
    method: HttpMethod = field(default_factory=Get)
