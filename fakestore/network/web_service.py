# fakestore/network/web_service.py

"""Generic request executor: ``Resource`` in, decoded value out."""

import json
import logging
from collections.abc import Callable
from typing import Any, TypeVar
from urllib.parse import quote, urlsplit, urlunsplit

from curl_cffi import requests as curl_requests
from curl_cffi.requests.exceptions import RequestException

from fakestore.config.settings import Settings
from fakestore.network.errors import (
    BadUrl,
    DecodingError,
    InvalidResponse,
    UnknownError,
)
from fakestore.network.resource import (
    Delete,
    Get,
    Post,
    Put,
    QueryItem,
    Resource,
)

T = TypeVar("T")

logger = logging.getLogger("fakestore.network")


class PreparedRequest:
    """Method, final URL and body ready to hand to the session."""

    def __init__(
        self, method: str, url: str, body: bytes | None = None
    ) -> None:
        self.method = method
        self.url = url
        self.body = body

    def __repr__(self) -> str:
        return f"PreparedRequest({self.method} {self.url})"


class WebService:
    """Sends a single request per ``load`` call and decodes the reply.

    Every call opens its own ``AsyncSession``; nothing is shared or
    pooled between calls.
    """

    def __init__(self) -> None:
        self.settings = Settings()

    async def load(
        self, resource: Resource, decode: Callable[[Any], T]
    ) -> T:
        """Execute *resource* and return ``decode(parsed_json_body)``.

        Raises:
            BadUrl: a GET URL could not be built.
            UnknownError: the request could not be created or sent.
            InvalidResponse: the status code was not exactly 200.
            DecodingError: the body was not JSON of the expected shape.
        """
        request = self._build_request(resource)
        logger.debug("Sending %r", request)

        try:
            async with curl_requests.AsyncSession(
                headers=self.settings.DEFAULT_HEADERS,
                impersonate=self.settings.IMPERSONATE_BROWSER,
                timeout=self.settings.REQUEST_TIMEOUT,
            ) as session:
                resp = await session.request(
                    request.method,
                    request.url,
                    data=request.body,
                )
        except RequestException as exc:
            logger.warning(
                "%s %s failed: %s", request.method, request.url, exc
            )
            raise UnknownError(str(exc)) from exc

        body: bytes = resp.content
        if resp.status_code != 200:
            logger.warning(
                "%s %s returned HTTP %d",
                request.method,
                request.url,
                resp.status_code,
            )
            message: str | None
            try:
                message = body.decode("utf-8")
            except UnicodeDecodeError:
                message = None
            raise InvalidResponse(message)

        try:
            return decode(json.loads(body, parse_constant=_reject_constant))
        except (
            ValueError,
            TypeError,
            KeyError,
            OverflowError,
            RecursionError,
        ) as exc:
            # Only the generic message reaches callers
            logger.debug(
                "Decoding %s response failed: %s", request.url, exc
            )
            raise DecodingError() from None

    def _build_request(self, resource: Resource) -> PreparedRequest:
        """Translate the method variant into a concrete request."""
        method = resource.method
        if isinstance(method, Get):
            return PreparedRequest(
                method.name,
                build_query_url(resource.url, method.query_items),
            )
        if isinstance(method, (Post, Put)):
            return PreparedRequest(method.name, resource.url, method.body)
        if isinstance(method, Delete):
            return PreparedRequest(method.name, resource.url)
        raise UnknownError("Could not create network request")


def _reject_constant(token: str) -> Any:
    """Refuse the non-standard ``NaN`` and ``Infinity`` JSON tokens."""
    raise ValueError(f"non-standard JSON constant {token!r}")


def build_query_url(url: str, query_items: tuple[QueryItem, ...]) -> str:
    """Set the query string of *url* to *query_items*, in order.

    Any query already on *url* is replaced. With no items the URL is
    returned unchanged.

    Raises ``BadUrl`` if *url* is not an absolute URL.
    """
    try:
        parts = urlsplit(url)
    except ValueError:
        raise BadUrl() from None
    if not parts.scheme or not parts.netloc:
        raise BadUrl()
    if not query_items:
        return url

    encoded: list[str] = []
    for name, value in query_items:
        if value is None:
            encoded.append(quote(name, safe=""))
        else:
            encoded.append(f"{quote(name, safe='')}={quote(value, safe='')}")
    return urlunsplit(parts._replace(query="&".join(encoded)))
