# fakestore/network/errors.py

"""Errors raised by the request executor."""


class NetworkError(Exception):
    """Base class for every failure surfaced by ``WebService.load``."""

    @property
    def description(self) -> str:
        """Human readable message printed by callers."""
        return str(self)


class InvalidResponse(NetworkError):
    """The server answered with a status other than 200.

    ``message`` holds the response body when it is valid UTF-8,
    otherwise ``None``.
    """

    def __init__(self, message: str | None = None) -> None:
        self.message = message
        super().__init__(
            message if message is not None else "Invalid Network Response"
        )


class BadUrl(NetworkError):
    """The request URL could not be built."""

    def __init__(self) -> None:
        super().__init__("Bad Url found")


class DecodingError(NetworkError):
    """The 200 response body did not decode into the expected type."""

    def __init__(self) -> None:
        super().__init__("Error occurred while decoding the response")


class UnknownError(NetworkError):
    """Any other failure, e.g. a request that could not be created."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)
