"""Errors raised while fetching articles from the upstream API."""


class FetchError(Exception):
    """Base class for any failed article fetch."""


class NetworkFailure(FetchError):
    """The request could not be completed by the transport."""


class UpstreamStatus(FetchError):
    """The upstream answered with a non-2xx status code."""

    def __init__(self, status_code: int) -> None:
        super().__init__(f"HTTP {status_code}")
        self.status_code = status_code


class ParseFailure(FetchError):
    """The response body was not a JSON object."""
