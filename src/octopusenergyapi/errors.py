from __future__ import annotations

from typing import Optional


class OctopusError(Exception):
    pass


class ConfigurationError(OctopusError):
    """Client could not be built (empty API key, malformed base URL, missing env)."""


class TransportError(OctopusError):
    """The HTTP request never produced a response."""


class HTTPStatusError(OctopusError):
    """The service answered with something other than 200 OK."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class DecodeError(OctopusError):
    """Response body was not JSON, or not the JSON shape we expected."""


class PaginationError(OctopusError):
    pass


class GridSupplyPointError(OctopusError):
    """No, ambiguous or unknown grid supply point returned by the service."""


class InvalidPostcodeError(OctopusError):
    pass


def rewrap(err: OctopusError, context: str) -> OctopusError:
    """Return a copy of ``err`` of the same class with ``context`` prefixed to its message."""
    message = f"{context}: {err}"
    if isinstance(err, HTTPStatusError):
        return HTTPStatusError(message, status_code=err.status_code)
    return type(err)(message)
