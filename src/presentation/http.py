"""
Transport-agnostic HTTP shapes and response helpers.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Protocol

from .errors import HttpError, ServerError


@dataclass
class HttpRequest:
    """Inbound request. The body is untrusted and may be partial."""

    body: Mapping[str, Any] | None = None


@dataclass
class HttpResponse:
    """Outbound response."""

    status_code: int
    body: Any


class Controller(Protocol):
    """Anything that turns an HttpRequest into an HttpResponse."""

    async def handle(self, http_request: HttpRequest) -> HttpResponse: ...


def ok(data: Any) -> HttpResponse:
    return HttpResponse(status_code=200, body=data)


def bad_request(error: HttpError) -> HttpResponse:
    return HttpResponse(status_code=400, body=error)


def server_error(cause: Exception | None = None) -> HttpResponse:
    """
    Build a 500 response with a generic ServerError body.

    The original exception is chained as __cause__ so it can be logged,
    but it never becomes part of the error message.
    """
    error = ServerError()
    error.__cause__ = cause
    return HttpResponse(status_code=500, body=error)
