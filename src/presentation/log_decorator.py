"""
Controller decorator that logs server errors.

Wraps any controller. The wrapped controller stays free of logging, and
the decorator reports every 500 it sees together with the exception chained
to the ServerError body.
"""

import logging

from .http import Controller, HttpRequest, HttpResponse

logger = logging.getLogger(__name__)


class LogControllerDecorator:
    """Implements Controller protocol by delegation."""

    def __init__(self, controller: Controller) -> None:
        self._controller = controller

    async def handle(self, http_request: HttpRequest) -> HttpResponse:
        http_response = await self._controller.handle(http_request)
        if http_response.status_code == 500:
            logger.error(
                "Server error in %s",
                type(self._controller).__name__,
                exc_info=getattr(http_response.body, "__cause__", None),
            )
        return http_response
