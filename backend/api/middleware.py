"""Request interceptors attached to routers through their route class."""
import logging
from typing import Callable

from fastapi import Request, Response
from fastapi.routing import APIRoute

LOG = logging.getLogger(__name__)


async def print_request_body(request: Request) -> None:
    """Log method, path and raw body of the request."""
    body = await request.body()
    LOG.info(
        "%s %s body=%s",
        request.method,
        request.url.path,
        body.decode("utf-8", errors="replace") if body else "<empty>",
    )


class RequestBodyLoggingRoute(APIRoute):
    """Route that logs the raw body before FastAPI parses or validates it.

    Malformed bodies that end in a 422 are logged too.
    """

    def get_route_handler(self) -> Callable:
        route_handler = super().get_route_handler()

        async def logging_route_handler(request: Request) -> Response:
            # Request caches the body, so the handler below reads the same bytes.
            await print_request_body(request)
            return await route_handler(request)

        return logging_route_handler
