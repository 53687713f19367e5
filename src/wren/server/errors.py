"""Error handling pipeline for wren requests.

Maps HTTPError exceptions and unexpected failures to appropriate
Response objects, using registered error handlers or sensible defaults.
"""

import html
import inspect
import logging
import traceback
from collections.abc import Callable
from typing import Any

from wren._internal.invoke import invoke
from wren.errors import HTTPError
from wren.http.request import Request
from wren.http.response import Response

logger = logging.getLogger("wren.server")


def to_response(result: Any) -> Response:
    """Coerce an error handler's return value into a Response.

    Accepts a ``Response``, a ``str``/``bytes`` body, or a
    ``(body, status)`` tuple.
    """
    if isinstance(result, Response):
        return result
    if isinstance(result, tuple) and len(result) == 2:
        body, status = result
        return to_response(body).with_status(status)
    if isinstance(result, str | bytes):
        return Response(body=result)
    msg = f"Error handler returned {type(result).__name__}; expected Response, str, or (body, status)."
    raise TypeError(msg)


async def call_error_handler(
    handler: Callable[..., Any],
    request: Request,
    exc: Exception,
) -> Response:
    """Invoke a user-registered error handler with introspected arguments.

    Error handlers may accept zero, one (request), or two (request, exc) args.
    Supports both sync and async error handlers.
    """
    params = list(inspect.signature(handler).parameters.values())

    if len(params) >= 2:
        result = await invoke(handler, request, exc)
    elif len(params) == 1:
        result = await invoke(handler, request)
    else:
        result = await invoke(handler)

    return to_response(result)


def find_handler(
    exc: HTTPError,
    error_handlers: dict[int | type, Callable[..., Any]],
) -> Callable[..., Any] | None:
    """Handler for *exc*: most specific registered HTTPError class, then status."""
    for cls in type(exc).__mro__:
        handler = error_handlers.get(cls)
        if handler is not None:
            return handler
        if cls is HTTPError:
            break
    return error_handlers.get(exc.status)


async def handle_http_error(
    exc: HTTPError,
    request: Request,
    error_handlers: dict[int | type, Callable[..., Any]],
    debug: bool,
) -> Response:
    """Map an HTTPError to a Response using registered error handlers."""
    logger.debug("%d %s %s: %s", exc.status, request.method, request.path, exc.detail)

    handler = find_handler(exc, error_handlers)
    if handler is not None:
        response = await call_error_handler(handler, request, exc)
        # Keep the exception's status unless the handler chose its own
        if response.status == 200:
            response = response.with_status(exc.status)
    else:
        detail = exc.detail or f"Error {exc.status}"
        if debug and exc.detail:
            detail = f"{exc.status}: {exc.detail}"
        response = Response(body=html.escape(detail), status=exc.status)

    for name, value in exc.headers:
        if response.header(name) is None:
            response = response.with_header(name, value)
    return response


async def handle_internal_error(
    exc: Exception,
    request: Request,
    error_handlers: dict[int | type, Callable[..., Any]],
    debug: bool,
) -> Response:
    """Handle unexpected exceptions as 500 errors."""
    logger.exception("500 %s %s", request.method, request.path)

    handler = error_handlers.get(500) or error_handlers.get(type(exc))
    if handler is not None:
        response = await call_error_handler(handler, request, exc)
        if response.status == 200:
            response = response.with_status(500)
        return response

    if debug:
        trace = "".join(traceback.format_exception(exc))
        return Response(body=f"<pre>{html.escape(trace)}</pre>", status=500)

    return Response(body="Internal Server Error", status=500)
