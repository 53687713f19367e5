"""ASGI handler — translates ASGI scope/messages to wren types.

The only component that touches raw ASGI HTTP messages directly.
Converts the scope to a typed Request, resolves the path through the
route table, renders the view, and sends the Response back through
ASGI send().
"""

from collections.abc import Callable
from typing import Any

from kida import Environment

from wren._internal.asgi import Receive, Scope, Send
from wren.config import AppConfig
from wren.errors import HTTPError, MethodNotAllowed
from wren.http.request import Request
from wren.http.response import Response
from wren.routing.table import RouteTable
from wren.server.errors import handle_http_error, handle_internal_error
from wren.server.sender import send_response
from wren.templating.integration import render_view, view_name

ALLOWED_METHODS = frozenset({"GET", "HEAD"})


async def handle_request(
    scope: Scope,
    receive: Receive,
    send: Send,
    *,
    table: RouteTable,
    kida_env: Environment,
    config: AppConfig,
    error_handlers: dict[int | type, Callable[..., Any]],
) -> None:
    """Process a single HTTP request through the full pipeline."""
    if scope["type"] != "http":
        return

    request = Request.from_asgi(dict(scope))

    try:
        response = dispatch(request, table=table, kida_env=kida_env, config=config)
    except HTTPError as exc:
        response = await handle_http_error(exc, request, error_handlers, config.debug)
    except Exception as exc:
        response = await handle_internal_error(exc, request, error_handlers, config.debug)

    await send_response(response, send, head=request.method == "HEAD")


def dispatch(
    request: Request,
    *,
    table: RouteTable,
    kida_env: Environment,
    config: AppConfig,
) -> Response:
    """Resolve the request path and render the matching view.

    Raises ``RouteNotFound`` for unknown paths and ``MethodNotAllowed``
    for anything other than GET/HEAD on a known path.
    """
    route = table.resolve(request.route_path)
    if request.method not in ALLOWED_METHODS:
        raise MethodNotAllowed(ALLOWED_METHODS)

    body = render_view(kida_env, view_name(route.resource, config))
    return Response(body=body)
