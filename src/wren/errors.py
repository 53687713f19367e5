"""Wren exception hierarchy.

Shared across the route table, App, handler, and CLI so every module
raises and catches the same types.
"""

from dataclasses import dataclass


class WrenError(Exception):
    """Base for all wren-specific errors."""


class ConfigurationError(WrenError):
    """Raised when app configuration is invalid.

    Raised during setup, before any request is served.
    """


class DuplicateRoute(ConfigurationError):  # noqa: N818
    """A path was registered twice.

    Registration never overwrites: the second ``register()`` call aborts
    setup and names both resources.
    """

    def __init__(self, path: str, existing: str, resource: str) -> None:
        self.path = path
        self.existing = existing
        self.resource = resource
        super().__init__(
            f"Route {path!r} is already registered to {existing!r}; "
            f"refusing to register it again for {resource!r}."
        )


class InvalidRoute(ConfigurationError):  # noqa: N818
    """A route path or resource id is malformed."""


@dataclass(frozen=True, slots=True)
class HTTPError(WrenError):
    """An error that maps directly to an HTTP status code.

    Raised by the route table or the request pipeline. The ASGI handler
    catches these and dispatches to the matching ``@app.error()`` handler.
    """

    status: int
    detail: str = ""
    headers: tuple[tuple[str, str], ...] = ()

    def __str__(self) -> str:
        if self.detail:
            return f"{self.status}: {self.detail}"
        return str(self.status)


class NotFound(HTTPError):  # noqa: N818
    """404 — nothing to serve at the request path."""

    def __init__(self, detail: str = "Not Found") -> None:
        super().__init__(status=404, detail=detail)


class RouteNotFound(NotFound):  # noqa: N818
    """404 — no route is registered for the path."""

    def __init__(self, path: str) -> None:
        object.__setattr__(self, "path", path)
        super().__init__(f"No route matches {path!r}")


class MethodNotAllowed(HTTPError):  # noqa: N818
    """405 — the route exists but is not served for this HTTP method.

    Includes an ``Allow`` header listing the valid methods.
    """

    def __init__(self, allowed: frozenset[str], detail: str = "") -> None:
        allow_value = ", ".join(sorted(allowed))
        default_detail = f"Method not allowed. Allowed methods: {allow_value}"
        super().__init__(
            status=405,
            detail=detail or default_detail,
            headers=(("Allow", allow_value),),
        )
