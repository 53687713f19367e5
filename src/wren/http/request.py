"""Immutable HTTP request.

Pages are served from the path alone, so the request carries metadata
only. The body is never read.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from wren.http.headers import Headers


@dataclass(frozen=True, slots=True)
class Request:
    """An immutable HTTP request, frozen at creation."""

    method: str
    path: str
    headers: Headers
    query_string: bytes
    http_version: str
    server: tuple[str, int] | None
    client: tuple[str, int] | None

    @property
    def route_path(self) -> str:
        """The request path in route-table form (no surrounding slashes).

        ``"/one-line-a-day/"`` becomes ``"one-line-a-day"``; ``"/"``
        becomes ``""``, which no route can match.
        """
        return self.path.strip("/")

    @classmethod
    def from_asgi(cls, scope: dict[str, Any]) -> Request:
        """Create a Request from an ASGI HTTP scope."""
        server = scope.get("server")
        client = scope.get("client")
        return cls(
            method=scope["method"].upper(),
            path=scope["path"],
            headers=Headers(tuple(scope.get("headers", ()))),
            query_string=scope.get("query_string", b""),
            http_version=scope.get("http_version", "1.1"),
            server=tuple(server) if server else None,
            client=tuple(client) if client else None,
        )
