"""Compiled route table with exact-match lookup.

Routes are registered during setup and compiled into an immutable
mapping. After ``compile()`` the table is read-only and safe to share
across any number of request tasks or threads without locking.
"""

from collections.abc import Iterable, Iterator, Mapping
from types import MappingProxyType

from wren.errors import DuplicateRoute, RouteNotFound
from wren.routing.route import Route


class RouteTable:
    """Static mapping from request path to resource id.

    Usage::

        table = RouteTable()
        table.register("one-line-a-day", "OneLineADay")
        table.compile()
        table.lookup("one-line-a-day")   # "OneLineADay"
        table.lookup("missing")          # None
    """

    __slots__ = ("_compiled", "_routes")

    def __init__(self) -> None:
        self._routes: Mapping[str, Route] = {}
        self._compiled = False

    @classmethod
    def from_routes(cls, routes: Iterable[Route | tuple[str, str]]) -> "RouteTable":
        """Build and compile a table from routes or ``(path, resource)`` pairs."""
        table = cls()
        table.extend(routes)
        table.compile()
        return table

    # -- Setup --

    def register(self, path: str, resource: str) -> Route:
        """Register *path* to render *resource*. Must be called before compile()."""
        route = Route(path=path, resource=resource)
        self.add(route)
        return route

    def add(self, route: Route) -> None:
        """Add a pre-built route. Must be called before compile()."""
        if self._compiled:
            msg = "Cannot add routes after compilation."
            raise RuntimeError(msg)

        existing = self._routes.get(route.path)
        if existing is not None:
            raise DuplicateRoute(route.path, existing.resource, route.resource)
        self._routes[route.path] = route  # type: ignore[index]

    def extend(self, routes: Iterable[Route | tuple[str, str]]) -> None:
        """Add a batch of routes or ``(path, resource)`` pairs, all or nothing.

        The whole batch is checked against the table and against itself
        first. On ``InvalidRoute`` or ``DuplicateRoute`` the table is left
        unchanged.
        """
        if self._compiled:
            msg = "Cannot add routes after compilation."
            raise RuntimeError(msg)

        staged: dict[str, Route] = dict(self._routes)
        for entry in routes:
            route = entry if isinstance(entry, Route) else Route(*entry)
            existing = staged.get(route.path)
            if existing is not None:
                raise DuplicateRoute(route.path, existing.resource, route.resource)
            staged[route.path] = route
        self._routes = staged

    def compile(self) -> None:
        """Freeze the table. No more routes can be added."""
        if self._compiled:
            return
        self._routes = MappingProxyType(dict(self._routes))
        self._compiled = True

    @property
    def compiled(self) -> bool:
        return self._compiled

    # -- Lookup --

    def lookup(self, path: str) -> str | None:
        """Return the resource id registered for *path*, or ``None``.

        Exact string match: no normalization, no case folding, no
        patterns. Unknown paths are not an error here.
        """
        route = self._routes.get(path)
        if route is None:
            return None
        return route.resource

    def resolve(self, path: str) -> Route:
        """Return the route for *path*.

        Raises ``RouteNotFound`` if no route is registered, for callers
        that turn a miss into a 404 response.
        """
        route = self._routes.get(path)
        if route is None:
            raise RouteNotFound(path)
        return route

    # -- Introspection --

    @property
    def routes(self) -> tuple[Route, ...]:
        """All registered routes, in registration order."""
        return tuple(self._routes.values())

    def as_dict(self) -> dict[str, str]:
        """Plain ``{path: resource}`` copy of the table."""
        return {path: route.resource for path, route in self._routes.items()}

    def __contains__(self, path: object) -> bool:
        return path in self._routes

    def __iter__(self) -> Iterator[str]:
        return iter(self._routes)

    def __len__(self) -> int:
        return len(self._routes)

    def __repr__(self) -> str:
        state = "compiled" if self._compiled else "open"
        return f"<RouteTable {len(self)} routes ({state})>"
