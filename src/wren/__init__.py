"""Wren — serve a static table of pages over ASGI.

A route table maps fixed URL paths to resource ids; each resource id
names a kida view. Routes are registered once at startup and never
change afterwards.

Basic usage::

    from wren import App

    app = App()
    app.page("one-line-a-day", "OneLineADay")   # renders blog/OneLineADay.html
    app.run()

Route lookup without the HTTP layer::

    from wren.blog import lookup

    lookup("one-line-a-day")   # "OneLineADay"
    lookup("nope")             # None
"""

__version__ = "0.1.0"
__all__ = [
    "App",
    "AppConfig",
    "ConfigurationError",
    "DuplicateRoute",
    "HTTPError",
    "InvalidRoute",
    "MethodNotAllowed",
    "NotFound",
    "Request",
    "Response",
    "Route",
    "RouteNotFound",
    "RouteTable",
    "WrenError",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import wren`` fast while providing a clean top-level API.
    """
    if name == "App":
        from wren.app import App

        return App

    if name == "AppConfig":
        from wren.config import AppConfig

        return AppConfig

    if name == "Request":
        from wren.http.request import Request

        return Request

    if name == "Response":
        from wren.http.response import Response

        return Response

    if name in ("Route", "RouteTable"):
        from wren import routing as _routing

        return getattr(_routing, name)

    if name in (
        "ConfigurationError",
        "DuplicateRoute",
        "HTTPError",
        "InvalidRoute",
        "MethodNotAllowed",
        "NotFound",
        "RouteNotFound",
        "WrenError",
    ):
        from wren import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
