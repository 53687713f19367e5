"""Route frozen dataclass and path validation."""

import re
from dataclasses import dataclass

from wren.errors import InvalidRoute

# One or more segments of RFC 3986 unreserved characters, joined by "/".
_PATH_RE = re.compile(r"[A-Za-z0-9._~-]+(?:/[A-Za-z0-9._~-]+)*")


def validate_path(path: str) -> str:
    """Return *path* unchanged if it is a valid static route path.

    Raises ``InvalidRoute`` for empty paths, leading or trailing
    slashes, and anything that looks like a parameter or wildcard.
    """
    if not isinstance(path, str):
        msg = f"Route path must be a string, got {type(path).__name__}."
        raise InvalidRoute(msg)
    if not path:
        msg = "Route path must not be empty."
        raise InvalidRoute(msg)
    if any(ch in path for ch in "{}<>*"):
        msg = (
            f"Route path {path!r} contains a parameter or wildcard. "
            "Only static paths are supported."
        )
        raise InvalidRoute(msg)
    if path.startswith("/") or path.endswith("/"):
        msg = f"Route path {path!r} must not start or end with '/'."
        raise InvalidRoute(msg)
    if _PATH_RE.fullmatch(path) is None:
        msg = f"Route path {path!r} is not URL-safe."
        raise InvalidRoute(msg)
    return path


@dataclass(frozen=True, slots=True)
class Route:
    """A frozen route definition: a static path and the resource it renders.

    Created during app setup, compiled into the route table at freeze time.
    """

    path: str
    resource: str

    def __post_init__(self) -> None:
        validate_path(self.path)
        if not isinstance(self.resource, str) or not self.resource:
            msg = f"Route {self.path!r} needs a non-empty resource id."
            raise InvalidRoute(msg)
