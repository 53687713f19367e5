"""Routing — a static route table from request path to resource id.

Routes are registered during setup and compiled into an immutable
mapping when the app freezes.
"""

from wren.routing.route import Route
from wren.routing.table import RouteTable

__all__ = ["Route", "RouteTable"]
