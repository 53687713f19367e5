"""``wren routes`` — list registered routes.

Resolves an import string to a wren App and prints every route's path
and the view it renders.
"""

import argparse

from wren.cli._resolve import load_app
from wren.templating.integration import view_name


def run_routes(args: argparse.Namespace) -> None:
    """Print a PATH / RESOURCE / VIEW table for ``args.app``."""
    app = load_app(args.app)
    app._ensure_frozen()

    routes = app.routes.routes
    if not routes:
        print("No routes registered.")
        return

    rows = [
        (f"/{route.path}", route.resource, view_name(route.resource, app.config))
        for route in routes
    ]

    max_path = max(max(len(r[0]) for r in rows), 4)  # "PATH" header
    max_resource = max(max(len(r[1]) for r in rows), 8)  # "RESOURCE" header

    fmt = f"{{:<{max_path}}}  {{:<{max_resource}}}  {{}}"
    print(fmt.format("PATH", "RESOURCE", "VIEW"))
    sep_len = max_path + max_resource + 4 + max(len(r[2]) for r in rows)
    print("-" * min(sep_len, 80))
    for path, resource, view in rows:
        print(fmt.format(path, resource, view))
