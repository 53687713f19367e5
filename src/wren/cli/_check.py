"""``wren check`` — view validation command.

Exits with code 1 if any route's view is missing or broken.
"""

import argparse

from wren.cli._resolve import load_app


def run_check(args: argparse.Namespace) -> None:
    """Resolve ``args.app`` and delegate to ``App.check()``."""
    app = load_app(args.app)
    app.check()
