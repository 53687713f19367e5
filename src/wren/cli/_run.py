"""``wren run`` — development or production server command."""

import argparse

from wren.cli._resolve import load_app


def run_server(args: argparse.Namespace) -> None:
    """Start the wren server (dev or production mode).

    Production mode is used when ``--production`` is passed or the app
    is not in debug mode. CLI flags override app config.
    """
    app = load_app(args.app)
    app._ensure_frozen()

    host = args.host or app.config.host
    port = args.port or app.config.port

    if args.production or not app.config.debug:
        from wren.server.production import run_production_server

        run_production_server(
            app,
            host=host,
            port=port,
            workers=args.workers if args.workers is not None else app.config.workers,
            lifecycle_logging=app.config.lifecycle_logging,
            log_format=app.config.log_format,
            log_level=app.config.log_level,
            keep_alive_timeout=app.config.keep_alive_timeout,
            request_timeout=app.config.request_timeout,
        )
    else:
        from wren.server.dev import run_dev_server

        run_dev_server(
            app,
            host,
            port,
            reload=app.config.debug,
            reload_include=app.config.reload_include,
            reload_dirs=app.config.reload_dirs,
            app_path=args.app,
        )
