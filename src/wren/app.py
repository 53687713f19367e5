"""Wren application class.

Mutable during setup (page registration, error handlers, hooks).
Frozen at runtime when app.run() or __call__() is first invoked.
"""

import logging
import threading
from collections.abc import Callable, Iterable
from typing import Any

from kida import Environment

from wren._internal.asgi import Receive, Scope, Send
from wren._internal.invoke import invoke
from wren.config import AppConfig
from wren.routing.route import Route
from wren.routing.table import RouteTable
from wren.server.handler import handle_request
from wren.templating.integration import create_environment

logger = logging.getLogger("wren.app")

ErrorHandler = Callable[..., Any]


class App:
    """The wren application.

    Mutable during setup (page registration, error handlers, hooks).
    Frozen at runtime when ``app.run()`` or ``__call__()`` is first invoked.

    Thread safety:
        The setup phase is single-threaded (module import time).
        The freeze transition uses a Lock + double-check so exactly one
        thread compiles the app, even when several ASGI workers call
        ``__call__()`` concurrently on first request. After that the
        route table is read-only and shared without locking.
    """

    __slots__ = (
        "_custom_kida_env",
        "_error_handlers",
        "_freeze_lock",
        "_frozen",
        "_kida_env",
        "_routes",
        "_shutdown_hooks",
        "_startup_hooks",
        "config",
    )

    def __init__(
        self,
        config: AppConfig | None = None,
        *,
        kida_env: Environment | None = None,
    ) -> None:
        self.config: AppConfig = config or AppConfig()
        self._routes: RouteTable = RouteTable()
        self._error_handlers: dict[int | type, ErrorHandler] = {}
        self._startup_hooks: list[Callable[..., Any]] = []
        self._shutdown_hooks: list[Callable[..., Any]] = []
        self._frozen: bool = False
        self._freeze_lock: threading.Lock = threading.Lock()
        self._custom_kida_env: Environment | None = kida_env

        # Compiled state, set during _freeze()
        self._kida_env: Environment | None = None

    # -- Page registration --

    def page(self, path: str, resource: str) -> Route:
        """Serve the view for *resource* at *path*.

        Raises ``DuplicateRoute`` right away if *path* is already taken.
        """
        self._check_not_frozen()
        return self._routes.register(path, resource)

    def pages(self, routes: Iterable[Route | tuple[str, str]]) -> None:
        """Register many pages from routes or ``(path, resource)`` pairs.

        If any entry is invalid or a duplicate, none of them is registered.
        """
        self._check_not_frozen()
        self._routes.extend(routes)

    @property
    def routes(self) -> RouteTable:
        """The app's route table (compiled once the app is frozen)."""
        return self._routes

    def lookup(self, path: str) -> str | None:
        """Resource id for *path*, or ``None`` if no page is registered."""
        return self._routes.lookup(path)

    # -- Error handlers and lifecycle --

    def error(self, code_or_exception: int | type[Exception]) -> Callable[[ErrorHandler], ErrorHandler]:
        """Register an error handler for a status code or exception type.

        Usage::

            @app.error(404)
            def not_found(request):
                return ("Nothing here.", 404)
        """

        def decorator(func: ErrorHandler) -> ErrorHandler:
            self._check_not_frozen()
            self._error_handlers[code_or_exception] = func
            return func

        return decorator

    def on_startup(self, func: Callable[..., Any]) -> Callable[..., Any]:
        """Register a hook run once when the server starts. Sync or async."""
        self._check_not_frozen()
        self._startup_hooks.append(func)
        return func

    def on_shutdown(self, func: Callable[..., Any]) -> Callable[..., Any]:
        """Register a hook run once when the server stops. Sync or async."""
        self._check_not_frozen()
        self._shutdown_hooks.append(func)
        return func

    # -- Serving --

    def run(self, host: str | None = None, port: int | None = None) -> None:
        """Start the server (dev or production based on config.debug).

        Compiles the app (freezing routes and templates) and starts
        serving requests.

        Args:
            host: Override bind host.
            port: Override bind port.
        """
        self._ensure_frozen()

        _host = host or self.config.host
        _port = port or self.config.port

        if self.config.debug:
            from wren.server.dev import run_dev_server

            run_dev_server(
                self,
                _host,
                _port,
                reload=self.config.debug,
                reload_include=self.config.reload_include,
                reload_dirs=self.config.reload_dirs,
            )
        else:
            from wren.server.production import run_production_server

            run_production_server(
                self,
                host=_host,
                port=_port,
                workers=self.config.workers,
                lifecycle_logging=self.config.lifecycle_logging,
                log_format=self.config.log_format,
                log_level=self.config.log_level,
                keep_alive_timeout=self.config.keep_alive_timeout,
                request_timeout=self.config.request_timeout,
            )

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        """ASGI 3.0 entry point.

        Handles the lifespan scope directly, then delegates HTTP scopes
        to the request handler pipeline.
        """
        if scope["type"] == "lifespan":
            await self._handle_lifespan(scope, receive, send)
            return

        self._ensure_frozen()

        assert self._kida_env is not None

        await handle_request(
            scope,
            receive,
            send,
            table=self._routes,
            kida_env=self._kida_env,
            config=self.config,
            error_handlers=self._error_handlers,
        )

    async def _handle_lifespan(
        self,
        scope: Scope,
        receive: Receive,
        send: Send,
    ) -> None:
        """Run the ASGI lifespan protocol.

        Freezes the app at startup (before first HTTP request), then
        runs registered startup/shutdown hooks and signals completion
        back to the server.
        """
        try:
            self._ensure_frozen()
        except Exception as exc:
            message = await receive()
            if message["type"] == "lifespan.startup":
                await send({"type": "lifespan.startup.failed", "message": str(exc)})
            return

        while True:
            message = await receive()
            msg_type = message["type"]

            if msg_type == "lifespan.startup":
                try:
                    for hook in self._startup_hooks:
                        await invoke(hook)
                except Exception as exc:
                    logger.exception("Startup hook failed")
                    await send({"type": "lifespan.startup.failed", "message": str(exc)})
                    return
                await send({"type": "lifespan.startup.complete"})

            elif msg_type == "lifespan.shutdown":
                for hook in self._shutdown_hooks:
                    await invoke(hook)
                await send({"type": "lifespan.shutdown.complete"})
                return

    # -- Checks --

    def check(self) -> None:
        """Validate that every page has a loadable view and print results.

        Freezes the app if needed. Raises ``SystemExit(1)`` if any
        route's view is missing or does not compile.
        """
        from wren.checks import check_views

        self._ensure_frozen()
        assert self._kida_env is not None

        result = check_views(self._routes, self._kida_env, self.config)
        print(result.summary())
        if not result.ok:
            raise SystemExit(1)

    # -- Internal --

    def _ensure_frozen(self) -> None:
        """Thread-safe freeze with double-check locking."""
        if self._frozen:
            return
        with self._freeze_lock:
            if self._frozen:
                return
            self._freeze()

    def _freeze(self) -> None:
        """Compile the app into its frozen runtime state.

        MUST only be called while holding _freeze_lock.
        """
        self._routes.compile()

        if self._custom_kida_env is not None:
            self._kida_env = self._custom_kida_env
        else:
            self._kida_env = create_environment(self.config)

        self._frozen = True
        logger.debug("Compiled %d routes", len(self._routes))

        # Surface missing views at startup in debug mode. Warnings only.
        if self.config.debug:
            self._run_debug_checks()

    def _run_debug_checks(self) -> None:
        from wren.checks import check_views

        assert self._kida_env is not None
        result = check_views(self._routes, self._kida_env, self.config)
        for issue in result.issues:
            where = f" ({issue.template})" if issue.template else ""
            logger.warning("%s%s", issue.message, where)

    def _check_not_frozen(self) -> None:
        if self._frozen:
            msg = (
                "Cannot modify the app after it has started serving requests. "
                "Register pages, error handlers, and hooks before calling app.run()."
            )
            raise RuntimeError(msg)
