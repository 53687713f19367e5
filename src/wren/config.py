"""Application configuration.

AppConfig is a frozen dataclass: immutable after creation, with typed
fields instead of string-key dict lookups.
"""

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True, slots=True)
class AppConfig:
    """Application configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = AppConfig(debug=True, port=3000, template_dir="site/views")
    """

    # Server
    host: str = "127.0.0.1"
    port: int = 8000
    debug: bool = False

    # Reload (development mode, requires debug=True)
    reload_include: tuple[str, ...] = ()  # Extra extensions to watch (e.g. ".html", ".css")
    reload_dirs: tuple[str, ...] = ()  # Extra directories to watch alongside cwd

    # Views: a route's resource id renders "{view_dir}/{resource}{template_suffix}"
    template_dir: str | Path = "templates"
    view_dir: str = "blog"
    template_suffix: str = ".html"
    autoescape: bool = True
    trim_blocks: bool = True
    lstrip_blocks: bool = True

    # Production
    workers: int = 0  # 0 = auto-detect from CPU count
    lifecycle_logging: bool = True
    log_format: str = "json"
    log_level: str = "info"
    keep_alive_timeout: float = 5.0
    request_timeout: float = 30.0
