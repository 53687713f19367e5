"""Kida environment setup and view rendering.

Creates a kida Environment from wren's AppConfig. The environment is
created once during ``App._freeze()`` and passed through the request
pipeline.
"""

from kida import Environment, FileSystemLoader

from wren.config import AppConfig


def create_environment(config: AppConfig) -> Environment:
    """Create a kida Environment from app configuration.

    Called once during ``App._freeze()``. The returned environment
    is immutable for the lifetime of the app.
    """
    return Environment(
        loader=FileSystemLoader(str(config.template_dir)),
        autoescape=config.autoescape,
        auto_reload=config.debug,
        trim_blocks=config.trim_blocks,
        lstrip_blocks=config.lstrip_blocks,
    )


def view_name(resource: str, config: AppConfig) -> str:
    """Template name for a resource id.

    ``view_name("OneLineADay", AppConfig())`` is ``"blog/OneLineADay.html"``.
    An empty ``view_dir`` puts views at the template root.
    """
    filename = f"{resource}{config.template_suffix}"
    if config.view_dir:
        return f"{config.view_dir.strip('/')}/{filename}"
    return filename


def render_view(env: Environment, name: str) -> str:
    """Render a view with an empty context, like a parameterless ``View()``."""
    template = env.get_template(name)
    return template.render({})
