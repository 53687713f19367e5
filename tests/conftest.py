"""Shared fixtures: an App wired to in-memory views."""

import pytest
from kida import DictLoader, Environment

from wren.app import App
from wren.blog import BLOG_ROUTES
from wren.config import AppConfig


def _env(views: dict[str, str]) -> Environment:
    """A kida Environment serving *views* from memory."""
    return Environment(loader=DictLoader(views))


@pytest.fixture
def blog_views() -> dict[str, str]:
    """One minimal view per blog article, keyed by template name."""
    return {
        f"blog/{route.resource}.html": f"<h1>{route.resource}</h1>" for route in BLOG_ROUTES
    }


@pytest.fixture
def blog_app(blog_views: dict[str, str]) -> App:
    """An App serving every blog article from in-memory views."""
    app = App(AppConfig(), kida_env=_env(blog_views))
    app.pages(BLOG_ROUTES)
    return app
