"""Tests for the blog example."""

import pytest

from wren.blog import BLOG_ROUTES
from wren.testing import TestClient


class TestArticles:
    @pytest.mark.parametrize("route", BLOG_ROUTES, ids=lambda r: r.path)
    async def test_every_article_renders(self, example_app, route) -> None:
        async with TestClient(example_app) as client:
            response = await client.get(f"/{route.path}")
            assert response.status == 200
            assert "<article>" in response.text

    async def test_title(self, example_app) -> None:
        async with TestClient(example_app) as client:
            response = await client.get("/using-sass-in-asp-net-core")
            assert "<h1>Using Sass in ASP.NET Core</h1>" in response.text


class TestNotFound:
    async def test_custom_404(self, example_app) -> None:
        async with TestClient(example_app) as client:
            response = await client.get("/no-such-article")
            assert response.status == 404
            assert "No article at /no-such-article" in response.text

    async def test_path_is_escaped(self, example_app) -> None:
        async with TestClient(example_app) as client:
            response = await client.get("/<script>alert(1)</script>")
            assert response.status == 404
            assert "<script>" not in response.text
            assert "&lt;script&gt;" in response.text


class TestViews:
    def test_check_passes(self, example_app, capsys: pytest.CaptureFixture[str]) -> None:
        example_app.check()
        assert "No issues found." in capsys.readouterr().out
