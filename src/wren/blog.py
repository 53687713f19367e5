"""The blog's route table.

Each article lives at a static path and renders the view named by its
resource id (``blog/<ResourceId>.html`` with the default config). The
table is built once at import time and never changes afterwards.
"""

from collections.abc import Iterable

from wren.app import App
from wren.config import AppConfig
from wren.routing.route import Route
from wren.routing.table import RouteTable

BLOG_ROUTES: tuple[Route, ...] = (
    Route("one-line-a-day", "OneLineADay"),
    Route(
        "chain-of-responsibility-adopted-for-dependency-injection",
        "ChainOfResponsibilityForDependencyInjection",
    ),
    Route("the-purpose-of-the-repository-pattern", "PurposeOfTheRepositoryPattern"),
    Route("things-to-remember-with-blazor", "ThingsToRememberWithBlazor"),
    Route("minimizing-javascript-interop-in-blazor", "MinimizingJavaScriptInteropInBlazor"),
    Route("your-application-is-not-blazor", "YourApplicationIsNotBlazor"),
    Route("blazor-hosting-models", "BlazorHostingModels"),
    Route("embracing-component-architecture", "EmbracingComponentArchitecture"),
    Route(
        "just-because-you-can-does-not-mean-you-should",
        "JustBecauseYouCanDoesNotMeanYouShould",
    ),
    Route("routing-with-variables-in-blazor", "RoutingWithVariablesInBlazor"),
    Route("refactoring-form-inputs-in-blazor", "RefactoringFormInputsInBlazor"),
    Route("using-sass-in-asp-net-core", "UsingSassInAspNetCore"),
    Route(
        "blazor-in-memory-state-management-1-3",
        "BlazorInMemoryStateManagementPartOneOfThree",
    ),
    Route(
        "blazor-in-memory-state-management-2-3",
        "BlazorInMemoryStateManagementPartTwoOfThree",
    ),
    Route(
        "blazor-in-memory-state-management-3-3",
        "BlazorInMemoryStateManagementPartThreeOfThree",
    ),
)


def build_route_table(routes: Iterable[Route] = BLOG_ROUTES) -> RouteTable:
    """Compile *routes* into a read-only table."""
    return RouteTable.from_routes(routes)


_TABLE = build_route_table()


def lookup(path: str) -> str | None:
    """Resource id of the blog article at *path*, or ``None``."""
    return _TABLE.lookup(path)


def create_app(config: AppConfig | None = None) -> App:
    """App factory: every blog article registered as a page.

    Usable from the CLI as ``wren run wren.blog:create_app``.
    """
    app = App(config)
    app.pages(BLOG_ROUTES)
    return app
