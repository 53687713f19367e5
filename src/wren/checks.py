"""View checks — every route must resolve to a loadable template.

Run by ``wren check`` and, as warnings only, at startup in debug mode.
"""

from dataclasses import dataclass, field
from enum import Enum

from kida import Environment
from kida.environment.exceptions import TemplateNotFoundError, TemplateSyntaxError

from wren.config import AppConfig
from wren.routing.table import RouteTable
from wren.templating.integration import view_name


class Severity(Enum):
    """Severity of a view check issue."""

    ERROR = "error"
    WARNING = "warning"


@dataclass(frozen=True, slots=True)
class CheckIssue:
    """A single issue found while checking views."""

    severity: Severity
    message: str
    route: str | None = None
    template: str | None = None


@dataclass(slots=True)
class CheckResult:
    """Result of checking a route table against its views."""

    issues: list[CheckIssue] = field(default_factory=list)
    routes_checked: int = 0

    @property
    def errors(self) -> list[CheckIssue]:
        return [i for i in self.issues if i.severity == Severity.ERROR]

    @property
    def warnings(self) -> list[CheckIssue]:
        return [i for i in self.issues if i.severity == Severity.WARNING]

    @property
    def ok(self) -> bool:
        return not self.errors

    def summary(self) -> str:
        """Human-readable summary."""
        lines = [f"Checked {self.routes_checked} routes."]
        if self.ok and not self.warnings:
            lines.append("No issues found.")
        elif self.ok:
            lines.append(f"No errors. {len(self.warnings)} warning(s).")
        else:
            lines.append(f"{len(self.errors)} error(s), {len(self.warnings)} warning(s).")
        for issue in self.issues:
            prefix = issue.severity.value.upper()
            loc = f" in {issue.template}" if issue.template else ""
            lines.append(f"  [{prefix}] {issue.message}{loc}")
        return "\n".join(lines)


def check_views(table: RouteTable, env: Environment, config: AppConfig) -> CheckResult:
    """Check that every route's view exists and compiles.

    Missing or unparsable views are errors. Templates under the view
    directory that no route renders are reported as warnings.
    """
    result = CheckResult(routes_checked=len(table))
    expected: set[str] = set()

    for route in table.routes:
        name = view_name(route.resource, config)
        expected.add(name)
        try:
            env.get_template(name)
        except TemplateNotFoundError:
            result.issues.append(
                CheckIssue(
                    Severity.ERROR,
                    f"Route {route.path!r} renders {route.resource!r} but the view is missing",
                    route=route.path,
                    template=name,
                )
            )
        except TemplateSyntaxError as exc:
            result.issues.append(
                CheckIssue(
                    Severity.ERROR,
                    f"View for route {route.path!r} does not compile: {exc}",
                    route=route.path,
                    template=name,
                )
            )

    for name in _list_views(env, config):
        if name not in expected:
            result.issues.append(
                CheckIssue(Severity.WARNING, "No route renders this view", template=name)
            )

    return result


def _list_views(env: Environment, config: AppConfig) -> list[str]:
    """Template names under the view directory, if the loader can list them."""
    list_fn = getattr(env.loader, "list_templates", None)
    if list_fn is None:
        return []
    prefix = f"{config.view_dir.strip('/')}/" if config.view_dir else ""
    return sorted(
        name
        for name in list_fn()
        if name.startswith(prefix) and name.endswith(config.template_suffix)
    )
