"""Tests for wren.routing.table — static route table."""

import threading

import pytest

from wren.errors import DuplicateRoute, HTTPError, InvalidRoute, RouteNotFound
from wren.routing.route import Route
from wren.routing.table import RouteTable


def _table(*pairs: tuple[str, str]) -> RouteTable:
    table = RouteTable()
    for path, resource in pairs:
        table.register(path, resource)
    table.compile()
    return table


class TestRegister:
    def test_register_returns_route(self) -> None:
        table = RouteTable()
        route = table.register("one-line-a-day", "OneLineADay")
        assert route == Route("one-line-a-day", "OneLineADay")

    def test_add_prebuilt_route(self) -> None:
        table = RouteTable()
        table.add(Route("one-line-a-day", "OneLineADay"))
        assert table.lookup("one-line-a-day") == "OneLineADay"

    def test_duplicate_path_fails(self) -> None:
        table = RouteTable()
        table.register("one-line-a-day", "A")
        with pytest.raises(DuplicateRoute) as exc_info:
            table.register("one-line-a-day", "B")
        err = exc_info.value
        assert err.path == "one-line-a-day"
        assert err.existing == "A"
        assert err.resource == "B"
        assert "one-line-a-day" in str(err)

    def test_duplicate_does_not_overwrite(self) -> None:
        table = RouteTable()
        table.register("one-line-a-day", "A")
        with pytest.raises(DuplicateRoute):
            table.register("one-line-a-day", "B")
        assert table.lookup("one-line-a-day") == "A"

    def test_duplicate_same_resource_still_fails(self) -> None:
        table = RouteTable()
        table.register("one-line-a-day", "A")
        with pytest.raises(DuplicateRoute):
            table.register("one-line-a-day", "A")

    def test_register_after_compile_fails(self) -> None:
        table = _table(("a", "A"))
        with pytest.raises(RuntimeError, match="after compilation"):
            table.register("b", "B")
        assert "b" not in table

    def test_compile_is_idempotent(self) -> None:
        table = _table(("a", "A"))
        table.compile()
        assert table.compiled is True
        assert table.lookup("a") == "A"


class TestLookup:
    def test_exact_match(self) -> None:
        table = _table(("one-line-a-day", "OneLineADay"), ("blazor-hosting-models", "BlazorHostingModels"))
        assert table.lookup("one-line-a-day") == "OneLineADay"
        assert table.lookup("blazor-hosting-models") == "BlazorHostingModels"

    @pytest.mark.parametrize(
        "path",
        [
            "nonexistent-path",
            "",
            "/one-line-a-day",
            "one-line-a-day/",
            "One-Line-A-Day",
            "ONE-LINE-A-DAY",
            "one-line-a-da",
            "one-line-a-day-2",
            " one-line-a-day",
        ],
    )
    def test_miss_returns_none(self, path: str) -> None:
        table = _table(("one-line-a-day", "OneLineADay"))
        assert table.lookup(path) is None

    def test_empty_table(self) -> None:
        table = _table()
        assert table.lookup("anything") is None
        assert len(table) == 0

    def test_lookup_before_compile(self) -> None:
        table = RouteTable()
        table.register("a", "A")
        assert table.lookup("a") == "A"

    def test_deterministic(self) -> None:
        table = _table(("a", "A"))
        assert {table.lookup("a") for _ in range(100)} == {"A"}

    def test_concurrent_readers(self) -> None:
        pairs = [(f"post-{i}", f"Post{i}") for i in range(200)]
        table = _table(*pairs)
        failures: list[str] = []

        def reader() -> None:
            for path, resource in pairs:
                if table.lookup(path) != resource:
                    failures.append(path)

        threads = [threading.Thread(target=reader) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        assert failures == []


class TestResolve:
    def test_found(self) -> None:
        table = _table(("one-line-a-day", "OneLineADay"))
        assert table.resolve("one-line-a-day") == Route("one-line-a-day", "OneLineADay")

    def test_missing_raises_route_not_found(self) -> None:
        table = _table(("one-line-a-day", "OneLineADay"))
        with pytest.raises(RouteNotFound) as exc_info:
            table.resolve("nonexistent-path")
        assert exc_info.value.status == 404
        assert exc_info.value.path == "nonexistent-path"
        assert isinstance(exc_info.value, HTTPError)


class TestExtend:
    def test_adds_routes_and_pairs_in_order(self) -> None:
        table = RouteTable()
        table.register("a", "A")
        table.extend([Route("b", "B"), ("c", "C")])
        assert list(table) == ["a", "b", "c"]

    def test_duplicate_in_batch_leaves_table_unchanged(self) -> None:
        table = RouteTable()
        table.register("a", "A")
        with pytest.raises(DuplicateRoute):
            table.extend([("b", "B"), ("c", "C"), ("b", "Other")])
        assert table.as_dict() == {"a": "A"}

    def test_clash_with_existing_leaves_table_unchanged(self) -> None:
        table = RouteTable()
        table.register("a", "A")
        with pytest.raises(DuplicateRoute):
            table.extend([("b", "B"), ("a", "Other")])
        assert table.as_dict() == {"a": "A"}

    def test_invalid_entry_leaves_table_unchanged(self) -> None:
        table = RouteTable()
        with pytest.raises(InvalidRoute):
            table.extend([("b", "B"), ("/bad/", "Bad")])
        assert len(table) == 0

    def test_extend_after_compile_fails(self) -> None:
        table = RouteTable()
        table.compile()
        with pytest.raises(RuntimeError, match="after compilation"):
            table.extend([("a", "A")])


class TestFromRoutes:
    def test_routes_and_pairs(self) -> None:
        table = RouteTable.from_routes([Route("a", "A"), ("b", "B")])
        assert table.compiled is True
        assert table.as_dict() == {"a": "A", "b": "B"}

    def test_duplicates_rejected(self) -> None:
        with pytest.raises(DuplicateRoute):
            RouteTable.from_routes([("a", "A"), ("a", "B")])


class TestIntrospection:
    def test_routes_in_registration_order(self) -> None:
        table = _table(("b", "B"), ("a", "A"))
        assert table.routes == (Route("b", "B"), Route("a", "A"))

    def test_contains_iter_len(self) -> None:
        table = _table(("a", "A"), ("b", "B"))
        assert "a" in table
        assert "c" not in table
        assert 3 not in table
        assert list(table) == ["a", "b"]
        assert len(table) == 2

    def test_as_dict_is_a_copy(self) -> None:
        table = _table(("a", "A"))
        snapshot = table.as_dict()
        snapshot["b"] = "B"
        assert "b" not in table

    def test_repr(self) -> None:
        table = RouteTable()
        table.register("a", "A")
        assert repr(table) == "<RouteTable 1 routes (open)>"
        table.compile()
        assert repr(table) == "<RouteTable 1 routes (compiled)>"
