"""Tests for wren.support.arr — dotted-path get/set over nested mappings."""

from wren.support import arr


class TestGet:
    def test_nested_value(self) -> None:
        assert arr.get({"a": {"b": {"c": 1}}}, "a.b.c") == 1

    def test_top_level_value(self) -> None:
        assert arr.get({"name": "Taylor"}, "name") == "Taylor"

    def test_intermediate_mapping(self) -> None:
        assert arr.get({"a": {"b": {"c": 1}}}, "a.b") == {"c": 1}

    def test_missing_returns_default(self) -> None:
        assert arr.get({}, "x.y", "d") == "d"

    def test_missing_without_default_is_none(self) -> None:
        assert arr.get({"a": 1}, "b") is None

    def test_none_key_returns_root(self) -> None:
        root = {"a": 1}
        assert arr.get(root, None) is root

    def test_scalar_in_path_returns_default(self) -> None:
        assert arr.get({"a": "scalar"}, "a.b", "d") == "d"

    def test_callable_default_is_called(self) -> None:
        calls: list[int] = []

        def fallback() -> str:
            calls.append(1)
            return "computed"

        assert arr.get({}, "missing", fallback) == "computed"
        assert calls == [1]

    def test_callable_default_not_called_when_found(self) -> None:
        def fallback() -> str:
            raise AssertionError("should not be called")

        assert arr.get({"a": 1}, "a", fallback) == 1

    def test_callable_with_required_argument_returned_unchanged(self) -> None:
        def handler(request: object) -> str:
            raise AssertionError("should not be called")

        assert arr.get({}, "missing", handler) is handler

    def test_callable_with_only_optional_arguments_is_called(self) -> None:
        def fallback(value: str = "computed") -> str:
            return value

        assert arr.get({}, "missing", fallback) == "computed"

    def test_falsy_values_are_returned(self) -> None:
        assert arr.get({"a": {"b": 0}}, "a.b", "d") == 0
        assert arr.get({"a": {"b": None}}, "a.b", "d") is None


class TestSet:
    def test_creates_intermediate_nodes(self) -> None:
        root: dict = {}
        arr.set(root, "a.b", 5)
        assert root == {"a": {"b": 5}}

    def test_mutates_in_place(self) -> None:
        root: dict = {"name": {"is": "something"}}
        returned = arr.set(root, "name.is", "taylor")
        assert returned is root
        assert root == {"name": {"is": "taylor"}}

    def test_preserves_siblings(self) -> None:
        root = {"db": {"default": "sqlite"}}
        arr.set(root, "db.pool.size", 5)
        assert root == {"db": {"default": "sqlite", "pool": {"size": 5}}}

    def test_overwrites_scalar_at_intermediate_segment(self) -> None:
        root = {"a": "scalar"}
        arr.set(root, "a.b.c", 1)
        assert root == {"a": {"b": {"c": 1}}}

    def test_single_segment(self) -> None:
        root: dict = {}
        arr.set(root, "key", "value")
        assert root == {"key": "value"}

    def test_none_key_replaces_root(self) -> None:
        root = {"a": 1}
        new_root = arr.set(root, None, {"b": 2})
        assert new_root == {"b": 2}
        assert root == {"a": 1}


class TestHasAndForget:
    def test_has(self) -> None:
        root = {"a": {"b": None}}
        assert arr.has(root, "a.b") is True
        assert arr.has(root, "a.c") is False
        assert arr.has(root, "a.b.c") is False

    def test_forget_removes_leaf(self) -> None:
        root = {"a": {"b": 1, "c": 2}}
        arr.forget(root, "a.b")
        assert root == {"a": {"c": 2}}

    def test_forget_missing_is_noop(self) -> None:
        root = {"a": "scalar"}
        arr.forget(root, "a.b.c")
        arr.forget(root, "x")
        assert root == {"a": "scalar"}
