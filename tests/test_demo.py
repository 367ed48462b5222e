import pytest

from src.kotree.demo import DEMO_QUERIES, build_demo_tree, query_tree, run_demo
from src.kotree.tree import construct, keys


class TestDemo:
    def test_tree_shape(self) -> None:
        tree = build_demo_tree()
        assert tree is not None
        assert tree.key == "hello"
        assert tree.right is None
        assert tree.left is not None
        assert tree.left.key == "world"
        assert tree.left.is_leaf()

    def test_tree_is_not_ordered(self) -> None:
        assert list(keys(build_demo_tree())) == ["world", "hello"]

    def test_queries(self) -> None:
        assert DEMO_QUERIES == ("hi", "world")

    def test_results(self) -> None:
        assert run_demo() == [("hi", False), ("world", True)]

    def test_custom_tree(self) -> None:
        tree = construct(None, "hi", None)
        assert query_tree(tree) == [("hi", True), ("world", False)]

    def test_empty_tree(self) -> None:
        assert query_tree(None) == [("hi", False), ("world", False)]

    def test_quiet_by_default(self, capsys: pytest.CaptureFixture[str]) -> None:
        run_demo()
        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err == ""

    def test_logging(self, capsys: pytest.CaptureFixture[str]) -> None:
        run_demo(is_logging=True)
        assert "Built the demo tree" in capsys.readouterr().out
