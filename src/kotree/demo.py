from loguru import logger

from .tree import Tree, construct, member
from .utils.bounded_string import make_string
from .utils.log import configure_logger

DEMO_QUERIES = ("hi", "world")


# "world" sits on the left of "hello" even though it is the greater key.
# insert() would never build this tree, member() still finds "world".
def build_demo_tree() -> Tree:
    return construct(
        construct(None, make_string("world"), None), make_string("hello"), None
    )


def query_tree(tree: Tree) -> list[tuple[str, bool]]:
    return [(query, member(make_string(query), tree)) for query in DEMO_QUERIES]


def run_demo(is_logging: bool = False) -> list[tuple[str, bool]]:
    configure_logger(is_logging)

    tree = build_demo_tree()
    logger.info("Built the demo tree")

    results = query_tree(tree)
    logger.info(f"Looked up {len(results)} keys")
    return results
