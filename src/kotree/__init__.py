from .demo import DEMO_QUERIES, build_demo_tree, query_tree, run_demo
from .tree import (
    Node,
    Tree,
    construct,
    format_tree,
    from_keys,
    height,
    insert,
    keys,
    member,
    size,
)
from .utils.bounded_string import MAX_STRING_LEN, make_string
from .utils.log import configure_logger
