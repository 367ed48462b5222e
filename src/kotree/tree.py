from functools import reduce
from typing import Iterable, Iterator, NamedTuple

from loguru import logger
from toolz import pipe

from .utils.bounded_string import MAX_STRING_LEN, make_string
from .utils.checked import checked_new
from .utils.log import configure_logger


class Node(NamedTuple):
    left: "Node | None"
    key: str
    right: "Node | None"

    def __str__(self) -> str:
        return f"key: {self.key}, left: {self.left}, right: {self.right}"

    def is_leaf(self) -> bool:
        return (self.left is None) and (self.right is None)


# None is the empty tree.
Tree = Node | None


def construct(left: Tree, key: str, right: Tree) -> Node:
    return checked_new(Node, left, key, right)


# Returns a new tree that contains the key. Nodes of the given tree are never modified;
# only the nodes on the path to the key are rebuilt, the rest are shared.
def insert(key: str, tree: Tree) -> Tree:
    if tree is None:
        return construct(None, key, None)
    elif key < tree.key:
        return construct(insert(key, tree.left), tree.key, tree.right)
    elif key > tree.key:
        return construct(tree.left, tree.key, insert(key, tree.right))
    else:
        return construct(tree.left, key, tree.right)


# Only the first MAX_STRING_LEN characters are compared, and the key ordering is not used,
# so both subtrees are searched whenever the current node does not match.
def member(key: str, tree: Tree) -> bool:
    if tree is None:
        return False
    if key[:MAX_STRING_LEN] == tree.key[:MAX_STRING_LEN]:
        return True
    return member(key, tree.left) or member(key, tree.right)


def keys(tree: Tree) -> Iterator[str]:
    if tree is not None:
        yield from keys(tree.left)
        yield tree.key
        yield from keys(tree.right)


def size(tree: Tree) -> int:
    if tree is None:
        return 0
    return size(tree.left) + 1 + size(tree.right)


def height(tree: Tree) -> int:
    if tree is None:
        return 0
    return max(height(tree.left), height(tree.right)) + 1


def from_keys(
    raw_keys: Iterable[str], tree: Tree = None, is_logging: bool = False
) -> Tree:
    configure_logger(is_logging)

    def insert_one(t: Tree, key: str) -> Tree:
        logger.debug(f"Inserting key: {key}")
        return insert(key, t)

    return pipe(
        raw_keys,
        lambda arg: map(make_string, arg),
        lambda arg: reduce(insert_one, arg, tree),
    )


# The right subtree is drawn above the node and the left subtree below it.
def format_tree(tree: Tree) -> str:
    lines: list[str] = []

    def format_node(node: Tree, start_depth: int) -> None:
        if node is not None:
            format_node(node.right, start_depth + 1)
            lines.append(f'{" " * 4 * start_depth} -> [{node.key}]')
            format_node(node.left, start_depth + 1)

    format_node(tree, 0)
    return "\n".join(lines)
