"""A 2-3 search tree of strings."""

from __future__ import annotations

import sys
from bisect import bisect_left, bisect_right
from collections.abc import Iterator
from dataclasses import dataclass, field

MENU = (
    "1. Insert",
    "2. Remove",
    "3. Print",
    "4. Search",
    "5. Quit",
)
QUIT = 5


@dataclass(eq=False)
class Node:
    """A 2-node (one key, two children) or 3-node (two keys, three children)."""

    keys: list[str]
    children: list[Node] = field(default_factory=list, repr=False)

    @property
    def is_leaf(self) -> bool:
        return not self.children

    @property
    def is_three_node(self) -> bool:
        return len(self.keys) == 2


def _insert(node: Node, key: str) -> tuple[str, Node, Node] | None:
    """Insert ``key`` below ``node``; return (middle, left, right) if ``node`` split."""
    if node.is_leaf:
        node.keys.insert(bisect_left(node.keys, key), key)
    else:
        index = bisect_right(node.keys, key)
        promoted = _insert(node.children[index], key)
        if promoted is None:
            return None
        middle, left, right = promoted
        node.keys.insert(index, middle)
        node.children[index : index + 1] = [left, right]

    if len(node.keys) < 3:
        return None
    left = Node([node.keys[0]], node.children[:2])
    right = Node([node.keys[2]], node.children[2:])
    return node.keys[1], left, right


def _pre_order(node: Node | None) -> Iterator[str]:
    if node is None:
        return
    yield node.keys[0]
    if node.is_three_node:
        if not node.is_leaf:
            yield from _pre_order(node.children[0])
        yield node.keys[1]
        for child in node.children[1:]:
            yield from _pre_order(child)
    else:
        for child in node.children:
            yield from _pre_order(child)


def _in_order(node: Node | None) -> Iterator[str]:
    if node is None:
        return
    if node.is_leaf:
        yield from node.keys
        return
    for child, key in zip(node.children, node.keys):
        yield from _in_order(child)
        yield key
    yield from _in_order(node.children[-1])


def _post_order(node: Node | None) -> Iterator[str]:
    if node is None:
        return
    if node.is_leaf:
        yield from node.keys
        return
    if node.is_three_node:
        yield from _post_order(node.children[0])
        yield from _post_order(node.children[1])
        yield node.keys[0]
        yield from _post_order(node.children[2])
        yield node.keys[1]
    else:
        for child in node.children:
            yield from _post_order(child)
        yield node.keys[0]


class TwoThreeTree:
    """A balanced 2-3 tree of strings; repeated keys are kept."""

    def __init__(self) -> None:
        self.root: Node | None = None

    def insert(self, key: str) -> None:
        """Insert ``key``, splitting full nodes on the way back up."""
        if self.root is None:
            self.root = Node([key])
            return
        promoted = _insert(self.root, key)
        if promoted is not None:
            middle, left, right = promoted
            self.root = Node([middle], [left, right])

    def search(self, key: str) -> bool:
        """Return True if ``key`` is in the tree."""
        node = self.root
        while node is not None:
            if key in node.keys:
                return True
            if node.is_leaf:
                return False
            node = node.children[bisect_right(node.keys, key)]
        return False

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.search(key)

    def pre_order(self) -> list[str]:
        """Return keys: first key, left subtree, second key, remaining subtrees."""
        return list(_pre_order(self.root))

    def in_order(self) -> list[str]:
        """Return keys in sorted order."""
        return list(_in_order(self.root))

    def post_order(self) -> list[str]:
        """Return keys in post-order; a 3-node gives left, middle, first key, right, second key."""
        return list(_post_order(self.root))


def _format(keys: list[str]) -> str:
    return "".join(f"{key}, " for key in keys)


def _read_line() -> str | None:
    line = sys.stdin.readline()
    if not line:
        return None
    return line.rstrip("\r\n")


def _menu() -> int | None:
    print()
    print("Enter menu choice: ")
    for item in MENU:
        print(item)
    line = _read_line()
    if line is None:
        return None
    words = line.split()
    try:
        return int(words[0]) if words else 0
    except ValueError:
        return 0


def main(argv: list[str] | None = None) -> int:
    """Run the interactive movie-title tree menu on standard input."""
    tree = TwoThreeTree()
    prompts = {
        1: "Enter movie title to insert: ",
        2: "Enter movie title to remove: ",
        4: "Enter movie title to search for: ",
    }
    choice = _menu()
    while choice is not None and choice != QUIT:
        if choice in prompts:
            print(prompts[choice], end="")
            entry = _read_line()
            if entry is None:
                break
            print()
            if choice == 1:
                tree.insert(entry)
            elif choice == 4:
                print("Found" if tree.search(entry) else "Not Found")
        elif choice == 3:
            print(f"Preorder = {_format(tree.pre_order())}")
            print(f"Inorder = {_format(tree.in_order())}")
            print(f"Postorder = {_format(tree.post_order())}")
        choice = _menu()
    return 0