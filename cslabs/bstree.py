"""A binary search tree of strings that counts repeated insertions."""

from __future__ import annotations

import sys
from collections.abc import Iterator
from dataclasses import dataclass, field

MENU = (
    "1. Insert",
    "2. Remove",
    "3. Print",
    "4. Search",
    "5. Smallest",
    "6. Largest",
    "7. Height",
    "8. Quit",
)
QUIT = 8


@dataclass(eq=False)
class Node:
    """A tree node holding a key and how many times it was inserted."""

    key: str
    count: int = 1
    left: Node | None = field(default=None, repr=False)
    right: Node | None = field(default=None, repr=False)


def _leftmost(node: Node) -> Node:
    while node.left is not None:
        node = node.left
    return node


def _rightmost(node: Node) -> Node:
    while node.right is not None:
        node = node.right
    return node


def _remove(node: Node | None, key: str) -> Node | None:
    """Remove one occurrence of ``key`` below ``node``; return the new subtree root."""
    if node is None:
        return None
    if key < node.key:
        node.left = _remove(node.left, key)
        return node
    if key > node.key:
        node.right = _remove(node.right, key)
        return node
    if node.count > 1:
        node.count -= 1
        return node
    if node.left is None and node.right is None:
        return None
    if node.left is None:
        successor = _leftmost(node.right)
        node.key, node.count = successor.key, successor.count
        successor.count = 1
        node.right = _remove(node.right, successor.key)
    else:
        predecessor = _rightmost(node.left)
        node.key, node.count = predecessor.key, predecessor.count
        predecessor.count = 1
        node.left = _remove(node.left, predecessor.key)
    return node


def _subtree_height(node: Node) -> int:
    """Return the number of edges on the longest path down from ``node``."""
    height = -1
    level = [node]
    while level:
        height += 1
        level = [
            child
            for current in level
            for child in (current.left, current.right)
            if child is not None
        ]
    return height


class BSTree:
    """An unbalanced binary search tree of strings with per-key counts."""

    def __init__(self) -> None:
        self.root: Node | None = None

    def empty(self) -> bool:
        """Return True if the tree holds no keys."""
        return self.root is None

    def _find(self, key: str) -> Node | None:
        node = self.root
        while node is not None and node.key != key:
            node = node.left if key < node.key else node.right
        return node

    def insert(self, key: str) -> None:
        """Insert ``key``, or count it once more if it is already present."""
        if self.root is None:
            self.root = Node(key)
            return
        node = self.root
        while True:
            if key == node.key:
                node.count += 1
                return
            if key < node.key:
                if node.left is None:
                    node.left = Node(key)
                    return
                node = node.left
            else:
                if node.right is None:
                    node.right = Node(key)
                    return
                node = node.right

    def remove(self, key: str) -> None:
        """Remove one occurrence of ``key``; missing keys are ignored."""
        self.root = _remove(self.root, key)

    def search(self, key: str) -> bool:
        """Return True if ``key`` is in the tree."""
        return self._find(key) is not None

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.search(key)

    def smallest(self) -> str:
        """Return the smallest key, or an empty string if the tree is empty."""
        return "" if self.root is None else _leftmost(self.root).key

    def largest(self) -> str:
        """Return the largest key, or an empty string if the tree is empty."""
        return "" if self.root is None else _rightmost(self.root).key

    def height(self, key: str) -> int:
        """Return the height of the subtree rooted at ``key``, or -1 if absent."""
        node = self._find(key)
        return -1 if node is None else _subtree_height(node)

    def pre_order(self) -> list[tuple[str, int]]:
        """Return (key, count) pairs in pre-order."""
        result: list[tuple[str, int]] = []
        stack = [self.root] if self.root is not None else []
        while stack:
            node = stack.pop()
            result.append((node.key, node.count))
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)
        return result

    def in_order(self) -> list[tuple[str, int]]:
        """Return (key, count) pairs in sorted order."""
        return [(node.key, node.count) for node in self._in_order_nodes()]

    def _in_order_nodes(self) -> Iterator[Node]:
        stack: list[Node] = []
        node = self.root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node
            node = node.right

    def post_order(self) -> list[tuple[str, int]]:
        """Return (key, count) pairs in post-order."""
        result: list[tuple[str, int]] = []
        stack = [self.root] if self.root is not None else []
        while stack:
            node = stack.pop()
            result.append((node.key, node.count))
            if node.left is not None:
                stack.append(node.left)
            if node.right is not None:
                stack.append(node.right)
        result.reverse()
        return result


def _format(pairs: list[tuple[str, int]]) -> str:
    return "".join(f"{key}({count}), " for key, count in pairs)


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
    """Run the interactive tree menu on standard input."""
    tree = BSTree()
    choice = _menu()
    while choice is not None and choice != QUIT:
        if choice in (1, 2, 4, 7):
            prompt = {
                1: "Enter string to insert: ",
                2: "Enter string to remove: ",
                4: "Enter string to search for: ",
                7: "Enter string: ",
            }[choice]
            print(prompt, end="")
            entry = _read_line()
            if entry is None:
                break
            print()
            if choice == 1:
                tree.insert(entry)
            elif choice == 2:
                tree.remove(entry)
            elif choice == 4:
                print("Found" if tree.search(entry) else "Not Found")
            else:
                print(f"Height of subtree rooted at {entry}: {tree.height(entry)}")
        elif choice == 3:
            print(f"Preorder = {_format(tree.pre_order())}")
            print(f"Inorder = {_format(tree.in_order())}")
            print(f"Postorder = {_format(tree.post_order())}")
        elif choice == 5:
            print(f"Smallest: {tree.smallest()}")
        elif choice == 6:
            print(f"Largest: {tree.largest()}")
        choice = _menu()
    return 0