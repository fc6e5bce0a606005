"""Binary search tree with traversals, structural queries and helpers."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Iterable, Iterator, Optional


@dataclass
class Node:
    """A binary tree node."""

    value: int
    left: Optional[Node] = None
    right: Optional[Node] = None

    @property
    def is_leaf(self) -> bool:
        return self.left is None and self.right is None

    def children(self) -> Iterator[Node]:
        if self.left is not None:
            yield self.left
        if self.right is not None:
            yield self.right


def _copy(node: Optional[Node]) -> Optional[Node]:
    if node is None:
        return None
    return Node(node.value, _copy(node.left), _copy(node.right))


def _min_node(node: Node) -> Node:
    while node.left is not None:
        node = node.left
    return node


def _max_node(node: Node) -> Node:
    while node.right is not None:
        node = node.right
    return node


def _delete(node: Optional[Node], value: int) -> Optional[Node]:
    if node is None:
        raise KeyError(value)
    if value < node.value:
        node.left = _delete(node.left, value)
        return node
    if value > node.value:
        node.right = _delete(node.right, value)
        return node
    if node.left is None:
        return node.right
    if node.right is None:
        return node.left
    successor = _min_node(node.right)
    node.value = successor.value
    node.right = _delete(node.right, successor.value)
    return node


def _preorder(node: Optional[Node]) -> Iterator[int]:
    if node is not None:
        yield node.value
        yield from _preorder(node.left)
        yield from _preorder(node.right)


def _inorder(node: Optional[Node]) -> Iterator[int]:
    if node is not None:
        yield from _inorder(node.left)
        yield node.value
        yield from _inorder(node.right)


def _postorder(node: Optional[Node]) -> Iterator[int]:
    if node is not None:
        yield from _postorder(node.left)
        yield from _postorder(node.right)
        yield node.value


def _level_nodes(root: Optional[Node]) -> Iterator[list[Node]]:
    level = [root] if root is not None else []
    while level:
        yield level
        level = [child for node in level for child in node.children()]


class BinarySearchTree:
    """An unbalanced binary search tree of distinct values."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self.root: Optional[Node] = None
        for value in values:
            self.insert(value)

    def insert(self, value: int) -> bool:
        """Insert a value; return False if it was already present."""
        new = Node(value)
        if self.root is None:
            self.root = new
            return True
        node = self.root
        while True:
            if value == node.value:
                return False
            if value > node.value:
                if node.right is None:
                    node.right = new
                    return True
                node = node.right
            else:
                if node.left is None:
                    node.left = new
                    return True
                node = node.left

    def delete(self, value: int) -> None:
        """Remove a value; raise KeyError if it is absent."""
        self.root = _delete(self.root, value)

    def __contains__(self, value: object) -> bool:
        node = self.root
        while node is not None:
            if value == node.value:
                return True
            node = node.right if value > node.value else node.left  # type: ignore[operator]
        return False

    def preorder(self) -> list[int]:
        return list(_preorder(self.root))

    def preorder_iterative(self) -> list[int]:
        result: list[int] = []
        stack: list[Node] = []
        node = self.root
        while stack or node is not None:
            while node is not None:
                result.append(node.value)
                stack.append(node)
                node = node.left
            node = stack.pop().right
        return result

    def inorder(self) -> list[int]:
        return list(_inorder(self.root))

    def inorder_iterative(self) -> list[int]:
        result: list[int] = []
        stack: list[Node] = []
        node = self.root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            result.append(node.value)
            node = node.right
        return result

    def postorder(self) -> list[int]:
        return list(_postorder(self.root))

    def postorder_iterative(self) -> list[int]:
        result: list[int] = []
        stack: list[list] = []

        def descend(node: Optional[Node]) -> None:
            while node is not None:
                stack.append([node, False])
                node = node.left

        descend(self.root)
        while stack:
            entry = stack[-1]
            node, visited = entry
            if visited:
                stack.pop()
                result.append(node.value)
            else:
                entry[1] = True
                descend(node.right)
        return result

    def height(self) -> int:
        """Number of edges on the longest root-to-leaf path; -1 when empty."""
        return sum(1 for _ in _level_nodes(self.root)) - 1

    def levels(self) -> list[list[int]]:
        return [[node.value for node in level] for level in _level_nodes(self.root)]

    def mirror(self) -> None:
        """Swap the children of every node in place."""
        queue = deque([self.root] if self.root is not None else [])
        while queue:
            node = queue.popleft()
            node.left, node.right = node.right, node.left
            queue.extend(node.children())

    def copy(self) -> BinarySearchTree:
        duplicate = BinarySearchTree()
        duplicate.root = _copy(self.root)
        return duplicate

    def parent_children(self) -> list[tuple[int, tuple[int, ...]]]:
        """Each node in level order with the values of its children."""
        return [
            (node.value, tuple(child.value for child in node.children()))
            for level in _level_nodes(self.root)
            for node in level
        ]

    def leaves(self) -> list[int]:
        return [node_value for node_value, node in self._walk_leaves(self.root)]

    def _walk_leaves(self, node: Optional[Node]) -> Iterator[tuple[int, Node]]:
        if node is None:
            return
        if node.is_leaf:
            yield node.value, node
            return
        yield from self._walk_leaves(node.left)
        yield from self._walk_leaves(node.right)

    def minimum(self) -> int:
        """Value of the leftmost node."""
        if self.root is None:
            raise ValueError("minimum of an empty tree")
        return _min_node(self.root).value

    def maximum(self) -> int:
        """Value of the rightmost node."""
        if self.root is None:
            raise ValueError("maximum of an empty tree")
        return _max_node(self.root).value


def tree_from_preorder(tokens: Iterable) -> Optional[Node]:
    """Build a binary tree from preorder tokens where -1 marks an empty child."""
    stream = iter(tokens)

    def build() -> Optional[Node]:
        try:
            token = next(stream)
        except StopIteration:
            raise ValueError("token sequence ended before the tree was complete") from None
        value = int(token)
        if value == -1:
            return None
        left = build()
        right = build()
        return Node(value, left, right)

    return build()


def tree_height(node: Optional[Node]) -> int:
    """Number of nodes on the longest root-to-leaf path; 0 for no tree."""
    if node is None:
        return 0
    return 1 + max(tree_height(node.left), tree_height(node.right))