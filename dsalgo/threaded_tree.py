"""In-order threaded binary search tree."""

from __future__ import annotations

from typing import Any, Iterable, Iterator, Optional


class _ThreadedNode:
    """A node whose empty child links are threads to in-order neighbours."""

    __slots__ = ("value", "left", "right", "has_left", "has_right")

    def __init__(self, value: Any, left: Optional[_ThreadedNode], right: Optional[_ThreadedNode]) -> None:
        self.value = value
        self.left = left
        self.right = right
        self.has_left = False
        self.has_right = False


class ThreadedBinaryTree:
    """A binary search tree whose null links are replaced by threads.

    Traversals walk the threads instead of using a stack or recursion.
    Duplicate values are ignored.
    """

    def __init__(self, values: Iterable[int] = ()) -> None:
        head = _ThreadedNode(None, None, None)
        head.left = head
        head.right = head
        head.has_right = True
        self._head = head
        self._root: Optional[_ThreadedNode] = None
        for value in values:
            self.insert(value)

    def insert(self, value: int) -> bool:
        """Insert a value; return False if it was already present."""
        head = self._head
        if self._root is None:
            node = _ThreadedNode(value, head, head)
            head.left = node
            head.has_left = True
            self._root = node
            return True

        current = self._root
        while True:
            if value < current.value:
                if not current.has_left:
                    node = _ThreadedNode(value, current.left, current)
                    current.left = node
                    current.has_left = True
                    return True
                current = current.left
            elif value > current.value:
                if not current.has_right:
                    node = _ThreadedNode(value, current, current.right)
                    current.right = node
                    current.has_right = True
                    return True
                current = current.right
            else:
                return False

    def _inorder_successor(self, node: _ThreadedNode) -> _ThreadedNode:
        if not node.has_right:
            return node.right
        node = node.right
        while node.has_left:
            node = node.left
        return node

    @staticmethod
    def _preorder_successor(node: _ThreadedNode) -> _ThreadedNode:
        if node.has_left:
            return node.left
        while not node.has_right:
            node = node.right
        return node.right

    def _walk_inorder(self) -> Iterator[int]:
        if self._root is None:
            return
        node = self._root
        while node.has_left:
            node = node.left
        while node is not self._head:
            yield node.value
            node = self._inorder_successor(node)

    def _walk_preorder(self) -> Iterator[int]:
        if self._root is None:
            return
        node = self._root
        while node is not self._head:
            yield node.value
            node = self._preorder_successor(node)

    def inorder(self) -> list[int]:
        return list(self._walk_inorder())

    def preorder(self) -> list[int]:
        return list(self._walk_preorder())

    def __iter__(self) -> Iterator[int]:
        return self._walk_inorder()