"""Expression trees built from postfix or prefix notation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Optional

OPERATORS = frozenset("+-*/^")


@dataclass
class ExprNode:
    """A node holding one operand or operator character."""

    value: str
    left: Optional[ExprNode] = None
    right: Optional[ExprNode] = None

    def children(self) -> Iterator[ExprNode]:
        if self.left is not None:
            yield self.left
        if self.right is not None:
            yield self.right


def is_operator(char: str) -> bool:
    return char in OPERATORS


def _tokens(expression: str) -> list[str]:
    return [char for char in expression if not char.isspace()]


def _build(tokens: Iterable[str], operand_first_is_left: bool) -> ExprNode:
    stack: list[ExprNode] = []
    for token in tokens:
        if is_operator(token):
            if len(stack) < 2:
                raise ValueError(f"operator {token!r} lacks operands")
            first = stack.pop()
            second = stack.pop()
            if operand_first_is_left:
                stack.append(ExprNode(token, first, second))
            else:
                stack.append(ExprNode(token, second, first))
        else:
            stack.append(ExprNode(token))
    if not stack:
        raise ValueError("empty expression")
    return stack[-1]


def from_postfix(expression: str) -> ExprNode:
    """Build a tree from a postfix expression of single-character tokens."""
    return _build(_tokens(expression), operand_first_is_left=False)


def from_prefix(expression: str) -> ExprNode:
    """Build a tree from a prefix expression of single-character tokens."""
    return _build(reversed(_tokens(expression)), operand_first_is_left=True)


def level_order(root: Optional[ExprNode]) -> list[list[str]]:
    result: list[list[str]] = []
    level = [root] if root is not None else []
    while level:
        result.append([node.value for node in level])
        level = [child for node in level for child in node.children()]
    return result


def _preorder(node: Optional[ExprNode]) -> Iterator[str]:
    if node is not None:
        yield node.value
        yield from _preorder(node.left)
        yield from _preorder(node.right)


def _inorder(node: Optional[ExprNode]) -> Iterator[str]:
    if node is not None:
        yield from _inorder(node.left)
        yield node.value
        yield from _inorder(node.right)


def _postorder(node: Optional[ExprNode]) -> Iterator[str]:
    if node is not None:
        yield from _postorder(node.left)
        yield from _postorder(node.right)
        yield node.value


def preorder(root: Optional[ExprNode]) -> list[str]:
    return list(_preorder(root))


def inorder(root: Optional[ExprNode]) -> list[str]:
    return list(_inorder(root))


def postorder(root: Optional[ExprNode]) -> list[str]:
    return list(_postorder(root))


def preorder_iterative(root: Optional[ExprNode]) -> list[str]:
    result: list[str] = []
    stack: list[ExprNode] = []
    node = root
    while stack or node is not None:
        while node is not None:
            result.append(node.value)
            stack.append(node)
            node = node.left
        node = stack.pop().right
    return result


def inorder_iterative(root: Optional[ExprNode]) -> list[str]:
    result: list[str] = []
    stack: list[ExprNode] = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        result.append(node.value)
        node = node.right
    return result


def postorder_iterative(root: Optional[ExprNode]) -> list[str]:
    result: list[str] = []
    stack: list[list] = []

    def descend(node: Optional[ExprNode]) -> None:
        while node is not None:
            stack.append([node, False])
            node = node.left

    descend(root)
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