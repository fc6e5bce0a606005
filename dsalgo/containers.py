"""Bounded queue and stack, a singly linked list and a disjoint-set forest."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Iterator, Optional


class QueueFullError(Exception):
    """Raised when enqueuing into a full circular queue."""


class QueueEmptyError(Exception):
    """Raised when dequeuing from an empty circular queue."""


class StackOverflowError(Exception):
    """Raised when pushing onto a full bounded stack."""


class StackUnderflowError(Exception):
    """Raised when popping from an empty bounded stack."""


class CircularQueue:
    """A fixed-capacity FIFO queue stored in a ring."""

    def __init__(self, capacity: int) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self.capacity = capacity
        self._slots: list[Any] = [None] * capacity
        self._front = 0
        self._count = 0

    def enqueue(self, value: Any) -> None:
        if self._count == self.capacity:
            raise QueueFullError("queue is full")
        rear = (self._front + self._count) % self.capacity
        self._slots[rear] = value
        self._count += 1

    def dequeue(self) -> Any:
        if self._count == 0:
            raise QueueEmptyError("queue is empty")
        value = self._slots[self._front]
        self._slots[self._front] = None
        self._count -= 1
        self._front = 0 if self._count == 0 else (self._front + 1) % self.capacity
        return value

    def __iter__(self) -> Iterator[Any]:
        for offset in range(self._count):
            yield self._slots[(self._front + offset) % self.capacity]

    def __len__(self) -> int:
        return self._count


class BoundedStack:
    """A LIFO stack holding at most ``capacity`` items."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._items: list[Any] = []

    def push(self, value: Any) -> None:
        if len(self._items) == self.capacity:
            raise StackOverflowError("stack is full")
        self._items.append(value)

    def pop(self) -> Any:
        if not self._items:
            raise StackUnderflowError("stack is empty")
        return self._items.pop()

    def __len__(self) -> int:
        return len(self._items)


@dataclass(eq=False)
class _ListNode:
    value: Any
    next: Optional[_ListNode] = None


class LinkedList:
    """A singly linked list."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head: Optional[_ListNode] = None
        self._tail: Optional[_ListNode] = None
        for value in values:
            node = _ListNode(value)
            if self._tail is None:
                self._head = node
            else:
                self._tail.next = node
            self._tail = node

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def extend(self, other: LinkedList) -> None:
        """Link the nodes of ``other`` onto the end of this list; ``other`` is left empty."""
        if other is self:
            raise ValueError("cannot concatenate a list onto itself")
        if other._head is None:
            return
        if self._tail is None:
            self._head = other._head
        else:
            self._tail.next = other._head
        self._tail = other._tail
        other._head = other._tail = None

    def __str__(self) -> str:
        return "".join(f"{value}->" for value in self)


class DisjointSet:
    """Union-find over the elements 1..n with union by rank and path compression."""

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError("n must not be negative")
        self.n = n
        self._parent = list(range(n + 1))
        self._rank = [0] * (n + 1)

    def _check(self, node: int) -> None:
        if not 1 <= node <= self.n:
            raise IndexError(f"element {node} is outside 1..{self.n}")

    def find(self, node: int) -> int:
        """Representative of the set holding ``node``."""
        self._check(node)
        root = node
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[node] != root:
            self._parent[node], node = root, self._parent[node]
        return root

    def union(self, a: int, b: int) -> None:
        u = self.find(a)
        v = self.find(b)
        if u == v:
            return
        if self._rank[u] < self._rank[v]:
            self._parent[u] = v
        elif self._rank[u] > self._rank[v]:
            self._parent[v] = u
        else:
            self._parent[u] = v
            self._rank[v] += 1