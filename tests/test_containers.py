import pytest

from dsalgo.containers import (
    BoundedStack,
    CircularQueue,
    DisjointSet,
    LinkedList,
    QueueEmptyError,
    QueueFullError,
    StackOverflowError,
    StackUnderflowError,
)


def test_queue_session_from_example():
    queue = CircularQueue(6)
    for value in [2, 6, 8, 9, 22]:
        queue.enqueue(value)
    assert list(queue) == [2, 6, 8, 9, 22]
    queue.enqueue(7)
    with pytest.raises(QueueFullError):
        queue.enqueue(1)
    assert queue.dequeue() == 2
    assert queue.dequeue() == 6
    assert list(queue) == [8, 9, 22, 7]


def test_queue_wraps_around():
    queue = CircularQueue(3)
    for value in (1, 2, 3):
        queue.enqueue(value)
    assert queue.dequeue() == 1
    queue.enqueue(4)
    assert list(queue) == [2, 3, 4]
    assert len(queue) == 3


def test_queue_empty_errors():
    queue = CircularQueue(2)
    with pytest.raises(QueueEmptyError):
        queue.dequeue()
    queue.enqueue("a")
    assert queue.dequeue() == "a"
    assert len(queue) == 0
    with pytest.raises(QueueEmptyError):
        queue.dequeue()


def test_queue_fifo_order_over_many_cycles():
    queue = CircularQueue(4)
    out = []
    for value in range(20):
        queue.enqueue(value)
        if len(queue) == 4:
            out.append(queue.dequeue())
    while len(queue):
        out.append(queue.dequeue())
    assert out == list(range(20))


def test_queue_capacity_one():
    queue = CircularQueue(1)
    queue.enqueue(5)
    with pytest.raises(QueueFullError):
        queue.enqueue(6)
    assert queue.dequeue() == 5


def test_queue_rejects_zero_capacity():
    with pytest.raises(ValueError):
        CircularQueue(0)


def test_stack_lifo_and_limits():
    stack = BoundedStack(3)
    for value in (1, 2, 3):
        stack.push(value)
    with pytest.raises(StackOverflowError):
        stack.push(4)
    assert [stack.pop(), stack.pop(), stack.pop()] == [3, 2, 1]
    assert len(stack) == 0
    with pytest.raises(StackUnderflowError):
        stack.pop()


def test_linked_list_display_format():
    assert str(LinkedList([1, 2, 3, 4, 5])) == "1->2->3->4->5->"
    assert str(LinkedList()) == ""


def test_linked_list_concatenate():
    first = LinkedList([1, 2, 3, 4, 5])
    second = LinkedList([6, 7, 8, 9, 10])
    first.extend(second)
    assert list(first) == [1, 2, 3, 4, 5, 6, 7, 8, 9, 10]
    assert list(second) == []


def test_linked_list_concatenate_onto_empty_and_then_append_more():
    first = LinkedList()
    first.extend(LinkedList([1, 2]))
    first.extend(LinkedList([3]))
    first.extend(LinkedList())
    assert list(first) == [1, 2, 3]


def test_linked_list_self_concatenate_rejected():
    items = LinkedList([1])
    with pytest.raises(ValueError):
        items.extend(items)


def test_disjoint_set_starts_as_singletons():
    dsu = DisjointSet(5)
    assert [dsu.find(i) for i in range(1, 6)] == [1, 2, 3, 4, 5]


def test_disjoint_set_union_is_transitive():
    dsu = DisjointSet(6)
    dsu.union(1, 2)
    dsu.union(3, 4)
    dsu.union(2, 4)
    roots = {dsu.find(i) for i in (1, 2, 3, 4)}
    assert len(roots) == 1
    assert dsu.find(5) == 5
    assert dsu.find(6) == 6
    assert dsu.find(1) != dsu.find(5)


def test_disjoint_set_equal_rank_union_parent():
    dsu = DisjointSet(2)
    dsu.union(1, 2)
    assert dsu.find(1) == 2


def test_disjoint_set_bounds():
    dsu = DisjointSet(3)
    with pytest.raises(IndexError):
        dsu.find(0)
    with pytest.raises(IndexError):
        dsu.union(1, 4)