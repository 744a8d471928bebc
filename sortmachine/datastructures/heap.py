"""
Array heap primitives.

The functions here treat a :class:`FixedArray` as a complete binary tree
laid out over its indices: the children of slot ``i`` are ``2 * i + 1``
and ``2 * i + 2``. A *subtree range* is a root index ``top`` plus an
inclusive ``last`` index; slots past ``last`` are not part of the tree
and are never read.

Ordering comes from a comparator ``order(a, b)`` returning a negative
number, zero or a positive number, which must be a total preorder.
The tree is a min-heap under that comparator: no node is strictly
greater than either of its children.
"""

from __future__ import annotations
from typing import Callable, List, TypeVar

from .array import FixedArray
from .queue import Queue

T = TypeVar("T")

Comparator = Callable[[T, T], int]


def _check_range(array: FixedArray[T], top: int, last: int) -> None:
    if top < 0:
        raise ValueError("top must be >= 0")
    if last >= len(array):
        raise IndexError(f"last index {last} beyond array capacity {len(array)}")


def sift_down(array: FixedArray[T], top: int, last: int, order: Comparator[T]) -> None:
    """Restore the heap property of the subtree rooted at `top`.

    Both subtrees of `top` (through `last`) must already be heaps; only the
    entry at `top` may be out of place. The entry is exchanged with its
    smaller child until neither child is strictly smaller. When the two
    children are equivalent the left one is taken. O(log n).
    """
    _check_range(array, top, last)
    while True:
        left = 2 * top + 1
        if left > last:
            break
        right = left + 1
        smallest = left
        if right <= last and order(array.entry(right), array.entry(left)) < 0:
            smallest = right
        if order(array.entry(top), array.entry(smallest)) <= 0:
            break
        array.exchange_entries(top, smallest)
        top = smallest


def heapify(array: FixedArray[T], top: int, order: Comparator[T]) -> None:
    """Turn the subtree rooted at `top` (through the end of `array`) into a heap.

    Internal nodes are sifted down deepest level first, right to left, so
    every node is handled after both of its subtrees. O(n) overall.
    """
    last = len(array) - 1
    _check_range(array, top, last)

    internal: List[int] = []
    start, width = top, 1
    while start <= last:
        for i in range(start, min(start + width, last + 1)):
            if 2 * i + 1 <= last:
                internal.append(i)
        start, width = 2 * start + 1, 2 * width

    for i in reversed(internal):
        sift_down(array, i, last, order)


def build_heap(queue: Queue[T], order: Comparator[T]) -> FixedArray[T]:
    """Drain `queue` into a new array sized to fit and heapify it.

    The queue is left empty. The returned array holds exactly the drained
    items and satisfies the heap property over all of its slots.
    """
    heap: FixedArray[T] = FixedArray(len(queue))
    for i, item in enumerate(queue.drain()):
        heap.set_entry(i, item)
    heapify(heap, 0, order)
    return heap


def is_heap(array: FixedArray[T], top: int, last: int, order: Comparator[T]) -> bool:
    """Return True if the subtree rooted at `top` (through `last`) is a heap.

    Leaves and empty ranges are heaps.
    """
    _check_range(array, top, last)
    pending = [top]
    while pending:
        i = pending.pop()
        for child in (2 * i + 1, 2 * i + 2):
            if child > last:
                break
            if order(array.entry(i), array.entry(child)) > 0:
                return False
            pending.append(child)
    return True
