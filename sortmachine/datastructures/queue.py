from __future__ import annotations
from typing import Generic, Iterable, Iterator, List, Optional, TypeVar

T = TypeVar("T")


class _QNode(Generic[T]):
    """A lightweight node for the singly-linked FIFO queue."""

    __slots__ = ("value", "next")

    def __init__(self, value: T, next: Optional["_QNode[T]"] = None) -> None:
        self.value = value
        self.next = next


class Queue(Generic[T]):
    """Singly-linked FIFO queue with head and tail pointers.

    Enqueue at the tail and dequeue at the head are both O(1). ``drain``
    hands every item over in order and leaves the queue empty.
    """

    __slots__ = ("_head", "_tail", "_size")

    def __init__(self, it: Optional[Iterable[T]] = None) -> None:
        self._head: Optional[_QNode[T]] = None
        self._tail: Optional[_QNode[T]] = None
        self._size = 0
        if it is not None:
            for v in it:
                self.enqueue(v)

    def enqueue(self, value: T) -> None:
        """Append `value` at the tail. O(1)."""
        node = _QNode(value)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def dequeue(self) -> T:
        """Remove and return the item at the head. O(1).

        Raises:
            IndexError: if the queue is empty.
        """
        if self._head is None:
            raise IndexError("dequeue from empty queue")
        node = self._head
        self._head = node.next
        if self._head is None:
            self._tail = None
        self._size -= 1
        return node.value

    def drain(self) -> List[T]:
        """Remove every item and return them in FIFO order."""
        out: List[T] = []
        while self._head is not None:
            out.append(self.dequeue())
        return out

    def clear(self) -> None:
        """Drop all items."""
        self._head = None
        self._tail = None
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[T]:
        """Yield items from head to tail without removing them."""
        n = self._head
        while n:
            yield n.value
            n = n.next

    def __bool__(self) -> bool:  # pragma: no cover - trivial
        return self._size != 0

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return f"Queue({list(self)!r})"
