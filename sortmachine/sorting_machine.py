"""
Two-phase sorting container.

A :class:`SortingMachine` starts in *insertion mode*, where ``add`` buffers
items in a FIFO queue. ``change_to_extraction_mode`` drains the queue into
a fixed-size array heap; after that, ``remove_first`` hands items back in
non-decreasing order under the machine's comparator. Only ``clear`` goes
back to insertion mode, discarding whatever the machine held.

Example:
    m = SortingMachine(lambda a, b: (a.lower() > b.lower()) - (a.lower() < b.lower()))
    for colour in ("green", "red", "blue"):
        m.add(colour)
    m.change_to_extraction_mode()
    m.remove_first()   # "blue"
"""

from __future__ import annotations

import logging
from typing import Callable, Generic, Iterator, List, Optional, TypeVar, Union

from .datastructures.array import FixedArray
from .datastructures.heap import Comparator, build_heap, is_heap, sift_down
from .datastructures.queue import Queue

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ModeError(RuntimeError):
    """An operation was called in the wrong mode of a SortingMachine."""


def natural_order(a, b) -> int:
    """Comparator for items with their own ``<`` and ``>``."""
    return (a > b) - (a < b)


# -----------------------------
# Representation states
# -----------------------------

class _Inserting(Generic[T]):
    """Insertion-mode state: items wait in a FIFO queue."""

    __slots__ = ("entries",)

    def __init__(self) -> None:
        self.entries: Queue[T] = Queue()


class _Extracting(Generic[T]):
    """Extraction-mode state: a heap over slots ``[0, heap_size)`` of `heap`."""

    __slots__ = ("heap", "heap_size")

    def __init__(self, heap: FixedArray[T]) -> None:
        self.heap = heap
        self.heap_size = len(heap)


class SortingMachine(Generic[T]):
    """Buffer items, then extract them smallest-first.

    The comparator is fixed for the machine's lifetime and must be a total
    preorder; items it treats as equivalent come out in no particular
    order relative to each other.
    """

    __slots__ = ("_order", "_state")

    def __init__(self, order: Optional[Comparator[T]] = None) -> None:
        if order is None:
            order = natural_order
        if not callable(order):
            raise TypeError("order must be a callable comparator")
        self._order: Comparator[T] = order
        self._state: Union[_Inserting[T], _Extracting[T]] = _Inserting()

    # -----------------------------
    # Internal helpers
    # -----------------------------
    def _convention_holds(self) -> bool:
        """Check the representation invariant. O(n); meant for tests."""
        state = self._state
        if isinstance(state, _Inserting):
            return True
        if not 0 <= state.heap_size <= len(state.heap):
            return False
        return is_heap(state.heap, 0, state.heap_size - 1, self._order)

    def _require_insertion_mode(self, op: str) -> _Inserting[T]:
        if not isinstance(self._state, _Inserting):
            raise ModeError(f"{op} requires insertion mode")
        return self._state

    def _require_extraction_mode(self, op: str) -> _Extracting[T]:
        if not isinstance(self._state, _Extracting):
            raise ModeError(f"{op} requires extraction mode")
        return self._state

    # -----------------------------
    # Public API
    # -----------------------------
    def add(self, item: T) -> None:
        """Buffer `item` for sorting (insertion mode only). O(1)."""
        if item is None:
            raise ValueError("cannot add None to a SortingMachine")
        self._require_insertion_mode("add").entries.enqueue(item)

    def change_to_extraction_mode(self) -> None:
        """Build the heap from every buffered item. O(n); one-way."""
        state = self._require_insertion_mode("change_to_extraction_mode")
        heap = build_heap(state.entries, self._order)
        self._state = _Extracting(heap)
        logger.debug("sorting machine switched to extraction mode with %d entries", len(heap))

    def remove_first(self) -> T:
        """Remove and return a smallest item (extraction mode only). O(log n)."""
        state = self._require_extraction_mode("remove_first")
        if state.heap_size == 0:
            raise IndexError("remove_first from empty sorting machine")
        heap = state.heap
        last = state.heap_size - 1
        first = heap.replace_entry(0, heap.entry(last))
        heap.set_entry(last, None)
        state.heap_size = last
        sift_down(heap, 0, state.heap_size - 1, self._order)
        return first  # type: ignore[return-value]

    def is_in_insertion_mode(self) -> bool:
        return isinstance(self._state, _Inserting)

    def order(self) -> Comparator[T]:
        """The comparator this machine was built with."""
        return self._order

    def size(self) -> int:
        """Number of items currently held, in either mode. O(1)."""
        state = self._state
        if isinstance(state, _Inserting):
            return len(state.entries)
        return state.heap_size

    def clear(self) -> None:
        """Discard all items and return to insertion mode, keeping the order."""
        self._state = _Inserting()

    def new_instance(self) -> "SortingMachine[T]":
        """Return a fresh, empty machine with the same order."""
        return SortingMachine(self._order)

    def transfer_from(self, source: "SortingMachine[T]") -> None:
        """Take over everything `source` holds and leave `source` empty.

        `self` adopts the source's mode, order and items; `source` is reset
        to a fresh insertion-mode machine with its own order.
        """
        if not isinstance(source, SortingMachine):
            raise TypeError("source must be a SortingMachine")
        if source is self:
            raise ValueError("cannot transfer a SortingMachine into itself")
        self._order = source._order
        self._state = source._state
        source._state = _Inserting()
        logger.debug("transferred %d entries between sorting machines", self.size())

    def to_list(self) -> List[T]:
        """Snapshot of the held items in traversal order."""
        return list(self)

    def __len__(self) -> int:
        return self.size()

    def __iter__(self) -> Iterator[T]:
        # Live view: insertion order while inserting, heap-array order after.
        state = self._state
        if isinstance(state, _Inserting):
            yield from state.entries
            return
        i = 0
        while i < state.heap_size:
            yield state.heap.entry(i)  # type: ignore[misc]
            i += 1

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SortingMachine):
            return NotImplemented
        if self.is_in_insertion_mode() != other.is_in_insertion_mode():
            return False
        if self._order != other._order or self.size() != other.size():
            return False
        # Multiset comparison by equality; items need not be hashable.
        remaining = list(other)
        for item in self:
            for j, candidate in enumerate(remaining):
                if candidate == item:
                    del remaining[j]
                    break
            else:
                return False
        return True

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return (
            f"SortingMachine(insertion_mode={self.is_in_insertion_mode()}, "
            f"entries={self.to_list()!r})"
        )


def sort(items, order: Optional[Callable[[T, T], int]] = None) -> List[T]:
    """Return `items` sorted under `order` by running one machine cycle."""
    m: SortingMachine[T] = SortingMachine(order)
    for item in items:
        m.add(item)
    m.change_to_extraction_mode()
    return [m.remove_first() for _ in range(m.size())]
