from __future__ import annotations
import ctypes
from typing import Generic, Iterator, Optional, TypeVar

T = TypeVar("T")


class FixedArray(Generic[T]):
    """A contiguous array whose capacity is fixed at construction.

    Implementation notes
    --------------------
    • Storage is a ctypes array of `py_object` (not Python's built-in list).
    • Capacity never changes; there is no append, insert or pop.
    • Every slot starts out as ``None``.
    • Negative indices are rejected: callers address slots by heap position.
    """

    __slots__ = ("_buf", "_capacity")

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must be >= 0")
        self._capacity = capacity
        self._buf = self._make_array(capacity)
        for i in range(capacity):
            self._buf[i] = None

    # ------------------------------- internals -------------------------------

    @staticmethod
    def _make_array(capacity: int):
        """Allocate a raw ctypes array of length `capacity` to hold py_object."""
        return (capacity * ctypes.py_object)()

    def _check_index(self, idx: int) -> int:
        """Validate `idx` against the capacity. Raises IndexError if out of range."""
        if idx < 0 or idx >= self._capacity:
            raise IndexError(f"array index {idx} out of range [0, {self._capacity})")
        return idx

    # --------------------------------- API -----------------------------------

    def entry(self, idx: int) -> Optional[T]:
        """Return the value stored at `idx`. O(1)."""
        return self._buf[self._check_index(idx)]  # type: ignore[return-value]

    def set_entry(self, idx: int, value: Optional[T]) -> None:
        """Store `value` at `idx`, discarding the previous value. O(1)."""
        self._buf[self._check_index(idx)] = value

    def replace_entry(self, idx: int, value: Optional[T]) -> Optional[T]:
        """Store `value` at `idx` and return the value it replaced. O(1)."""
        i = self._check_index(idx)
        old = self._buf[i]
        self._buf[i] = value
        return old  # type: ignore[return-value]

    def exchange_entries(self, i: int, j: int) -> None:
        """Swap the values at `i` and `j`. O(1)."""
        i = self._check_index(i)
        j = self._check_index(j)
        self._buf[i], self._buf[j] = self._buf[j], self._buf[i]

    def __len__(self) -> int:
        """Capacity of the array (fixed). O(1)."""
        return self._capacity

    def __iter__(self) -> Iterator[Optional[T]]:
        """Yield every slot from index 0 upward, stale slots included."""
        for i in range(self._capacity):
            yield self._buf[i]  # type: ignore[misc]

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return f"FixedArray({list(self)!r})"
