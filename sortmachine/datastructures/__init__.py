from .array import FixedArray
from .queue import Queue
from .heap import build_heap, heapify, is_heap, sift_down

__all__ = [
    "FixedArray",
    "Queue",
    "build_heap",
    "heapify",
    "is_heap",
    "sift_down",
]
