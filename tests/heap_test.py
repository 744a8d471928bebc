import os
import sys
import random

import pytest

# Ensure we can import from the project
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from sortmachine.datastructures import FixedArray, Queue, build_heap, heapify, is_heap, sift_down
from sortmachine.sorting_machine import natural_order


def ignore_case(s1: str, s2: str) -> int:
    a, b = s1.lower(), s2.lower()
    return (a > b) - (a < b)


def array_of(*values):
    arr = FixedArray(len(values))
    for i, v in enumerate(values):
        arr.set_entry(i, v)
    return arr


# ----------------------------
# sift_down
# ----------------------------

def test_sift_down_moves_root_to_leaf():
    arr = array_of(9, 1, 2, 3, 4, 5, 6)
    sift_down(arr, 0, 6, natural_order)
    assert list(arr) == [1, 3, 2, 9, 4, 5, 6]
    assert is_heap(arr, 0, 6, natural_order)


def test_sift_down_only_left_child():
    arr = array_of(5, 1)
    sift_down(arr, 0, 1, natural_order)
    assert list(arr) == [1, 5]


def test_sift_down_picks_right_when_smaller():
    arr = array_of(5, 4, 2)
    sift_down(arr, 0, 2, natural_order)
    assert list(arr) == [2, 4, 5]


def test_sift_down_equivalent_children_takes_left():
    arr = array_of("b", "A", "a")
    sift_down(arr, 0, 2, ignore_case)
    assert list(arr) == ["A", "b", "a"]
    assert is_heap(arr, 0, 2, ignore_case)


def test_sift_down_equal_children_larger_root():
    arr = array_of(5, 3, 3)
    sift_down(arr, 0, 2, natural_order)
    assert arr.entry(0) == 3
    assert is_heap(arr, 0, 2, natural_order)


def test_sift_down_no_swap_when_root_equivalent():
    arr = array_of("a", "A", "b")
    sift_down(arr, 0, 2, ignore_case)
    assert list(arr) == ["a", "A", "b"]


def test_sift_down_ignores_slots_past_last():
    arr = array_of(5, 4, 0)
    sift_down(arr, 0, 1, natural_order)
    assert list(arr) == [4, 5, 0]


def test_sift_down_empty_range_is_noop():
    arr = array_of(3)
    sift_down(arr, 0, -1, natural_order)
    assert list(arr) == [3]


def test_sift_down_bad_range():
    arr = array_of(1, 2)
    with pytest.raises(ValueError):
        sift_down(arr, -1, 1, natural_order)
    with pytest.raises(IndexError):
        sift_down(arr, 0, 2, natural_order)


def test_sift_down_subtree_leaves_rest_untouched():
    arr = array_of(0, 9, 8, 1, 2, 3, 4)
    sift_down(arr, 1, 6, natural_order)
    assert list(arr) == [0, 1, 8, 9, 2, 3, 4]


# ----------------------------
# heapify / build_heap
# ----------------------------

@pytest.mark.parametrize("size", [0, 1, 2, 3, 4, 15, 16, 100])
def test_heapify_random(size):
    rng = random.Random(size)
    values = [rng.randint(0, 50) for _ in range(size)]
    arr = array_of(*values)
    heapify(arr, 0, natural_order)
    assert is_heap(arr, 0, size - 1, natural_order)
    assert sorted(arr) == sorted(values)


def test_heapify_subtree_only():
    arr = array_of(0, 9, 1, 8, 7, 3, 2)
    heapify(arr, 1, natural_order)
    # Right subtree (1, 3, 2) untouched; left subtree (9, 8, 7) heapified
    assert list(arr) == [0, 7, 1, 8, 9, 3, 2]
    assert is_heap(arr, 1, 6, natural_order)


def test_build_heap_drains_queue():
    q = Queue(["green", "red", "blue", "Apple"])
    heap = build_heap(q, ignore_case)
    assert len(q) == 0
    assert len(heap) == 4
    assert heap.entry(0) == "Apple"
    assert is_heap(heap, 0, 3, ignore_case)
    assert sorted(heap) == sorted(["green", "red", "blue", "Apple"])


def test_build_heap_empty_queue():
    heap = build_heap(Queue(), natural_order)
    assert len(heap) == 0
    assert is_heap(heap, 0, -1, natural_order)


# ----------------------------
# is_heap
# ----------------------------

def test_is_heap_detects_violation_deep_in_tree():
    arr = array_of(1, 2, 3, 4, 5, 6, 0)
    assert not is_heap(arr, 0, 6, natural_order)
    assert is_heap(arr, 0, 5, natural_order)
    assert is_heap(arr, 1, 6, natural_order)
    assert not is_heap(arr, 2, 6, natural_order)


def test_is_heap_leaf_is_heap():
    arr = array_of(9, 1)
    assert is_heap(arr, 1, 1, natural_order)
    assert not is_heap(arr, 0, 1, natural_order)
