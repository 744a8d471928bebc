from .sorting_machine import ModeError, SortingMachine, natural_order, sort

__all__ = [
    "ModeError",
    "SortingMachine",
    "natural_order",
    "sort",
]
