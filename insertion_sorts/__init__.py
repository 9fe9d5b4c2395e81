"""Insertion sort in its shift and adjacent swap forms.

Both entry points copy their input and return a new list in non-decreasing
order. They are stable and run in O(n + d) time, d being the number of
inversions of the input. Elements must be totally ordered under `<` and `>`;
otherwise the result is unspecified.
"""
from collections.abc import Iterable
from typing import TypeVar

from .sorting_algorithms.impl import insertion_sort as _shift
from .sorting_algorithms.impl import insertion_sort_swap as _swap
from .sorting_algorithms.SortingAlgorithm import InvalidSortingAlgorithmError, SortingAlgorithm
from .sorting_algorithms.sorting_algorithms import sorting_algorithms

T = TypeVar("T")


def insertion_sort(values: Iterable[T]) -> list[T]:
    return _shift.algorithm.sort(values)


def insertion_sort_swap(values: Iterable[T]) -> list[T]:
    return _swap.algorithm.sort(values)


__all__ = [
    "InvalidSortingAlgorithmError",
    "SortingAlgorithm",
    "insertion_sort",
    "insertion_sort_swap",
    "sorting_algorithms",
]
