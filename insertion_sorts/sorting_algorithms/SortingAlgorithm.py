from collections.abc import Callable, Generator, Iterable, MutableSequence, Sequence
from itertools import permutations
from math import factorial
from random import Random
from typing import NamedTuple, TypeVar

T = TypeVar("T")


def _sampler(N: int, r: Random) -> Generator[list[int], None, None]:
    arr = list(range(N))
    while True:
        r.shuffle(arr)
        yield arr


class InvalidSortingAlgorithmError(Exception):
    def __init__(self, name: str) -> None:
        super().__init__(f"Invalid sorting algorithm: `{name}` produced an unsorted result")


class SortingAlgorithm(NamedTuple):
    name: str
    func: Callable[[MutableSequence], None]
    max_N: int
    generator: Callable[[int], Iterable[Sequence[int]]] = lambda n: permutations(range(n))
    input_total: Callable[[int], int] = factorial
    sampler: Callable[[int, Random], Generator[Sequence[int], None, None]] = _sampler
    validator: Callable[[Sequence[int]], bool] = lambda arr: all(i == v for i, v in enumerate(arr))

    def sort(self, values: Iterable[T]) -> list[T]:
        """Return a new sorted list, `values` is left untouched."""
        items = list(values)
        self.func(items)
        return items
