from collections.abc import Callable, Iterable, MutableSequence
from typing import Any, NamedTuple


class OperationCount(NamedTuple):
    comparisons: int
    writes: int


class CountingList(list):
    def __init__(self, iterable: Iterable = ()) -> None:
        super().__init__(iterable)
        self.writes = 0

    def __setitem__(self, index, value) -> None:
        self.writes += 1
        super().__setitem__(index, value)


class OperationCounter:
    """Counts element comparisons and writes done by an in-place sorting routine.

    Values are wrapped into keys sharing this counter, in the manner of
    `functools.cmp_to_key`, except that the wrapped value stays reachable as
    `obj` so the sorted result can be unwrapped afterwards.
    """

    def __init__(self) -> None:
        self.comparisons = 0
        counter = self

        class Key:
            __slots__ = ["obj"]

            def __init__(self, obj: Any) -> None:
                self.obj = obj

            def __lt__(self, other: "Key") -> bool:
                counter.comparisons += 1
                return self.obj < other.obj

            def __gt__(self, other: "Key") -> bool:
                counter.comparisons += 1
                return self.obj > other.obj

            __hash__ = None

        self.key = Key

    def count(self, func: Callable[[MutableSequence], None], values: Iterable) -> tuple[OperationCount, list]:
        arr = CountingList(map(self.key, values))
        self.comparisons = 0
        func(arr)
        return OperationCount(self.comparisons, arr.writes), [x.obj for x in arr]
