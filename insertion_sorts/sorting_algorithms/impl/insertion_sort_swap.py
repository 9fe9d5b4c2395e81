from collections.abc import MutableSequence

from ..SortingAlgorithm import SortingAlgorithm


def insertion_sort_swap(arr: MutableSequence) -> None:
    # two writes per step instead of one shift, slower than `insertion_sort`
    for i in range(1, len(arr)):
        j = i
        while j > 0 and arr[j] < arr[j - 1]:
            arr[j - 1], arr[j] = arr[j], arr[j - 1]
            j -= 1


algorithm = SortingAlgorithm("insertion sort (swap)", insertion_sort_swap, 8)
