import sys
from time import perf_counter
from typing import Optional

import numpy as np
import pandas as pd

from .Config import *
from .data import get_sorted_integers
from .sorting_algorithms.sorting_algorithms import sorting_algorithms
from .sorting_algorithms.SortingAlgorithm import InvalidSortingAlgorithmError, SortingAlgorithm


def time_sort(sorting_algorithm: SortingAlgorithm, values: list[int], repeat: int = TIMING_REPEAT) -> float:
    """Best of `repeat` runs, in milliseconds."""
    times = []
    for _ in range(repeat):
        start = perf_counter()
        result = sorting_algorithm.sort(values)
        times.append((perf_counter() - start) * 1000)
        if not sorting_algorithm.validator(result):
            raise InvalidSortingAlgorithmError(sorting_algorithm.name)
    return float(np.min(times))


def benchmark(N: int = BENCHMARK_N, repeat: int = TIMING_REPEAT, verbose: bool = False) -> pd.DataFrame:
    rows = []
    for sorting_algorithm in sorting_algorithms:
        for case, ascending in (("best", True), ("worst", False)):
            ms = time_sort(sorting_algorithm, get_sorted_integers(N, ascending), repeat)
            if verbose:
                print(f"{sorting_algorithm.name} {case} case: {ms:.0f} ms")
            rows.append({"name": sorting_algorithm.name, "N": N, "case": case, "ms": ms})
    return pd.DataFrame(rows, columns=["name", "N", "case", "ms"])


def main(argv: Optional[list[str]] = None) -> None:
    argv = sys.argv[1:] if argv is None else argv
    N = int(argv[0]) if argv else BENCHMARK_N
    df = benchmark(N, verbose=True)
    print(df.pivot(index="name", columns="case", values="ms").to_string(float_format="{:.1f}".format))


if __name__ == "__main__":
    main()
