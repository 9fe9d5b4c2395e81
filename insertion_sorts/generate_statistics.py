from decimal import Decimal
from itertools import product
from multiprocessing import Pool
from pathlib import Path
from random import Random
from time import thread_time
from typing import Optional

import pandas as pd
from tqdm import tqdm

from .Config import *
from .counting import OperationCounter
from .data import count_inversions
from .sorting_algorithms.sorting_algorithms import sorting_algorithms
from .sorting_algorithms.SortingAlgorithm import InvalidSortingAlgorithmError, SortingAlgorithm

HEADER = "name,N,input,best,worst,avg,avg_writes,avg_inversions"


def to_displayable_int(x: int) -> str:
    return str(x) if x < 1e9 else f"{Decimal(x):.2e}"


def get_avg_operation_cnt(sorting_algorithm: SortingAlgorithm, N: int) -> tuple[int, int, float, float, float]:
    counter = OperationCounter()

    do_sample = N > sorting_algorithm.max_N
    total = 0
    best = float("inf")
    worst = 0
    avg_sum = writes_sum = inversions_sum = 0
    if do_sample:
        start_time = thread_time()
    r = Random(SAMPLE_SEED)
    for val_array in sorting_algorithm.sampler(N, r) if do_sample else sorting_algorithm.generator(N):
        operation_cnt, result = counter.count(sorting_algorithm.func, val_array)
        if not sorting_algorithm.validator(result):
            raise InvalidSortingAlgorithmError(sorting_algorithm.name)
        avg_sum += operation_cnt.comparisons
        writes_sum += operation_cnt.writes
        inversions_sum += count_inversions(val_array)
        total += 1
        best = min(best, operation_cnt.comparisons)
        worst = max(worst, operation_cnt.comparisons)
        if do_sample and int((thread_time() - start_time) * 1000) > MAX_SAMPLE_TIME_MS:
            break

    return best, worst, avg_sum / total, writes_sum / total, inversions_sum / total


def _work(args: tuple[int, int]) -> str:
    sorting_algorithm_idx, N = args
    sorting_algorithm = sorting_algorithms[sorting_algorithm_idx]
    best, worst, avg, avg_writes, avg_inversions = get_avg_operation_cnt(sorting_algorithm, N)
    input_total = sorting_algorithm.input_total(N)
    return ",".join(map(str, (sorting_algorithm.name, N, to_displayable_int(input_total), best, worst, avg, avg_writes, avg_inversions)))


def generate_statistics(Ns: Optional[list[int]] = None, result_file: Path = RESULT_FILE) -> None:
    tasks = list(product(range(len(sorting_algorithms)), STATISTICS_NS if Ns is None else Ns))
    result_file.parent.mkdir(parents=True, exist_ok=True)
    with Pool() as pool, open(result_file, "w") as f:
        f.write(HEADER + "\n")
        for result in tqdm(pool.imap_unordered(_work, tasks), total=len(tasks)):
            f.write(result + "\n")
            f.flush()


def sort_result(result_file: Path = RESULT_FILE) -> None:
    df = pd.read_csv(result_file)
    df = df.sort_values(["name", "N"])
    df.to_csv(result_file, index=False)
    for name, group in df.groupby("name"):
        group.drop(columns=["name"]).to_csv(result_file.parent / f"{name}.csv", index=False)


if __name__ == "__main__":
    generate_statistics()
    sort_result()
    print(f"statistics written to {RESULT_FILE}")
