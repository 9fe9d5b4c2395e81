import pytest

from insertion_sorts import benchmark as bm
from insertion_sorts.data import get_sorted_integers
from insertion_sorts.sorting_algorithms.SortingAlgorithm import InvalidSortingAlgorithmError, SortingAlgorithm
from insertion_sorts.sorting_algorithms.sorting_algorithms import sorting_algorithms


def test_benchmark_table():
    df = bm.benchmark(200, repeat=1)
    assert len(df) == 2 * len(sorting_algorithms)
    assert set(df["case"]) == {"best", "worst"}
    assert (df["ms"] >= 0).all()


def test_time_sort_rejects_unsorted_result():
    broken = SortingAlgorithm("broken", lambda arr: arr.reverse(), 8)
    with pytest.raises(InvalidSortingAlgorithmError):
        bm.time_sort(broken, [0, 1, 2], repeat=1)


def test_shift_not_slower_than_swap_in_worst_case():
    by_name = {a.name: a for a in sorting_algorithms}
    values = get_sorted_integers(3000, ascending=False)
    shift = bm.time_sort(by_name["insertion sort"], values, repeat=3)
    swap = bm.time_sort(by_name["insertion sort (swap)"], values, repeat=3)
    assert shift <= swap * 1.1


def test_main_prints_cases(capsys):
    bm.main(["50"])
    out = capsys.readouterr().out
    assert "insertion sort best case" in out
    assert "insertion sort (swap) worst case" in out
