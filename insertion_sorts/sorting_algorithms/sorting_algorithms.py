from importlib import import_module
from pathlib import Path

from .SortingAlgorithm import SortingAlgorithm

sorting_algorithms: list[SortingAlgorithm] = []
for file in sorted((Path(__file__).parent / "impl").glob("*.py")):
    if file.stem.startswith("_"):
        continue
    module = import_module(f".{file.stem}", package="insertion_sorts.sorting_algorithms.impl")
    sorting_algorithms.append(module.algorithm)
