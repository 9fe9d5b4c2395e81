from pathlib import Path

SAMPLE_SEED = 0
MAX_SAMPLE_TIME_MS = 2000
RESULT_FILE = Path("logs/statistics.csv")
STATISTICS_NS = list(range(2, 9)) + list(range(10, 100, 10)) + list(range(100, 1000, 100))

BENCHMARK_N = 6000
TIMING_REPEAT = 3
