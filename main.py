from benchmarks.benchmark_ridge import run_ridge_benchmarks
from benchmarks.benchmark_stationarity import run_lagged_matrix_benchmarks, run_diff_benchmarks
if __name__ == "__main__":
  # run_diff_benchmarks([25, 100, 500, 1000, 10000, 100000], 10)
  run_lagged_matrix_benchmarks([25, 100, 500, 1000, 10000, 100000], 10)
  run_ridge_benchmarks([(25, 2), (100, 4), (500, 6), (1000, 6), (10000, 10)], 10)
