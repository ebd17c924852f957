from benchmarks.benchmark_utils import generate_series_inputs, benchmark_batch_functions
import numpy as np
from tinyadf.stationarity.design import diff, lagged_matrix
from statsmodels.tsa.tsatools import lagmat

lag = 4

## Lagged matrix

def numba_lagged_matrix(x):
    return lagged_matrix(x, lag)

def statsmodels_lagmat(x):
    # original="in" keeps the current value as the first column
    return lagmat(x[:, None], lag - 1, trim="both", original="in")

## Difference

def numba_diff(x):
    return diff(x)

def numpy_diff(x):
    return np.diff(x)

def run_lagged_matrix_benchmarks(sizes: list, runs: int):
    results = benchmark_batch_functions(
        [numba_lagged_matrix],
        statsmodels_lagmat,
        generate_series_inputs,
        sizes,
        runs=runs
    )
    return results

def run_diff_benchmarks(sizes: list, runs: int):
    results = benchmark_batch_functions(
        [numba_diff],
        numpy_diff,
        generate_series_inputs,
        sizes,
        runs=runs
    )
    return results
