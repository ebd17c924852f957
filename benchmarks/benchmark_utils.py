import time
from typing import Tuple
import pandas as pd
from tinyadf.config import DEFAULT_BACKEND
from copy import deepcopy

import numpy as np
import jax

def benchmark_function(f_optimized, f_standard, input_generator, sizes, runs=5):
    """Compare execution times between optimized and reference implementations."""
    results = []
    for size in sizes:
        # Generate input data of the current size
        inputs = input_generator(size)
        
        # Time both implementations
        standard_times = []
        optimized_times = []
        
        for _ in range(runs):
            # Copy inputs to ensure fairness
            inputs_copy = deepcopy(inputs)

            # Time reference implementation
            start = time.perf_counter()
            standard_result = f_standard(*inputs_copy)
            standard_times.append(time.perf_counter() - start)
            
            # Copy inputs again
            inputs_copy = deepcopy(inputs)
            
            # Time optimized implementation
            start = time.perf_counter()
            optimized_result = f_optimized(*inputs_copy)
            optimized_times.append(time.perf_counter() - start)
            
            # Verify results match within tolerance
            assert np.allclose(standard_result, optimized_result, rtol=1e-4, atol=1e-6,
                               equal_nan=True), "Results don't match"
        
        # Calculate statistics
        standard_mean = np.mean(standard_times)
        optimized_mean = np.mean(optimized_times)
        speedup = standard_mean / optimized_mean if optimized_mean > 0 else float('inf')
        
        results.append({
            'size': size,
            'standard_time': standard_mean,
            'optimized_time': optimized_mean,
            'speedup_median': np.median(standard_times)/np.median(optimized_times),
            'speedup': speedup
        })
    
    res = pd.DataFrame(results)
    print("Results for", f_optimized.__name__)
    print("====================================")
    print(res)
    return res

def benchmark_batch_functions(optimized_functions, f_standard, input_generator, sizes, runs=5):
    """
    Benchmarks multiple optimized functions against a reference implementation.
    """
    return [
        benchmark_function(f_optimized, f_standard, input_generator, sizes, runs)
        for f_optimized in optimized_functions
    ]

def generate_matrix_inputs(size: Tuple[int, int]):
    """Generate random matrices for the ridge regression."""
    if DEFAULT_BACKEND == "jax":
        X = jax.random.normal(jax.random.PRNGKey(0), size)
        y = jax.random.normal(jax.random.PRNGKey(1), (size[0],))
    else:
        X = np.random.random(size)
        y = np.random.random(size[0])
    return [X, y]

def generate_series_inputs(size: int):
    """Generate a random walk for the series ops."""
    return [np.cumsum(np.random.standard_normal(size))]
