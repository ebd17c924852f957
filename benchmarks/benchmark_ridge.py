from benchmarks.benchmark_utils import generate_matrix_inputs, benchmark_batch_functions
from tinyadf.config import DEFAULT_BACKEND, L_PENALTY
from tinyadf.regression.linear_models import Ridge as RidgeOptimized
from sklearn.linear_model import Ridge

def sklearn_ridge(X, y):
    model = Ridge(fit_intercept=False, alpha=L_PENALTY, solver="svd")
    model.fit(X, y)
    return model.coef_

def ridge_fit_optimized(X, y):
    model = RidgeOptimized(fit_intercept=False, backend=DEFAULT_BACKEND, alpha=L_PENALTY)
    model.fit(X, y)
    return model.coef_

def run_ridge_benchmarks(sizes: list, runs: int):
    results = benchmark_batch_functions(
        [ridge_fit_optimized],
        sklearn_ridge,
        generate_matrix_inputs,
        sizes,
        runs=runs
    )
    return results

if __name__ == "__main__":
    run_ridge_benchmarks([(25, 2), (100, 4), (1000, 6)], 10)
