from typing import Tuple

import jax
import jax.numpy as jnp
import lineax as lx

# Statistics are compared against float64 critical values
jax.config.update("jax_enable_x64", True)


def ridge_fit_cholesky(X: jnp.ndarray, y: jnp.ndarray, alpha: float) -> jnp.ndarray:
    """
    Ridge regression using the normal equations with a Cholesky decomposition.

    Solves:
        (X^T X + α I) β = X^T y
    """
    n_features = X.shape[1]
    A = X.T @ X + alpha * jnp.eye(n_features)
    operator = lx.MatrixLinearOperator(A, lx.positive_semidefinite_tag)
    solution = lx.linear_solve(operator, X.T @ y, lx.Cholesky(), throw=False)
    return solution.value


def ridge_fit_dual(X: jnp.ndarray, y: jnp.ndarray, alpha: float) -> jnp.ndarray:
    """
    Ridge regression using the dual formulation.
    Optimal when n_features >> n_samples.

    Solves:
        (X X^T + α I) γ = y, and then β = X^T γ.
    """
    n_samples = X.shape[0]
    A_dual = X @ X.T + alpha * jnp.eye(n_samples)
    operator = lx.MatrixLinearOperator(A_dual, lx.positive_semidefinite_tag)
    gamma = lx.linear_solve(operator, y, lx.Cholesky(), throw=False).value
    return X.T @ gamma


@jax.jit
def _ridge_fit_core(X: jnp.ndarray, y: jnp.ndarray, alpha: float) -> jnp.ndarray:
    """
    Ridge regression using the optimal formulation based on problem dimensions.

    - When n_samples >= n_features, uses the primal formulation (Cholesky).
    - When n_samples < n_features, uses the dual formulation.

    Parameters
    ----------
    X : jnp.ndarray
        Design matrix with shape (n_samples, n_features)
    y : jnp.ndarray
        Target vector with shape (n_samples,)
    alpha : float
        Regularization strength

    Returns
    -------
    jnp.ndarray
        Coefficient vector with shape (n_features,)
    """
    if X.shape[0] >= X.shape[1]:
        return ridge_fit_cholesky(X, y, alpha)
    else:
        return ridge_fit_dual(X, y, alpha)


@jax.jit
def _ridge_stats_core(
    X: jnp.ndarray, y: jnp.ndarray, beta: jnp.ndarray, alpha: float
) -> Tuple[jnp.ndarray, jnp.ndarray, float, float, float]:
    """
    Calculate ridge regression statistics optimized with JAX.

    Parameters
    ----------
    X : jnp.ndarray
        Design matrix with shape (n_samples, n_features)
    y : jnp.ndarray
        Target vector with shape (n_samples,)
    beta : jnp.ndarray
        Coefficient vector with shape (n_features,)
    alpha : float
        L2 penalty used for the fit

    Returns
    -------
    residuals : jnp.ndarray
        Residuals vector
    std_errors : jnp.ndarray
        Standard errors of coefficients, NaN when n_samples <= n_features
    r_squared : float
        R-squared value
    adj_r_squared : float
        Adjusted R-squared value
    aic : float
        Akaike Information Criterion
    """
    n, k = X.shape

    y_hat = X @ beta
    residuals = y - y_hat

    SSR = jnp.sum(residuals**2)
    y_mean = jnp.mean(y)
    SST = jnp.sum((y - y_mean)**2)

    # Use jnp.where to handle division by zero safely
    r_squared = jnp.where(SST != 0, 1 - SSR/SST, 0.0)
    adj_r_squared = jnp.where(
        (n > k) & (SST != 0),
        1 - (SSR/(n-k))/(SST/(n-1)),
        0.0
    )

    sigma_squared = SSR / (n - k) if n > k else jnp.nan

    # Covariance of the ridge estimator: sigma^2 V diag(d^2) V^T
    _, s, Vh = jnp.linalg.svd(X, full_matrices=False)
    d = s / (s**2 + alpha)
    std_errors = jnp.sqrt((Vh.T**2) @ (d**2) * sigma_squared)

    AIC = n * jnp.log(SSR/n) + 2 * k

    return residuals, std_errors, r_squared, adj_r_squared, AIC


def _precompile():
    """Trigger JIT compilation of the ridge cores."""
    X = jnp.array([[1.0, 0.5], [0.2, 1.0], [0.3, 0.1], [0.9, 0.4]])
    y = jnp.array([1.0, 0.0, 0.5, 0.2])
    beta = _ridge_fit_core(X, y, 0.0001)
    _ridge_stats_core(X, y, beta, 0.0001)
