import numpy as np
from numba import njit
from typing import Tuple


@njit
def _ridge_fit_core(X: np.ndarray, y: np.ndarray, alpha: float) -> np.ndarray:
    """
    Core ridge fitting routine optimized with numba.

    Uses the SVD of the design so that X^T X is never formed. Given
    X = U S V^T the solution is:
        beta = V diag(s_i / (s_i^2 + alpha)) U^T y

    Parameters
    ----------
    X : ndarray
        Design matrix with shape (n_samples, n_features)
    y : ndarray
        Target vector with shape (n_samples,)
    alpha : float
        L2 penalty, >= 0

    Returns
    -------
    ndarray
        Coefficient vector with shape (n_features,)
    """
    X_cont = np.ascontiguousarray(X)
    U, s, Vh = np.linalg.svd(X_cont, full_matrices=False)

    d = s / (s**2 + alpha)

    # Make U.T contiguous before matrix multiplication
    UT = np.ascontiguousarray(U.T)
    Uy = UT @ y

    VhT = np.ascontiguousarray(Vh.T)
    beta = VhT @ (d * Uy)

    return beta


@njit
def _ridge_stats_core(
    X: np.ndarray, y: np.ndarray, beta: np.ndarray, alpha: float
) -> Tuple[np.ndarray, np.ndarray, float, float, float]:
    """
    Calculate ridge regression statistics optimized with numba.

    Standard errors come from the covariance of the ridge estimator
    sigma^2 Z Z^T with Z = (X^T X + alpha I)^-1 X^T. Using the SVD
    of X this reduces to sigma^2 V diag(d^2) V^T.

    Parameters
    ----------
    X : ndarray
        Design matrix with shape (n_samples, n_features)
    y : ndarray
        Target vector with shape (n_samples,)
    beta : ndarray
        Coefficient vector with shape (n_features,)
    alpha : float
        L2 penalty used for the fit

    Returns
    -------
    residuals : ndarray
        Residuals vector
    std_errors : ndarray
        Standard errors of coefficients, NaN when n_samples <= n_features
    r_squared : float
        R-squared value
    adj_r_squared : float
        Adjusted R-squared value
    AIC: float
        Akaike Information Criterion
    """
    n, k = X.shape

    X_cont = np.ascontiguousarray(X)
    y_hat = X_cont @ beta
    residuals = y - y_hat

    SSR = np.sum(residuals**2)
    y_mean = np.mean(y)
    SST = np.sum((y - y_mean)**2)

    r_squared = 1 - SSR/SST if SST != 0 else 0.0
    adj_r_squared = 1 - (SSR/(n-k))/(SST/(n-1)) if (n > k and SST != 0) else 0.0

    if n > k:
        sigma_squared = SSR / (n - k)
    else:
        sigma_squared = np.nan

    _, s, Vh = np.linalg.svd(X_cont, full_matrices=False)
    d = s / (s**2 + alpha)

    # diag(V diag(d^2) V^T)
    VhT = np.ascontiguousarray(Vh.T)
    var_diag = (VhT**2) @ (d**2)
    std_errors = np.sqrt(var_diag * sigma_squared)

    AIC = n * np.log(SSR/n) + 2 * k

    return residuals, std_errors, r_squared, adj_r_squared, AIC


def _precompile():
    """Trigger numba compilation of the ridge cores."""
    X = np.array([[1.0, 0.5], [0.2, 1.0], [0.3, 0.1], [0.9, 0.4]])
    y = np.array([1.0, 0.0, 0.5, 0.2])
    beta = _ridge_fit_core(X, y, 0.0001)
    _ridge_stats_core(X, y, beta, 0.0001)
