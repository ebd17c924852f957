import numpy as np
from numba import njit
from typing import Tuple


@njit
def _diff_core(x: np.ndarray) -> np.ndarray:
    """
    First difference of a 1D series.

    Parameters
    ----------
    x : ndarray, shape (N,)
        Input series, N >= 2

    Returns
    -------
    ndarray, shape (N-1,)
        Element i is x[i+1] - x[i]
    """
    n = len(x)
    y = np.empty(n - 1)
    for i in range(n - 1):
        y[i] = x[i + 1] - x[i]
    return y


@njit
def _lagged_matrix_core(series: np.ndarray, lag: int) -> np.ndarray:
    """
    Create a 2D array of lagged copies of a series.

    Column 0 holds the most recent value of each window and column
    ``lag - 1`` the oldest one; every row slides the window forward by
    one observation.

    Parameters
    ----------
    series : ndarray, shape (N,)
        Input series
    lag : int
        Number of lag columns, 1 <= lag <= N

    Returns
    -------
    ndarray, shape (N - lag + 1, lag)
        Lag matrix
    """
    n_rows = len(series) - lag + 1
    lm = np.empty((n_rows, lag))

    for j in range(lag):
        offset = lag - j - 1
        for i in range(n_rows):
            lm[i, j] = series[offset + i]

    return lm


@njit
def _design_core(x: np.ndarray, lag: int) -> Tuple[np.ndarray, np.ndarray]:
    """
    Build the ADF regression design from a centred series.

    Parameters
    ----------
    x : ndarray, shape (N,)
        Centred series, N >= lag + 2
    lag : int
        Number of lagged-difference regressors

    Returns
    -------
    design : ndarray, shape (N - 1 - lag, lag + 1)
        Lagged level in column 0, lagged differences in columns 1..lag
    response : ndarray, shape (N - 1 - lag,)
        Differences aligned with the design rows
    """
    n = len(x) - 1
    k = lag + 1

    y = _diff_core(x)
    z = _lagged_matrix_core(y, k)
    n_rows = z.shape[0]

    design = np.empty((n_rows, k))
    design[:, 0] = x[k - 1 : n]
    for j in range(1, k):
        design[:, j] = z[:, j]

    response = np.ascontiguousarray(z[:, 0])

    return design, response
