"""
Building blocks of the ADF regression: centring, differencing, lag
matrices and the assembled design.

The heavy lifting happens in the numba cores; these wrappers coerce
inputs to contiguous float64 arrays and reject configurations that
would produce an empty or negative-sized matrix.
"""

from typing import Tuple

import numpy as np

from tinyadf.backends.numba.matrix import _design_core, _diff_core, _lagged_matrix_core
from tinyadf.exceptions import InsufficientDataError, InvalidLagError


def _as_series(x) -> np.ndarray:
    x = np.ascontiguousarray(x.to_numpy() if hasattr(x, 'to_numpy') else x, dtype=np.float64)
    if x.ndim != 1:
        raise ValueError("x must be a 1-dimensional array")
    return x


def demean(x) -> np.ndarray:
    """
    Return a mean-centred copy of ``x``.

    The input is left untouched. A series whose mean is exactly zero is
    copied as is.
    """
    x = np.array(_as_series(x), copy=True)
    if len(x) == 0:
        return x
    mean = np.mean(x)
    if mean != 0.0:
        x -= mean
    return x


def diff(x) -> np.ndarray:
    """
    First difference of a series.

    Parameters
    ----------
    x : array_like, 1d
        Series with at least two observations.

    Returns
    -------
    ndarray, shape (len(x) - 1,)
        Element i is x[i+1] - x[i].
    """
    x = _as_series(x)
    if len(x) < 2:
        raise InsufficientDataError(f"diff needs at least 2 observations, got {len(x)}")
    return _diff_core(x)


def lagged_matrix(series, lag: int) -> np.ndarray:
    """
    Create 2d array of lagged copies of ``series``.

    Parameters
    ----------
    series : array_like, 1d
        Data.
    lag : int
        Number of lag columns, 1 <= lag <= len(series).

    Returns
    -------
    ndarray, shape (len(series) - lag + 1, lag)
        Column 0 is the most recent value of each window, column
        ``lag - 1`` the oldest.
    """
    series = _as_series(series)
    if lag < 1 or lag > len(series):
        raise InvalidLagError(
            f"lag must be between 1 and {len(series)} for a series of "
            f"{len(series)} observations, got {lag}"
        )
    return _lagged_matrix_core(series, int(lag))


def build_design(x, lag: int) -> Tuple[np.ndarray, np.ndarray]:
    """
    Assemble the ADF regression design from a centred series.

    Parameters
    ----------
    x : array_like, 1d
        Centred series.
    lag : int
        Number of lagged-difference regressors (>= 0).

    Returns
    -------
    design : ndarray, shape (len(x) - 1 - lag, lag + 1)
        Lagged level in column 0, lagged differences in the rest.
    response : ndarray, shape (len(x) - 1 - lag,)
        First differences aligned with the design rows.
    """
    x = _as_series(x)
    if lag < 0:
        raise InvalidLagError(f"lag must be non-negative, got {lag}")
    if len(x) < lag + 2:
        raise InsufficientDataError(
            f"lag={lag} needs at least {lag + 2} observations, got {len(x)}"
        )
    return _design_core(x, int(lag))
