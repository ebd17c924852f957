import logging
import numbers
from dataclasses import dataclass
from typing import Optional

import numpy as np

from tinyadf.config import ADFConfig, DEFAULT_BACKEND, DEFAULT_P_VALUE, L_PENALTY
from tinyadf.exceptions import InsufficientDataError, InvalidLagError, SingularDesignError
from tinyadf.regression.linear_models import Ridge
from tinyadf.stationarity.design import build_design, demean

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ADFResult:
    """Outcome of a completed ADF test."""

    statistic: float
    p_value_threshold: float
    lag: int
    nobs: int
    stationary: bool


def _resolve_threshold(p_value_threshold: Optional[float]) -> float:
    if p_value_threshold is None or p_value_threshold == 0:
        return DEFAULT_P_VALUE
    return float(p_value_threshold)


def _resolve_lag(lag: Optional[int], nobs: int) -> int:
    if lag is not None:
        if isinstance(lag, bool) or not isinstance(lag, numbers.Integral):
            raise InvalidLagError(f"lag must be an integer, got {lag!r}")
        if lag >= 0:
            return int(lag)

    resolved = int(np.floor(np.cbrt(nobs)))
    logger.debug("Resolved lag %d from %d observations", resolved, nobs)
    if resolved == 0:
        logger.warning("Lag resolved to 0 for an empty series")
    return resolved


class ADFTest:
    """
    Augmented Dickey-Fuller test with a ridge-regularised regression.

    The differenced series is regressed on the lagged level and ``lag``
    lagged differences; the statistic is the t-statistic of the lagged
    level coefficient. Lower statistics are stronger evidence against a
    unit root.

    Parameters
    ----------
    series : array_like, 1d
        The time series to test. Copied on construction.
    p_value_threshold : float, optional
        Decision boundary for the statistic. ``None`` or 0 selects
        ``DEFAULT_P_VALUE`` (-3.45).
    lag : int, optional
        Number of lagged-difference regressors. ``None`` or a negative
        value selects ``floor(cbrt(len(series)))``.
    backend : str, default=DEFAULT_BACKEND
        Ridge regression backend ("numba" or "jax").

    Attributes
    ----------
    statistic : float or None
        The test statistic, None until ``run`` is called.
    """

    def __init__(self, series, p_value_threshold: Optional[float] = None,
                 lag: Optional[int] = None, backend: str = DEFAULT_BACKEND):
        values = series.to_numpy() if hasattr(series, 'to_numpy') else series
        self._series = np.array(values, dtype=np.float64, copy=True)

        if self._series.ndim != 1:
            raise ValueError("series must be a 1-dimensional array")
        if not np.all(np.isfinite(self._series)):
            raise ValueError("series must not contain NaN or infinite values")

        self.p_value_threshold = _resolve_threshold(p_value_threshold)
        self.lag = _resolve_lag(lag, len(self._series))
        self.backend = backend
        self.statistic: Optional[float] = None
        self._nobs: Optional[int] = None

    @classmethod
    def from_config(cls, series, config: ADFConfig) -> 'ADFTest':
        """Create a test from an ``ADFConfig``."""
        return cls(series, p_value_threshold=config.p_value_threshold,
                   lag=config.lag, backend=config.backend)

    @property
    def series(self) -> np.ndarray:
        """Copy of the series under test."""
        return self._series.copy()

    def run(self) -> float:
        """
        Run the Augmented Dickey-Fuller test.

        Returns
        -------
        float
            The test statistic, also stored on ``self.statistic``.

        Raises
        ------
        InsufficientDataError
            If the series is too short for the lag.
        SingularDesignError
            If the lagged level coefficient has no finite t-statistic.
        """
        nobs = len(self._series)
        k = self.lag + 1

        if nobs < self.lag + 2:
            raise InsufficientDataError(
                f"lag={self.lag} needs at least {self.lag + 2} observations, got {nobs}"
            )

        x = demean(self._series)
        design, response = build_design(x, self.lag)
        n_rows = design.shape[0]

        if n_rows <= k:
            raise InsufficientDataError(
                f"Design has {n_rows} rows for {k} regressors; at least "
                f"{2 * k + 1} observations are needed for lag={self.lag}"
            )

        logger.debug("ADF design shape (%d, %d), backend '%s'", n_rows, k, self.backend)

        rr = Ridge(alpha=L_PENALTY, fit_intercept=False, backend=self.backend)
        rr.fit(design, response)

        beta = rr.coef_
        sd = rr.std_errors_

        if not np.isfinite(sd[0]) or sd[0] == 0:
            raise SingularDesignError(
                "Standard error of the lagged level is zero or undefined; "
                "the series may be constant"
            )

        self.statistic = float(beta[0] / sd[0])
        self._nobs = n_rows
        logger.debug("ADF statistic %.6f with lag %d", self.statistic, self.lag)

        return self.statistic

    def is_stationary(self) -> bool:
        """Return True if the tested time series is stationary."""
        if self.statistic is None:
            raise ValueError("Test not run yet. Call 'run' first.")
        return self.statistic < self.p_value_threshold

    def result(self) -> ADFResult:
        """Collect the outcome of the last ``run``."""
        if self.statistic is None:
            raise ValueError("Test not run yet. Call 'run' first.")
        return ADFResult(
            statistic=self.statistic,
            p_value_threshold=self.p_value_threshold,
            lag=self.lag,
            nobs=self._nobs,
            stationary=self.is_stationary(),
        )


def adf_test(series, p_value_threshold: Optional[float] = None,
             lag: Optional[int] = None, backend: str = DEFAULT_BACKEND) -> ADFResult:
    """
    Run an ADF test in one call.

    Parameters
    ----------
    series : array_like, 1d
        The data series to test.
    p_value_threshold : float, optional
        Decision boundary, defaults to -3.45.
    lag : int, optional
        Number of lagged differences, defaults to floor(cbrt(nobs)).
    backend : str
        Ridge regression backend.

    Returns
    -------
    ADFResult
        Statistic, threshold, lag, design rows and the verdict.
    """
    test = ADFTest(series, p_value_threshold=p_value_threshold, lag=lag, backend=backend)
    test.run()
    return test.result()
