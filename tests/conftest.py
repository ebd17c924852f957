"""Shared fixtures for the tinyadf test suite."""

from __future__ import annotations

import numpy as np
import pytest

FIXED_SERIES = [1.0, 2.5, 1.8, 3.2, 2.9, 4.1, 3.6, 5.0, 4.2, 5.5]


def ridge_closed_form(X: np.ndarray, y: np.ndarray, alpha: float) -> tuple[np.ndarray, np.ndarray]:
    """Ridge coefficients and standard errors from the normal equations."""
    n, k = X.shape
    A_inv = np.linalg.inv(X.T @ X + alpha * np.eye(k))
    beta = A_inv @ X.T @ y
    resid = y - X @ beta
    sigma2 = resid @ resid / (n - k)
    cov = sigma2 * A_inv @ X.T @ X @ A_inv
    return beta, np.sqrt(np.diag(cov))


@pytest.fixture
def fixed_series() -> list[float]:
    return list(FIXED_SERIES)


@pytest.fixture
def random_walk() -> np.ndarray:
    rng = np.random.default_rng(12345)
    return np.cumsum(rng.standard_normal(200))


@pytest.fixture
def white_noise() -> np.ndarray:
    rng = np.random.default_rng(54321)
    return rng.standard_normal(200)


@pytest.fixture
def regression_data() -> tuple[np.ndarray, np.ndarray]:
    rng = np.random.default_rng(7)
    X = rng.standard_normal((60, 3))
    y = X @ np.array([0.5, -1.2, 2.0]) + 0.1 * rng.standard_normal(60)
    return X, y
