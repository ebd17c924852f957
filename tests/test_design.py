"""Unit tests for the differencer, lag-matrix builder and design assembler."""

from __future__ import annotations

import numpy as np
import pytest
from statsmodels.tsa.tsatools import lagmat

from tinyadf.exceptions import InsufficientDataError, InvalidLagError
from tinyadf.stationarity.design import build_design, demean, diff, lagged_matrix


class TestDiff:
    """Tests for diff."""

    def test_diff_values(self) -> None:
        x = [1.0, 4.0, 2.0, 2.5]
        result = diff(x)
        assert result.shape == (3,)
        np.testing.assert_allclose(result, [3.0, -2.0, 0.5])

    def test_diff_matches_numpy(self, random_walk: np.ndarray) -> None:
        result = diff(random_walk)
        assert len(result) == len(random_walk) - 1
        np.testing.assert_allclose(result, np.diff(random_walk))

    def test_diff_two_values(self) -> None:
        np.testing.assert_allclose(diff([2.0, 5.0]), [3.0])

    @pytest.mark.parametrize("x", [[], [1.0]])
    def test_diff_too_short(self, x: list[float]) -> None:
        with pytest.raises(InsufficientDataError):
            diff(x)

    def test_diff_rejects_2d(self) -> None:
        with pytest.raises(ValueError, match="1-dimensional"):
            diff(np.ones((3, 2)))


class TestLaggedMatrix:
    """Tests for lagged_matrix."""

    def test_shape_and_layout(self) -> None:
        s = [10.0, 11.0, 12.0, 13.0, 14.0]
        m = lagged_matrix(s, 3)
        expected = np.array([
            [12.0, 11.0, 10.0],
            [13.0, 12.0, 11.0],
            [14.0, 13.0, 12.0],
        ])
        np.testing.assert_array_equal(m, expected)

    @pytest.mark.parametrize("lag", [1, 2, 4, 7])
    def test_dimensions_and_first_entry(self, random_walk: np.ndarray, lag: int) -> None:
        m = lagged_matrix(random_walk, lag)
        assert m.shape == (len(random_walk) - lag + 1, lag)
        assert m[0, 0] == random_walk[lag - 1]

    def test_lag_equal_to_length(self) -> None:
        s = [1.0, 2.0, 3.0]
        m = lagged_matrix(s, 3)
        np.testing.assert_array_equal(m, [[3.0, 2.0, 1.0]])

    @pytest.mark.parametrize("lag", [2, 3, 5])
    def test_matches_statsmodels_lagmat(self, random_walk: np.ndarray, lag: int) -> None:
        expected = lagmat(random_walk[:, None], lag - 1, trim="both", original="in")
        np.testing.assert_allclose(lagged_matrix(random_walk, lag), expected)

    @pytest.mark.parametrize("lag", [0, -1, 6])
    def test_invalid_lag(self, lag: int) -> None:
        with pytest.raises(InvalidLagError):
            lagged_matrix([1.0, 2.0, 3.0, 4.0, 5.0], lag)


class TestDemean:
    """Tests for demean."""

    def test_mean_is_zero(self, random_walk: np.ndarray) -> None:
        centred = demean(random_walk)
        assert abs(np.mean(centred)) < 1e-12

    def test_idempotent(self, random_walk: np.ndarray) -> None:
        once = demean(random_walk)
        twice = demean(once)
        np.testing.assert_allclose(twice, once, atol=1e-12)

    def test_input_not_mutated(self) -> None:
        x = np.array([1.0, 2.0, 3.0])
        demean(x)
        np.testing.assert_array_equal(x, [1.0, 2.0, 3.0])

    def test_zero_mean_unchanged(self) -> None:
        np.testing.assert_array_equal(demean([-1.0, 0.0, 1.0]), [-1.0, 0.0, 1.0])


class TestBuildDesign:
    """Tests for build_design."""

    def test_lag_one(self, fixed_series: list[float]) -> None:
        x = demean(fixed_series)
        design, response = build_design(x, 1)
        y = np.diff(x)

        assert design.shape == (8, 2)
        np.testing.assert_allclose(design[:, 0], x[1:9])
        np.testing.assert_allclose(design[:, 1], y[0:8])
        np.testing.assert_allclose(response, y[1:9])

    def test_lag_zero(self, fixed_series: list[float]) -> None:
        x = demean(fixed_series)
        design, response = build_design(x, 0)

        assert design.shape == (9, 1)
        np.testing.assert_allclose(design[:, 0], x[0:9])
        np.testing.assert_allclose(response, np.diff(x))

    def test_augmentation_columns(self, random_walk: np.ndarray) -> None:
        lag = 3
        design, response = build_design(random_walk, lag)
        y = np.diff(random_walk)
        n_rows = len(random_walk) - 1 - lag

        assert design.shape == (n_rows, lag + 1)
        np.testing.assert_allclose(design[:, 0], random_walk[lag:-1])
        for j in range(1, lag + 1):
            np.testing.assert_allclose(design[:, j], y[lag - j : lag - j + n_rows])
        np.testing.assert_allclose(response, y[lag:])

    def test_too_short(self) -> None:
        with pytest.raises(InsufficientDataError):
            build_design([1.0, 2.0, 3.0], 2)

    def test_negative_lag(self) -> None:
        with pytest.raises(InvalidLagError):
            build_design([1.0, 2.0, 3.0], -1)
