from typing import Any, Dict

import numpy as np
import pandas as pd
import jax.numpy as jnp
from scipy import stats

from tinyadf.backend import StatisticalBackend
from tinyadf.config import DEFAULT_BACKEND
from tinyadf.exceptions import SingularDesignError


class Ridge:
    """
    High-performance Ridge regression with L2 regularization.

    This implementation delegates computations to an optimized backend.
    When using the 'numba' backend, inputs should be NumPy arrays.
    When using the 'jax' backend, inputs should be JAX arrays.

    Standard errors are those of the ridge estimator itself,
    sigma^2 Z Z^T with Z = (X^T X + alpha I)^-1 X^T, rather than the
    OLS covariance.

    Parameters
    ----------
    alpha : float, default=1.0
        Regularization strength; must be non-negative.

    fit_intercept : bool, default=True
        Whether to calculate the intercept for this model.

    backend : str, default=DEFAULT_BACKEND
        Computational backend to use ("numba" or "jax").

    Attributes
    ----------
    coef_ : ndarray of shape (n_features,)
        Estimated coefficients.
    intercept_ : float
        Intercept term, 0.0 when ``fit_intercept`` is False.
    residuals_ : ndarray of shape (n_samples,)
        The residuals of the fit.
    std_errors_ : ndarray
        Standard errors of the fitted parameters, intercept first when
        ``fit_intercept`` is True.
    r_squared_ : float
        R-squared score.
    adj_r_squared_ : float
        Adjusted R-squared score.
    aic_ : float
        Akaike Information Criterion.
    """

    def __init__(self, alpha: float = 1.0, fit_intercept: bool = True,
                 backend: str = DEFAULT_BACKEND, validate_input: bool = False):
        if alpha < 0:
            raise ValueError("Alpha must be a non-negative value")

        self.alpha = alpha
        self.fit_intercept = fit_intercept
        self.backend = backend
        self._backend = StatisticalBackend(backend=backend)
        self.coef_ = None
        self.intercept_ = None
        self.residuals_ = None
        self.std_errors_ = None
        self.r_squared_ = None
        self.adj_r_squared_ = None
        self.aic_ = None
        self._feature_names = None
        self._validate_input = validate_input

    def _check_input_type(self, X) -> None:
        if self.backend == "jax" and not isinstance(X, jnp.ndarray):
            raise ValueError("Input X must be a JAX array when using the 'jax' backend")
        elif self.backend == "numba" and not isinstance(X, np.ndarray):
            raise ValueError("Input X must be a NumPy array when using the 'numba' backend")

    def _as_backend_array(self, a):
        if hasattr(a, 'to_numpy'):
            a = a.to_numpy()
        if self.backend == "jax":
            return jnp.asarray(a, dtype=jnp.float64)
        return np.ascontiguousarray(a, dtype=np.float64)

    def fit(self, X, y) -> 'Ridge':
        """
        Fit Ridge regression model.

        Parameters
        ----------
        X : array-like of shape (n_samples, n_features)
            Training data. Should be a NumPy array when using 'numba' backend,
            or a JAX array when using 'jax' backend. If a DataFrame is provided,
            it will be converted to the appropriate array type.

        y : array-like of shape (n_samples,)
            Target values. Should match the array type requirements for X.

        Returns
        -------
        self : object
            Returns self.

        Raises
        ------
        SingularDesignError
            If the fit produces non-finite coefficients.
        """
        if self._validate_input:
            self._check_input_type(X)

        # Extract feature names if available
        if hasattr(X, 'columns'):
            self._feature_names = [str(c) for c in X.columns]
        else:
            self._feature_names = [f'x_{i}' for i in range(X.shape[1])]

        X_array = self._as_backend_array(X)
        y_array = self._as_backend_array(y)

        # Add intercept column
        if self.fit_intercept:
            if self.backend == "jax":
                X_with_intercept = jnp.column_stack([jnp.ones(X_array.shape[0]), X_array])
            else:
                X_with_intercept = np.column_stack([np.ones(X_array.shape[0]), X_array])
            self._feature_names = ['intercept'] + self._feature_names
        else:
            X_with_intercept = X_array

        # Fit coefficients using the backend
        beta = self._backend.ridge_fit_core(X_with_intercept, y_array, self.alpha)

        # Calculate statistics
        result = self._backend.ridge_stats_core(X_with_intercept, y_array, beta, self.alpha)
        residuals, std_errors, r_squared, adj_r_squared, aic = result

        # Convert to NumPy for consistent storage
        beta = np.asarray(beta, dtype=np.float64)
        residuals = np.asarray(residuals, dtype=np.float64)
        std_errors = np.asarray(std_errors, dtype=np.float64)

        if not np.all(np.isfinite(beta)):
            raise SingularDesignError(
                f"Ridge fit produced non-finite coefficients (alpha={self.alpha})"
            )

        # Store results
        if self.fit_intercept:
            self.intercept_ = float(beta[0])
            self.coef_ = beta[1:]
        else:
            self.intercept_ = 0.0
            self.coef_ = beta

        self.residuals_ = residuals
        self.std_errors_ = std_errors
        self.r_squared_ = float(r_squared)
        self.adj_r_squared_ = float(adj_r_squared)
        self.aic_ = float(aic)

        return self

    def predict(self, X) -> np.ndarray:
        """
        Predict using the Ridge regression model.

        Parameters
        ----------
        X : array-like of shape (n_samples, n_features)
            Samples for prediction.

        Returns
        -------
        ndarray of shape (n_samples,)
            Returns predicted values.
        """
        if self.coef_ is None:
            raise ValueError("Model not fitted yet. Call 'fit' first.")

        if self._validate_input:
            self._check_input_type(X)

        X_array = np.asarray(X.to_numpy() if hasattr(X, 'to_numpy') else X, dtype=np.float64)
        return X_array @ self.coef_ + self.intercept_

    def summary(self) -> Dict[str, Any]:
        """
        Get a summary of regression results.

        Returns
        -------
        dict
            Dictionary containing regression results with the following keys:
            - 'coefficients': DataFrame with coefficients, std errors, t-values, p-values
            - 'r_squared': R-squared value
            - 'adj_r_squared': Adjusted R-squared value
            - 'aic': Akaike Information Criterion
            - 'n_observations': Number of observations
            - 'df_residuals': Degrees of freedom of the residuals
        """
        if self.coef_ is None:
            raise ValueError("Model not fitted yet. Call 'fit' first.")

        params = np.concatenate(([self.intercept_], self.coef_)) if self.fit_intercept else self.coef_
        n_obs = len(self.residuals_)
        df_resid = n_obs - len(params)

        t_stats = params / self.std_errors_

        # Two-tailed p-values
        p_values = 2 * (1 - stats.t.cdf(np.abs(t_stats), df_resid))

        coef_df = pd.DataFrame({
            'coef': params,
            'std_err': self.std_errors_,
            't': t_stats,
            'P>|t|': p_values
        }, index=self._feature_names)

        return {
            'coefficients': coef_df,
            'r_squared': self.r_squared_,
            'adj_r_squared': self.adj_r_squared_,
            'aic': self.aic_,
            'n_observations': n_obs,
            'df_residuals': df_resid
        }
