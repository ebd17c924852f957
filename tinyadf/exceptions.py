"""Exceptions raised by the ADF test."""


class ADFError(ValueError):
    """Base exception for ADF test failures."""
    pass


class InsufficientDataError(ADFError):
    """Raised when the series is too short for the requested lag."""
    pass


class InvalidLagError(ADFError):
    """Raised when a lag is not a usable number of lag columns."""
    pass


class SingularDesignError(ADFError):
    """Raised when the regression cannot produce a finite statistic."""
    pass
