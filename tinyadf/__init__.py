import logging

from .config import ADFConfig, DEFAULT_BACKEND, DEFAULT_P_VALUE, L_PENALTY
from .exceptions import ADFError, InsufficientDataError, InvalidLagError, SingularDesignError
from .regression.linear_models import Ridge
from .stationarity.adf import ADFResult, ADFTest, adf_test
from .stationarity.design import build_design, demean, diff, lagged_matrix

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "ADFConfig",
    "ADFError",
    "ADFResult",
    "ADFTest",
    "DEFAULT_BACKEND",
    "DEFAULT_P_VALUE",
    "InsufficientDataError",
    "InvalidLagError",
    "L_PENALTY",
    "Ridge",
    "SingularDesignError",
    "adf_test",
    "build_design",
    "demean",
    "diff",
    "lagged_matrix",
]
