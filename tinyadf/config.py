import os
from dataclasses import dataclass
from typing import Optional

# Backend used when none is requested explicitly
DEFAULT_BACKEND = os.getenv("TINYADF_BACKEND", "numba")

# Test statistic threshold (conventional ADF critical value)
DEFAULT_P_VALUE = -3.45

# L penalty passed to the ridge regression
L_PENALTY = 0.0001


@dataclass(frozen=True)
class ADFConfig:
    """
    Optional settings for an ADF test.

    ``None`` means "use the default": the threshold falls back to
    ``DEFAULT_P_VALUE`` and the lag to ``floor(cbrt(nobs))``.
    """

    p_value_threshold: Optional[float] = None
    lag: Optional[int] = None
    backend: str = DEFAULT_BACKEND

    @classmethod
    def from_env(cls) -> "ADFConfig":
        """Load configuration from environment variables."""
        threshold = os.getenv("TINYADF_P_VALUE")
        lag = os.getenv("TINYADF_LAG")
        return cls(
            p_value_threshold=float(threshold) if threshold else None,
            lag=int(lag) if lag else None,
            backend=os.getenv("TINYADF_BACKEND", DEFAULT_BACKEND),
        )
