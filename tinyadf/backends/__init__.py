# tinyadf/backends/__init__.py
from typing import Callable, Dict

BACKEND_NAMES = ("numba", "jax")


def load_numba() -> Dict[str, Callable]:
    from .numba.ridge import _ridge_fit_core, _ridge_stats_core, _precompile
    # Trigger precompilation
    _precompile()
    return {
        "ridge_fit_core": _ridge_fit_core,
        "ridge_stats_core": _ridge_stats_core,
    }


def load_jax() -> Dict[str, Callable]:
    from .jax.ridge import _ridge_fit_core, _ridge_stats_core, _precompile
    _precompile()
    return {
        "ridge_fit_core": _ridge_fit_core,
        "ridge_stats_core": _ridge_stats_core,
    }


LOADERS = {
    "numba": load_numba,
    "jax": load_jax,
}
