import logging
from typing import Dict, Callable

from .backends import LOADERS

logger = logging.getLogger(__name__)

# Dictionary to store loaded backends and their functions
_BACKENDS: Dict[str, Dict[str, Callable]] = {}

def register_backend(name: str, functions: Dict[str, Callable]) -> None:
    """
    Register a backend with its implementation functions.
    
    Parameters
    ----------
    name : str
        Name of the backend (e.g., "numba", "jax")
    functions : Dict[str, Callable]
        Dictionary mapping function names to their implementations
    """
    _BACKENDS[name] = functions

def _load_backend(name: str) -> Dict[str, Callable]:
    """
    Load a specific backend if not already loaded.
    
    Parameters
    ----------
    name : str
        Backend name, either "numba" or "jax"
        
    Returns
    -------
    Dict[str, Callable]
        Dictionary of backend functions
    """
    if name not in _BACKENDS:
        if name not in LOADERS:
            raise ValueError(f"Backend '{name}' not registered")
        logger.debug("Loading backend '%s'", name)
        register_backend(name, LOADERS[name]())
    
    return _BACKENDS[name]

def get_backend_function(backend_name: str, function_name: str) -> Callable:
    """
    Get a specific function from a backend.
    
    Parameters
    ----------
    backend_name : str
        Name of the backend to use
    function_name : str
        Name of the function to retrieve
        
    Returns
    -------
    callable
        The implementation function
    
    Raises
    ------
    ValueError
        If the backend or function is not found
    """
    functions = _load_backend(backend_name)
        
    if function_name not in functions:
        raise ValueError(f"Function '{function_name}' not found in backend '{backend_name}'")
    
    return functions[function_name]

class StatisticalBackend:
    """
    A backend class that provides direct access to backend functions as methods.
    """
    
    def __init__(self, backend: str = "numba"):
        """
        Initialize with a specific backend.
        
        Parameters
        ----------
        backend : str
            Name of the backend to use (default: "numba")

        Raises
        ------
        ValueError
            If the backend is unknown.
        """
        self.backend = backend
        self._functions = _load_backend(backend)
        
    def __getattr__(self, function_name: str) -> Callable:
        """Dynamically fetch backend function when accessed."""
        if function_name.startswith("_"):
            raise AttributeError(function_name)
        if function_name in self._functions:
            return self._functions[function_name]
        raise AttributeError(f"Function '{function_name}' not found in backend '{self.backend}'")
