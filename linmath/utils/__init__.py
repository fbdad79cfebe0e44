"""
Utility functions for linmath.

Includes configuration management and numpy/torch conversion helpers.
"""

from .config import Config, load_config, save_config, get_config, set_config
from .interop import to_numpy, from_numpy, to_tensor, from_tensor

__all__ = [
    # Config
    "Config",
    "load_config",
    "save_config",
    "get_config",
    "set_config",
    # Interop
    "to_numpy",
    "from_numpy",
    "to_tensor",
    "from_tensor",
]
