"""
Centralized constants for linmath.

This module defines all default values and fixed names used throughout
the library. Using these constants keeps tolerances and naming consistent
between vectors, matrices and the interop helpers.

Usage:
    from linmath.core.constants import DEFAULT_ABS_TOL, VECTOR_FIELDS

    def is_close(self, other, abs_tol: float = DEFAULT_ABS_TOL):
        ...
"""

from typing import Dict, Tuple

# =============================================================================
# Numeric Constants
# =============================================================================

# Absolute tolerance for approximate comparisons (is_close)
DEFAULT_ABS_TOL: float = 1e-9

# Relative tolerance for approximate comparisons (is_close)
DEFAULT_REL_TOL: float = 1e-9

# Number of decimals used by str() for floating components (None = repr-like)
DEFAULT_DISPLAY_PRECISION = None


# =============================================================================
# Component Naming
# =============================================================================

# Field names per dimension. Matrices reuse these names for their rows,
# so ``m.x.y`` is row 0, column 1.
VECTOR_FIELDS: Dict[int, Tuple[str, ...]] = {
    2: ("x", "y"),
    3: ("x", "y", "z"),
    4: ("x", "y", "z", "w"),
}

SUPPORTED_DIMENSIONS: Tuple[int, ...] = (2, 3, 4)


# =============================================================================
# Text Parsing
# =============================================================================

# Characters ignored when parsing "(1, 2)", "[1, 2]" or "{1, 2}"
BRACKETS: Tuple[str, ...] = ("(", ")", "[", "]", "{", "}")

# Separator between components in str() output and parsed text
COMPONENT_SEPARATOR: str = ", "


# =============================================================================
# Interop Keys
# =============================================================================

# Values accepted by from_numpy/from_tensor(kind=...)
AGGREGATE_VECTOR: str = "vector"
AGGREGATE_MATRIX: str = "matrix"
