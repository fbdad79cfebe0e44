"""
Core module for linmath.

Contains:
- Constants: Default tolerances, field names and parsing tokens
- Types: Type aliases for scalars, kinds and nested tuples
- Scalar: Scalar kinds, identities, floating capability and conversions
- Base: Abstract base classes shared by vectors and matrices
"""

from .constants import (
    # Numeric constants
    DEFAULT_ABS_TOL,
    DEFAULT_REL_TOL,
    DEFAULT_DISPLAY_PRECISION,
    # Naming
    VECTOR_FIELDS,
    SUPPORTED_DIMENSIONS,
    # Text
    BRACKETS,
    COMPONENT_SEPARATOR,
    # Interop keys
    AGGREGATE_VECTOR,
    AGGREGATE_MATRIX,
)

from .types import (
    Scalar,
    KindLike,
    RowLike,
    Tuple2,
    Tuple3,
    Tuple4,
    NestedTuple2,
    NestedTuple3,
    NestedTuple4,
)

from .scalar import (
    ScalarCapabilityError,
    ScalarKind,
    kind_of,
    zero,
    one,
    floating,
    is_floating,
    apply_floating,
    is_signed_integer,
    apply_integer,
    cast_scalar,
    convert_scalar,
)

from .base import (
    BaseAggregate,
    BaseVector,
    BaseMatrix,
)

__all__ = [
    # Constants
    "DEFAULT_ABS_TOL",
    "DEFAULT_REL_TOL",
    "DEFAULT_DISPLAY_PRECISION",
    "VECTOR_FIELDS",
    "SUPPORTED_DIMENSIONS",
    "BRACKETS",
    "COMPONENT_SEPARATOR",
    "AGGREGATE_VECTOR",
    "AGGREGATE_MATRIX",
    # Types
    "Scalar",
    "KindLike",
    "RowLike",
    "Tuple2",
    "Tuple3",
    "Tuple4",
    "NestedTuple2",
    "NestedTuple3",
    "NestedTuple4",
    # Scalars
    "ScalarCapabilityError",
    "ScalarKind",
    "kind_of",
    "zero",
    "one",
    "floating",
    "is_floating",
    "apply_floating",
    "is_signed_integer",
    "apply_integer",
    "cast_scalar",
    "convert_scalar",
    # Base classes
    "BaseAggregate",
    "BaseVector",
    "BaseMatrix",
]
