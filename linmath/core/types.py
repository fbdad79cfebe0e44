"""
Type aliases for linmath.

Components are duck-typed: anything that supports the operators an
operation needs can be stored in a vector or matrix. In practice the
library is exercised with three families of scalars:

    - Python numbers: ``int``, ``float``, ``bool``
    - numpy scalars: ``np.float32``, ``np.int8``, ``np.uint64``, ...
    - objects with their own math methods (``decimal.Decimal``, 0-d tensors)

Scalar kinds (fixed-width numeric types used as cast targets) are
described by ``KindLike`` and resolved by ``ScalarKind.parse``.

Nesting conventions:
    Vector:  (x, y[, z][, w])
    Matrix:  ((x.x, x.y, ...), (y.x, y.y, ...), ...)   # row-major
"""

from typing import Any, Sequence, Tuple, TypeVar, Union

import numpy as np


# =============================================================================
# Generic Type Variables
# =============================================================================

T = TypeVar('T')


# =============================================================================
# Scalar Aliases
# =============================================================================

# A single component value
Scalar = Any

# Anything ScalarKind.parse understands: a ScalarKind, "f32", "float32",
# np.float32, np.dtype("float32"), or the Python types int/float/bool
KindLike = Union[str, type, np.dtype, Any]


# =============================================================================
# Nested Tuple Aliases
# =============================================================================

Tuple2 = Tuple[Scalar, Scalar]
Tuple3 = Tuple[Scalar, Scalar, Scalar]
Tuple4 = Tuple[Scalar, Scalar, Scalar, Scalar]

NestedTuple2 = Tuple[Tuple2, Tuple2]
NestedTuple3 = Tuple[Tuple3, Tuple3, Tuple3]
NestedTuple4 = Tuple[Tuple4, Tuple4, Tuple4, Tuple4]

# Row input accepted by matrix factories: a row vector or any sequence
RowLike = Union[Sequence[Scalar], Any]
