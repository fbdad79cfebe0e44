"""
linmath: Generic fixed-size linear algebra

Small, immutable vectors (2/3/4 components) and square matrices (2x2, 3x3,
4x4) whose components can be any scalar type: Python numbers, numpy
scalars, or objects that bring their own math methods.

Key Features:
- Component-wise arithmetic with scalar broadcasting
- Dot, cross, magnitude, normalize, distance
- Closed-form determinant, cofactor, adjoint and inverse
- Rotation and homogeneous-transform constructors
- Wrapping/saturating casts and lossless conversions between numeric kinds
- numpy and torch interop

API Design:
- Values are frozen dataclasses; every operation returns a new value
- Matrices are row-major: rows are vectors, ``m.x.y`` is row 0, column 1
- Unsupported operand types return NotImplemented (Python raises TypeError)
- Scalar semantics (division by zero, overflow) are never intercepted

Example:
    >>> import linmath
    >>> v = linmath.vector3(1.0, 2.0, 3.0)
    >>> linmath.dot(v, v)
    14.0
    >>> linmath.Matrix3.identity() * v == v
    True
"""

__version__ = "0.1.0"
__author__ = "linmath Contributors"

from . import core
from . import vector
from . import matrix
from . import utils

from .core.scalar import (
    ScalarCapabilityError,
    ScalarKind,
    cast_scalar,
    convert_scalar,
)
from .vector import (
    Vector2,
    Vector3,
    Vector4,
    vector2,
    vector3,
    vector4,
    dot,
    distance,
)
from .matrix import (
    Matrix2,
    Matrix3,
    Matrix4,
    matrix2,
    matrix3,
    matrix4,
)
from .utils.config import Config, get_config, set_config

__all__ = [
    # Submodules
    "core",
    "vector",
    "matrix",
    "utils",
    # Scalars
    "ScalarCapabilityError",
    "ScalarKind",
    "cast_scalar",
    "convert_scalar",
    # Vectors
    "Vector2",
    "Vector3",
    "Vector4",
    "vector2",
    "vector3",
    "vector4",
    "dot",
    "distance",
    # Matrices
    "Matrix2",
    "Matrix3",
    "Matrix4",
    "matrix2",
    "matrix3",
    "matrix4",
    # Config
    "Config",
    "get_config",
    "set_config",
]
