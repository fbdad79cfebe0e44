"""
Matrix module.

Row-major square matrices whose rows are vectors of the same dimension,
with closed-form determinant, cofactor, adjoint and inverse.
"""

from ..core.base import BaseMatrix
from .mat2 import Matrix2, matrix2
from .mat3 import Matrix3, matrix3
from .mat4 import Matrix4, matrix4

__all__ = [
    "BaseMatrix",
    "Matrix2",
    "Matrix3",
    "Matrix4",
    "matrix2",
    "matrix3",
    "matrix4",
]
