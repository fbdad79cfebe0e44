"""
Four-component vector.

Vector4 is the row type of Matrix4 and the homogeneous coordinate type.
It is the largest dimension, so it can only shrink (``truncate``).
"""

from dataclasses import dataclass
from typing import ClassVar, Generic, Tuple

from ..core.base import BaseVector
from ..core.constants import VECTOR_FIELDS
from ..core.types import T, Scalar


@dataclass(frozen=True, order=True)
class Vector4(BaseVector, Generic[T]):
    """
    Immutable 4D vector.

    Attributes:
        x: First component
        y: Second component
        z: Third component
        w: Fourth component (homogeneous weight)
    """

    DIMENSION: ClassVar[int] = 4
    FIELDS: ClassVar[Tuple[str, ...]] = VECTOR_FIELDS[4]

    x: T
    y: T
    z: T
    w: T

    def truncate(self) -> 'Vector3':
        """Drop ``w``."""
        from .vec3 import Vector3

        return Vector3(self.x, self.y, self.z)


def vector4(x: Scalar, y: Scalar, z: Scalar, w: Scalar) -> Vector4:
    """Create a Vector4."""
    return Vector4(x, y, z, w)
