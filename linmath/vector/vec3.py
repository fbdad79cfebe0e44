"""
Three-component vector.

Vector3 is the row type of Matrix3 and the Cartesian point/direction type
used by the homogeneous helpers on Matrix4.
"""

from dataclasses import dataclass
from typing import ClassVar, Generic, Tuple

from ..core.base import BaseVector
from ..core.constants import VECTOR_FIELDS
from ..core.types import T, Scalar


@dataclass(frozen=True, order=True)
class Vector3(BaseVector, Generic[T]):
    """
    Immutable 3D vector.

    Attributes:
        x: First component
        y: Second component
        z: Third component
    """

    DIMENSION: ClassVar[int] = 3
    FIELDS: ClassVar[Tuple[str, ...]] = VECTOR_FIELDS[3]

    x: T
    y: T
    z: T

    def cross(self, other: 'Vector3') -> 'Vector3':
        """
        Right-handed cross product.

        Args:
            other: Second operand

        Returns:
            Vector perpendicular to both operands, ``|a||b|sin(theta)`` long
        """
        if not isinstance(other, Vector3):
            raise TypeError(f"Cannot cross Vector3 with {type(other).__name__}")
        return Vector3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def extend(self, w: Scalar) -> 'Vector4':
        """Append a fourth component (w=1 for points, w=0 for directions)."""
        from .vec4 import Vector4

        return Vector4(self.x, self.y, self.z, w)

    def truncate(self) -> 'Vector2':
        """Drop the last component."""
        from .vec2 import Vector2

        return Vector2(self.x, self.y)


def vector3(x: Scalar, y: Scalar, z: Scalar) -> Vector3:
    """Create a Vector3."""
    return Vector3(x, y, z)
