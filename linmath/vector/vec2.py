"""
Two-component vector.

Vector2 is the row type of Matrix2 and the smallest member of the vector
family. All arithmetic is inherited from BaseVector; this module adds the
dimension-changing operation ``extend``.
"""

from dataclasses import dataclass
from typing import ClassVar, Generic, Tuple

from ..core.base import BaseVector
from ..core.constants import VECTOR_FIELDS
from ..core.types import T, Scalar


@dataclass(frozen=True, order=True)
class Vector2(BaseVector, Generic[T]):
    """
    Immutable 2D vector.

    Attributes:
        x: First component
        y: Second component

    Example:
        >>> v = vector2(3.0, 4.0)
        >>> v.magnitude()
        5.0
        >>> v.extend(1.0)
        Vector3(x=3.0, y=4.0, z=1.0)
    """

    DIMENSION: ClassVar[int] = 2
    FIELDS: ClassVar[Tuple[str, ...]] = VECTOR_FIELDS[2]

    x: T
    y: T

    def extend(self, z: Scalar) -> 'Vector3':
        """Append a third component."""
        from .vec3 import Vector3

        return Vector3(self.x, self.y, z)


def vector2(x: Scalar, y: Scalar) -> Vector2:
    """Create a Vector2."""
    return Vector2(x, y)
