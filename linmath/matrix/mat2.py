"""
2x2 matrix.

The base case of the determinant recursion: Matrix3 cofactors are nine
Matrix2 determinants.

Layout (row-major, rows are Vector2):
    | x.x  x.y |
    | y.x  y.y |
"""

from dataclasses import dataclass
from typing import ClassVar, Generic, Tuple

from ..core.base import BaseMatrix
from ..core.constants import VECTOR_FIELDS
from ..core.scalar import cos, sin
from ..core.types import T, RowLike, Scalar
from ..vector.vec2 import Vector2


@dataclass(frozen=True)
class Matrix2(BaseMatrix, Generic[T]):
    """
    Immutable 2x2 matrix made of two row vectors.

    Example:
        >>> m = matrix2((2.0, 0.0), (0.0, 2.0))
        >>> m.determinant()
        4.0
        >>> m.inverse()
        Matrix2(x=Vector2(x=0.5, y=-0.0), y=Vector2(x=-0.0, y=0.5))
    """

    DIMENSION: ClassVar[int] = 2
    FIELDS: ClassVar[Tuple[str, ...]] = VECTOR_FIELDS[2]
    ROW_TYPE: ClassVar[type] = Vector2

    x: Vector2
    y: Vector2

    def determinant(self) -> Scalar:
        x, y = self.x, self.y
        return x.x * y.y - x.y * y.x

    def cofactor(self) -> 'Matrix2':
        x, y = self.x, self.y
        return Matrix2(
            Vector2(y.y, -y.x),
            Vector2(-x.y, x.x),
        )

    def inverse(self) -> 'Matrix2':
        """
        Closed-form inverse ``[[y.y, -x.y], [-y.x, x.x]] / det``.

        A zero determinant is not intercepted: Python scalars raise
        ZeroDivisionError, numpy floats produce inf/NaN.
        """
        x, y = self.x, self.y
        det = self.determinant()
        self._warn_if_singular(det)
        return Matrix2(
            Vector2(y.y, -x.y) / det,
            Vector2(-y.x, x.x) / det,
        )

    def extend(self, right: Vector2, bottom: Vector2, corner: Scalar) -> 'Matrix3':
        """
        Embed into a 3x3 matrix.

        Args:
            right: New third column for the two existing rows
            bottom: First two entries of the new bottom row
            corner: Bottom-right entry

        Returns:
            Matrix3 whose top-left 2x2 block is ``self``
        """
        from .mat3 import Matrix3

        return Matrix3(
            self.x.extend(right.x),
            self.y.extend(right.y),
            bottom.extend(corner),
        )

    @classmethod
    def rotate(cls, angle: Scalar) -> 'Matrix2':
        """Counter-clockwise rotation by ``angle`` radians (floating scalars only)."""
        c, s = cos(angle), sin(angle)
        return cls(
            Vector2(c, -s),
            Vector2(s, c),
        )


def matrix2(x: RowLike, y: RowLike) -> Matrix2:
    """Create a Matrix2 from two rows (Vector2 or sequences)."""
    return Matrix2(x, y)
