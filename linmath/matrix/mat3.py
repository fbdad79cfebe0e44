"""
3x3 matrix.

Linear transforms of 3D space. The determinant uses the direct six-term
expansion rather than cofactors; the cofactor matrix is built from nine
explicit 2x2 determinants. Both are written term for term so rounding is
reproducible across implementations.

Layout (row-major, rows are Vector3):
    | x.x  x.y  x.z |
    | y.x  y.y  y.z |
    | z.x  z.y  z.z |
"""

from dataclasses import dataclass
from typing import ClassVar, Generic, Tuple

from ..core.base import BaseMatrix
from ..core.constants import VECTOR_FIELDS
from ..core.scalar import cos, one, sin, zero
from ..core.types import T, RowLike, Scalar
from ..vector.vec2 import Vector2
from ..vector.vec3 import Vector3
from .mat2 import Matrix2


@dataclass(frozen=True)
class Matrix3(BaseMatrix, Generic[T]):
    """
    Immutable 3x3 matrix made of three row vectors.

    Supports:
    - Determinant (rule of Sarrus), cofactor, adjoint, inverse
    - Rotation constructors about each axis
    - Extension to a 4x4 homogeneous transform
    """

    DIMENSION: ClassVar[int] = 3
    FIELDS: ClassVar[Tuple[str, ...]] = VECTOR_FIELDS[3]
    ROW_TYPE: ClassVar[type] = Vector3

    x: Vector3
    y: Vector3
    z: Vector3

    def determinant(self) -> Scalar:
        x, y, z = self.x, self.y, self.z
        return (
            x.x * y.y * z.z
            + x.y * y.z * z.x
            + x.z * y.x * z.y
            - x.x * y.z * z.y
            - x.y * y.x * z.z
            - x.z * y.y * z.x
        )

    def cofactor(self) -> 'Matrix3':
        """
        Signed 2x2 minors, checkerboard signs:

            + - +
            - + -
            + - +
        """
        x, y, z = self.x, self.y, self.z
        return Matrix3(
            Vector3(
                Matrix2(Vector2(y.y, y.z), Vector2(z.y, z.z)).determinant(),
                -Matrix2(Vector2(y.x, y.z), Vector2(z.x, z.z)).determinant(),
                Matrix2(Vector2(y.x, y.y), Vector2(z.x, z.y)).determinant(),
            ),
            Vector3(
                -Matrix2(Vector2(x.y, x.z), Vector2(z.y, z.z)).determinant(),
                Matrix2(Vector2(x.x, x.z), Vector2(z.x, z.z)).determinant(),
                -Matrix2(Vector2(x.x, x.y), Vector2(z.x, z.y)).determinant(),
            ),
            Vector3(
                Matrix2(Vector2(x.y, x.z), Vector2(y.y, y.z)).determinant(),
                -Matrix2(Vector2(x.x, x.z), Vector2(y.x, y.z)).determinant(),
                Matrix2(Vector2(x.x, x.y), Vector2(y.x, y.y)).determinant(),
            ),
        )

    def inverse(self) -> 'Matrix3':
        """Adjoint with each row divided by the determinant."""
        det = self.determinant()
        self._warn_if_singular(det)
        x, y, z = self.adjoint()
        return Matrix3(x / det, y / det, z / det)

    def minor(self, row: int, col: int) -> Matrix2:
        """2x2 matrix left after deleting ``row`` and ``col``."""
        return Matrix2.from_iterable(self._minor_rows(row, col))

    def extend(self, right: Vector3, bottom: Vector3, corner: Scalar) -> 'Matrix4':
        """
        Embed into a 4x4 homogeneous transform.

        Args:
            right: Fourth column for the three existing rows (translation)
            bottom: First three entries of the new bottom row
            corner: Bottom-right entry

        Returns:
            Matrix4 whose top-left 3x3 block is ``self``
        """
        from .mat4 import Matrix4

        return Matrix4(
            self.x.extend(right.x),
            self.y.extend(right.y),
            self.z.extend(right.z),
            bottom.extend(corner),
        )

    # === Rotations (right-handed, angle in radians) ===

    @classmethod
    def rotate_x(cls, angle: Scalar) -> 'Matrix3':
        c, s = cos(angle), sin(angle)
        o, z = one(type(c)), zero(type(c))
        return cls(
            Vector3(o, z, z),
            Vector3(z, c, -s),
            Vector3(z, s, c),
        )

    @classmethod
    def rotate_y(cls, angle: Scalar) -> 'Matrix3':
        c, s = cos(angle), sin(angle)
        o, z = one(type(c)), zero(type(c))
        return cls(
            Vector3(c, z, s),
            Vector3(z, o, z),
            Vector3(-s, z, c),
        )

    @classmethod
    def rotate_z(cls, angle: Scalar) -> 'Matrix3':
        c, s = cos(angle), sin(angle)
        o, z = one(type(c)), zero(type(c))
        return cls(
            Vector3(c, -s, z),
            Vector3(s, c, z),
            Vector3(z, z, o),
        )


def matrix3(x: RowLike, y: RowLike, z: RowLike) -> Matrix3:
    """Create a Matrix3 from three rows (Vector3 or sequences)."""
    return Matrix3(x, y, z)
