"""
4x4 matrix.

Homogeneous transforms of 3D space. Determinant and cofactors come from
3x3 minors; the helpers at the bottom build and apply affine transforms
using the ``extend``/``truncate`` conventions of the vector types
(w=1 for points, w=0 for directions).

Layout (row-major, rows are Vector4):
    | x.x  x.y  x.z  x.w |
    | y.x  y.y  y.z  y.w |
    | z.x  z.y  z.z  z.w |
    | w.x  w.y  w.z  w.w |
"""

from dataclasses import dataclass
from typing import ClassVar, Generic, Tuple

from ..core.base import BaseMatrix
from ..core.constants import VECTOR_FIELDS
from ..core.scalar import one, zero
from ..core.types import T, RowLike, Scalar
from ..vector.vec3 import Vector3
from ..vector.vec4 import Vector4
from .mat3 import Matrix3


@dataclass(frozen=True)
class Matrix4(BaseMatrix, Generic[T]):
    """
    Immutable 4x4 matrix made of four row vectors.

    Example:
        >>> m = Matrix4.translation(Vector3(1.0, 2.0, 3.0))
        >>> m.transform_point(Vector3(0.0, 0.0, 0.0))
        Vector3(x=1.0, y=2.0, z=3.0)
    """

    DIMENSION: ClassVar[int] = 4
    FIELDS: ClassVar[Tuple[str, ...]] = VECTOR_FIELDS[4]
    ROW_TYPE: ClassVar[type] = Vector4

    x: Vector4
    y: Vector4
    z: Vector4
    w: Vector4

    def minor(self, row: int, col: int) -> Matrix3:
        """3x3 matrix left after deleting ``row`` and ``col``."""
        return Matrix3.from_iterable(self._minor_rows(row, col))

    def determinant(self) -> Scalar:
        """Laplace expansion along the first row."""
        x = self.x
        m00 = self.minor(0, 0).determinant()
        m01 = self.minor(0, 1).determinant()
        m02 = self.minor(0, 2).determinant()
        m03 = self.minor(0, 3).determinant()
        return x.x * m00 - x.y * m01 + x.z * m02 - x.w * m03

    def cofactor(self) -> 'Matrix4':
        rows = []
        for i in range(4):
            row = []
            for j in range(4):
                det = self.minor(i, j).determinant()
                row.append(det if (i + j) % 2 == 0 else -det)
            rows.append(Vector4(*row))
        return Matrix4(*rows)

    def inverse(self) -> 'Matrix4':
        """Adjoint with each row divided by the determinant."""
        det = self.determinant()
        self._warn_if_singular(det)
        return Matrix4(*(row / det for row in self.adjoint()))

    # === Homogeneous Transforms ===

    @classmethod
    def from_affine(cls, linear: Matrix3, translation: Vector3) -> 'Matrix4':
        """
        Compose a linear map and a translation.

        Args:
            linear: Upper-left 3x3 block
            translation: Last column

        Returns:
            Matrix4 with bottom row (0, 0, 0, 1) in the scalar type of ``linear``
        """
        kind = type(linear.x.x)
        z = zero(kind)
        return linear.extend(translation, Vector3(z, z, z), one(kind))

    @classmethod
    def translation(cls, v: Vector3) -> 'Matrix4':
        return cls.from_affine(Matrix3.identity(type(v.x)), v)

    @classmethod
    def scale(cls, v: Vector3) -> 'Matrix4':
        z = zero(type(v.x))
        linear = Matrix3(
            Vector3(v.x, z, z),
            Vector3(z, v.y, z),
            Vector3(z, z, v.z),
        )
        return cls.from_affine(linear, Vector3(z, z, z))

    def transform_point(self, p: Vector3) -> Vector3:
        """Apply to a point (w=1), then divide by the resulting w."""
        h = self.apply_to(p.extend(one(type(p.x))))
        return h.truncate() / h.w

    def transform_vector(self, v: Vector3) -> Vector3:
        """Apply to a direction (w=0); translation has no effect."""
        return self.apply_to(v.extend(zero(type(v.x)))).truncate()


def matrix4(x: RowLike, y: RowLike, z: RowLike, w: RowLike) -> Matrix4:
    """Create a Matrix4 from four rows (Vector4 or sequences)."""
    return Matrix4(x, y, z, w)
