"""
Abstract base classes for linmath value types.

Every vector and matrix is a frozen dataclass whose fields are named
x, y[, z][, w]. The bases here lift scalar operations onto those fields so
the concrete classes only carry what is specific to their dimension
(extend, cross, determinant, cofactor, rotations).

Class Hierarchy:
    BaseAggregate (abstract)
    ├── BaseVector
    │   ├── Vector2
    │   ├── Vector3
    │   └── Vector4
    └── BaseMatrix
        ├── Matrix2
        ├── Matrix3
        └── Matrix4

Conventions:
    - Values are immutable; every operation returns a new value.
    - Matrices are row-major: each field is a full row vector, so
      ``m.x.y`` is row 0, column 1.
    - Operators return ``NotImplemented`` for unsupported operand types,
      so Python raises ``TypeError``.
    - Scalar semantics (division by zero, overflow) are never intercepted.
"""

import functools
import logging
import math
import operator
from abc import ABC, abstractmethod
from typing import Any, Callable, ClassVar, Iterable, Iterator, Optional, Tuple

import numpy as np

from .constants import BRACKETS, COMPONENT_SEPARATOR
from .scalar import (
    apply_floating,
    apply_integer,
    cast_scalar,
    convert_scalar,
    fract,
    integer_signum,
    is_floating,
    is_normal,
    is_signed_integer,
    one as scalar_one,
    round_half_away,
    signum,
    sqrt,
    swap_bytes,
    to_be,
    to_le,
    wrapping_abs,
    wrapping_neg,
    zero as scalar_zero,
)
from .types import KindLike, Scalar

logger = logging.getLogger(__name__)


def _split_components(text: str) -> list:
    """Strip brackets and split on commas, tolerating one trailing comma."""
    cleaned = "".join(ch for ch in text if ch not in BRACKETS)
    parts = [part.strip() for part in cleaned.split(",")]
    if len(parts) > 1 and parts[-1] == "":
        parts.pop()
    return parts


def _format_scalar(value: Scalar, spec: str) -> str:
    if spec:
        return format(value, spec)
    from ..utils.config import get_config

    precision = get_config().display_precision
    if precision is not None and is_floating(value):
        return f"{value:.{precision}f}"
    return str(value)


def _is_operand_scalar(value: Any) -> bool:
    # Sequences are never broadcast; they would silently repeat or concatenate
    return not isinstance(value, (BaseAggregate, tuple, list, np.ndarray))


# =============================================================================
# Shared Base
# =============================================================================

class BaseAggregate(ABC):
    """
    Fixed-size, immutable, named-field aggregate.

    Subclasses are frozen dataclasses and set ``DIMENSION`` and ``FIELDS``.
    Aggregates behave as read-only sequences of their fields.
    """

    DIMENSION: ClassVar[int]
    FIELDS: ClassVar[Tuple[str, ...]]

    # Make numpy defer to our reflected operators instead of treating the
    # aggregate as an array-like (np.float32(2) * v must stay a vector).
    __array_ufunc__ = None

    def __len__(self) -> int:
        return self.DIMENSION

    def __iter__(self) -> Iterator[Any]:
        return (getattr(self, name) for name in self.FIELDS)

    def __getitem__(self, index: int) -> Any:
        if isinstance(index, bool) or not isinstance(index, (int, np.integer)):
            raise TypeError(
                f"{type(self).__name__} indices must be integers, not {type(index).__name__}"
            )
        if not 0 <= index < self.DIMENSION:
            raise IndexError(
                f"index out of bounds, index is {index} but the len is {self.DIMENSION}"
            )
        return getattr(self, self.FIELDS[index])

    def __str__(self) -> str:
        return format(self, "")

    @abstractmethod
    def map(self, fn: Callable[[Scalar], Scalar]) -> 'BaseAggregate':
        """Apply ``fn`` to every scalar component."""

    @abstractmethod
    def is_close(
        self,
        other: 'BaseAggregate',
        rel_tol: Optional[float] = None,
        abs_tol: Optional[float] = None
    ) -> bool:
        """Approximate equality, component by component."""

    @abstractmethod
    def to_tuple(self) -> tuple:
        """Plain (possibly nested) tuple of components."""

    def to_list(self) -> list:
        """Plain (possibly nested) list of components."""
        return [item.to_list() if isinstance(item, BaseAggregate) else item for item in self]

    def cast(self, kind: KindLike) -> 'BaseAggregate':
        """
        Numeric cast of every component to ``kind``.

        Integer targets wrap, floating sources truncate and saturate.
        See ``linmath.core.scalar.cast_scalar``.
        """
        return self.map(lambda value: cast_scalar(value, kind))

    def convert(self, kind: KindLike) -> 'BaseAggregate':
        """
        Lossless conversion of every component to ``kind``.

        Raises:
            ScalarCapabilityError: If any component would lose information
        """
        return self.map(lambda value: convert_scalar(value, kind))


# =============================================================================
# Vectors
# =============================================================================

class BaseVector(BaseAggregate):
    """
    Component-wise arithmetic and reductions shared by Vector2/3/4.

    Binary operators accept a vector of the same type (component-wise) or
    a scalar (broadcast). Scalars on the left are supported for ``+`` and
    ``*``, which also makes the builtin ``sum()`` work.
    """

    # --- Construction ---

    @classmethod
    def from_iterable(cls, values: Iterable[Scalar]) -> 'BaseVector':
        """Build from exactly DIMENSION values."""
        values = tuple(values)
        if len(values) != cls.DIMENSION:
            raise ValueError(
                f"{cls.__name__} expects {cls.DIMENSION} components, got {len(values)}"
            )
        return cls(*values)

    @classmethod
    def splat(cls, value: Scalar) -> 'BaseVector':
        """Vector with every component equal to ``value``."""
        return cls(*([value] * cls.DIMENSION))

    @classmethod
    def zero(cls, kind: KindLike = float) -> 'BaseVector':
        return cls.splat(scalar_zero(kind))

    @classmethod
    def one(cls, kind: KindLike = float) -> 'BaseVector':
        return cls.splat(scalar_one(kind))

    @classmethod
    def sum_of(cls, vectors: Iterable['BaseVector'], kind: KindLike = float) -> 'BaseVector':
        """
        Sum of an iterable of vectors.

        The fold starts at zero of the first vector's scalar type; an empty
        iterable yields ``zero(kind)``.
        """
        vectors = iter(vectors)
        first = next(vectors, None)
        if first is None:
            return cls.zero(kind)
        start = cls.zero(type(first.x)) + first
        return functools.reduce(operator.add, vectors, start)

    @classmethod
    def product_of(cls, vectors: Iterable['BaseVector'], kind: KindLike = float) -> 'BaseVector':
        """Component-wise product of an iterable of vectors (see sum_of)."""
        vectors = iter(vectors)
        first = next(vectors, None)
        if first is None:
            return cls.one(kind)
        start = cls.one(type(first.x)) * first
        return functools.reduce(operator.mul, vectors, start)

    @classmethod
    def parse(cls, text: str, scalar: Callable[[str], Scalar] = float) -> 'BaseVector':
        """
        Parse "(1, 2)", "[1, 2]", "{1, 2}" or "1, 2".

        Args:
            text: Comma-separated components, brackets optional
            scalar: Callable converting each component string

        Raises:
            ValueError: If the component count does not match
        """
        parts = _split_components(text)
        if len(parts) != cls.DIMENSION or not all(parts):
            raise ValueError(
                f"{cls.__name__} expects {cls.DIMENSION} components, got {text!r}"
            )
        return cls(*(scalar(part) for part in parts))

    # --- Lifting ---

    def map(self, fn: Callable[[Scalar], Scalar]) -> 'BaseVector':
        return type(self)(*(fn(value) for value in self))

    def zip_with(self, other: 'BaseVector', fn: Callable[[Scalar, Scalar], Scalar]) -> 'BaseVector':
        """Combine two vectors of the same type component by component."""
        if not isinstance(other, type(self)):
            raise TypeError(f"Expected {type(self).__name__}, got {type(other).__name__}")
        return type(self)(*(fn(a, b) for a, b in zip(self, other)))

    def _binary(self, other: Any, op: Callable[[Scalar, Scalar], Scalar]) -> Any:
        if isinstance(other, type(self)):
            return type(self)(*(op(a, b) for a, b in zip(self, other)))
        if not _is_operand_scalar(other):
            return NotImplemented
        return type(self)(*(op(value, other) for value in self))

    def _reflected(self, other: Any, op: Callable[[Scalar, Scalar], Scalar]) -> Any:
        if not _is_operand_scalar(other):
            return NotImplemented
        return type(self)(*(op(other, value) for value in self))

    # --- Operators ---

    def __add__(self, other):
        return self._binary(other, operator.add)

    def __radd__(self, other):
        return self._reflected(other, operator.add)

    def __sub__(self, other):
        return self._binary(other, operator.sub)

    def __mul__(self, other):
        return self._binary(other, operator.mul)

    def __rmul__(self, other):
        return self._reflected(other, operator.mul)

    def __truediv__(self, other):
        return self._binary(other, operator.truediv)

    def __floordiv__(self, other):
        return self._binary(other, operator.floordiv)

    def __mod__(self, other):
        return self._binary(other, operator.mod)

    def __matmul__(self, other):
        """``a @ b`` is the dot product."""
        if isinstance(other, type(self)):
            return self.dot(other)
        return NotImplemented

    def __neg__(self):
        return self.map(operator.neg)

    def __abs__(self):
        return self.map(abs)

    # --- Geometry ---

    def dot(self, other: 'BaseVector') -> Scalar:
        """Sum of component-wise products, folded left to right."""
        if not isinstance(other, type(self)):
            raise TypeError(f"Cannot dot {type(self).__name__} with {type(other).__name__}")
        return (self * other).sum_elem()

    def magnitude(self) -> Scalar:
        """Euclidean length, ``sqrt(dot(self, self))``."""
        return sqrt(self.dot(self))

    def normalize(self) -> 'BaseVector':
        """Unit vector in the same direction (zero length follows the scalar's division)."""
        return self / self.magnitude()

    def distance(self, other: 'BaseVector') -> Scalar:
        return (self - other).magnitude()

    # --- Comparisons ---

    def max(self, other: 'BaseVector') -> 'BaseVector':
        """Component-wise maximum; ties and NaN keep ``self``'s component."""
        return self.zip_with(other, lambda a, b: b if a < b else a)

    def min(self, other: 'BaseVector') -> 'BaseVector':
        """Component-wise minimum; ties and NaN keep ``self``'s component."""
        return self.zip_with(other, lambda a, b: b if a > b else a)

    def clamp(self, lo: 'BaseVector', hi: 'BaseVector') -> 'BaseVector':
        return self.min(hi).max(lo)

    def elem_max(self, m: Scalar) -> 'BaseVector':
        return self.max(self.splat(m))

    def elem_min(self, m: Scalar) -> 'BaseVector':
        return self.min(self.splat(m))

    def elem_clamp(self, lo: Scalar, hi: Scalar) -> 'BaseVector':
        return self.min(self.splat(hi)).max(self.splat(lo))

    # --- Reductions ---

    def max_elem(self) -> Scalar:
        return functools.reduce(lambda a, b: a if a > b else b, self)

    def min_elem(self) -> Scalar:
        return functools.reduce(lambda a, b: a if a < b else b, self)

    def sum_elem(self) -> Scalar:
        return functools.reduce(operator.add, self)

    def mul_elem(self) -> Scalar:
        return functools.reduce(operator.mul, self)

    def all(self) -> bool:
        """True if every component is truthy (boolean vectors)."""
        return all(self)

    def any(self) -> bool:
        """True if any component is truthy (boolean vectors)."""
        return any(self)

    # --- Component predicates ---

    def is_positive(self) -> 'BaseVector':
        return self.map(lambda value: value > 0)

    def is_negative(self) -> 'BaseVector':
        return self.map(lambda value: value < 0)

    def is_nan(self) -> 'BaseVector':
        return self._floating_map(np.isnan, "is_nan")

    def is_finite(self) -> 'BaseVector':
        return self._floating_map(np.isfinite, "is_finite")

    def is_infinite(self) -> 'BaseVector':
        return self._floating_map(np.isinf, "is_infinite")

    def is_sign_positive(self) -> 'BaseVector':
        return self._floating_map(lambda value: ~np.signbit(value))

    def is_sign_negative(self) -> 'BaseVector':
        return self._floating_map(np.signbit)

    def is_normal(self) -> 'BaseVector':
        """False for zero, subnormal, infinite and NaN components."""
        return self._floating_map(is_normal)

    # --- Component-wise floating functions ---

    def _floating_map(self, fn: Callable, method: Optional[str] = None) -> 'BaseVector':
        return self.map(lambda value: apply_floating(value, fn, method))

    def floor(self) -> 'BaseVector':
        return self._floating_map(np.floor, "__floor__")

    def ceil(self) -> 'BaseVector':
        return self._floating_map(np.ceil, "__ceil__")

    def round(self) -> 'BaseVector':
        """Round half away from zero."""
        return self._floating_map(round_half_away)

    def trunc(self) -> 'BaseVector':
        return self._floating_map(np.trunc, "__trunc__")

    def fract(self) -> 'BaseVector':
        return self._floating_map(fract)

    def signum(self) -> 'BaseVector':
        """
        Sign per component.

        Floats follow the sign bit (signum(-0.0) == -1.0, NaN stays NaN);
        signed integers give -1, 0 or 1 in their own type.
        """
        return self.map(
            lambda value: integer_signum(value) if is_signed_integer(value)
            else apply_floating(value, signum)
        )

    def sqrt(self) -> 'BaseVector':
        return self._floating_map(np.sqrt, "sqrt")

    def exp(self) -> 'BaseVector':
        return self._floating_map(np.exp, "exp")

    def exp2(self) -> 'BaseVector':
        return self._floating_map(np.exp2)

    def ln(self) -> 'BaseVector':
        return self._floating_map(np.log, "ln")

    def log2(self) -> 'BaseVector':
        return self._floating_map(np.log2)

    def log10(self) -> 'BaseVector':
        return self._floating_map(np.log10, "log10")

    def cbrt(self) -> 'BaseVector':
        return self._floating_map(np.cbrt)

    def exp_m1(self) -> 'BaseVector':
        return self._floating_map(np.expm1)

    def ln_1p(self) -> 'BaseVector':
        return self._floating_map(np.log1p)

    # --- Component-wise signed-integer functions ---

    def _integer_map(self, fn: Callable) -> 'BaseVector':
        return self.map(lambda value: apply_integer(value, fn))

    def swap_bytes(self) -> 'BaseVector':
        return self._integer_map(swap_bytes)

    def to_be(self) -> 'BaseVector':
        return self._integer_map(to_be)

    def to_le(self) -> 'BaseVector':
        return self._integer_map(to_le)

    def wrapping_neg(self) -> 'BaseVector':
        """Negation that maps the minimum value to itself."""
        return self._integer_map(wrapping_neg)

    def wrapping_abs(self) -> 'BaseVector':
        return self._integer_map(wrapping_abs)

    # --- Interop ---

    def is_close(
        self,
        other: 'BaseVector',
        rel_tol: Optional[float] = None,
        abs_tol: Optional[float] = None
    ) -> bool:
        from ..utils.config import get_config

        config = get_config()
        rel_tol = config.rel_tol if rel_tol is None else rel_tol
        abs_tol = config.abs_tol if abs_tol is None else abs_tol
        if not isinstance(other, type(self)):
            return False
        return all(
            math.isclose(float(a), float(b), rel_tol=rel_tol, abs_tol=abs_tol)
            for a, b in zip(self, other)
        )

    def to_tuple(self) -> tuple:
        return tuple(self)

    def __format__(self, spec: str) -> str:
        return "(" + COMPONENT_SEPARATOR.join(_format_scalar(value, spec) for value in self) + ")"


def dot(a: BaseVector, b: BaseVector) -> Scalar:
    """Dot product of two vectors of the same type."""
    return a.dot(b)


def distance(a: BaseVector, b: BaseVector) -> Scalar:
    """Euclidean distance between two points."""
    return a.distance(b)


# =============================================================================
# Matrices
# =============================================================================

class BaseMatrix(BaseAggregate):
    """
    Row-major square matrix built from ``DIMENSION`` row vectors.

    Subclasses set ``ROW_TYPE`` and implement determinant, cofactor and
    inverse with their closed forms. Multiplication transposes the right
    operand first so every entry is a dot product of two rows.
    """

    ROW_TYPE: ClassVar[type]

    def __post_init__(self):
        # Accept plain sequences as rows: Matrix2((1, 2), (3, 4))
        for name in self.FIELDS:
            row = getattr(self, name)
            if not isinstance(row, self.ROW_TYPE):
                object.__setattr__(self, name, self.ROW_TYPE.from_iterable(row))

    # --- Construction ---

    @classmethod
    def from_iterable(cls, rows: Iterable[Any]) -> 'BaseMatrix':
        """Build from exactly DIMENSION rows (vectors or sequences)."""
        rows = tuple(rows)
        if len(rows) != cls.DIMENSION:
            raise ValueError(f"{cls.__name__} expects {cls.DIMENSION} rows, got {len(rows)}")
        return cls(*rows)

    @classmethod
    def from_flat(cls, values: Iterable[Scalar]) -> 'BaseMatrix':
        """Build from DIMENSION**2 values in row-major order."""
        values = tuple(values)
        n = cls.DIMENSION
        if len(values) != n * n:
            raise ValueError(f"{cls.__name__} expects {n * n} values, got {len(values)}")
        return cls(*(cls.ROW_TYPE(*values[i * n:(i + 1) * n]) for i in range(n)))

    @classmethod
    def parse(cls, text: str, scalar: Callable[[str], Scalar] = float) -> 'BaseMatrix':
        """Parse "((1, 0), (0, 1))" or any bracket style, row-major."""
        parts = _split_components(text)
        if len(parts) != cls.DIMENSION ** 2 or not all(parts):
            raise ValueError(
                f"{cls.__name__} expects {cls.DIMENSION ** 2} values, got {text!r}"
            )
        return cls.from_flat(scalar(part) for part in parts)

    @classmethod
    def identity(cls, kind: KindLike = float) -> 'BaseMatrix':
        """Ones on the diagonal, zeros elsewhere."""
        z, o = scalar_zero(kind), scalar_one(kind)
        n = cls.DIMENSION
        return cls(*(cls.ROW_TYPE(*(o if i == j else z for j in range(n))) for i in range(n)))

    @classmethod
    def default(cls) -> 'BaseMatrix':
        return cls.identity()

    # --- Lifting ---

    def map(self, fn: Callable[[Scalar], Scalar]) -> 'BaseMatrix':
        return type(self)(*(row.map(fn) for row in self))

    def rows(self) -> tuple:
        return tuple(self)

    def columns(self) -> tuple:
        return tuple(self.transpose())

    def diagonal(self) -> BaseVector:
        return self.ROW_TYPE(*(self[i][i] for i in range(self.DIMENSION)))

    def trace(self) -> Scalar:
        return self.diagonal().sum_elem()

    # --- Structure ---

    def transpose(self) -> 'BaseMatrix':
        return type(self)(*(self.ROW_TYPE(*column) for column in zip(*self)))

    def multiply(self, other: 'BaseMatrix') -> 'BaseMatrix':
        """
        Matrix product ``self * other``.

        ``other`` is transposed so entry (i, j) is ``dot(self.row_i, t.row_j)``.
        """
        if not isinstance(other, type(self)):
            raise TypeError(f"Cannot multiply {type(self).__name__} by {type(other).__name__}")
        t = other.transpose()
        return type(self)(*(self.ROW_TYPE(*(row.dot(column) for column in t)) for row in self))

    def apply_to(self, v: BaseVector) -> BaseVector:
        """Matrix-vector product: one dot product per row."""
        if not isinstance(v, self.ROW_TYPE):
            raise TypeError(f"{type(self).__name__} cannot apply to {type(v).__name__}")
        return self.ROW_TYPE(*(row.dot(v) for row in self))

    def adjoint(self) -> 'BaseMatrix':
        """Transpose of the cofactor matrix."""
        return self.cofactor().transpose()

    def _minor_rows(self, row: int, col: int) -> list:
        """Entries left after deleting ``row`` and ``col``, as nested lists."""
        n = self.DIMENSION
        for index in (row, col):
            if not 0 <= index < n:
                raise IndexError(f"index out of bounds, index is {index} but the len is {n}")
        return [
            [value for j, value in enumerate(r) if j != col]
            for i, r in enumerate(self) if i != row
        ]

    @abstractmethod
    def determinant(self) -> Scalar:
        """Closed-form determinant."""

    @abstractmethod
    def cofactor(self) -> 'BaseMatrix':
        """Matrix of signed minor determinants."""

    @abstractmethod
    def inverse(self) -> 'BaseMatrix':
        """Adjoint divided by the determinant."""

    def _warn_if_singular(self, det: Scalar) -> None:
        from ..utils.config import get_config

        if det == 0 and get_config().warn_singular:
            logger.warning(
                f"Inverting a singular {type(self).__name__}; "
                f"the result follows the scalar's division-by-zero semantics"
            )

    # --- Operators ---

    def __add__(self, other):
        if not isinstance(other, type(self)):
            return NotImplemented
        return type(self)(*(a + b for a, b in zip(self, other)))

    def __sub__(self, other):
        if not isinstance(other, type(self)):
            return NotImplemented
        return type(self)(*(a - b for a, b in zip(self, other)))

    def __neg__(self):
        return type(self)(*(-row for row in self))

    def __mul__(self, other):
        if isinstance(other, type(self)):
            return self.multiply(other)
        if isinstance(other, self.ROW_TYPE):
            return self.apply_to(other)
        if not _is_operand_scalar(other):
            return NotImplemented
        return type(self)(*(row * other for row in self))

    def __rmul__(self, other):
        if not _is_operand_scalar(other):
            return NotImplemented
        return type(self)(*(other * row for row in self))

    def __matmul__(self, other):
        if isinstance(other, type(self)):
            return self.multiply(other)
        if isinstance(other, self.ROW_TYPE):
            return self.apply_to(other)
        return NotImplemented

    def __truediv__(self, other):
        if not _is_operand_scalar(other):
            return NotImplemented
        return type(self)(*(row / other for row in self))

    # --- Interop ---

    def is_close(
        self,
        other: 'BaseMatrix',
        rel_tol: Optional[float] = None,
        abs_tol: Optional[float] = None
    ) -> bool:
        if not isinstance(other, type(self)):
            return False
        return all(a.is_close(b, rel_tol=rel_tol, abs_tol=abs_tol) for a, b in zip(self, other))

    def to_tuple(self) -> tuple:
        return tuple(row.to_tuple() for row in self)

    def flatten(self) -> tuple:
        """Row-major tuple of all DIMENSION**2 entries."""
        return tuple(value for row in self for value in row)

    def __format__(self, spec: str) -> str:
        return "(" + COMPONENT_SEPARATOR.join(format(row, spec) for row in self) + ")"
