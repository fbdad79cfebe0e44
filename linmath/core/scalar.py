"""
Scalar kinds and scalar capabilities.

Vectors and matrices never look at their component type except through
this module. It answers three questions:

1. Identities: what are zero and one for a given scalar type?
2. Floating capability: can this scalar take a square root or a cosine?
   Python floats and numpy floating scalars can. Python ints are promoted
   to float. numpy integers and booleans cannot: rotation constructors and
   the component-wise float functions raise ``ScalarCapabilityError`` for
   them. Other objects are asked for their own method (``Decimal.sqrt``,
   ``Tensor.cos``).
   Signed integers have the mirror capability: byte swaps and wrapping
   negation accept them and raise ``ScalarCapabilityError`` for floats.
3. Conversion between fixed-width numeric kinds:
   - ``cast_scalar``: total numeric cast. Integer to integer wraps (two's
     complement), float to integer truncates toward zero and saturates
     (NaN becomes 0), anything to float rounds to nearest. Integers beyond
     the float range become a signed infinity.
   - ``convert_scalar``: lossless conversion, refused when numpy's "safe"
     casting rule refuses it.

Booleans only widen to integer kinds.

Example:
    >>> cast_scalar(300, "u8")
    np.uint8(44)
    >>> cast_scalar(-1.5e10, "i32")
    np.int32(-2147483648)
    >>> convert_scalar(np.int16(7), "f32")
    np.float32(7.0)
"""

import logging
import math
import sys
from enum import Enum
from typing import Callable, Optional

import numpy as np

from .types import KindLike, Scalar

logger = logging.getLogger(__name__)


# =============================================================================
# Exceptions
# =============================================================================

class ScalarCapabilityError(TypeError):
    """A scalar does not support the operation requested of it."""
    pass


# =============================================================================
# Scalar Kinds
# =============================================================================

class ScalarKind(Enum):
    """Fixed-width numeric kinds usable as conversion targets."""

    U8 = "u8"
    U16 = "u16"
    U32 = "u32"
    U64 = "u64"
    USIZE = "usize"
    I8 = "i8"
    I16 = "i16"
    I32 = "i32"
    I64 = "i64"
    ISIZE = "isize"
    F32 = "f32"
    F64 = "f64"
    BOOL = "bool"

    @property
    def dtype(self) -> np.dtype:
        """numpy dtype backing this kind."""
        return np.dtype(_KIND_DTYPES[self])

    @property
    def bits(self) -> int:
        return self.dtype.itemsize * 8

    @property
    def is_bool(self) -> bool:
        return self is ScalarKind.BOOL

    @property
    def is_integer(self) -> bool:
        return self.dtype.kind in "iu"

    @property
    def is_signed(self) -> bool:
        return self.dtype.kind == "i"

    @property
    def is_float(self) -> bool:
        return self.dtype.kind == "f"

    @classmethod
    def from_dtype(cls, dtype: np.dtype) -> 'ScalarKind':
        """
        Map a numpy dtype to its kind.

        Platform-width kinds (ISIZE/USIZE) share a dtype with a fixed-width
        kind; the fixed-width kind wins.
        """
        dtype = np.dtype(dtype)
        for member in cls:
            if member in (cls.ISIZE, cls.USIZE):
                continue
            if member.dtype == dtype:
                return member
        raise ScalarCapabilityError(f"Unsupported scalar dtype: {dtype}")

    @classmethod
    def parse(cls, kind: KindLike) -> 'ScalarKind':
        """
        Resolve a kind description.

        Args:
            kind: A ScalarKind, a short name ("u8", "f64", "isize"), a numpy
                  dtype, type or name ("float32"), or int/float/bool

        Returns:
            The matching ScalarKind

        Raises:
            ScalarCapabilityError: If the description names no supported kind
        """
        if isinstance(kind, cls):
            return kind
        if isinstance(kind, str):
            try:
                return cls(kind.lower())
            except ValueError:
                pass
        try:
            dtype = np.dtype(kind)
        except TypeError as e:
            raise ScalarCapabilityError(f"Unknown scalar kind: {kind!r}") from e
        return cls.from_dtype(dtype)


_KIND_DTYPES = {
    ScalarKind.U8: np.uint8,
    ScalarKind.U16: np.uint16,
    ScalarKind.U32: np.uint32,
    ScalarKind.U64: np.uint64,
    ScalarKind.USIZE: np.uintp,
    ScalarKind.I8: np.int8,
    ScalarKind.I16: np.int16,
    ScalarKind.I32: np.int32,
    ScalarKind.I64: np.int64,
    ScalarKind.ISIZE: np.intp,
    ScalarKind.F32: np.float32,
    ScalarKind.F64: np.float64,
    ScalarKind.BOOL: np.bool_,
}


def kind_of(value: Scalar) -> ScalarKind:
    """
    Classify a scalar value.

    Python ints report I64 but are handled with unbounded width by the
    conversion functions.

    Raises:
        ScalarCapabilityError: If the value is not a convertible scalar
    """
    if isinstance(value, (bool, np.bool_)):
        return ScalarKind.BOOL
    if isinstance(value, np.generic):
        return ScalarKind.from_dtype(value.dtype)
    if isinstance(value, int):
        return ScalarKind.I64
    if isinstance(value, float):
        return ScalarKind.F64
    raise ScalarCapabilityError(f"{type(value).__name__} is not a convertible scalar")


# =============================================================================
# Identities
# =============================================================================

def _identity(kind: KindLike, value: int) -> Scalar:
    # Plain Python types (int, float, Fraction, Decimal) build their own value
    if isinstance(kind, type) and not issubclass(kind, np.generic):
        return kind(value)
    return ScalarKind.parse(kind).dtype.type(value)


def zero(kind: KindLike = float) -> Scalar:
    """Additive identity of a scalar type or kind."""
    return _identity(kind, 0)


def one(kind: KindLike = float) -> Scalar:
    """Multiplicative identity of a scalar type or kind."""
    return _identity(kind, 1)


# =============================================================================
# Floating Capability
# =============================================================================

def floating(value: Scalar) -> Scalar:
    """
    Return ``value`` as a scalar with floating-point capability.

    Python ints are promoted to float. numpy integers and booleans are
    rejected. Any other object is returned unchanged and is expected to
    carry its own math methods.

    Raises:
        ScalarCapabilityError: For booleans and numpy integer scalars
    """
    if isinstance(value, (bool, np.bool_)):
        raise ScalarCapabilityError("Boolean scalars have no floating-point capability")
    if isinstance(value, np.generic):
        if np.issubdtype(value.dtype, np.floating):
            return value
        raise ScalarCapabilityError(
            f"{value.dtype} scalars have no floating-point capability; "
            f"cast to f32 or f64 first"
        )
    if isinstance(value, int):
        return float(value)
    return value


def is_floating(value: Scalar) -> bool:
    """True for Python floats and numpy floating scalars."""
    return isinstance(value, (float, np.floating))


def apply_floating(
    value: Scalar,
    fn: Callable[[Scalar], Scalar],
    method: Optional[str] = None
) -> Scalar:
    """
    Apply a numpy function to a scalar with floating capability.

    numpy scalars keep their width (float32 in, float32 out). Python floats
    go through float64 and come back as plain Python values. Other objects
    are delegated to ``getattr(value, method)()``.

    Args:
        value: Scalar to transform
        fn: numpy-based function of one scalar
        method: Method name to call on scalars numpy does not handle

    Returns:
        Transformed scalar

    Raises:
        ScalarCapabilityError: If the scalar cannot perform the operation
    """
    value = floating(value)
    if isinstance(value, np.generic):
        return fn(value)
    if isinstance(value, float):
        result = fn(np.float64(value))
        return result.item() if isinstance(result, np.generic) else result
    bound = getattr(value, method, None) if method else None
    if callable(bound):
        return bound()
    raise ScalarCapabilityError(
        f"{type(value).__name__} does not provide {method or 'this operation'}()"
    )


def sqrt(value: Scalar) -> Scalar:
    """Square root (IEEE semantics: sqrt(-1.0) is NaN)."""
    return apply_floating(value, np.sqrt, "sqrt")


def sin(value: Scalar) -> Scalar:
    """Sine of an angle in radians."""
    return apply_floating(value, np.sin, "sin")


def cos(value: Scalar) -> Scalar:
    """Cosine of an angle in radians."""
    return apply_floating(value, np.cos, "cos")


def round_half_away(value):
    """Round to nearest, ties away from zero (numpy's round is ties-to-even)."""
    whole = np.trunc(value)
    if np.abs(value - whole) >= 0.5:
        return whole + np.copysign(1, value)
    return whole


def fract(value):
    """Fractional part, ``x - trunc(x)``."""
    return value - np.trunc(value)


def signum(value):
    """1 for +0.0 and positives, -1 for -0.0 and negatives, NaN for NaN."""
    if np.isnan(value):
        return value
    return np.copysign(1, value).astype(value.dtype)


def is_normal(value):
    """False for zero, subnormal, infinite and NaN values."""
    return np.isfinite(value) & (np.abs(value) >= np.finfo(value.dtype).tiny)


# =============================================================================
# Signed-Integer Capability
# =============================================================================

def is_signed_integer(value: Scalar) -> bool:
    """True for Python ints and numpy signed integer scalars, never booleans."""
    if isinstance(value, (bool, np.bool_)):
        return False
    return isinstance(value, (int, np.signedinteger))


def apply_integer(value: Scalar, fn: Callable[[np.signedinteger], np.signedinteger]) -> Scalar:
    """
    Apply a fixed-width function to a signed integer scalar.

    numpy signed integers keep their width. Python ints are treated as I64
    (wrapped into 64 bits first) and come back as Python ints.

    Raises:
        ScalarCapabilityError: For floats, booleans, unsigned integers and
            other objects
    """
    if not is_signed_integer(value):
        raise ScalarCapabilityError(
            f"{type(value).__name__} scalars have no signed-integer capability"
        )
    if isinstance(value, np.generic):
        return fn(value)
    return fn(np.int64(_wrap_integer(value, ScalarKind.I64))).item()


def integer_signum(value: Scalar) -> Scalar:
    """-1, 0 or 1 in the scalar's own type."""
    if isinstance(value, np.generic):
        return np.sign(value)
    return (value > 0) - (value < 0)


def swap_bytes(value: np.signedinteger) -> np.signedinteger:
    """Reverse the byte order of a fixed-width integer."""
    return np.array(value).byteswap()[()]


def to_be(value: np.signedinteger) -> np.signedinteger:
    """Big-endian representation (a byte swap on little-endian hosts)."""
    return value if sys.byteorder == "big" else swap_bytes(value)


def to_le(value: np.signedinteger) -> np.signedinteger:
    """Little-endian representation (a byte swap on big-endian hosts)."""
    return value if sys.byteorder == "little" else swap_bytes(value)


def wrapping_neg(value: np.signedinteger) -> np.signedinteger:
    """Two's-complement negation; the minimum value maps to itself."""
    kind = ScalarKind.from_dtype(value.dtype)
    return value.dtype.type(_wrap_integer(-int(value), kind))


def wrapping_abs(value: np.signedinteger) -> np.signedinteger:
    """Absolute value that wraps instead of overflowing at the minimum."""
    kind = ScalarKind.from_dtype(value.dtype)
    return value.dtype.type(_wrap_integer(abs(int(value)), kind))


# =============================================================================
# Conversions
# =============================================================================

def _wrap_integer(value: int, kind: ScalarKind) -> int:
    """Two's-complement wrap of an unbounded int into ``kind``'s width."""
    bits = kind.bits
    value &= (1 << bits) - 1
    if kind.is_signed and value >> (bits - 1):
        value -= 1 << bits
    return value


def _saturate_float(value: float, kind: ScalarKind) -> int:
    """Truncate toward zero and clamp into ``kind``'s range; NaN maps to 0."""
    info = np.iinfo(kind.dtype)
    if math.isnan(value):
        logger.debug(f"Cast of NaN to {kind.value} produced 0")
        return 0
    if math.isinf(value):
        result = info.max if value > 0 else info.min
    else:
        truncated = math.trunc(value)
        result = min(max(truncated, info.min), info.max)
        if result == truncated:
            return result
    logger.debug(f"Saturated {value!r} to {result} while casting to {kind.value}")
    return result


def cast_scalar(value: Scalar, kind: KindLike) -> np.generic:
    """
    Numeric cast into a fixed-width kind.

    Args:
        value: Python or numpy scalar
        kind: Target kind (anything ScalarKind.parse accepts)

    Returns:
        numpy scalar of the target dtype

    Raises:
        ScalarCapabilityError: For non-numeric values, bool targets, and
            booleans cast to floating kinds
    """
    source = kind_of(value)
    target = ScalarKind.parse(kind)
    if target.is_bool:
        raise ScalarCapabilityError("Casting to bool is not supported; compare explicitly instead")
    if source.is_bool and target.is_float:
        raise ScalarCapabilityError(
            f"Boolean values can only be cast to integer kinds, not {target.value}"
        )

    scalar_type = target.dtype.type
    if target.is_float:
        if not source.is_float and abs(int(value)) > float(np.finfo(target.dtype).max):
            logger.debug(
                f"Saturated a {int(value).bit_length()}-bit integer to infinity "
                f"while casting to {target.value}"
            )
            return scalar_type(math.inf if value > 0 else -math.inf)
        return scalar_type(value)
    if source.is_float:
        return scalar_type(_saturate_float(float(value), target))
    return scalar_type(_wrap_integer(int(value), target))


def convert_scalar(value: Scalar, kind: KindLike) -> np.generic:
    """
    Lossless conversion into a fixed-width kind.

    numpy scalars and Python floats follow numpy's "safe" casting table.
    Python ints are checked by value: they must fit the integer target or
    be exactly representable in the floating target.

    Raises:
        ScalarCapabilityError: If the conversion could lose information
    """
    source = kind_of(value)
    target = ScalarKind.parse(kind)
    scalar_type = target.dtype.type

    if source.is_bool and target.is_float:
        raise ScalarCapabilityError(
            f"Boolean values can only be converted to integer kinds, not {target.value}"
        )

    if isinstance(value, int) and not isinstance(value, bool):
        if target.is_integer:
            info = np.iinfo(target.dtype)
            if info.min <= value <= info.max:
                return scalar_type(value)
        elif target.is_float:
            try:
                converted = scalar_type(value)
            except OverflowError:
                converted = None
            if converted is not None and math.isfinite(converted) and int(converted) == value:
                return converted
        raise ScalarCapabilityError(f"Converting {value} to {target.value} would lose information")

    if np.can_cast(source.dtype, target.dtype, casting="safe"):
        return scalar_type(value)
    raise ScalarCapabilityError(
        f"Converting {source.value} to {target.value} would lose information; use cast() instead"
    )
