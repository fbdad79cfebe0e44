"""
Tests for Vector2, Vector3 and Vector4.

Vectors are immutable, component-wise, and generic over the scalar type.
These tests cover:
- Construction, indexing, equality, ordering and hashing
- Component-wise and broadcast arithmetic, including reflected operators
- Geometry (dot, cross, magnitude, normalize, distance)
- Comparisons, reductions and component predicates
- Floating functions and their capability checks
- Casting, conversion, parsing and formatting
"""

import dataclasses
import math
import sys
from decimal import Decimal

import numpy as np
import pytest

from linmath.core.scalar import ScalarCapabilityError
from linmath.vector import (
    Vector2,
    Vector3,
    Vector4,
    distance,
    dot,
    vector2,
    vector3,
    vector4,
)


# =============================================================================
# Construction and Sequence Behaviour
# =============================================================================

class TestVectorConstruction:
    """Tests for construction and the sequence protocol."""

    def test_factory_functions(self):
        """Factories build the matching class."""
        assert vector2(1, 2) == Vector2(1, 2)
        assert vector3(1, 2, 3) == Vector3(1, 2, 3)
        assert vector4(1, 2, 3, 4) == Vector4(1, 2, 3, 4)

    def test_len_and_iteration(self):
        """Vectors are sequences of their components."""
        v = vector3(1, 2, 3)
        assert len(v) == 3
        assert list(v) == [1, 2, 3]

    def test_indexing(self):
        """v[i] returns component i."""
        v = vector4(5, 6, 7, 8)
        assert v[0] == 5
        assert v[3] == 8

    def test_index_out_of_bounds(self):
        """Out-of-range indices raise IndexError with the length."""
        with pytest.raises(IndexError, match="index out of bounds, index is 2 but the len is 2"):
            vector2(1, 2)[2]
        with pytest.raises(IndexError):
            vector2(1, 2)[-1]

    def test_non_integer_index(self):
        """Non-integer indices raise TypeError."""
        with pytest.raises(TypeError):
            vector2(1, 2)["x"]

    def test_frozen(self):
        """Vectors cannot be mutated."""
        v = vector2(1, 2)
        with pytest.raises(dataclasses.FrozenInstanceError):
            v.x = 3

    def test_hashable(self):
        """Equal vectors hash equally."""
        lookup = {vector2(1, 2): "a"}
        assert lookup[vector2(1, 2)] == "a"

    def test_lexicographic_order(self):
        """Ordering compares components left to right."""
        assert vector2(1, 2) < vector2(1, 3)
        assert vector2(2, 0) > vector2(1, 9)
        assert sorted([vector2(2, 1), vector2(1, 5)]) == [vector2(1, 5), vector2(2, 1)]

    def test_from_iterable(self):
        """from_iterable requires exactly N values."""
        assert Vector3.from_iterable([1, 2, 3]) == vector3(1, 2, 3)
        with pytest.raises(ValueError):
            Vector3.from_iterable([1, 2])

    def test_splat_zero_one(self):
        """splat, zero and one fill every component."""
        assert Vector3.splat(7) == vector3(7, 7, 7)
        assert Vector2.zero() == vector2(0.0, 0.0)
        assert type(Vector2.zero().x) is float
        assert type(Vector4.one("f32").w) is np.float32

    def test_to_tuple_and_list(self):
        """Vectors convert to plain tuples and lists."""
        v = vector3(1, 2, 3)
        assert v.to_tuple() == (1, 2, 3)
        assert v.to_list() == [1, 2, 3]


# =============================================================================
# Arithmetic
# =============================================================================

class TestVectorArithmetic:
    """Tests for operators."""

    def test_componentwise(self):
        """Same-type operands combine component by component."""
        a, b = vector2(6, 8), vector2(3, 2)
        assert a + b == vector2(9, 10)
        assert a - b == vector2(3, 6)
        assert a * b == vector2(18, 16)
        assert a / b == vector2(2.0, 4.0)
        assert a % b == vector2(0, 0)
        assert a // b == vector2(2, 4)

    def test_scalar_broadcast(self):
        """Scalars broadcast over every component."""
        v = vector3(1, 2, 3)
        assert v + 1 == vector3(2, 3, 4)
        assert v * 2 == vector3(2, 4, 6)
        assert v / 2 == vector3(0.5, 1.0, 1.5)
        assert v % 2 == vector3(1, 0, 1)

    def test_scalar_on_left(self):
        """Scalars on the left work for + and *."""
        v = vector2(1, 2)
        assert 1 + v == vector2(2, 3)
        assert 3 * v == vector2(3, 6)

    def test_numpy_scalar_on_left_stays_vector(self):
        """numpy scalars defer to the vector's reflected operator."""
        result = np.float32(2) * vector2(np.float32(1), np.float32(3))
        assert isinstance(result, Vector2)
        assert result == vector2(2.0, 6.0)

    def test_builtin_sum(self):
        """sum() works because 0 + v is v."""
        total = sum([vector2(1, 2), vector2(3, 4), vector2(5, 6)])
        assert total == vector2(9, 12)

    def test_negation_and_abs(self):
        """Unary minus and abs act per component."""
        assert -vector2(1, -2) == vector2(-1, 2)
        assert abs(vector2(-1, 2)) == vector2(1, 2)

    def test_mixed_dimensions_rejected(self):
        """Different dimensions do not combine."""
        with pytest.raises(TypeError):
            vector2(1, 2) + vector3(1, 2, 3)

    def test_sequences_not_broadcast(self):
        """Tuples are not treated as scalars."""
        with pytest.raises(TypeError):
            vector2(1, 2) + (1, 2)

    def test_division_by_zero_python(self):
        """Python scalars raise ZeroDivisionError."""
        with pytest.raises(ZeroDivisionError):
            vector2(1, 2) / 0

    def test_division_by_zero_numpy(self):
        """numpy floats produce infinities."""
        v = vector2(np.float64(1.0), np.float64(-1.0))
        with np.errstate(divide="ignore"):
            result = v / np.float64(0.0)
        assert result == vector2(math.inf, -math.inf)

    def test_map_and_zip_with(self):
        """map and zip_with lift arbitrary functions."""
        assert vector2(1, 2).map(lambda c: c * 10) == vector2(10, 20)
        assert vector2(1, 5).zip_with(vector2(4, 2), max) == vector2(4, 5)

    def test_sum_of_and_product_of(self):
        """Folds over iterables of vectors."""
        vectors = [vector2(1, 2), vector2(3, 4)]
        assert Vector2.sum_of(vectors) == vector2(4, 6)
        assert Vector2.product_of(vectors) == vector2(3, 8)
        assert Vector2.sum_of([]) == Vector2.zero()
        assert Vector2.product_of([]) == Vector2.one()


# =============================================================================
# Geometry
# =============================================================================

class TestVectorGeometry:
    """Tests for dot, cross, magnitude, normalize and distance."""

    def test_dot(self):
        """dot is the sum of component products."""
        a, b = vector3(1, 2, 3), vector3(4, 5, 6)
        assert a.dot(b) == 32
        assert a @ b == 32
        assert dot(a, b) == 32

    def test_dot_rejects_other_types(self):
        """dot needs two vectors of the same type."""
        with pytest.raises(TypeError):
            vector2(1, 2).dot(vector3(1, 2, 3))

    def test_cross_basis(self):
        """x cross y is z (right-handed)."""
        x, y, z = vector3(1, 0, 0), vector3(0, 1, 0), vector3(0, 0, 1)
        assert x.cross(y) == z
        assert y.cross(z) == x
        assert z.cross(x) == y

    def test_cross_is_perpendicular(self):
        """The cross product is orthogonal to both operands."""
        a, b = vector3(1.0, 2.0, 3.0), vector3(-2.0, 0.5, 4.0)
        c = a.cross(b)
        assert math.isclose(c.dot(a), 0.0, abs_tol=1e-12)
        assert math.isclose(c.dot(b), 0.0, abs_tol=1e-12)

    def test_magnitude(self):
        """3-4-5 triangle."""
        assert vector2(3.0, 4.0).magnitude() == 5.0
        assert vector2(3, 4).magnitude() == 5.0

    def test_normalize(self):
        """normalize produces a unit vector in the same direction."""
        n = vector2(3.0, 4.0).normalize()
        assert n.is_close(vector2(0.6, 0.8))
        assert math.isclose(n.magnitude(), 1.0)

    def test_distance(self):
        """distance is the magnitude of the difference."""
        assert vector2(1.0, 1.0).distance(vector2(4.0, 5.0)) == 5.0
        assert distance(vector2(0.0, 0.0), vector2(0.0, 2.0)) == 2.0

    def test_is_close(self):
        """is_close tolerates rounding noise but not real differences."""
        assert vector2(1.0, 2.0).is_close(vector2(1.0 + 1e-12, 2.0))
        assert not vector2(1.0, 2.0).is_close(vector2(1.1, 2.0))
        assert vector2(1.0, 2.0).is_close(vector2(1.1, 2.0), abs_tol=0.2)
        assert not vector2(1.0, 2.0).is_close(vector3(1.0, 2.0, 0.0))


# =============================================================================
# Comparisons and Reductions
# =============================================================================

class TestVectorComparisons:
    """Tests for component-wise max/min/clamp and reductions."""

    def test_max_min(self):
        """max and min act per component."""
        a, b = vector2(1, 5), vector2(3, 2)
        assert a.max(b) == vector2(3, 5)
        assert a.min(b) == vector2(1, 2)

    def test_nan_keeps_self(self):
        """When comparison fails (NaN), self's component is kept."""
        result = vector2(math.nan, 1.0).max(vector2(2.0, 0.0))
        assert math.isnan(result.x)
        assert vector2(2.0, 0.0).max(vector2(math.nan, 1.0)).x == 2.0

    def test_clamp(self):
        """clamp bounds each component."""
        v = vector3(-1, 5, 2)
        assert v.clamp(vector3(0, 0, 0), vector3(3, 3, 3)) == vector3(0, 3, 2)

    def test_elem_variants_broadcast_scalar(self):
        """elem_max/min/clamp take a scalar bound."""
        v = vector3(-1, 5, 2)
        assert v.elem_max(0) == vector3(0, 5, 2)
        assert v.elem_min(3) == vector3(-1, 3, 2)
        assert v.elem_clamp(0, 3) == vector3(0, 3, 2)

    def test_reductions(self):
        """Reductions fold the components."""
        v = vector4(2, -1, 4, 3)
        assert v.max_elem() == 4
        assert v.min_elem() == -1
        assert v.sum_elem() == 8
        assert v.mul_elem() == -24

    def test_all_any(self):
        """all/any on boolean vectors."""
        assert vector2(True, True).all()
        assert not vector2(True, False).all()
        assert vector2(False, True).any()
        assert not vector2(False, False).any()

    def test_sign_predicates(self):
        """is_positive / is_negative return boolean vectors."""
        v = vector3(1, -1, 0)
        assert v.is_positive() == vector3(True, False, False)
        assert v.is_negative() == vector3(False, True, False)

    def test_float_predicates(self):
        """NaN, finiteness and sign bit checks."""
        v = vector4(math.nan, math.inf, -0.0, 1.0)
        assert v.is_nan() == vector4(True, False, False, False)
        assert v.is_finite() == vector4(False, False, True, True)
        assert v.is_infinite() == vector4(False, True, False, False)
        assert v.is_sign_negative() == vector4(False, False, True, False)
        assert v.is_sign_positive() == vector4(True, True, False, True)

    def test_is_normal(self):
        """Zero, subnormal, infinite and NaN components are not normal."""
        assert vector4(1.0, 0.0, 5e-324, math.inf).is_normal() == vector4(True, False, False, False)
        assert vector2(math.nan, -2.5).is_normal() == vector2(False, True)

    def test_is_normal_float32(self):
        """Normality uses the component's own width."""
        v = vector2(np.float32(1e-40), np.float32(1e-30))
        assert v.is_normal() == vector2(False, True)


# =============================================================================
# Floating Functions
# =============================================================================

class TestVectorFloatingFunctions:
    """Tests for component-wise floating-point functions."""

    def test_rounding_family(self):
        """floor, ceil, trunc and fract."""
        v = vector2(1.25, -1.25)
        assert v.floor() == vector2(1.0, -2.0)
        assert v.ceil() == vector2(2.0, -1.0)
        assert v.trunc() == vector2(1.0, -1.0)
        assert v.fract() == vector2(0.25, -0.25)

    def test_round_half_away_from_zero(self):
        """Ties round away from zero."""
        assert vector3(2.5, -2.5, 0.4).round() == vector3(3.0, -3.0, 0.0)

    def test_signum(self):
        """signum honours the sign of zero."""
        assert vector3(0.0, -0.0, -7.5).signum() == vector3(1.0, -1.0, -1.0)

    def test_signum_of_integers(self):
        """Signed integers give -1, 0 or 1 in their own type."""
        v = vector2(np.int32(-3), np.int32(4)).signum()
        assert v == vector2(-1, 1)
        assert type(v.x) is np.int32
        assert vector3(-5, 0, 7).signum() == vector3(-1, 0, 1)
        assert type(vector3(-5, 0, 7).signum().x) is int

    def test_signum_of_nan(self):
        """NaN components stay NaN."""
        assert vector2(math.nan, 2.0).signum().is_nan() == vector2(True, False)

    def test_exponentials_and_logs(self):
        """exp/ln and friends."""
        v = vector2(1.0, 8.0)
        assert v.ln().exp().is_close(v)
        assert vector2(3.0, 0.0).exp2() == vector2(8.0, 1.0)
        assert vector2(8.0, 1.0).log2() == vector2(3.0, 0.0)
        assert vector2(100.0, 1.0).log10() == vector2(2.0, 0.0)
        assert vector2(27.0, -8.0).cbrt().is_close(vector2(3.0, -2.0))
        assert vector2(0.0, 0.0).exp_m1() == vector2(0.0, 0.0)
        assert vector2(0.0, 0.0).ln_1p() == vector2(0.0, 0.0)

    def test_sqrt(self):
        """sqrt per component."""
        assert vector2(4.0, 9.0).sqrt() == vector2(2.0, 3.0)

    def test_float32_width_preserved(self):
        """numpy float32 components stay float32."""
        v = vector2(np.float32(1.5), np.float32(2.5)).floor()
        assert type(v.x) is np.float32

    def test_python_float_stays_python(self):
        """Python float components stay Python floats."""
        assert type(vector2(1.5, 2.5).floor().x) is float

    def test_numpy_integers_rejected(self):
        """numpy integer components have no floating capability."""
        with pytest.raises(ScalarCapabilityError):
            vector2(np.int32(4), np.int32(9)).sqrt()

    def test_decimal_components(self):
        """Objects providing their own sqrt work too."""
        v = vector2(Decimal(4), Decimal(9)).sqrt()
        assert v == vector2(Decimal(2), Decimal(3))


# =============================================================================
# Signed-Integer Functions
# =============================================================================

class TestVectorIntegerFunctions:
    """Tests for byte swaps and wrapping arithmetic on signed integers."""

    def test_swap_bytes(self):
        """Byte order is reversed within the component's width."""
        v = vector2(np.int32(1), np.int32(0x01020304)).swap_bytes()
        assert v == vector2(0x01000000, 0x04030201)
        assert type(v.x) is np.int32
        assert vector2(np.int16(0x0102), np.int16(0)).swap_bytes() == vector2(0x0201, 0)

    def test_swap_bytes_twice_is_identity(self):
        """swap_bytes is an involution."""
        v = vector3(np.int64(-7), np.int64(12345), np.int64(0))
        assert v.swap_bytes().swap_bytes() == v

    def test_python_ints_use_64_bits(self):
        """Python int components behave as 64-bit integers."""
        v = vector2(1, -1).swap_bytes()
        assert v == vector2(1 << 56, -1)
        assert type(v.x) is int

    def test_endianness_conversions(self):
        """to_be / to_le swap only when the host order differs."""
        v = vector2(np.int32(1), np.int32(-2))
        if sys.byteorder == "little":
            assert v.to_le() == v
            assert v.to_be() == v.swap_bytes()
        else:
            assert v.to_be() == v
            assert v.to_le() == v.swap_bytes()

    def test_wrapping_neg(self):
        """The minimum value negates to itself."""
        v = vector3(np.int8(-128), np.int8(5), np.int8(0)).wrapping_neg()
        assert v == vector3(-128, -5, 0)
        assert type(v.x) is np.int8

    def test_wrapping_abs(self):
        """abs of the minimum value wraps back to the minimum."""
        v = vector2(np.int8(-128), np.int8(-7)).wrapping_abs()
        assert v == vector2(-128, 7)
        assert type(v.y) is np.int8

    def test_floats_rejected(self):
        """Float components have no signed-integer capability."""
        for method in ("swap_bytes", "to_be", "to_le", "wrapping_neg", "wrapping_abs"):
            with pytest.raises(ScalarCapabilityError):
                getattr(vector2(1.0, 2.0), method)()

    def test_unsigned_and_bool_rejected(self):
        """Unsigned integers and booleans are rejected too."""
        with pytest.raises(ScalarCapabilityError):
            vector2(np.uint8(1), np.uint8(2)).wrapping_neg()
        with pytest.raises(ScalarCapabilityError):
            vector2(True, False).swap_bytes()


# =============================================================================
# Dimension Changes
# =============================================================================

class TestVectorDimensions:
    """Tests for extend and truncate."""

    def test_extend(self):
        """extend appends a component."""
        assert vector2(1, 2).extend(3) == vector3(1, 2, 3)
        assert vector3(1, 2, 3).extend(4) == vector4(1, 2, 3, 4)

    def test_truncate(self):
        """truncate drops the last component."""
        assert vector4(1, 2, 3, 4).truncate() == vector3(1, 2, 3)
        assert vector3(1, 2, 3).truncate() == vector2(1, 2)

    def test_extend_truncate_roundtrip(self):
        """truncate undoes extend."""
        v = vector3(1, 2, 3)
        assert v.extend(0).truncate() == v


# =============================================================================
# Conversion, Parsing and Formatting
# =============================================================================

class TestVectorConversion:
    """Tests for cast, convert, parse and str/format."""

    def test_cast_wraps(self):
        """cast applies the numeric cast per component."""
        v = vector2(300, -1).cast("u8")
        assert v == vector2(44, 255)
        assert type(v.x) is np.uint8

    def test_cast_saturates(self):
        """Float to integer cast saturates."""
        assert vector2(1e10, -3.7).cast("i16") == vector2(32767, -3)

    def test_convert_lossless(self):
        """convert succeeds when lossless."""
        v = vector2(1, 2).convert("f64")
        assert type(v.y) is np.float64

    def test_convert_lossy_raises(self):
        """convert refuses lossy conversions."""
        with pytest.raises(ScalarCapabilityError):
            vector2(1.5, 2.0).convert("i32")

    def test_parse(self):
        """parse accepts any bracket style."""
        assert Vector2.parse("(1, 2)") == vector2(1.0, 2.0)
        assert Vector3.parse("[1,2,3]", int) == vector3(1, 2, 3)
        assert Vector2.parse("{1.5, -2}") == vector2(1.5, -2.0)
        assert Vector2.parse("3, 4") == vector2(3.0, 4.0)

    def test_parse_wrong_count(self):
        """parse checks the component count."""
        with pytest.raises(ValueError):
            Vector2.parse("1, 2, 3")

    def test_str(self):
        """str lists components in parentheses."""
        assert str(vector2(1, 2)) == "(1, 2)"
        assert str(vector3(1.5, 2.0, -3.0)) == "(1.5, 2.0, -3.0)"

    def test_format_spec(self):
        """Format specs apply to each component."""
        assert f"{vector2(1.0, 2.0):.2f}" == "(1.00, 2.00)"
        assert format(vector2(10, 3), "03d") == "(010, 003)"

    def test_parse_str_roundtrip(self):
        """parse(str(v)) reproduces v for floats."""
        v = vector4(1.5, -2.25, 0.0, 1e-3)
        assert Vector4.parse(str(v)) == v
