"""
Vector module.

Fixed-size vectors with component-wise arithmetic, geometric reductions
(dot, magnitude, normalize), comparisons and scalar-kind conversions.
"""

from ..core.base import BaseVector, dot, distance
from .vec2 import Vector2, vector2
from .vec3 import Vector3, vector3
from .vec4 import Vector4, vector4

__all__ = [
    "BaseVector",
    "Vector2",
    "Vector3",
    "Vector4",
    "vector2",
    "vector3",
    "vector4",
    "dot",
    "distance",
]
