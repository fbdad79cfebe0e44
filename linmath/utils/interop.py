"""
Conversion between linmath values and numpy arrays / torch tensors.

Shapes:
    VectorN            <-> (N,)
    MatrixN            <-> (N, N)      row-major, m[i][j] == array[i, j]
    list of VectorN    <-> (B, N)
    list of MatrixN    <-> (B, N, N)

A square 2-D array is ambiguous (one matrix or N vectors); it is read as a
matrix unless ``kind="vector"`` is passed.

Components read back from arrays are numpy scalars of the array's dtype,
so ``from_numpy(np.zeros(3, np.float32)).x`` is an ``np.float32``.
"""

from typing import Any, List, Optional, Sequence, Union

import numpy as np
import torch

from ..core.base import BaseAggregate, BaseMatrix, BaseVector
from ..core.constants import AGGREGATE_MATRIX, AGGREGATE_VECTOR, SUPPORTED_DIMENSIONS
from ..matrix import Matrix2, Matrix3, Matrix4
from ..vector import Vector2, Vector3, Vector4

_VECTOR_TYPES = {2: Vector2, 3: Vector3, 4: Vector4}
_MATRIX_TYPES = {2: Matrix2, 3: Matrix3, 4: Matrix4}

Aggregates = Union[BaseAggregate, List[BaseAggregate]]


def _check_dimension(n: int, shape: tuple) -> None:
    if n not in SUPPORTED_DIMENSIONS:
        raise ValueError(
            f"Unsupported shape {shape}: dimension must be one of {SUPPORTED_DIMENSIONS}"
        )


def _vector_from_row(row: np.ndarray) -> BaseVector:
    return _VECTOR_TYPES[row.shape[0]](*row)


def _matrix_from_block(block: np.ndarray) -> BaseMatrix:
    n = block.shape[0]
    return _MATRIX_TYPES[n](*(_VECTOR_TYPES[n](*row) for row in block))


# =============================================================================
# numpy
# =============================================================================

def to_numpy(value: Union[BaseAggregate, Sequence[BaseAggregate]], dtype: Any = None) -> np.ndarray:
    """
    Convert a vector, matrix, or sequence of same-typed values to an array.

    Args:
        value: Vector, matrix, or non-empty sequence of one aggregate type
        dtype: Optional numpy dtype; inferred from the components otherwise

    Returns:
        Array of shape (N,), (N, N), (B, N) or (B, N, N)

    Raises:
        ValueError: For an empty sequence
        TypeError: For mixed or non-aggregate items
    """
    if isinstance(value, BaseAggregate):
        return np.array(value.to_list(), dtype=dtype)

    items = list(value)
    if not items:
        raise ValueError("Cannot infer an array shape from an empty sequence")
    first_type = type(items[0])
    if not issubclass(first_type, BaseAggregate):
        raise TypeError(f"Expected vectors or matrices, got {first_type.__name__}")
    for item in items:
        if type(item) is not first_type:
            raise TypeError(
                f"Cannot stack {type(item).__name__} with {first_type.__name__}"
            )
    return np.array([item.to_list() for item in items], dtype=dtype)


def from_numpy(array: np.ndarray, kind: Optional[str] = None) -> Aggregates:
    """
    Convert an array back to linmath values.

    Args:
        array: Array of shape (N,), (N, N), (B, N) or (B, N, N)
        kind: "vector" or "matrix" to force the reading of a 2-D array

    Returns:
        A vector, a matrix, or a list of either

    Raises:
        ValueError: If the shape is unsupported or contradicts ``kind``
    """
    array = np.asarray(array)
    if kind not in (None, AGGREGATE_VECTOR, AGGREGATE_MATRIX):
        raise ValueError(f"kind must be '{AGGREGATE_VECTOR}' or '{AGGREGATE_MATRIX}', got {kind!r}")
    shape = array.shape

    if array.ndim == 1:
        if kind == AGGREGATE_MATRIX:
            raise ValueError(f"Cannot read a matrix from shape {shape}")
        _check_dimension(shape[0], shape)
        return _vector_from_row(array)

    if array.ndim == 2:
        _check_dimension(shape[1], shape)
        square = shape[0] == shape[1]
        if kind == AGGREGATE_MATRIX or (kind is None and square):
            if not square:
                raise ValueError(f"Cannot read a matrix from non-square shape {shape}")
            return _matrix_from_block(array)
        return [_vector_from_row(row) for row in array]

    if array.ndim == 3:
        if kind == AGGREGATE_VECTOR:
            raise ValueError(f"Cannot read vectors from shape {shape}")
        if shape[1] != shape[2]:
            raise ValueError(f"Cannot read matrices from non-square blocks {shape}")
        _check_dimension(shape[1], shape)
        return [_matrix_from_block(block) for block in array]

    raise ValueError(f"Unsupported array shape {shape}")


# =============================================================================
# torch
# =============================================================================

def to_tensor(
    value: Union[BaseAggregate, Sequence[BaseAggregate]],
    dtype: Optional[torch.dtype] = None,
    device: Optional[Union[str, torch.device]] = None
) -> torch.Tensor:
    """
    Convert a vector, matrix, or sequence of them to a tensor.

    Args:
        value: Same as ``to_numpy``
        dtype: Optional torch dtype
        device: Optional target device

    Returns:
        Tensor with the shape ``to_numpy`` would produce
    """
    tensor = torch.as_tensor(to_numpy(value), device=device)
    if dtype is not None:
        tensor = tensor.to(dtype)
    return tensor


def from_tensor(tensor: torch.Tensor, kind: Optional[str] = None) -> Aggregates:
    """Convert a tensor back to linmath values (see ``from_numpy``)."""
    return from_numpy(tensor.detach().cpu().numpy(), kind=kind)
