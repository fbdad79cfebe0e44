"""
Pytest configuration and fixtures for linmath tests.
"""

import pytest
import torch

from linmath.matrix import Matrix2, Matrix3, Matrix4
from linmath.utils.config import get_config, set_config


@pytest.fixture(autouse=True)
def restore_config():
    """Reset the active configuration after every test."""
    previous = get_config()
    yield
    set_config(previous)


@pytest.fixture
def cpu_device():
    """Force CPU device for consistent testing."""
    return torch.device('cpu')


@pytest.fixture
def invertible_matrix2():
    """2x2 float matrix with determinant 10."""
    return Matrix2((4.0, 7.0), (2.0, 6.0))


@pytest.fixture
def unimodular_matrix3():
    """3x3 integer matrix with determinant 1 and an integer inverse."""
    return Matrix3((1, 2, 3), (0, 1, 4), (5, 6, 0))


@pytest.fixture
def general_matrix4():
    """4x4 float matrix with no special structure."""
    return Matrix4(
        (1.0, 0.0, 2.0, -1.0),
        (3.0, 0.0, 0.0, 5.0),
        (2.0, 1.0, 4.0, -3.0),
        (1.0, 0.0, 5.0, 0.0),
    )


def pytest_configure(config):
    """Register the gpu marker used by the CUDA interop tests."""
    config.addinivalue_line(
        "markers", "gpu: marks tests that require GPU"
    )


def pytest_collection_modifyitems(config, items):
    """Skip GPU tests if no GPU available."""
    if not torch.cuda.is_available():
        skip_gpu = pytest.mark.skip(reason="No GPU available")
        for item in items:
            if "gpu" in item.keywords:
                item.add_marker(skip_gpu)
