"""
Pytest configuration and fixtures
"""
import pytest
import os
import sys

import numpy as np

# Add project root to path
project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if project_root not in sys.path:
    sys.path.insert(0, project_root)

from texkit import ImageBuffer


@pytest.fixture
def gradient_buffer():
    """4x3 buffer where every byte is distinct enough to track"""
    h, w = 3, 4
    arr = np.zeros((h, w, 4), dtype=np.uint8)
    for y in range(h):
        for x in range(w):
            arr[y, x] = (x * 60, y * 100, (x + y) * 20, 200 + x + y)
    return ImageBuffer.from_array(arr)


@pytest.fixture
def random_buffer():
    """16x8 buffer of seeded random bytes"""
    rng = np.random.default_rng(1234)
    arr = rng.integers(0, 256, size=(8, 16, 4), dtype=np.uint8)
    return ImageBuffer.from_array(arr)


@pytest.fixture
def solid_buffer():
    """Factory for single-color buffers"""
    def _make(color, width=4, height=4):
        arr = np.empty((height, width, 4), dtype=np.uint8)
        arr[...] = color
        return ImageBuffer.from_array(arr)
    return _make


@pytest.fixture
def temp_dir(tmp_path):
    """Temporary directory for image files"""
    return tmp_path
