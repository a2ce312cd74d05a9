"""
Test numeric helpers
"""
import numpy as np
import pytest

from texkit.utils import clamp, lerp, round_half_up, store_byte, tint_to_multiplier


class TestLerp:
    """Linear interpolation"""

    def test_endpoints(self):
        assert lerp(10, 50, 0) == 10
        assert lerp(10, 50, 1) == 50

    def test_midpoint(self):
        assert lerp(10, 50, 0.5) == 30
        assert lerp(-4, 4, 0.5) == 0

    def test_overshoot(self):
        assert lerp(128, 138, 2) == 148
        assert lerp(0, 125, 0.25) == 31.25

    def test_arrays(self):
        out = lerp(np.array([0.0, 100.0]), np.array([100.0, 0.0]), 0.25)
        assert np.allclose(out, [25.0, 75.0])


class TestClamp:
    """Clamping to a range"""

    @pytest.mark.parametrize("value", [-1000, -1, 0, 17, 255, 256, 1e9])
    def test_result_in_range(self, value):
        assert 0 <= clamp(0, 255, value) <= 255

    @pytest.mark.parametrize("value", [0, 1, 127.5, 255])
    def test_in_range_unchanged(self, value):
        assert clamp(0, 255, value) == value

    def test_limits(self):
        assert clamp(0, 255, 1000) == 255
        assert clamp(0, 255, -3) == 0


class TestTintToMultiplier:
    def test_full(self):
        assert tint_to_multiplier(255) == 1.0

    def test_half(self):
        assert tint_to_multiplier(127.5) == 0.5

    def test_non_positive_is_zero(self):
        assert tint_to_multiplier(0) == 0
        assert tint_to_multiplier(-10) == 0


class TestRounding:
    def test_round_half_up(self):
        assert round_half_up(0.5) == 1
        assert round_half_up(1.5) == 2
        assert round_half_up(2.5) == 3
        assert round_half_up(-0.5) == 0

    def test_round_half_up_array(self):
        out = round_half_up(np.array([0.5, 2.5, 2.4]))
        assert out.tolist() == [1.0, 3.0, 2.0]

    def test_store_byte_clamps(self):
        assert store_byte(-5) == 0
        assert store_byte(300) == 255

    def test_store_byte_half_to_even(self):
        assert store_byte(128.5) == 128
        assert store_byte(129.5) == 130

    def test_store_byte_array_matches_scalar(self):
        values = [-3.0, 0.5, 1.5, 127.6, 128.5, 254.5, 400.0]
        arr = store_byte(np.array(values))
        assert arr.dtype == np.uint8
        assert arr.tolist() == [store_byte(v) for v in values]
