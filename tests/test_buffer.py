"""
Test the RGBA image buffer
"""
import numpy as np
import pytest

from texkit import ImageBuffer
from texkit.errors import BufferSizeError


class TestConstruction:
    def test_create_is_transparent_black(self):
        buf = ImageBuffer.create(3, 2)
        assert len(buf) == 3 * 2 * 4
        assert not buf.data.any()

    def test_length_invariant(self):
        with pytest.raises(BufferSizeError):
            ImageBuffer(2, 2, np.zeros(15, dtype=np.uint8))

    def test_negative_size(self):
        with pytest.raises(BufferSizeError):
            ImageBuffer.create(-1, 4)

    def test_accepts_bytes(self):
        buf = ImageBuffer(1, 1, bytes([1, 2, 3, 4]))
        assert buf.data.tolist() == [1, 2, 3, 4]
        buf.data[0] = 9  # writable copy

    def test_from_rgb_array_gets_opaque_alpha(self):
        arr = np.full((2, 3, 3), 7, dtype=np.uint8)
        buf = ImageBuffer.from_array(arr)
        assert (buf.width, buf.height) == (3, 2)
        assert (buf.pixels[..., 3] == 255).all()
        assert (buf.pixels[..., :3] == 7).all()

    def test_from_array_rejects_bad_shape(self):
        with pytest.raises(BufferSizeError):
            ImageBuffer.from_array(np.zeros((2, 2), dtype=np.uint8))


class TestLayout:
    def test_row_major_stride(self, gradient_buffer):
        buf = gradient_buffer
        x, y = 2, 1
        i = (y * buf.width + x) * 4
        assert buf.data[i:i + 4].tolist() == buf.pixels[y, x].tolist()

    def test_pixels_is_a_view(self, gradient_buffer):
        gradient_buffer.pixels[0, 0, 0] = 42
        assert gradient_buffer.data[0] == 42

    def test_copy_is_independent(self, gradient_buffer):
        dupe = gradient_buffer.copy()
        dupe.data[:] = 0
        assert gradient_buffer.data.any()


class TestRegions:
    def test_get_region(self, gradient_buffer):
        region = gradient_buffer.get_region(1, 1, 2, 2)
        assert region.size == (2, 2)
        assert np.array_equal(region.pixels, gradient_buffer.pixels[1:3, 1:3])

    def test_get_region_outside_reads_zero(self, gradient_buffer):
        region = gradient_buffer.get_region(-1, 0, 2, 1)
        assert region.pixels[0, 0].tolist() == [0, 0, 0, 0]
        assert region.pixels[0, 1].tolist() == gradient_buffer.pixels[0, 0].tolist()

    def test_put_region_clips(self, gradient_buffer):
        patch = ImageBuffer.from_array(np.full((2, 2, 4), 9, dtype=np.uint8))
        gradient_buffer.put_region(patch, 3, 2)
        assert gradient_buffer.pixels[2, 3].tolist() == [9, 9, 9, 9]
        assert gradient_buffer.pixels[1, 3].tolist() != [9, 9, 9, 9]
