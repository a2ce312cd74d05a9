"""
Test image loading and saving
"""
import numpy as np
import pytest
from PIL import Image

from texkit import ImageBuffer
from texkit.export import ImageSaveError, save_jpeg, save_png
from texkit.image_loader import ImageLoadError, get_image_info, image_to_buffer, load_image


class TestLoad:
    def test_rgb_png_gets_alpha(self, temp_dir):
        path = temp_dir / "rgb.png"
        Image.new("RGB", (5, 3), color=(10, 20, 30)).save(path)

        buf = load_image(path)

        assert buf.size == (5, 3)
        assert (buf.pixels == (10, 20, 30, 255)).all()

    def test_rgba_png(self, temp_dir):
        path = temp_dir / "rgba.png"
        Image.new("RGBA", (2, 2), color=(1, 2, 3, 4)).save(path)
        buf = load_image(str(path))
        assert (buf.pixels == (1, 2, 3, 4)).all()

    def test_grayscale(self):
        buf = image_to_buffer(Image.new("L", (2, 2), color=99))
        assert (buf.pixels == (99, 99, 99, 255)).all()

    def test_missing_file(self, temp_dir):
        with pytest.raises(ImageLoadError):
            load_image(temp_dir / "nope.png")

    def test_not_an_image(self, temp_dir):
        path = temp_dir / "junk.png"
        path.write_bytes(b"definitely not a png")
        with pytest.raises(ImageLoadError):
            load_image(path)

    def test_info(self, temp_dir):
        path = temp_dir / "info.png"
        Image.new("RGBA", (7, 4)).save(path)
        info = get_image_info(path)
        assert (info['width'], info['height']) == (7, 4)
        assert info['has_alpha']


class TestSave:
    def test_png_round_trip(self, temp_dir, random_buffer):
        path = temp_dir / "out.png"
        save_png(random_buffer, path)
        loaded = load_image(path)
        assert loaded.size == random_buffer.size
        assert np.array_equal(loaded.data, random_buffer.data)

    def test_jpeg_drops_alpha(self, temp_dir, solid_buffer):
        path = temp_dir / "out.jpg"
        save_jpeg(solid_buffer((200, 100, 50, 10), width=8, height=8), path)
        loaded = load_image(path)
        assert (loaded.pixels[..., 3] == 255).all()
        assert np.abs(loaded.pixels[0, 0, :3].astype(int) - (200, 100, 50)).max() <= 4

    def test_bad_extension(self, temp_dir, random_buffer):
        with pytest.raises(ImageSaveError):
            save_png(random_buffer, temp_dir / "out.unknownext")
