import pytest
from PIL import Image

from colorbuf import RGBA8, Color, SubRegionView, encode_bitmap
from colorbuf.bitmap import ChannelOrder
from colorbuf.rendering import buffer_to_image, image_to_buffer, load_bitmap, save_buffer


def _sample_image():
    img = Image.new("RGBA", (2, 1))
    img.putpixel((0, 0), (255, 0, 0, 128))
    img.putpixel((1, 0), (10, 20, 30, 255))
    return img


def test_image_to_buffer_orders():
    img = _sample_image()
    assert image_to_buffer(img, ChannelOrder.RGBA).tobytes() == bytes([255, 0, 0, 128, 10, 20, 30, 255])
    assert image_to_buffer(img, "ARGB").tobytes() == bytes([128, 255, 0, 0, 255, 10, 20, 30])
    assert image_to_buffer(img, ChannelOrder.RGB).tobytes() == bytes([255, 0, 0, 10, 20, 30])


def test_grayscale_image_is_converted():
    img = Image.new("L", (1, 1), 51)
    buf = image_to_buffer(img)
    assert buf.get_pixel(0, 0) == Color(0.2, 0.2, 0.2, 1.0)


def test_buffer_to_image():
    buf = image_to_buffer(_sample_image(), "ARGB")
    img = buffer_to_image(buf)
    assert img.mode == "RGBA"
    assert img.size == (2, 1)
    assert img.getpixel((0, 0)) == (255, 0, 0, 128)


def test_save_and_load_roundtrip(tmp_path):
    path = str(tmp_path / "sample.png")
    buf = image_to_buffer(_sample_image())
    save_buffer(buf, path)
    loaded = load_bitmap(path)
    assert loaded.width == 2
    assert loaded.height == 1
    assert encode_bitmap(loaded, RGBA8) == encode_bitmap(buf, RGBA8)


def test_save_view(tmp_path):
    path = str(tmp_path / "crop.png")
    buf = image_to_buffer(_sample_image())
    with SubRegionView(buf, 1, 0, 1, 1) as view:
        save_buffer(view, path)
    with Image.open(path) as img:
        assert img.size == (1, 1)
        assert img.convert("RGBA").getpixel((0, 0)) == (10, 20, 30, 255)


def test_save_jpeg_drops_alpha(tmp_path):
    path = str(tmp_path / "sample.jpg")
    save_buffer(image_to_buffer(_sample_image()), path)
    with Image.open(path) as img:
        assert img.mode == "RGB"


def test_load_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_bitmap(str(tmp_path / "missing.png"))


def test_load_non_image(tmp_path):
    path = tmp_path / "notes.txt"
    path.write_text("not an image", encoding="utf-8")
    with pytest.raises(ValueError):
        load_bitmap(str(path))
