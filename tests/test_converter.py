from pathlib import Path

import numpy as np
import pytest
from PIL import Image

from img2ascii.converter import DecodeError, image_to_ascii, load_image, output_path, scale_image
from img2ascii.renderer import RenderConfig


def checkerboard():
    """2x2 image, row-major white, black, white, black."""
    img = Image.new("RGB", (2, 2))
    img.putdata([(255, 255, 255), (0, 0, 0), (255, 255, 255), (0, 0, 0)])
    return img


def test_checkerboard_scenario():
    assert image_to_ascii(checkerboard()) == " █\n █\n"


def test_checkerboard_inverted():
    assert image_to_ascii(checkerboard(), RenderConfig(invert=True)) == "█ \n█ \n"


def test_solid_white_dithered():
    img = Image.new("RGB", (3, 2), (255, 255, 255))
    assert image_to_ascii(img, RenderConfig(dither=True)) == "   \n   \n"


def test_accepts_file_path(tmp_path):
    path = tmp_path / "board.png"
    checkerboard().save(path)
    assert image_to_ascii(path) == " █\n █\n"


def test_scale_applied_before_sampling():
    img = Image.new("RGB", (40, 20), (0, 0, 0))
    lines = image_to_ascii(img, scale=0.25).splitlines()
    assert len(lines) == 5
    assert all(line == "█" * 10 for line in lines)


def test_scale_image_keeps_aspect_ratio():
    img = Image.new("RGB", (100, 50))
    assert scale_image(img, 0.5).size == (50, 25)


def test_scale_image_never_collapses_to_zero():
    img = Image.new("RGB", (10, 3))
    assert scale_image(img, 0.01).size == (1, 1)


def test_scale_one_returns_same_image():
    img = Image.new("RGB", (4, 4))
    assert scale_image(img, 1.0) is img


def test_scale_must_be_positive():
    with pytest.raises(ValueError, match="positive"):
        scale_image(Image.new("RGB", (4, 4)), 0)


def test_load_png_and_jpeg(tmp_path):
    for name, fmt in (("a.png", "PNG"), ("a.jpg", "JPEG")):
        path = tmp_path / name
        Image.new("RGB", (3, 2), (10, 20, 30)).save(path, format=fmt)
        assert load_image(path).size == (3, 2)


def test_load_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_image(tmp_path / "missing.png")


def test_load_garbage_raises_decode_error(tmp_path):
    path = tmp_path / "bad.png"
    path.write_bytes(b"not an image at all")
    with pytest.raises(DecodeError):
        load_image(path)


def test_load_truncated_png_raises_decode_error(tmp_path):
    path = tmp_path / "cut.png"
    noise = np.random.default_rng(0).integers(0, 256, size=(64, 64, 3), dtype=np.uint8)
    Image.fromarray(noise).save(path)
    data = path.read_bytes()
    path.write_bytes(data[: len(data) // 2])
    with pytest.raises(DecodeError):
        load_image(path)


def test_load_rejects_other_formats(tmp_path):
    path = tmp_path / "pic.bmp"
    Image.new("RGB", (2, 2)).save(path, format="BMP")
    with pytest.raises(DecodeError):
        load_image(path)


@pytest.mark.parametrize(
    "config, expected",
    [
        (RenderConfig(), "ascii_cat.txt"),
        (RenderConfig(invert=True), "ascii_cat_inverted.txt"),
        (RenderConfig(dither=True), "ascii_cat_dithered.txt"),
        (RenderConfig(invert=True, dither=True), "ascii_cat_inverted_dithered.txt"),
    ],
)
def test_output_path_names(config, expected):
    assert output_path("photos/cat.jpg", config) == Path(expected)


def test_output_path_directory(tmp_path):
    assert output_path("cat.png", RenderConfig(), tmp_path) == tmp_path / "ascii_cat.txt"
