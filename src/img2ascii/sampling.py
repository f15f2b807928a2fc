import numpy as np
from PIL import Image

ALPHA_MODES = ("RGBA", "LA", "PA", "RGBa", "La")


def lightness(r: int, g: int, b: int) -> float:
    """HSL lightness of an 8-bit RGB triple, normalised to 0-1."""
    return (max(r, g, b) + min(r, g, b)) / 2 / 255.0


def _to_8bit(image: Image.Image) -> Image.Image:
    """Reduce 16/32-bit integer grayscale to 8-bit by keeping the high byte."""
    if not image.mode.startswith("I"):
        return image
    arr = np.asarray(image).astype(np.int64)
    high = np.clip(arr, 0, 0xFFFF) >> 8
    return Image.fromarray(high.astype(np.uint8))


def _rgb_array(image: Image.Image) -> np.ndarray:
    """8-bit RGB channels as an int array, premultiplied by alpha when the image has any."""
    image = _to_8bit(image)
    if image.mode not in ALPHA_MODES and "transparency" not in image.info:
        return np.asarray(image.convert("RGB"), dtype=np.int64)

    rgba = np.asarray(image.convert("RGBA"), dtype=np.int64)
    # 16-bit premultiply then keep the high byte, so transparent pixels read as black
    alpha = rgba[:, :, 3:] * 0x101
    return (rgba[:, :, :3] * 0x101 * alpha // 0xFFFF) >> 8


def lightness_grid(image: Image.Image) -> np.ndarray:
    """Per-pixel HSL lightness of an image.

    Colour channels are premultiplied by alpha, so fully transparent pixels
    are black. Returns a read-only float array of shape (height, width) with
    values in 0-1, so ``grid[y, x]`` is the lightness of pixel (x, y).
    """
    arr = _rgb_array(image)
    grid = (arr.max(axis=2) + arr.min(axis=2)) / 2 / 255.0
    grid.flags.writeable = False
    return grid
