import io
from pathlib import Path

from PIL import Image

from img2ascii.renderer import RenderConfig, render
from img2ascii.sampling import lightness_grid

FORMATS = ("PNG", "JPEG")


class DecodeError(ValueError):
    """The file was read but is not a PNG or JPEG Pillow can decode."""


def load_image(path: str | Path) -> Image.Image:
    """Read and fully decode a PNG or JPEG.

    Raises OSError when the file cannot be read and DecodeError when its
    contents cannot be decoded.
    """
    data = Path(path).read_bytes()
    try:
        image = Image.open(io.BytesIO(data), formats=FORMATS)
        image.load()
    except (OSError, SyntaxError, Image.DecompressionBombError) as e:
        raise DecodeError(f"Cannot decode {path}: {e}") from e
    return image


def scale_image(image: Image.Image, scale: float) -> Image.Image:
    """Resize by a width factor, keeping the aspect ratio."""
    if scale <= 0:
        raise ValueError(f"Scale must be positive, got {scale}")
    if scale == 1.0:
        return image
    width = max(1, int(image.width * scale))
    height = max(1, round(image.height * width / image.width))
    return image.resize((width, height), Image.LANCZOS)


def image_to_ascii(
    image: Image.Image | str | Path,
    config: RenderConfig | None = None,
    scale: float | None = None,
) -> str:
    if config is None:
        config = RenderConfig()
    if not isinstance(image, Image.Image):
        image = load_image(image)
    if scale is not None:
        image = scale_image(image, scale)
    return render(lightness_grid(image), config)


def output_path(image_path: str | Path, config: RenderConfig, directory: str | Path = ".") -> Path:
    """Name of the text file for an input image: ascii_<stem>[_inverted][_dithered].txt"""
    name = f"ascii_{Path(image_path).stem}"
    if config.invert:
        name += "_inverted"
    if config.dither:
        name += "_dithered"
    return Path(directory) / f"{name}.txt"
