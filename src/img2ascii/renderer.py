from dataclasses import dataclass

import numpy as np

from img2ascii.glyphs import glyph_indices, ramp


@dataclass(frozen=True)
class RenderConfig:
    dither: bool = False
    invert: bool = False


def render_lines(grid: np.ndarray, config: RenderConfig) -> list[str]:
    """Map a (height, width) lightness grid to one line of glyphs per row, top to bottom."""
    chars = np.array(list(ramp(config.invert, config.dither)))
    mapped = chars[glyph_indices(grid, config.dither)]
    return ["".join(row) for row in mapped]


def render(grid: np.ndarray, config: RenderConfig) -> str:
    lines = render_lines(grid, config)
    if not lines:
        return ""
    return "\n".join(lines) + "\n"
