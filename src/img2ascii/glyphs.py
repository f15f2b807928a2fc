from bisect import bisect_left

import numpy as np

from img2ascii.charsets import DITHERED, DITHERED_THRESHOLDS, PLAIN, PLAIN_THRESHOLDS


def _thresholds(dither: bool) -> tuple[float, ...]:
    return DITHERED_THRESHOLDS if dither else PLAIN_THRESHOLDS


def ramp(invert: bool = False, dither: bool = False) -> str:
    """Glyphs in bucket order, darkest bucket first.

    By default the declared ramp is reversed so dark pixels get dense glyphs,
    which reads correctly on a light background. ``invert`` keeps the declared
    order, putting dense glyphs on light pixels for dark terminals.
    """
    chars = DITHERED if dither else PLAIN
    return chars if invert else chars[::-1]


def bucket(lightness: float, dither: bool = False) -> int:
    """Index of the first bucket whose upper bound is >= lightness."""
    return bisect_left(_thresholds(dither), lightness)


def select_glyph(lightness: float, invert: bool = False, dither: bool = False) -> str:
    return ramp(invert, dither)[bucket(lightness, dither)]


def glyph_indices(grid: np.ndarray, dither: bool = False) -> np.ndarray:
    """Bucket a whole lightness grid at once. Same result as ``bucket`` per element."""
    return np.searchsorted(np.asarray(_thresholds(dither)), grid, side="left")
