# scalar_noise/color_maps.py

"""
================================================================================
GRAYSCALE MAPPING UTILITIES
================================================================================
This module converts sampled noise fields into 8-bit grayscale pixel data and
in-memory Pillow images, for previewing a field or handing it to an image
pipeline the caller owns.

It is designed to be a pure, stateless utility. Nothing is written to disk.
================================================================================
"""
import numpy as np
from PIL import Image

from . import config as DEFAULTS
from .errors import InvalidDimension

def to_grayscale(field, value_range: tuple = DEFAULTS.DEFAULT_VALUE_RANGE) -> np.ndarray:
    """
    Maps field values onto 0..255. Values outside `value_range` are clipped
    to black or white.
    """
    low, high = value_range
    if not high > low:
        raise ValueError(f"value_range must be increasing, got {value_range!r}")

    normalized = (np.asarray(field, dtype=np.float64) - low) / (high - low)
    normalized = np.clip(normalized, 0.0, 1.0)
    return np.round(normalized * DEFAULTS.GRAYSCALE_LEVELS).astype(np.uint8)

def to_image(field, value_range: tuple = DEFAULTS.DEFAULT_VALUE_RANGE) -> Image.Image:
    """
    Builds a grayscale ("L") image from a field indexed [x][y], such as the
    output of `render()`. The image is field.shape[0] pixels wide.
    """
    pixels = to_grayscale(field, value_range)
    if pixels.ndim != 2:
        raise InvalidDimension(f"Field must be two-dimensional, got {pixels.ndim} dimensions")

    # Pillow works with (height, width) arrays, so we need to transpose
    # the field from (width, height) to what Pillow expects.
    return Image.fromarray(np.ascontiguousarray(pixels.T))
