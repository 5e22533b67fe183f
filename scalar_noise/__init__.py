# scalar_noise/__init__.py

# This file makes the 'scalar_noise' directory a Python package.
# It also defines the public API of the package.

from .errors import ScalarNoiseError, InvalidDimension, InvalidLattice, UnknownCurve
from .noise import CURVES, lerp
from .grid import Grid, create
from .sampler import sample, sample_field, render
from .color_maps import to_grayscale, to_image

__all__ = [
    "Grid",
    "create",
    "sample",
    "sample_field",
    "render",
    "to_grayscale",
    "to_image",
    "lerp",
    "CURVES",
    "ScalarNoiseError",
    "InvalidDimension",
    "InvalidLattice",
    "UnknownCurve",
]
