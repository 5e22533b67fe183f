# scalar_noise/sampler.py

"""
================================================================================
VALUE NOISE SAMPLER
================================================================================
This module reads a continuous noise field out of a Grid. Coordinates may be
negative, fractional or beyond the grid bounds: they wrap around the lattice
periodically, so the field tiles seamlessly in both directions.

Data Contract:
---------------
- Inputs:
    - grid (Grid): The lattice to sample. Its `values` are read on every
      call and never cached, so a replaced lattice is picked up immediately.
    - x, y: Real coordinates in lattice units (scalars for `sample`, array
      likes for `sample_field`).
    - curve (str or callable, optional): Smoothing curve override. Defaults
      to the grid's own curve.
- Outputs:
    - A float for `sample`, a NumPy array for `sample_field` and `render`.
- Side Effects: None.
- Invariants:
    - sample(grid, x, y) == grid.values[x][y] at integer lattice coordinates.
    - sample(grid, x + m*width, y + n*height) == sample(grid, x, y).
================================================================================
"""

import math
import numbers

import numpy as np

from . import noise
from .grid import Grid, as_dimension

def sample(grid: Grid, x: float, y: float, curve=None) -> float:
    """
    Returns the smoothed, bilinearly interpolated noise value at (x, y).
    Defined for every real coordinate; NaN or infinite coordinates give NaN.
    """
    values = grid.values
    width, height = values.shape

    # Integers can be too large for a float; reduce them exactly first.
    if isinstance(x, numbers.Integral):
        x = int(x) % width
    if isinstance(y, numbers.Integral):
        y = int(y) % height
    x = float(x)
    y = float(y)
    if not (math.isfinite(x) and math.isfinite(y)):
        return math.nan

    smooth = noise.resolve_curve(grid.curve if curve is None else curve)

    # 1. Wrap into the lattice and find the cell's lower-left corner.
    xw, xf = noise.periodic_floor(x, width)
    yw, yf = noise.periodic_floor(y, height)
    # The upper corner wraps too, so the last column blends back into the first.
    xc = (xf + 1) % width
    yc = (yf + 1) % height

    # 2. Smooth the fractional offsets.
    sx = smooth(xw - xf)
    sy = smooth(yw - yf)

    # 3. Blend along y within each column, then across the two columns.
    a = noise.lerp(values[xf][yf], values[xf][yc], sy)
    b = noise.lerp(values[xc][yf], values[xc][yc], sy)
    return float(noise.lerp(a, b, sx))

def sample_field(grid: Grid, x_coords, y_coords, curve=None) -> np.ndarray:
    """
    Samples the grid at every coordinate pair of two array-likes.
    The inputs are broadcast against each other and the result has the
    broadcast shape. Registered curves run through the compiled kernel;
    custom callables are sampled point by point.
    """
    x_arr, y_arr = np.broadcast_arrays(
        np.asarray(x_coords, dtype=np.float64),
        np.asarray(y_coords, dtype=np.float64),
    )
    shape = x_arr.shape
    flat_x = np.ascontiguousarray(x_arr).ravel()
    flat_y = np.ascontiguousarray(y_arr).ravel()

    chosen = grid.curve if curve is None else curve
    kernel_curve = noise.curve_id(chosen)
    if kernel_curve is None:
        flat = np.fromiter(
            (sample(grid, px, py, curve=chosen) for px, py in zip(flat_x, flat_y)),
            dtype=np.float64,
            count=flat_x.size,
        )
    else:
        flat = noise.value_noise_2d(grid.values, flat_x, flat_y, kernel_curve)
    return flat.reshape(shape)

def render(grid: Grid, canvas_width: int, canvas_height: int,
           repeat_x: int = 1, repeat_y: int = 1, curve=None) -> np.ndarray:
    """
    Renders the field onto a canvas_width x canvas_height pixel array indexed
    [x][y]. The canvas spans `repeat_x` by `repeat_y` copies of the grid, so
    pixel (i, j) samples (i / kx, j / ky) with
    kx = canvas_width / (grid.width * repeat_x) and likewise for ky.
    """
    canvas_width = as_dimension("canvas_width", canvas_width)
    canvas_height = as_dimension("canvas_height", canvas_height)
    repeat_x = as_dimension("repeat_x", repeat_x)
    repeat_y = as_dimension("repeat_y", repeat_y)

    x_scale = canvas_width / (grid.width * repeat_x)
    y_scale = canvas_height / (grid.height * repeat_y)
    x_coords = np.arange(canvas_width) / x_scale
    y_coords = np.arange(canvas_height) / y_scale
    x_grid, y_grid = np.meshgrid(x_coords, y_coords, indexing='ij')
    return sample_field(grid, x_grid, y_grid, curve=curve)
