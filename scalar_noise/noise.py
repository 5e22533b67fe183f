# scalar_noise/noise.py

"""
================================================================================
VALUE NOISE MATH HELPERS
================================================================================
This module provides the small math primitives behind 2D value noise: linear
interpolation, the smoothing curves applied to fractional offsets, periodic
coordinate wrapping and the compiled per-point sampling kernel. It is designed
to be a pure, stateless utility.

Data Contract:
---------------
- Inputs:
    - values: A (width, height) float64 NumPy lattice indexed [x, y].
    - x, y: Real coordinates (scalars or 1D NumPy arrays for the kernel).
    - curve_id: One of the CURVE_* integer constants below.
- Outputs:
    - Interpolated scalars, or a 1D NumPy array matching the input length.
- Side Effects: None.
- Invariants: Sampling is periodic in both axes; a coordinate that lands on a
  lattice point returns the stored value unchanged.
================================================================================
"""

import numpy as np
from numba import njit

from .errors import UnknownCurve

# --- Smoothing Curve IDs ---
# Integer ids so the compiled kernel can branch on the curve without
# receiving a Python callable.
CURVE_CUBIC = 0
CURVE_QUINTIC = 1
CURVE_COSINE = 2
CURVE_LINEAR = 3

@njit
def lerp(a, b, t):
    "Linear interpolation."
    return a + t * (b - a)

@njit
def smoothstep(t):
    "3t^2 - 2t^3"
    return t * t * (3.0 - 2.0 * t)

@njit
def smootherstep(t):
    "6t^5 - 15t^4 + 10t^3"
    return t * t * t * (t * (t * 6 - 15) + 10)

@njit
def cosine_step(t):
    """Half a cosine period, rescaled to run from 0 to 1."""
    return (1 - np.cos(t * np.pi)) / 2

@njit
def linear_step(t):
    return t

@njit
def smooth(t, curve_id):
    """Applies the smoothing curve selected by `curve_id` to `t`."""
    if curve_id == CURVE_QUINTIC:
        return smootherstep(t)
    if curve_id == CURVE_COSINE:
        return cosine_step(t)
    if curve_id == CURVE_LINEAR:
        return linear_step(t)
    return smoothstep(t)

@njit
def wrap(v, size):
    """
    Floored modulo of `v` into [0, size). A tiny negative `v` can round up
    to exactly `size`, which is folded back to 0.
    """
    w = v % size
    if w >= size:
        return w - size
    return w

@njit
def periodic_floor(v, size):
    """Returns (wrapped coordinate, index of the lattice line below it)."""
    w = wrap(v, size)
    return w, int(np.floor(w))

@njit
def sample_point(values, x, y, curve_id):
    """
    Samples the lattice at one (x, y) coordinate. Non-finite coordinates
    have no cell to land in and produce NaN.
    """
    if not (np.isfinite(x) and np.isfinite(y)):
        return np.nan
    width, height = values.shape

    xw, xf = periodic_floor(x, width)
    yw, yf = periodic_floor(y, height)
    xc = (xf + 1) % width
    yc = (yf + 1) % height

    sx = smooth(xw - xf, curve_id)
    sy = smooth(yw - yf, curve_id)

    a = lerp(values[xf, yf], values[xf, yc], sy)
    b = lerp(values[xc, yf], values[xc, yc], sy)
    return lerp(a, b, sx)

@njit
def value_noise_2d(values, x, y, curve_id):
    """
    Samples the lattice at every (x[i], y[i]) pair of two flat coordinate
    arrays. JIT-compiled with Numba; the explicit loop compiles to machine
    code and performs the same arithmetic as `sample_point`.
    """
    n = x.shape[0]
    out = np.empty(n)
    for i in range(n):
        out[i] = sample_point(values, x[i], y[i], curve_id)
    return out

# --- Curve Registry ---
CURVES = {
    "cubic": smoothstep,
    "quintic": smootherstep,
    "cosine": cosine_step,
    "linear": linear_step,
}

CURVE_IDS = {
    "cubic": CURVE_CUBIC,
    "quintic": CURVE_QUINTIC,
    "cosine": CURVE_COSINE,
    "linear": CURVE_LINEAR,
}

def resolve_curve(curve):
    """
    Turns a curve name or a callable into a callable. Names must be keys of
    CURVES; anything callable is passed through untouched.
    """
    if callable(curve):
        return curve
    try:
        return CURVES[curve]
    except (KeyError, TypeError):
        raise UnknownCurve(
            f"Unknown smoothing curve {curve!r}; expected one of {sorted(CURVES)} or a callable"
        ) from None

def curve_id(curve):
    """Returns the kernel id for a registered curve name, or None for callables."""
    if callable(curve):
        return None
    resolve_curve(curve)
    return CURVE_IDS[curve]
