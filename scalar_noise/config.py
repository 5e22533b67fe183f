# scalar_noise/config.py

"""
================================================================================
INTERNAL DEFAULT CONFIGURATION
================================================================================
This module contains the default, fallback internal constants for value noise
grids. These values are used if they are not explicitly provided by the
user's configuration.

DO NOT MODIFY THIS FILE FOR A SPECIFIC FIELD.
Instead, pass a configuration dictionary to `create()` or `Grid`.
================================================================================
"""

# --- Lattice Randomization ---
# None draws fresh OS entropy, so every grid is different. Pass an integer
# seed in the config to make a grid reproducible.
DEFAULT_SEED = None

# --- Interpolation ---
# The smoothing curve applied to fractional offsets before blending.
# One of the names registered in scalar_noise.noise.CURVES.
DEFAULT_SMOOTHING_CURVE = "cubic"

# --- Rendering ---
# The range of lattice values produced by the default random source.
# Used by the grayscale converter to normalize a field.
DEFAULT_VALUE_RANGE = (0.0, 1.0)

# The brightest 8-bit gray level.
GRAYSCALE_LEVELS = 255
