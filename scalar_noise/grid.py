# scalar_noise/grid.py

"""
================================================================================
VALUE NOISE GRID STORE
================================================================================
This module contains the Grid class, which owns the lattice of random values
that value noise interpolates between, and the `create()` factory that fills
a new lattice with one independent random draw per cell.

Data Contract:
---------------
- Inputs (on creation):
    - width, height (int): Lattice dimensions. Height defaults to width.
    - config (dict, optional): Overrides for the internal defaults. Expected
      keys are 'seed' and 'smoothing_curve'.
    - logger (logging.Logger, optional): The logger for runtime messages.
    - rand (callable, optional): A zero-argument random source. Called
      exactly width * height times when supplied.
- Outputs:
    - A Grid exposing `width`, `height` and the `values` lattice, a
      float64 NumPy array of shape (width, height) indexed [x][y].
- Side Effects: Logs messages using the provided logger.
- Invariants: The lattice is always rectangular, non-empty and fully
  populated with finite floats. Replacing it goes through `load_values`,
  which enforces the same rules.
================================================================================
"""

import logging
import numbers

import numpy as np

from . import config as DEFAULTS
from .errors import InvalidDimension, InvalidLattice
from .noise import resolve_curve

def as_dimension(name: str, value, logger: logging.Logger = None) -> int:
    """
    Validates a lattice or canvas dimension and returns it as an int.
    Integral floats such as 10.0 are accepted; booleans are not.
    """
    size = None
    if isinstance(value, bool):
        pass
    elif isinstance(value, numbers.Integral):
        size = int(value)
    elif isinstance(value, numbers.Real) and float(value).is_integer():
        size = int(value)

    if size is None or size <= 0:
        message = f"{name} must be a positive integer, got {value!r}"
        if logger is not None:
            logger.error(message)
        raise InvalidDimension(message)
    return size

def _consolidate_settings(config: dict) -> dict:
    user_config = config or {}
    return {
        'seed': user_config.get('seed', DEFAULTS.DEFAULT_SEED),
        'smoothing_curve': user_config.get('smoothing_curve', DEFAULTS.DEFAULT_SMOOTHING_CURVE),
    }

def _as_lattice(values) -> np.ndarray:
    """Copies `values` into a validated (width, height) float64 array."""
    try:
        lengths = {len(column) for column in values}
    except TypeError:
        raise InvalidDimension("Lattice must be a sequence of columns, each a sequence of values") from None
    if len(lengths) != 1 or 0 in lengths:
        raise InvalidDimension(
            f"Lattice must have at least one column and equal, non-zero column heights, got heights {sorted(lengths)}"
        )

    try:
        lattice = np.array(values, dtype=np.float64)
    except (TypeError, ValueError) as e:
        raise InvalidLattice(f"Lattice entries must be real numbers: {e}") from e

    if lattice.ndim != 2:
        raise InvalidDimension(f"Lattice must be two-dimensional, got {lattice.ndim} dimensions")
    if not np.isfinite(lattice).all():
        raise InvalidLattice("Lattice has holes (NaN or infinite entries)")
    lattice = np.ascontiguousarray(lattice)
    lattice.setflags(write=False)
    return lattice

class Grid:
    """
    A fixed-size lattice of scalar values for value noise sampling.
    Use `create()` for a randomized grid or `Grid.from_values()` to wrap an
    existing lattice.

    `width` and `height` are read-only: they always follow the shape of the
    lattice. The `values` array is read-only as well, so writing a single
    cell raises ValueError. To change the lattice, build a new one (for
    example `grid.values.copy()`, edited) and pass it to `load_values` or
    assign it to `grid.values`; both validate it first.
    """
    def __init__(self, values, config: dict = None, logger: logging.Logger = None):
        """
        Initializes the grid from a ready-made lattice.

        Args:
            values: A sequence of `width` columns, each a sequence of
                `height` real numbers, or an equivalent 2D array.
            config (dict, optional): User-defined parameters to override defaults.
            logger (logging.Logger, optional): The logger instance for all output.
        """
        self.logger = logger or logging.getLogger(__name__)
        self.user_config = config or {}
        self.settings = _consolidate_settings(self.user_config)

        # Fail on a misspelled curve name now instead of at the first sample.
        resolve_curve(self.settings['smoothing_curve'])
        self.curve = self.settings['smoothing_curve']

        self._values = _as_lattice(values)

    @classmethod
    def from_values(cls, values, config: dict = None, logger: logging.Logger = None) -> "Grid":
        """Builds a grid around previously saved or hand-written lattice values."""
        grid = cls(values, config=config, logger=logger)
        grid.logger.debug(f"Grid loaded from raw values ({grid.width}x{grid.height}).")
        return grid

    @property
    def width(self) -> int:
        return self._values.shape[0]

    @property
    def height(self) -> int:
        return self._values.shape[1]

    @property
    def values(self) -> np.ndarray:
        return self._values

    @values.setter
    def values(self, values):
        self.load_values(values)

    def load_values(self, values) -> None:
        """
        Replaces the whole lattice. The new lattice is validated before it
        is swapped in, so a rejected load leaves the grid unchanged. Width and
        height follow the shape of the new lattice.
        """
        lattice = _as_lattice(values)
        self._values = lattice
        self.logger.debug(f"Lattice replaced ({self.width}x{self.height}).")

    def __repr__(self) -> str:
        return f"Grid(width={self.width}, height={self.height}, curve={self.curve!r})"

def create(width=None, height=None, config: dict = None,
           logger: logging.Logger = None, rand=None) -> Grid:
    """
    Creates a width x height grid filled with independent random values.

    Each cell receives exactly one draw. With `rand` supplied, it is called
    once per cell, column by column. Otherwise a NumPy generator seeded from
    the 'seed' setting draws uniform values in [0, 1).

    Raises:
        InvalidDimension: If width is missing, zero, negative or non-integral,
            or an explicit height is.
    """
    logger = logger or logging.getLogger(__name__)
    width = as_dimension("width", width, logger)
    height = width if height is None else as_dimension("height", height, logger)
    settings = _consolidate_settings(config)

    if rand is not None:
        logger.debug("Drawing lattice values from the injected random source.")
        values = [[rand() for _ in range(height)] for _ in range(width)]
    else:
        logger.debug(f"Drawing lattice values from a NumPy generator (seed={settings['seed']}).")
        rng = np.random.default_rng(settings['seed'])
        values = rng.random((width, height))

    grid = Grid(values, config=config, logger=logger)
    logger.info(f"Value noise grid created: {grid.width}x{grid.height} cells, curve '{grid.curve}'")
    return grid
