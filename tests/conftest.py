import logging

import numpy as np
import pytest

from scalar_noise import Grid

# A 2x3 lattice of dyadic values. Sampling it at quarter-cell coordinates
# only ever needs exact binary fractions, so rendered output can be compared
# with == against hand-captured references.
FIXTURE_LATTICE = [
    [0.0, 0.5, 1.0],
    [0.25, 0.75, 0.125],
]

# The fixture lattice rendered at 4x in both axes (8x12 canvas, indexed [x][y]).
# Quarter-cell offsets put the cubic curve at 5/32, 1/2 and 27/32, so any
# change of smoothing curve shows up here.
SCALED_REFERENCE = [
    [0.0, 0.078125, 0.25, 0.421875, 0.5, 0.578125,
     0.75, 0.921875, 1.0, 0.84375, 0.5, 0.15625],
    [0.0390625, 0.1171875, 0.2890625, 0.4609375, 0.5390625, 0.5897216796875,
     0.701171875, 0.8126220703125, 0.86328125, 0.7344970703125, 0.451171875, 0.1678466796875],
    [0.125, 0.203125, 0.375, 0.546875, 0.625, 0.615234375,
     0.59375, 0.572265625, 0.5625, 0.494140625, 0.34375, 0.193359375],
    [0.2109375, 0.2890625, 0.4609375, 0.6328125, 0.7109375, 0.6407470703125,
     0.486328125, 0.3319091796875, 0.26171875, 0.2537841796875, 0.236328125, 0.2188720703125],
    [0.25, 0.328125, 0.5, 0.671875, 0.75, 0.65234375,
     0.4375, 0.22265625, 0.125, 0.14453125, 0.1875, 0.23046875],
    [0.2109375, 0.2890625, 0.4609375, 0.6328125, 0.7109375, 0.6407470703125,
     0.486328125, 0.3319091796875, 0.26171875, 0.2537841796875, 0.236328125, 0.2188720703125],
    [0.125, 0.203125, 0.375, 0.546875, 0.625, 0.615234375,
     0.59375, 0.572265625, 0.5625, 0.494140625, 0.34375, 0.193359375],
    [0.0390625, 0.1171875, 0.2890625, 0.4609375, 0.5390625, 0.5897216796875,
     0.701171875, 0.8126220703125, 0.86328125, 0.7344970703125, 0.451171875, 0.1678466796875],
]


@pytest.fixture
def logger():
    return logging.getLogger("scalar_noise.tests")


@pytest.fixture
def fixture_grid(logger):
    return Grid.from_values(FIXTURE_LATTICE, logger=logger)


@pytest.fixture
def random_grid(logger):
    rng = np.random.default_rng(2024)
    return Grid.from_values(rng.random((7, 5)), logger=logger)


@pytest.fixture
def fixture_lattice():
    return [list(column) for column in FIXTURE_LATTICE]


@pytest.fixture
def scaled_reference():
    return np.array(SCALED_REFERENCE)
