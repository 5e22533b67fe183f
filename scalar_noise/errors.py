# scalar_noise/errors.py

"""Exceptions raised by the scalar_noise package."""


class ScalarNoiseError(Exception):
    """Base class for every error raised by this package."""


class InvalidDimension(ScalarNoiseError, ValueError):
    """A width, height or lattice shape is missing, non-integral or not positive."""


class InvalidLattice(ScalarNoiseError, ValueError):
    """A lattice holds non-numeric or non-finite entries."""


class UnknownCurve(ScalarNoiseError, ValueError):
    """A smoothing curve name is not registered."""
