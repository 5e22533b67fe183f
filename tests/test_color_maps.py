import numpy as np
import pytest

from scalar_noise import InvalidDimension, render
from scalar_noise import to_grayscale, to_image


def test_grayscale_spans_full_range():
    pixels = to_grayscale([[0.0, 0.5], [1.0, 0.25]])
    assert pixels.dtype == np.uint8
    assert pixels.tolist() == [[0, 128], [255, 64]]


def test_grayscale_clips_out_of_range_values():
    pixels = to_grayscale([-1.0, 2.0, 0.0], value_range=(-0.5, 1.5))
    assert pixels.tolist() == [0, 255, 64]


def test_grayscale_rejects_empty_range():
    with pytest.raises(ValueError):
        to_grayscale([0.5], value_range=(1.0, 1.0))


def test_image_is_indexed_by_x_then_y(fixture_grid):
    field = render(fixture_grid, 4, 6)
    image = to_image(field)
    pixels = to_grayscale(field)

    assert image.mode == "L"
    assert image.size == (4, 6)
    for x in range(4):
        for y in range(6):
            assert image.getpixel((x, y)) == pixels[x, y]


def test_image_requires_a_2d_field():
    with pytest.raises(InvalidDimension):
        to_image([0.1, 0.2, 0.3])
