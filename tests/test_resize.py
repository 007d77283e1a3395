import numpy as np
import pytest
from PIL import Image

from asciiart.errors import InvalidDimension
from asciiart.resize import resize_image
from asciiart.sampling import colour_grid, reshape_rgb


def test_resize_exact_dimensions():
    img = Image.new("RGB", (100, 60), (10, 20, 30))
    resized = resize_image(img, 7, 13)
    assert resized.size == (7, 13)


def test_resize_stretches_without_aspect_correction():
    img = Image.new("RGB", (10, 10), (10, 20, 30))
    assert resize_image(img, 40, 2).size == (40, 2)


def test_resize_does_not_mutate_source():
    img = Image.new("RGB", (20, 20), (1, 2, 3))
    resize_image(img, 5, 5)
    assert img.size == (20, 20)


def test_same_size_is_identity():
    rng = np.random.default_rng(42)
    arr = rng.integers(0, 256, size=(12, 9, 3), dtype=np.uint8)
    img = Image.fromarray(arr, "RGB")
    np.testing.assert_array_equal(colour_grid(resize_image(img, 9, 12)), arr)


def test_downscale_averages_area():
    img = Image.new("RGB", (2, 1))
    img.putpixel((0, 0), (0, 0, 0))
    img.putpixel((1, 0), (200, 100, 50))
    (pixel,) = colour_grid(resize_image(img, 1, 1)).reshape(-1, 3)
    assert tuple(pixel) == (100, 50, 25)


@pytest.mark.parametrize("width, height", [(0, 10), (10, 0), (-1, 5), (0, 0)])
def test_non_positive_dimensions_rejected(width, height):
    img = Image.new("RGB", (10, 10))
    with pytest.raises(InvalidDimension):
        resize_image(img, width, height)


def test_non_rgb_modes_converted():
    img = Image.new("L", (4, 4), 77)
    resized = resize_image(img, 2, 2)
    assert resized.mode == "RGB"
    np.testing.assert_array_equal(colour_grid(resized), np.full((2, 2, 3), 77))


def test_rgba_alpha_discarded():
    img = Image.new("RGBA", (3, 3), (10, 20, 30, 0))
    np.testing.assert_array_equal(colour_grid(resize_image(img, 3, 3)), np.full((3, 3, 3), (10, 20, 30)))


def test_colour_grid_is_row_major():
    img = Image.new("RGB", (3, 2))
    img.putpixel((2, 0), (1, 2, 3))
    img.putpixel((0, 1), (4, 5, 6))
    grid = colour_grid(img)
    assert grid.shape == (2, 3, 3)
    assert grid.dtype == np.uint8
    assert tuple(grid[0, 2]) == (1, 2, 3)
    assert tuple(grid[1, 0]) == (4, 5, 6)


def test_reshape_rgb():
    values = [(0, 0, 0), (1, 1, 1), (2, 2, 2), (3, 3, 3), (4, 4, 4), (5, 5, 5)]
    grid = reshape_rgb(values, 3, 2)
    assert grid.shape == (2, 3, 3)
    assert tuple(grid[1, 0]) == (3, 3, 3)


def test_reshape_rgb_wrong_length():
    with pytest.raises(InvalidDimension):
        reshape_rgb([(0, 0, 0)] * 5, 3, 2)


def test_numpy_integer_dimensions_accepted():
    img = Image.new("RGB", (10, 10))
    assert resize_image(img, np.int64(5), np.int32(3)).size == (5, 3)


@pytest.mark.parametrize("width, height", [(True, 5), (5, True), (False, 5)])
def test_bool_dimensions_rejected(width, height):
    img = Image.new("RGB", (10, 10))
    with pytest.raises(InvalidDimension):
        resize_image(img, width, height)


def test_float_dimensions_rejected():
    with pytest.raises(InvalidDimension):
        resize_image(Image.new("RGB", (10, 10)), 5.0, 5)
