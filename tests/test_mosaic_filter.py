"""
Tests for the mosaic filter operation.

Tests cover:
- Seed point generation bounds
- Nearest-seed search, including tie-breaking
- Single-seed mosaics
- Colors read from the pristine input
- Error handling
"""

import numpy as np
import pytest
from PIL import Image

from tests.helpers import pixel_values

from Tarnish_Libs.ImageEditingLib.mosaic_filter import (
    apply_mosaic,
    generate_seed_points,
    nearest_seed_indices,
)


class TestGenerateSeedPoints:
    """Tests for generate_seed_points function."""

    def test_points_within_bounds(self):
        rng = np.random.default_rng(1)
        xs, ys = generate_seed_points(13, 7, 500, rng)

        assert len(xs) == 500
        assert len(ys) == 500
        assert xs.min() >= 0 and xs.max() < 13
        assert ys.min() >= 0 and ys.max() < 7

    def test_same_seed_same_points(self):
        first = generate_seed_points(50, 50, 10, np.random.default_rng(7))
        second = generate_seed_points(50, 50, 10, np.random.default_rng(7))

        assert np.array_equal(first[0], second[0])
        assert np.array_equal(first[1], second[1])


class TestNearestSeedIndices:
    """Tests for nearest_seed_indices function."""

    def test_two_seeds_on_a_row(self):
        indices = nearest_seed_indices(4, 1, np.array([0, 3]), np.array([0, 0]))
        assert indices.tolist() == [[0, 0, 1, 1]]

    def test_tie_goes_to_first_seed(self):
        """A pixel equidistant from two seeds takes the first one."""
        indices = nearest_seed_indices(3, 1, np.array([0, 2]), np.array([0, 0]))
        assert indices.tolist() == [[0, 0, 1]]

    def test_duplicate_seeds(self):
        indices = nearest_seed_indices(2, 2, np.array([1, 1]), np.array([1, 1]))
        assert indices.tolist() == [[0, 0], [0, 0]]

    def test_vertical_split(self):
        indices = nearest_seed_indices(1, 5, np.array([0, 0]), np.array([0, 4]))
        assert indices.tolist() == [[0], [0], [0], [1], [1]]


class TestApplyMosaic:
    """Tests for apply_mosaic function."""

    def test_single_seed_fills_image(self, gradient_image):
        """With one seed, every pixel takes the color under that seed."""
        xs, ys = generate_seed_points(16, 8, 1, np.random.default_rng(3))
        expected = gradient_image.getpixel((int(xs[0]), int(ys[0])))

        result = apply_mosaic(gradient_image, 1, rng=np.random.default_rng(3))

        assert set(pixel_values(result)) == {expected}

    def test_single_seed_unseeded(self, gradient_image):
        result = apply_mosaic(gradient_image, 1)
        colors = set(pixel_values(result))

        assert len(colors) == 1
        assert colors.pop() in set(pixel_values(gradient_image))

    def test_pixels_take_nearest_seed_color(self, gradient_image):
        """Every pixel carries the original color of its nearest seed."""
        xs, ys = generate_seed_points(16, 8, 6, np.random.default_rng(11))
        indices = nearest_seed_indices(16, 8, xs, ys)

        result = apply_mosaic(gradient_image, 6, rng=np.random.default_rng(11))

        for y in range(8):
            for x in range(16):
                seed = indices[y, x]
                expected = gradient_image.getpixel((int(xs[seed]), int(ys[seed])))
                assert result.getpixel((x, y)) == expected

    def test_more_points_than_pixels(self, gradient_image):
        result = apply_mosaic(gradient_image, 1000, rng=np.random.default_rng(5))
        assert result.size == gradient_image.size
        assert set(pixel_values(result)) <= set(pixel_values(gradient_image))

    def test_preserves_size(self):
        image = Image.new("RGB", (31, 17), (10, 20, 30))
        result = apply_mosaic(image, 4)
        assert result.size == (31, 17)
        assert result.mode == "RGBA"

    def test_input_not_modified(self, gradient_image):
        before = pixel_values(gradient_image)
        apply_mosaic(gradient_image, 5)
        assert pixel_values(gradient_image) == before

    def test_alpha_copied_from_seed(self):
        image = Image.new("RGBA", (4, 4), (1, 2, 3, 77))
        result = apply_mosaic(image, 3)
        assert set(pixel_values(result)) == {(1, 2, 3, 77)}

    @pytest.mark.parametrize("count", [0, -1])
    def test_rejects_non_positive_counts(self, gradient_image, count):
        with pytest.raises(ValueError):
            apply_mosaic(gradient_image, count)
