"""
Pytest configuration and shared fixtures for Tarnish tests.

This module provides shared test fixtures and configuration
used across multiple test modules.
"""

import numpy as np
import pytest
from PIL import Image


@pytest.fixture
def sample_rgba_colors():
    """
    Provide a list of sample RGBA color tuples for testing.

    Returns:
        List of (R, G, B, A) tuples with common test colors
    """
    return [
        (255, 0, 0, 255),    # Red
        (0, 255, 0, 255),    # Green
        (0, 0, 255, 255),    # Blue
        (255, 255, 255, 255),  # White
        (0, 0, 0, 255),      # Black
        (128, 128, 128, 255),  # Gray
    ]


@pytest.fixture
def gradient_image():
    """
    Provide a 16x8 RGBA image where every pixel has a distinct color.

    Returns:
        PIL Image in RGBA mode
    """
    image = Image.new("RGBA", (16, 8))
    pixels = image.load()
    for y in range(8):
        for x in range(16):
            pixels[x, y] = (x * 16, y * 32, (x + y) * 8, 255 - x)
    return image


@pytest.fixture
def palette_file(tmp_path):
    """
    Provide a factory writing a PNG palette image made of the given colors.

    Returns:
        Callable taking a list of RGBA tuples and returning the file path
    """
    def _make(colors, name="palette.png"):
        image = Image.new("RGBA", (len(colors), 1))
        image.putdata(list(colors))
        path = tmp_path / name
        image.save(path)
        return path

    return _make


@pytest.fixture
def gray16_file(tmp_path):
    """
    Provide a 3x4 16-bit grayscale PNG whose samples step by 5000.

    Returns:
        Path to the saved image
    """
    samples = (np.arange(12, dtype=np.uint16) * 5000).reshape(4, 3)
    path = tmp_path / "gray16.png"
    Image.fromarray(samples).save(path)
    return path
