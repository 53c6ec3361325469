"""Shared helpers for the test modules."""

import numpy as np


def pixel_values(image):
    """Row-major list of an image's pixels, as tuples for multi-band modes."""
    samples = np.asarray(image)
    if samples.ndim == 2:
        return [int(value) for value in samples.reshape(-1)]
    bands = samples.shape[2]
    return [tuple(int(c) for c in pixel) for pixel in samples.reshape(-1, bands)]
