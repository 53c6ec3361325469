"""
Performance demonstration for the two quadratic filters.

Mosaic costs O(pixels x seed points) and pallettize costs
O(pixels x palette colors). Run this script to see how both scale on
your system.
"""

import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

import time

import numpy as np
from PIL import Image

from Tarnish_Libs.ImageEditingLib.mosaic_filter import apply_mosaic
from Tarnish_Libs.ImageEditingLib.palette_filter import apply_palettize


def make_gradient(size):
    """Create a size x size RGBA gradient test image."""
    ramp = np.linspace(0, 255, size, dtype=np.uint8)
    pixels = np.zeros((size, size, 4), dtype=np.uint8)
    pixels[..., 0] = ramp[None, :]
    pixels[..., 1] = ramp[:, None]
    pixels[..., 2] = 128
    pixels[..., 3] = 255
    return Image.fromarray(pixels)


def time_call(func, iterations=3):
    """Average wall time of func() over iterations, excluding the first run."""
    times = []
    for _ in range(iterations):
        start = time.time()
        func()
        times.append(time.time() - start)
    return sum(times[1:]) / len(times[1:])


def benchmark_mosaic(size, points):
    img = make_gradient(size)
    rng = np.random.default_rng(0)
    avg = time_call(lambda: apply_mosaic(img, points, rng=rng))
    print(f"  mosaic      {size:4d}x{size:<4d} points={points:<5d} {avg:6.3f}s")
    return avg


def benchmark_palettize(size, colors):
    img = make_gradient(size)
    rng = np.random.default_rng(0)
    palette = [
        (int(r), int(g), int(b), 255)
        for r, g, b in rng.integers(0, 256, size=(colors, 3))
    ]
    avg = time_call(lambda: apply_palettize(img, palette))
    print(f"  pallettize  {size:4d}x{size:<4d} colors={colors:<5d} {avg:6.3f}s")
    return avg


def main():
    """Run performance benchmarks."""
    print("=" * 60)
    print("Quadratic Filter Performance Demonstration")
    print("=" * 60)

    test_cases = [
        (200, 16),
        (500, 64),
        (1000, 256),
    ]

    for size, count in test_cases:
        try:
            benchmark_mosaic(size, count)
            benchmark_palettize(size, count)
        except KeyboardInterrupt:
            print("\n\nBenchmark interrupted by user")
            break

    print("=" * 60)


if __name__ == "__main__":
    main()
