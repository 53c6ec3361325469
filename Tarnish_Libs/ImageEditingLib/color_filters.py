"""
Per-pixel color filter operations.

Provides the color-space filters that rewrite each pixel independently:
- Hue rotation: Rotate hue in HLS space, keeping lightness and saturation
- Channel remap: Blend three basis colors weighted by the pixel's R, G, B
- Colorize: Tone-map every pixel onto a black -> target -> white gradient

All operations work on an RGBA copy of the input and preserve alpha.

Example:
    >>> from PIL import Image
    >>> img = Image.open("photo.png")
    >>>
    >>> rotated = apply_hue_rotate(img, 120)
    >>> swapped = apply_channel_remap(img, (0, 0, 255), (0, 255, 0), (255, 0, 0))
    >>> sepia = apply_colorize(img, (112, 66, 20))
"""

from colorsys import hls_to_rgb, rgb_to_hls
from typing import Any, Callable, Dict, Sequence

from Tarnish_Libs.ImageEditingLib.image_editing_ops import to_working_mode
from Tarnish_Libs.ImageEditingLib.image_models import RgbaColor, RgbColor
from Tarnish_Libs.constants import (
    CHANNEL_MAX,
    LUMA_BLUE,
    LUMA_GREEN,
    LUMA_RED,
    WORKING_MODE,
)


def _clamp_byte(value: float) -> int:
    return int(max(0, min(CHANNEL_MAX, round(value))))


def _map_pixels(image: Any, transform: Callable[[RgbaColor], RgbaColor]) -> Any:
    """
    Apply a color transform to every pixel of an RGBA copy of the image.

    Pixels are read from the untouched source and written to the copy.
    Results are cached per distinct color since most images repeat colors.
    """
    image = to_working_mode(image)

    modified = image.copy()
    source_pixels = image.load()
    modified_pixels = modified.load()
    cache: Dict[RgbaColor, RgbaColor] = {}

    width, height = image.size
    for y in range(height):
        for x in range(width):
            original = source_pixels[x, y]
            mapped = cache.get(original)
            if mapped is None:
                mapped = transform(original)
                cache[original] = mapped
            modified_pixels[x, y] = mapped

    return modified


# ============================================================================
# Hue Rotation
# ============================================================================

def rotate_hue(color: RgbaColor, degrees: int) -> RgbaColor:
    """Rotate the hue of one RGBA color by a number of degrees."""
    r, g, b, a = color
    hue, lightness, saturation = rgb_to_hls(r / 255.0, g / 255.0, b / 255.0)
    hue = (hue + (degrees % 360) / 360.0) % 1.0
    rr, gg, bb = hls_to_rgb(hue, lightness, saturation)
    return (_clamp_byte(rr * 255), _clamp_byte(gg * 255), _clamp_byte(bb * 255), a)


def apply_hue_rotate(image: Any, degrees: int) -> Any:
    """
    Rotate the hue of every pixel.

    Args:
        image: PIL Image
        degrees: Signed rotation in degrees, taken modulo 360

    Returns:
        New RGBA PIL Image of the same size
    """
    degrees = int(degrees) % 360
    if degrees == 0:
        if image.mode == WORKING_MODE:
            return image.copy()
        return to_working_mode(image)

    return _map_pixels(image, lambda color: rotate_hue(color, degrees))


# ============================================================================
# Channel Remap
# ============================================================================

def remap_color(
    color: RgbaColor,
    red_basis: RgbColor,
    green_basis: RgbColor,
    blue_basis: RgbColor,
) -> RgbaColor:
    """
    Recombine a color through three basis colors.

    Each output channel is the sum of the basis channels weighted by the
    normalized red, green and blue of the input. Sums above 255 saturate.
    """
    r, g, b, a = color
    nr, ng, nb = r / 255.0, g / 255.0, b / 255.0
    return (
        _clamp_byte(red_basis[0] * nr + green_basis[0] * ng + blue_basis[0] * nb),
        _clamp_byte(red_basis[1] * nr + green_basis[1] * ng + blue_basis[1] * nb),
        _clamp_byte(red_basis[2] * nr + green_basis[2] * ng + blue_basis[2] * nb),
        a,
    )


def apply_channel_remap(
    image: Any,
    red_basis: RgbColor,
    green_basis: RgbColor,
    blue_basis: RgbColor,
) -> Any:
    """
    Replace each pixel with a blend of three basis colors.

    Bases (FF0000, 00FF00, 0000FF) form the identity.

    Args:
        image: PIL Image
        red_basis: Color contributed by a fully red input channel
        green_basis: Color contributed by a fully green input channel
        blue_basis: Color contributed by a fully blue input channel

    Returns:
        New RGBA PIL Image of the same size
    """
    return _map_pixels(
        image,
        lambda color: remap_color(color, red_basis, green_basis, blue_basis),
    )


# ============================================================================
# Colorize
# ============================================================================

def luminance(color: Sequence[float]) -> float:
    """Relative luminance of an RGB(A) color on the 0-255 scale."""
    return LUMA_RED * color[0] + LUMA_GREEN * color[1] + LUMA_BLUE * color[2]


def colorize_color(color: RgbaColor, target: RgbColor, target_luminance: float) -> RgbaColor:
    """
    Map one color onto the black -> target -> white gradient.

    Pixels darker than the target scale the target toward black, brighter
    pixels blend the target toward white, and pixels at exactly the target
    luminance take the target color.
    """
    r, g, b, a = color
    pixel_luminance = luminance(color)

    if pixel_luminance < target_luminance and target_luminance > 0:
        scale = pixel_luminance / target_luminance
        channels = [channel * scale for channel in target]
    elif pixel_luminance > target_luminance and target_luminance < CHANNEL_MAX:
        distance_to_white = 1.0 - (CHANNEL_MAX - pixel_luminance) / (CHANNEL_MAX - target_luminance)
        channels = [channel + (CHANNEL_MAX - channel) * distance_to_white for channel in target]
    else:
        channels = list(target)

    return (_clamp_byte(channels[0]), _clamp_byte(channels[1]), _clamp_byte(channels[2]), a)


def apply_colorize(image: Any, target: RgbColor) -> Any:
    """
    Recolor an image toward a single target color, keeping relative luminance.

    Args:
        image: PIL Image
        target: Target color as three channel values (0-255)

    Returns:
        New RGBA PIL Image of the same size
    """
    target_luminance = luminance(target)
    return _map_pixels(
        image,
        lambda color: colorize_color(color, target, target_luminance),
    )
