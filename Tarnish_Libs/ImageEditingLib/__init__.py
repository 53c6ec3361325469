"""
ImageEditingLib - Core image editing functionality

This module provides the pixel algorithms, color decoding, result models
and image I/O used by the Tarnish filters.
"""

from Tarnish_Libs.ImageEditingLib.image_models import (
    ArgumentError,
    FilterFunction,
    FilterResult,
    OperationError,
    RgbaColor,
    RgbColor,
    Success,
)
from Tarnish_Libs.ImageEditingLib.color_codec import (
    InvalidColorFormat,
    decode_hex_color,
    encode_hex_color,
)
from Tarnish_Libs.ImageEditingLib.color_filters import (
    apply_channel_remap,
    apply_colorize,
    apply_hue_rotate,
    luminance,
)
from Tarnish_Libs.ImageEditingLib.mosaic_filter import apply_mosaic
from Tarnish_Libs.ImageEditingLib.palette_filter import apply_palettize, extract_palette
from Tarnish_Libs.ImageEditingLib.image_editing_ops import (
    ImageDecodeError,
    ImageLoadError,
    ImageOpenError,
    ImageSaveError,
    load_image,
    save_image,
    to_working_mode,
)

__all__ = [
    "ArgumentError",
    "FilterFunction",
    "FilterResult",
    "OperationError",
    "RgbaColor",
    "RgbColor",
    "Success",
    "InvalidColorFormat",
    "decode_hex_color",
    "encode_hex_color",
    "apply_channel_remap",
    "apply_colorize",
    "apply_hue_rotate",
    "luminance",
    "apply_mosaic",
    "apply_palettize",
    "extract_palette",
    "ImageDecodeError",
    "ImageLoadError",
    "ImageOpenError",
    "ImageSaveError",
    "load_image",
    "save_image",
    "to_working_mode",
]
