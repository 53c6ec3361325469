"""
Tarnish_Libs - Tarnish Library Modules

This package contains core functionality for Tarnish, a command-line
image modification program, organized into specialized sub-packages:

- ImageEditingLib: Pixel algorithms, color decoding, image models and I/O
- FiltersLib: Argument-parsing filter entry points and the filter registry
"""

__version__ = "0.1.0"
