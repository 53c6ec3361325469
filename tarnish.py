"""
Tarnish - apply one image filter to an image from the command line.

    python tarnish.py photo.png out.png huerotate 90
"""

import sys

from Tarnish_Libs.cli import main


if __name__ == "__main__":
    sys.exit(main())
