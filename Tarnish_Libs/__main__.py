"""Allow `python -m Tarnish_Libs`."""

import sys

from Tarnish_Libs.cli import main

sys.exit(main())
