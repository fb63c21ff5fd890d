"""Detect corners along a sampled 3D curve. See curvecut.cli for usage."""

import sys

from curvecut.cli import main

if __name__ == "__main__":
    sys.exit(main())
