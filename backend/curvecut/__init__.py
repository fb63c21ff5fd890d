"""CurveCut — corner detection and piecewise-linear segmentation of sampled 3D curves."""

__version__ = "0.1.0"
